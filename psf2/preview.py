"""
Text preview of glyph bitmaps, for debugging fonts in a terminal.
"""

from .glyph import Glyph


def render_text(glyph: Glyph, on: str = "█", off: str = "·") -> str:
    """
    Render the remaining rows of a glyph as ASCII art.

    The glyph passed in is not consumed.

    Args:
        glyph: Glyph to render
        on: Character for a set pixel
        off: Character for a clear pixel

    Returns:
        One line per row, joined with newlines
    """
    lines = []
    for row in glyph.copy():
        lines.append("".join(on if px else off for px in row))
    return "\n".join(lines)
