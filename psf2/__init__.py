"""
PSF2 Font Decoder
=================
Reads PC Screen Font v2 bitmap fonts from in-memory or memory-mapped data.

Modules:
    font: Header validation and glyph lookup
    glyph: Iterator over the rows of a glyph
    row: Iterator over the pixels of a row
    bits: Bit masks for MSB-first packed rows
    preview: Text rendering of glyphs for debugging

Quick Start
-----------
    from psf2 import Font

    font = Font(data)
    for row in font.lookup_by_ascii("A"):
        print("".join("#" if px else " " for px in row))
"""

import logging

from .errors import ParseError, UnexpectedEnd, BadMagic
from .font import Font, PSF2_MAGIC, HEADER_SIZE
from .glyph import Glyph
from .row import GlyphRow
from .preview import render_text

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Font",
    "Glyph",
    "GlyphRow",
    "render_text",
    # Errors
    "ParseError",
    "UnexpectedEnd",
    "BadMagic",
    # Constants
    "PSF2_MAGIC",
    "HEADER_SIZE",
]

__version__ = "1.0.0"
