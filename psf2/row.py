"""
GlyphRow - Pixels of a Single Glyph Row
=======================================
Iterates the pixels of one row of a glyph bitmap as booleans.

The row keeps one half-open window ``[bit, width)`` over its pixels:
forward steps advance ``bit``, backward steps shrink ``width``. Mixing
the two drains the row exactly once, and ``len()`` is always the number
of pixels still obtainable.

Usage:
    for row in glyph:
        line = "".join("#" if px else "." for px in row)
"""

from .bits import pixel_at


class GlyphRow:
    """
    Iterator over each column within a single row of a glyph.

    Yields whether the pixel at each position should be filled.

    Attributes:
        data: The full row bytes, unaffected by iteration
    """

    __slots__ = ("_data", "_bit", "_width")

    def __init__(self, data, width: int, bit: int = 0):
        """
        Args:
            data: The row's bytes, ``ceil(width / 8)`` of them
            width: Number of meaningful pixels in the row
            bit: Index of the first pixel still to be produced
        """
        self._data = data
        self._width = width
        self._bit = bit

    @property
    def data(self):
        """
        A bitfield defining the filled pixels in this row of the glyph.

        The most significant bit corresponds to the leftmost pixel. Only the
        first ``width`` bits are meaningful. Unaffected by iteration.
        """
        return self._data

    # =========================================================================
    # Iteration
    # =========================================================================

    def __iter__(self):
        return self

    def __next__(self) -> bool:
        if self._bit >= self._width:
            raise StopIteration

        result = pixel_at(self._data, self._bit)
        self._bit += 1
        return result

    def next_back(self) -> bool:
        """
        Take the rightmost remaining pixel.

        Raises:
            StopIteration: If no pixels remain
        """
        if self._bit >= self._width:
            raise StopIteration

        bit = self._width - 1
        result = pixel_at(self._data, bit)
        self._width = bit
        return result

    def __reversed__(self):
        # Drains this row from the right; shares the window with __next__
        while self._bit < self._width:
            yield self.next_back()

    def __len__(self) -> int:
        return self._width - self._bit

    # =========================================================================
    # Copying
    # =========================================================================

    def copy(self) -> "GlyphRow":
        """Independent iterator starting at the current position."""
        return GlyphRow(self._data, self._width, self._bit)

    __copy__ = copy

    def __repr__(self) -> str:
        return f"GlyphRow(data={bytes(self._data)!r}, bit={self._bit}, width={self._width})"
