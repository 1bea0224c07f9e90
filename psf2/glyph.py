"""
Glyph - Rows of a Glyph Bitmap
==============================
Iterates the rows of one glyph, from the top or from the bottom.

A glyph is ``height`` rows of ``width`` pixels, each row padded to a whole
number of bytes. Rows are taken off either end of the remaining byte span,
so front and back steps never overlap.
"""

from .bits import bytes_per_row
from .row import GlyphRow


class Glyph:
    """
    Iterator over each row of a glyph.

    Attributes:
        data: Bytes of the rows not yet consumed
        width: Pixel width of each row
    """

    __slots__ = ("_data", "_width", "_stride")

    def __init__(self, data, width: int):
        """
        Args:
            data: The glyph's bitmap bytes (a memoryview slice of the font)
            width: Pixel width of each row
        """
        self._data = data
        self._width = width
        self._stride = bytes_per_row(width)

    @property
    def data(self):
        """
        The raw data defining the glyph, minus any rows already iterated.

        Initially ``Font.height`` rows of ``Font.width`` bits, each row
        padded to a whole number of bytes.
        """
        return self._data

    @property
    def width(self) -> int:
        """Number of pixels in each row."""
        return self._width

    def _exhausted(self) -> bool:
        return self._stride == 0 or len(self._data) < self._stride

    def __iter__(self):
        return self

    def __next__(self) -> GlyphRow:
        if self._exhausted():
            raise StopIteration

        row = self._data[:self._stride]
        self._data = self._data[self._stride:]
        return GlyphRow(row, self._width)

    def next_back(self) -> GlyphRow:
        """
        Take the bottom-most remaining row.

        Raises:
            StopIteration: If no rows remain
        """
        if self._exhausted():
            raise StopIteration

        split = len(self._data) - self._stride
        row = self._data[split:]
        self._data = self._data[:split]
        return GlyphRow(row, self._width)

    def __reversed__(self):
        while not self._exhausted():
            yield self.next_back()

    def __len__(self) -> int:
        if self._stride == 0:
            return 0
        return len(self._data) // self._stride

    def copy(self) -> "Glyph":
        """Independent iterator over the rows not yet consumed."""
        return Glyph(self._data, self._width)

    __copy__ = copy

    def __repr__(self) -> str:
        return f"Glyph(rows={len(self)}, width={self._width})"
