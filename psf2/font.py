"""
PSF2 Font Format Parser
=======================
Validates and queries fonts in the PC Screen Font v2 format.

PSF2 is a fixed-size monochrome bitmap font format used by the Linux
console:
- Fixed-size header (32 bytes)
- Glyph bitmaps, all the same size, starting at ``headersize``
- Optional Unicode mapping table after the bitmaps (ignored here)

Format Layout:
    [Header: 32 bytes, possibly more up to headersize]
    [Bitmaps: length × charsize bytes]
    [Unicode table: optional]

Header Structure (8 × uint32, little-endian):
    - Magic: 72 B5 4A 86
    - Version: not validated
    - Header size: offset of the first bitmap
    - Flags: bit 0 = Unicode table present (not interpreted)
    - Length: number of glyphs
    - Charsize: bytes per glyph = height × ceil(width / 8)
    - Height: rows per glyph
    - Width: columns per glyph

The font works over anything that exposes the buffer protocol: bytes,
bytearray, memoryview slices or an mmap of a font file. Nothing is copied.

Usage:
    with open("ter-116n.psf", "rb") as f:
        font = Font(f.read())

    glyph = font.lookup_by_ascii("A")
    for row in glyph:
        print("".join("#" if px else " " for px in row))
"""

import logging
import struct
from typing import Iterator, Optional, Union

from .errors import BadMagic, UnexpectedEnd
from .glyph import Glyph

log = logging.getLogger(__name__)

# =============================================================================
# Format Constants
# =============================================================================

PSF2_MAGIC = b"\x72\xb5\x4a\x86"
HEADER_SIZE = 32
U32_MAX = 0xFFFFFFFF

_U32 = struct.Struct("<I")

# Header field offsets
_OFF_VERSION = 4
_OFF_HEADERSIZE = 8
_OFF_FLAGS = 12
_OFF_LENGTH = 16
_OFF_CHARSIZE = 20
_OFF_HEIGHT = 24
_OFF_WIDTH = 28

_BYTE_MAX = 0xFF


class Font:
    """
    A well-formed PSF2 font.

    The header is validated once, here; afterwards every accessor reads
    fixed offsets of the buffer on demand. The buffer is exposed read-only
    to everything derived from the font.

    Attributes:
        width: Columns per glyph
        height: Rows per glyph
        length: Number of glyphs
        charsize: Bytes per glyph bitmap
        headersize: Byte offset of the first glyph bitmap
    """

    __slots__ = ("_data",)

    def __init__(self, data):
        """
        Wrap and validate a PSF2 buffer.

        Args:
            data: Any object supporting the buffer protocol

        Raises:
            UnexpectedEnd: If the header or glyph table runs past the data
            BadMagic: If the data does not start with the PSF2 magic
            TypeError: If data does not support the buffer protocol
        """
        view = memoryview(data).cast("B").toreadonly()
        try:
            _validate(view)
        except Exception:
            view.release()
            raise
        self._data = view

    def _u32(self, offset: int) -> int:
        return _U32.unpack_from(self._data, offset)[0]

    # =========================================================================
    # Header
    # =========================================================================

    @property
    def version(self) -> int:
        return self._u32(_OFF_VERSION)

    @property
    def headersize(self) -> int:
        """Byte offset of the first glyph bitmap."""
        return self._u32(_OFF_HEADERSIZE)

    @property
    def flags(self) -> int:
        return self._u32(_OFF_FLAGS)

    @property
    def length(self) -> int:
        """Number of glyphs."""
        return self._u32(_OFF_LENGTH)

    @property
    def charsize(self) -> int:
        """Bytes per glyph bitmap."""
        return self._u32(_OFF_CHARSIZE)

    @property
    def height(self) -> int:
        """Number of rows in a glyph."""
        return self._u32(_OFF_HEIGHT)

    @property
    def width(self) -> int:
        """Number of columns in a glyph."""
        return self._u32(_OFF_WIDTH)

    # =========================================================================
    # Glyph Lookup
    # =========================================================================

    def lookup_by_ascii(self, code: Union[int, str]) -> Optional[Glyph]:
        """
        Get an iterator over the rows of the glyph for a byte code.

        Args:
            code: Character code 0-255, or a one-character string

        Returns:
            Glyph, or None if the font has no such glyph

        Raises:
            ValueError: If code is outside the byte range
        """
        if isinstance(code, str):
            code = ord(code)
        if not 0 <= code <= _BYTE_MAX:
            raise ValueError(f"character code out of byte range: {code}")
        return self.lookup_by_index(code)

    def lookup_by_index(self, index: int) -> Optional[Glyph]:
        """
        Get an iterator over the rows of glyph number `index`.

        Returns:
            Glyph, or None if index is outside the glyph table
        """
        if not 0 <= index < self.length:
            return None

        charsize = self.charsize
        offset = self.headersize + index * charsize
        end = offset + charsize
        if end > len(self._data):
            return None
        return Glyph(self._data[offset:end], self.width)

    def glyphs(self) -> Iterator[Glyph]:
        """Yield every glyph in table order."""
        for index in range(self.length):
            yield self.lookup_by_index(index)

    # =========================================================================
    # Lifetime
    # =========================================================================

    def close(self):
        """
        Release the font's view of the buffer.

        Glyph and row views already handed out hold their own references;
        drop them too before resizing a bytearray or closing an mmap.
        """
        self._data.release()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False

    def __repr__(self) -> str:
        try:
            return f"Font(length={self.length}, width={self.width}, height={self.height})"
        except ValueError:
            # Released by close()
            return "Font(closed)"


def _validate(view: memoryview):
    """Check the header and glyph table bounds of a candidate font."""
    if len(view) < HEADER_SIZE:
        log.debug("rejecting font: %d bytes is shorter than the header", len(view))
        raise UnexpectedEnd(f"font data is {len(view)} bytes, header needs {HEADER_SIZE}")

    if view[:4] != PSF2_MAGIC:
        log.debug("rejecting font: bad magic %s", view[:4].hex())
        raise BadMagic("missing PSF2 magic number")

    headersize = _U32.unpack_from(view, _OFF_HEADERSIZE)[0]
    length = _U32.unpack_from(view, _OFF_LENGTH)[0]
    charsize = _U32.unpack_from(view, _OFF_CHARSIZE)[0]

    glyphs_size = charsize * length
    if glyphs_size > U32_MAX:
        log.debug("rejecting font: glyph table size overflows (%d * %d)", charsize, length)
        raise UnexpectedEnd("glyph table size overflows 32 bits")

    glyphs_end = headersize + glyphs_size
    if glyphs_end > U32_MAX:
        log.debug("rejecting font: glyph table end overflows (%d + %d)", headersize, glyphs_size)
        raise UnexpectedEnd("glyph table end overflows 32 bits")

    if glyphs_end > len(view):
        log.debug("rejecting font: glyph table ends at %d, data is %d bytes",
                  glyphs_end, len(view))
        raise UnexpectedEnd(f"glyph table ends at {glyphs_end}, data is {len(view)} bytes")
