import struct

import pytest

from psf2 import PSF2_MAGIC, HEADER_SIZE


def build_font(glyphs, width, height, headersize=HEADER_SIZE, length=None,
               charsize=None, magic=PSF2_MAGIC, version=0, flags=0, trailer=b""):
    """Assemble a PSF2 buffer; header fields default to values matching glyphs."""
    if length is None:
        length = len(glyphs)
    if charsize is None:
        charsize = height * ((width + 7) // 8)
    header = magic + struct.pack("<7I", version, headersize, flags, length,
                                 charsize, height, width)
    padding = b"\x00" * (headersize - len(header))
    return header + padding + b"".join(glyphs) + trailer


def pack_row(pixels):
    """Pack booleans MSB-first, zero-padded to a byte boundary."""
    out = bytearray((len(pixels) + 7) // 8)
    for i, px in enumerate(pixels):
        if px:
            out[i >> 3] |= 0x80 >> (i & 7)
    return bytes(out)


@pytest.fixture
def font_data():
    return build_font


@pytest.fixture
def row_packer():
    return pack_row


@pytest.fixture
def tiny_font_data():
    """One 1x2 glyph: top pixel set, bottom clear. 34 bytes in total."""
    return build_font([bytes([0b10000000, 0b00000000])], width=1, height=2)


@pytest.fixture
def checker_font_data():
    """Four 10x3 glyphs; glyph n has byte value n+1 in every position."""
    glyphs = [bytes([n + 1]) * 6 for n in range(4)]
    return build_font(glyphs, width=10, height=3)
