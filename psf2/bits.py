"""
Bit Decoder
===========
Shared bit constants for 1-bit-per-pixel glyph rows.

Rows are packed most-significant-bit first: pixel 0 is the leftmost pixel
and lives in bit 7 of the first byte. Bits past the row width are padding.
"""

_BITS_PER_BYTE = 8

# Pixel position within a byte -> mask (MSB first)
BIT_MASKS = tuple(1 << (7 - i) for i in range(_BITS_PER_BYTE))


def bytes_per_row(width: int) -> int:
    """Number of bytes one row of `width` pixels occupies."""
    return (width + _BITS_PER_BYTE - 1) // _BITS_PER_BYTE


def pixel_at(data, index: int) -> bool:
    """
    Test a single pixel in a packed row.

    Args:
        data: Row bytes (any indexable sequence of byte values)
        index: Pixel position, 0 = leftmost

    Returns:
        True if the pixel is set
    """
    return data[index >> 3] & BIT_MASKS[index & 7] != 0
