import pytest

from psf2.bits import BIT_MASKS, bytes_per_row, pixel_at


def test_masks_are_msb_first():
    assert BIT_MASKS == (128, 64, 32, 16, 8, 4, 2, 1)


@pytest.mark.parametrize("width, expected", [
    (0, 0), (1, 1), (7, 1), (8, 1), (9, 2), (16, 2), (17, 3),
])
def test_bytes_per_row(width, expected):
    assert bytes_per_row(width) == expected


def test_pixel_at_reads_across_bytes():
    data = bytes([0b10000001, 0b01000000])
    assert [pixel_at(data, i) for i in range(10)] == [
        True, False, False, False, False, False, False, True, False, True,
    ]
