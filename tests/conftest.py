import struct

import pytest


def make_header(image_type=2, width=1, height=1, pixel_depth=24, descriptor=0x20,
                id_length=0, color_map_type=0, color_map_length=0, color_map_entry_size=0,
                color_map_first=0):
    return struct.pack(
        '<BBBHHBHHHHBB',
        id_length, color_map_type, image_type,
        color_map_first, color_map_length, color_map_entry_size,
        0, 0, width, height, pixel_depth, descriptor,
    )


@pytest.fixture
def gradient():
    """A 4x3 image with every pixel distinct, as (pixels, width, height)."""
    width, height = 4, 3
    pixels = [(x * 60, y * 100, (x + y) * 20) for y in range(height) for x in range(width)]
    return pixels, width, height
