# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TGA (Targa) header model

This module reads and writes the fixed 18-byte TGA header for the
24-bit true-colour subset of the format (image types 2 and 10).

Header layout (little-endian):
    0      ID length
    1      Color map type
    2      Image type
    3-7    Color map specification (first entry, length, entry size)
    8-11   X/Y origin
    12-13  Width
    14-15  Height
    16     Pixel depth
    17     Image descriptor (bit 5 set = top-left origin)

Copyright 2025 DNAi inc.
"""

import struct
from dataclasses import dataclass
from enum import IntEnum

from tgacodec.exceptions import InvalidDimensions, MalformedHeader, TGAWriteError

HEADER_LENGTH = 18
PIXEL_DEPTH = 24
BYTES_PER_PIXEL = 3
MAX_DIMENSION = 0xFFFF

# Image descriptor bits
DESCRIPTOR_TOP_LEFT = 0x20

_HEADER_STRUCT = struct.Struct('<BBBHHBHHHHBB')


class ImageType(IntEnum):
    """Image types supported by the codec."""
    RAW_RGB = 2  # Uncompressed true-colour
    RLE_RGB = 10  # Run-length encoded true-colour


@dataclass(frozen=True)
class TGAHeader:
    """Parsed TGA header for a 24-bit true-colour image."""
    image_type: ImageType
    width: int
    height: int
    pixel_depth: int = PIXEL_DEPTH
    descriptor: int = DESCRIPTOR_TOP_LEFT
    id_length: int = 0
    color_map_type: int = 0
    color_map_first: int = 0
    color_map_length: int = 0
    color_map_entry_size: int = 0

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def raw_size(self) -> int:
        """Size of the uncompressed pixel data in bytes."""
        return self.pixel_count * BYTES_PER_PIXEL

    @property
    def top_left(self) -> bool:
        return bool(self.descriptor & DESCRIPTOR_TOP_LEFT)

    @property
    def color_map_size(self) -> int:
        """Size in bytes of the (unused) colour map that precedes the pixels."""
        if not self.color_map_type:
            return 0
        return self.color_map_length * ((self.color_map_entry_size + 7) // 8)

    @property
    def image_data_offset(self) -> int:
        """
        Number of bytes between the end of the header and the first pixel.

        The image ID field comes first, then the colour map.
        """
        return self.id_length + self.color_map_size


def parse_header(data: bytes) -> TGAHeader:
    """
    Parse the 18-byte TGA header at the start of data.

    Args:
        data: TGA file bytes (only the first 18 are read)

    Returns:
        TGAHeader

    Raises:
        MalformedHeader: If the header is short, or the image is not
            24-bit raw or RLE true-colour
    """
    if len(data) < HEADER_LENGTH:
        raise MalformedHeader(
            f"Invalid TGA header: need {HEADER_LENGTH} bytes, got {len(data)}"
        )

    (id_length, color_map_type, image_type,
     color_map_first, color_map_length, color_map_entry_size,
     _x_origin, _y_origin, width, height,
     pixel_depth, descriptor) = _HEADER_STRUCT.unpack_from(data, 0)

    try:
        image_type = ImageType(image_type)
    except ValueError:
        raise MalformedHeader(
            f"Unsupported TGA image type {image_type} (expected 2 or 10)"
        ) from None

    if color_map_type not in (0, 1):
        raise MalformedHeader(f"Invalid TGA color map type {color_map_type}")

    if pixel_depth != PIXEL_DEPTH:
        raise MalformedHeader(
            f"Unsupported TGA pixel depth {pixel_depth} (expected {PIXEL_DEPTH})"
        )

    return TGAHeader(
        image_type=image_type,
        width=width,
        height=height,
        pixel_depth=pixel_depth,
        descriptor=descriptor,
        id_length=id_length,
        color_map_type=color_map_type,
        color_map_first=color_map_first,
        color_map_length=color_map_length,
        color_map_entry_size=color_map_entry_size,
    )


def serialize_header(header: TGAHeader) -> bytes:
    """
    Build the 18-byte on-disk header.

    The colour map fields are written back as parsed so the header still
    describes the bytes that follow it. Headers built by the encoder
    carry no colour map. X/Y origin is always written as zero.

    Raises:
        InvalidDimensions: If width or height does not fit 16 bits
        TGAWriteError: If any other field does not fit its slot
    """
    if not (0 <= header.width <= MAX_DIMENSION and 0 <= header.height <= MAX_DIMENSION):
        raise InvalidDimensions(
            f"Image dimensions {header.width}x{header.height} out of range (0-{MAX_DIMENSION})"
        )
    for name, value, limit in (
        ('id_length', header.id_length, 0xFF),
        ('color_map_type', header.color_map_type, 1),
        ('color_map_first', header.color_map_first, 0xFFFF),
        ('color_map_length', header.color_map_length, 0xFFFF),
        ('color_map_entry_size', header.color_map_entry_size, 0xFF),
        ('pixel_depth', header.pixel_depth, 0xFF),
        ('descriptor', header.descriptor, 0xFF),
    ):
        if not 0 <= value <= limit:
            raise TGAWriteError(f"TGA header field {name}={value} out of range (0-{limit})")

    return _HEADER_STRUCT.pack(
        header.id_length,
        header.color_map_type,
        int(header.image_type),
        header.color_map_first,
        header.color_map_length,
        header.color_map_entry_size,
        0, 0,  # X/Y origin
        header.width,
        header.height,
        header.pixel_depth,
        header.descriptor,
    )
