# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TGA pixel codec

Converts between the bytes that follow a TGA header and a flat,
row-major buffer of (R, G, B) tuples. Decoded buffers are always
top-down; bottom-left images are reordered on the way in and, when
requested, on the way out.

Every function here is a pure function of its arguments: no state is
kept between calls and input buffers are never modified.

Copyright 2025 DNAi inc.
"""

import logging
from typing import List, Sequence, Tuple

from tgacodec.exceptions import InvalidDimensions, TGAWriteError, TruncatedData
from tgacodec.tga_header import (
    BYTES_PER_PIXEL,
    DESCRIPTOR_TOP_LEFT,
    HEADER_LENGTH,
    MAX_DIMENSION,
    ImageType,
    TGAHeader,
    parse_header,
    serialize_header,
)
from tgacodec.tga_rle import decode_rle, encode_rle

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int, int]
MAX_IMAGE_ID_LENGTH = 255


def _flip_rows(items: List, width: int, height: int) -> List:
    """Reverse the row order of a flat row-major buffer."""
    flipped = []
    for row in range(height - 1, -1, -1):
        flipped.extend(items[row * width:(row + 1) * width])
    return flipped


def read_image_id(header: TGAHeader, remaining: bytes) -> bytes:
    """
    Return the image identification field that follows the header.

    Args:
        header: Parsed header
        remaining: Bytes following the 18-byte header

    Raises:
        TruncatedData: If the field is shorter than header.id_length
    """
    if len(remaining) < header.id_length:
        raise TruncatedData(
            f"Image ID field truncated: need {header.id_length} bytes, got {len(remaining)}"
        )
    return bytes(remaining[:header.id_length])


def decode(header: TGAHeader, remaining: bytes) -> List[Pixel]:
    """
    Decode the pixel data that follows a TGA header.

    The image ID field and any colour map are skipped first. Bytes left
    over after the last pixel are not part of the result; see
    decode_with_extended_id.

    Args:
        header: Parsed header
        remaining: Bytes following the 18-byte header

    Returns:
        width x height (R, G, B) tuples, top row first

    Raises:
        TruncatedData: If the data ends early
        OverrunPacket: If an RLE packet runs past the last pixel
    """
    pixels, _ = decode_with_extended_id(header, remaining)
    return pixels


def decode_with_extended_id(header: TGAHeader, remaining: bytes) -> Tuple[List[Pixel], bytes]:
    """
    Decode pixel data and return the bytes that follow it.

    Everything after the last pixel is returned unparsed as the extended
    image identification data.

    Returns:
        Tuple of (top-down pixel buffer, trailing bytes)
    """
    data = bytes(remaining)
    offset = header.image_data_offset
    if len(data) < offset:
        raise TruncatedData(
            f"TGA data truncated before pixel data: need {offset} bytes "
            f"of image ID and color map, got {len(data)}"
        )

    pixel_count = header.pixel_count
    if header.image_type == ImageType.RLE_RGB:
        stored, end = decode_rle(data, pixel_count, offset)
    else:
        end = offset + header.raw_size
        if len(data) < end:
            raise TruncatedData(
                f"TGA pixel data truncated: need {header.raw_size} bytes, "
                f"got {len(data) - offset}"
            )
        stored = [data[i:i + BYTES_PER_PIXEL] for i in range(offset, end, BYTES_PER_PIXEL)]

    if end < len(data):
        logger.debug("%d bytes of extended image ID after pixel data", len(data) - end)

    pixels = [(p[2], p[1], p[0]) for p in stored]

    if not header.top_left:
        logger.debug("Reordering %d rows from bottom-left origin", header.height)
        pixels = _flip_rows(pixels, header.width, header.height)

    return pixels, data[end:]


def encode(
    pixels: Sequence[Pixel],
    width: int,
    height: int,
    mode: ImageType = ImageType.RLE_RGB,
    bottom_left: bool = False,
    image_id: bytes = b'',
) -> Tuple[TGAHeader, bytes]:
    """
    Encode a top-down buffer of (R, G, B) tuples.

    Args:
        pixels: width x height pixels, top row first
        width: Image width
        height: Image height
        mode: ImageType.RAW_RGB or ImageType.RLE_RGB
        bottom_left: Store rows bottom-up (descriptor bit 5 clear)
        image_id: Optional image identification field (at most 255 bytes)

    Returns:
        Tuple of (header, bytes that follow the header)

    Raises:
        InvalidDimensions: If width/height are out of range or do not
            match the number of pixels
        TGAWriteError: If mode is not a supported image type, or image_id
            is longer than 255 bytes
    """
    try:
        mode = ImageType(mode)
    except ValueError:
        raise TGAWriteError(
            f"Unsupported TGA image type {mode} (expected 2 or 10)"
        ) from None

    if not (0 <= width <= MAX_DIMENSION and 0 <= height <= MAX_DIMENSION):
        raise InvalidDimensions(
            f"Image dimensions {width}x{height} out of range (0-{MAX_DIMENSION})"
        )
    if width * height != len(pixels):
        raise InvalidDimensions(
            f"Image dimensions {width}x{height} do not match {len(pixels)} pixels"
        )
    if len(image_id) > MAX_IMAGE_ID_LENGTH:
        raise TGAWriteError(
            f"Image ID too long: {len(image_id)} bytes (max {MAX_IMAGE_ID_LENGTH})"
        )

    header = TGAHeader(
        image_type=mode,
        width=width,
        height=height,
        descriptor=0 if bottom_left else DESCRIPTOR_TOP_LEFT,
        id_length=len(image_id),
    )

    stored = [bytes((b, g, r)) for r, g, b in pixels]
    if bottom_left:
        stored = _flip_rows(stored, width, height)

    if mode == ImageType.RLE_RGB:
        body = encode_rle(stored)
    else:
        body = b''.join(stored)

    return header, bytes(image_id) + body


def decode_image(data: bytes) -> Tuple[TGAHeader, List[Pixel]]:
    """
    Decode a complete in-memory TGA file.

    Returns:
        Tuple of (header, top-down pixel buffer)
    """
    header = parse_header(data)
    return header, decode(header, data[HEADER_LENGTH:])


def encode_image(
    pixels: Sequence[Pixel],
    width: int,
    height: int,
    mode: ImageType = ImageType.RLE_RGB,
    bottom_left: bool = False,
    image_id: bytes = b'',
) -> bytes:
    """Encode pixels into a complete TGA file (header + body)."""
    header, body = encode(pixels, width, height, mode, bottom_left, image_id)
    return serialize_header(header) + body
