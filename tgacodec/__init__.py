# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
tgacodec - A Pure Python 24-bit TGA Codec

Reads and writes Truevision TGA images holding 24-bit true-colour
pixels, either uncompressed (image type 2) or run-length encoded
(image type 10). Decoded images are flat, top-down buffers of
(R, G, B) tuples.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from tgacodec.exceptions import (
    TGACodecError,
    TGAReadError,
    TGAWriteError,
    MalformedHeader,
    TruncatedData,
    OverrunPacket,
    InvalidDimensions,
)
from tgacodec.tga_header import (
    HEADER_LENGTH,
    ImageType,
    TGAHeader,
    parse_header,
    serialize_header,
)
from tgacodec.pixel_codec import (
    decode,
    decode_with_extended_id,
    encode,
    decode_image,
    encode_image,
    read_image_id,
)
from tgacodec.tga_parser import TGAImage, TGAParser
from tgacodec.tga_writer import TGAWriter

__all__ = [
    "TGACodecError",
    "TGAReadError",
    "TGAWriteError",
    "MalformedHeader",
    "TruncatedData",
    "OverrunPacket",
    "InvalidDimensions",
    "HEADER_LENGTH",
    "ImageType",
    "TGAHeader",
    "parse_header",
    "serialize_header",
    "decode",
    "decode_with_extended_id",
    "encode",
    "decode_image",
    "encode_image",
    "read_image_id",
    "TGAImage",
    "TGAParser",
    "TGAWriter",
]
