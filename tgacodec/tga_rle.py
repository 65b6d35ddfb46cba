# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TGA run-length packets

Image type 10 stores pixel data as a sequence of packets. Each packet
starts with one header byte:

- High bit set: run-length packet. The low 7 bits hold count - 1 and
  a single 3-byte pixel follows, repeated count times.
- High bit clear: raw packet. The low 7 bits hold count - 1 and count
  literal 3-byte pixels follow.

Counts are 1 to 128. Pixels here are the stored 3-byte (B, G, R)
groups; converting to logical (R, G, B) happens in pixel_codec.

Encoding example::
    Input:  [A, A, A, A, A, B, C, D]
    Output: [0x84, A, 0x02, B, C, D]
            (repeat A 5x, copy B C D)

Copyright 2025 DNAi inc.
"""

import logging
from typing import List, Sequence, Tuple

from tgacodec.exceptions import OverrunPacket, TruncatedData
from tgacodec.tga_header import BYTES_PER_PIXEL

logger = logging.getLogger(__name__)

MAX_PACKET_PIXELS = 128
RUN_FLAG = 0x80
COUNT_MASK = 0x7F


def encode_rle(pixels: Sequence[bytes]) -> bytes:
    """
    Pack stored pixels into TGA RLE packets.

    Greedy, single left-to-right pass. Two or more identical pixels
    always become a run packet; a raw packet stops just before the
    next run begins.

    Args:
        pixels: Sequence of 3-byte stored pixels

    Returns:
        Packed pixel data
    """
    result = bytearray()
    length = len(pixels)
    pos = 0
    packets = 0

    while pos < length:
        run = 1
        while (pos + run < length and run < MAX_PACKET_PIXELS
               and pixels[pos + run] == pixels[pos]):
            run += 1

        if run >= 2:
            result.append(RUN_FLAG | (run - 1))
            result += pixels[pos]
            pos += run
        else:
            end = pos + 1
            while end < length and end - pos < MAX_PACKET_PIXELS:
                if end + 1 < length and pixels[end] == pixels[end + 1]:
                    break
                end += 1
            result.append(end - pos - 1)
            for pixel in pixels[pos:end]:
                result += pixel
            pos = end
        packets += 1

    logger.debug("Encoded %d pixels into %d RLE packets (%d bytes)",
                 length, packets, len(result))
    return bytes(result)


def decode_rle(data: bytes, pixel_count: int, offset: int = 0) -> Tuple[List[bytes], int]:
    """
    Unpack TGA RLE packets until exactly pixel_count pixels are produced.

    Args:
        data: Buffer holding the packets
        pixel_count: Number of pixels the image declares
        offset: Position of the first packet in data

    Returns:
        Tuple of (stored 3-byte pixels, offset just past the last packet)

    Raises:
        TruncatedData: If data ends before pixel_count pixels are produced
        OverrunPacket: If a packet would produce more than pixel_count pixels
    """
    pixels: List[bytes] = []
    length = len(data)
    pos = offset

    while len(pixels) < pixel_count:
        if pos >= length:
            raise TruncatedData(
                f"RLE data ended after {len(pixels)} of {pixel_count} pixels"
            )
        packet = data[pos]
        pos += 1
        count = (packet & COUNT_MASK) + 1

        remaining = pixel_count - len(pixels)
        if count > remaining:
            raise OverrunPacket(
                f"RLE packet at offset {pos - 1} declares {count} pixels, "
                f"only {remaining} remain"
            )

        if packet & RUN_FLAG:
            pixel = data[pos:pos + BYTES_PER_PIXEL]
            if len(pixel) < BYTES_PER_PIXEL:
                raise TruncatedData(f"RLE run packet at offset {pos - 1} is truncated")
            pixels.extend([pixel] * count)
            pos += BYTES_PER_PIXEL
        else:
            end = pos + count * BYTES_PER_PIXEL
            if end > length:
                raise TruncatedData(f"RLE raw packet at offset {pos - 1} is truncated")
            pixels.extend(data[i:i + BYTES_PER_PIXEL] for i in range(pos, end, BYTES_PER_PIXEL))
            pos = end

    return pixels, pos
