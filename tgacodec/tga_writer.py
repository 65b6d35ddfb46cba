# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TGA (Targa) file writer

Encodes a top-down (R, G, B) pixel buffer as a 24-bit TGA image and
writes it to disk.

Copyright 2025 DNAi inc.
"""

from pathlib import Path
from typing import Sequence, Union

from tgacodec.exceptions import TGAWriteError
from tgacodec.pixel_codec import Pixel, encode_image
from tgacodec.tga_header import ImageType


class TGAWriter:
    """
    Writes 24-bit TGA images.

    Output settings are fixed per writer instance so one writer can be
    reused for a batch of images.
    """

    def __init__(
        self,
        mode: ImageType = ImageType.RLE_RGB,
        bottom_left: bool = False,
        image_id: Union[bytes, str] = b'',
        extended_image_id: bytes = b'',
    ):
        """
        Initialize TGA writer.

        Args:
            mode: ImageType.RAW_RGB or ImageType.RLE_RGB
            bottom_left: Store rows bottom-up
            image_id: Image identification field (str is UTF-8 encoded)
            extended_image_id: Bytes appended after the pixel data
        """
        self.mode = mode
        self.bottom_left = bottom_left
        if isinstance(image_id, str):
            image_id = image_id.encode('utf-8')
        self.image_id = image_id
        self.extended_image_id = bytes(extended_image_id)

    def to_bytes(self, pixels: Sequence[Pixel], width: int, height: int) -> bytes:
        """
        Encode pixels into TGA file bytes.

        Raises:
            InvalidDimensions: If the buffer does not match width x height
            TGAWriteError: If the mode is unsupported or the image ID is too long
        """
        data = encode_image(
            pixels, width, height,
            mode=self.mode,
            bottom_left=self.bottom_left,
            image_id=self.image_id,
        )
        return data + self.extended_image_id

    def write_tga(self, pixels: Sequence[Pixel], width: int, height: int, output_path: str) -> None:
        """
        Write pixels to a TGA file.

        Args:
            pixels: width x height (R, G, B) tuples, top row first
            width: Image width
            height: Image height
            output_path: Output file path
        """
        final_data = self.to_bytes(pixels, width, height)
        try:
            Path(output_path).write_bytes(final_data)
        except OSError as e:
            raise TGAWriteError(f"Failed to write TGA file {output_path}: {e}") from e
