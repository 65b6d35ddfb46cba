# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TGA (Targa) file reader

This module loads a TGA file (from disk or from memory) and hands it to
the header model and pixel codec. Only 24-bit raw and RLE true-colour
images are supported.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from tgacodec.exceptions import TGAReadError
from tgacodec.pixel_codec import Pixel, decode_with_extended_id, read_image_id
from tgacodec.tga_header import HEADER_LENGTH, ImageType, TGAHeader, parse_header


@dataclass
class TGAImage:
    """A decoded TGA image."""
    header: TGAHeader
    pixels: List[Pixel] = field(repr=False)
    image_id: bytes = b''
    extended_image_id: bytes = b''

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    def row(self, y: int) -> List[Pixel]:
        """Return row y, counting from the top."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range (0-{self.height - 1})")
        return self.pixels[y * self.width:(y + 1) * self.width]

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the (R, G, B) pixel at column x of row y (top-left origin)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) out of range")
        return self.pixels[y * self.width + x]


class TGAParser:
    """
    Reader for 24-bit TGA images.

    Supports:
    - Image type 2 (uncompressed true-colour)
    - Image type 10 (run-length encoded true-colour)
    - Image ID field and unused colour maps (skipped)
    - Extended image ID (bytes after the pixel data, kept unparsed)
    """

    def __init__(self, file_path: Optional[str] = None, file_data: Optional[bytes] = None):
        """
        Initialize TGA parser.

        Args:
            file_path: Path to TGA file
            file_data: File data bytes
        """
        if file_path:
            self.file_path = Path(file_path)
            self.file_data = None
        elif file_data is not None:
            self.file_data = file_data
            self.file_path = None
        else:
            raise ValueError("Either file_path or file_data must be provided")

    def _load(self) -> bytes:
        if self.file_data is not None:
            return self.file_data
        try:
            with open(self.file_path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise TGAReadError(f"Failed to read TGA file {self.file_path}: {e}") from e

    def read_header(self) -> TGAHeader:
        """
        Parse only the TGA header.

        Raises:
            MalformedHeader: If the header is short or unsupported
        """
        return parse_header(self._load())

    def read(self) -> TGAImage:
        """
        Decode the whole image.

        Returns:
            TGAImage with a top-down pixel buffer

        Raises:
            TGAReadError: If the file cannot be read or decoded
        """
        file_data = self._load()
        header = parse_header(file_data)
        remaining = file_data[HEADER_LENGTH:]
        pixels, extended_image_id = decode_with_extended_id(header, remaining)
        return TGAImage(
            header=header,
            pixels=pixels,
            image_id=read_image_id(header, remaining),
            extended_image_id=extended_image_id,
        )

    def parse(self) -> Dict[str, Any]:
        """
        Parse TGA header metadata.

        The pixel data is decoded to locate the extended image ID, so a
        truncated or corrupt body raises here as well.

        Returns:
            Dictionary of TGA metadata
        """
        file_data = self._load()
        header = parse_header(file_data)

        metadata: Dict[str, Any] = {}
        metadata['TGA:ImageType'] = int(header.image_type)
        metadata['TGA:Compression'] = 'RLE' if header.image_type == ImageType.RLE_RGB else 'None'
        metadata['TGA:Width'] = header.width
        metadata['TGA:Height'] = header.height
        metadata['TGA:PixelDepth'] = header.pixel_depth
        metadata['TGA:ImageDescriptor'] = header.descriptor
        metadata['TGA:Origin'] = 'top-left' if header.top_left else 'bottom-left'
        metadata['TGA:PixelCount'] = header.pixel_count
        metadata['TGA:ImageDataLength'] = header.raw_size
        metadata['TGA:IDLength'] = header.id_length
        metadata['TGA:ColorMapType'] = header.color_map_type

        # Image ID field (optional)
        if header.id_length > 0:
            image_id = read_image_id(header, file_data[HEADER_LENGTH:])
            metadata['TGA:ImageID'] = image_id.decode('ascii', errors='ignore').strip('\x00')

        _, extended_image_id = decode_with_extended_id(header, file_data[HEADER_LENGTH:])
        metadata['TGA:ExtendedImageIDLength'] = len(extended_image_id)
        if extended_image_id:
            metadata['TGA:ExtendedImageID'] = extended_image_id.decode('ascii', errors='ignore').strip('\x00')

        return metadata
