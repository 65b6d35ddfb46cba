# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for tgacodec

Provides a CLI for inspecting TGA headers and converting 24-bit TGA
images between raw and RLE storage.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from tgacodec.exceptions import TGACodecError
from tgacodec.tga_header import ImageType
from tgacodec.tga_parser import TGAParser
from tgacodec.tga_writer import TGAWriter


def format_output(metadata: dict, format_type: str = "text") -> str:
    """
    Format metadata output based on format type.
    
    Args:
        metadata: Dictionary of metadata
        format_type: Output format ('text' or 'json')
        
    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(metadata, indent=2, ensure_ascii=False)
    lines = []
    for tag, value in sorted(metadata.items()):
        lines.append(f"{tag}: {value}")
    return "\n".join(lines)


def show_info(file_path: str, format_type: str = "text") -> str:
    """Read a TGA header and return it formatted."""
    metadata = TGAParser(file_path=file_path).parse()
    return format_output(metadata, format_type)


def convert(
    input_path: str,
    output_path: str,
    mode: ImageType = ImageType.RLE_RGB,
    bottom_left: bool = False,
    image_id: Optional[str] = None,
) -> str:
    """
    Decode a TGA file and re-encode it with the given settings.

    The source's extended image ID is carried over unchanged.

    Args:
        input_path: Source TGA file
        output_path: Destination TGA file
        mode: Output storage
        bottom_left: Store rows bottom-up
        image_id: Image ID for the output; the source's ID is kept when None

    Returns:
        Status message
    """
    image = TGAParser(file_path=input_path).read()
    writer = TGAWriter(
        mode=mode,
        bottom_left=bottom_left,
        image_id=image.image_id if image_id is None else image_id,
        extended_image_id=image.extended_image_id,
    )
    writer.write_tga(image.pixels, image.width, image.height, output_path)
    return f"Wrote {image.width}x{image.height} {mode.name} image to {output_path}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tgacodec",
        description="tgacodec - Read and write 24-bit TGA images (raw and RLE)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show header information
  tgacodec info image.tga
  
  # Show header information as JSON
  tgacodec info -j image.tga
  
  # Compress an image
  tgacodec convert input.tga output.tga --rle
  
  # Store uncompressed, bottom-up
  tgacodec convert input.tga output.tga --raw --bottom-left
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    info_parser = subparsers.add_parser('info', help='Show TGA header information')
    info_parser.add_argument('file', help='TGA file')
    info_parser.add_argument('-j', '--json', action='store_true', help='Output in JSON format')

    convert_parser = subparsers.add_parser('convert', help='Re-encode a TGA file')
    convert_parser.add_argument('input', help='Source TGA file')
    convert_parser.add_argument('output', help='Destination TGA file')
    mode_group = convert_parser.add_mutually_exclusive_group()
    mode_group.add_argument('--raw', dest='mode', action='store_const', const=ImageType.RAW_RGB,
                            help='Write uncompressed pixel data (image type 2)')
    mode_group.add_argument('--rle', dest='mode', action='store_const', const=ImageType.RLE_RGB,
                            help='Write run-length encoded pixel data (image type 10, default)')
    convert_parser.add_argument('--bottom-left', action='store_true',
                                help='Store rows bottom-up instead of top-down')
    convert_parser.add_argument('--id', dest='image_id',
                                help='Image ID field for the output (default: keep the source ID)')
    convert_parser.set_defaults(mode=ImageType.RLE_RGB)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        if args.command == 'info':
            print(show_info(args.file, "json" if args.json else "text"))
        else:
            print(convert(args.input, args.output, args.mode, args.bottom_left, args.image_id))
    except TGACodecError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0
