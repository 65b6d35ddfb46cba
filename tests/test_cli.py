import json

import pytest

from tgacodec.cli import main
from tgacodec.tga_header import ImageType
from tgacodec.tga_parser import TGAParser
from tgacodec.tga_writer import TGAWriter

from tests.conftest import make_header


@pytest.fixture
def raw_file(tmp_path, gradient):
    pixels, width, height = gradient
    path = tmp_path / "raw.tga"
    TGAWriter(mode=ImageType.RAW_RGB, image_id=b'src').write_tga(pixels, width, height, str(path))
    return path


def test_info_text(raw_file, capsys):
    assert main(['info', str(raw_file)]) == 0
    out = capsys.readouterr().out
    assert "TGA:Width: 4" in out
    assert "TGA:Compression: None" in out


def test_info_json(raw_file, capsys):
    assert main(['info', '-j', str(raw_file)]) == 0
    metadata = json.loads(capsys.readouterr().out)
    assert metadata['TGA:Height'] == 3
    assert metadata['TGA:ImageID'] == 'src'


def test_convert_defaults_to_rle(raw_file, tmp_path, gradient):
    out_path = tmp_path / "out.tga"
    assert main(['convert', str(raw_file), str(out_path)]) == 0
    image = TGAParser(file_path=str(out_path)).read()
    assert image.header.image_type is ImageType.RLE_RGB
    assert image.header.top_left
    assert image.image_id == b'src'
    assert image.pixels == gradient[0]


def test_convert_raw_bottom_left_with_id(raw_file, tmp_path, gradient):
    out_path = tmp_path / "out.tga"
    assert main(['convert', str(raw_file), str(out_path),
                 '--raw', '--bottom-left', '--id', 'new']) == 0
    image = TGAParser(file_path=str(out_path)).read()
    assert image.header.image_type is ImageType.RAW_RGB
    assert not image.header.top_left
    assert image.image_id == b'new'
    assert image.pixels == gradient[0]


def test_error_exit_status(tmp_path, capsys):
    path = tmp_path / "bad.tga"
    path.write_bytes(make_header(pixel_depth=32))
    assert main(['info', str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_convert_keeps_extended_image_id(tmp_path, gradient):
    pixels, width, height = gradient
    src = tmp_path / "src.tga"
    TGAWriter(extended_image_id=b'trailer').write_tga(pixels, width, height, str(src))
    out_path = tmp_path / "out.tga"
    assert main(['convert', str(src), str(out_path), '--raw']) == 0
    image = TGAParser(file_path=str(out_path)).read()
    assert image.extended_image_id == b'trailer'
    assert image.pixels == pixels
