import pytest

from tgacodec.exceptions import (
    InvalidDimensions,
    OverrunPacket,
    TGACodecError,
    TGAWriteError,
    TruncatedData,
)
from tgacodec.pixel_codec import (
    decode,
    decode_image,
    decode_with_extended_id,
    encode,
    encode_image,
    read_image_id,
)
from tgacodec.tga_header import HEADER_LENGTH, ImageType, parse_header

from tests.conftest import make_header

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


def _distinct(count):
    return [(i % 256, (i // 256) % 256, 7) for i in range(count)]


ROUND_TRIP_IMAGES = {
    "1x1": ([RED], 1, 1),
    "1xN": (_distinct(5), 1, 5),
    "Nx1": (_distinct(7), 7, 1),
    "run-over-128": ([WHITE] * 300, 20, 15),
    "129-then-distinct": ([BLUE] * 129 + _distinct(6), 15, 9),
    "mixed-runs": ((([RED] * 3 + [GREEN, BLUE] + [WHITE] * 2) * 20)[:130], 13, 10),
    "long-raw": (_distinct(260), 26, 10),
}


@pytest.mark.parametrize("mode", [ImageType.RAW_RGB, ImageType.RLE_RGB])
@pytest.mark.parametrize("name", sorted(ROUND_TRIP_IMAGES))
def test_round_trip_shapes(name, mode):
    pixels, width, height = ROUND_TRIP_IMAGES[name]
    header, body = encode(pixels, width, height, mode)
    assert decode(header, body) == pixels
    assert encode(decode(header, body), width, height, mode) == (header, body)


@pytest.mark.parametrize("mode", [ImageType.RAW_RGB, ImageType.RLE_RGB])
def test_round_trip(gradient, mode):
    pixels, width, height = gradient
    header, body = encode(pixels, width, height, mode)
    assert decode(header, body) == pixels


@pytest.mark.parametrize("mode", [ImageType.RAW_RGB, ImageType.RLE_RGB])
def test_round_trip_bottom_left(gradient, mode):
    pixels, width, height = gradient
    data = encode_image(pixels, width, height, mode, bottom_left=True)
    header, decoded = decode_image(data)
    assert not header.top_left
    assert decoded == pixels


def test_encoded_header_fields(gradient):
    pixels, width, height = gradient
    header, _ = encode(pixels, width, height, ImageType.RLE_RGB)
    assert header.image_type is ImageType.RLE_RGB
    assert header.width == width
    assert header.height == height
    assert header.pixel_depth == 24
    assert header.descriptor == 0x20


def test_raw_body_is_bgr():
    header, body = encode([RED, GREEN, BLUE], 3, 1, ImageType.RAW_RGB)
    assert body == b'\x00\x00\xff' + b'\x00\xff\x00' + b'\xff\x00\x00'


def test_rle_packing_policy():
    pixels = [WHITE] * 5 + [RED, GREEN, BLUE]
    _, body = encode(pixels, 8, 1, ImageType.RLE_RGB)
    assert body == (b'\x84' + b'\xff\xff\xff'
                    + b'\x02' + b'\x00\x00\xff' + b'\x00\xff\x00' + b'\xff\x00\x00')


def test_rle_runs_cross_rows():
    _, body = encode([RED] * 6, 3, 2, ImageType.RLE_RGB)
    assert body == b'\x85\x00\x00\xff'


def test_bottom_left_encoding_reverses_rows():
    header, body = encode([RED, GREEN], 1, 2, ImageType.RAW_RGB, bottom_left=True)
    assert header.descriptor == 0
    assert body == b'\x00\xff\x00' + b'\x00\x00\xff'


def test_decode_bottom_left_row_zero_is_last_stored_row():
    header = parse_header(make_header(image_type=2, width=2, height=2, descriptor=0x00))
    body = b'\x00\x00\xff' * 2 + b'\xff\x00\x00' * 2
    assert decode(header, body) == [BLUE, BLUE, RED, RED]


def test_decode_top_left_keeps_order():
    header = parse_header(make_header(image_type=2, width=2, height=2, descriptor=0x20))
    body = b'\x00\x00\xff' * 2 + b'\xff\x00\x00' * 2
    assert decode(header, body) == [RED, RED, BLUE, BLUE]


def test_decode_raw_truncated():
    header = parse_header(make_header(image_type=2, width=10, height=10))
    with pytest.raises(TruncatedData):
        decode(header, b'\x00' * 299)


def test_decode_raw_exact_size():
    header = parse_header(make_header(image_type=2, width=10, height=10))
    assert len(decode(header, b'\x00' * 300)) == 100


def test_decode_rle_overrun():
    header = parse_header(make_header(image_type=10, width=2, height=2))
    body = b'\x81\x00\x00\x00' + b'\x82\x01\x01\x01'
    with pytest.raises(OverrunPacket):
        decode(header, body)


def test_decode_rle_truncated():
    header = parse_header(make_header(image_type=10, width=2, height=2))
    with pytest.raises(TruncatedData):
        decode(header, b'\x81\x00\x00\x00')


def test_decode_ignores_trailing_bytes():
    header = parse_header(make_header(image_type=2, width=1, height=1))
    assert decode(header, b'\x00\x00\xff' + b'TRUEVISION-XFILE.\x00') == [RED]


def test_decode_skips_image_id_and_color_map():
    header = parse_header(make_header(image_type=10, width=2, height=1, id_length=3,
                                      color_map_type=1, color_map_length=2,
                                      color_map_entry_size=24))
    body = b'abc' + b'\x00' * 6 + b'\x81\x00\x00\xff'
    assert decode(header, body) == [RED, RED]
    assert read_image_id(header, body) == b'abc'


def test_decode_truncated_image_id():
    header = parse_header(make_header(id_length=10))
    with pytest.raises(TruncatedData):
        decode(header, b'short')
    with pytest.raises(TruncatedData):
        read_image_id(header, b'short')


def test_image_id_round_trip(gradient):
    pixels, width, height = gradient
    data = encode_image(pixels, width, height, ImageType.RLE_RGB, image_id=b'texture01')
    assert data[0] == 9
    header, decoded = decode_image(data)
    assert read_image_id(header, data[HEADER_LENGTH:]) == b'texture01'
    assert decoded == pixels


def test_image_id_too_long():
    with pytest.raises(TGAWriteError):
        encode([RED], 1, 1, ImageType.RAW_RGB, image_id=b'x' * 256)


def test_zero_size_image():
    for mode in (ImageType.RAW_RGB, ImageType.RLE_RGB):
        header, body = encode([], 0, 0, mode)
        assert body == b''
        assert decode(header, body) == []


def test_dimension_mismatch():
    with pytest.raises(InvalidDimensions):
        encode([RED, GREEN, BLUE], 2, 2, ImageType.RAW_RGB)


@pytest.mark.parametrize("width,height", [(65536, 0), (0, 65536), (-1, 0)])
def test_dimension_out_of_range(width, height):
    with pytest.raises(InvalidDimensions):
        encode([], width, height, ImageType.RLE_RGB)


def test_encode_accepts_raw_type_code():
    header, _ = encode([RED], 1, 1, 2)
    assert header.image_type is ImageType.RAW_RGB


def test_encode_does_not_modify_input(gradient):
    pixels, width, height = gradient
    snapshot = list(pixels)
    encode(pixels, width, height, ImageType.RLE_RGB, bottom_left=True)
    assert pixels == snapshot


def test_extended_image_id_is_returned():
    header = parse_header(make_header(image_type=10, width=2, height=1))
    pixels, extended = decode_with_extended_id(header, b'\x81\x00\x00\xff' + b'EXTENDED-ID')
    assert pixels == [RED, RED]
    assert extended == b'EXTENDED-ID'


def test_extended_image_id_empty_without_trailing_bytes():
    header = parse_header(make_header(image_type=2, width=1, height=1))
    assert decode_with_extended_id(header, b'\x00\x00\xff') == ([RED], b'')


@pytest.mark.parametrize("mode", [3, 0, 11])
def test_unsupported_mode(mode):
    with pytest.raises(TGAWriteError):
        encode([RED], 1, 1, mode)


def test_unsupported_mode_checked_before_dimensions():
    with pytest.raises(TGAWriteError) as excinfo:
        encode([RED], 5, 5, 3)
    assert not isinstance(excinfo.value, InvalidDimensions)
    assert isinstance(excinfo.value, TGACodecError)
