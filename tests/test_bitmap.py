import io
import struct

import pytest

from bmpgray.bitmap import (
    BitmapError,
    BitmapHeader,
    Pixel,
    copy_headers,
    read_bitmap_header,
    read_bitmap_info_header,
    read_pixel_rows,
)


def make_bmp(rows, gap=b""):
    width = len(rows[0])
    height = len(rows)
    pixel_data = b""
    for row in rows:
        line = b"".join(bytes((b, g, r)) for r, g, b in row)
        line += bytes(-len(line) % 4)
        pixel_data += line
    offset = 14 + 40 + len(gap)
    size = offset + len(pixel_data)
    file_header = b"BM" + struct.pack("<IHHI", size, 0, 0, offset)
    info = struct.pack(
        "<IIIHHIIIIII", 40, width, height, 1, 24, 0, len(pixel_data), 2835, 2835, 0, 0
    )
    return file_header + info + gap + pixel_data


ROWS_2x2 = [[(10, 20, 30), (40, 50, 60)], [(70, 80, 90), (100, 110, 120)]]


def test_read_header_fields():
    data = make_bmp(ROWS_2x2)
    header = read_bitmap_header(io.BytesIO(data))
    assert header.header_field == "BM"
    assert header.size == len(data)
    assert header.reserved1 == 0
    assert header.reserved2 == 0
    assert header.offset == 14 + 40


def test_invalid_magic_raises():
    data = b"XY" + make_bmp(ROWS_2x2)[2:]
    with pytest.raises(BitmapError):
        read_bitmap_header(io.BytesIO(data))


def test_truncated_header_raises():
    with pytest.raises(BitmapError):
        read_bitmap_header(io.BytesIO(b"BM\x01\x02"))


def test_read_info_header_fields():
    stream = io.BytesIO(make_bmp(ROWS_2x2))
    read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    assert info.hdr_size == 40
    assert info.width == 2
    assert info.height == 2
    assert info.planes == 1
    assert info.bits_per_pixel == 24
    assert info.compression == 0
    assert info.x_pixels_per_m == 2835


def test_truncated_info_header_raises():
    data = make_bmp(ROWS_2x2)[:30]
    stream = io.BytesIO(data)
    read_bitmap_header(stream)
    with pytest.raises(BitmapError):
        read_bitmap_info_header(stream)


@pytest.mark.parametrize(
    "rows",
    [
        ROWS_2x2,
        [[(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12)]],
        [[(255, 0, 0), (0, 255, 0)], [(0, 0, 255), (0, 0, 0)], [(9, 9, 9), (1, 1, 1)]],
    ],
)
def test_read_pixel_rows_round_trip(rows):
    stream = io.BytesIO(make_bmp(rows))
    header = read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    pixels = read_pixel_rows(stream, header, info)
    assert [[(p.red, p.green, p.blue) for p in row] for row in pixels] == rows


def test_read_pixel_rows_uses_offset():
    rows = ROWS_2x2
    stream = io.BytesIO(make_bmp(rows, gap=b"\xaa" * 6))
    header = read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    pixels = read_pixel_rows(stream, header, info)
    assert pixels[1][1] == Pixel(red=100, green=110, blue=120)


def test_truncated_pixel_data_raises():
    data = make_bmp(ROWS_2x2)[:-5]
    stream = io.BytesIO(data)
    header = read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    with pytest.raises(BitmapError):
        read_pixel_rows(stream, header, info)


def test_copy_headers_copies_prefix():
    data = make_bmp(ROWS_2x2, gap=b"\x01\x02\x03\x04")
    stream = io.BytesIO(data)
    header = read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    out = io.BytesIO()
    copy_headers(out, stream, header, info)
    assert out.getvalue() == data[: header.offset]


def test_copy_headers_rejects_offset_inside_headers():
    data = bytearray(make_bmp(ROWS_2x2))
    data[10:14] = struct.pack("<I", 20)
    stream = io.BytesIO(bytes(data))
    header = read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    with pytest.raises(BitmapError):
        copy_headers(io.BytesIO(), stream, header, info)


def test_copy_headers_short_source_raises():
    data = make_bmp(ROWS_2x2)
    stream = io.BytesIO(data)
    header = read_bitmap_header(stream)
    info = read_bitmap_info_header(stream)
    with pytest.raises(BitmapError):
        copy_headers(io.BytesIO(), io.BytesIO(data[:20]), header, info)


def test_pixel_strings():
    pixel = Pixel(red=255, green=10, blue=0)
    assert str(pixel) == "(255, 10, 0)"
    assert pixel.hex_str() == "(ff, a, 0)"


def test_header_str_lists_fields():
    header = BitmapHeader(header_field="BM", size=70, reserved1=0, reserved2=0, offset=54)
    text = str(header)
    assert text.startswith("{\n  header_field: BM,\n")
    assert "  offset: 54\n}" in text