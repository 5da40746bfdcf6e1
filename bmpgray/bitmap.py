"""Reading 24-bit bitmap files and copying their headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

FILE_HEADER_SIZE = 14
_MAGIC = b"BM"
_FILE_HEADER = struct.Struct("<IHHI")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")


class BitmapError(Exception):
    """Raised when a bitmap cannot be read or copied."""


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise BitmapError(f"Failed to read {count} bytes, only read {len(data)}")
    return data


@dataclass(frozen=True)
class BitmapHeader:
    """The 14-byte file header that opens every bitmap."""

    header_field: str
    size: int
    reserved1: int
    reserved2: int
    offset: int

    def __str__(self) -> str:
        return (
            "{\n"
            f"  header_field: {self.header_field},\n"
            f"  size: {self.size},\n"
            f"  reserved1: {self.reserved1},\n"
            f"  reserved2: {self.reserved2},\n"
            f"  offset: {self.offset}\n"
            "}"
        )


@dataclass(frozen=True)
class BitmapInfoHeader:
    """The DIB header that follows the file header."""

    hdr_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_m: int
    y_pixels_per_m: int
    colors_used: int
    important_colors: int

    def __str__(self) -> str:
        return (
            "{\n"
            f"  hdr_size: {self.hdr_size},\n"
            f"  width: {self.width},\n"
            f"  height: {self.height},\n"
            f"  planes: {self.planes}\n"
            f"  bits_per_pixel: {self.bits_per_pixel},\n"
            f"  compression: {self.compression},\n"
            f"  image_size: {self.image_size},\n"
            f"  x_pixels_per_m: {self.x_pixels_per_m},\n"
            f"  y_pixels_per_m: {self.y_pixels_per_m},\n"
            f"  colors_used: {self.colors_used},\n"
            f"  important_colors: {self.important_colors}\n"
            "}"
        )


@dataclass(frozen=True)
class Pixel:
    """A 24-bit colour value."""

    red: int
    green: int
    blue: int

    def __str__(self) -> str:
        return f"({self.red}, {self.green}, {self.blue})"

    def hex_str(self) -> str:
        """Return the channels as lower-case hexadecimal."""
        return f"({self.red:x}, {self.green:x}, {self.blue:x})"


def read_bitmap_header(stream: BinaryIO) -> BitmapHeader:
    """Read the file header at the current position of ``stream``."""
    magic = stream.read(2)
    if magic != _MAGIC:
        raise BitmapError("File doesn't contain valid bit map header!")
    size, reserved1, reserved2, offset = _FILE_HEADER.unpack(
        _read_exact(stream, _FILE_HEADER.size)
    )
    return BitmapHeader(
        header_field=magic.decode("ascii"),
        size=size,
        reserved1=reserved1,
        reserved2=reserved2,
        offset=offset,
    )


def read_bitmap_info_header(stream: BinaryIO) -> BitmapInfoHeader:
    """Read the DIB header fields at the current position of ``stream``."""
    return BitmapInfoHeader(*_INFO_HEADER.unpack(_read_exact(stream, _INFO_HEADER.size)))


def read_pixel_rows(
    stream: BinaryIO, header: BitmapHeader, info_header: BitmapInfoHeader
) -> list[list[Pixel]]:
    """Read the pixel rows, in file order, as lists of pixels."""
    stream.seek(header.offset)
    row_size = info_header.width * 3
    rows: list[list[Pixel]] = []
    for _ in range(info_header.height):
        data = _read_exact(stream, row_size)
        rows.append(
            [
                Pixel(red=red, green=green, blue=blue)
                for blue, green, red in zip(data[0::3], data[1::3], data[2::3])
            ]
        )
        stream.read(row_size % 4)
    return rows


def copy_headers(
    out: BinaryIO,
    source: BinaryIO,
    header: BitmapHeader,
    info_header: BitmapInfoHeader,
) -> None:
    """Copy everything before the pixel data from ``source`` to ``out``."""
    rest = header.offset - FILE_HEADER_SIZE - info_header.hdr_size
    if rest < 0:
        raise BitmapError(
            f"Pixel data offset {header.offset} lies inside the headers"
        )
    source.seek(0)
    for count in (FILE_HEADER_SIZE, info_header.hdr_size, rest):
        out.write(_read_exact(source, count))