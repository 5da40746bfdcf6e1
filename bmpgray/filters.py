"""Per-pixel colour transforms and writing of 24-bit pixel rows."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Iterable, Sequence
from typing import BinaryIO

from bmpgray.bitmap import Pixel

Transform = Callable[[Pixel], bytes]


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def grayscale(pixel: Pixel) -> bytes:
    """Return the luminance-weighted gray value in all three channels."""
    value = _to_float32(0.3 * pixel.red + 0.59 * pixel.green + 0.11 * pixel.blue)
    gray = math.floor(value + 0.5) & 0xFF
    return bytes((gray, gray, gray))


def red_channel(pixel: Pixel) -> bytes:
    """Keep only the red channel; bytes are in blue, green, red order."""
    return bytes((0, 0, pixel.red))


def green_channel(pixel: Pixel) -> bytes:
    """Keep only the green channel; bytes are in blue, green, red order."""
    return bytes((0, pixel.green, 0))


def blue_channel(pixel: Pixel) -> bytes:
    """Keep only the blue channel; bytes are in blue, green, red order."""
    return bytes((pixel.blue, 0, 0))


def invert(pixel: Pixel) -> bytes:
    """Invert every channel; bytes are in blue, green, red order."""
    return bytes((~pixel.blue & 0xFF, ~pixel.green & 0xFF, ~pixel.red & 0xFF))


def swap_red_blue(pixel: Pixel) -> bytes:
    """Write the pixel with its red and blue channels exchanged."""
    return bytes((pixel.red, pixel.green, pixel.blue))


def write_pixel_rows(
    out: BinaryIO, rows: Iterable[Sequence[Pixel]], transform: Transform
) -> None:
    """Write each row through ``transform``, padded to a multiple of four bytes."""
    for row in rows:
        data = b"".join(transform(pixel) for pixel in row)
        out.write(data)
        if len(data) % 4:
            out.write(bytes(4 - len(data) % 4))


def format_hex(value: int) -> str:
    """Format an integer as 32-bit lower-case hexadecimal."""
    return format(value & 0xFFFFFFFF, "x")