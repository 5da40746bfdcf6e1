# bmpgray

Turn an uncompressed 24-bit BMP image into a grayscale copy.

Every pixel is replaced by its luminance, `0.3*red + 0.59*green + 0.11*blue`.
The value is computed in single precision and rounded to the nearest whole
number, with halves rounded up. It is written to all three channels. The file
header, the info header and any bytes between them and the pixel data are
copied over unchanged.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
bmpgray input.bmp output.bmp
```

Any arguments after the second are ignored. The command exits with status 0
on success and with status 1 in these cases:

- fewer than two arguments are given;
- the input cannot be opened. `Unable to open file` is printed to standard
  output;
- the input does not start with the `BM` signature;
- the input ends before its headers or pixel rows are complete;
- the pixel data offset in the file header points inside the headers.

In the last three cases the message from `BitmapError` is printed to standard
error.

## Library use

```python
from bmpgray.bitmap import (
    copy_headers,
    read_bitmap_header,
    read_bitmap_info_header,
    read_pixel_rows,
)
from bmpgray.filters import invert, write_pixel_rows

with open("input.bmp", "rb") as src, open("output.bmp", "wb") as out:
    header = read_bitmap_header(src)
    info = read_bitmap_info_header(src)
    rows = read_pixel_rows(src, header, info)
    copy_headers(out, src, header, info)
    write_pixel_rows(out, rows, invert)
```

### `bmpgray.bitmap`

- `read_bitmap_header(stream)` reads the 14-byte file header and returns a
  `BitmapHeader` (`header_field`, `size`, `reserved1`, `reserved2`,
  `offset`).
- `read_bitmap_info_header(stream)` reads the 40 bytes of info header fields
  and returns a `BitmapInfoHeader` (`hdr_size`, `width`, `height`, `planes`,
  `bits_per_pixel`, `compression`, `image_size`, `x_pixels_per_m`,
  `y_pixels_per_m`, `colors_used`, `important_colors`).
- `read_pixel_rows(stream, header, info_header)` seeks to `header.offset` and
  returns `height` rows of `width` `Pixel` values each, in the order they
  appear in the file. Each pixel is read as blue, green, red bytes. After each
  row it skips `(width * 3) % 4` bytes, which matches the row padding of the
  format when the width is even.
- `copy_headers(out, source, header, info_header)` rewinds `source` and copies
  everything before the pixel data to `out`.
- `Pixel` holds `red`, `green` and `blue`. `str(pixel)` gives
  `(r, g, b)` in decimal and `pixel.hex_str()` gives the same in lower-case
  hexadecimal. Both header classes also have a readable `str()`.
- `BitmapError` is raised for a wrong signature, for a stream that ends too
  early, and for an offset that lies inside the headers.

### `bmpgray.filters`

`write_pixel_rows(out, rows, transform)` writes each row through `transform`
and pads it with zero bytes to a multiple of four. A transform is any function
that takes a `Pixel` and returns the three bytes to write, in blue, green, red
order. The ones provided are:

- `grayscale`: the luminance in all three channels;
- `red_channel`, `green_channel` and `blue_channel`: keep one channel and
  set the others to zero;
- `invert`: every channel becomes `255 - value`;
- `swap_red_blue`: red and blue are exchanged.

`format_hex(value)` formats an integer as 32-bit lower-case hexadecimal, so
negative numbers wrap, for example `format_hex(-1) == "ffffffff"`.

## What it does not do

- The command only writes grayscale. The other transforms are available from
  Python, not from the command line.
- `bits_per_pixel` and `compression` are read but never checked. Palette,
  16-bit, 32-bit and compressed images are not supported and will not be
  converted correctly.
- Rows of odd width are not read correctly, because the bytes skipped after
  each row do not match the padding in that case.