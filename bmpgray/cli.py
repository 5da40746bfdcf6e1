"""Command that writes a grayscale copy of a 24-bit bitmap."""

from __future__ import annotations

import sys

from bmpgray.bitmap import (
    BitmapError,
    copy_headers,
    read_bitmap_header,
    read_bitmap_info_header,
    read_pixel_rows,
)
from bmpgray.filters import grayscale, write_pixel_rows


def main(argv: list[str] | None = None) -> int:
    """Convert the bitmap named first into a grayscale bitmap named second."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(
            "Invalid syntax: must provide source bitmap and output filename!",
            file=sys.stderr,
        )
        return 1
    source_name, output_name = args[0], args[1]

    try:
        source = open(source_name, "rb")
    except OSError:
        print("Unable to open file")
        return 1

    with source:
        try:
            header = read_bitmap_header(source)
            info_header = read_bitmap_info_header(source)
            rows = read_pixel_rows(source, header, info_header)
            with open(output_name, "wb") as out:
                copy_headers(out, source, header, info_header)
                write_pixel_rows(out, rows, grayscale)
        except BitmapError as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())