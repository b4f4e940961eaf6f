"""Reading and writing the pixel data of 8-bit grayscale BMP images."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence, Union

from grayworks.bmpheaders import (
    COLOR_TABLE_ENTRIES,
    COLOR_TABLE_OFFSET,
    BmpError,
    calculate_pad,
    create_bmp_file,
    is_a_bmp,
    read_bitmap_header,
    read_color_table,
    read_file_header,
)

PathLike = Union[str, Path]
Image = list[list[int]]


def flip_image(image: Sequence[Sequence[int]]) -> Image:
    """Return a copy of the image flipped about its horizontal mid-line."""
    return [list(row) for row in reversed(image)]


def _require_eight_bits(path: PathLike, bits: int) -> None:
    if bits != 8:
        raise BmpError(f"{path}: cannot handle {bits} bits per pixel, only 8")


def read_bmp_image(path: PathLike) -> Image:
    """Read the pixels of an 8-bit BMP file as rows of gray values, top row first.

    Each pixel is looked up in the colour table and its blue value is kept.
    """
    file_header = read_file_header(path)
    bitmap_header = read_bitmap_header(path)
    _require_eight_bits(path, bitmap_header.bitsperpixel)

    colors = bitmap_header.colorsused or COLOR_TABLE_ENTRIES
    table = read_color_table(path, colors)

    width = bitmap_header.width
    height = abs(bitmap_header.height)
    pad = calculate_pad(width)

    image: Image = []
    with open(path, "rb") as handle:
        handle.seek(file_header.bitmapoffset)
        for row_number in range(height):
            row = handle.read(width)
            if len(row) < width:
                raise BmpError(f"{path}: pixel data ends in row {row_number}")
            try:
                image.append([table[index][0] for index in row])
            except IndexError:
                raise BmpError(
                    f"{path}: pixel value outside the {colors}-entry colour table"
                ) from None
            if pad:
                handle.seek(pad, 1)

    if bitmap_header.height >= 0:
        image = flip_image(image)
    return image


def write_bmp_image(path: PathLike, image: Sequence[Sequence[int]]) -> None:
    """Write an image into an existing 8-bit BMP file of matching size.

    A gray-ramp colour table is written first, then the pixel rows; only the
    low byte of every value is stored.
    """
    file_header = read_file_header(path)
    bitmap_header = read_bitmap_header(path)
    _require_eight_bits(path, bitmap_header.bitsperpixel)

    width = bitmap_header.width
    height = abs(bitmap_header.height)
    if len(image) < height or any(len(row) < width for row in image[:height]):
        raise ValueError(
            f"image is smaller than the {height}x{width} pixels of {path}"
        )

    entries = min(bitmap_header.colorsused, COLOR_TABLE_ENTRIES)
    color_table = b"".join(bytes((gray, gray, gray, 0)) for gray in range(entries))

    if bitmap_header.height > 0:
        rows = [image[height - 1 - number] for number in range(height)]
    else:
        rows = [image[number] for number in range(height)]
    padding = bytes(calculate_pad(width))

    with open(path, "r+b") as handle:
        handle.seek(COLOR_TABLE_OFFSET)
        handle.write(color_table)
        handle.seek(file_header.bitmapoffset)
        for row in rows:
            handle.write(bytes(value & 0xFF for value in row[:width]))
            handle.write(padding)


def create_bmp_file_if_needed(in_path: PathLike, out_path: PathLike) -> bool:
    """Create ``out_path`` with the size of ``in_path`` unless it already exists.

    Returns True when a file was created.
    """
    if Path(out_path).exists():
        return False
    header = read_bitmap_header(in_path)
    create_bmp_file(out_path, header.height, header.width)
    return True


def get_image_size(path: PathLike) -> tuple[int, int]:
    """Return (rows, cols) of a BMP image."""
    if not is_a_bmp(path):
        raise BmpError(f"{path}: cannot find the size of this image")
    header = read_bitmap_header(path)
    return abs(header.height), header.width


def get_bits_per_pixel(path: PathLike) -> int:
    """Return the bits per pixel of a BMP image."""
    if not is_a_bmp(path):
        raise BmpError(f"{path}: cannot find the bits per pixel of this image")
    return read_bitmap_header(path).bitsperpixel


def read_image_array(path: PathLike) -> Image:
    """Read the pixels of any supported image file."""
    if is_a_bmp(path):
        return read_bmp_image(path)
    raise BmpError(f"could not read file {path}")


def write_image_array(path: PathLike, image: Sequence[Sequence[int]]) -> None:
    """Write pixels into any supported, already created image file."""
    if is_a_bmp(path):
        write_bmp_image(path, image)
        return
    raise BmpError(f"could not write file {path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Copy the pixels of one BMP image into another of the same size."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("testbmp in-file.bmp out-file.bmp")
        return 0

    in_name, out_name = args[0], args[1]
    try:
        rows, cols = get_image_size(in_name)
        print(f"Size of {in_name} rows={rows} cols={cols}")
        image = read_image_array(in_name)
        write_image_array(out_name, image)
    except (OSError, BmpError, ValueError) as error:
        print(f"ERROR {error}")
        return 1
    return 0