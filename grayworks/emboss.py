"""Embossing of gray images with a family of 3x3 convolution masks."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from grayworks.bmpheaders import BmpError, create_bmp_file
from grayworks.bmpimage import (
    get_bits_per_pixel,
    get_image_size,
    read_image_array,
    write_image_array,
)

Mask = tuple[tuple[int, int, int], ...]

_MASKS: tuple[Mask, ...] = (
    ((-1, 0, 1), (-1, 1, 1), (-1, 0, 1)),
    ((0, 1, 1), (-1, 1, 1), (-1, -1, 0)),
    ((1, 1, 0), (1, 1, -1), (0, -1, -1)),
    ((1, 0, -1), (1, 1, -1), (1, 0, -1)),
    ((0, -1, -1), (1, 1, -1), (1, 1, 0)),
    ((-1, -1, -1), (0, 1, 0), (1, 1, 1)),
    ((-1, -1, 0), (-1, 1, 1), (0, 1, 1)),
    ((-1, 1, 1), (-1, 1, 1), (-1, 1, 1)),
    ((1, 1, 1), (-1, 1, 1), (-1, -1, 1)),
    ((1, 1, 1), (1, 1, -1), (1, -1, -1)),
    ((1, 1, -1), (1, 1, -1), (1, 1, -1)),
    ((1, -1, -1), (1, 1, -1), (1, 1, 1)),
    ((-1, -1, -1), (1, 1, 1), (1, 1, 1)),
    ((-1, -1, 1), (-1, 1, 1), (1, 1, 1)),
)

MASK_COUNT = len(_MASKS)
_THIRDED = range(7, 14)


def emboss_mask(kind: int) -> Mask:
    """Return the 3x3 emboss mask numbered 0 to 13."""
    if not 0 <= kind < MASK_COUNT:
        raise ValueError(f"emboss type must lie between 0 and {MASK_COUNT - 1}, not {kind}")
    return _MASKS[kind]


def emboss_convolution(
    image: Sequence[Sequence[int]], kind: int, bits_per_pixel: int = 8
) -> list[list[int]]:
    """Convolve the image with an emboss mask and return the new image.

    Border pixels are copied unchanged. Results are clipped to the range of
    the pixel depth (0..16 for 4 bits, otherwise 0..255); masks 7 to 13 then
    divide the result by three.
    """
    mask = emboss_mask(kind)
    ceiling = 16 if bits_per_pixel == 4 else 255
    result = [list(row) for row in image]
    rows = len(image)
    for i in range(1, rows - 1):
        cols = len(image[i])
        for j in range(1, cols - 1):
            total = sum(
                image[i + a][j + b] * weight
                for a, mask_row in enumerate(mask, start=-1)
                for b, weight in enumerate(mask_row, start=-1)
            )
            total = max(0, min(total, ceiling))
            if kind in _THIRDED:
                total //= 3
            result[i][j] = total
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Emboss an image file: in-file out-file type (0 thru 13)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("usage: xemboss in-file out-file type (0 thru 13)")
        return 0
    in_name, out_name = args[0], args[1]
    try:
        kind = int(args[2])
        emboss_mask(kind)
    except ValueError as error:
        print(f"ERROR {error}")
        return 1
    if not Path(in_name).exists():
        print(f"ERROR input file {in_name} does not exist")
        return 0
    try:
        rows, cols = get_image_size(in_name)
        bits = get_bits_per_pixel(in_name)
        image = read_image_array(in_name)
        create_bmp_file(out_name, rows, cols)
        write_image_array(out_name, emboss_convolution(image, kind, bits))
    except (OSError, BmpError, ValueError) as error:
        print(f"ERROR {error}")
        return 1
    return 0