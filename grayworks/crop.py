"""Copy a rectangular part of an image into a new image file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from grayworks.bmpheaders import BmpError, create_bmp_file, is_a_bmp
from grayworks.bmpimage import read_image_array, write_image_array

_USAGE = (
    "usage: roundoff in-image out-image length width [il ie]\n"
    "\n"
    "       If you do not specify il ie they will be set to 0 0.\n"
    "       ll le will always be il+length and ie+width"
)


def crop_image(
    image: Sequence[Sequence[int]], length: int, width: int, il: int = 0, ie: int = 0
) -> list[list[int]]:
    """Return the ``length`` x ``width`` block whose top-left pixel is (il, ie)."""
    if length < 0 or width < 0:
        raise ValueError("length and width must not be negative")
    if il < 0 or ie < 0:
        raise ValueError(f"start ({il}, {ie}) lies outside the image")
    if il + length > len(image):
        raise ValueError(f"rows {il}..{il + length} run past the image")
    rows = image[il : il + length]
    if any(ie + width > len(row) for row in rows):
        raise ValueError(f"columns {ie}..{ie + width} run past the image")
    return [list(row[ie : ie + width]) for row in rows]


def main(argv: Sequence[str] | None = None) -> int:
    """Crop an image file: in-image out-image length width [il ie]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4 or 4 < len(args) < 6:
        print(_USAGE)
        return 0

    in_name, out_name = args[0], args[1]
    try:
        length, width = int(args[2]), int(args[3])
        il, ie = (int(args[4]), int(args[5])) if len(args) >= 6 else (0, 0)
    except ValueError:
        print("ERROR length, width, il and ie must be whole numbers")
        return 1

    if not Path(in_name).exists():
        print(f"ERROR input file {in_name} does not exist")
        return 0

    try:
        image = read_image_array(in_name)
        cropped = crop_image(image, length, width, il, ie)
        if is_a_bmp(in_name):
            create_bmp_file(out_name, length, width)
        write_image_array(out_name, cropped)
    except (OSError, BmpError, ValueError) as error:
        print(f"ERROR {error}")
        return 1
    return 0