"""Show the numbers of an image on the screen, one window at a time."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from grayworks.bmpheaders import BmpError
from grayworks.bmpimage import read_image_array

SCREEN_HEIGHT = 20
SCREEN_WIDTH = 15
ROW_STEP = (3 * SCREEN_HEIGHT) // 4
COLUMN_STEP = (3 * SCREEN_WIDTH) // 4

_PROMPT = "\n x=quit j=down k=up h=left l=right\nEnter choice and press Enter:  "


def bounds_problems(il: int, ie: int, height: int, width: int) -> list[str]:
    """List why a window starting at (il, ie) does not fit in the image."""
    problems = []
    if il < 0:
        problems.append(f"il={il} too small")
    if ie < 0:
        problems.append(f"ie={ie} too small")
    if il + SCREEN_HEIGHT > height:
        problems.append(f"ll={il + SCREEN_HEIGHT} too big")
    if ie + SCREEN_WIDTH > width:
        problems.append(f"le={ie + SCREEN_WIDTH} too big")
    return problems


def is_in_image(il: int, ie: int, height: int, width: int) -> bool:
    """Tell whether a window starting at (il, ie) fits in the image."""
    return not bounds_problems(il, ie, height, width)


def render_screen(image: Sequence[Sequence[int]], il: int, ie: int) -> str:
    """Render the window of image numbers whose labels start at (il-1, ie-1).

    Cells that fall outside the image are left blank.
    """
    columns = range(ie - 1, ie - 1 + SCREEN_WIDTH)
    lines = ["     " + "".join(f"-{column:3d}" for column in columns)]
    for row_number in range(il - 1, il - 1 + SCREEN_HEIGHT):
        row = image[row_number] if 0 <= row_number < len(image) else ()
        cells = "".join(
            f"-{row[column]:3d}" if 0 <= column < len(row) else "-   "
            for column in columns
        )
        lines.append(f"{row_number:4d}>{cells}")
    return "\n".join(lines)


def apply_command(command: str, il: int, ie: int) -> Optional[tuple[int, int]]:
    """Move the window for one command; return None when the command is quit."""
    key = command[:1].lower()
    if key == "x":
        return None
    if key == "j":
        return il + ROW_STEP, ie
    if key == "k":
        return il - ROW_STEP, ie
    if key == "h":
        return il, ie - COLUMN_STEP
    if key == "l":
        return il, ie + COLUMN_STEP
    return il, ie


def main(argv: Sequence[str] | None = None) -> int:
    """Browse the numbers of an image: input-image il ie."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("usage: showi input-image il ie")
        return 0
    in_name = args[0]
    try:
        wanted = (int(args[1]), int(args[2]))
    except ValueError:
        print("ERROR il and ie must be whole numbers")
        return 1
    if not Path(in_name).exists():
        print(f"ERROR input file {in_name} does not exist")
        return 0
    try:
        image = read_image_array(in_name)
    except (OSError, BmpError) as error:
        print(f"ERROR {error}")
        return 1

    height = len(image)
    width = len(image[0]) if image else 0
    while True:
        problems = bounds_problems(*wanted, height, width)
        if problems:
            print("\n".join(problems))
        else:
            print(render_screen(image, *wanted))
        try:
            response = input(_PROMPT)
        except EOFError:
            break
        moved = apply_command(response, *wanted)
        if moved is None:
            break
        wanted = moved
    return 0