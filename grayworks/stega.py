"""Hide one image inside another in the least significant bits of its pixels."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from grayworks.bmpheaders import BmpError, create_bmp_file
from grayworks.bmpimage import get_image_size, read_image_array, write_image_array

Image = list[list[int]]

_USAGE = (
    "Not enough parameters:\n"
    "\n"
    "stega -h cover-image-name message-image-name n\n"
    "       to hide the message image in the cover image\n"
    "                 or\n"
    "stega -u cover-image-name message-image-name n\n"
    "       to uncover the message image from the cover image"
)

MAX_BITS = 8


def is_odd(number: int) -> bool:
    """Tell whether a pixel value is odd, i.e. has its lowest bit set."""
    return number % 2 != 0


def _check_bits(n: int) -> None:
    if not 1 <= n <= MAX_BITS:
        raise ValueError(f"n must lie between 1 and {MAX_BITS}, not {n}")


def hide_image(
    cover: Sequence[Sequence[int]],
    message: Sequence[Sequence[int]],
    n: int,
    lsb: bool = True,
) -> Image:
    """Return a copy of ``cover`` carrying ``message`` in its lowest bits.

    Every message pixel is spread over ``n`` neighbouring cover pixels of the
    same row, most significant of the ``n`` bits first. The cover must have
    as many rows as the message and be exactly ``n`` times as wide. The
    ``lsb`` flag is accepted for symmetry with :func:`uncover_image`; the bit
    written is always the lowest bit of each cover pixel.
    """
    _check_bits(n)
    if len(cover) != len(message):
        raise ValueError(
            f"message has {len(message)} rows but cover has {len(cover)}"
        )
    result: Image = []
    for cover_row, message_row in zip(cover, message):
        if len(cover_row) != n * len(message_row):
            raise ValueError("cover image is not n times as wide as the message")
        new_row: list[int] = []
        for position, sample in enumerate(message_row):
            chunk = cover_row[position * n : (position + 1) * n]
            for offset, value in enumerate(chunk):
                bit = (sample >> (n - 1 - offset)) & 1
                new_row.append(value | 1 if bit else value & ~1)
        result.append(new_row)
    return result


def uncover_image(
    cover: Sequence[Sequence[int]], n: int, lsb: bool = True
) -> Image:
    """Pull the hidden message out of the lowest bits of ``cover``.

    The message is as long as the cover and ``n`` times narrower. With
    ``lsb`` set, the j-th cover pixel of a group gives bit ``7 - j``;
    otherwise it gives bit ``8 - n + j``.
    """
    _check_bits(n)
    message: Image = []
    for cover_row in cover:
        width = len(cover_row) // n
        row: list[int] = []
        for position in range(width):
            chunk = cover_row[position * n : (position + 1) * n]
            value = 0
            for j, pixel in enumerate(chunk):
                if is_odd(pixel):
                    shift = j if lsb else n - 1 - j
                    value |= 0x80 >> shift
            row.append(value)
        message.append(row)
    return message


def _hide(cover_name: str, message_name: str, n: int) -> int:
    for name in (cover_name, message_name):
        if not Path(name).exists():
            print(f"{name} does not exist, quitting")
            return 1
    clength, cwidth = get_image_size(cover_name)
    mlength, mwidth = get_image_size(message_name)
    if mlength != clength:
        print("mlength NOT EQUAL TO clength\nQUITTING")
        return 2
    if cwidth != n * mwidth:
        print("Cover image not wide enough\nQUITTING")
        return 3
    cover = read_image_array(cover_name)
    message = read_image_array(message_name)
    write_image_array(cover_name, hide_image(cover, message, n, lsb=True))
    return 0


def _uncover(cover_name: str, message_name: str, n: int) -> int:
    if not Path(cover_name).exists():
        print(f"{cover_name} does not exist, quitting")
        return 1
    clength, cwidth = get_image_size(cover_name)
    create_bmp_file(message_name, clength, cwidth // n)
    cover = read_image_array(cover_name)
    write_image_array(message_name, uncover_image(cover, n, lsb=True))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Hide (-h) or uncover (-u) a message image: mode cover message n."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(_USAGE)
        return 0
    mode, cover_name, message_name = args[0], args[1], args[2]
    if mode not in ("-h", "-u"):
        print("Neither hiding nor uncovering\nSo, quitting")
        return 1
    try:
        n = int(args[3])
        _check_bits(n)
    except ValueError as error:
        print(f"ERROR {error}")
        return 1
    try:
        if mode == "-h":
            return _hide(cover_name, message_name, n)
        return _uncover(cover_name, message_name, n)
    except (OSError, BmpError, ValueError) as error:
        print(f"ERROR {error}")
        return 1