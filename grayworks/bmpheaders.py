"""Reading and creating the headers of 8-bit grayscale BMP files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

BMP_MAGIC = 0x4D42
FILE_HEADER_SIZE = 14
BITMAP_HEADER_SIZE = 40
COLOR_TABLE_OFFSET = FILE_HEADER_SIZE + BITMAP_HEADER_SIZE
COLOR_TABLE_ENTRIES = 256

_FILE_HEADER = struct.Struct("<HIhhI")
_BITMAP_HEADER = struct.Struct("<IiiHHIIIIII")


class BmpError(Exception):
    """Raised when a BMP file cannot be read or has the wrong layout."""


@dataclass
class BmpFileHeader:
    """The 14-byte header at the start of every BMP file."""

    filetype: int = BMP_MAGIC
    filesize: int = 0
    reserved1: int = 0
    reserved2: int = 0
    bitmapoffset: int = 0

    def describe(self) -> str:
        """Return a short human-readable summary of the header."""
        return "\n".join(
            [
                f"file type {self.filetype:x}",
                f"file size {self.filesize}",
                f"bit map offset {self.bitmapoffset}",
            ]
        )

    def pack(self) -> bytes:
        return _FILE_HEADER.pack(
            self.filetype,
            self.filesize,
            self.reserved1,
            self.reserved2,
            self.bitmapoffset,
        )


@dataclass
class BitmapHeader:
    """The 40-byte bitmap information header that follows the file header."""

    size: int = BITMAP_HEADER_SIZE
    width: int = 0
    height: int = 0
    planes: int = 1
    bitsperpixel: int = 8
    compression: int = 0
    sizeofbitmap: int = 0
    horzres: int = 300
    vertres: int = 300
    colorsused: int = COLOR_TABLE_ENTRIES
    colorsimp: int = COLOR_TABLE_ENTRIES

    def describe(self) -> str:
        """Return a short human-readable summary of the header."""
        return "\n".join(
            [
                f"width {self.width}",
                f"height {self.height}",
                f"planes {self.planes}",
                f"bitsperpixel {self.bitsperpixel}",
                f"colorsused {self.colorsused}",
                f"colorsimp {self.colorsimp}",
            ]
        )

    def pack(self) -> bytes:
        return _BITMAP_HEADER.pack(
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bitsperpixel,
            self.compression,
            self.sizeofbitmap,
            self.horzres,
            self.vertres,
            self.colorsused,
            self.colorsimp,
        )


def calculate_pad(width: int) -> int:
    """Return the bytes of padding that end each pixel row of the given width."""
    remainder = width % 4
    return 0 if remainder == 0 else 4 - remainder


def _read_exact(path: PathLike, offset: int, count: int) -> bytes:
    with open(path, "rb") as handle:
        handle.seek(offset)
        data = handle.read(count)
    if len(data) < count:
        raise BmpError(
            f"{path}: expected {count} bytes at offset {offset}, got {len(data)}"
        )
    return data


def read_file_header(path: PathLike) -> BmpFileHeader:
    """Read the 14-byte file header of a BMP file."""
    data = _read_exact(path, 0, FILE_HEADER_SIZE)
    return BmpFileHeader(*_FILE_HEADER.unpack(data))


def read_bitmap_header(path: PathLike) -> BitmapHeader:
    """Read the 40-byte bitmap header that follows the file header."""
    data = _read_exact(path, FILE_HEADER_SIZE, BITMAP_HEADER_SIZE)
    return BitmapHeader(*_BITMAP_HEADER.unpack(data))


def read_color_table(path: PathLike, size: int) -> list[tuple[int, int, int]]:
    """Read ``size`` colour-table entries as (blue, green, red) tuples."""
    data = _read_exact(path, COLOR_TABLE_OFFSET, size * 4)
    return [
        (blue, green, red)
        for blue, green, red, _unused in struct.iter_unpack("<4B", data)
    ]


def create_bmp_file(
    path: PathLike, height: int, width: int
) -> tuple[BmpFileHeader, BitmapHeader]:
    """Create an 8-bit BMP file of the given size filled with zeros.

    The colour table is written blank. Returns the two headers written.
    """
    pad = calculate_pad(width)
    bitmap_header = BitmapHeader(
        width=width,
        height=height,
        sizeofbitmap=abs(height) * (width + pad),
    )
    offset = FILE_HEADER_SIZE + bitmap_header.size + bitmap_header.colorsused * 4
    file_header = BmpFileHeader(
        filetype=BMP_MAGIC,
        filesize=offset + bitmap_header.sizeofbitmap,
        reserved1=0,
        reserved2=0,
        bitmapoffset=offset,
    )
    with open(path, "wb") as handle:
        handle.write(file_header.pack())
        handle.write(bitmap_header.pack())
        handle.write(bytes(COLOR_TABLE_ENTRIES * 4))
        handle.write(bytes(bitmap_header.sizeofbitmap))
    return file_header, bitmap_header


def is_a_bmp(path: PathLike) -> bool:
    """Tell whether the file name holds ".bmp" and the file has the BMP magic."""
    if ".bmp" not in str(path):
        return False
    try:
        header = read_file_header(path)
    except (OSError, BmpError):
        return False
    return header.filetype == BMP_MAGIC