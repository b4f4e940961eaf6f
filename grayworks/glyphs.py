"""Block-letter patterns, 9 rows by 7 columns, for labelling images."""

from __future__ import annotations

from typing import Optional

GLYPH_ROWS = 9
GLYPH_COLS = 7
INK = 200

Glyph = tuple[tuple[int, ...], ...]

_PATTERNS: dict[str, tuple[str, ...]] = {
    ".": (".......", ".......", ".......", ".......", ".......",
          ".......", "..##...", "..##...", "......."),
    ",": (".......", ".......", ".......", ".......", ".......",
          ".......", "..##...", "..##...", "...#..."),
    "!": (".......", "...#...", "...#...", "...#...", "...#...",
          "...#...", ".......", "...#...", "......."),
    " ": (".......", ".......", ".......", ".......", ".......",
          ".......", ".......", ".......", "......."),
    "a": (".......", "...#...", "..#.#..", ".#...#.", ".#####.",
          ".#...#.", ".#...#.", ".#...#.", "......."),
    "b": (".......", ".####..", ".#...#.", ".#...#.", ".####..",
          ".#...#.", ".#...#.", ".####..", "......."),
    "c": (".......", "..###..", ".#...#.", ".#.....", ".#.....",
          ".#.....", ".#...#.", "..###..", "......."),
    "d": (".......", ".####..", ".#...#.", ".#...#.", ".#...#.",
          ".#...#.", ".#...#.", ".####..", "......."),
    "e": (".......", ".#####.", ".#.....", ".#.....", ".####..",
          ".#.....", ".#.....", ".#####.", "......."),
    "f": (".......", ".#####.", ".#.....", ".#.....", ".####..",
          ".#.....", ".#.....", ".#.....", "......."),
    "g": (".......", "..###..", ".#...#.", ".#.....", ".#..##.",
          ".#...#.", ".#...#.", "..####.", "......."),
    "h": (".......", ".#...#.", ".#...#.", ".#...#.", ".#####.",
          ".#...#.", ".#...#.", ".#...#.", "......."),
    "i": (".......", ".#####.", "...#...", "...#...", "...#...",
          "...#...", "...#...", ".#####.", "......."),
    "j": (".......", ".#####.", "...#...", "...#...", "...#...",
          ".#.#...", ".#.#...", "..#....", "......."),
    "k": (".......", ".#...#.", ".#..#..", ".#.#...", ".##....",
          ".#.#...", ".#..#..", ".#...#.", "......."),
    "l": (".......", ".#.....", ".#.....", ".#.....", ".#.....",
          ".#.....", ".#.....", ".#####.", "......."),
    "m": (".......", ".#...#.", ".##.##.", ".#.#.#.", ".#.#.#.",
          ".#.#.#.", ".#.#.#.", ".#.#.#.", "......."),
    "n": (".......", ".#...#.", ".##..#.", ".#.#.#.", ".#.#.#.",
          ".#..##.", ".#..##.", ".#...#.", "......."),
    "o": (".......", "..###..", ".#...#.", ".#...#.", ".#...#.",
          ".#...#.", ".#...#.", "..###..", "......."),
    "p": (".......", ".####..", ".#...#.", ".#...#.", ".####..",
          ".#.....", ".#.....", ".#.....", "......."),
    "q": (".......", "..###..", ".#...#.", ".#...#.", ".#...#.",
          ".#.#.#.", ".#..##.", "..####.", "......."),
    "r": (".......", ".####..", ".#...#.", ".#...#.", ".####..",
          ".#...#.", ".#...#.", ".#...#.", "......."),
    "s": (".......", "..###..", ".#...#.", ".#.....", "..###..",
          ".....#.", ".#...#.", "..###..", "......."),
    "t": (".......", ".#####.", "...#...", "...#...", "...#...",
          "...#...", "...#...", "...#...", "......."),
    "u": (".......", ".#...#.", ".#...#.", ".#...#.", ".#...#.",
          ".#...#.", ".#...#.", "..###..", "......."),
    "v": (".......", ".#...#.", ".#...#.", ".#...#.", "..#.#..",
          "..#.#..", "..#.#..", "...#...", "......."),
    "w": (".......", ".#...#.", ".#.#.#.", ".#.#.#.", ".#.#.#.",
          "..###..", "..###..", "..#.#..", "......."),
    "x": (".......", ".#...#.", ".#...#.", "..#.#..", "...#...",
          "..#.#..", ".#...#.", ".#...#.", "......."),
    "y": (".......", ".#...#.", ".#...#.", "..#.#..", "...#...",
          "...#...", "...#...", "...#...", "......."),
    "z": (".......", ".#####.", ".....#.", "....#..", "...#...",
          "..#....", ".#.....", ".#####.", "......."),
    "1": (".......", "...#...", "..##...", ".#.#...", "...#...",
          "...#...", "...#...", ".#####.", "......."),
    "2": (".......", "..###..", ".#...#.", "....#..", "...#...",
          "..#....", ".#.....", ".#####.", "......."),
    "3": (".......", "..###..", ".#...#.", ".....#.", "..###..",
          ".....#.", ".#...#.", "..###..", "......."),
    "4": (".......", ".#.#...", ".#.#...", ".#.#...", ".#####.",
          "...#...", "...#...", "...#...", "......."),
    "5": (".......", ".#####.", ".#.....", ".#.....", ".####..",
          ".....#.", ".#...#.", "..###..", "......."),
    "6": (".......", "..###..", ".#...#.", ".#.....", ".####..",
          ".#...#.", ".#...#.", "..###..", "......."),
    "7": (".......", ".#####.", ".....#.", ".....#.", "....#..",
          "...#...", "..#....", ".#.....", "......."),
    "8": (".......", "..###..", ".#...#.", ".#...#.", "..###..",
          ".#...#.", ".#...#.", "..###..", "......."),
    "9": (".......", "..###..", ".#...#.", ".#...#.", "..####.",
          ".....#.", ".....#.", ".....#.", "......."),
    "0": (".......", "..###..", ".#..##.", ".#..##.", ".#.#.#.",
          ".#.#.#.", ".##..#.", "..###..", "......."),
}


def _to_glyph(rows: tuple[str, ...]) -> Glyph:
    return tuple(tuple(INK if cell == "#" else 0 for cell in row) for row in rows)


_GLYPHS: dict[str, Glyph] = {char: _to_glyph(rows) for char, rows in _PATTERNS.items()}

BLANK: Glyph = _GLYPHS[" "]


def glyph(char: str) -> Optional[Glyph]:
    """Return the 9x7 pattern for a lower-case letter, digit, '.', ',', '!' or space.

    Returns None for any character that has no pattern.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _GLYPHS.get(char)