"""Stamping block-letter labels into gray images."""

from __future__ import annotations

from typing import Iterable, MutableSequence, Sequence

from grayworks.glyphs import BLANK, GLYPH_COLS, GLYPH_ROWS, glyph

IE_START = 7
LINE_LIMIT = 8


def copy_glyph_into_image(
    pattern: Sequence[Sequence[int]],
    image: Sequence[MutableSequence[int]],
    il: int,
    ie: int,
) -> None:
    """Copy a glyph pattern into ``image`` with its top-left corner at (il, ie).

    The image is changed in place. Raises ValueError when the pattern does
    not fit entirely inside the image; nothing is written in that case.
    """
    if il < 0 or ie < 0:
        raise ValueError(f"position ({il}, {ie}) lies outside the image")
    if il + len(pattern) > len(image):
        raise ValueError(f"rows {il}..{il + len(pattern)} run past the image")
    for offset, pattern_row in enumerate(pattern):
        if ie + len(pattern_row) > len(image[il + offset]):
            raise ValueError(
                f"columns {ie}..{ie + len(pattern_row)} run past the image"
            )
    for offset, pattern_row in enumerate(pattern):
        image[il + offset][ie : ie + len(pattern_row)] = list(pattern_row)


def draw_words(
    image: Sequence[MutableSequence[int]],
    words: Iterable[str],
    il: int,
    ie: int,
) -> tuple[int, int]:
    """Draw words into ``image`` starting at (il, ie), each followed by a blank.

    Characters without a pattern leave the image untouched but still take up
    a cell. After nine cells the text moves down one glyph height plus one
    row and back to column ``IE_START``. The image is changed in place; the
    position of the next free cell is returned.
    """
    counter = 0
    for word in words:
        for pattern in [*(glyph(char) for char in word), BLANK]:
            if pattern is not None:
                copy_glyph_into_image(pattern, image, il, ie)
            ie += GLYPH_COLS
            counter += 1
            if counter > LINE_LIMIT:
                ie = IE_START
                il += GLYPH_ROWS + 1
                counter = 0
    return il, ie