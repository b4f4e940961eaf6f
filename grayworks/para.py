"""Fill plain text into paragraphs of even width."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Iterator, Sequence, TextIO

CHARS_PER_LINE = 85
LEFT_MARGIN = 0
RIGHT_MARGIN = 20
LINE_WIDTH = CHARS_PER_LINE - (RIGHT_MARGIN + LEFT_MARGIN)
VERSION = "Para Version 1 - January 1999"

_WORD = re.compile(r"([^ ]+)( *)")


def _is_blank(line: str) -> bool:
    return line.rstrip("\r\n") == ""


def split_words(lines: Iterable[str]) -> list[str]:
    """Split lines of text into words, each keeping its trailing space.

    A word followed by two or more spaces keeps two of them, so that the
    wider gap after a sentence survives; every other word ends in one space.
    """
    words: list[str] = []
    for line in lines:
        text = line.rstrip("\r\n")
        for match in _WORD.finditer(text):
            gap = "  " if len(match.group(2)) >= 2 else " "
            words.append(match.group(1) + gap)
    return words


def read_paragraphs(stream: Iterable[str]) -> Iterator[list[str]]:
    """Yield the words of each paragraph; paragraphs are split by blank lines."""
    block: list[str] = []
    for line in stream:
        if _is_blank(line):
            words = split_words(block)
            if words:
                yield words
            block = []
        else:
            block.append(line)
    words = split_words(block)
    if words:
        yield words


def format_paragraph(words: Sequence[str]) -> str:
    """Fill words into lines no wider than ``LINE_WIDTH`` and end with a blank line.

    A word longer than a whole line is put on a line of its own.
    """
    lines: list[str] = []
    current = " " * LEFT_MARGIN
    for word in words:
        if current.strip() and len(current) + len(word) > LINE_WIDTH:
            lines.append(current)
            current = " " * LEFT_MARGIN
        current += word
    lines.append(current)
    return "".join(line + "\n" for line in lines) + "\n"


def format_stream(source: Iterable[str], target: TextIO) -> None:
    """Read text from ``source`` and write it, paragraph by paragraph, to ``target``."""
    for words in read_paragraphs(source):
        target.write(format_paragraph(words))


def main(argv: Sequence[str] | None = None) -> int:
    """Format a text file: in-file out-file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("usage: para in-file out-file")
        print(VERSION)
        return 1
    in_name, out_name = args
    try:
        source = open(in_name, encoding="utf-8")
    except OSError:
        print(f"ERROR Could not open file {in_name}")
        return 2
    with source:
        try:
            target = open(out_name, "w", encoding="utf-8")
        except OSError:
            print(f"ERROR Could not open file {out_name}")
            return 2
        with target:
            format_stream(source, target)
    return 0