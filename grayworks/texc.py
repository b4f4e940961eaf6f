"""Escape TeX special characters in a text file."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

SPECIAL_CHARACTERS = frozenset("_$#&{}^~%\\")


def escape_line(line: str) -> str:
    """Put a backslash before every TeX special character of one line.

    The text up to the first newline is kept and always ends with a newline.
    """
    text = line.split("\n", 1)[0]
    escaped = "".join(
        "\\" + char if char in SPECIAL_CHARACTERS else char for char in text
    )
    return escaped + "\n"


def insert_slash(source: Iterable[str], target: TextIO) -> None:
    """Write every line of ``source`` to ``target`` with its specials escaped."""
    for line in source:
        target.write(escape_line(line))


def main(argv: Sequence[str] | None = None) -> int:
    """Escape TeX specials: input_file output_file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("usage: texc input_file output_file")
        return 1
    in_name, out_name = args
    try:
        source = open(in_name, encoding="utf-8")
    except OSError:
        print(f"texc: error opening file {in_name}")
        return 1
    with source:
        try:
            target = open(out_name, "w", encoding="utf-8")
        except OSError:
            print(f"texc: error opening file {out_name}")
            return 1
        with target:
            insert_slash(source, target)
    return 0