"""Split Turtle files into chunks of a fixed number of statements.

Every output file repeats the directives (``@prefix`` and the like)
seen so far, so each chunk stays self-contained.
"""
from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from rdfsnips.scanner import iter_statements

__all__ = ["TurtleSplitter", "split_text", "main"]

_ULONG = 1 << 64
_NUMBER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


class TurtleSplitter:
    """Write statements into files named PREFIX0000, PREFIX0001, ..."""

    def __init__(self, prefix: str = "x", statements_per_file: int = 1000) -> None:
        self.prefix = prefix
        self.statements_per_file = statements_per_file
        self.files: list[str] = []
        self._file_index = 0
        self._in_file = 0
        self._out: TextIO | None = None
        self._directives: list[str] = []
        self._pending = ""

    def __enter__(self) -> TurtleSplitter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _open_next(self) -> TextIO:
        path = f"{self.prefix}{self._file_index:04d}"
        self._file_index += 1
        out = open(path, "w", encoding="utf-8", errors="surrogateescape", newline="")
        self.files.append(path)
        if self._pending:
            out.write(self._pending)
            self._pending = ""
        self._out = out
        return out

    def feed(self, statement: str) -> None:
        """Write one statement (or directive), starting a new file as needed."""
        if not statement:
            return
        out = self._out if self._out is not None else self._open_next()

        if statement.startswith("@"):
            piece = statement + "\n"
            self._directives.append(piece)
        else:
            piece = "\n" + statement + "\n"
            self._in_file += 1
        out.write(piece)

        if self._in_file >= self.statements_per_file:
            out.close()
            self._out = None
            self._in_file = 0
            self._pending = "".join(self._directives)

    def close(self) -> None:
        """Finish the current file and forget the cached directives.

        File numbering and the running statement count carry on.
        """
        if self._out is not None:
            self._out.close()
            self._out = None
        self._pending = ""
        self._directives.clear()


def split_text(text: str, splitter: TurtleSplitter) -> int:
    """Feed every statement of TEXT to SPLITTER, close it, return the count fed."""
    fed = 0
    try:
        for statement in iter_statements(text):
            splitter.feed(statement)
            fed += 1
    finally:
        splitter.close()
    return fed


def _parse_count(text: str) -> int:
    """Read an unsigned number the way C's strtoul with base 0 does."""
    found = _NUMBER.match(text)
    if not found:
        return 0
    sign, digits = found.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    if sign == "-":
        value = (-value) % _ULONG
    return value


def _read(name: str | None) -> str:
    if name is None:
        data = sys.stdin.buffer.read()
    else:
        with open(name, "rb") as handle:
            data = handle.read()
    return data.decode("utf-8", errors="surrogateescape")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ttl-split", description="Split Turtle files into smaller files."
    )
    parser.add_argument(
        "-n",
        "--statements",
        type=_parse_count,
        default=1000,
        metavar="N",
        help="number of statements per output file (default 1000)",
    )
    parser.add_argument(
        "-p", "--prefix", default="x", help="prefix of the output file names (default x)"
    )
    parser.add_argument("files", nargs="*", metavar="FILE")
    args = parser.parse_args(argv)

    splitter = TurtleSplitter(args.prefix, args.statements)
    rc = 0
    for name in args.files or [None]:
        try:
            text = _read(name)
        except OSError:
            rc += 1
            continue
        try:
            split_text(text, splitter)
        except OSError as exc:
            print(f"Error: cannot write output: {exc.strerror or exc}", file=sys.stderr)
            rc += 1
    return rc


if __name__ == "__main__":
    sys.exit(main())