"""Decode percent-encoded characters line by line."""
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO

__all__ = ["has_percent", "unquote", "unquote_line", "unquote_lines", "main"]

_HEX = frozenset(b"0123456789ABCDEFabcdef")
_PRINTABLE_HIGH = frozenset(b"23456789ABCDEFabcdef")
_NON_PRINTABLE = (b"FE", b"FF", b"fe", b"ff")


def _first_digits(only_printable: bool) -> frozenset[int]:
    return _PRINTABLE_HIGH if only_printable else _HEX


def has_percent(data: bytes, only_printable: bool = False) -> bool:
    """Tell whether DATA holds a percent escape that would be decoded.

    With ONLY_PRINTABLE, escapes below ``%20`` and ``%FE``/``%FF`` (in
    matching case) do not count.
    """
    data = bytes(data)
    first = _first_digits(only_printable)
    size = len(data)
    i = 0
    while True:
        i = data.find(b"%", i)
        if i < 0:
            i = size
        i += 1
        if i < size and data[i] in first:
            i += 1
            if (
                i < size
                and data[i] in _HEX
                and (not only_printable or data[i - 1 : i + 1] not in _NON_PRINTABLE)
            ):
                return True
        if i >= size:
            return False


def unquote(data: bytes, only_printable: bool = False) -> bytes:
    """Decode one level of percent escapes in DATA.

    With ONLY_PRINTABLE, escapes whose high digit is 0 or 1 are kept.
    """
    data = bytes(data)
    first = _first_digits(only_printable)
    size = len(data)
    out = bytearray()
    i = 0
    while i < size:
        j = data.find(b"%", i)
        if j < 0:
            out += data[i:]
            break
        out += data[i:j]
        i = j
        if i + 2 < size and data[i + 1] in first and data[i + 2] in _HEX:
            out.append(int(data[i + 1 : i + 3], 16))
            i += 3
        else:
            out.append(data[i])
            i += 1
    return bytes(out)


def unquote_line(line: bytes, only_printable: bool = False, recursive: bool = False) -> bytes:
    """Decode LINE (trailing newline dropped), repeatedly if RECURSIVE."""
    line = bytes(line)
    if line.endswith(b"\n"):
        line = line[:-1]
    if has_percent(line, only_printable):
        line = unquote(line, only_printable)
        while recursive and has_percent(line, only_printable):
            line = unquote(line, only_printable)
    return line


def unquote_lines(
    stream: Iterable[bytes], only_printable: bool = False, recursive: bool = False
) -> Iterator[bytes]:
    """Yield every decoded line of STREAM, each ending in a newline."""
    for line in stream:
        yield unquote_line(line, only_printable, recursive) + b"\n"


def _emit(stream: Iterable[bytes], out: BinaryIO, only_printable: bool, recursive: bool) -> None:
    for line in unquote_lines(stream, only_printable, recursive):
        out.write(line)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="unqpc", description="Decode percent-encoded characters line by line."
    )
    parser.add_argument(
        "--only-printable",
        action="store_true",
        help="leave escapes of control characters and %%FE/%%FF alone",
    )
    parser.add_argument(
        "--recursive", action="store_true", help="decode until no escapes are left"
    )
    parser.add_argument("files", nargs="*", metavar="FILE")
    args = parser.parse_args(argv)

    out = sys.stdout.buffer
    if not args.files:
        _emit(sys.stdin.buffer, out, args.only_printable, args.recursive)
        out.flush()
        return 0

    rc = 0
    for name in args.files:
        try:
            handle = open(name, "rb")
        except OSError as exc:
            message = f"Error: cannot open file `{name}'"
            if exc.strerror:
                message += f": {exc.strerror}"
            print(message, file=sys.stderr)
            rc = 1
            continue
        with handle:
            _emit(handle, out, args.only_printable, args.recursive)
    out.flush()
    return rc


if __name__ == "__main__":
    sys.exit(main())