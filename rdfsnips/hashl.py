"""Print a 128-bit MurmurHash3 of every input line."""
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from rdfsnips.murmur import hex_digest

__all__ = ["line_hash", "hash_lines", "main"]


def line_hash(line: bytes | str) -> str:
    """Hash LINE without its trailing newline."""
    if isinstance(line, str):
        line = line.encode("utf-8")
    if line.endswith(b"\n"):
        line = line[:-1]
    return hex_digest(line)


def hash_lines(stream: Iterable[bytes]) -> Iterator[str]:
    """Yield the hash of every line of STREAM."""
    for line in stream:
        yield line_hash(line)


def _emit(stream: Iterable[bytes], out: TextIO) -> None:
    for digest in hash_lines(stream):
        out.write(digest + "\n")


def _report(name: str, exc: OSError) -> None:
    message = f"Error: cannot open file `{name}'"
    if exc.strerror:
        message += f": {exc.strerror}"
    print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hashl", description="Print a 128-bit MurmurHash3 of every input line."
    )
    parser.add_argument("files", nargs="*", metavar="FILE")
    args = parser.parse_args(argv)

    out = sys.stdout
    if not args.files:
        _emit(sys.stdin.buffer, out)
        out.flush()
        return 0

    rc = 0
    for name in args.files:
        try:
            handle = open(name, "rb")
        except OSError as exc:
            _report(name, exc)
            rc = 1
            continue
        with handle:
            _emit(handle, out)
    out.flush()
    return rc


if __name__ == "__main__":
    sys.exit(main())