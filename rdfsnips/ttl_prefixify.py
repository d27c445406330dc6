"""Rewrite full IRIs in Turtle files as prefixed names.

A fixed set of well-known namespaces is always known; ``@prefix``
directives met in the input add more.  Every output starts with the
default prefix declarations.
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from rdfsnips.scanner import iter_statements

__all__ = ["PrefixTable", "prefixify_text", "main"]

_WHITESPACE = " \t\n\v\f\r"

_DEFAULT_PREFIXES = (
    ("foaf", "http://xmlns.com/foaf/0.1/"),
    ("ldp", "http://www.w3.org/ns/ldp#"),
    ("owl", "http://www.w3.org/2002/07/owl#"),
    ("rdf", "http://www.w3.org/1999/02/22-rdf-syntax-ns#"),
)


class PrefixTable:
    """Ordered mapping of prefix names to namespace IRIs."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = dict(_DEFAULT_PREFIXES)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._entries

    def add(self, directive: str) -> bool:
        """Register the prefix declared by DIRECTIVE.

        Return True if it was added and False if a prefix of that name
        is already known (whatever its IRI).  Raise ValueError if
        DIRECTIVE is not a well-formed ``@prefix`` declaration.
        """
        if not directive.startswith(("@prefix", "@PREFIX")):
            raise ValueError(f"not a prefix directive: {directive!r}")
        if len(directive) < 8 or directive[7] not in _WHITESPACE:
            raise ValueError(f"not a prefix directive: {directive!r}")

        start = 8
        while start < len(directive) and directive[start] in _WHITESPACE:
            start += 1
        colon = directive.find(":", start)
        if colon < 0:
            raise ValueError(f"prefix directive without a colon: {directive!r}")
        prefix = directive[start:colon].rstrip(_WHITESPACE)

        opening = directive.find("<", colon)
        if opening < 0:
            raise ValueError(f"prefix directive without an IRI: {directive!r}")
        closing = directive.find(">", opening)
        if closing < 0:
            raise ValueError(f"prefix directive with an unterminated IRI: {directive!r}")
        namespace = directive[opening + 1 : closing]

        if prefix in self._entries:
            return False
        self._entries[prefix] = namespace
        return True

    def substitute(self, statement: str) -> str:
        """Replace every ``<IRI>`` in a known namespace by ``prefix:local``.

        The first matching namespace in table order wins.  A matching IRI
        without a closing ``>`` makes the whole statement come back empty.
        """
        pieces: list[str] = []
        copied = 0
        pos = 0
        while True:
            opening = statement.find("<", pos)
            if opening < 0:
                break
            body = opening + 1
            for prefix, namespace in self._entries.items():
                if not statement.startswith(namespace, body):
                    continue
                closing = statement.find(">", body)
                if closing < 0:
                    return ""
                pieces.append(statement[copied:opening])
                pieces.append(f"{prefix}:{statement[body + len(namespace):closing]}")
                copied = body = closing + 1
                break
            pos = body
        pieces.append(statement[copied:])
        return "".join(pieces)

    def header(self) -> str:
        """Return one ``@prefix`` line for every known prefix."""
        return "".join(
            f"@prefix {prefix}: <{namespace}> .\n" for prefix, namespace in self._entries.items()
        )


def prefixify_text(text: str) -> str:
    """Return TEXT with known namespaces abbreviated.

    The default prefixes are declared up front, repeated declarations of
    an already known prefix are dropped, and every other statement is
    preceded by an empty line.  Trailing incomplete statements are lost.
    """
    table = PrefixTable()
    out: list[str] = []
    for statement in iter_statements(text):
        if not out:
            out.append(table.header())
        if statement.startswith("@"):
            try:
                if not table.add(statement):
                    continue
            except ValueError:
                pass
            out.append(statement + "\n")
        else:
            out.append("\n" + table.substitute(statement) + "\n")
    return "".join(out)


def _read(name: str | None) -> str:
    if name is None:
        data = sys.stdin.buffer.read()
    else:
        with open(name, "rb") as handle:
            data = handle.read()
    return data.decode("utf-8", errors="surrogateescape")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ttl-prefixify", description="Abbreviate IRIs in Turtle files using prefixes."
    )
    parser.add_argument("files", nargs="*", metavar="FILE")
    args = parser.parse_args(argv)

    sys.stdout.flush()
    out = sys.stdout.buffer
    rc = 0
    for name in args.files or [None]:
        try:
            text = _read(name)
        except OSError:
            rc += 1
            continue
        out.write(prefixify_text(text).encode("utf-8", errors="surrogateescape"))
    out.flush()
    return rc


if __name__ == "__main__":
    sys.exit(main())