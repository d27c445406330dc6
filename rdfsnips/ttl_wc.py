"""Count subjects, predicates and objects in Turtle files."""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from rdfsnips.scanner import iter_events

__all__ = ["Counts", "count_text", "format_counts", "main"]

_FIELDS = ("subjects", "predicates", "objects")


@dataclass(frozen=True)
class Counts:
    """Numbers of subjects, predicates and objects."""

    subjects: int = 0
    predicates: int = 0
    objects: int = 0

    def __add__(self, other: Counts) -> Counts:
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            self.subjects + other.subjects,
            self.predicates + other.predicates,
            self.objects + other.objects,
        )


def count_text(text: str, only_subjects: bool = False) -> Counts:
    """Count the triples' parts in TEXT.

    Every statement adds a subject, a predicate and an object; every
    ``;`` another predicate and object; every ``,`` another object.
    Directives count nothing.  With ONLY_SUBJECTS the separators are
    not looked at, so predicates and objects equal the subjects.
    """
    subjects = predicates = objects = 0
    marks = "" if only_subjects else ",;"
    for mark, start, _end in iter_events(text, marks):
        if mark == ".":
            if text[start] != "@":
                subjects += 1
                predicates += 1
                objects += 1
        elif mark == ";":
            predicates += 1
            objects += 1
        elif mark == ",":
            objects += 1
    return Counts(subjects, predicates, objects)


def format_counts(counts: Counts, name: str | None = None, field: str | None = None) -> str:
    """Render one output line (without newline).

    FIELD picks a single number (``subjects``, ``predicates`` or
    ``objects``); without it all three are printed, right-aligned.
    """
    if field is None:
        line = f"{counts.subjects:5d} {counts.predicates:5d} {counts.objects:5d}"
    elif field in _FIELDS:
        line = str(getattr(counts, field))
    else:
        raise ValueError(f"unknown field: {field!r}")
    if name is not None:
        line += "\t" + name
    return line


def _read(name: str | None) -> str:
    if name is None:
        data = sys.stdin.buffer.read()
    else:
        with open(name, "rb") as handle:
            data = handle.read()
    return data.decode("utf-8", errors="surrogateescape")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ttl-wc", description="Count subjects, predicates and objects in Turtle files."
    )
    parser.add_argument("--subjects", action="store_true", help="print only the subject count")
    parser.add_argument(
        "--predicates", action="store_true", help="print only the predicate count"
    )
    parser.add_argument(
        "--statements", action="store_true", help="print only the statement (object) count"
    )
    parser.add_argument("files", nargs="*", metavar="FILE")
    args = parser.parse_args(argv)

    if args.subjects:
        field = "subjects"
    elif args.predicates:
        field = "predicates"
    elif args.statements:
        field = "objects"
    else:
        field = None

    names: list[str | None] = list(args.files) or [None]
    counts = Counts()
    total = Counts()
    rc = 0
    for name in names:
        try:
            counts = count_text(_read(name), only_subjects=args.subjects)
        except OSError:
            # an unreadable file repeats the preceding counts
            rc += 1
        print(format_counts(counts, name, field))
        total = total + counts
    if len(names) > 1:
        print(format_counts(total, "total", field))
    sys.stdout.flush()
    return rc


if __name__ == "__main__":
    sys.exit(main())