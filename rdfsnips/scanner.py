"""Split Turtle-like text into statements without fully parsing it.

Statements end at a ``.`` that is outside IRIs, string literals and
comments. The scanner tracks just enough lexical state to tell those
apart.
"""
from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum, auto

__all__ = ["iter_events", "iter_statements"]

_STRUCTURAL = '.<"#'
_LEADING_WS = re.compile(r"[\x01- ]*")


class _State(Enum):
    FREE = auto()
    IN_ANGLES = auto()
    IN_QUOTES = auto()
    IN_LONG_QUOTES = auto()
    IN_COMMENT = auto()


_CLOSERS = {
    _State.IN_ANGLES: ">",
    _State.IN_QUOTES: '"',
    _State.IN_LONG_QUOTES: '"""',
    _State.IN_COMMENT: "\n",
}


def _skip_whitespace(text: str, pos: int) -> int:
    return _LEADING_WS.match(text, pos).end()


def _escaped(text: str, pos: int, floor: int) -> bool:
    """Tell whether TEXT[POS] follows an odd run of backslashes at or after FLOOR."""
    before = text[floor:pos]
    return (len(before) - len(before.rstrip("\\"))) % 2 == 1


def iter_events(text: str, marks: str = "") -> Iterator[tuple[str, int, int]]:
    """Yield ``(mark, start, end)`` for every statement end and every mark.

    ``mark`` is ``"."`` when a statement ends, or one of the characters
    in MARKS found outside IRIs, literals and comments.  ``start`` is the
    index where the current statement begins (leading whitespace skipped)
    and ``end`` the index just past the mark.  An unfinished statement at
    the end of TEXT produces no ``"."`` event.  Scanning stops at a NUL.
    """
    text = text.split("\0", 1)[0]
    end = len(text)
    extra = "".join(ch for ch in dict.fromkeys(marks) if ch not in _STRUCTURAL)
    free = re.compile("[" + re.escape(_STRUCTURAL + extra) + "]")

    state = _State.FREE
    start = _skip_whitespace(text, 0)
    pos = start
    while True:
        if state is _State.FREE:
            found = free.search(text, pos)
            hit = found.start() if found else -1
        else:
            hit = text.find(_CLOSERS[state], pos)
        if hit < 0:
            return

        ch = text[hit]
        after = hit + 1
        if ch == ".":
            yield ".", start, after
            start = _skip_whitespace(text, after)
            pos = start
            continue
        if ch == "<":
            state = _State.IN_ANGLES
        elif ch == ">":
            state = _State.FREE
        elif ch == '"':
            if not _escaped(text, hit, pos):
                if state is _State.FREE:
                    if after >= end:
                        return
                    if text[after] != '"':
                        state = _State.IN_QUOTES
                    elif after + 1 >= end:
                        return
                    elif text[after + 1] != '"':
                        # empty literal "", state stays free
                        after += 1
                    else:
                        state = _State.IN_LONG_QUOTES
                        after += 2
                elif state is _State.IN_QUOTES:
                    state = _State.FREE
                elif state is _State.IN_LONG_QUOTES:
                    after += 2
                    state = _State.FREE
        elif ch == "#":
            state = _State.IN_COMMENT
        elif ch == "\n":
            state = _State.FREE
        else:
            yield ch, start, after
        pos = after


def iter_statements(text: str) -> Iterator[str]:
    """Yield every complete statement of TEXT, terminating dot included."""
    for mark, start, end in iter_events(text):
        if mark == ".":
            yield text[start:end]