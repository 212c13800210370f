from __future__ import annotations

from typing import Iterable, NamedTuple


COMMENT_PREFIXES = ("//", "/*")


class LineCounts(NamedTuple):
    total: int
    code: int
    comment: int
    empty: int


def classify_line(line: str) -> str:
    """Return ``"empty"``, ``"comment"`` or ``"code"`` for one source line.

    Only the start of the trimmed line is inspected: a line of code with a
    trailing comment is code, and the continuation lines of a block
    comment are code unless they open a comment themselves.
    """
    stripped = line.strip()
    if not stripped:
        return "empty"
    if stripped.startswith(COMMENT_PREFIXES):
        return "comment"
    return "code"


def count_lines(lines: Iterable[str]) -> LineCounts:
    code = comment = empty = 0
    for line in lines:
        kind = classify_line(line)
        if kind == "empty":
            empty += 1
        elif kind == "comment":
            comment += 1
        else:
            code += 1
    return LineCounts(total=code + comment + empty, code=code, comment=comment, empty=empty)


def count_function_lines(span) -> LineCounts:
    return count_lines(span.lines)
