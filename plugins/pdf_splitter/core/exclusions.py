"""Parsing for the lenient "skip numbers" list."""

from __future__ import annotations

import re
from typing import List

from .ranges import split_tokens

# Leading integer of a token, read the way a browser's ``parseInt`` reads it.
LEADING_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_exclusions(expr: str | None) -> frozenset[int]:
    """Return the positive integers listed in ``expr``.

    Unlike page ranges this never raises. Each token contributes its leading
    integer, so ``"3abc"`` counts as 3 and ``"2.5"`` as 2. Tokens without one
    or with a value below 1 are dropped: ``"3, x, -1, 3"`` yields ``{3}``.
    """

    numbers: set[int] = set()
    for token in split_tokens(expr):
        match = LEADING_INT_RE.match(token)
        if match is None:
            continue
        try:
            value = int(match.group())
        except ValueError:
            # Past the interpreter's digit limit.
            continue
        if value > 0:
            numbers.add(value)
    return frozenset(numbers)


def sorted_exclusions(expr: str | None) -> List[int]:
    return sorted(parse_exclusions(expr))


__all__ = ["LEADING_INT_RE", "parse_exclusions", "sorted_exclusions"]
