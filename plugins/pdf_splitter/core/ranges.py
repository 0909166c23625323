"""Utilities for parsing page range expressions such as ``"1-5,8,10-12"``."""

from __future__ import annotations

import re
from itertools import chain
from typing import Iterable, Iterator, List, Tuple


class RangeError(ValueError):
    """Raised when a page range expression cannot be parsed."""


class InvalidRangeFormat(RangeError):
    """Raised when a token is neither a page number nor a ``start-end`` pair."""


class InvalidRange(RangeError):
    """Raised when a well-formed token describes an impossible interval."""


RANGE_TOKEN_RE = re.compile(r"^\d+(?:-\d+)?$", re.ASCII)

PageBounds = Tuple[int, int]


def split_tokens(expr: str | None) -> List[str]:
    """Return the trimmed, non-empty comma separated tokens of ``expr``."""

    if not expr:
        return []
    return [token.strip() for token in expr.split(",") if token.strip()]


def _to_int(text: str, token: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        # Digit strings beyond the interpreter's int conversion limit.
        raise InvalidRange(f'Invalid page number: "{token}"') from exc


def _token_bounds(token: str) -> PageBounds:
    if not RANGE_TOKEN_RE.match(token):
        raise InvalidRangeFormat(f'Invalid range format: "{token}"')

    if "-" in token:
        start_s, end_s = token.split("-", 1)
        start, end = _to_int(start_s, token), _to_int(end_s, token)
        if start < 1 or start > end:
            raise InvalidRange(f"Invalid range: {start}-{end}")
        return start, end

    page = _to_int(token, token)
    if page < 1:
        raise InvalidRange(f'Invalid page number: "{token}"')
    return page, page


def range_bounds(expr: str | None) -> List[PageBounds]:
    """Check every token of ``expr`` and return its inclusive ``(start, end)`` pairs.

    Nothing is expanded here, so ``"1-999999999"`` costs one tuple.
    """

    return [_token_bounds(token) for token in split_tokens(expr)]


def unique_in_order(values: Iterable[int]) -> Iterator[int]:
    seen: set[int] = set()
    for value in values:
        if value not in seen:
            seen.add(value)
            yield value


def iter_pages(bounds: Iterable[PageBounds]) -> Iterator[int]:
    """Lazily expand ``bounds``; a repeated page keeps its first position."""

    return unique_in_order(
        chain.from_iterable(range(start, end + 1) for start, end in bounds)
    )


def parse_page_ranges(expr: str | None) -> List[int]:
    """Return the ordered, de-duplicated page numbers described by ``expr``.

    Tokens are expanded left to right and concatenated; a page that appears
    more than once keeps the position of its first occurrence, so
    ``"1-3,2-4"`` yields ``[1, 2, 3, 4]``. Blank input yields an empty list.

    Raises :class:`InvalidRangeFormat` for tokens such as ``"abc"``, ``"1-"``
    or ``"-5"`` and :class:`InvalidRange` for ``"5-3"`` or page ``0``.
    Every token is checked before any is expanded.
    """

    return list(iter_pages(range_bounds(expr)))


__all__ = [
    "RangeError",
    "InvalidRangeFormat",
    "InvalidRange",
    "RANGE_TOKEN_RE",
    "PageBounds",
    "split_tokens",
    "range_bounds",
    "unique_in_order",
    "iter_pages",
    "parse_page_ranges",
]
