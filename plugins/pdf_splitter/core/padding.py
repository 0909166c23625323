"""Zero-padding width derived from the literal range expression."""

from __future__ import annotations

import re
from typing import Iterable

MIN_PADDING_LENGTH = 1

_ZERO_LED_RE = re.compile(r"^0+\d+$", re.ASCII)


def padding_hint(ranges: str | None) -> int:
    """Return the width requested by a zero-led first token (``"01-05"`` -> 2).

    Only the first comma separated token is inspected; for ``start-end``
    tokens only ``start`` counts.
    """

    first = (ranges or "").split(",")[0].strip()
    if not first:
        return MIN_PADDING_LENGTH
    candidate = first.split("-", 1)[0].strip()
    if _ZERO_LED_RE.match(candidate):
        return len(candidate)
    return MIN_PADDING_LENGTH


def max_digits(sequence: Iterable[int]) -> int:
    return max((len(str(value)) for value in sequence), default=0)


def determine_padding_length(sequence: Iterable[int], ranges: str | None) -> int:
    """Return ``max(hint, widest number, 1)`` so padding never truncates."""

    return max(padding_hint(ranges), max_digits(sequence), MIN_PADDING_LENGTH)


__all__ = [
    "MIN_PADDING_LENGTH",
    "padding_hint",
    "max_digits",
    "determine_padding_length",
]
