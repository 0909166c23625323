"""Output file numbering that skips excluded values."""

from __future__ import annotations

from itertools import count, filterfalse, islice
from typing import AbstractSet, Iterator, List


def iter_filename_numbers(
    exclusions: AbstractSet[int], start_number: int = 1
) -> Iterator[int]:
    """Yield every integer from ``start_number`` upwards that is not excluded."""

    return filterfalse(exclusions.__contains__, count(start_number))


def build_filename_sequence(
    page_count: int, exclusions: AbstractSet[int], start_number: int = 1
) -> List[int]:
    """Return ``page_count`` file numbers starting at ``start_number``.

    Excluded values shift every later number instead of dropping a page:
    ``build_filename_sequence(5, {3, 6})`` is ``[1, 2, 4, 5, 7]``.
    """

    if page_count <= 0:
        return []
    return list(islice(iter_filename_numbers(exclusions, start_number), page_count))


__all__ = ["iter_filename_numbers", "build_filename_sequence"]
