"""Output filename composition."""

from __future__ import annotations

import re
from dataclasses import dataclass

INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
MAX_FILENAME_COMPONENT_LENGTH = 100
OUTPUT_EXTENSION = ".pdf"


@dataclass(frozen=True)
class FileNameOptions:
    """Inputs for a single output filename."""

    prefix: str
    suffix: str
    sequence_number: int
    padding_length: int


def sanitize_component(
    value: str | None, *, max_length: int = MAX_FILENAME_COMPONENT_LENGTH
) -> str:
    """Strip characters unsafe on common filesystems, trim and truncate."""

    if not value:
        return ""
    return INVALID_FILENAME_CHARS.sub("", value).strip()[:max_length]


def pad_number(value: int, length: int) -> str:
    # zfill never truncates: pad_number(1000, 2) == "1000"
    return str(value).zfill(length)


def build_file_name(options: FileNameOptions) -> str:
    """Return ``<prefix><padded number><suffix>.pdf``.

    >>> build_file_name(FileNameOptions("DMC", "_final", 5, 3))
    'DMC005_final.pdf'
    """

    prefix = sanitize_component(options.prefix)
    suffix = sanitize_component(options.suffix)
    number = pad_number(options.sequence_number, options.padding_length)
    return f"{prefix}{number}{suffix}{OUTPUT_EXTENSION}"


__all__ = [
    "INVALID_FILENAME_CHARS",
    "MAX_FILENAME_COMPONENT_LENGTH",
    "OUTPUT_EXTENSION",
    "FileNameOptions",
    "sanitize_component",
    "pad_number",
    "build_file_name",
]
