"""PDF and archive collaborators used by the split engine."""

from __future__ import annotations

import math
import zipfile
from dataclasses import dataclass
from io import BytesIO

from PyPDF2 import PdfReader, PdfWriter

_SIZE_UNITS = ("B", "KB", "MB", "GB")


class DuplicateEntryError(ValueError):
    """Raised when an archive entry name is added twice."""


@dataclass(frozen=True)
class PdfMetadata:
    """Metadata extracted from a PDF document."""

    pages: int
    size_bytes: int

    @property
    def size_label(self) -> str:
        return format_file_size(self.size_bytes)


class SourceDocument:
    """Loaded PDF that can serialise single pages on demand."""

    def __init__(self, reader: PdfReader):
        self._reader = reader

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def extract_page(self, index: int) -> bytes:
        """Return a standalone PDF holding the 0-based page ``index``."""

        if index < 0 or index >= self.page_count:
            raise IndexError(f"Page index {index} is outside the document")
        writer = PdfWriter()
        writer.add_page(self._reader.pages[index])
        buf = BytesIO()
        writer.write(buf)
        return buf.getvalue()


def load_document(data: bytes) -> SourceDocument:
    return SourceDocument(PdfReader(BytesIO(data)))


def pdf_metadata(data: bytes) -> PdfMetadata:
    document = load_document(data)
    return PdfMetadata(pages=document.page_count, size_bytes=len(data))


class ZipArchive:
    """In-memory ZIP builder that keeps entries in insertion order."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        self._buffer = BytesIO()
        self._zip = zipfile.ZipFile(self._buffer, "w", compression=compression)
        self._names: set[str] = set()

    @property
    def names(self) -> list[str]:
        return self._zip.namelist()

    def add_entry(self, name: str, data: bytes) -> None:
        if name in self._names:
            raise DuplicateEntryError(f'Duplicate file name in archive: "{name}"')
        self._zip.writestr(name, data)
        self._names.add(name)

    def finalize(self) -> bytes:
        self._zip.close()
        return self._buffer.getvalue()


def format_file_size(size_bytes: float, fraction_digits: int = 2) -> str:
    """Format ``size_bytes`` for display: ``1536`` -> ``"1.50 KB"``."""

    if size_bytes is None or not math.isfinite(size_bytes) or size_bytes < 0:
        return "0 B"
    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    if unit == 0:
        return f"{int(size)} B"
    return f"{size:.{fraction_digits}f} {_SIZE_UNITS[unit]}"


__all__ = [
    "DuplicateEntryError",
    "PdfMetadata",
    "SourceDocument",
    "ZipArchive",
    "load_document",
    "pdf_metadata",
    "format_file_size",
]
