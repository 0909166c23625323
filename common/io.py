"""Common IO helpers for plugins."""

from __future__ import annotations

import os
from io import BytesIO

SAFE_FILENAME_CHARS = {"-", "_", "."}


def buffer_from_bytes(data: bytes) -> BytesIO:
    buffer = BytesIO()
    buffer.write(data)
    buffer.seek(0)
    return buffer


def secure_filename(filename: str | None, *, fallback: str = "upload") -> str:
    """Sanitize filenames without relying on Werkzeug internals."""

    if not filename:
        return fallback
    name, ext = os.path.splitext(filename)
    safe_name = "".join(
        ch if ch.isalnum() or ch in SAFE_FILENAME_CHARS else "_" for ch in name
    )
    safe_ext = "".join(ch for ch in ext if ch.isalnum() or ch in SAFE_FILENAME_CHARS)
    safe_name = safe_name.strip("._") or fallback
    safe_ext = safe_ext.strip("._")
    return f"{safe_name}{f'.{safe_ext}' if safe_ext else ''}"


def with_extension(filename: str, extension: str) -> str:
    """Append ``extension`` unless ``filename`` already ends with it."""

    if filename.lower().endswith(extension.lower()):
        return filename
    return f"{filename}{extension}"


__all__ = ["buffer_from_bytes", "secure_filename", "with_extension"]
