"""Pre-flight checks for a split configuration."""

from __future__ import annotations

from .models import SplitConfig
from .ranges import RangeError, range_bounds

MISSING_FILE_MESSAGE = "Please select a PDF file"
MISSING_RANGES_MESSAGE = "Please specify page ranges"


def validate_configuration(config: SplitConfig) -> str | None:
    """Return the first configuration problem, or ``None`` when runnable.

    Checks run in order: file present, ranges non-blank, ranges well formed.
    The range message names the offending token. Ranges are checked, never
    expanded.
    """

    if not config.has_file:
        return MISSING_FILE_MESSAGE
    if not (config.ranges or "").strip():
        return MISSING_RANGES_MESSAGE
    try:
        range_bounds(config.ranges)
    except RangeError as exc:
        return str(exc)
    return None


__all__ = ["MISSING_FILE_MESSAGE", "MISSING_RANGES_MESSAGE", "validate_configuration"]
