"""Data containers shared by the splitter engine, API and CLI."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, List

DEFAULT_ZIP_NAME = "split_files"


@dataclass
class SplitConfig:
    """Full input state for one split run.

    A plain mutable record: callers update fields directly between runs.
    """

    data: bytes | None = None
    filename: str = ""
    prefix: str = ""
    suffix: str = ""
    zip_name: str = DEFAULT_ZIP_NAME
    ranges: str = ""
    exclusions: str = ""

    @property
    def has_file(self) -> bool:
        return bool(self.data)


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome for a single output file."""

    file_name: str
    success: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"file_name": self.file_name, "success": self.success}
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass
class ProcessOutcome:
    success: bool
    results: List[ProcessingResult] = field(default_factory=list)
    archive: bytes | None = None
    error: str | None = None
    page_count: int = 0
    # Set when the configuration itself was rejected.
    invalid_config: bool = False

    @property
    def processed_count(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> List[ProcessingResult]:
        return [result for result in self.results if not result.success]


@dataclass(frozen=True)
class SplitPlan:
    """Names a run would produce, derived without reading a PDF.

    ``page_sequence`` holds only the pages that would be processed, so it is
    already clamped to the page count the plan was made for.
    """

    page_sequence: List[int]
    filename_sequence: List[int]
    padding_length: int
    file_names: List[str]

    @property
    def processed_count(self) -> int:
        return len(self.filename_sequence)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["processed_count"] = self.processed_count
        return payload


__all__ = [
    "DEFAULT_ZIP_NAME",
    "SplitConfig",
    "ProcessingResult",
    "ProcessOutcome",
    "SplitPlan",
]
