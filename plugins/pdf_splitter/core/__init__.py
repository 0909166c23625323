from __future__ import annotations

from .documents import (
    DuplicateEntryError,
    PdfMetadata,
    SourceDocument,
    ZipArchive,
    format_file_size,
    load_document,
    pdf_metadata,
)
from .exclusions import parse_exclusions, sorted_exclusions
from .models import (
    DEFAULT_ZIP_NAME,
    ProcessingResult,
    ProcessOutcome,
    SplitConfig,
    SplitPlan,
)
from .naming import FileNameOptions, build_file_name, pad_number, sanitize_component
from .padding import determine_padding_length, padding_hint
from .processor import plan_split, process_document
from .ranges import (
    InvalidRange,
    InvalidRangeFormat,
    RangeError,
    iter_pages,
    parse_page_ranges,
    range_bounds,
)
from .sequencing import build_filename_sequence, iter_filename_numbers
from .validation import validate_configuration

__all__ = [
    "DEFAULT_ZIP_NAME",
    "DuplicateEntryError",
    "FileNameOptions",
    "InvalidRange",
    "InvalidRangeFormat",
    "PdfMetadata",
    "ProcessOutcome",
    "ProcessingResult",
    "RangeError",
    "SourceDocument",
    "SplitConfig",
    "SplitPlan",
    "ZipArchive",
    "build_file_name",
    "build_filename_sequence",
    "determine_padding_length",
    "format_file_size",
    "iter_filename_numbers",
    "iter_pages",
    "load_document",
    "pad_number",
    "padding_hint",
    "parse_exclusions",
    "parse_page_ranges",
    "pdf_metadata",
    "plan_split",
    "process_document",
    "range_bounds",
    "sanitize_component",
    "sorted_exclusions",
    "validate_configuration",
]
