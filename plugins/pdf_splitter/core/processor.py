"""Drive a full split run: validate, derive names, extract pages, bundle."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterable, List, Protocol

from common.logging import get_logger

from .documents import SourceDocument, ZipArchive, load_document
from .exclusions import parse_exclusions
from .models import ProcessingResult, ProcessOutcome, SplitConfig, SplitPlan
from .naming import FileNameOptions, build_file_name
from .padding import determine_padding_length
from .ranges import PageBounds, RangeError, iter_pages, range_bounds
from .sequencing import build_filename_sequence
from .validation import validate_configuration

ProgressCallback = Callable[[float], None]
ResultCallback = Callable[[ProcessingResult], None]

# Progress checkpoints for each phase of a run.
LOADED = 10.0
PARSED = 20.0
EXTRACTED = 90.0
DONE = 100.0

logger = get_logger("pdf_splitter.processor")


class ArchiveBuilder(Protocol):
    def add_entry(self, name: str, data: bytes) -> None: ...

    def finalize(self) -> bytes: ...


class _ProgressReporter:
    """Forward progress to a callback, never letting the value go backwards."""

    def __init__(self, callback: ProgressCallback | None):
        self._callback = callback
        self._last = 0.0

    def __call__(self, value: float) -> None:
        self._last = max(self._last, min(float(value), DONE))
        if self._callback is not None:
            self._callback(self._last)


def _build_plan(
    bounds: Iterable[PageBounds],
    ranges: str,
    exclusions: str,
    prefix: str,
    suffix: str,
    limit: int | None,
) -> SplitPlan:
    # islice stops the expansion once ``limit`` pages are collected.
    pages = list(islice(iter_pages(bounds), limit))
    start = pages[0] if pages else 1
    numbers = build_filename_sequence(len(pages), parse_exclusions(exclusions), start)
    padding = determine_padding_length(numbers, ranges)
    names = [
        build_file_name(FileNameOptions(prefix, suffix, number, padding))
        for number in numbers
    ]
    return SplitPlan(
        page_sequence=pages,
        filename_sequence=numbers,
        padding_length=padding,
        file_names=names,
    )


def plan_split(
    ranges: str,
    exclusions: str = "",
    prefix: str = "",
    suffix: str = "",
    *,
    page_count: int | None = None,
) -> SplitPlan:
    """Derive output names for ``ranges`` without touching a PDF.

    When ``page_count`` is given the number of outputs is clamped to it and
    ranges are only expanded that far. File numbering starts at the first
    requested page. Raises :class:`RangeError` for malformed ranges.
    """

    limit = None if page_count is None else max(page_count, 0)
    return _build_plan(range_bounds(ranges), ranges, exclusions, prefix, suffix, limit)


def _fatal(message: str, page_count: int = 0, *, invalid_config: bool = False) -> ProcessOutcome:
    logger.warning("split run aborted: %s", message)
    return ProcessOutcome(
        success=False, error=message, page_count=page_count, invalid_config=invalid_config
    )


def process_document(
    config: SplitConfig,
    *,
    on_progress: ProgressCallback | None = None,
    on_result: ResultCallback | None = None,
    loader: Callable[[bytes], SourceDocument] = load_document,
    archive_factory: Callable[[], ArchiveBuilder] = ZipArchive,
) -> ProcessOutcome:
    """Split ``config.data`` into single-page PDFs bundled in one archive.

    Output file ``i`` holds source page ``i`` (0-based) and is named from the
    ``i``-th filename number, so a source holding pages 5-7 of a larger
    packet is split with ``ranges="5-7"``. A failing page is recorded and the
    run continues; configuration, load and archive errors abort the run and
    discard every per-page result.
    """

    error = validate_configuration(config)
    if error:
        return _fatal(error, invalid_config=True)

    report = _ProgressReporter(on_progress)
    report(0)
    logger.info("splitting %s", config.filename or "upload")

    try:
        document = loader(config.data or b"")
        total_pages = document.page_count
    except Exception as exc:
        return _fatal(f"Unable to read PDF: {exc}")
    report(LOADED)

    try:
        bounds = range_bounds(config.ranges)
    except RangeError as exc:
        return _fatal(str(exc), total_pages, invalid_config=True)
    report(PARSED)

    if not bounds:
        return _fatal("No valid pages to process", total_pages)
    if total_pages <= 0:
        return _fatal("No pages to process", total_pages)

    plan = _build_plan(
        bounds,
        config.ranges,
        config.exclusions,
        config.prefix,
        config.suffix,
        total_pages,
    )
    archive = archive_factory()
    results: List[ProcessingResult] = []
    processed = plan.processed_count
    for index, file_name in enumerate(plan.file_names):
        try:
            archive.add_entry(file_name, document.extract_page(index))
            result = ProcessingResult(file_name=file_name, success=True)
        except Exception as exc:
            logger.warning("page %d (%s) failed: %s", index + 1, file_name, exc)
            message = str(exc) or exc.__class__.__name__
            result = ProcessingResult(file_name=file_name, success=False, error=message)
        results.append(result)
        if on_result is not None:
            on_result(result)
        report(PARSED + (index + 1) / processed * (EXTRACTED - PARSED))

    report(EXTRACTED)
    try:
        blob = archive.finalize()
    except Exception as exc:
        return _fatal(f"Unable to create archive: {exc}", total_pages)
    report(DONE)

    failures = sum(1 for result in results if not result.success)
    logger.info(
        "split finished: %d files, %d failed, %d source pages",
        len(results),
        failures,
        total_pages,
    )
    return ProcessOutcome(
        success=True, results=results, archive=blob, page_count=total_pages
    )


__all__ = [
    "ProgressCallback",
    "ResultCallback",
    "ArchiveBuilder",
    "plan_split",
    "process_document",
]
