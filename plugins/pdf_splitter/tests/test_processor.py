import zipfile
from io import BytesIO

import pytest
from PyPDF2 import PdfReader, PdfWriter

from plugins.pdf_splitter.core import (
    DuplicateEntryError,
    SplitConfig,
    ZipArchive,
    load_document,
    plan_split,
    process_document,
)


def _blank_pdf(pages: int) -> bytes:
    writer = PdfWriter()
    for index in range(pages):
        writer.add_blank_page(width=100 + index, height=200)
    buf = BytesIO()
    writer.write(buf)
    return buf.getvalue()


class _FlakyDocument:
    def __init__(self, pages: int, broken: set[int]):
        self.page_count = pages
        self._broken = broken

    def extract_page(self, index: int) -> bytes:
        if index in self._broken:
            raise RuntimeError(f"cannot copy page {index}")
        return b"%PDF-1.4 page"


class _BrokenArchive:
    def add_entry(self, name: str, data: bytes) -> None:
        pass

    def finalize(self) -> bytes:
        raise OSError("disk full")


def test_end_to_end_split_skips_excluded_numbers():
    config = SplitConfig(data=_blank_pdf(10), ranges="1-5", exclusions="3")
    progress: list[float] = []
    outcome = process_document(config, on_progress=progress.append)

    expected = ["1.pdf", "2.pdf", "4.pdf", "5.pdf", "6.pdf"]
    assert outcome.success is True
    assert outcome.page_count == 10
    assert outcome.processed_count == 5
    assert [result.file_name for result in outcome.results] == expected
    assert all(result.success for result in outcome.results)

    with zipfile.ZipFile(BytesIO(outcome.archive)) as zf:
        assert zf.namelist() == expected
        for name in expected:
            assert len(PdfReader(BytesIO(zf.read(name))).pages) == 1

    assert progress[0] == 0
    assert progress[-1] == 100
    assert progress == sorted(progress)
    assert {10, 20, 90} <= set(progress)


def test_outputs_follow_source_page_order():
    config = SplitConfig(data=_blank_pdf(3), ranges="5-7", prefix="DMC")
    outcome = process_document(config)

    assert [result.file_name for result in outcome.results] == ["DMC5.pdf", "DMC6.pdf", "DMC7.pdf"]
    with zipfile.ZipFile(BytesIO(outcome.archive)) as zf:
        widths = [
            float(PdfReader(BytesIO(zf.read(name))).pages[0].mediabox.width)
            for name in zf.namelist()
        ]
    assert widths == [100, 101, 102]


def test_processed_count_is_clamped_to_document_length():
    config = SplitConfig(data=_blank_pdf(3), ranges="01-10", suffix="_part")
    outcome = process_document(config)

    assert outcome.success is True
    assert [result.file_name for result in outcome.results] == [
        "01_part.pdf",
        "02_part.pdf",
        "03_part.pdf",
    ]


def test_page_failure_is_recorded_and_run_continues():
    seen = []
    config = SplitConfig(data=b"%PDF-", ranges="1-3")
    outcome = process_document(
        config,
        on_result=seen.append,
        loader=lambda data: _FlakyDocument(3, {1}),
    )

    assert outcome.success is True
    assert [result.success for result in outcome.results] == [True, False, True]
    assert outcome.results[1].file_name == "2.pdf"
    assert outcome.results[1].error == "cannot copy page 1"
    assert seen == outcome.results
    assert [result.file_name for result in outcome.failed] == ["2.pdf"]
    with zipfile.ZipFile(BytesIO(outcome.archive)) as zf:
        assert zf.namelist() == ["1.pdf", "3.pdf"]


def test_invalid_configuration_aborts_before_loading():
    calls = []
    outcome = process_document(
        SplitConfig(ranges="1-2"),
        on_progress=calls.append,
        loader=lambda data: pytest.fail("loader must not run"),
    )
    assert outcome.success is False
    assert outcome.error == "Please select a PDF file"
    assert outcome.results == []
    assert outcome.archive is None
    assert calls == []


def test_unreadable_document_is_fatal():
    def _loader(data: bytes):
        raise ValueError("EOF marker not found")

    outcome = process_document(SplitConfig(data=b"%PDF-", ranges="1"), loader=_loader)
    assert outcome.success is False
    assert outcome.error == "Unable to read PDF: EOF marker not found"
    assert outcome.archive is None


def test_empty_document_is_fatal():
    outcome = process_document(
        SplitConfig(data=b"%PDF-", ranges="1-3"),
        loader=lambda data: _FlakyDocument(0, set()),
    )
    assert outcome.success is False
    assert outcome.error == "No pages to process"


def test_archive_failure_discards_results():
    outcome = process_document(
        SplitConfig(data=_blank_pdf(2), ranges="1-2"),
        archive_factory=_BrokenArchive,
    )
    assert outcome.success is False
    assert outcome.error == "Unable to create archive: disk full"
    assert outcome.results == []
    assert outcome.archive is None


def test_duplicate_archive_name_is_recorded_and_run_continues():
    def _seeded_archive():
        archive = ZipArchive()
        archive.add_entry("2.pdf", b"stale")
        return archive

    outcome = process_document(
        SplitConfig(data=_blank_pdf(3), ranges="1-3"),
        archive_factory=_seeded_archive,
    )

    assert outcome.success is True
    assert [result.success for result in outcome.results] == [True, False, True]
    assert outcome.results[1].file_name == "2.pdf"
    assert outcome.results[1].error == 'Duplicate file name in archive: "2.pdf"'
    with zipfile.ZipFile(BytesIO(outcome.archive)) as zf:
        assert zf.namelist() == ["2.pdf", "1.pdf", "3.pdf"]
        assert zf.read("2.pdf") == b"stale"


def test_huge_range_is_expanded_only_to_document_length():
    outcome = process_document(SplitConfig(data=_blank_pdf(2), ranges="1-999999999,5"))

    assert outcome.success is True
    assert [result.file_name for result in outcome.results] == ["1.pdf", "2.pdf"]


def test_invalid_ranges_flag_the_configuration():
    outcome = process_document(SplitConfig(data=_blank_pdf(2), ranges="1,abc"))
    assert outcome.success is False
    assert outcome.invalid_config is True
    assert "abc" in outcome.error

    empty = process_document(
        SplitConfig(data=b"%PDF-", ranges="1"), loader=lambda data: _FlakyDocument(0, set())
    )
    assert empty.error == "No pages to process"
    assert empty.invalid_config is False


def test_zip_archive_rejects_duplicate_names():
    archive = ZipArchive()
    archive.add_entry("1.pdf", b"one")
    with pytest.raises(DuplicateEntryError):
        archive.add_entry("1.pdf", b"two")
    assert archive.names == ["1.pdf"]
    with zipfile.ZipFile(BytesIO(archive.finalize())) as zf:
        assert zf.read("1.pdf") == b"one"


def test_load_document_extracts_single_pages():
    document = load_document(_blank_pdf(2))
    assert document.page_count == 2
    assert PdfReader(BytesIO(document.extract_page(1))).pages[0].mediabox.width == 101
    with pytest.raises(IndexError):
        document.extract_page(2)


def test_plan_split_without_document():
    plan = plan_split("1-5", "3", prefix="p", suffix="s")
    assert plan.page_sequence == [1, 2, 3, 4, 5]
    assert plan.filename_sequence == [1, 2, 4, 5, 6]
    assert plan.padding_length == 1
    assert plan.file_names == ["p1s.pdf", "p2s.pdf", "p4s.pdf", "p5s.pdf", "p6s.pdf"]

    clamped = plan_split("8-12", page_count=2)
    assert clamped.file_names == ["8.pdf", "9.pdf"]
    assert clamped.to_dict()["processed_count"] == 2


def test_plan_split_stops_expanding_at_page_count():
    plan = plan_split("1-999999999", "2", page_count=3)
    assert plan.page_sequence == [1, 2, 3]
    assert plan.filename_sequence == [1, 3, 4]
    assert plan.file_names == ["1.pdf", "3.pdf", "4.pdf"]

    overlapping = plan_split("3-4,1-999999999", page_count=4)
    assert overlapping.page_sequence == [3, 4, 1, 2]

    empty = plan_split("1-999999999", page_count=0)
    assert empty.page_sequence == []
    assert empty.file_names == []
