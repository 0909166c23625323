"""Smoke tests for the PDF splitter CLI."""

from __future__ import annotations

import json
import zipfile
from contextlib import redirect_stdout
from io import BytesIO, StringIO

from PyPDF2 import PdfWriter

from plugins.pdf_splitter import cli


def _run_cli(args: list[str]) -> tuple[int, dict[str, object]]:
    buffer = StringIO()
    with redirect_stdout(buffer):
        code = cli.main(args)
    return code, json.loads(buffer.getvalue().strip())


def _write_pdf(path, pages: int) -> None:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    buf = BytesIO()
    writer.write(buf)
    path.write_bytes(buf.getvalue())


def test_cli_split_writes_archive(tmp_path):
    source = tmp_path / "packet.pdf"
    _write_pdf(source, 4)
    out_dir = tmp_path / "out"

    code, payload = _run_cli(
        [
            "split",
            str(source),
            "--ranges",
            "1-4",
            "--exclusions",
            "3",
            "--prefix",
            "DMC",
            "--zip-name",
            "batch one",
            "--output-dir",
            str(out_dir),
        ]
    )
    assert code == 0
    assert payload["success"] is True
    archive = out_dir / "batch_one.zip"
    assert payload["archive"] == str(archive)
    with zipfile.ZipFile(archive) as zf:
        assert zf.namelist() == ["DMC1.pdf", "DMC2.pdf", "DMC4.pdf", "DMC5.pdf"]


def test_cli_split_reports_bad_ranges(tmp_path):
    source = tmp_path / "packet.pdf"
    _write_pdf(source, 1)
    code, payload = _run_cli(["split", str(source), "--ranges", "1-"])
    assert code == 1
    assert payload["success"] is False
    assert "1-" in payload["error"]


def test_cli_split_reports_missing_input(tmp_path):
    code, payload = _run_cli(["split", str(tmp_path / "nope.pdf"), "--ranges", "1"])
    assert code == 1
    assert "Unable to read" in payload["error"]


def test_cli_plan_previews_names():
    code, payload = _run_cli(["plan", "--ranges", "01-03", "--exclusions", "2"])
    assert code == 0
    assert payload["file_names"] == ["01.pdf", "03.pdf", "04.pdf"]
    assert payload["padding_length"] == 2
