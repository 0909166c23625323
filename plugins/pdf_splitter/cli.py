"""Command line interface for the PDF splitter plugin."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from common.io import secure_filename, with_extension

from .core import (
    DEFAULT_ZIP_NAME,
    RangeError,
    SplitConfig,
    plan_split,
    process_document,
)


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def command_split(args: argparse.Namespace) -> int:
    source = Path(args.input)
    try:
        data = source.read_bytes()
    except OSError as exc:
        _print({"success": False, "error": f"Unable to read {source}: {exc.strerror}"})
        return 1

    zip_name = with_extension(
        secure_filename(args.zip_name, fallback=DEFAULT_ZIP_NAME), ".zip"
    )
    config = SplitConfig(
        data=data,
        filename=source.name,
        prefix=args.prefix,
        suffix=args.suffix,
        zip_name=zip_name,
        ranges=args.ranges,
        exclusions=args.exclusions,
    )
    outcome = process_document(config)
    if not outcome.success or outcome.archive is None:
        _print({"success": False, "error": outcome.error})
        return 1

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    archive_path = output_dir / zip_name
    archive_path.write_bytes(outcome.archive)
    _print(
        {
            "success": True,
            "archive": str(archive_path),
            "page_count": outcome.page_count,
            "results": [result.to_dict() for result in outcome.results],
        }
    )
    return 0


def command_plan(args: argparse.Namespace) -> int:
    try:
        plan = plan_split(
            args.ranges,
            args.exclusions,
            args.prefix,
            args.suffix,
            page_count=args.page_count,
        )
    except RangeError as exc:
        _print({"success": False, "error": str(exc)})
        return 1
    _print({"success": True, **plan.to_dict()})
    return 0


def _add_naming_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--ranges", required=True, help='Page ranges, e.g. "1-5,8,10-12"')
    parser.add_argument("--exclusions", default="", help='Numbers to skip in file names, e.g. "3,7"')
    parser.add_argument("--prefix", default="", help="Text placed before each number")
    parser.add_argument("--suffix", default="", help="Text placed after each number")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PDF Page Splitter CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split", help="Split a PDF into a ZIP of single pages")
    split_parser.add_argument("input", help="Source PDF path")
    _add_naming_arguments(split_parser)
    split_parser.add_argument("--zip-name", dest="zip_name", default=DEFAULT_ZIP_NAME, help="Archive name")
    split_parser.add_argument("--output-dir", dest="output_dir", default=".", help="Where to write the archive")
    split_parser.set_defaults(func=command_split)

    plan_parser = subparsers.add_parser("plan", help="Preview output file names")
    _add_naming_arguments(plan_parser)
    plan_parser.add_argument("--page-count", dest="page_count", type=int, default=None, help="Source page count")
    plan_parser.set_defaults(func=command_plan)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
