"""PDF splitter API blueprint with standardized responses."""

from __future__ import annotations

import base64

from flask import Blueprint, Response, current_app, request
from pydantic import Field
from werkzeug.datastructures import FileStorage

from common.errors import AppError, ProcessingAppError, ValidationAppError
from common.io import secure_filename, with_extension
from common.responses import attachment, fail, ok
from common.validation import (
    FileLimit,
    SchemaModel,
    ValidationError,
    enforce_limits,
    parse_model,
    validate_mime,
)

from ..core import (
    DEFAULT_ZIP_NAME,
    RangeError,
    SplitConfig,
    pdf_metadata,
    plan_split,
    process_document,
    sorted_exclusions,
)
from ..core.validation import MISSING_RANGES_MESSAGE


class SplitForm(SchemaModel):
    ranges: str = ""
    exclusions: str = ""
    prefix: str = ""
    suffix: str = ""
    zip_name: str | None = None


class PlanRequest(SchemaModel):
    ranges: str = ""
    exclusions: str = ""
    prefix: str = ""
    suffix: str = ""
    page_count: int | None = Field(default=None, ge=0)


DEFAULT_PREVIEW_MAX_PAGES = 10000

api_bp = Blueprint("pdf_splitter_api", __name__, url_prefix="/api/pdf_splitter")


def _settings() -> dict:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("pdf_splitter", {}) or {}


def _upload_limit() -> FileLimit:
    upload = _settings().get("upload")
    return FileLimit.from_settings(upload, default_max_files=1, default_max_mb=500)


def _preview_max_pages() -> int:
    try:
        value = int(_settings().get("preview_max_pages", DEFAULT_PREVIEW_MAX_PAGES))
    except (TypeError, ValueError):
        return DEFAULT_PREVIEW_MAX_PAGES
    return value if value > 0 else DEFAULT_PREVIEW_MAX_PAGES


def _archive_name(requested: str | None) -> str:
    default = _settings().get("default_zip_name") or DEFAULT_ZIP_NAME
    return with_extension(secure_filename(requested or default, fallback=default), ".zip")


def _download_requested() -> bool:
    return request.args.get("download") == "1"


def _check_upload(file: FileStorage) -> None:
    try:
        enforce_limits([file], _upload_limit())
        validate_mime([file], {"application/pdf"})
    except ValidationError as exc:
        raise ValidationAppError(
            message=str(exc),
            code="pdf_splitter.invalid_upload",
            details=getattr(exc, "details", None),
        ) from exc


def _parse_form(model: type[SchemaModel], payload: dict) -> SchemaModel:
    try:
        return parse_model(model, payload)
    except ValidationError as exc:
        raise ValidationAppError(
            message=str(exc),
            code="pdf_splitter.invalid_request",
            details={"errors": getattr(exc, "details", None)},
        ) from exc


@api_bp.post("/split")
def split() -> Response:
    try:
        form = _parse_form(SplitForm, request.form.to_dict())
        file = request.files.get("file")
        if file is not None:
            _check_upload(file)
    except AppError as exc:
        return fail(exc)

    config = SplitConfig(
        data=file.read() if file is not None else None,
        filename=(file.filename or "") if file is not None else "",
        prefix=form.prefix,
        suffix=form.suffix,
        zip_name=_archive_name(form.zip_name),
        ranges=form.ranges,
        exclusions=form.exclusions,
    )
    progress: list[float] = []
    outcome = process_document(config, on_progress=progress.append)
    if outcome.invalid_config:
        return fail(
            ValidationAppError(
                message=outcome.error or "Invalid configuration",
                code="pdf_splitter.invalid_config",
            )
        )
    if not outcome.success or outcome.archive is None:
        return fail(
            ProcessingAppError(
                message=outcome.error or "Processing failed",
                code="pdf_splitter.processing_failed",
            )
        )

    if _download_requested():
        return attachment(outcome.archive, filename=config.zip_name, mimetype="application/zip")

    payload = {
        "archive_name": config.zip_name,
        "archive_base64": base64.b64encode(outcome.archive).decode("ascii"),
        "results": [result.to_dict() for result in outcome.results],
        "page_count": outcome.page_count,
        "processed_count": outcome.processed_count,
        "failed_count": len(outcome.failed),
        "progress": progress[-1] if progress else 0,
    }
    return ok(payload)


@api_bp.post("/plan")
def plan() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = _parse_form(PlanRequest, raw_payload)
    except AppError as exc:
        return fail(exc)
    if not payload.ranges:
        return fail(
            ValidationAppError(message=MISSING_RANGES_MESSAGE, code="pdf_splitter.invalid_config")
        )
    max_pages = _preview_max_pages()
    page_count = max_pages if payload.page_count is None else min(payload.page_count, max_pages)
    try:
        result = plan_split(
            payload.ranges,
            payload.exclusions,
            payload.prefix,
            payload.suffix,
            page_count=page_count,
        )
    except RangeError as exc:
        return fail(ValidationAppError(message=str(exc), code="pdf_splitter.invalid_range"))

    data = result.to_dict()
    data["exclusions"] = sorted_exclusions(payload.exclusions)
    return ok(data)


@api_bp.post("/metadata")
def metadata() -> Response:
    file = request.files.get("file")
    if not file:
        return fail(
            ValidationAppError(message="No file provided", code="pdf_splitter.file_missing")
        )
    try:
        _check_upload(file)
    except AppError as exc:
        return fail(exc)

    try:
        info = pdf_metadata(file.read())
    except Exception as exc:
        return fail(
            ProcessingAppError(
                message="Unable to read PDF",
                code="pdf_splitter.metadata_error",
                details={"error": str(exc)},
            )
        )

    payload = {
        "filename": file.filename,
        "pages": info.pages,
        "size_bytes": info.size_bytes,
        "size_label": info.size_label,
    }
    return ok(payload)


blueprints = [api_bp]


__all__ = ["blueprints", "split", "plan", "metadata"]
