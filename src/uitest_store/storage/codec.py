"""JSON encoding between store models and table rows."""

import json
from typing import Any

from pydantic import ValidationError

from uitest_store.errors import PayloadError
from uitest_store.models.reports import (
    DeviceInfo,
    ExecutionReport,
    ReportImage,
    ReportStep,
    from_epoch_millis,
    to_epoch_millis,
)
from uitest_store.models.tests import RecordedTest

SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


def encode_test(test: RecordedTest, owner: str, *, table: str) -> tuple[str, int]:
    """
    Serialize a test for storage.

    Step images are cleared and the version is bumped before
    encoding; the test is filed under ``owner``.

    Returns:
        The JSON payload and the version it carries.

    Raises:
        PayloadError: If a step value cannot be serialized to JSON.
    """
    version = test.next_version
    stored = test.model_copy(
        update={
            "steps": [step.without_image() for step in test.steps],
            "version": version,
            "suite_name": owner,
        }
    )
    try:
        return stored.model_dump_json(by_alias=True), version
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Test {test.name!r} is not serializable: {e}", table) from e


def decode_test(data: str, *, table: str, row_id: int | None = None) -> RecordedTest:
    """
    Parse a stored test payload.

    Step images are never restored, whatever the payload holds.

    Raises:
        PayloadError: If the payload is not valid JSON or not a test.
    """
    try:
        raw = json.loads(data)
        if not isinstance(raw, dict):
            raise PayloadError("Test payload is not a JSON object", table, row_id)
        for step in raw.get("steps") or []:
            if isinstance(step, dict):
                step.pop("image", None)
        return RecordedTest.model_validate(raw)
    except (TypeError, ValueError, ValidationError) as e:
        raise PayloadError(f"Malformed test payload: {e}", table, row_id) from e


def encode_report(report: ExecutionReport, owner: str, *, table: str) -> dict[str, Any]:
    """
    Build the column values for one report row.

    Raises:
        PayloadError: If the report cannot be serialized, or an integer
            column is outside SQLite's 64-bit range.
    """
    try:
        values = _report_columns(report, owner)
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Report {report.name!r} is not serializable: {e}", table) from e

    for column in ("version", "start_time", "end_time", "inverted_start_time"):
        value = values[column]
        if value is not None and not SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX:
            raise PayloadError(f"Report {column} out of range: {value}", table)
    return values


def _report_columns(report: ExecutionReport, owner: str) -> dict[str, Any]:
    start_time = to_epoch_millis(report.start_time)
    return {
        "owner": owner,
        "name": report.name,
        "version": report.version,
        "device_info": report.device_info.model_dump_json(by_alias=True, exclude_none=True),
        "start_time": start_time,
        "end_time": to_epoch_millis(report.end_time) if report.end_time is not None else None,
        "inverted_start_time": -start_time,
        "passed_steps": report.passed_steps,
        "error_steps": report.error_steps,
        "steps": json.dumps(
            [step.model_dump(mode="json", by_alias=True) for step in report.steps]
        ),
        "images": json.dumps([image.as_raw_string() for image in report.images]),
        "logs": json.dumps(report.logs),
        "runtime_exception": report.runtime_exception,
        "success": 1 if report.success else 0,
    }


def decode_report(row: Any, *, table: str) -> ExecutionReport:
    """
    Rebuild a report from its row.

    Raises:
        PayloadError: If any JSON column is malformed.
    """
    row_id = row["id"]
    try:
        images = json.loads(row["images"] or "[]")
        return ExecutionReport(
            name=row["name"],
            suite_name=row["owner"],
            version=row["version"],
            device_info=DeviceInfo.model_validate(json.loads(row["device_info"] or "{}")),
            start_time=from_epoch_millis(row["start_time"]),
            end_time=from_epoch_millis(row["end_time"]) if row["end_time"] is not None else None,
            steps=[ReportStep.model_validate(s) for s in json.loads(row["steps"] or "[]")],
            images=[
                ReportImage.from_raw_string(raw, image_id=str(index))
                for index, raw in enumerate(images)
            ],
            logs=json.loads(row["logs"] or "[]"),
            runtime_exception=row["runtime_exception"],
        )
    except (AttributeError, TypeError, ValueError, ValidationError) as e:
        raise PayloadError(f"Malformed report row: {e}", table, row_id) from e
