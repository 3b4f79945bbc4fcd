"""Data models for uitest-store."""

from uitest_store.models.reports import (
    DeviceInfo,
    ExecutionReport,
    ReportImage,
    ReportStep,
    from_epoch_millis,
    to_epoch_millis,
)
from uitest_store.models.results import ReadResult, ResultStatus, WriteResult
from uitest_store.models.tests import PendingTest, RecordedStep, RecordedTest

__all__ = [
    "DeviceInfo",
    "ExecutionReport",
    "PendingTest",
    "ReadResult",
    "RecordedStep",
    "RecordedTest",
    "ReportImage",
    "ReportStep",
    "ResultStatus",
    "WriteResult",
    "from_epoch_millis",
    "to_epoch_millis",
]
