"""Execution report models."""

from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer
from pydantic.alias_generators import to_camel

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to integer milliseconds since the Unix epoch.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(value: Any) -> Any:
    """Convert integer epoch milliseconds to an aware datetime.

    Any other value is passed through for pydantic to parse.
    """
    if isinstance(value, int | float) and not isinstance(value, bool):
        return EPOCH + timedelta(milliseconds=value)
    return value


EpochMillis = Annotated[
    datetime,
    BeforeValidator(from_epoch_millis),
    PlainSerializer(to_epoch_millis, return_type=int),
]

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class DeviceInfo(BaseModel):
    """Metadata about the device a report was captured on.

    Keys the host adds beyond these are kept as extra fields.
    """

    app_identifier: str | None = None
    brand: str | None = None
    build_number: str | None = None
    device: str | None = None
    device_group: str | None = None
    id: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    os: str | None = None
    os_version: str | None = None
    physical_device: bool | None = None
    pixels: dict[str, Any] | None = None
    system_version: str | None = None

    model_config = {**_CAMEL, "extra": "allow"}


class ReportStep(BaseModel):
    """Outcome of one executed step."""

    id: str
    step: dict[str, Any] = Field(default_factory=dict)
    start_time: EpochMillis | None = None
    end_time: EpochMillis | None = None
    error: str | None = None

    model_config = {**_CAMEL}

    @property
    def passed(self) -> bool:
        return self.error is None


class ReportImage(BaseModel):
    """A screenshot captured during execution."""

    id: str
    golden_compatible: bool = True
    hash: str | None = None
    image: bytes = b""

    model_config = {**_CAMEL}

    def as_raw_string(self) -> str:
        """Map each image byte to one character."""
        return self.image.decode("latin-1")

    @classmethod
    def from_raw_string(cls, raw: str, image_id: str) -> "ReportImage":
        """Rebuild an image from its raw string form.

        Only the bytes survive storage, so ``hash`` is lost and
        ``golden_compatible`` takes its default.
        """
        return cls(id=image_id, image=raw.encode("latin-1"))


class ExecutionReport(BaseModel):
    """Immutable record of one completed test execution."""

    name: str = Field(min_length=1)
    suite_name: str | None = None
    version: int | None = None
    device_info: DeviceInfo = Field(default_factory=DeviceInfo)
    start_time: EpochMillis
    end_time: EpochMillis | None = None
    steps: list[ReportStep] = Field(default_factory=list)
    images: list[ReportImage] = Field(default_factory=list)
    logs: list[str] = Field(default_factory=list)
    runtime_exception: str | None = None

    model_config = {**_CAMEL, "frozen": True}

    @property
    def passed_steps(self) -> int:
        return sum(1 for step in self.steps if step.passed)

    @property
    def error_steps(self) -> int:
        return sum(1 for step in self.steps if not step.passed)

    @property
    def success(self) -> bool:
        """A run succeeds when no step failed and nothing was thrown."""
        return self.error_steps == 0 and self.runtime_exception is None
