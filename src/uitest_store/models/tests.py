"""Recorded test models.

These mirror the fields of the host framework's test and step
objects that the store persists. Field names serialize to
camelCase so stored payloads match the host's own JSON.
"""

import base64
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class RecordedStep(BaseModel):
    """A single recorded step of a UI test."""

    id: str = Field(min_length=1)
    image: bytes = b""
    values: dict[str, Any] = Field(default_factory=dict)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("image", mode="before")
    @classmethod
    def decode_image(cls, v: Any) -> Any:
        """Accept base64 text or a list of byte values as well as raw bytes."""
        if v is None:
            return b""
        if isinstance(v, str):
            return base64.b64decode(v)
        if isinstance(v, list):
            return bytes(v)
        return v

    @field_serializer("image")
    def encode_image(self, image: bytes) -> str:
        """Serialize image bytes as base64 text."""
        return base64.b64encode(image).decode("ascii")

    def without_image(self) -> "RecordedStep":
        """Return a copy of this step with its image cleared."""
        return self.model_copy(update={"image": b""})


class RecordedTest(BaseModel):
    """A named, versioned sequence of recorded steps."""

    name: str = Field(min_length=1)
    active: bool = True
    version: int | None = Field(default=None, ge=0)
    suite_name: str | None = None
    steps: list[RecordedStep] = Field(default_factory=list)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @property
    def next_version(self) -> int:
        """Version this test will carry once written."""
        return (self.version or 0) + 1


@dataclass(frozen=True)
class PendingTest:
    """A test loaded from storage and queued for execution."""

    test: RecordedTest

    @classmethod
    def memory(cls, test: RecordedTest) -> "PendingTest":
        """Wrap an already-loaded test."""
        return cls(test=test)

    @property
    def name(self) -> str:
        return self.test.name

    @property
    def version(self) -> int | None:
        return self.test.version

    @property
    def active(self) -> bool:
        return self.test.active

    @property
    def suite_name(self) -> str | None:
        return self.test.suite_name

    async def load_test(self) -> RecordedTest:
        """Return the full test definition."""
        return self.test
