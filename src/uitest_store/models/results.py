"""Typed results returned by store operations."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResultStatus(StrEnum):
    """Outcome of a store operation."""

    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """
    Result of a read operation.

    NOT_FOUND and FAILED both carry no items; ``error`` is set
    only for FAILED.
    """

    status: ResultStatus
    items: list[T] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def found(cls, items: list[T]) -> "ReadResult[T]":
        if not items:
            return cls(status=ResultStatus.NOT_FOUND)
        return cls(status=ResultStatus.OK, items=items)

    @classmethod
    def not_found(cls) -> "ReadResult[T]":
        return cls(status=ResultStatus.NOT_FOUND)

    @classmethod
    def failure(cls, error: BaseException | str) -> "ReadResult[T]":
        return cls(status=ResultStatus.FAILED, error=str(error))

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def failed(self) -> bool:
        return self.status is ResultStatus.FAILED


@dataclass(frozen=True)
class WriteResult:
    """Result of a write or report operation."""

    status: ResultStatus
    row_id: int | None = None
    version: int | None = None
    error: str | None = None

    @classmethod
    def success(cls, row_id: int | None, version: int | None = None) -> "WriteResult":
        return cls(status=ResultStatus.OK, row_id=row_id, version=version)

    @classmethod
    def failure(cls, error: BaseException | str) -> "WriteResult":
        return cls(status=ResultStatus.FAILED, error=str(error))

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    def __bool__(self) -> bool:
        return self.ok
