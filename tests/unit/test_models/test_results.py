"""Tests for typed operation results."""

from uitest_store.models import ReadResult, ResultStatus, WriteResult


class TestReadResult:
    """Tests for ReadResult."""

    def test_found_with_items_is_ok(self) -> None:
        result = ReadResult.found([1, 2])
        assert result.status is ResultStatus.OK
        assert result.ok
        assert result.items == [1, 2]

    def test_found_without_items_is_not_found(self) -> None:
        result = ReadResult.found([])
        assert result.status is ResultStatus.NOT_FOUND
        assert not result.ok
        assert not result.failed

    def test_failure_keeps_message(self) -> None:
        result = ReadResult.failure(ValueError("disk full"))
        assert result.failed
        assert result.items == []
        assert result.error == "disk full"

    def test_not_found_differs_from_failure(self) -> None:
        assert ReadResult.not_found().status != ReadResult.failure("x").status


class TestWriteResult:
    """Tests for WriteResult."""

    def test_success(self) -> None:
        result = WriteResult.success(5, version=2)
        assert result.ok
        assert bool(result) is True
        assert result.row_id == 5
        assert result.version == 2
        assert result.error is None

    def test_failure(self) -> None:
        result = WriteResult.failure("locked")
        assert not result.ok
        assert bool(result) is False
        assert result.status is ResultStatus.FAILED
        assert result.error == "locked"
