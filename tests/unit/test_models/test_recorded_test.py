"""Tests for recorded test models."""

import base64
import json

import pytest
from pydantic import ValidationError

from uitest_store.models import PendingTest, RecordedStep, RecordedTest


class TestRecordedStep:
    """Tests for RecordedStep."""

    def test_image_defaults_to_empty(self) -> None:
        step = RecordedStep(id="tap")
        assert step.image == b""
        assert step.values == {}

    def test_image_accepts_base64_text(self) -> None:
        step = RecordedStep(id="tap", image=base64.b64encode(b"png").decode())
        assert step.image == b"png"

    def test_image_accepts_byte_list(self) -> None:
        step = RecordedStep(id="tap", image=[1, 2, 255])
        assert step.image == b"\x01\x02\xff"

    def test_image_serializes_as_base64(self) -> None:
        step = RecordedStep(id="tap", image=b"png")
        data = json.loads(step.model_dump_json(by_alias=True))
        assert data["image"] == base64.b64encode(b"png").decode()

    def test_without_image_clears_only_image(self) -> None:
        step = RecordedStep(id="tap", image=b"png", values={"x": 1})
        stripped = step.without_image()
        assert stripped.image == b""
        assert stripped.values == {"x": 1}
        assert step.image == b"png"

    def test_id_required(self) -> None:
        with pytest.raises(ValidationError):
            RecordedStep(id="")


class TestRecordedTest:
    """Tests for RecordedTest."""

    def test_defaults(self) -> None:
        test = RecordedTest(name="login")
        assert test.active is True
        assert test.version is None
        assert test.suite_name is None
        assert test.steps == []

    def test_next_version_from_none(self) -> None:
        assert RecordedTest(name="login").next_version == 1

    def test_next_version_increments(self) -> None:
        assert RecordedTest(name="login", version=4).next_version == 5

    def test_serializes_with_camel_case(self) -> None:
        test = RecordedTest(name="login", suite_name="smoke")
        data = json.loads(test.model_dump_json(by_alias=True))
        assert data["suiteName"] == "smoke"
        assert "suite_name" not in data

    def test_accepts_camel_case_and_field_names(self) -> None:
        assert RecordedTest.model_validate({"name": "a", "suiteName": "s"}).suite_name == "s"
        assert RecordedTest(name="a", suite_name="s").suite_name == "s"

    def test_negative_version_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RecordedTest(name="login", version=-1)


class TestPendingTest:
    """Tests for PendingTest."""

    @pytest.mark.asyncio
    async def test_memory_wraps_test(self) -> None:
        test = RecordedTest(name="login", version=3, active=False, suite_name="smoke")
        pending = PendingTest.memory(test)

        assert pending.name == "login"
        assert pending.version == 3
        assert pending.active is False
        assert pending.suite_name == "smoke"
        assert await pending.load_test() is test
