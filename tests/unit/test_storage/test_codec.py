"""Tests for the row codec."""

import json

import pytest

from uitest_store.errors import PayloadError
from uitest_store.models import RecordedStep, RecordedTest
from uitest_store.storage import codec


class TestEncodeTest:
    """Tests for codec.encode_test."""

    def test_strips_images_and_bumps_version(self) -> None:
        test = RecordedTest(
            name="login",
            version=2,
            steps=[RecordedStep(id="tap", image=b"png", values={"x": 1})],
        )

        data, version = codec.encode_test(test, "phone", table="Tests")

        payload = json.loads(data)
        assert version == 3
        assert payload == {
            "name": "login",
            "active": True,
            "version": 3,
            "suiteName": "phone",
            "steps": [{"id": "tap", "image": "", "values": {"x": 1}}],
        }


class TestDecodeTest:
    """Tests for codec.decode_test."""

    def test_decodes_payload(self) -> None:
        test = codec.decode_test(
            '{"name": "login", "version": 1, "steps": [{"id": "tap"}]}', table="Tests"
        )
        assert test.name == "login"
        assert test.steps[0].id == "tap"

    @pytest.mark.parametrize(
        "data",
        ["", "{", "[]", '"text"', '{"name": ""}', '{"name": "a", "steps": "nope"}'],
    )
    def test_malformed_payload_raises(self, data: str) -> None:
        with pytest.raises(PayloadError) as exc_info:
            codec.decode_test(data, table="Tests", row_id=9)

        assert exc_info.value.table == "Tests"
        assert exc_info.value.row_id == 9
