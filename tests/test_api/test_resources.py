"""Tests for API resource models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from rpquery.api.models import Filter, Launch, LaunchMode, Page


def _launch_payload(**overrides):
    payload = {
        "id": "5f1a",
        "name": "smoke",
        "number": 42,
        "description": "nightly run",
        "start_time": 1700000000123,
        "end_time": "2023-11-14T23:20:00.000+0100",
        "status": "FAILED",
        "tags": ["nightly", "smoke", "nightly"],
        "mode": "DEFAULT",
        "approximateDuration": 12.5,
        "hasRetries": True,
        "statistics": {
            "executions": {"total": 10, "passed": 8, "failed": 2},
            "defects": {"product_bug": {"total": 2, "pb001": 2}},
        },
        "owner": "alice",
    }
    payload.update(overrides)
    return payload


class TestLaunch:
    def test_full_payload(self):
        launch = Launch.model_validate(_launch_payload())
        assert launch.id == "5f1a"
        assert launch.number == 42
        assert launch.start_time == datetime(2023, 11, 14, 22, 13, 20, 123000, tzinfo=timezone.utc)
        assert launch.end_time == datetime(2023, 11, 14, 22, 20, tzinfo=timezone.utc)
        assert launch.tags == frozenset({"nightly", "smoke"})
        assert launch.mode is LaunchMode.DEFAULT
        assert launch.approximate_duration == 12.5
        assert launch.has_retries is True
        assert launch.statistics.executions.failed == 2
        assert launch.statistics.defects.product_bug == {"total": 2, "pb001": 2}
        assert launch.statistics.defects.system_issue == {}

    def test_missing_fields_default(self):
        launch = Launch.model_validate({"id": "x"})
        assert launch.name == ""
        assert launch.number == 0
        assert launch.start_time is None
        assert launch.tags == frozenset()
        assert launch.mode is None
        assert launch.has_retries is False
        assert launch.statistics is None

    def test_null_treated_as_missing(self):
        launch = Launch.model_validate({"id": "x", "name": None, "tags": None, "end_time": None})
        assert launch.name == ""
        assert launch.tags == frozenset()
        assert launch.end_time is None

    def test_numeric_id_coerced(self):
        assert Launch.model_validate({"id": 17}).id == "17"

    def test_immutable(self):
        launch = Launch.model_validate(_launch_payload())
        with pytest.raises(ValidationError):
            launch.name = "changed"

    def test_bad_timestamp_rejected(self):
        with pytest.raises(ValidationError, match="start_time"):
            Launch.model_validate(_launch_payload(start_time="last tuesday"))

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            Launch.model_validate(_launch_payload(mode="TURBO"))

    def test_json_dump_uses_wire_names_and_epoch_millis(self):
        launch = Launch.model_validate(_launch_payload())
        dumped = launch.model_dump(mode="json", by_alias=True)
        assert dumped["start_time"] == 1700000000123
        assert dumped["end_time"] == 1700000400000
        assert dumped["approximateDuration"] == 12.5
        assert dumped["hasRetries"] is True


class TestPage:
    def test_launch_page(self):
        page = Page[Launch].model_validate(
            {
                "content": [_launch_payload(), _launch_payload(id="5f1b", number=43)],
                "page": {"number": 1, "size": 20, "totalElements": 2, "totalPages": 1},
            }
        )
        assert [launch.number for launch in page.content] == [42, 43]
        assert page.page_number == 1
        assert page.page_size == 20
        assert page.total_elements == 2
        assert page.total_pages == 1

    def test_empty_page(self):
        page = Page[Filter].model_validate({})
        assert page.content == []
        assert page.total_elements == 0

    def test_filter_page(self):
        page = Page[Filter].model_validate(
            {
                "content": [
                    {
                        "id": "f1",
                        "name": "failed-only",
                        "type": "launch",
                        "owner": "alice",
                        "entities": [
                            {"filtering_field": "status", "condition": "eq", "value": "FAILED"}
                        ],
                    }
                ],
                "page": {"number": 1, "size": 1, "totalElements": 1, "totalPages": 1},
            }
        )
        saved = page.content[0]
        assert saved.name == "failed-only"
        assert saved.entities[0].field == "status"
        assert saved.selection is None
