"""Unit tests for the demonstration report API models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from box_equality.api.models import (
    ComparisonResultResponse,
    DemoReportResponse,
    DemoRunResponse,
)
from box_equality.domain.models import ComparisonResult, DemoReport


@pytest.fixture
def report() -> DemoReport:
    return DemoReport(
        demonstration="comparer",
        dictionary_count=2,
        set_count=2,
        distinct_count=2,
        rejections=("Unable to add (4, 3, 4): An item with the same key has already been added.",),
        comparisons=(
            ComparisonResult("box1", "box2", "EqualityComparer", True),
            ComparisonResult("box1", "box3", "EqualityComparer", False),
        ),
    )


class TestDemoReportResponse:
    """Tests for DemoReportResponse."""

    def test_from_report(self, report: DemoReport) -> None:
        response = DemoReportResponse.from_report(report)

        assert response.demonstration == "comparer"
        assert response.dictionary_count == 2
        assert response.rejections == list(report.rejections)
        assert response.comparisons[0] == ComparisonResultResponse(
            left="box1", right="box2", method="EqualityComparer", result=True
        )

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DemoReportResponse(
                demonstration="comparer",
                dictionary_count=-1,
                set_count=0,
                distinct_count=0,
            )

    def test_json_round_trip_shape(self, report: DemoReport) -> None:
        payload = json.loads(DemoReportResponse.from_report(report).model_dump_json())

        assert set(payload) == {
            "demonstration",
            "rejections",
            "dictionary_count",
            "comparisons",
            "set_count",
            "distinct_count",
        }
        assert payload["comparisons"][1]["result"] is False


class TestDemoRunResponse:
    """Tests for DemoRunResponse."""

    def test_from_reports(self, report: DemoReport) -> None:
        response = DemoRunResponse.from_reports([report, report], correlation_id="run-1")

        assert response.correlation_id == "run-1"
        assert len(response.reports) == 2

    def test_defaults(self) -> None:
        response = DemoRunResponse()

        assert response.correlation_id == ""
        assert response.reports == []
