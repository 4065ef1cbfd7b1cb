"""Demonstration report API models.

Pydantic models used when a run is asked for JSON output instead of the
console lines.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from box_equality.domain.models import ComparisonResult, DemoReport


class ComparisonResultResponse(BaseModel):
    """One pairwise comparison.

    Attributes:
        left: Label of the left operand.
        right: Label of the right operand.
        method: How the comparison was made.
        result: Outcome of the comparison.
    """

    left: str = Field(..., description="Label of the left operand", examples=["box1"])
    right: str = Field(..., description="Label of the right operand", examples=["box2"])
    method: str = Field(
        ...,
        description="Equality mechanism used for the comparison",
        examples=["EqualityComparer"],
    )
    result: bool = Field(..., description="Whether the operands were equal")

    @classmethod
    def from_result(cls, result: ComparisonResult) -> "ComparisonResultResponse":
        return cls(
            left=result.left,
            right=result.right,
            method=result.method,
            result=result.result,
        )


class DemoReportResponse(BaseModel):
    """Serialized outcome of one demonstration."""

    demonstration: str = Field(
        ..., description="Demonstration name", examples=["comparer"]
    )
    rejections: list[str] = Field(
        default_factory=list,
        description="Messages for rejected dictionary insertions",
    )
    dictionary_count: int = Field(
        ..., ge=0, description="Entries left in the dictionary"
    )
    comparisons: list[ComparisonResultResponse] = Field(
        default_factory=list, description="Pairwise comparison results"
    )
    set_count: int = Field(..., ge=0, description="Size of the set of all boxes")
    distinct_count: int = Field(
        ..., ge=0, description="Length of the deduplicated box list"
    )

    @classmethod
    def from_report(cls, report: DemoReport) -> "DemoReportResponse":
        return cls(
            demonstration=report.demonstration,
            rejections=list(report.rejections),
            dictionary_count=report.dictionary_count,
            comparisons=[
                ComparisonResultResponse.from_result(c) for c in report.comparisons
            ],
            set_count=report.set_count,
            distinct_count=report.distinct_count,
        )


class DemoRunResponse(BaseModel):
    """All reports produced by one run."""

    correlation_id: str = Field(
        default="", description="Correlation ID shared by the run's log entries"
    )
    reports: list[DemoReportResponse] = Field(default_factory=list)

    @classmethod
    def from_reports(
        cls, reports: Iterable[DemoReport], correlation_id: str = ""
    ) -> "DemoRunResponse":
        return cls(
            correlation_id=correlation_id,
            reports=[DemoReportResponse.from_report(r) for r in reports],
        )
