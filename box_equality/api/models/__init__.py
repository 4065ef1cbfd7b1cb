"""Pydantic models for serialized demonstration output."""

from box_equality.api.models.demo_report import (
    ComparisonResultResponse,
    DemoReportResponse,
    DemoRunResponse,
)

__all__ = [
    "ComparisonResultResponse",
    "DemoReportResponse",
    "DemoRunResponse",
]
