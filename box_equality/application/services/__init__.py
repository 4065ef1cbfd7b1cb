"""Application services for Box Equality."""

from box_equality.application.services.base import LoggingMixin
from box_equality.application.services.equality_demo_service import (
    DEMONSTRATIONS,
    SAMPLE_BOXES,
    EqualityDemoService,
)

__all__: list[str] = [
    "DEMONSTRATIONS",
    "SAMPLE_BOXES",
    "EqualityDemoService",
    "LoggingMixin",
]
