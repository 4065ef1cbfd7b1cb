"""
Pytest configuration and shared fixtures for Box Equality tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Structured logging is reset to a known configuration per test
"""

import pytest
import structlog

from box_equality.domain.models import Box, EquatableBox
from box_equality.infrastructure.observability import set_correlation_id

SAMPLE_DIMENSIONS = ((4, 3, 4), (4, 3, 4), (3, 4, 3), (4, 4, 3))


@pytest.fixture(autouse=True)
def reset_observability():
    """Start each test from default structlog config and no correlation ID."""
    structlog.reset_defaults()
    yield
    set_correlation_id("")


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from box_equality import __version__

    return __version__


@pytest.fixture
def boxes() -> list[Box]:
    """box1..box4 as Box values: (4,3,4), (4,3,4), (3,4,3), (4,4,3)."""
    return [Box(*d) for d in SAMPLE_DIMENSIONS]


@pytest.fixture
def equatable_boxes() -> list[EquatableBox]:
    """box1..box4 as EquatableBox values."""
    return [EquatableBox(*d) for d in SAMPLE_DIMENSIONS]
