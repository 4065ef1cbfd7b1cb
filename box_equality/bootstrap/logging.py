"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from box_equality.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)
from box_equality.infrastructure.observability import (
    generate_correlation_id,
    set_correlation_id,
)


def configure_structlog(environment: str) -> str:
    """Configure structlog and start a new correlation context.

    Returns:
        The correlation ID assigned to this run.
    """
    _configure_structlog(environment=environment)
    correlation_id = generate_correlation_id()
    set_correlation_id(correlation_id)
    return correlation_id


__all__ = ["configure_structlog"]
