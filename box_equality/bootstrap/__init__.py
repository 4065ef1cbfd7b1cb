"""Bootstrap wiring for Box Equality entry points."""

from box_equality.bootstrap.logging import configure_structlog

__all__ = ["configure_structlog"]
