"""Demonstration run configuration.

Environment Variables:
- BOX_DEMO_DEMONSTRATIONS: Comma separated demonstrations to run
  (default: "comparer,equatable")
- BOX_DEMO_LOG_ENVIRONMENT: "production" (JSON logs) or "development"
  (console logs) (default: "development")
- BOX_DEMO_OUTPUT_FORMAT: "text" or "json" (default: "text")
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEMONSTRATION_NAMES: tuple[str, ...] = ("comparer", "equatable")
LOG_ENVIRONMENTS: tuple[str, ...] = ("production", "development")
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Blank values count as unset.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower()


def _get_list_env(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Get comma separated environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    items = tuple(item.strip().lower() for item in value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class DemoConfig:
    """Configuration for a demonstration run.

    Attributes:
        demonstrations: Demonstrations to run, in order.
        log_environment: structlog environment ("production" or "development").
        output_format: "text" prints the demonstration lines,
                       "json" prints the serialized reports.
    """

    demonstrations: tuple[str, ...] = DEMONSTRATION_NAMES
    log_environment: str = "development"
    output_format: str = "text"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.demonstrations:
            raise ValueError("demonstrations must not be empty")
        unknown = [d for d in self.demonstrations if d not in DEMONSTRATION_NAMES]
        if unknown:
            raise ValueError(
                f"unknown demonstrations {unknown}, "
                f"expected any of: {', '.join(DEMONSTRATION_NAMES)}"
            )
        if self.log_environment not in LOG_ENVIRONMENTS:
            raise ValueError(
                f"log_environment must be one of {LOG_ENVIRONMENTS}, "
                f"got {self.log_environment!r}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, "
                f"got {self.output_format!r}"
            )

    @classmethod
    def from_environment(cls) -> "DemoConfig":
        """Create config from environment variables with defaults.

        Raises:
            ValueError: If a variable names a value outside the allowed set.
        """
        return cls(
            demonstrations=_get_list_env("BOX_DEMO_DEMONSTRATIONS", DEMONSTRATION_NAMES),
            log_environment=_get_str_env("BOX_DEMO_LOG_ENVIRONMENT", "development"),
            output_format=_get_str_env("BOX_DEMO_OUTPUT_FORMAT", "text"),
        )
