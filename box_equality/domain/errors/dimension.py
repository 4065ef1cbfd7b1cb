"""Dimension validation error for box value types."""

from __future__ import annotations

from box_equality.domain.exceptions import BoxEqualityError


class InvalidDimensionError(BoxEqualityError):
    """Raised when a box dimension is neither an int nor None.

    Attributes:
        field_name: Name of the offending dimension.
        value: The rejected value.
    """

    def __init__(self, field_name: str, value: object) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"{field_name} must be int or None, got {type(value).__name__}"
        )
