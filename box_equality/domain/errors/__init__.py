"""Domain errors for Box Equality.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BoxEqualityError.
"""

from box_equality.domain.errors.dimension import InvalidDimensionError
from box_equality.domain.errors.duplicate_key import (
    DUPLICATE_KEY_MESSAGE,
    DuplicateKeyError,
)

__all__: list[str] = [
    "DUPLICATE_KEY_MESSAGE",
    "DuplicateKeyError",
    "InvalidDimensionError",
]
