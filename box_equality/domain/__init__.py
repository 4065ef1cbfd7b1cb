"""
Domain layer - value types and equality capabilities for Box Equality.

This layer contains:
- Value types (Box, EquatableBox)
- Equality ports (EqualityComparer, Equatable)
- Comparer implementations and comparer-aware collections
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from box_equality.domain.errors import DuplicateKeyError
from box_equality.domain.exceptions import BoxEqualityError

__all__: list[str] = [
    "BoxEqualityError",
    "DuplicateKeyError",
]
