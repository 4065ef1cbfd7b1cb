"""Domain services for Box Equality.

Concrete equality strategies implementing the EqualityComparer port.
"""

from box_equality.domain.services.comparers import (
    BoxEqualityComparer,
    DefaultEqualityComparer,
    default_comparer,
)

__all__: list[str] = [
    "BoxEqualityComparer",
    "DefaultEqualityComparer",
    "default_comparer",
]
