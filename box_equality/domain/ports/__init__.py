"""
Ports (interfaces) for Box Equality.

Ports define the equality capabilities that value types and comparers
implement. Containers depend on these interfaces, never on a concrete
value type.
"""

from box_equality.domain.ports.equality import Equatable, EqualityComparer

__all__: list[str] = ["EqualityComparer", "Equatable"]
