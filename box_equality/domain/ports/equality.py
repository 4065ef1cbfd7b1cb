"""Equality capability ports.

Defines the two ways a value can take part in equality checks:

- EqualityComparer: an external strategy handed to a container. The value
  type stays untouched, so several notions of equality can coexist.
- Equatable: a typed equals() implemented by the value type itself.

Contract shared by both:
    equals(x, y) implies hash(x) == hash(y). The converse does not hold.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class EqualityComparer(ABC, Generic[T]):
    """Abstract protocol for pluggable equality strategies.

    Implementations must be total: both methods accept None without
    raising. Containers such as ComparerDict and ComparerSet call these
    instead of the element's own __eq__/__hash__.

    Implementations include:
    - DefaultEqualityComparer: delegates to the type's own equality
    - BoxEqualityComparer: full three-field comparison of boxes
    """

    @abstractmethod
    def equals(self, x: T | None, y: T | None) -> bool:
        """Determine whether two values are equal under this strategy.

        Args:
            x: First value, may be None.
            y: Second value, may be None.

        Returns:
            True if the values belong to the same equivalence class.
        """
        ...

    @abstractmethod
    def hash(self, obj: T | None) -> int:
        """Return a hash consistent with equals().

        Args:
            obj: The value to hash, may be None.

        Returns:
            An integer hash. Equal values MUST produce equal hashes.
        """
        ...


@runtime_checkable
class Equatable(Protocol[T_contra]):
    """Typed equality implemented by the value type itself.

    The typed counterpart of __eq__: it takes the value's own type rather
    than an arbitrary object.
    """

    def equals(self, other: T_contra | None) -> bool:
        """Return True if other is equal to this value."""
        ...
