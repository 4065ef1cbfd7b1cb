"""Equality comparer implementations.

DefaultEqualityComparer defers to whatever the value type says about
itself. BoxEqualityComparer ignores that and compares every dimension,
which lets a single container use full-field equality while Box keeps
its height-only __eq__ everywhere else.
"""

from __future__ import annotations

from typing import Any

from box_equality.domain.models.dimensions import BoxDimensions
from box_equality.domain.ports.equality import EqualityComparer

# Hash contribution of an absent value
NONE_HASH: int = 0


def _optional_hash(value: object | None) -> int:
    return NONE_HASH if value is None else hash(value)


class DefaultEqualityComparer(EqualityComparer[Any]):
    """Comparer that delegates to the value's own __eq__ and __hash__.

    Presence is checked first, so None never reaches the value's methods.
    """

    def equals(self, x: Any | None, y: Any | None) -> bool:
        if x is y:
            return True
        if x is None or y is None:
            return False
        return bool(x == y)

    def hash(self, obj: Any | None) -> int:
        return _optional_hash(obj)

    def __repr__(self) -> str:
        return "DefaultEqualityComparer()"


_DEFAULT_COMPARER = DefaultEqualityComparer()


def default_comparer() -> DefaultEqualityComparer:
    """Return the shared comparer used when a container is given none."""
    return _DEFAULT_COMPARER


class BoxEqualityComparer(EqualityComparer[BoxDimensions]):
    """Full-field comparer for boxes.

    Two boxes are equal iff height, length and width are pairwise equal,
    an absent dimension being equal only to another absent one. The
    boxes' own __eq__ is never consulted.
    """

    def equals(self, x: BoxDimensions | None, y: BoxDimensions | None) -> bool:
        if x is y:
            return True
        if x is None or y is None:
            return False
        return (
            x.height == y.height
            and x.length == y.length
            and x.width == y.width
        )

    def hash(self, obj: BoxDimensions | None) -> int:
        """XOR of the per-dimension hashes, absent dimensions contributing 0.

        Note: equal boxes always share a hash, but (4, 3, 4) and
        (4, 4, 3) share one too without being equal.
        """
        if obj is None:
            return NONE_HASH
        return (
            _optional_hash(obj.height)
            ^ _optional_hash(obj.length)
            ^ _optional_hash(obj.width)
        )

    def __repr__(self) -> str:
        return "BoxEqualityComparer()"
