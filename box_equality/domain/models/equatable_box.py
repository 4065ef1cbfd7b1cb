"""EquatableBox: height-only equality through the Equatable capability.

Behaves like Box for every container, but routes all equality through a
typed equals() method. The operator forms are exposed twice: as the
module functions equals()/not_equals(), which accept None on either
side, and as the == / != operators.

equals() is total. None or a value of another type yields False rather
than an error.
"""

from __future__ import annotations

from dataclasses import dataclass

from box_equality.domain.models.box import height_hash
from box_equality.domain.models.dimensions import BoxDimensions


@dataclass(frozen=True, eq=False)
class EquatableBox(BoxDimensions):
    """Immutable box implementing Equatable[EquatableBox], compared by height."""

    def equals(self, other: EquatableBox | None) -> bool:
        """Typed equality: True iff other is an EquatableBox of the same height."""
        if other is None or not isinstance(other, EquatableBox):
            return False
        return self.height == other.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EquatableBox):
            return False
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return height_hash(self.height)

    def __repr__(self) -> str:
        return f"EquatableBox{self}"


def equals(left: EquatableBox | None, right: EquatableBox | None) -> bool:
    """Operator form of equality.

    If either operand is None, falls back to identity so that
    equals(None, None) is True and equals(box, None) is False.
    """
    if left is None or right is None:
        return left is right
    return left.equals(right)


def not_equals(left: EquatableBox | None, right: EquatableBox | None) -> bool:
    """Operator form of inequality, the negation of equals()."""
    return not equals(left, right)
