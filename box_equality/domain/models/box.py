"""Box value type with intrusive, height-only equality.

Box overrides __eq__ and __hash__ so that every consumer relying on
default equality (dict, set, distinct() without a comparer) treats two
boxes of the same height as the same box, whatever their length and
width.

Overriding default equality is global: it changes behaviour for every
caller. When only one container needs a different notion of equality,
hand it an EqualityComparer instead (see BoxEqualityComparer).
"""

from __future__ import annotations

from dataclasses import dataclass

from box_equality.domain.models.dimensions import BoxDimensions

# Hash of a box whose height is absent
ABSENT_HEIGHT_HASH: int = 0


def height_hash(height: int | None) -> int:
    """Hash for the narrow (height-only) policy."""
    if height is None:
        return ABSENT_HEIGHT_HASH
    return hash(height)


@dataclass(frozen=True, eq=False)
class Box(BoxDimensions):
    """Immutable box compared by height only.

    Two boxes are equal iff their heights are equal. Comparing against
    anything that is not a Box (including None) is False.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return False
        return self.height == other.height

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        """Hash based on height alone.

        Note: 2 boxes that are equal have the same hash, but 2 equal
        hashes don't mean the boxes are the same.
        """
        return height_hash(self.height)

    def __repr__(self) -> str:
        return f"Box{self}"
