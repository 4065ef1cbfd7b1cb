"""Hash-table key that routes equality through a comparer."""

from __future__ import annotations

from typing import Generic, TypeVar

from box_equality.domain.ports.equality import EqualityComparer

T = TypeVar("T")


class ComparerKey(Generic[T]):
    """Wraps a value so that dict/set use the comparer's equals() and hash().

    The hash is computed once at construction; wrapped values are
    expected to be immutable.
    """

    __slots__ = ("value", "comparer", "_hash")

    def __init__(self, value: T, comparer: EqualityComparer[T]) -> None:
        self.value = value
        self.comparer = comparer
        self._hash = comparer.hash(value)

    def __eq__(self, other: object) -> bool:
        # Keys wrapped by different comparers never match, so the result
        # cannot depend on which side is compared first
        if not isinstance(other, ComparerKey) or other.comparer is not self.comparer:
            return False
        return self.comparer.equals(self.value, other.value)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"ComparerKey({self.value!r})"
