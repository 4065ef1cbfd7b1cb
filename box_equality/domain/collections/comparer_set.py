"""Set and distinct() under an injected equality policy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from typing import Any, Generic, TypeVar

from box_equality.domain.collections.comparer_key import ComparerKey
from box_equality.domain.ports.equality import EqualityComparer
from box_equality.domain.services.comparers import default_comparer

T = TypeVar("T")


class ComparerSet(MutableSet[T], Generic[T]):
    """Insertion-ordered set whose uniqueness is decided by a comparer.

    When an equal element is already present, add() keeps the stored one.

    Args:
        items: Optional initial elements.
        comparer: Equality strategy. Defaults to the elements' own
            __eq__/__hash__.
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        comparer: EqualityComparer[T] | None = None,
    ) -> None:
        self._comparer: EqualityComparer[Any] = (
            comparer if comparer is not None else default_comparer()
        )
        self._elements: dict[ComparerKey[T], T] = {}
        if items is not None:
            for item in items:
                self.add(item)

    @property
    def comparer(self) -> EqualityComparer[Any]:
        """The equality strategy applied to elements."""
        return self._comparer

    def _from_iterable(self, it: Iterable[T]) -> ComparerSet[T]:
        # Set operators (|, &, -, ^) keep the left operand's comparer
        return ComparerSet(it, comparer=self._comparer)

    def add(self, value: T) -> None:
        self.try_add(value)

    def try_add(self, value: T) -> bool:
        """Add value, returning True if no equal element was present."""
        wrapped = ComparerKey(value, self._comparer)
        if wrapped in self._elements:
            return False
        self._elements[wrapped] = value
        return True

    def discard(self, value: T) -> None:
        self._elements.pop(ComparerKey(value, self._comparer), None)

    def __contains__(self, value: object) -> bool:
        return ComparerKey(value, self._comparer) in self._elements

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        body = ", ".join(repr(item) for item in self._elements.values())
        return f"ComparerSet({{{body}}}, comparer={self._comparer!r})"


def distinct(
    items: Iterable[T], comparer: EqualityComparer[T] | None = None
) -> Iterator[T]:
    """Yield the first occurrence of each equivalence class, preserving order.

    Args:
        items: Elements to deduplicate.
        comparer: Equality strategy. Defaults to the elements' own
            __eq__/__hash__.
    """
    seen: ComparerSet[T] = ComparerSet(comparer=comparer)
    for item in items:
        if seen.try_add(item):
            yield item
