"""Dictionary whose key equality is supplied by an EqualityComparer.

Mirrors the two ways of inserting into a dictionary:

- d[key] = value overwrites an equal key's value, keeping the key that
  was stored first.
- d.add(key, value) refuses an equal key and raises DuplicateKeyError.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from box_equality.domain.collections.comparer_key import ComparerKey
from box_equality.domain.errors.duplicate_key import DuplicateKeyError
from box_equality.domain.ports.equality import EqualityComparer
from box_equality.domain.services.comparers import default_comparer

K = TypeVar("K")
V = TypeVar("V")


class ComparerDict(MutableMapping[K, V], Generic[K, V]):
    """Insertion-ordered mapping keyed under an injected equality policy.

    Args:
        items: Optional initial mapping or iterable of (key, value) pairs,
            inserted with add() so duplicates raise.
        comparer: Equality strategy for keys. Defaults to the keys' own
            __eq__/__hash__.
    """

    def __init__(
        self,
        items: Mapping[K, V] | Iterable[tuple[K, V]] | None = None,
        comparer: EqualityComparer[K] | None = None,
    ) -> None:
        self._comparer: EqualityComparer[Any] = (
            comparer if comparer is not None else default_comparer()
        )
        self._entries: dict[ComparerKey[K], tuple[K, V]] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self.add(key, value)

    @property
    def comparer(self) -> EqualityComparer[Any]:
        """The equality strategy applied to keys."""
        return self._comparer

    def _wrap(self, key: K) -> ComparerKey[K]:
        return ComparerKey(key, self._comparer)

    def add(self, key: K, value: V) -> None:
        """Insert a new key.

        Raises:
            DuplicateKeyError: If the comparer considers key already present.
        """
        wrapped = self._wrap(key)
        existing = self._entries.get(wrapped)
        if existing is not None:
            raise DuplicateKeyError(key, existing_key=existing[0])
        self._entries[wrapped] = (key, value)

    def try_add(self, key: K, value: V) -> bool:
        """Insert a new key, returning False instead of raising on a duplicate."""
        wrapped = self._wrap(key)
        if wrapped in self._entries:
            return False
        self._entries[wrapped] = (key, value)
        return True

    def stored_key(self, key: K) -> K:
        """Return the stored key equal to key.

        Raises:
            KeyError: If no equal key is stored.
        """
        return self._entries[self._wrap(key)][0]

    def __getitem__(self, key: K) -> V:
        return self._entries[self._wrap(key)][1]

    def __setitem__(self, key: K, value: V) -> None:
        wrapped = self._wrap(key)
        existing = self._entries.get(wrapped)
        stored = existing[0] if existing is not None else key
        self._entries[wrapped] = (stored, value)

    def __delitem__(self, key: K) -> None:
        del self._entries[self._wrap(key)]

    def __contains__(self, key: object) -> bool:
        return ComparerKey(key, self._comparer) in self._entries

    def __iter__(self) -> Iterator[K]:
        for key, _ in self._entries.values():
            yield key

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        """Compare with any mapping, matching keys through this dict's comparer.

        Keys of other that this comparer considers equal to each other
        collapse into one, so other can never match with fewer distinct keys.
        """
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        theirs: dict[ComparerKey[K], object] = {}
        for key, value in other.items():
            wrapped = self._wrap(key)
            if wrapped in theirs:
                return False
            theirs[wrapped] = value
        return all(
            wrapped in theirs and theirs[wrapped] == value
            for wrapped, (_, value) in self._entries.items()
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries.values())
        return f"ComparerDict({{{body}}}, comparer={self._comparer!r})"
