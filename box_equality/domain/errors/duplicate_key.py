"""Duplicate key error for comparer-aware dictionaries.

Raised by ComparerDict.add() when the active equality policy already
considers the key present. The caller decides whether this is fatal;
the demonstrations report it and carry on.
"""

from __future__ import annotations

from box_equality.domain.exceptions import BoxEqualityError

DUPLICATE_KEY_MESSAGE: str = "An item with the same key has already been added."


class DuplicateKeyError(BoxEqualityError):
    """Raised when adding a key that the dictionary's comparer says is present.

    Attributes:
        key: The rejected key, as passed to add().
        existing_key: The stored key it collided with.
    """

    def __init__(self, key: object, existing_key: object | None = None) -> None:
        """Initialize duplicate key error.

        Args:
            key: The key that was rejected.
            existing_key: The key already stored under the same equivalence class.
        """
        self.key = key
        self.existing_key = existing_key
        super().__init__(DUPLICATE_KEY_MESSAGE)
