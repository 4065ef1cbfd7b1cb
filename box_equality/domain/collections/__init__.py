"""Comparer-aware collections.

Built-in dict and set always use an element's own __eq__/__hash__.
These collections take an EqualityComparer instead, falling back to
the default comparer (and so to the element's own equality) when none
is given.
"""

from box_equality.domain.collections.comparer_dict import ComparerDict
from box_equality.domain.collections.comparer_key import ComparerKey
from box_equality.domain.collections.comparer_set import ComparerSet, distinct

__all__: list[str] = ["ComparerDict", "ComparerKey", "ComparerSet", "distinct"]
