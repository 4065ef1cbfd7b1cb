"""Outcome of one equality demonstration.

A DemoReport captures everything a demonstration observed so it can be
printed as console lines or serialized by the api layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ComparisonResult:
    """One pairwise comparison.

    Attributes:
        left: Label of the left operand (e.g. "box1").
        right: Label of the right operand.
        method: How the comparison was made (e.g. "EqualityComparer").
        result: The boolean outcome.
    """

    left: str
    right: str
    method: str
    result: bool

    def describe(self) -> str:
        return f"Does {self.left} equal {self.right} with {self.method}: {self.result}"


@dataclass(frozen=True)
class DemoReport:
    """Everything one demonstration observed.

    Attributes:
        demonstration: Name of the demonstration ("comparer" or "equatable").
        rejections: One message per rejected dictionary insertion.
        dictionary_count: Entries left in the dictionary.
        comparisons: Pairwise comparison results, in print order.
        set_count: Size of the set built from all boxes.
        distinct_count: Length of the deduplicated box list.
    """

    demonstration: str
    dictionary_count: int
    set_count: int
    distinct_count: int
    rejections: tuple[str, ...] = field(default_factory=tuple)
    comparisons: tuple[ComparisonResult, ...] = field(default_factory=tuple)

    def lines(self) -> list[str]:
        """Render the console lines in the order the demonstration runs."""
        lines = list(self.rejections)
        lines.append(f"The dictionary contains {self.dictionary_count} Box objects.")
        lines.extend(comparison.describe() for comparison in self.comparisons)
        lines.append(f"Number of elements in the Box set: {self.set_count}")
        lines.append(f"Number of distinct elements in the Box list: {self.distinct_count}")
        return lines
