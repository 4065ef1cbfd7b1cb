"""Equality demonstration service.

Runs the two demonstrations against the same four boxes:

    box1 = (4, 3, 4)   box2 = (4, 3, 4)   box3 = (3, 4, 3)   box4 = (4, 4, 3)

- comparer: Box keeps its height-only __eq__, but the dictionary is given
  a BoxEqualityComparer and so compares every dimension.
- equatable: EquatableBox, compared by height through its typed equals(),
  with every container relying on default equality.

In both, box1, box2 and box3 are added to a dictionary (box2 is
rejected as a duplicate of box1), box1 is compared with the other three,
and all four boxes go through a set and through distinct().
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import structlog

from box_equality.application.services.base import LoggingMixin
from box_equality.domain.collections import ComparerDict, distinct
from box_equality.domain.errors import DuplicateKeyError
from box_equality.domain.models import (
    Box,
    BoxDimensions,
    ComparisonResult,
    DemoReport,
    EquatableBox,
    equals,
)
from box_equality.domain.ports import EqualityComparer
from box_equality.domain.services import BoxEqualityComparer

DEMONSTRATIONS: tuple[str, ...] = ("comparer", "equatable")

SAMPLE_BOXES: tuple[tuple[int, int, int], ...] = (
    (4, 3, 4),
    (4, 3, 4),
    (3, 4, 3),
    (4, 4, 3),
)
BOX_LABELS: tuple[str, ...] = ("box1", "box2", "box3", "box4")

# Values for the first three boxes; box4 is never added to the dictionary
DICTIONARY_VALUES: tuple[str, ...] = ("red", "blue", "green")


class EqualityDemoService(LoggingMixin):
    """Runs the equality demonstrations and reports what they observed.

    Args:
        comparer: Strategy handed to the dictionary in the comparer
            demonstration. Defaults to BoxEqualityComparer.
    """

    def __init__(self, comparer: EqualityComparer[BoxDimensions] | None = None) -> None:
        self._comparer: EqualityComparer[BoxDimensions] = (
            comparer if comparer is not None else BoxEqualityComparer()
        )
        self._runners: dict[str, Callable[[], DemoReport]] = {
            "comparer": self.run_comparer_demo,
            "equatable": self.run_equatable_demo,
        }
        self._init_logger()

    def run(self, demonstration: str) -> DemoReport:
        """Run one demonstration by name.

        Raises:
            ValueError: If the demonstration is unknown.
        """
        runner = self._runners.get(demonstration)
        if runner is None:
            raise ValueError(
                f"Unknown demonstration {demonstration!r}, "
                f"expected one of: {', '.join(DEMONSTRATIONS)}"
            )
        return runner()

    def run_all(self, demonstrations: Iterable[str] = DEMONSTRATIONS) -> list[DemoReport]:
        """Run several demonstrations in order."""
        return [self.run(name) for name in demonstrations]

    def run_comparer_demo(self) -> DemoReport:
        """Full-field comparer for the dictionary, height-only Box elsewhere."""
        log = self._log_operation(
            "run_comparer_demo", comparer=type(self._comparer).__name__
        )
        log.info("demonstration_started")

        boxes = [Box(*dimensions) for dimensions in SAMPLE_BOXES]
        dictionary: ComparerDict[Box, str] = ComparerDict(comparer=self._comparer)
        rejections = self._fill_dictionary(dictionary, boxes, log)

        box1 = boxes[0]
        comparisons = [
            ComparisonResult("box1", label, "EqualityComparer", self._comparer.equals(box1, other))
            for label, other in self._others(boxes)
        ]
        comparisons += [
            ComparisonResult("box1", label, "overridden __eq__()", box1 == other)
            for label, other in self._others(boxes)
        ]

        return self._finish("comparer", boxes, dictionary, rejections, comparisons, log)

    def run_equatable_demo(self) -> DemoReport:
        """Height-only EquatableBox, default equality everywhere."""
        log = self._log_operation("run_equatable_demo")
        log.info("demonstration_started")

        boxes = [EquatableBox(*dimensions) for dimensions in SAMPLE_BOXES]
        dictionary: ComparerDict[EquatableBox, str] = ComparerDict()
        rejections = self._fill_dictionary(dictionary, boxes, log)

        box1 = boxes[0]
        comparisons = [
            ComparisonResult("box1", label, "Equatable.equals()", box1.equals(other))
            for label, other in self._others(boxes)
        ]
        comparisons += [
            ComparisonResult("box1", label, "equals() operator", equals(box1, other))
            for label, other in self._others(boxes)
        ]

        return self._finish("equatable", boxes, dictionary, rejections, comparisons, log)

    @staticmethod
    def _others(boxes: Sequence[BoxDimensions]) -> list[tuple[str, BoxDimensions]]:
        return list(zip(BOX_LABELS[1:], boxes[1:]))

    @staticmethod
    def _fill_dictionary(
        dictionary: ComparerDict,
        boxes: Sequence[BoxDimensions],
        log: structlog.BoundLogger,
    ) -> list[str]:
        """Add the first three boxes, reporting each rejected insertion."""
        rejections: list[str] = []
        for box, value in zip(boxes, DICTIONARY_VALUES):
            try:
                dictionary.add(box, value)
            except DuplicateKeyError as e:
                log.warning(
                    "duplicate_key_rejected",
                    box=str(box),
                    existing_key=str(e.existing_key),
                    value=value,
                )
                rejections.append(f"Unable to add {box}: {e}")
        return rejections

    @staticmethod
    def _finish(
        demonstration: str,
        boxes: Sequence[BoxDimensions],
        dictionary: ComparerDict,
        rejections: list[str],
        comparisons: list[ComparisonResult],
        log: structlog.BoundLogger,
    ) -> DemoReport:
        # Both rely on the boxes' own __hash__/__eq__, so equal heights collapse
        box_set = set(boxes)
        distinct_boxes = list(distinct(boxes))

        report = DemoReport(
            demonstration=demonstration,
            dictionary_count=len(dictionary),
            set_count=len(box_set),
            distinct_count=len(distinct_boxes),
            rejections=tuple(rejections),
            comparisons=tuple(comparisons),
        )
        log.info(
            "demonstration_completed",
            dictionary_count=report.dictionary_count,
            rejected=len(report.rejections),
            set_count=report.set_count,
            distinct_count=report.distinct_count,
        )
        return report
