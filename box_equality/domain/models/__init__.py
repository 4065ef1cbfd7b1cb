"""Domain models for Box Equality.

Immutable value types sharing the (height, length, width) shape but
differing in how they define their own equality.
"""

from box_equality.domain.models.box import ABSENT_HEIGHT_HASH, Box, height_hash
from box_equality.domain.models.demo_report import ComparisonResult, DemoReport
from box_equality.domain.models.dimensions import DIMENSION_FIELDS, BoxDimensions
from box_equality.domain.models.equatable_box import (
    EquatableBox,
    equals,
    not_equals,
)

__all__: list[str] = [
    "ABSENT_HEIGHT_HASH",
    "DIMENSION_FIELDS",
    "Box",
    "BoxDimensions",
    "ComparisonResult",
    "DemoReport",
    "EquatableBox",
    "equals",
    "height_hash",
    "not_equals",
]
