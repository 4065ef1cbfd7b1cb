"""Shared shape of the box value types.

BoxDimensions holds the three optional integer dimensions and their
textual form. It deliberately keeps object identity as its equality;
subclasses choose their own policy.
"""

from __future__ import annotations

from dataclasses import dataclass

from box_equality.domain.errors.dimension import InvalidDimensionError

DIMENSION_FIELDS: tuple[str, ...] = ("height", "length", "width")


def _format_dimension(value: int | None) -> str:
    """Render one dimension; an absent value leaves an empty slot."""
    return "" if value is None else str(value)


@dataclass(frozen=True, eq=False)
class BoxDimensions:
    """Immutable record of three optional integer dimensions.

    Attributes:
        height: Height of the box, None when unknown.
        length: Length of the box, None when unknown.
        width: Width of the box, None when unknown.
    """

    height: int | None = None
    length: int | None = None
    width: int | None = None

    def __post_init__(self) -> None:
        """Validate that every dimension is an int or None.

        Raises:
            InvalidDimensionError: If a dimension has any other type.
        """
        for field_name in DIMENSION_FIELDS:
            value = getattr(self, field_name)
            # bool is an int subclass but never a dimension
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int)
            ):
                raise InvalidDimensionError(field_name, value)

    def dimensions(self) -> tuple[int | None, int | None, int | None]:
        """Return (height, length, width)."""
        return (self.height, self.length, self.width)

    def __str__(self) -> str:
        return "({})".format(", ".join(_format_dimension(v) for v in self.dimensions()))
