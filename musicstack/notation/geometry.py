"""Layout geometry for engraving: positions, boxes and indices."""

from __future__ import annotations

import math
from dataclasses import dataclass

_U16_MAX = 2**16 - 1


@dataclass(frozen=True)
class LayoutPosition:
    """A position in engraving units."""

    x: float
    y: float

    def translate(self, dx: float, dy: float) -> LayoutPosition:
        """The position moved by (dx, dy)."""
        return LayoutPosition(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class LayoutBox:
    """A bounding box with its origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.width) or self.width < 0.0:
            raise ValueError("width must be non-negative and finite")
        if not math.isfinite(self.height) or self.height < 0.0:
            raise ValueError("height must be non-negative and finite")

    def min_x(self) -> float:
        """Left edge."""
        return self.x

    def min_y(self) -> float:
        """Top edge."""
        return self.y

    def max_x(self) -> float:
        """Right edge."""
        return self.x + self.width

    def max_y(self) -> float:
        """Bottom edge."""
        return self.y + self.height

    def translate(self, dx: float, dy: float) -> LayoutBox:
        """The box moved by (dx, dy), keeping its size."""
        return LayoutBox(self.x + dx, self.y + dy, self.width, self.height)

    def contains(self, position: LayoutPosition) -> bool:
        """Whether the position lies inside the box or on its edge."""
        return (
            self.min_x() <= position.x <= self.max_x()
            and self.min_y() <= position.y <= self.max_y()
        )

    def intersection(self, other: LayoutBox) -> LayoutBox | None:
        """The overlapping region, or None when the boxes do not overlap."""
        min_x = max(self.min_x(), other.min_x())
        min_y = max(self.min_y(), other.min_y())
        max_x = min(self.max_x(), other.max_x())
        max_y = min(self.max_y(), other.max_y())
        if max_x <= min_x or max_y <= min_y:
            return None
        return LayoutBox(min_x, min_y, max_x - min_x, max_y - min_y)

    def intersects(self, other: LayoutBox) -> bool:
        """Whether the boxes overlap with positive area."""
        return self.intersection(other) is not None

    def union(self, other: LayoutBox) -> LayoutBox:
        """The smallest box enclosing both boxes."""
        min_x = min(self.min_x(), other.min_x())
        min_y = min(self.min_y(), other.min_y())
        max_x = max(self.max_x(), other.max_x())
        max_y = max(self.max_y(), other.max_y())
        return LayoutBox(min_x, min_y, max_x - min_x, max_y - min_y)


def _check_index(value: int, what: str) -> None:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{what} index must be between 0 and {_U16_MAX}")


@dataclass(frozen=True)
class SystemIndex:
    """Index of a system on a page."""

    value: int

    def __post_init__(self) -> None:
        _check_index(self.value, "system")


@dataclass(frozen=True)
class PageIndex:
    """Index of a page in a score."""

    value: int

    def __post_init__(self) -> None:
        _check_index(self.value, "page")