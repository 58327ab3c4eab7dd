"""Beat positions within a piece."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Beat:
    """A non-negative, finite beat index."""

    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        if not math.isfinite(value) or value < 0.0:
            raise ValueError("beat index must be finite and non-negative")
        object.__setattr__(self, "value", value)

    @classmethod
    def zero(cls) -> Beat:
        """The beat at the very start."""
        return cls(0.0)

    def checked_sub(self, other: Beat) -> Beat | None:
        """Subtract another beat, or return None if the result would be negative."""
        if self.value < other.value:
            return None
        return Beat(self.value - other.value)

    def __add__(self, other: Beat) -> Beat:
        if not isinstance(other, Beat):
            return NotImplemented
        return Beat(self.value + other.value)

    def __sub__(self, other: Beat) -> Beat:
        if not isinstance(other, Beat):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise ValueError("beat subtraction cannot go negative")
        return result

    def __float__(self) -> float:
        return self.value