"""Meters (time signatures)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from musicstack.rhythm.timespan import TimeSpan


@dataclass(frozen=True)
class Meter:
    """A time signature; a quarter note counts as one beat."""

    numerator: int
    denominator: int

    FOUR_FOUR: ClassVar[Meter]
    THREE_FOUR: ClassVar[Meter]
    SIX_EIGHT: ClassVar[Meter]
    FIVE_FOUR: ClassVar[Meter]
    SEVEN_EIGHT: ClassVar[Meter]

    def __post_init__(self) -> None:
        if not 0 < self.numerator <= 255:
            raise ValueError("numerator must be > 0")
        if not 0 < self.denominator <= 255:
            raise ValueError("denominator must be > 0")

    def beats_per_bar(self) -> float:
        """Quarter-note beats in one bar."""
        return self.numerator * (4.0 / self.denominator)

    def bar_span(self) -> TimeSpan:
        """Length of one bar."""
        return TimeSpan(self.beats_per_bar())

    def bars_for_span(self, span: TimeSpan) -> float:
        """How many bars fit in the given span."""
        return span.beats / self.beats_per_bar()


Meter.FOUR_FOUR = Meter(4, 4)
Meter.THREE_FOUR = Meter(3, 4)
Meter.SIX_EIGHT = Meter(6, 8)
Meter.FIVE_FOUR = Meter(5, 4)
Meter.SEVEN_EIGHT = Meter(7, 8)