"""Time points and durations measured in beats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import overload

from musicstack.rhythm.beat import Beat


def _validated(beats: float, message: str) -> float:
    value = float(beats)
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(message)
    return value


@dataclass(frozen=True, order=True)
class TimeSpan:
    """A non-negative duration in beats."""

    beats: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "beats", _validated(self.beats, "duration must be non-negative and finite")
        )

    @classmethod
    def from_beats(cls, beat: Beat) -> TimeSpan:
        """A duration with the magnitude of the given beat."""
        return cls(beat.value)

    @classmethod
    def zero(cls) -> TimeSpan:
        """A zero-length duration."""
        return cls(0.0)

    def add_span(self, other: TimeSpan) -> TimeSpan:
        """Sum of two durations."""
        return TimeSpan(self.beats + other.beats)

    def checked_sub(self, other: TimeSpan) -> TimeSpan | None:
        """Difference of two durations, or None if it would be negative."""
        if self.beats < other.beats:
            return None
        return TimeSpan(self.beats - other.beats)

    def __add__(self, other: TimeSpan) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.add_span(other)

    def __sub__(self, other: TimeSpan) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise ValueError("duration cannot go negative")
        return result

    def __float__(self) -> float:
        return self.beats


@dataclass(frozen=True, order=True)
class TimePoint:
    """An absolute, non-negative position in beats."""

    beats: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "beats", _validated(self.beats, "time point must be non-negative and finite")
        )

    @classmethod
    def from_beat(cls, beat: Beat) -> TimePoint:
        """The time point at the given beat."""
        return cls(beat.value)

    def add_span(self, span: TimeSpan) -> TimePoint:
        """The point a duration later."""
        return TimePoint(self.beats + span.beats)

    def checked_sub_span(self, span: TimeSpan) -> TimePoint | None:
        """The point a duration earlier, or None if it would precede the origin."""
        if self.beats < span.beats:
            return None
        return TimePoint(self.beats - span.beats)

    def distance_to(self, other: TimePoint) -> TimeSpan:
        """Absolute distance between two points."""
        return TimeSpan(abs(self.beats - other.beats))

    def __add__(self, span: TimeSpan) -> TimePoint:
        if not isinstance(span, TimeSpan):
            return NotImplemented
        return self.add_span(span)

    @overload
    def __sub__(self, other: TimeSpan) -> TimePoint: ...

    @overload
    def __sub__(self, other: TimePoint) -> TimeSpan: ...

    def __sub__(self, other: TimeSpan | TimePoint) -> TimePoint | TimeSpan:
        if isinstance(other, TimeSpan):
            result = self.checked_sub_span(other)
            if result is None:
                raise ValueError("cannot subtract span beyond origin")
            return result
        if isinstance(other, TimePoint):
            if self.beats < other.beats:
                raise ValueError("time point subtraction cannot go negative")
            return TimeSpan(self.beats - other.beats)
        return NotImplemented

    def __float__(self) -> float:
        return self.beats