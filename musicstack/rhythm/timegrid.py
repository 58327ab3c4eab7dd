"""Grids of measure, beat and subdivision positions."""

from __future__ import annotations

import dataclasses
import itertools
import operator
from dataclasses import dataclass

from musicstack.rhythm.meter import Meter
from musicstack.rhythm.timespan import TimePoint, TimeSpan


@dataclass(frozen=True)
class TimeGrid:
    """Aligned measure, beat and subdivision positions, each including both ends."""

    measures: tuple[TimePoint, ...]
    beats: tuple[TimePoint, ...]
    subdivisions: tuple[TimePoint, ...]


def _accumulate(start: TimePoint, steps: int, increment: TimeSpan) -> tuple[TimePoint, ...]:
    return tuple(
        itertools.accumulate(itertools.repeat(increment, steps), operator.add, initial=start)
    )


@dataclass(frozen=True)
class GridConfig:
    """Settings for building a TimeGrid."""

    start: TimePoint
    meter: Meter
    bars: int = 1
    subdivisions_per_beat: int = 1

    def __post_init__(self) -> None:
        if self.bars <= 0:
            raise ValueError("grid must contain at least one bar")
        if self.subdivisions_per_beat <= 0:
            raise ValueError("subdivisions per beat must be > 0")

    def with_bars(self, bars: int) -> GridConfig:
        """A copy with the given number of bars."""
        return dataclasses.replace(self, bars=bars)

    def with_subdivisions_per_beat(self, subdivisions: int) -> GridConfig:
        """A copy with the given number of subdivisions per beat."""
        return dataclasses.replace(self, subdivisions_per_beat=subdivisions)

    def build(self) -> TimeGrid:
        """Generate the grid."""
        measures = _accumulate(self.start, self.bars, self.meter.bar_span())

        total_beats = self.meter.numerator * self.bars
        beat_span = TimeSpan(4.0 / self.meter.denominator)
        beats = _accumulate(self.start, total_beats, beat_span)

        subdivision_span = TimeSpan(beat_span.beats / self.subdivisions_per_beat)
        subdivisions = _accumulate(
            self.start, total_beats * self.subdivisions_per_beat, subdivision_span
        )
        return TimeGrid(measures, beats, subdivisions)