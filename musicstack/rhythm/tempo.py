"""Tempo in beats per minute, with time conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from musicstack.rhythm.meter import Meter
from musicstack.rhythm.timespan import TimeSpan


@dataclass(frozen=True)
class Tempo:
    """A positive, finite tempo in beats per minute."""

    bpm: float

    def __post_init__(self) -> None:
        bpm = float(self.bpm)
        if not math.isfinite(bpm) or bpm <= 0.0:
            raise ValueError("tempo must be positive and finite")
        object.__setattr__(self, "bpm", bpm)

    def beats_per_second(self) -> float:
        """Beats per second."""
        return self.bpm / 60.0

    def seconds_per_beat(self) -> float:
        """Seconds per beat."""
        return 60.0 / self.bpm

    def seconds_per_bar(self, meter: Meter) -> float:
        """Seconds per bar of the given meter."""
        return meter.beats_per_bar() * self.seconds_per_beat()

    def seconds_for_span(self, span: TimeSpan) -> float:
        """Duration of a span in seconds."""
        return span.beats * self.seconds_per_beat()

    def span_for_seconds(self, seconds: float) -> TimeSpan:
        """The span lasting the given number of seconds."""
        if not math.isfinite(seconds) or seconds < 0.0:
            raise ValueError("seconds must be non-negative and finite")
        return TimeSpan(seconds / self.seconds_per_beat())