"""Intervals between pitch classes, measured in temperament steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Temperament:
    """An equal division of the octave into a fixed number of steps."""

    steps_per_octave: int
    name: str = ""

    def __post_init__(self) -> None:
        if self.steps_per_octave <= 0:
            raise ValueError("a temperament needs at least one step per octave")


T12 = Temperament(12, "12-TET")


class GenericInterval(Enum):
    """Abstract interval class (second, third, ...)."""

    UNISON = "unison"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    FIFTH = "fifth"
    SIXTH = "sixth"
    SEVENTH = "seventh"
    OCTAVE = "octave"


class IntervalQuality(Enum):
    """Interval quality in tonal 12-TET."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"


_SIMPLE_INTERVALS = (
    (GenericInterval.UNISON, IntervalQuality.PERFECT),
    (GenericInterval.SECOND, IntervalQuality.MINOR),
    (GenericInterval.SECOND, IntervalQuality.MAJOR),
    (GenericInterval.THIRD, IntervalQuality.MINOR),
    (GenericInterval.THIRD, IntervalQuality.MAJOR),
    (GenericInterval.FOURTH, IntervalQuality.PERFECT),
    (GenericInterval.FOURTH, IntervalQuality.AUGMENTED),
    (GenericInterval.FIFTH, IntervalQuality.PERFECT),
    (GenericInterval.SIXTH, IntervalQuality.MINOR),
    (GenericInterval.SIXTH, IntervalQuality.MAJOR),
    (GenericInterval.SEVENTH, IntervalQuality.MINOR),
    (GenericInterval.SEVENTH, IntervalQuality.MAJOR),
)


def _require_same_temperament(a: Temperament, b: Temperament) -> None:
    if a != b:
        raise ValueError(f"temperament mismatch: {a.name or a} vs {b.name or b}")


@dataclass(frozen=True)
class Interval:
    """A signed step distance within a temperament."""

    steps: int
    temperament: Temperament = T12

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """Build a 12-TET interval from a semitone distance."""
        return cls(semitones, T12)

    def to_semitones(self) -> int:
        """Semitone distance of a 12-TET interval."""
        self._require_12tet()
        return self.steps

    def invert_octave(self) -> Interval:
        """Invert the interval within one octave of its temperament."""
        octave = self.temperament.steps_per_octave
        return Interval((-self.steps) % octave, self.temperament)

    def classify(self) -> tuple[GenericInterval, IntervalQuality] | None:
        """Classify a 12-TET interval into generic interval and quality."""
        semis = self.to_semitones()
        if semis != 0 and semis % 12 == 0:
            return GenericInterval.OCTAVE, IntervalQuality.PERFECT
        return _SIMPLE_INTERVALS[semis % 12]

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        _require_same_temperament(self.temperament, other.temperament)
        return Interval(self.steps + other.steps, self.temperament)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        _require_same_temperament(self.temperament, other.temperament)
        return Interval(self.steps - other.steps, self.temperament)

    def _require_12tet(self) -> None:
        if self.temperament.steps_per_octave != 12:
            raise ValueError("semitone operations require a 12-step temperament")