"""Temperament-aware pitch classes and absolute pitches."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from musicstack.theory.interval import T12, Interval, Temperament

_OCTAVE_MIN = -(2**15)
_OCTAVE_MAX = 2**15 - 1


def _check_temperament(pitch_temperament: Temperament, interval: Interval) -> None:
    if pitch_temperament != interval.temperament:
        raise ValueError("interval and pitch use different temperaments")


def _checked_octave(octave: int) -> int:
    if not _OCTAVE_MIN <= octave <= _OCTAVE_MAX:
        raise OverflowError("octave overflow during transposition")
    return octave


@dataclass(frozen=True)
class PitchClass:
    """A pitch class: a step index within one octave of a temperament."""

    index: int
    temperament: Temperament = T12

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", self.index % self.temperament.steps_per_octave)

    def transpose(self, interval: Interval) -> PitchClass:
        """Transpose by an interval, wrapping around the octave."""
        _check_temperament(self.temperament, interval)
        return PitchClass(self.index + interval.steps, self.temperament)

    @classmethod
    def from_semitones(cls, semitones: int) -> PitchClass:
        """Build a 12-TET pitch class from a semitone index."""
        return cls(semitones, T12)

    def to_semitones(self) -> int:
        """Semitone index (0-11) of a 12-TET pitch class."""
        if self.temperament.steps_per_octave != 12:
            raise ValueError("semitone operations require a 12-step temperament")
        return self.index


@functools.total_ordering
@dataclass(frozen=True)
class Pitch:
    """An absolute pitch: pitch class plus octave number."""

    pitch_class: PitchClass
    octave: int

    def __post_init__(self) -> None:
        _checked_octave(self.octave)

    def _sort_key(self) -> tuple[int, int]:
        return self.octave, self.pitch_class.index

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def transpose(self, interval: Interval) -> Pitch:
        """Transpose by an interval, carrying into the octave number."""
        temperament = self.pitch_class.temperament
        _check_temperament(temperament, interval)
        steps = temperament.steps_per_octave
        octave_delta, wrapped = divmod(self.pitch_class.index + interval.steps, steps)
        return Pitch(
            PitchClass(wrapped, temperament),
            _checked_octave(self.octave + octave_delta),
        )

    def shift_octaves(self, octaves: int) -> Pitch:
        """Shift by a (signed) number of octaves."""
        return Pitch(self.pitch_class, _checked_octave(self.octave + octaves))

    def octave_up(self) -> Pitch:
        """Raise by one octave."""
        return self.shift_octaves(1)

    def octave_down(self) -> Pitch:
        """Lower by one octave."""
        return self.shift_octaves(-1)

    @classmethod
    def from_semitones_and_octave(cls, semitones: int, octave: int) -> Pitch:
        """Build a 12-TET pitch from a semitone index and octave."""
        return cls(PitchClass.from_semitones(semitones), octave)

    def semitone(self) -> int:
        """Semitone component within the octave."""
        return self.pitch_class.to_semitones()