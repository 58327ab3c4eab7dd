"""Keys and modes tying pitch classes, scales and harmonic functions together."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from musicstack.theory.function import FunctionKind, HarmonicFunction
from musicstack.theory.pitch import PitchClass
from musicstack.theory.scale import Scale

_DIATONIC_FUNCTIONS = (
    FunctionKind.TONIC,
    FunctionKind.SUPERTONIC,
    FunctionKind.MEDIANT,
    FunctionKind.SUBDOMINANT,
    FunctionKind.DOMINANT,
    FunctionKind.SUBMEDIANT,
    FunctionKind.LEADING_TONE,
)


class Mode(Enum):
    """Key mode."""

    MAJOR = "major"
    MINOR = "minor"

    def step_pattern(self) -> tuple[int, ...]:
        """Steps between successive scale degrees."""
        if self is Mode.MAJOR:
            return (2, 2, 1, 2, 2, 2, 1)
        return (2, 1, 2, 2, 1, 2, 2)

    def function_kinds(self) -> tuple[FunctionKind, ...]:
        """Function kind of each degree, from the first."""
        return _DIATONIC_FUNCTIONS

    def function_kind(self, degree: int) -> FunctionKind | None:
        """Function kind of a 1-indexed degree, or None outside 1-7."""
        if not 1 <= degree <= 7:
            return None
        return self.function_kinds()[degree - 1]


@dataclass(frozen=True)
class Key:
    """A tonic and a mode."""

    tonic: PitchClass
    mode: Mode

    def scale(self) -> Scale:
        """The heptatonic scale of this key."""
        return Scale.from_step_pattern(self.tonic, self.mode.step_pattern())

    def degree_pitch_class(self, degree: int) -> PitchClass | None:
        """Pitch class of a 1-indexed scale degree, or None if out of range."""
        degrees = self.scale().degrees
        if not 1 <= degree <= len(degrees):
            return None
        return degrees[degree - 1]

    def function_for_degree(self, degree: int) -> HarmonicFunction | None:
        """Harmonic function of a 1-indexed degree."""
        kind = self.mode.function_kind(degree)
        if kind is None:
            return None
        pitch_class = self.degree_pitch_class(degree)
        if pitch_class is None:
            return None
        return HarmonicFunction(kind, degree, self, pitch_class)

    def function_for_pitch_class(self, pitch_class: PitchClass) -> HarmonicFunction | None:
        """Harmonic function of a pitch class, or None if it is outside the key."""
        degree = self.scale().degree_of(pitch_class)
        if degree is None:
            return None
        kind = self.mode.function_kind(degree)
        if kind is None:
            return None
        return HarmonicFunction(kind, degree, self, pitch_class)

    @classmethod
    def major(cls, tonic: PitchClass) -> Key:
        """Major key on the tonic."""
        return cls(tonic, Mode.MAJOR)

    @classmethod
    def minor(cls, tonic: PitchClass) -> Key:
        """Minor key on the tonic."""
        return cls(tonic, Mode.MINOR)