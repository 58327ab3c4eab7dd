"""Scales as ordered collections of pitch classes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from musicstack.theory.interval import Interval
from musicstack.theory.pitch import PitchClass


@dataclass(frozen=True)
class Scale:
    """An ordered set of pitch classes."""

    degrees: tuple[PitchClass, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", tuple(self.degrees))

    @classmethod
    def from_step_pattern(cls, root: PitchClass, steps: Iterable[int]) -> Scale:
        """Build a scale by stepping from the root; repeated pitch classes are skipped."""
        degrees = [root]
        current = root
        for step in steps:
            current = current.transpose(Interval(step, root.temperament))
            if current not in degrees:
                degrees.append(current)
        return cls(tuple(degrees))

    def __len__(self) -> int:
        return len(self.degrees)

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.degrees)

    def __contains__(self, pitch_class: object) -> bool:
        return pitch_class in self.degrees

    def degree_of(self, pitch_class: PitchClass) -> int | None:
        """1-indexed degree of a pitch class, or None if it is not in the scale."""
        try:
            return self.degrees.index(pitch_class) + 1
        except ValueError:
            return None

    def mode(self, degree: int) -> Scale | None:
        """The mode starting on the given 1-indexed degree, or None if out of range."""
        if not 1 <= degree <= len(self.degrees):
            return None
        start = degree - 1
        return Scale(self.degrees[start:] + self.degrees[:start])

    @classmethod
    def _from_pattern(cls, root: PitchClass, pattern: Sequence[int]) -> Scale:
        return cls.from_step_pattern(root, pattern)

    @classmethod
    def major(cls, root: PitchClass) -> Scale:
        """Ionian (major) scale."""
        return cls._from_pattern(root, (2, 2, 1, 2, 2, 2, 1))

    @classmethod
    def natural_minor(cls, root: PitchClass) -> Scale:
        """Aeolian (natural minor) scale."""
        return cls._from_pattern(root, (2, 1, 2, 2, 1, 2, 2))

    @classmethod
    def dorian(cls, root: PitchClass) -> Scale:
        """Dorian scale."""
        return cls._from_pattern(root, (2, 1, 2, 2, 2, 1, 2))

    @classmethod
    def phrygian(cls, root: PitchClass) -> Scale:
        """Phrygian scale."""
        return cls._from_pattern(root, (1, 2, 2, 2, 1, 2, 2))

    @classmethod
    def lydian(cls, root: PitchClass) -> Scale:
        """Lydian scale."""
        return cls._from_pattern(root, (2, 2, 2, 1, 2, 2, 1))

    @classmethod
    def mixolydian(cls, root: PitchClass) -> Scale:
        """Mixolydian scale."""
        return cls._from_pattern(root, (2, 2, 1, 2, 2, 1, 2))

    @classmethod
    def locrian(cls, root: PitchClass) -> Scale:
        """Locrian scale."""
        return cls._from_pattern(root, (1, 2, 2, 1, 2, 2, 2))