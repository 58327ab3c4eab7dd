"""Chord qualities and chords built by stacking intervals above a root."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

from musicstack.theory.interval import Interval
from musicstack.theory.pitch import PitchClass


class TriadKind(Enum):
    """Triad quality (root, third, fifth)."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"

    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets above the root."""
        return _TRIAD_INTERVALS[self]


class SeventhKind(Enum):
    """Seventh-chord quality (root, third, fifth, seventh)."""

    MAJOR7 = "major7"
    DOMINANT7 = "dominant7"
    MINOR7 = "minor7"
    HALF_DIMINISHED7 = "half_diminished7"
    DIMINISHED7 = "diminished7"

    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets above the root."""
        return _SEVENTH_INTERVALS[self]


class ExtendedKind(Enum):
    """Common add-tone and 9/11/13 chords."""

    ADD9 = "add9"
    ADD11 = "add11"
    ADD13 = "add13"
    SIX_NINE = "six_nine"
    MAJOR9 = "major9"
    DOMINANT9 = "dominant9"
    MINOR9 = "minor9"
    MAJOR11 = "major11"
    DOMINANT11 = "dominant11"
    MINOR11 = "minor11"
    MAJOR13 = "major13"
    DOMINANT13 = "dominant13"
    MINOR13 = "minor13"

    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets above the root."""
        return _EXTENDED_INTERVALS[self]


_TRIAD_INTERVALS = {
    TriadKind.MAJOR: (0, 4, 7),
    TriadKind.MINOR: (0, 3, 7),
    TriadKind.DIMINISHED: (0, 3, 6),
    TriadKind.AUGMENTED: (0, 4, 8),
}

_SEVENTH_INTERVALS = {
    SeventhKind.MAJOR7: (0, 4, 7, 11),
    SeventhKind.DOMINANT7: (0, 4, 7, 10),
    SeventhKind.MINOR7: (0, 3, 7, 10),
    SeventhKind.HALF_DIMINISHED7: (0, 3, 6, 10),
    SeventhKind.DIMINISHED7: (0, 3, 6, 9),
}

_EXTENDED_INTERVALS = {
    ExtendedKind.ADD9: (0, 4, 7, 14),
    ExtendedKind.ADD11: (0, 4, 7, 17),
    ExtendedKind.ADD13: (0, 4, 7, 21),
    ExtendedKind.SIX_NINE: (0, 4, 7, 9, 14),
    ExtendedKind.MAJOR9: (0, 4, 7, 11, 14),
    ExtendedKind.DOMINANT9: (0, 4, 7, 10, 14),
    ExtendedKind.MINOR9: (0, 3, 7, 10, 14),
    ExtendedKind.MAJOR11: (0, 4, 7, 11, 14, 17),
    ExtendedKind.DOMINANT11: (0, 4, 7, 10, 14, 17),
    ExtendedKind.MINOR11: (0, 3, 7, 10, 14, 17),
    ExtendedKind.MAJOR13: (0, 4, 7, 11, 14, 17, 21),
    ExtendedKind.DOMINANT13: (0, 4, 7, 10, 14, 17, 21),
    ExtendedKind.MINOR13: (0, 3, 7, 10, 14, 17, 21),
}

ChordKind = Union[TriadKind, SeventhKind, ExtendedKind]


class _HasIntervals(Protocol):
    def intervals(self) -> tuple[int, ...]: ...


@dataclass(frozen=True)
class Chord:
    """An ordered collection of pitch classes."""

    tones: tuple[PitchClass, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tones", tuple(self.tones))

    @classmethod
    def from_intervals(cls, root: PitchClass, intervals: Iterable[int]) -> Chord:
        """Build a chord from a root and step offsets in the root's temperament."""
        return cls(
            tuple(root.transpose(Interval(steps, root.temperament)) for steps in intervals)
        )

    @classmethod
    def from_kind(cls, root: PitchClass, kind: _HasIntervals) -> Chord:
        """Build a chord from a canonical chord kind."""
        return cls.from_intervals(root, kind.intervals())

    def __len__(self) -> int:
        return len(self.tones)

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.tones)

    def __contains__(self, pitch_class: object) -> bool:
        return pitch_class in self.tones

    @classmethod
    def major_triad(cls, root: PitchClass) -> Chord:
        """Major triad."""
        return cls.from_kind(root, TriadKind.MAJOR)

    @classmethod
    def minor_triad(cls, root: PitchClass) -> Chord:
        """Minor triad."""
        return cls.from_kind(root, TriadKind.MINOR)

    @classmethod
    def diminished_triad(cls, root: PitchClass) -> Chord:
        """Diminished triad."""
        return cls.from_kind(root, TriadKind.DIMINISHED)

    @classmethod
    def augmented_triad(cls, root: PitchClass) -> Chord:
        """Augmented triad."""
        return cls.from_kind(root, TriadKind.AUGMENTED)

    @classmethod
    def major_seventh(cls, root: PitchClass) -> Chord:
        """Major seventh chord."""
        return cls.from_kind(root, SeventhKind.MAJOR7)

    @classmethod
    def dominant_seventh(cls, root: PitchClass) -> Chord:
        """Dominant seventh chord."""
        return cls.from_kind(root, SeventhKind.DOMINANT7)

    @classmethod
    def minor_seventh(cls, root: PitchClass) -> Chord:
        """Minor seventh chord."""
        return cls.from_kind(root, SeventhKind.MINOR7)

    @classmethod
    def half_diminished(cls, root: PitchClass) -> Chord:
        """Half-diminished seventh chord."""
        return cls.from_kind(root, SeventhKind.HALF_DIMINISHED7)

    @classmethod
    def diminished_seventh(cls, root: PitchClass) -> Chord:
        """Fully diminished seventh chord."""
        return cls.from_kind(root, SeventhKind.DIMINISHED7)

    @classmethod
    def extended(cls, root: PitchClass, kind: ExtendedKind) -> Chord:
        """Extended chord of the given kind."""
        return cls.from_kind(root, kind)