"""Parsing and labelling of tonic names and keys, and template locators."""

from __future__ import annotations

from dataclasses import dataclass

from musicstack.theory.key import Key, Mode
from musicstack.theory.pitch import PitchClass

_LETTER_SEMITONES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTALS = {"#": 1, "\u266f": 1, "b": -1, "\u266d": -1}
_PITCH_CLASS_LABELS = ("C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B")


@dataclass(frozen=True)
class TemplateLocator:
    """Where a template came from: a built-in id, a file path, or both."""

    builtin_id: str | None = None
    file_path: str | None = None

    @classmethod
    def builtin(cls, template_id: str) -> TemplateLocator:
        """Locator for a built-in template."""
        return cls(builtin_id=str(template_id))

    @classmethod
    def file(cls, path: object) -> TemplateLocator:
        """Locator for a template loaded from a file."""
        return cls(file_path=str(path))

    def describe(self) -> str:
        """Short human-readable description."""
        if self.builtin_id is not None and self.file_path is not None:
            return f"builtin:{self.builtin_id} + file:{self.file_path}"
        if self.builtin_id is not None:
            return f"builtin:{self.builtin_id}"
        if self.file_path is not None:
            return f"file:{self.file_path}"
        return "unknown"


def parse_pitch_class(text: str) -> PitchClass:
    """Parse a tonic such as C, F#, Bb or E\u266d into a 12-TET pitch class."""
    trimmed = text.strip()
    if not trimmed:
        raise ValueError("tonic cannot be empty")
    letter, accidentals = trimmed[0].upper(), trimmed[1:]
    try:
        base = _LETTER_SEMITONES[letter]
    except KeyError:
        raise ValueError("tonic must begin with A, B, C, D, E, F, or G") from None
    offset = 0
    for ch in accidentals:
        try:
            offset += _ACCIDENTALS[ch]
        except KeyError:
            raise ValueError(f"unrecognized accidental '{ch}' (use # or b)") from None
    return PitchClass.from_semitones((base + offset) % 12)


def parse_key(tonic: str, mode: Mode) -> Key:
    """Parse a tonic name and combine it with a mode."""
    try:
        pitch_class = parse_pitch_class(tonic)
    except ValueError as exc:
        raise ValueError(
            f"invalid tonic '{tonic}' (expected pitch like C, F#, Bb): {exc}"
        ) from exc
    return Key(pitch_class, mode)


def pitch_class_label(pitch_class: PitchClass) -> str:
    """Conventional label for a 12-TET pitch class."""
    return _PITCH_CLASS_LABELS[pitch_class.to_semitones() % 12]


def format_key_label(key: Key) -> str:
    """Label such as 'C major'."""
    return f"{pitch_class_label(key.tonic)} {key.mode.value}"