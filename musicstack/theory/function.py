"""Harmonic functions of scale degrees within a key."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from musicstack.theory.pitch import PitchClass

if TYPE_CHECKING:
    from musicstack.theory.key import Key


class FunctionKind(Enum):
    """High-level tonal function."""

    TONIC = "tonic"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"
    MEDIANT = "mediant"
    SUBMEDIANT = "submediant"
    SUPERTONIC = "supertonic"
    LEADING_TONE = "leading_tone"


@dataclass(frozen=True)
class HarmonicFunction:
    """The function a scale degree fulfils in a key."""

    kind: FunctionKind
    degree: int
    key: Key
    pitch_class: PitchClass