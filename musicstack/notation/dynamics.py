"""Dynamic markings, hairpins and simple dynamic ramps."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum


class DynamicMark(IntEnum):
    """Dynamic markings ordered from softest to loudest."""

    PPP = 0
    PP = 1
    P = 2
    MP = 3
    MF = 4
    F = 5
    FF = 6
    FFF = 7

    def label(self) -> str:
        """Conventional shorthand such as 'mf'."""
        return self.name.lower()

    def intensity(self) -> int:
        """Intensity rank, 0 softest to 7 loudest."""
        return int(self.value)

    @classmethod
    def from_intensity(cls, intensity: int) -> DynamicMark | None:
        """The mark with the given intensity rank, or None if out of range."""
        try:
            return cls(intensity)
        except ValueError:
            return None


class Hairpin(Enum):
    """Hairpin shape."""

    CRESCENDO = "crescendo"
    DECRESCENDO = "decrescendo"


@dataclass(frozen=True)
class DynamicProfilePoint:
    """A dynamic mark at a relative offset (in beats or seconds)."""

    offset: float
    mark: DynamicMark


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def ramp(
    start: DynamicMark, end: DynamicMark, duration: float, steps: int
) -> list[DynamicProfilePoint]:
    """Evenly spaced keyframes from start to end, both endpoints included."""
    if steps < 2:
        raise ValueError("ramp requires at least two steps")
    if not math.isfinite(duration) or duration < 0.0:
        raise ValueError("duration must be non-negative and finite")
    start_intensity = float(start.intensity())
    end_intensity = float(end.intensity())
    denom = steps - 1
    points = []
    for i in range(steps):
        t = i / denom
        intensity = start_intensity + (end_intensity - start_intensity) * t
        mark = DynamicMark.from_intensity(_round_half_away(intensity))
        if mark is None:
            raise ValueError(f"intensity {intensity} is not a valid dynamic")
        points.append(DynamicProfilePoint(duration * t, mark))
    return points