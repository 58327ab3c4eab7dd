"""Articulation symbols and melodic ornaments.

The members are integer enums so that their ordering and numeric values
stay stable when persisted. Iterating over an enum yields the canonical
order.
"""

from __future__ import annotations

from enum import IntEnum


class ArticulationKind(IntEnum):
    """Articulations applied to noteheads or stems, in canonical order."""

    STACCATISSIMO = 0
    """Extreme shortening; usually a wedge."""
    STACCATO = 1
    """Detached; a dot."""
    TENUTO = 2
    """Full duration; a line."""
    ACCENT = 3
    """Standard accent (>)."""
    MARCATO = 4
    """Heavy accent (^)."""
    FERMATA = 5
    """Sustain beyond the written value."""


class OrnamentKind(IntEnum):
    """Ornaments that embellish a pitch, in canonical order."""

    TRILL = 0
    """Rapid alternation with the upper neighbour."""
    TURN = 1
    """Upper neighbour, main note, lower neighbour, main note."""
    UPPER_MORDENT = 2
    """Quick alternation with the upper neighbour."""
    LOWER_MORDENT = 3
    """Quick alternation with the lower neighbour."""
    APPOGGIATURA = 4
    """Leaning grace note taking time from the main note."""
    ACCIACCATURA = 5
    """Short crushed grace note."""