"""Glyph identifiers and stem directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class GlyphId:
    """Identifier of a glyph, such as a SMuFL code point."""

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= _U32_MAX:
            raise ValueError("glyph code must fit in 32 unsigned bits")

    @classmethod
    def from_codepoint(cls, code: int) -> GlyphId:
        """Glyph id for a Unicode or SMuFL code point."""
        return cls(code)

    @classmethod
    def from_char(cls, char: str) -> GlyphId:
        """Glyph id for a single character."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        return cls(ord(char))

    def to_smufl(self) -> str:
        """SMuFL-style notation such as 'U+E0A4'."""
        return f"U+{self.code:04X}"

    def __str__(self) -> str:
        return self.to_smufl()


class StemDirection(Enum):
    """Direction of a note stem."""

    UP = "up"
    DOWN = "down"

    def sign(self) -> float:
        """1.0 for up, -1.0 for down."""
        return 1.0 if self is StemDirection.UP else -1.0

    def flipped(self) -> StemDirection:
        """The opposite direction."""
        return StemDirection.DOWN if self is StemDirection.UP else StemDirection.UP