"""
Accidental primitive - signed semitone offset applied to a letter name.

An accidental is natural, some number of flats, or some number of sharps.
All arithmetic happens on the signed integer value (flats negative,
sharps positive) and is normalized back through Accidental.from_value().
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from chuk_music_theory.constants import ErrorMessages

FLAT_GLYPHS = ("b", "♭")
SHARP_GLYPHS = ("#", "♯")


class AccidentalKind(str, Enum):
    """Variant of an accidental."""

    NATURAL = "natural"
    FLATS = "flats"
    SHARPS = "sharps"


@dataclass(frozen=True, eq=False)
class Accidental:
    """
    A signed semitone modifier.

    Loose equality (==) compares the integer value only. strict_equals()
    additionally requires the same variant and amount. Construction always
    normalizes, so flats(0) and sharps(0) are never produced.

    Examples:
        Accidental.flats(2) == Accidental.DOUBLE_FLAT
        Accidental.sharps(2) - 2 == Accidental.NATURAL
        Accidental.FLAT * 2 == Accidental.DOUBLE_FLAT
    """

    kind: AccidentalKind = AccidentalKind.NATURAL
    amount: int = 0

    NATURAL: ClassVar[Accidental]
    FLAT: ClassVar[Accidental]
    SHARP: ClassVar[Accidental]
    DOUBLE_FLAT: ClassVar[Accidental]
    DOUBLE_SHARP: ClassVar[Accidental]

    def __post_init__(self) -> None:
        if self.kind == AccidentalKind.NATURAL:
            if self.amount != 0:
                object.__setattr__(self, "amount", 0)
        elif self.amount <= 0:
            raise ValueError(
                ErrorMessages.INVALID_ACCIDENTAL_AMOUNT.format(
                    kind=self.kind.value, amount=self.amount
                )
            )

    @classmethod
    def flats(cls, amount: int) -> Accidental:
        """Create an accidental with the given number of flats (0 gives natural)."""
        return cls.from_value(-abs(amount))

    @classmethod
    def sharps(cls, amount: int) -> Accidental:
        """Create an accidental with the given number of sharps (0 gives natural)."""
        return cls.from_value(abs(amount))

    @classmethod
    def from_value(cls, value: int) -> Accidental:
        """
        Normalize a signed semitone value into an accidental.

        Negative values become flats, positive values become sharps
        and zero becomes natural.
        """
        if value < 0:
            return cls(AccidentalKind.FLATS, -value)
        if value > 0:
            return cls(AccidentalKind.SHARPS, value)
        return cls(AccidentalKind.NATURAL, 0)

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """
        Parse accidental glyphs like '#', '##', 'b', 'bb', '♯' or '♭'.

        Every sharp glyph adds one semitone and every flat glyph removes one.
        Other characters are ignored, so an empty string is natural.
        """
        value = 0
        for char in text:
            if char in SHARP_GLYPHS:
                value += 1
            elif char in FLAT_GLYPHS:
                value -= 1
        return cls.from_value(value)

    @property
    def value(self) -> int:
        """Signed semitone offset (-amount for flats, +amount for sharps)."""
        if self.kind == AccidentalKind.FLATS:
            return -self.amount
        if self.kind == AccidentalKind.SHARPS:
            return self.amount
        return 0

    @property
    def is_natural(self) -> bool:
        return self.kind == AccidentalKind.NATURAL

    @property
    def notation(self) -> str:
        """Notation glyph, including the natural sign."""
        if self.is_natural:
            return "♮"
        return self.description

    @property
    def description(self) -> str:
        """Glyphs used when spelling a key (empty for natural)."""
        if self.kind == AccidentalKind.FLATS:
            return "𝄫" if self.amount == 2 else "♭" * self.amount
        if self.kind == AccidentalKind.SHARPS:
            return "𝄪" if self.amount == 2 else "♯" * self.amount
        return ""

    def strict_equals(self, other: Accidental) -> bool:
        """Compare variant and amount, not just the semitone value."""
        return self.kind == other.kind and self.amount == other.amount

    def __add__(self, other: Accidental | int) -> Accidental:
        if isinstance(other, Accidental):
            return Accidental.from_value(self.value + other.value)
        if isinstance(other, int):
            return Accidental.from_value(self.value + other)
        return NotImplemented

    def __radd__(self, other: int) -> Accidental:
        return self.__add__(other)

    def __sub__(self, other: Accidental | int) -> Accidental:
        if isinstance(other, Accidental):
            return Accidental.from_value(self.value - other.value)
        if isinstance(other, int):
            return Accidental.from_value(self.value - other)
        return NotImplemented

    def __mul__(self, n: int) -> Accidental:
        if not isinstance(n, int):
            return NotImplemented
        return Accidental.from_value(self.value * n)

    def __rmul__(self, n: int) -> Accidental:
        return self.__mul__(n)

    def __truediv__(self, n: int) -> Accidental:
        """Divide the semitone value, truncating toward zero."""
        if not isinstance(n, int):
            return NotImplemented
        return Accidental.from_value(int(self.value / n))

    def __neg__(self) -> Accidental:
        return Accidental.from_value(-self.value)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Accidental):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.notation

    def __repr__(self) -> str:
        if self.is_natural:
            return "Accidental.NATURAL"
        return f"Accidental.{self.kind.value}({self.amount})"


Accidental.NATURAL = Accidental()
Accidental.FLAT = Accidental.flats(1)
Accidental.SHARP = Accidental.sharps(1)
Accidental.DOUBLE_FLAT = Accidental.flats(2)
Accidental.DOUBLE_SHARP = Accidental.sharps(2)
