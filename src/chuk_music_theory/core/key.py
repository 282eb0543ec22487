"""
Key primitives - KeyType (letter name) and Key (letter + accidental).

A KeyType is one of the seven letter names, valued by its semitone offset
from C. Letters are not evenly spaced (E-F and B-C are a semitone apart),
which is why interval arithmetic walks letters and semitones separately.

A Key is octave-independent: C#4 and C#5 share Key(KeyType.C, SHARP).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar

from chuk_music_theory.constants import OCTAVE_SEMITONES, ErrorMessages

from .accidental import Accidental

if TYPE_CHECKING:
    from .interval import Interval

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"([A-Ga-g])([#♯♭b]*)")


class KeyType(IntEnum):
    """
    The seven letter names, valued by semitones above C.

    Letter order (C D E F G A B) is circular: stepping up from B wraps to C.
    """

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    @classmethod
    def all(cls) -> list[KeyType]:
        """Letters in order, starting from C."""
        return list(_LETTERS)

    @classmethod
    def parse(cls, letter: str) -> KeyType:
        """Parse a single letter, case-insensitively."""
        try:
            return cls[letter.strip().upper()]
        except KeyError:
            raise ValueError(ErrorMessages.INVALID_KEY.format(text=letter)) from None

    @property
    def index(self) -> int:
        """Position of the letter in C D E F G A B."""
        return _LETTERS.index(self)

    def key_at(self, distance: int) -> KeyType:
        """
        Walk the circular letter sequence.

        Args:
            distance: Letter steps to move; negative moves down. Zero is self.

        Returns:
            The letter `distance` steps away
        """
        return _LETTERS[(self.index + distance) % len(_LETTERS)]

    def distance(self, other: KeyType) -> int:
        """Signed letter-step count from this letter to `other` (within C..B)."""
        return other.index - self.index

    def octave_diff(self, interval: Interval, is_higher: bool) -> int:
        """
        Octave change when moving by an interval's degree.

        Walks degree-1 letters up (or down) and counts B->C crossings
        going up as +1 and C->B crossings going down as -1.

        Args:
            interval: Interval whose degree is walked
            is_higher: Walk upwards if True, downwards otherwise

        Returns:
            Octave offset for the target letter
        """
        diff = 0
        current = self
        for _ in range(interval.degree - 1):
            following = current.key_at(1 if is_higher else -1)
            if is_higher and current == KeyType.B and following == KeyType.C:
                diff += 1
            elif not is_higher and current == KeyType.C and following == KeyType.B:
                diff -= 1
            current = following
        return diff

    def __str__(self) -> str:
        return self.name


# Letter order (module level to avoid IntEnum member issues)
_LETTERS: list[KeyType] = [
    KeyType.C,
    KeyType.D,
    KeyType.E,
    KeyType.F,
    KeyType.G,
    KeyType.A,
    KeyType.B,
]


@dataclass(frozen=True, eq=False)
class Key:
    """
    A letter name plus accidental, independent of octave.

    Loose equality (==) is enharmonic: C# == Db, B == Cb.
    strict_equals() requires the same letter and accidental.

    Immutable and hashable.
    """

    type: KeyType
    accidental: Accidental = Accidental.NATURAL

    # Spelling tables, index = semitones above C
    KEYS_WITH_SHARPS: ClassVar[tuple[Key, ...]]
    KEYS_WITH_FLATS: ClassVar[tuple[Key, ...]]

    @property
    def raw_value(self) -> int:
        """Semitones above C, not wrapped (Cb is -1, B# is 12)."""
        return int(self.type) + self.accidental.value

    @property
    def pitch_class(self) -> int:
        """Semitones above C, wrapped into 0-11."""
        return self.raw_value % OCTAVE_SEMITONES

    @classmethod
    def from_raw(cls, value: int, prefer_sharps: bool = True) -> Key:
        """
        Spell a semitone value as a key.

        Args:
            value: Semitones above C (wrapped modulo 12)
            prefer_sharps: Spell black keys with sharps, otherwise flats
        """
        table = cls.KEYS_WITH_SHARPS if prefer_sharps else cls.KEYS_WITH_FLATS
        return table[value % OCTAVE_SEMITONES]

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> Key:
        """
        Parse a key from a string like 'C', 'f#', 'Bb' or 'e♭♭'.

        Letters are case-insensitive. Each '#'/'♯' raises and each 'b'/'♭'
        lowers by a semitone.

        Args:
            text: Key text
            strict: Raise on malformed input instead of falling back to C

        Returns:
            The parsed key, or C natural when lenient and nothing matches

        Raises:
            ValueError: If strict and the text is not a key
        """
        match = KEY_PATTERN.fullmatch(text.strip()) if strict else KEY_PATTERN.search(text)
        if match is None:
            if strict:
                raise ValueError(ErrorMessages.INVALID_KEY.format(text=text))
            logger.debug("Unparseable key %r, defaulting to C", text)
            return cls(KeyType.C)
        letter, glyphs = match.groups()
        return cls(KeyType[letter.upper()], Accidental.parse(glyphs))

    def strict_equals(self, other: Key) -> bool:
        """Compare letter and accidental variant exactly."""
        return self.type == other.type and self.accidental.strict_equals(other.accidental)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.pitch_class == other.pitch_class

    def __hash__(self) -> int:
        return hash(self.pitch_class)

    def __str__(self) -> str:
        return f"{self.type.name}{self.accidental.description}"

    def __repr__(self) -> str:
        return f"Key({self})"


Key.KEYS_WITH_SHARPS = (
    Key(KeyType.C),
    Key(KeyType.C, Accidental.SHARP),
    Key(KeyType.D),
    Key(KeyType.D, Accidental.SHARP),
    Key(KeyType.E),
    Key(KeyType.F),
    Key(KeyType.F, Accidental.SHARP),
    Key(KeyType.G),
    Key(KeyType.G, Accidental.SHARP),
    Key(KeyType.A),
    Key(KeyType.A, Accidental.SHARP),
    Key(KeyType.B),
)

Key.KEYS_WITH_FLATS = (
    Key(KeyType.C),
    Key(KeyType.D, Accidental.FLAT),
    Key(KeyType.D),
    Key(KeyType.E, Accidental.FLAT),
    Key(KeyType.E),
    Key(KeyType.F),
    Key(KeyType.G, Accidental.FLAT),
    Key(KeyType.G),
    Key(KeyType.A, Accidental.FLAT),
    Key(KeyType.A),
    Key(KeyType.B, Accidental.FLAT),
    Key(KeyType.B),
)
