"""
Rhythm primitives - NoteValueType, NoteModifier, NoteValue, TimeSignature, Tempo.

Note values are fractions of a whole note (a quarter note is 1/4) scaled
by a modifier (dotted, triplet, quintuplet). A Tempo turns note values into
seconds, audio sample counts and frequencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import ClassVar

from chuk_music_theory.constants import (
    DEFAULT_BEATS,
    DEFAULT_BPM,
    DEFAULT_SAMPLE_RATE,
    ErrorMessages,
)


class NoteValueType(str, Enum):
    """Length of a note, as a fraction of a whole note."""

    FOUR_BARS = "four_bars"
    TWO_BARS = "two_bars"
    ONE_BAR = "one_bar"
    DOUBLE_WHOLE = "double_whole"
    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "sixteenth"
    THIRTY_SECOND = "thirty_second"
    SIXTY_FOURTH = "sixty_fourth"

    @property
    def rate(self) -> Fraction:
        """Length in whole notes (quarter = 1/4)."""
        return _NOTE_VALUE_TYPES[self][0]

    @property
    def description(self) -> str:
        return _NOTE_VALUE_TYPES[self][1]

    @classmethod
    def from_denominator(cls, denominator: int) -> NoteValueType:
        """Note value for a time signature denominator (4 -> quarter)."""
        for note_value_type, (rate, _) in _NOTE_VALUE_TYPES.items():
            if rate == Fraction(1, denominator):
                return note_value_type
        raise ValueError(ErrorMessages.UNSUPPORTED_DENOMINATOR.format(denominator=denominator))


# (rate, description) - module level to avoid Enum member issues
_NOTE_VALUE_TYPES: dict[NoteValueType, tuple[Fraction, str]] = {
    NoteValueType.FOUR_BARS: (Fraction(16), "4 Bars"),
    NoteValueType.TWO_BARS: (Fraction(8), "2 Bars"),
    NoteValueType.ONE_BAR: (Fraction(4), "1 Bar"),
    NoteValueType.DOUBLE_WHOLE: (Fraction(2), "2/1"),
    NoteValueType.WHOLE: (Fraction(1), "1/1"),
    NoteValueType.HALF: (Fraction(1, 2), "1/2"),
    NoteValueType.QUARTER: (Fraction(1, 4), "1/4"),
    NoteValueType.EIGHTH: (Fraction(1, 8), "1/8"),
    NoteValueType.SIXTEENTH: (Fraction(1, 16), "1/16"),
    NoteValueType.THIRTY_SECOND: (Fraction(1, 32), "1/32"),
    NoteValueType.SIXTY_FOURTH: (Fraction(1, 64), "1/64"),
}


class NoteModifier(float, Enum):
    """Length multiplier applied to a note value."""

    DEFAULT = 1.0
    DOTTED = 1.5
    TRIPLET = 0.6667
    QUINTUPLET = 0.8

    @property
    def description(self) -> str:
        """Short label: '', 'D', 'T' or 'Q'."""
        return _MODIFIER_LABELS[self]


_MODIFIER_LABELS: dict[NoteModifier, str] = {
    NoteModifier.DEFAULT: "",
    NoteModifier.DOTTED: "D",
    NoteModifier.TRIPLET: "T",
    NoteModifier.QUINTUPLET: "Q",
}


@dataclass(frozen=True)
class NoteValue:
    """
    A note value type with a modifier.

    Examples:
        NoteValue(NoteValueType.QUARTER).rate = 0.25
        NoteValue(NoteValueType.HALF, NoteModifier.DOTTED).rate = 0.75
    """

    type: NoteValueType
    modifier: NoteModifier = NoteModifier.DEFAULT

    @property
    def rate(self) -> float:
        """Length in whole notes, including the modifier."""
        return float(self.type.rate) * self.modifier.value

    @property
    def description(self) -> str:
        return f"{self.type.description}{self.modifier.description}"

    def __truediv__(self, other: NoteValueType) -> float:
        """How many notes of another type fit in this note value."""
        if not isinstance(other, NoteValueType):
            return NotImplemented
        return self.rate / float(other.rate)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class TimeSignature:
    """
    Beats per bar and the note value that gets one beat.

    Examples:
        TimeSignature() = 4/4
        TimeSignature(3) = 3/4
        TimeSignature(6, NoteValue(NoteValueType.EIGHTH)) = 6/8
    """

    beats: int = DEFAULT_BEATS
    note_value: NoteValue = field(default_factory=lambda: NoteValue(NoteValueType.QUARTER))

    COMMON_TIME: ClassVar[TimeSignature]
    CUT_TIME: ClassVar[TimeSignature]
    WALTZ: ClassVar[TimeSignature]
    SIX_EIGHT: ClassVar[TimeSignature]

    def __post_init__(self) -> None:
        if self.beats < 1:
            raise ValueError(ErrorMessages.INVALID_BEATS.format(beats=self.beats))

    @property
    def description(self) -> str:
        return f"{self.beats}/{1 / self.note_value.type.rate}"

    @classmethod
    def parse(cls, notation: str) -> TimeSignature:
        """
        Parse a time signature from notation like '4/4', '3/4', '6/8'.

        Raises:
            ValueError: If the notation is malformed or the denominator unsupported
        """
        parts = notation.split("/")
        if len(parts) != 2:
            raise ValueError(ErrorMessages.INVALID_TIME_SIGNATURE.format(text=notation))
        beats = int(parts[0])
        note_value_type = NoteValueType.from_denominator(int(parts[1]))
        return cls(beats, NoteValue(note_value_type))

    def __str__(self) -> str:
        return self.description


TimeSignature.COMMON_TIME = TimeSignature(4, NoteValue(NoteValueType.QUARTER))
TimeSignature.CUT_TIME = TimeSignature(2, NoteValue(NoteValueType.HALF))
TimeSignature.WALTZ = TimeSignature(3, NoteValue(NoteValueType.QUARTER))
TimeSignature.SIX_EIGHT = TimeSignature(6, NoteValue(NoteValueType.EIGHTH))


@dataclass(frozen=True)
class Tempo:
    """
    Beats per minute in a time signature.

    duration() depends on the time signature's beat value; sample_length()
    always counts a whole note as four beats, whatever the time signature.
    """

    time_signature: TimeSignature = field(default_factory=TimeSignature)
    bpm: float = DEFAULT_BPM

    def __post_init__(self) -> None:
        if self.bpm <= 0:
            raise ValueError(ErrorMessages.INVALID_BPM.format(bpm=self.bpm))

    @property
    def seconds_per_beat(self) -> float:
        return 60.0 / self.bpm

    def duration(self, note_value: NoteValue) -> float:
        """
        Length of a note value in seconds.

        Example:
            Tempo(bpm=120).duration(NoteValue(NoteValueType.QUARTER)) = 0.5
        """
        beat_ratio = float(note_value.type.rate / self.time_signature.note_value.type.rate)
        return self.seconds_per_beat * beat_ratio * note_value.modifier.value

    def sample_length(
        self, note_value: NoteValue, sample_rate: float = DEFAULT_SAMPLE_RATE
    ) -> float:
        """
        Length of a note value in audio samples.

        A whole note is four beats here, independent of the time signature.
        """
        if sample_rate <= 0:
            raise ValueError(ErrorMessages.INVALID_SAMPLE_RATE.format(sample_rate=sample_rate))
        return (
            self.seconds_per_beat
            * sample_rate
            * (4 * float(note_value.type.rate))
            * note_value.modifier.value
        )

    def hertz(self, note_value: NoteValue) -> float:
        """Repetition frequency of a note value (1 / duration)."""
        return 1.0 / self.duration(note_value)

    def __str__(self) -> str:
        return f"{self.bpm:g} BPM {self.time_signature}"
