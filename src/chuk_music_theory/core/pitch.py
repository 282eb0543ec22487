"""
Pitch primitive - a Key placed in an octave.

Pitches live in two spaces at once: MIDI note numbers (semitones) and
letter/octave positions (degrees). Interval arithmetic uses both - the
interval's degree picks the target letter, its semitone count picks the
accidental that makes the result exact. This is what spells C + m3 as Eb
rather than D#.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import total_ordering

from chuk_music_theory.constants import (
    A4_FREQUENCY,
    A4_MIDI,
    NEAREST_PITCH_OCTAVES,
    OCTAVE_SEMITONES,
    ErrorMessages,
)

from .accidental import Accidental
from .interval import Interval, IntervalQuality
from .key import Key, KeyType

logger = logging.getLogger(__name__)

PITCH_PATTERN = re.compile(r"([A-Ga-g])([#♯♭b]*)(-?)(\d+)")

# Semitones of the major/perfect interval for each degree within an octave
_MAJOR_SCALE_SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11]

# Zero-based degrees (mod 7) that take perfect rather than major quality
_PERFECT_DEGREES: frozenset[int] = frozenset({0, 3, 4})


@total_ordering
@dataclass(frozen=True, eq=False)
class Pitch:
    """
    A key in a specific octave.

    MIDI mapping: midi = key semitones + (octave + 1) * 12, so C4 = 60
    and C-1 = 0.

    Loose equality (==) is by MIDI number (enharmonic: C#4 == Db4).
    strict_equals() requires the same key spelling and octave.
    Ordering is by MIDI number.

    Immutable and hashable.
    """

    key: Key
    octave: int

    @property
    def midi(self) -> int:
        """MIDI note number."""
        return self.key.raw_value + (self.octave + 1) * OCTAVE_SEMITONES

    @property
    def frequency(self) -> float:
        """Equal-tempered frequency in Hz (A4 = 440)."""
        return A4_FREQUENCY * 2 ** ((self.midi - A4_MIDI) / OCTAVE_SEMITONES)

    @property
    def diatonic_index(self) -> int:
        """Absolute letter position (letters since C-0), ignoring accidentals."""
        return self.key.type.index + 7 * self.octave

    @classmethod
    def from_midi(cls, midi: int, prefer_sharps: bool = True) -> Pitch:
        """
        Create a pitch from a MIDI note number.

        Args:
            midi: MIDI note number
            prefer_sharps: Spell black keys with sharps, otherwise flats

        Returns:
            The pitch, with octave = midi // 12 - 1
        """
        return cls(
            Key.from_raw(midi, prefer_sharps=prefer_sharps),
            midi // OCTAVE_SEMITONES - 1,
        )

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> Pitch:
        """
        Parse a pitch from a string like 'C4', 'f#-1', 'Bb2' or 'cb2'.

        Args:
            text: Pitch text (letter, accidental glyphs, optional '-', octave)
            strict: Raise on malformed input instead of falling back to C0

        Returns:
            The parsed pitch, or C0 when lenient and nothing matches

        Raises:
            ValueError: If strict and the text is not a pitch
        """
        match = PITCH_PATTERN.fullmatch(text.strip()) if strict else PITCH_PATTERN.search(text)
        if match is None:
            if strict:
                raise ValueError(ErrorMessages.INVALID_PITCH.format(text=text))
            logger.debug("Unparseable pitch %r, defaulting to C0", text)
            return cls(Key(KeyType.C), 0)
        letter, glyphs, sign, digits = match.groups()
        octave = -int(digits) if sign else int(digits)
        return cls(Key(KeyType[letter.upper()], Accidental.parse(glyphs)), octave)

    @classmethod
    def nearest(cls, frequency: float) -> Pitch:
        """
        Find the pitch closest to a frequency.

        Scans every sharp-spelled key over octaves 1-7 and keeps the first
        minimum, so ties resolve to the lower pitch.
        """
        candidates = [
            cls(key, octave) for octave in NEAREST_PITCH_OCTAVES for key in Key.KEYS_WITH_SHARPS
        ]
        return min(candidates, key=lambda pitch: abs(pitch.frequency - frequency))

    def strict_equals(self, other: Pitch) -> bool:
        """Compare key spelling and octave exactly."""
        return self.key.strict_equals(other.key) and self.octave == other.octave

    def _transpose(self, interval: Interval, is_higher: bool) -> Pitch:
        steps = interval.degree - 1
        letter = self.key.type.key_at(steps if is_higher else -steps)
        octave = self.octave + self.key.type.octave_diff(interval, is_higher)
        target_midi = self.midi + (interval.semitones if is_higher else -interval.semitones)
        natural = Pitch(Key(letter), octave)
        return Pitch(Key(letter, Accidental.from_value(target_midi - natural.midi)), octave)

    def interval_to(self, other: Pitch) -> Interval:
        """
        Interval between two pitches, regardless of order.

        The degree comes from the letter distance; the quality comes from
        comparing the semitone distance with the major/perfect interval of
        that degree. Compound intervals (beyond an octave) are supported.
        """
        low, high = sorted((self, other), key=lambda p: (p.midi, p.diatonic_index))
        semitones = high.midi - low.midi
        degree = abs(high.diatonic_index - low.diatonic_index) + 1

        step = (degree - 1) % 7
        ideal = _MAJOR_SCALE_SEMITONES[step] + OCTAVE_SEMITONES * ((degree - 1) // 7)
        offset = semitones - ideal

        if step in _PERFECT_DEGREES:
            if offset == 0:
                quality = IntervalQuality.PERFECT
            elif offset < 0:
                quality = IntervalQuality.DIMINISHED
            else:
                quality = IntervalQuality.AUGMENTED
        elif offset == 0:
            quality = IntervalQuality.MAJOR
        elif offset == -1:
            quality = IntervalQuality.MINOR
        elif offset < -1:
            quality = IntervalQuality.DIMINISHED
        else:
            quality = IntervalQuality.AUGMENTED

        return Interval.find(quality, degree, semitones)

    def __add__(self, other: Interval | int) -> Pitch:
        if isinstance(other, Interval):
            return self._transpose(other, is_higher=True)
        if isinstance(other, int):
            return Pitch.from_midi(self.midi + other)
        return NotImplemented

    def __sub__(self, other: Interval | int | Pitch) -> Pitch | Interval:
        if isinstance(other, Interval):
            return self._transpose(other, is_higher=False)
        if isinstance(other, Pitch):
            return self.interval_to(other)
        if isinstance(other, int):
            return Pitch.from_midi(self.midi - other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.midi == other.midi

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.midi < other.midi

    def __hash__(self) -> int:
        return hash(self.midi)

    def __str__(self) -> str:
        return f"{self.key}{self.octave}"

    def __repr__(self) -> str:
        return f"Pitch({self})"
