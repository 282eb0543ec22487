"""
Interval primitive - quality, degree and semitone distance.

Diatonic interval naming is irregular, so the named intervals are a
hand-authored table rather than a formula. An interval carries both its
letter-step degree (a third spans three letters) and its semitone size
(a major third is four semitones); pitch arithmetic needs both.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import ClassVar

from chuk_music_theory.constants import ErrorMessages


class IntervalQuality(str, Enum):
    """Quality of an interval."""

    DIMINISHED = "diminished"
    PERFECT = "perfect"
    MINOR = "minor"
    MAJOR = "major"
    AUGMENTED = "augmented"

    @property
    def notation(self) -> str:
        """Short notation used in interval names (d, P, m, M, A)."""
        return _QUALITY_NOTATION[self]

    @property
    def description(self) -> str:
        return self.value.capitalize()


_QUALITY_NOTATION: dict[IntervalQuality, str] = {
    IntervalQuality.DIMINISHED: "d",
    IntervalQuality.PERFECT: "P",
    IntervalQuality.MINOR: "m",
    IntervalQuality.MAJOR: "M",
    IntervalQuality.AUGMENTED: "A",
}

_DEGREE_NAMES: dict[int, str] = {
    1: "Unison",
    2: "Second",
    3: "Third",
    4: "Fourth",
    5: "Fifth",
    6: "Sixth",
    7: "Seventh",
    8: "Octave",
    9: "Ninth",
    10: "Tenth",
    11: "Eleventh",
    12: "Twelfth",
    13: "Thirteenth",
    14: "Fourteenth",
    15: "Fifteenth",
}


@total_ordering
@dataclass(frozen=True, eq=False)
class Interval:
    """
    Distance between two pitches as quality + degree + semitones.

    Loose equality (==) compares semitones only, so M3 == d4.
    strict_equals() compares all three fields.
    Ordering is by semitones.

    Immutable and hashable.
    """

    quality: IntervalQuality
    degree: int
    semitones: int

    # Perfect
    P1: ClassVar[Interval]
    P4: ClassVar[Interval]
    P5: ClassVar[Interval]
    P8: ClassVar[Interval]
    P11: ClassVar[Interval]
    P12: ClassVar[Interval]
    P15: ClassVar[Interval]

    # Minor
    m2: ClassVar[Interval]
    m3: ClassVar[Interval]
    m6: ClassVar[Interval]
    m7: ClassVar[Interval]
    m9: ClassVar[Interval]
    m10: ClassVar[Interval]
    m13: ClassVar[Interval]
    m14: ClassVar[Interval]

    # Major
    M2: ClassVar[Interval]
    M3: ClassVar[Interval]
    M6: ClassVar[Interval]
    M7: ClassVar[Interval]
    M9: ClassVar[Interval]
    M10: ClassVar[Interval]
    M13: ClassVar[Interval]
    M14: ClassVar[Interval]

    # Diminished
    d1: ClassVar[Interval]
    d2: ClassVar[Interval]
    d3: ClassVar[Interval]
    d4: ClassVar[Interval]
    d5: ClassVar[Interval]
    d6: ClassVar[Interval]
    d7: ClassVar[Interval]
    d8: ClassVar[Interval]
    d9: ClassVar[Interval]
    d10: ClassVar[Interval]
    d11: ClassVar[Interval]
    d12: ClassVar[Interval]
    d13: ClassVar[Interval]
    d14: ClassVar[Interval]
    d15: ClassVar[Interval]

    # Augmented
    A1: ClassVar[Interval]
    A2: ClassVar[Interval]
    A3: ClassVar[Interval]
    A4: ClassVar[Interval]
    A5: ClassVar[Interval]
    A6: ClassVar[Interval]
    A7: ClassVar[Interval]
    A8: ClassVar[Interval]
    A9: ClassVar[Interval]
    A10: ClassVar[Interval]
    A11: ClassVar[Interval]
    A12: ClassVar[Interval]
    A13: ClassVar[Interval]
    A14: ClassVar[Interval]
    A15: ClassVar[Interval]

    @property
    def notation(self) -> str:
        """Short name, e.g. 'M3', 'P5', 'd7'."""
        return f"{self.quality.notation}{self.degree}"

    @property
    def description(self) -> str:
        """Long name, e.g. 'Major Third'."""
        degree_name = _DEGREE_NAMES.get(self.degree, f"{self.degree}th")
        return f"{self.quality.description} {degree_name}"

    def strict_equals(self, other: Interval) -> bool:
        """Compare quality, degree and semitones."""
        return (
            self.quality == other.quality
            and self.degree == other.degree
            and self.semitones == other.semitones
        )

    @classmethod
    def all(cls) -> list[Interval]:
        """All named intervals in catalog order."""
        return list(_CATALOG)

    @classmethod
    def parse(cls, notation: str) -> Interval:
        """
        Look up a named interval by its notation.

        Args:
            notation: Interval name like 'P5', 'm3' or 'A4'

        Returns:
            The catalog interval

        Raises:
            ValueError: If the notation is not a named interval
        """
        interval = _BY_NOTATION.get(notation.strip())
        if interval is None:
            raise ValueError(ErrorMessages.INVALID_INTERVAL.format(text=notation))
        return interval

    @classmethod
    def find(
        cls, quality: IntervalQuality, degree: int, semitones: int
    ) -> Interval:
        """Return the catalog interval for these fields, or a new one if unnamed."""
        for interval in _CATALOG:
            if (
                interval.quality == quality
                and interval.degree == degree
                and interval.semitones == semitones
            ):
                return interval
        return cls(quality, degree, semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.semitones == other.semitones

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.semitones < other.semitones

    def __hash__(self) -> int:
        return hash(self.semitones)

    def __str__(self) -> str:
        return self.notation

    def __repr__(self) -> str:
        if _BY_NOTATION.get(self.notation) is self:
            return f"Interval.{self.notation}"
        return f"Interval({self.quality.value!r}, {self.degree}, {self.semitones})"


def _define(quality: IntervalQuality, degree: int, semitones: int) -> Interval:
    interval = Interval(quality, degree, semitones)
    setattr(Interval, interval.notation, interval)
    return interval


_P = IntervalQuality.PERFECT
_m = IntervalQuality.MINOR
_M = IntervalQuality.MAJOR
_d = IntervalQuality.DIMINISHED
_A = IntervalQuality.AUGMENTED

# (quality, degree, semitones) - catalog order
_CATALOG: tuple[Interval, ...] = tuple(
    _define(quality, degree, semitones)
    for quality, degree, semitones in [
        (_P, 1, 0),
        (_P, 4, 5),
        (_P, 5, 7),
        (_P, 8, 12),
        (_P, 11, 17),
        (_P, 12, 19),
        (_P, 15, 24),
        (_m, 2, 1),
        (_m, 3, 3),
        (_m, 6, 8),
        (_m, 7, 10),
        (_m, 9, 13),
        (_m, 10, 15),
        (_m, 13, 20),
        (_m, 14, 22),
        (_M, 2, 2),
        (_M, 3, 4),
        (_M, 6, 9),
        (_M, 7, 11),
        (_M, 9, 14),
        (_M, 10, 16),
        (_M, 13, 21),
        (_M, 14, 23),
        (_d, 1, -1),
        (_d, 2, 0),
        (_d, 3, 2),
        (_d, 4, 4),
        (_d, 5, 6),
        (_d, 6, 7),
        (_d, 7, 9),
        (_d, 8, 11),
        (_d, 9, 12),
        (_d, 10, 14),
        (_d, 11, 16),
        (_d, 12, 18),
        (_d, 13, 19),
        (_d, 14, 21),
        (_d, 15, 23),
        (_A, 1, 1),
        (_A, 2, 3),
        (_A, 3, 5),
        (_A, 4, 6),
        (_A, 5, 8),
        (_A, 6, 10),
        (_A, 7, 12),
        (_A, 8, 13),
        (_A, 9, 15),
        (_A, 10, 17),
        (_A, 11, 18),
        (_A, 12, 20),
        (_A, 13, 22),
        (_A, 14, 24),
        (_A, 15, 25),
    ]
)

_BY_NOTATION: dict[str, Interval] = {interval.notation: interval for interval in _CATALOG}
