"""
Chord primitives - chord parts, ChordType, ChordTypeBuilder, Chord.

A chord type is composed of optional parts (third, fifth, sixth, seventh,
eighth, suspension, extensions), each of which maps to one interval above
the root. A Chord places a chord type on a root key, optionally inverted.

Chord types can also be recognized from an arbitrary interval list, which
is how scale harmonization turns stacked thirds into named chords.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag, IntEnum, auto
from itertools import combinations, product
from typing import TYPE_CHECKING, Any, ClassVar

from chuk_music_theory.constants import (
    CHORD_EQUALITY_OCTAVES,
    CHORD_REFERENCE_OCTAVE,
    ErrorMessages,
)

from .accidental import Accidental
from .interval import Interval
from .key import Key
from .pitch import Pitch

if TYPE_CHECKING:
    from .scale import Scale

_ROMAN_NUMERALS: list[str] = ["I", "II", "III", "IV", "V", "VI", "VII"]


class ChordPart:
    """Behaviour shared by the chord part enums."""

    @property
    def interval(self) -> Interval:
        """Interval above the root."""
        return _PART_TABLE[self][0]

    @property
    def notation(self) -> str:
        return _PART_TABLE[self][1]

    @property
    def description(self) -> str:
        return _PART_TABLE[self][2]

    @classmethod
    def from_interval(cls, interval: Interval) -> Any:
        """Recognize the part by semitones, or None."""
        for member in cls:  # type: ignore[attr-defined]
            if member.interval == interval:
                return member
        return None

    @classmethod
    def all(cls) -> list[Any]:
        return list(cls)  # type: ignore[call-overload]


class ChordThird(ChordPart, Enum):
    """Third of the chord."""

    MAJOR = "major"
    MINOR = "minor"


class ChordFifth(ChordPart, Enum):
    """Fifth of the chord."""

    PERFECT = "perfect"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"


class ChordSixth(ChordPart, Enum):
    """Added major sixth."""

    SIXTH = "sixth"


class ChordSeventh(ChordPart, Enum):
    """Seventh of the chord."""

    MAJOR = "major"
    DOMINANT = "dominant"
    DIMINISHED = "diminished"


class ChordEighth(ChordPart, Enum):
    """Octave above the root (power chords and octave dyads)."""

    PERFECT = "perfect"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"

    @classmethod
    def from_interval(cls, interval: Interval) -> ChordEighth | None:
        """
        Recognize an octave by semitones and degree.

        Without the degree check a minor ninth (13 semitones) would be
        taken for an augmented octave and lost from the chord.
        """
        for member in cls:
            if member.interval == interval and member.interval.degree == interval.degree:
                return member
        return None


class ChordSuspended(ChordPart, Enum):
    """Suspended second or fourth replacing the third."""

    SUS2 = "sus2"
    SUS4 = "sus4"


_PART_TABLE: dict[Any, tuple[Interval, str, str]] = {
    ChordThird.MAJOR: (Interval.M3, "", "Major"),
    ChordThird.MINOR: (Interval.m3, "m", "Minor"),
    ChordFifth.PERFECT: (Interval.P5, "", ""),
    ChordFifth.DIMINISHED: (Interval.d5, "♭5", "Diminished"),
    ChordFifth.AUGMENTED: (Interval.A5, "♯5", "Augmented"),
    ChordSixth.SIXTH: (Interval.M6, "6", "Sixth"),
    ChordSeventh.MAJOR: (Interval.M7, "maj7", "Major 7th"),
    ChordSeventh.DOMINANT: (Interval.m7, "7", "Dominant 7th"),
    ChordSeventh.DIMINISHED: (Interval.d7, "°7", "Diminished 7th"),
    ChordEighth.PERFECT: (Interval.P8, "8", "Octave"),
    ChordEighth.DIMINISHED: (Interval.d8, "♭8", "Diminished Octave"),
    ChordEighth.AUGMENTED: (Interval.A8, "♯8", "Augmented Octave"),
    ChordSuspended.SUS2: (Interval.M2, "(sus2)", "Suspended 2nd"),
    ChordSuspended.SUS4: (Interval.P4, "(sus4)", "Suspended 4th"),
}


class ChordExtensionType(IntEnum):
    """Extension degree above the octave."""

    OCTAVE = 8
    NINTH = 9
    ELEVENTH = 11
    THIRTEENTH = 13

    @property
    def description(self) -> str:
        return f"{self.value}th"


# (type, accidental value) -> interval; flat/sharp alter the natural by a semitone
_EXTENSION_INTERVALS: dict[tuple[ChordExtensionType, int], Interval] = {
    (ChordExtensionType.OCTAVE, 0): Interval.P8,
    (ChordExtensionType.OCTAVE, -1): Interval.d8,
    (ChordExtensionType.OCTAVE, 1): Interval.A8,
    (ChordExtensionType.NINTH, 0): Interval.M9,
    (ChordExtensionType.NINTH, -1): Interval.m9,
    (ChordExtensionType.NINTH, 1): Interval.A9,
    (ChordExtensionType.ELEVENTH, 0): Interval.P11,
    (ChordExtensionType.ELEVENTH, -1): Interval.d11,
    (ChordExtensionType.ELEVENTH, 1): Interval.A11,
    (ChordExtensionType.THIRTEENTH, 0): Interval.M13,
    (ChordExtensionType.THIRTEENTH, -1): Interval.m13,
    (ChordExtensionType.THIRTEENTH, 1): Interval.A13,
}

# Recognition order; ninth wins over octave for 13 semitones
_EXTENSION_RECOGNITION_ORDER: list[ChordExtensionType] = [
    ChordExtensionType.NINTH,
    ChordExtensionType.ELEVENTH,
    ChordExtensionType.THIRTEENTH,
    ChordExtensionType.OCTAVE,
]


@dataclass(frozen=True)
class ChordExtension:
    """
    An extension (9th, 11th, 13th or octave), optionally flat or sharp.

    is_added marks an "add" chord (an extension without a seventh). It is
    set during chord type normalization and does not take part in equality.
    """

    type: ChordExtensionType
    accidental: Accidental = Accidental.NATURAL
    is_added: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if abs(self.accidental.value) > 1:
            raise ValueError(
                ErrorMessages.INVALID_EXTENSION_ACCIDENTAL.format(accidental=repr(self.accidental))
            )

    @property
    def interval(self) -> Interval:
        return _EXTENSION_INTERVALS[(self.type, self.accidental.value)]

    @property
    def notation(self) -> str:
        """E.g. '9', '♭9', '♯11'."""
        return f"{self.accidental.description}{self.type.value}"

    @property
    def description(self) -> str:
        prefix = "Added " if self.is_added else ""
        return f"{prefix}{self.accidental.description}{self.type.description}"

    @classmethod
    def from_interval(cls, interval: Interval) -> ChordExtension | None:
        """Recognize an extension by semitones (natural, or one semitone flat or sharp)."""
        for extension_type in _EXTENSION_RECOGNITION_ORDER:
            for value in (0, -1, 1):
                if _EXTENSION_INTERVALS[(extension_type, value)] == interval:
                    return cls(extension_type, Accidental.from_value(value))
        return None

    @classmethod
    def all(cls) -> list[ChordExtension]:
        """Ninth, eleventh and thirteenth, each natural, flat and sharp."""
        return [
            cls(extension_type, accidental)
            for extension_type in (
                ChordExtensionType.NINTH,
                ChordExtensionType.ELEVENTH,
                ChordExtensionType.THIRTEENTH,
            )
            for accidental in (Accidental.NATURAL, Accidental.FLAT, Accidental.SHARP)
        ]


def normalize_extensions(
    seventh: ChordSeventh | None, extensions: tuple[ChordExtension, ...]
) -> tuple[ChordExtension, ...]:
    """
    Fill in the extensions implied by a single extension.

    With exactly one extension, it is an "add" chord when there is no
    seventh. A non-added 11th implies a 9th; a non-added 13th implies a 9th
    and an 11th. Any other extension list is returned unchanged.
    """
    if len(extensions) != 1:
        return extensions
    single = replace(extensions[0], is_added=seventh is None)
    result = [single]
    if not single.is_added:
        if single.type == ChordExtensionType.ELEVENTH:
            result.append(ChordExtension(ChordExtensionType.NINTH))
        elif single.type == ChordExtensionType.THIRTEENTH:
            result.append(ChordExtension(ChordExtensionType.NINTH))
            result.append(ChordExtension(ChordExtensionType.ELEVENTH))
    return tuple(result)


@dataclass(frozen=True, eq=False)
class ChordType:
    """
    A chord quality composed of parts.

    Equality is by the resulting interval list, so chord types built
    from parts and recognized from intervals compare equal.

    Examples:
        ChordType(ChordThird.MAJOR) = major triad
        ChordType(ChordThird.MINOR, seventh=ChordSeventh.DOMINANT) = m7
        ChordType(None, ChordFifth.PERFECT) = power chord (5)
    """

    third: ChordThird | None
    fifth: ChordFifth | None = ChordFifth.PERFECT
    sixth: ChordSixth | None = None
    seventh: ChordSeventh | None = None
    eighth: ChordEighth | None = None
    suspended: ChordSuspended | None = None
    extensions: tuple[ChordExtension, ...] = ()

    # Common chord types (defined after class)
    MAJOR: ClassVar[ChordType]
    MINOR: ClassVar[ChordType]
    DIMINISHED: ClassVar[ChordType]
    AUGMENTED: ClassVar[ChordType]
    MAJOR_7: ClassVar[ChordType]
    MINOR_7: ClassVar[ChordType]
    DOMINANT_7: ClassVar[ChordType]
    HALF_DIMINISHED_7: ClassVar[ChordType]
    DIMINISHED_7: ClassVar[ChordType]
    SUS2: ClassVar[ChordType]
    SUS4: ClassVar[ChordType]
    POWER: ClassVar[ChordType]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "extensions", normalize_extensions(self.seventh, tuple(self.extensions))
        )

    @classmethod
    def from_intervals(cls, intervals: list[Interval] | tuple[Interval, ...]) -> ChordType | None:
        """
        Recognize a chord type from intervals above the root.

        Each interval is tried as third, fifth, sixth, seventh, eighth,
        suspension, then extension; the first match wins and intervals
        that match nothing (including the unison) are dropped.

        Returns:
            The chord type, or None if no interval was recognized
        """
        parts: dict[str, Any] = {}
        extensions: list[ChordExtension] = []
        recognizers: list[tuple[str, type[ChordPart]]] = [
            ("third", ChordThird),
            ("fifth", ChordFifth),
            ("sixth", ChordSixth),
            ("seventh", ChordSeventh),
            ("eighth", ChordEighth),
            ("suspended", ChordSuspended),
        ]
        for interval in intervals:
            for name, part_type in recognizers:
                part = part_type.from_interval(interval)
                if part is not None:
                    parts[name] = part
                    break
            else:
                extension = ChordExtension.from_interval(interval)
                if extension is not None:
                    extensions.append(extension)

        if not parts and not extensions:
            return None
        return cls(
            third=parts.get("third"),
            fifth=parts.get("fifth"),
            sixth=parts.get("sixth"),
            seventh=parts.get("seventh"),
            eighth=parts.get("eighth"),
            suspended=parts.get("suspended"),
            extensions=tuple(extensions),
        )

    @property
    def sorted_extensions(self) -> list[ChordExtension]:
        return sorted(self.extensions, key=lambda extension: extension.type.value)

    @property
    def intervals(self) -> list[Interval]:
        """
        Intervals above the root: unison, third, suspension, fifth, sixth,
        seventh, then extensions by degree. The eighth is not included.
        """
        parts = [self.third, self.suspended, self.fifth, self.sixth, self.seventh]
        result = [Interval.P1]
        result.extend(part.interval for part in parts if part is not None)
        result.extend(extension.interval for extension in self.sorted_extensions)
        return result

    @property
    def notation(self) -> str:
        """Chord symbol suffix, e.g. 'm7', '7(13)', 'm7(♭5)', '5', '8'."""
        seventh_notation = self.seventh.notation if self.seventh else ""
        sixth_notation = ""
        if self.sixth:
            sixth_notation = self.sixth.notation + ("/" if self.seventh else "")
        suspended_notation = self.suspended.notation if self.suspended else ""

        extensions = self.sorted_extensions
        extension_notation = ""
        if extensions:
            if all(extension.accidental.is_natural for extension in extensions[:-1]):
                extension_notation = f"({extensions[-1].notation})"
            else:
                extension_notation = f"({'/'.join(e.notation for e in extensions)})"

        eighth_notation = ""
        if self.third and self.fifth:
            third_notation = self.third.notation
            fifth_notation = self.fifth.notation
        elif self.fifth:
            third_notation = ""
            fifth_notation = "5" if self.fifth == ChordFifth.PERFECT else self.fifth.notation
        elif self.third:
            third_notation = self.third.notation
            fifth_notation = "(no 5)"
        else:
            eighth_notation = "8"
            third_notation = ""
            fifth_notation = ""

        if self.seventh:
            # Major seventh is implied by the extension
            if self.seventh == ChordSeventh.MAJOR and extensions:
                seventh_notation = ""
                sixth_notation = self.sixth.notation if self.sixth else ""
            # Altered fifth goes after the seventh
            if self.fifth in (ChordFifth.AUGMENTED, ChordFifth.DIMINISHED):
                return (
                    f"{eighth_notation}{third_notation}{sixth_notation}{seventh_notation}"
                    f"({fifth_notation}){suspended_notation}{extension_notation}"
                )

        return (
            f"{eighth_notation}{third_notation}{fifth_notation}{sixth_notation}"
            f"{seventh_notation}{suspended_notation}{extension_notation}"
        )

    @property
    def description(self) -> str:
        """Long name, e.g. 'Minor Dominant 7th', '(no 3)', 'Octave'."""
        eighth_description = "Octave" if self.third is None and self.fifth is None else None
        third_description: str | None
        fifth_description: str | None
        if self.third and self.fifth:
            third_description = self.third.description
            fifth_description = self.fifth.description
        elif self.fifth:
            third_description = "(no 3)"
            fifth_description = self.fifth.description
        elif self.third:
            third_description = self.third.description
            fifth_description = "(no 5)"
        elif self.eighth:
            third_description = None
            fifth_description = None
        else:
            third_description = "(no 3)"
            fifth_description = "(no 5)"

        parts = [
            eighth_description,
            third_description,
            fifth_description,
            self.sixth.description if self.sixth else None,
            self.seventh.description if self.seventh else None,
            self.suspended.description if self.suspended else None,
        ]
        parts.extend(extension.description for extension in self.sorted_extensions)
        return " ".join(part for part in parts if part)

    def has_parts(self, *parts: ChordPart | ChordExtension) -> bool:
        """Whether every given part's interval is in this chord type."""
        intervals = self.intervals
        return all(part.interval in intervals for part in parts)

    @classmethod
    def all(cls) -> list[ChordType]:
        """
        Every combination of third, fifth, optional sixth, optional seventh,
        optional suspension and one to three distinct extensions.
        """
        extension_sets = [
            combo
            for size in (1, 2, 3)
            for combo in combinations(ChordExtension.all(), size)
        ]
        return [
            cls(
                third=third,
                fifth=fifth,
                sixth=sixth,
                seventh=seventh,
                suspended=suspended,
                extensions=extensions,
            )
            for third, fifth, sixth, seventh, suspended, extensions in product(
                list(ChordThird),
                list(ChordFifth),
                [ChordSixth.SIXTH, None],
                [*ChordSeventh, None],
                [*ChordSuspended, None],
                extension_sets,
            )
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChordType):
            return NotImplemented
        return self.intervals == other.intervals

    def __hash__(self) -> int:
        return hash(tuple(self.intervals))

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"ChordType({self.notation!r})"


ChordType.MAJOR = ChordType(ChordThird.MAJOR)
ChordType.MINOR = ChordType(ChordThird.MINOR)
ChordType.DIMINISHED = ChordType(ChordThird.MINOR, ChordFifth.DIMINISHED)
ChordType.AUGMENTED = ChordType(ChordThird.MAJOR, ChordFifth.AUGMENTED)
ChordType.MAJOR_7 = ChordType(ChordThird.MAJOR, seventh=ChordSeventh.MAJOR)
ChordType.MINOR_7 = ChordType(ChordThird.MINOR, seventh=ChordSeventh.DOMINANT)
ChordType.DOMINANT_7 = ChordType(ChordThird.MAJOR, seventh=ChordSeventh.DOMINANT)
ChordType.HALF_DIMINISHED_7 = ChordType(
    ChordThird.MINOR, ChordFifth.DIMINISHED, seventh=ChordSeventh.DOMINANT
)
ChordType.DIMINISHED_7 = ChordType(
    ChordThird.MINOR, ChordFifth.DIMINISHED, seventh=ChordSeventh.DIMINISHED
)
ChordType.SUS2 = ChordType(None, suspended=ChordSuspended.SUS2)
ChordType.SUS4 = ChordType(None, suspended=ChordSuspended.SUS4)
ChordType.POWER = ChordType(None)


class FillOptions(Flag):
    """Parts ChordTypeBuilder.fill() may add."""

    SEVENTH = auto()
    NINTH = auto()
    ELEVENTH = auto()
    THIRTEENTH = auto()


class ChordTypeBuilder:
    """
    Mutable builder for ChordType.

    Starts as a major triad. Extensions are collected in order and
    normalized when build() creates the chord type.

    Example:
        builder = ChordTypeBuilder()
        builder.third = ChordThird.MINOR
        builder.fill(FillOptions.SEVENTH)
        builder.build()  # m7
    """

    def __init__(self) -> None:
        self.third: ChordThird | None = ChordThird.MAJOR
        self.fifth: ChordFifth | None = ChordFifth.PERFECT
        self.sixth: ChordSixth | None = None
        self.seventh: ChordSeventh | None = None
        self.eighth: ChordEighth | None = None
        self.suspended: ChordSuspended | None = None
        self.extensions: list[ChordExtension] = []

    @classmethod
    def from_chord_type(cls, chord_type: ChordType) -> ChordTypeBuilder:
        """Start from an existing chord type's parts."""
        builder = cls()
        builder.third = chord_type.third
        builder.fifth = chord_type.fifth
        builder.sixth = chord_type.sixth
        builder.seventh = chord_type.seventh
        builder.eighth = chord_type.eighth
        builder.suspended = chord_type.suspended
        builder.extensions = list(chord_type.extensions)
        return builder

    def add_extension(self, extension: ChordExtension) -> ChordTypeBuilder:
        self.extensions.append(extension)
        return self

    def remove_extension(self, extension: ChordExtension) -> ChordTypeBuilder:
        """Remove the first matching extension, if present."""
        if extension in self.extensions:
            self.extensions.remove(extension)
        return self

    def remove_all_extensions(self, extension_type: ChordExtensionType) -> ChordTypeBuilder:
        self.extensions = [e for e in self.extensions if e.type != extension_type]
        return self

    def add_extension_if_absent(self, extension: ChordExtension) -> ChordTypeBuilder:
        """Add the extension unless one of the same type is already present."""
        if not any(e.type == extension.type for e in self.extensions):
            self.add_extension(extension)
        return self

    def fill(self, options: FillOptions) -> ChordTypeBuilder:
        """
        Fill in the highest requested part if it is missing.

        Only one part is filled, with priority thirteenth, eleventh,
        ninth, then a dominant seventh.
        """
        if FillOptions.THIRTEENTH in options:
            self.add_extension_if_absent(ChordExtension(ChordExtensionType.THIRTEENTH))
        elif FillOptions.ELEVENTH in options:
            self.add_extension_if_absent(ChordExtension(ChordExtensionType.ELEVENTH))
        elif FillOptions.NINTH in options:
            self.add_extension_if_absent(ChordExtension(ChordExtensionType.NINTH))
        elif FillOptions.SEVENTH in options and self.seventh is None:
            self.seventh = ChordSeventh.DOMINANT
        return self

    def build(self) -> ChordType:
        return ChordType(
            third=self.third,
            fifth=self.fifth,
            sixth=self.sixth,
            seventh=self.seventh,
            eighth=self.eighth,
            suspended=self.suspended,
            extensions=tuple(self.extensions),
        )


@dataclass(frozen=True, eq=False)
class Chord:
    """
    A chord type on a root key, optionally inverted.

    Equality (==) compares sounding pitches: the chord at octave 4 must
    match the other chord at octave 3, 4 or 5. C/G therefore equals
    G sus4 add6 without a fifth, but not C/E.
    strict_equals() compares key, type and inversion.
    similar_to() compares chord type intervals only.
    """

    type: ChordType
    key: Key
    inversion: int = 0

    def __post_init__(self) -> None:
        if self.inversion < 0:
            raise ValueError(ErrorMessages.NEGATIVE_INVERSION.format(inversion=self.inversion))
        count = len(self.type.intervals)
        if self.inversion >= count:
            raise ValueError(
                ErrorMessages.INVALID_INVERSION.format(
                    chord=f"{self.key}{self.type.notation}",
                    inversion=self.inversion,
                    max_inversion=count - 1,
                )
            )

    def pitches(self, octave: int) -> list[Pitch]:
        """
        Pitches with the root in the given octave, in voicing order.

        The interval list is rotated left by the inversion; notes rotated
        from the front to the back are raised an octave.
        """
        intervals = self.type.intervals
        count = len(intervals)
        rotated = intervals[self.inversion :] + intervals[: self.inversion]
        root = Pitch(self.key, octave)
        result = []
        for index, interval in enumerate(rotated):
            pitch = root + interval
            if index >= count - self.inversion:
                pitch = Pitch(pitch.key, pitch.octave + 1)
            result.append(pitch)
        return result

    def pitches_in(self, octaves: list[int] | tuple[int, ...]) -> list[Pitch]:
        """Pitches over several root octaves, sorted by MIDI number."""
        return sorted(pitch for octave in octaves for pitch in self.pitches(octave))

    @property
    def keys(self) -> list[Key]:
        """Keys of the chord in voicing order."""
        return [pitch.key for pitch in self.pitches(1)]

    def has_inversion(self, inversion: int) -> bool:
        return 0 <= inversion < len(self.keys)

    def with_inversion(self, inversion: int) -> Chord:
        """
        The same chord at another inversion.

        Raises:
            ValueError: If the chord has no such inversion
        """
        if not self.has_inversion(inversion):
            raise ValueError(
                ErrorMessages.INVALID_INVERSION.format(
                    chord=self.notation, inversion=inversion, max_inversion=len(self.keys) - 1
                )
            )
        return replace(self, inversion=inversion)

    @property
    def inversions(self) -> list[Chord]:
        """The chord at every possible inversion, root position first."""
        return [replace(self, inversion=index) for index in range(len(self.keys))]

    @property
    def notation(self) -> str:
        """Chord symbol, e.g. 'Cm7', 'G7(13)', 'C/E'."""
        keys = self.keys
        bass = f"/{keys[0]}" if 0 < self.inversion < len(keys) else ""
        return f"{self.key}{self.type.notation}{bass}"

    @property
    def description(self) -> str:
        inversion = f" {self.inversion}. Inversion" if self.inversion > 0 else ""
        return f"{self.key} {self.type.description}{inversion}"

    def roman_numeral(self, scale: Scale) -> str | None:
        """
        Roman numeral of the chord within a scale.

        Uppercase for a major (or no) third, lowercase for a minor third,
        followed by 6, + (augmented), ° (diminished), 7, the highest
        extension degree and /inversion where present.

        Returns:
            The numeral, or None if the root is not one of the first seven
            scale keys
        """
        index = next((i for i, key in enumerate(scale.keys) if key == self.key), None)
        if index is None or index >= len(_ROMAN_NUMERALS):
            return None

        numeral = _ROMAN_NUMERALS[index]
        if self.type.third == ChordThird.MINOR:
            numeral = numeral.lower()
        if self.type.sixth:
            numeral += "6"
        if self.type.fifth == ChordFifth.AUGMENTED:
            numeral += "+"
        elif self.type.fifth == ChordFifth.DIMINISHED:
            numeral += "°"
        if self.type.seventh and not self.type.extensions:
            numeral += "7"
        if self.type.extensions:
            numeral += str(self.type.sorted_extensions[-1].type.value)
        if self.inversion > 0:
            numeral += f"/{self.inversion}"
        return numeral

    def strict_equals(self, other: Chord) -> bool:
        return (
            self.key.strict_equals(other.key)
            and self.type == other.type
            and self.inversion == other.inversion
        )

    def similar_to(self, other: Chord) -> bool:
        """Same chord type intervals, ignoring root and voicing."""
        return self.type.intervals == other.type.intervals

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        reference = {pitch.midi for pitch in self.pitches(CHORD_REFERENCE_OCTAVE)}
        return any(
            reference == {pitch.midi for pitch in other.pitches(octave)}
            for octave in CHORD_EQUALITY_OCTAVES
        )

    def __hash__(self) -> int:
        return hash(frozenset(pitch.midi % 12 for pitch in self.pitches(CHORD_REFERENCE_OCTAVE)))

    def __str__(self) -> str:
        return self.notation

    def __repr__(self) -> str:
        return f"Chord({self.notation})"
