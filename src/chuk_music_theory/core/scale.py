"""
Scale primitives - ScaleType, HarmonicField, Scale.

A ScaleType is data, not a closed enum: an ordered list of intervals above
the root plus a description. The catalog below covers the common modes and
a wide range of exotic scales; new scale types are just new instances
(see chuk_music_theory.catalog for loading them from YAML).

A Scale places a ScaleType on a root key. Stacking every other scale degree
yields the scale's harmonic field (triads up to thirteenth chords).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from chuk_music_theory.constants import HARMONIC_FIELD_OCTAVES

from .chord import Chord, ChordType
from .interval import Interval
from .key import Key
from .pitch import Pitch


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its intervals above the root.

    Equality compares intervals and description; the hash uses the
    intervals only.

    Examples:
        ScaleType.MAJOR.intervals = (P1, M2, M3, P4, P5, M6, M7)
        ScaleType.LYDIAN.intervals = (P1, M2, M3, A4, P5, M6, M7)

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    description: str

    # Scale catalog (defined after class)
    MAJOR: ClassVar[ScaleType]
    MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    IONIAN: ClassVar[ScaleType]
    IONIAN_SHARP_2: ClassVar[ScaleType]
    IONIAN_AUGMENTED: ClassVar[ScaleType]
    IONIAN_AUGMENTED_SHARP_2: ClassVar[ScaleType]
    AEOLIAN: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    DORIAN_SHARP_4: ClassVar[ScaleType]
    DORIAN_FLAT_2: ClassVar[ScaleType]
    DORIAN_FLAT_5: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN_AUGMENTED: ClassVar[ScaleType]
    MIXOLYDIAN_FLAT_2: ClassVar[ScaleType]
    MIXOLYDIAN_FLAT_6: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    PHRYGIAN_MAJOR: ClassVar[ScaleType]
    PHRYGIAN_FLAT_4: ClassVar[ScaleType]
    ULTRAPHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    LYDIAN_MINOR: ClassVar[ScaleType]
    LYDIAN_DIMINISHED: ClassVar[ScaleType]
    LYDIAN_SHARP_2: ClassVar[ScaleType]
    LYDIAN_SHARP_6: ClassVar[ScaleType]
    LYDIAN_SHARP_2_SHARP_6: ClassVar[ScaleType]
    LYDIAN_FLAT_3: ClassVar[ScaleType]
    LYDIAN_FLAT_6: ClassVar[ScaleType]
    LYDIAN_FLAT_7: ClassVar[ScaleType]
    LYDIAN_AUGMENTED: ClassVar[ScaleType]
    LYDIAN_AUGMENTED_SHARP_2: ClassVar[ScaleType]
    LYDIAN_AUGMENTED_SHARP_6: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]
    LOCRIAN_2: ClassVar[ScaleType]
    LOCRIAN_3: ClassVar[ScaleType]
    LOCRIAN_6: ClassVar[ScaleType]
    MAJOR_LOCRIAN: ClassVar[ScaleType]
    LOCRIAN_DIMINISHED: ClassVar[ScaleType]
    LOCRIAN_DIMINISHED_FLAT_FLAT_3: ClassVar[ScaleType]
    SUPER_LOCRIAN: ClassVar[ScaleType]
    SUPER_LOCRIAN_DIMINISHED_FLAT_FLAT_3: ClassVar[ScaleType]
    CHROMATIC: ClassVar[ScaleType]
    WHOLE: ClassVar[ScaleType]
    ALTERED: ClassVar[ScaleType]
    AUGMENTED: ClassVar[ScaleType]
    DOMINANT_7TH: ClassVar[ScaleType]
    HALF_DIMINISHED: ClassVar[ScaleType]
    WHOLE_DIMINISHED: ClassVar[ScaleType]
    LEADING_WHOLE_TONE: ClassVar[ScaleType]
    DIMINISHED_WHOLE_TONE: ClassVar[ScaleType]
    OVERTONE: ClassVar[ScaleType]
    NINE_TONE: ClassVar[ScaleType]
    DIATONIC: ClassVar[ScaleType]
    ENIGMATIC: ClassVar[ScaleType]
    DOUBLE_HARMONIC: ClassVar[ScaleType]
    AUXILIARY_DIMINISHED: ClassVar[ScaleType]
    AUXILIARY_AUGMENTED: ClassVar[ScaleType]
    AUXILIARY_DIMINISHED_BLUES: ClassVar[ScaleType]
    SIX_TONE_SYMMETRICAL: ClassVar[ScaleType]
    NEOPOLITAN: ClassVar[ScaleType]
    NEOPOLITAN_MAJOR: ClassVar[ScaleType]
    NEOPOLITAN_MINOR: ClassVar[ScaleType]
    PROMETHEUS: ClassVar[ScaleType]
    PROMETHEUS_NEOPOLITAN: ClassVar[ScaleType]
    PELOG: ClassVar[ScaleType]
    PENTATONIC_MAJOR: ClassVar[ScaleType]
    PENTATONIC_MINOR: ClassVar[ScaleType]
    PENTATONIC_BLUES: ClassVar[ScaleType]
    PENTATONIC_NEUTRAL: ClassVar[ScaleType]
    MAJOR_BLUES_HEXATONIC: ClassVar[ScaleType]
    MINOR_BLUES_HEXATONIC: ClassVar[ScaleType]
    JAZZ_MELODIC_MINOR: ClassVar[ScaleType]
    SPANISH_GYPSY: ClassVar[ScaleType]
    EIGHT_TONE_SPANISH: ClassVar[ScaleType]
    HUNGARIAN_MAJOR: ClassVar[ScaleType]
    HUNGARIAN_MINOR: ClassVar[ScaleType]
    ROMANIAN_MINOR: ClassVar[ScaleType]
    FLAMENCO: ClassVar[ScaleType]
    GYPSY: ClassVar[ScaleType]
    MAJOR_BEBOP: ClassVar[ScaleType]
    MINOR_BEBOP: ClassVar[ScaleType]
    BEBOP_DOMINANT: ClassVar[ScaleType]
    CHINESE: ClassVar[ScaleType]
    ORIENTAL: ClassVar[ScaleType]
    HIRAJOSHI: ClassVar[ScaleType]
    ICHIKOSUCHO: ClassVar[ScaleType]
    KUMOI: ClassVar[ScaleType]
    YO: ClassVar[ScaleType]
    IWATO: ClassVar[ScaleType]
    MONGOLIAN: ClassVar[ScaleType]
    HINDU: ClassVar[ScaleType]
    BYZANTINE: ClassVar[ScaleType]
    ARABIAN: ClassVar[ScaleType]
    PERSIAN: ClassVar[ScaleType]
    MOHAMMEDAN: ClassVar[ScaleType]
    MAQAM: ClassVar[ScaleType]
    ALGERIAN: ClassVar[ScaleType]
    BALINESE: ClassVar[ScaleType]
    PURVI_THETA: ClassVar[ScaleType]
    TODI_THETA: ClassVar[ScaleType]
    TRITONE: ClassVar[ScaleType]
    INSEN: ClassVar[ScaleType]
    ISTRIAN: ClassVar[ScaleType]
    PFLUKE: ClassVar[ScaleType]
    UKRAINIAN_DORIAN: ClassVar[ScaleType]
    HAWAIIAN: ClassVar[ScaleType]
    MAN_GONG: ClassVar[ScaleType]
    RITSUSEN: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(self.intervals))

    @classmethod
    def all(cls) -> list[ScaleType]:
        """Every scale type in the catalog."""
        return list(_CATALOG)

    @classmethod
    def named(cls, description: str) -> ScaleType | None:
        """Find a catalog scale by description, case-insensitively."""
        wanted = description.strip().lower()
        for scale_type in _CATALOG:
            if scale_type.description.lower() == wanted:
                return scale_type
        return None

    def __hash__(self) -> int:
        return hash(self.intervals)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        notations = ", ".join(interval.notation for interval in self.intervals)
        return f"ScaleType({self.description!r}, [{notations}])"


# (constant name, description, interval notations) in catalog order
_CATALOG_TABLE: list[tuple[str, str, str]] = [
    ("MAJOR", "Major", "P1 M2 M3 P4 P5 M6 M7"),
    ("MINOR", "Minor", "P1 M2 m3 P4 P5 m6 m7"),
    ("HARMONIC_MINOR", "Harmonic Minor", "P1 M2 m3 P4 P5 m6 M7"),
    ("MELODIC_MINOR", "Melodic Minor", "P1 M2 m3 P4 P5 M6 M7"),
    ("NATURAL_MINOR", "Natural Minor", "P1 M2 m3 P4 P5 m6 m7"),
    ("IONIAN", "Ionian", "P1 M2 M3 P4 P5 M6 M7"),
    ("IONIAN_SHARP_2", "Ionian #2", "P1 m3 M3 P4 P5 M6 M7"),
    ("IONIAN_AUGMENTED", "Ionian Augmented", "P1 M2 M3 P4 m6 M6 M7"),
    ("IONIAN_AUGMENTED_SHARP_2", "Ionian Augmented #2", "P1 m3 M3 P4 m6 M6 M7"),
    ("AEOLIAN", "Aeolian", "P1 M2 m3 P4 P5 m6 m7"),
    ("DORIAN", "Dorian", "P1 M2 m3 P4 P5 M6 m7"),
    ("DORIAN_SHARP_4", "Dorian #4", "P1 M2 m3 d5 P5 M6 m7"),
    ("DORIAN_FLAT_2", "Dorian b2", "P1 m2 m3 P4 P5 M6 m7"),
    ("DORIAN_FLAT_5", "Dorian b5", "P1 M2 m3 P4 d5 M6 m7"),
    ("MIXOLYDIAN", "Mixolydian", "P1 M2 M3 P4 P5 M6 m7"),
    ("MIXOLYDIAN_AUGMENTED", "Mixolydian Augmented", "P1 M2 M3 P4 m6 M6 m7"),
    ("MIXOLYDIAN_FLAT_2", "Mixolydian b2", "P1 m2 M3 P4 P5 M6 m7"),
    ("MIXOLYDIAN_FLAT_6", "Mixolydian b6", "P1 M2 M3 P4 P5 m6 m7"),
    ("PHRYGIAN", "Phrygian", "P1 m2 m3 P4 P5 m6 m7"),
    ("PHRYGIAN_MAJOR", "Phrygian Major", "P1 m2 M3 P4 P5 m6 m7"),
    ("PHRYGIAN_FLAT_4", "Phrygian b4", "P1 m2 m3 M3 P5 m6 m7"),
    ("ULTRAPHRYGIAN", "Ultraphrygian", "P1 m2 m3 M3 P5 m6 M6"),
    ("LYDIAN", "Lydian", "P1 M2 M3 A4 P5 M6 M7"),
    ("LYDIAN_MINOR", "Lydian Minor", "P1 M2 M3 d5 P5 m6 m7"),
    ("LYDIAN_DIMINISHED", "Lydian Diminished", "P1 M2 m3 d5 P5 m6 m7"),
    ("LYDIAN_SHARP_2", "Lydian #2", "P1 m3 M3 d5 P5 M6 M7"),
    ("LYDIAN_SHARP_6", "Lydian #6", "P1 M2 M3 d5 P5 m7 M7"),
    ("LYDIAN_SHARP_2_SHARP_6", "Lydian #2 #6", "P1 m3 M3 d5 P5 m7 M7"),
    ("LYDIAN_FLAT_3", "Lydian b3", "P1 M2 m3 d5 P5 M6 M7"),
    ("LYDIAN_FLAT_6", "Lydian b6", "P1 M2 M3 d5 P5 m6 m7"),
    ("LYDIAN_FLAT_7", "Lydian b7", "P1 M2 M3 d5 P5 M6 m7"),
    ("LYDIAN_AUGMENTED", "Lydian Augmented", "P1 M2 M3 A4 A5 M6 M7"),
    ("LYDIAN_AUGMENTED_SHARP_2", "Lydian Augmented #2", "P1 m3 M3 d5 m6 M6 M7"),
    ("LYDIAN_AUGMENTED_SHARP_6", "Lydian Augmented #6", "P1 M2 M3 d5 m6 m7 M7"),
    ("LOCRIAN", "Locrian", "P1 m2 m3 P4 d5 m6 m7"),
    ("LOCRIAN_2", "Locrian 2", "P1 M2 m3 P4 d5 m6 m7"),
    ("LOCRIAN_3", "Locrian 3", "P1 m2 M3 P4 d5 m6 m7"),
    ("LOCRIAN_6", "Locrian 6", "P1 m2 m3 P4 d5 M6 m7"),
    ("MAJOR_LOCRIAN", "Major Locrian", "P1 M2 M3 P4 d5 m6 m7"),
    ("LOCRIAN_DIMINISHED", "Locrian Diminished", "P1 m2 m3 P4 d5 m6 M6"),
    ("LOCRIAN_DIMINISHED_FLAT_FLAT_3", "Locrian Diminished bb3", "P1 m2 P4 d5 m6 M6"),
    ("SUPER_LOCRIAN", "Super Locrian", "P1 m2 m3 M3 d5 m6 m7"),
    ("SUPER_LOCRIAN_DIMINISHED_FLAT_FLAT_3", "Super Locrian Diminished bb3", "P1 m2 M2 M3 d5 m6 M6"),
    ("CHROMATIC", "Chromatic", "P1 m2 M2 m3 M3 P4 d5 P5 m6 M6 m7 M7"),
    ("WHOLE", "Whole", "P1 M2 M3 d5 m6 m7"),
    ("ALTERED", "Altered", "P1 m2 m3 M3 d5 m6 m7"),
    ("AUGMENTED", "Augmented", "m3 M3 P5 m6 M7"),
    ("DOMINANT_7TH", "Dominant 7th", "P1 M2 M3 P4 P5 M6 m7"),
    ("HALF_DIMINISHED", "Half Diminished", "P1 m2 m3 M3 d5 P5 M6 m7"),
    ("WHOLE_DIMINISHED", "Whole Diminished", "P1 M2 m3 P4 d5 m6 M6 M7"),
    ("LEADING_WHOLE_TONE", "Leading Whole Tone", "P1 M2 M3 d5 m6 M6 m7"),
    ("DIMINISHED_WHOLE_TONE", "Diminished Whole Tone", "P1 m2 m3 M3 d5 m6 m7"),
    ("OVERTONE", "Overtone", "P1 M2 M3 d5 P5 M6 m7"),
    ("NINE_TONE", "Nine Tone", "P1 M2 m3 M3 d5 P5 m6 M6 M7"),
    ("DIATONIC", "Diatonic", "P1 M2 M3 P5 M6"),
    ("ENIGMATIC", "Enigmatic", "P1 m2 M3 A4 A5 A6 M7"),
    ("DOUBLE_HARMONIC", "Double Harmonic", "P1 m2 M3 P4 P5 m6 M7"),
    ("AUXILIARY_DIMINISHED", "Auxiliary Diminished", "P1 M2 m3 P4 d5 m6 M6 M7"),
    ("AUXILIARY_AUGMENTED", "Auxiliary Augmented", "P1 M2 M3 d5 m6 m7"),
    ("AUXILIARY_DIMINISHED_BLUES", "Auxiliary Diminished Blues", "P1 m2 m3 M3 d5 P5 M6 m7"),
    ("SIX_TONE_SYMMETRICAL", "Six Tone Symmetrical", "P1 m2 M3 P4 m6 M6"),
    ("NEOPOLITAN", "Neopolitan", "P1 m2 m3 P4 P5 m6 M7"),
    ("NEOPOLITAN_MAJOR", "Neopolitan Major", "P1 m2 m3 P4 P5 M6 M7"),
    ("NEOPOLITAN_MINOR", "Neopolitan Minor", "P1 m2 m3 P4 P5 m6 m7"),
    ("PROMETHEUS", "Prometheus", "P1 M2 M3 A4 M6 m7"),
    ("PROMETHEUS_NEOPOLITAN", "Prometheus Neopolitan", "P1 m2 M3 d5 M6 m7"),
    ("PELOG", "Pelog", "P1 m2 m3 d5 m7 M7"),
    ("PENTATONIC_MAJOR", "Pentatonic Major", "P1 M2 M3 P5 M6"),
    ("PENTATONIC_MINOR", "Pentatonic Minor", "P1 m3 P4 P5 m7"),
    ("PENTATONIC_BLUES", "Pentatonic Blues", "P1 m3 P4 d5 P5 m7"),
    ("PENTATONIC_NEUTRAL", "Pentatonic Neutral", "P1 M2 P4 P5 m7"),
    ("MAJOR_BLUES_HEXATONIC", "Major Blues Hexatonic", "P1 M2 m3 M3 P5 M6"),
    ("MINOR_BLUES_HEXATONIC", "Minor Blues Hexatonic", "P1 m3 P4 d5 P5 m7"),
    ("JAZZ_MELODIC_MINOR", "Jazz Melodic Minor", "P1 M2 m3 P4 P5 M6 M7"),
    ("SPANISH_GYPSY", "Spanish Gypsy", "P1 m2 M3 P4 P5 m6 m7"),
    ("EIGHT_TONE_SPANISH", "Eight Tone Spanish", "P1 m2 m3 M3 P4 d5 m6 m7"),
    ("HUNGARIAN_MAJOR", "Hungarian Major", "P1 m3 M3 d5 P5 M6 m7"),
    ("HUNGARIAN_MINOR", "Hungarian Minor", "P1 M2 m3 A4 P5 m6 M7"),
    ("ROMANIAN_MINOR", "Romanian Minor", "P1 M2 m3 d5 P5 M6 m7"),
    ("FLAMENCO", "Flamenco", "P1 m2 M3 P4 P5 m6 M7"),
    ("GYPSY", "Gypsy", "P1 M2 m3 A4 P5 m6 m7"),
    ("MAJOR_BEBOP", "Major Bebop", "P1 M2 M3 P4 P5 m6 M6 M7"),
    ("MINOR_BEBOP", "Minor Bebop", "P1 M2 m3 P4 P5 M6 m7 M7"),
    ("BEBOP_DOMINANT", "Bebop Dominant", "P1 M2 M3 P4 P5 M6 m7 M7"),
    ("CHINESE", "Chinese", "P1 M3 d5 P5 M7"),
    ("ORIENTAL", "Oriental", "P1 m2 M3 P4 d5 M6 m7"),
    ("HIRAJOSHI", "Hirajoshi", "P1 M2 m3 P5 m6"),
    ("ICHIKOSUCHO", "Ichikosucho", "P1 M2 M3 P4 d5 P5 M6 M7"),
    ("KUMOI", "Kumoi", "P1 M2 m3 P5 M6"),
    ("YO", "Yo", "P1 m3 P4 P5 m7"),
    ("IWATO", "Iwato", "P1 m2 P4 d5 m7"),
    ("MONGOLIAN", "Mongolian", "P1 M2 M3 P5 M6"),
    ("HINDU", "Hindu", "P1 M2 M3 P4 P5 m6 m7"),
    ("BYZANTINE", "Byzantine", "P1 m2 M3 P4 P5 m6 M7"),
    ("ARABIAN", "Arabian", "P1 M2 M3 P4 d5 m6 m7"),
    ("PERSIAN", "Persian", "P1 m2 M3 P4 d5 m6 M7"),
    ("MOHAMMEDAN", "Mohammedan", "P1 M2 m3 P4 P5 m6 M7"),
    ("MAQAM", "Maqam", "P1 m2 M3 P4 P5 m6 M7"),
    ("ALGERIAN", "Algerian", "P1 M2 m3 A4 P5 m6 M7"),
    ("BALINESE", "Balinese", "P1 m2 m3 P5 m6"),
    ("PURVI_THETA", "Purvi Theta", "P1 m2 M3 d5 P5 m6 M7"),
    ("TODI_THETA", "Todi Theta", "P1 m2 m3 d5 P5 m6 M7"),
    ("TRITONE", "Tritone", "P1 m2 M3 d5 P5 m7"),
    ("INSEN", "Insen", "P1 m2 P4 P5 m7"),
    ("ISTRIAN", "Istrian", "P1 m2 m3 d4 d5 P5"),
    ("PFLUKE", "Pfluke", "P1 M2 m3 A4 P5 M6 M7"),
    ("UKRAINIAN_DORIAN", "Ukrainian Dorian", "P1 M2 m3 A4 P5 M6 m7"),
    ("HAWAIIAN", "Hawaiian", "P1 M2 m3 P4 P5 M6 M7"),
    ("MAN_GONG", "Man Gong", "P1 m3 P4 m6 m7"),
    ("RITSUSEN", "Ritsusen", "P1 M2 P4 P5 M6"),
]


def _define(name: str, description: str, notations: str) -> ScaleType:
    scale_type = ScaleType(
        tuple(Interval.parse(notation) for notation in notations.split()), description
    )
    setattr(ScaleType, name, scale_type)
    return scale_type


_CATALOG: tuple[ScaleType, ...] = tuple(
    _define(name, description, notations) for name, description, notations in _CATALOG_TABLE
)


class HarmonicField(IntEnum):
    """Chord size when stacking thirds on each scale degree (value = note count)."""

    TRIAD = 3
    TETRAD = 4
    NINTH = 5
    ELEVENTH = 6
    THIRTEENTH = 7

    @classmethod
    def all(cls) -> list[HarmonicField]:
        return list(cls)

    @property
    def description(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Scale:
    """
    A scale type on a root key.

    Examples:
        Scale(ScaleType.MAJOR, Key.parse("C")).keys = [C, D, E, F, G, A, B]
        Scale(ScaleType.MINOR, Key.parse("C")).keys = [C, D, Eb, F, G, Ab, Bb]
    """

    type: ScaleType
    key: Key

    @property
    def keys(self) -> list[Key]:
        """Keys of the scale, in interval order."""
        return [pitch.key for pitch in self.pitches(1)]

    def pitches(self, *octaves: int) -> list[Pitch]:
        """
        Pitches of the scale for each root octave.

        Order follows the octaves as given, then the scale's intervals.
        Nothing is re-sorted.

        Args:
            *octaves: Root octaves to build

        Returns:
            Concatenated pitches
        """
        return [
            Pitch(self.key, octave) + interval
            for octave in octaves
            for interval in self.type.intervals
        ]

    def harmonic_field(self, field: HarmonicField, inversion: int = 0) -> list[Chord | None]:
        """
        Chords built by stacking thirds on each scale degree.

        The scale is expanded over five octaves; for degree i the pitches
        at i, i+2, i+4, ... are stacked (every other scale degree) and the
        chord type is recognized from their intervals above the lowest.
        Degrees whose chord would run past the expansion are dropped.

        Args:
            field: Chord size (triad, tetrad, ...)
            inversion: Inversion applied to every chord

        Returns:
            One entry per scale degree; None where no chord type is recognized

        Raises:
            ValueError: If a chord in the field has no such inversion
        """
        pitches = self.pitches(*HARMONIC_FIELD_OCTAVES)
        degrees = len(self.type.intervals)
        chords: list[Chord | None] = []
        for degree in range(degrees):
            indices = [degree + 2 * step for step in range(field.value)]
            if indices[-1] >= len(pitches):
                break
            stack = [pitches[index] for index in indices]
            root = stack[0]
            chord_type = ChordType.from_intervals([pitch - root for pitch in stack])
            if chord_type is None:
                chords.append(None)
            else:
                chords.append(Chord(chord_type, root.key, inversion))
        return chords

    def __str__(self) -> str:
        return f"{self.key} {self.type}"
