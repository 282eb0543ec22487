"""
Core music theory primitives.

Value types that everything else composes on:
- Accidental: Signed semitone modifier (natural, flats, sharps)
- Interval: Quality + degree + semitone distance
- KeyType / Key: Letter name, and letter name plus accidental
- Pitch: Key in an octave, mapped to MIDI and frequency
- ScaleType / Scale: Interval pattern, and pattern on a root key
- ChordType / Chord: Chord quality from parts, and quality on a root key
- ChordProgression: Key-independent sequence of scale degrees
- NoteValue / TimeSignature / Tempo: Rhythm arithmetic
"""

from chuk_music_theory.core.accidental import Accidental, AccidentalKind
from chuk_music_theory.core.chord import (
    Chord,
    ChordEighth,
    ChordExtension,
    ChordExtensionType,
    ChordFifth,
    ChordSeventh,
    ChordSixth,
    ChordSuspended,
    ChordThird,
    ChordType,
    ChordTypeBuilder,
    FillOptions,
    normalize_extensions,
)
from chuk_music_theory.core.interval import Interval, IntervalQuality
from chuk_music_theory.core.key import Key, KeyType
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.progression import (
    ChordProgression,
    ChordProgressionNode,
    CustomChordProgression,
    HarmonicFunction,
)
from chuk_music_theory.core.rhythm import (
    NoteModifier,
    NoteValue,
    NoteValueType,
    Tempo,
    TimeSignature,
)
from chuk_music_theory.core.scale import HarmonicField, Scale, ScaleType

__all__ = [
    # Accidental
    "Accidental",
    "AccidentalKind",
    # Interval
    "Interval",
    "IntervalQuality",
    # Key / Pitch
    "KeyType",
    "Key",
    "Pitch",
    # Scale
    "ScaleType",
    "Scale",
    "HarmonicField",
    # Chord
    "ChordThird",
    "ChordFifth",
    "ChordSixth",
    "ChordSeventh",
    "ChordEighth",
    "ChordSuspended",
    "ChordExtension",
    "ChordExtensionType",
    "ChordType",
    "ChordTypeBuilder",
    "FillOptions",
    "Chord",
    "normalize_extensions",
    # Progression
    "ChordProgressionNode",
    "ChordProgression",
    "CustomChordProgression",
    "HarmonicFunction",
    # Rhythm
    "NoteValueType",
    "NoteModifier",
    "NoteValue",
    "TimeSignature",
    "Tempo",
]
