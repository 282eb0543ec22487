"""
Constants for the music theory system.

No magic numbers - tuning, search windows and message templates live here.
"""

from typing import Literal

# Equal temperament reference (A4 = 440 Hz, MIDI note 69)
A4_FREQUENCY: float = 440.0
A4_MIDI: int = 69

# Semitones per octave
OCTAVE_SEMITONES: int = 12

# Octaves searched by Pitch.nearest()
NEAREST_PITCH_OCTAVES: range = range(1, 8)

# Octave window a scale is expanded over when stacking thirds
HARMONIC_FIELD_OCTAVES: tuple[int, ...] = (0, 1, 2, 3, 4)

# Chord equality compares absolute pitch sets at the reference octave
# against this octave window on the other side
CHORD_REFERENCE_OCTAVE: int = 4
CHORD_EQUALITY_OCTAVES: tuple[int, ...] = (3, 4, 5)

# Rhythm defaults
DEFAULT_BPM: float = 120.0
DEFAULT_SAMPLE_RATE: float = 44100.0
DEFAULT_BEATS: int = 4

# Schema versions for serialized documents
SchemaVersion = Literal["catalog/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_ACCIDENTAL_AMOUNT = "Accidental amount must be positive for {kind}, got {amount}."
    INVALID_KEY = "Invalid key: '{text}'. Expected a letter A-G followed by #, b, ♯ or ♭."
    INVALID_PITCH = "Invalid pitch: '{text}'. Expected format like 'C4', 'f#-1' or 'Bb2'."
    INVALID_INTERVAL = "Unknown interval notation: '{text}'."
    INVALID_INVERSION = "Chord {chord} has no inversion {inversion} (valid: 0-{max_inversion})."
    NEGATIVE_INVERSION = "Inversion must be non-negative, got {inversion}."
    INVALID_NODE = "Unknown progression node: '{text}'. Expected I-VII."
    INVALID_BPM = "Tempo must be positive, got {bpm} BPM."
    INVALID_BEATS = "Time signature needs at least one beat, got {beats}."
    INVALID_SAMPLE_RATE = "Sample rate must be positive, got {sample_rate}."
    INVALID_TIME_SIGNATURE = "Invalid time signature: '{text}'. Expected format like '4/4' or '6/8'."
    UNSUPPORTED_DENOMINATOR = "Unsupported time signature denominator: {denominator}."
    INVALID_EXTENSION_ACCIDENTAL = "Extension accidental must be natural, flat or sharp, got {accidental}."
    UNSUPPORTED_TYPE = "No schema registered for type {type_name}."
    NO_PROJECT_PATH = "No project path configured."
    CATALOG_EXISTS = "Catalog already exists in project: {name}"
