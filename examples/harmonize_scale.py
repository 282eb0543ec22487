#!/usr/bin/env python3
"""
Example: Harmonize a scale and analyse its chords.

Builds the harmonic field of a scale at every chord size and prints each
chord with its roman numeral, then resolves a few named progressions.

Usage:
    python examples/harmonize_scale.py
    python examples/harmonize_scale.py D Dorian
"""

import sys

from chuk_music_theory.core import (
    ChordProgression,
    HarmonicField,
    Key,
    Scale,
    ScaleType,
)


def main() -> None:
    """Print the harmonic field and a few progressions."""
    key = Key.parse(sys.argv[1] if len(sys.argv) > 1 else "C", strict=True)
    scale_name = sys.argv[2] if len(sys.argv) > 2 else "Major"
    scale_type = ScaleType.named(scale_name)
    if scale_type is None:
        print(f"Unknown scale: {scale_name}")
        sys.exit(1)

    scale = Scale(scale_type, key)
    print(f"{scale}: {' '.join(str(k) for k in scale.keys)}")
    print("=" * 40)

    for field in HarmonicField.all():
        print(f"{field.description}:")
        for chord in scale.harmonic_field(field):
            if chord is None:
                print("  -")
                continue
            numeral = chord.roman_numeral(scale) or "?"
            print(f"  {numeral:<8} {chord.notation:<12} {chord.description}")
        print()

    print("Progressions:")
    for progression in ChordProgression.all()[1:6]:
        chords = progression.chords(scale, HarmonicField.TRIAD)
        names = " ".join(chord.notation if chord else "-" for chord in chords)
        print(f"  {progression.description:<20} {names}")


if __name__ == "__main__":
    main()
