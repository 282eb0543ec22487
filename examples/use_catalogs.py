#!/usr/bin/env python3
"""
Example: Load custom scales and progressions from catalogs.

Lists the built-in catalog library, then copies one into a project
directory so it can be edited.

Usage:
    python examples/use_catalogs.py
    # Creates: examples/output/catalogs/jazz.yaml
"""

import logging
from pathlib import Path

from chuk_music_theory.catalog import CatalogLoader
from chuk_music_theory.core import HarmonicField, Key, Scale
from chuk_music_theory.models import dumps


def main() -> None:
    """Show catalog contents and copy one to a project."""
    logging.basicConfig(level=logging.INFO)

    project_path = Path(__file__).parent / "output" / "catalogs"
    loader = CatalogLoader(project_path=project_path)

    print("Catalogs:")
    for meta in loader.list_catalogs():
        print(f"  {meta.name}: {meta.scale_count} scales, {meta.progression_count} progressions")
    print()

    bebop = loader.get_scale_type("bebop-dominant")
    if bebop:
        scale = Scale(bebop, Key.parse("G"))
        print(f"{scale}: {' '.join(str(p) for p in scale.pitches(4))}")
        print(dumps(bebop.intervals[0]))
    print()

    progression = loader.get_progression("ii-V-I")
    if progression:
        scale = Scale(loader.get_scale_type("Major"), Key.parse("Bb"))
        chords = progression.progression.chords(scale, HarmonicField.TETRAD)
        print(f"{progression.name} in {scale}: {' '.join(c.notation for c in chords if c)}")

    if not (project_path / "jazz.yaml").exists():
        path = loader.copy_to_project("jazz")
        print(f"Copied jazz catalog to {path}")


if __name__ == "__main__":
    main()
