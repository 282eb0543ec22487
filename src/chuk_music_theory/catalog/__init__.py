"""
Catalog system - user-extensible scale types and named progressions.

The built-in ScaleType and ChordProgression tables cover the common cases;
catalogs add more from YAML without touching code.
"""

from chuk_music_theory.catalog.loader import CatalogLoader

__all__ = ["CatalogLoader"]
