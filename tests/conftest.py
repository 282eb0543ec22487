"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_music_theory.catalog import CatalogLoader
from chuk_music_theory.core import Key, Scale, ScaleType

CUSTOM_CATALOG = """\
schema: catalog/v1
name: custom
description: Project catalog
scales:
  - name: bebop-major
    description: My Bebop
    intervals: [P1, M2, M3, P4, P5, M6, M7]
  - name: tritone-pair
    description: Tritone Pair
    intervals: [P1, d5]
progressions:
  - name: plagal
    nodes: [IV, I]
"""


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Project catalog directory holding one custom catalog."""
    project = temp_dir / "catalogs"
    project.mkdir()
    (project / "custom.yaml").write_text(CUSTOM_CATALOG, encoding="utf-8")
    return project


@pytest.fixture
def loader(project_dir: Path) -> CatalogLoader:
    """Catalog loader over the built-in library and the project directory."""
    return CatalogLoader(project_path=project_dir)


@pytest.fixture
def c_major() -> Scale:
    return Scale(ScaleType.MAJOR, Key.parse("C"))


@pytest.fixture
def c_minor() -> Scale:
    return Scale(ScaleType.MINOR, Key.parse("C"))
