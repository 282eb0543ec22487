"""
Catalog loader - discovers and loads scale type and progression catalogs.

Catalogs can come from:
1. Built-in library (shipped with package)
2. Project catalogs (user's project directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.progression import CustomChordProgression
from chuk_music_theory.core.scale import ScaleType
from chuk_music_theory.models.catalog import CatalogFile, CatalogMetadata

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Discovers and loads catalog definitions.

    Catalogs are loaded from YAML files in the library and project directories.
    Project catalogs override library catalogs with the same name, and
    project entries override library entries with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalogs directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, CatalogFile] = {}

    def list_catalogs(self) -> list[CatalogMetadata]:
        """
        List all available catalogs.

        Returns catalogs from both library and project, with project
        catalogs taking precedence.
        """
        return [CatalogMetadata.from_catalog(c) for c in self._load_all().values()]

    def get_catalog(self, name: str) -> CatalogFile | None:
        """
        Get a catalog by name.

        Project catalogs take precedence over library catalogs.

        Args:
            name: Catalog name (file stem)

        Returns:
            CatalogFile if found, None otherwise
        """
        if name in self._cache:
            logger.debug("Catalog cache hit: %s", name)
            return self._cache[name]

        for directory in self._search_paths(project_first=True):
            path = directory / f"{name}.yaml"
            if path.exists():
                catalog = self._load_catalog_file(path)
                if catalog:
                    self._cache[name] = catalog
                    return catalog

        return None

    def list_scale_types(self) -> dict[str, ScaleType]:
        """All catalog scale types by entry name."""
        scale_types: dict[str, ScaleType] = {}
        for catalog in self._load_all().values():
            for entry in catalog.scales:
                scale_types[entry.name] = entry.to_scale_type()
        return scale_types

    def get_scale_type(self, name: str) -> ScaleType | None:
        """
        Get a scale type by entry name.

        Falls back to the built-in ScaleType catalog by description,
        so 'Dorian' resolves without any catalog file.
        """
        scale_type = self.list_scale_types().get(name)
        if scale_type is None:
            scale_type = ScaleType.named(name)
        return scale_type

    def list_progressions(self) -> dict[str, CustomChordProgression]:
        """All catalog progressions by entry name."""
        progressions: dict[str, CustomChordProgression] = {}
        for catalog in self._load_all().values():
            for entry in catalog.progressions:
                progressions[entry.name] = entry.to_progression()
        return progressions

    def get_progression(self, name: str) -> CustomChordProgression | None:
        """Get a named progression, or None if no catalog defines it."""
        return self.list_progressions().get(name)

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library catalog to the project for customization.

        Args:
            name: Catalog name

        Returns:
            Path to copied file, or None if not found

        Raises:
            ValueError: If no project path is configured or the file exists
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.CATALOG_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text(encoding="utf-8"), encoding="utf-8")
        self._cache.pop(name, None)
        logger.info("Copied catalog %s to %s", name, dest_file)

        return dest_file

    def save_to_project(self, catalog: CatalogFile) -> Path:
        """
        Write a catalog to the project directory, replacing any existing file.

        Raises:
            ValueError: If no project path is configured
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{catalog.name}.yaml"
        with open(dest_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(catalog.to_yaml_dict(), f, sort_keys=False, allow_unicode=True)
        self._cache.pop(catalog.name, None)

        return dest_file

    def clear_cache(self) -> None:
        """Clear the catalog cache."""
        self._cache.clear()

    def _search_paths(self, project_first: bool = False) -> list[Path]:
        paths = [self.library_path]
        if self.project_path:
            paths.append(self.project_path)
        return list(reversed(paths)) if project_first else paths

    def _load_all(self) -> dict[str, CatalogFile]:
        """Load every catalog, library first so project files override."""
        catalogs: dict[str, CatalogFile] = {}
        for directory in self._search_paths():
            if not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                catalog = self._load_catalog_file(path)
                if catalog:
                    catalogs[catalog.name] = catalog
        logger.info("Loaded %d catalogs", len(catalogs))
        return catalogs

    def _load_catalog_file(self, path: Path) -> CatalogFile | None:
        """Load a catalog from a YAML file, or None if it is malformed."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return CatalogFile.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping catalog file %s: %s", path, e)
            return None
