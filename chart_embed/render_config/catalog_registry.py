"""Catalog registry — loads chart types, palettes and presets from YAML.

Follows the registry pattern used across the package:
- definitions/ directory next to the module
- Lazy loading with _loaded guard
- Global singleton via get_catalog_registry()
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .catalog_schemas import Catalog, ChartTypeEntry, PresetEntry

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = "nvidia"


class CatalogRegistry:
    """Registry of authoring choices loaded from a YAML file."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = Path(__file__).parent / "definitions"
        self.definitions_dir = definitions_dir
        self._catalog = Catalog()
        self._loaded = False

    def load(self) -> None:
        """Load catalog.yaml. A missing or broken file leaves the catalog empty."""
        if self._loaded:
            return

        catalog_file = self.definitions_dir / "catalog.yaml"
        if not catalog_file.exists():
            logger.warning(f"Catalog definitions not found: {catalog_file}")
            self._loaded = True
            return

        try:
            with open(catalog_file, "r") as f:
                data = yaml.safe_load(f) or {}
            self._catalog = Catalog.model_validate(data)
        except Exception as e:
            logger.error(f"Failed to load catalog from {catalog_file}: {e}")

        self._loaded = True
        logger.info(
            f"Loaded catalog: {len(self._catalog.chart_types)} chart types, "
            f"{len(self._catalog.palettes)} palettes, "
            f"{len(self._catalog.presets)} presets"
        )

    def list_chart_types(self) -> list[ChartTypeEntry]:
        self.load()
        return list(self._catalog.chart_types)

    def list_presets(self) -> list[PresetEntry]:
        self.load()
        return list(self._catalog.presets)

    def list_palettes(self) -> dict[str, list[str]]:
        self.load()
        return dict(self._catalog.palettes)

    def get_palette(self, name: str) -> Optional[list[str]]:
        """Get a palette's colours by name."""
        self.load()
        palette = self._catalog.palettes.get(name)
        return list(palette) if palette is not None else None

    def count(self) -> int:
        """Number of chart types on offer."""
        self.load()
        return len(self._catalog.chart_types)

    def reload(self) -> None:
        """Force reload the definitions file."""
        self._loaded = False
        self._catalog = Catalog()
        self.load()


# Global registry instance
_registry: Optional[CatalogRegistry] = None


def get_catalog_registry() -> CatalogRegistry:
    """Get the global catalog registry instance."""
    global _registry
    if _registry is None:
        _registry = CatalogRegistry()
        _registry.load()
    return _registry
