"""Snippet template registry.

Templates are loaded from chart_embed/snippets/templates/*.j2 and cached at
first use. Partials (file names starting with "_") are only meant to be
included by other templates.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SnippetTemplateRegistry:
    """Registry for the Jinja2 sources behind generated snippets and pages."""

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize the registry.

        Args:
            templates_dir: Path to templates directory (default: snippets/templates)
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self._templates: dict[str, str] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all templates from the templates directory."""
        if self._loaded:
            return

        if not self.templates_dir.exists():
            logger.warning(f"Templates directory not found: {self.templates_dir}")
            self._loaded = True
            return

        for template_file in sorted(self.templates_dir.glob("*.j2")):
            self._templates[template_file.name] = template_file.read_text(encoding="utf-8")
            logger.debug(f"Loaded template: {template_file.name}")

        self._loaded = True
        logger.info(f"Loaded {len(self._templates)} snippet templates")

    def get_template(self, name: str) -> Optional[str]:
        """Get a template source by file name."""
        self.load()
        return self._templates.get(name)

    def all_templates(self) -> dict[str, str]:
        """Every template source keyed by file name."""
        self.load()
        return dict(self._templates)

    def list_names(self) -> list[str]:
        self.load()
        return list(self._templates.keys())

    def count(self) -> int:
        self.load()
        return len(self._templates)


# Global registry instance
_registry: Optional[SnippetTemplateRegistry] = None


def get_template_registry() -> SnippetTemplateRegistry:
    """Get the global template registry instance."""
    global _registry
    if _registry is None:
        _registry = SnippetTemplateRegistry()
        _registry.load()
    return _registry
