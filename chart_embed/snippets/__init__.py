"""Snippet generation — embeddable markup for render configs.

Architecture:
- templates/   - Jinja2 sources for snippets, shared JS/CSS partials and the page shell
- presets.py   - Pre-reveal state per animation preset
- registry.py  - SnippetTemplateRegistry for loading templates
- generator.py - SnippetGenerator for rendering a config into a snippet
"""

from .generator import (
    SnippetGenerator,
    UnsupportedModeError,
    generate_snippet,
    get_snippet_generator,
)
from .registry import SnippetTemplateRegistry, get_template_registry

__all__ = [
    "SnippetGenerator",
    "SnippetTemplateRegistry",
    "UnsupportedModeError",
    "generate_snippet",
    "get_snippet_generator",
    "get_template_registry",
]
