"""Snippet generator — self-contained HTML/CSS/JS for one render config.

The generated markup carries everything it needs at embed time: the wrapper's
aspect-ratio box, the preset's hidden state, and an inline script that keeps
the stage scaled to the wrapper and reveals it once on viewport entry. The
only external dependency is the Google Charts loader for the charts variant.

Usage:
    snippet = generate_snippet(config)
"""

import json
import logging
import re
import uuid
from typing import Any, Optional, assert_never

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError

from ..render_config.schemas import (
    DEFAULT_BORDER_COLOR,
    EChartsConfig,
    FrameConfig,
    GoogleChartsConfig,
    GoogleEmbedConfig,
    RenderConfig,
    dump_render_config,
)
from ..render_config.builder import DEFAULT_CHART_HEIGHT, DEFAULT_CHART_WIDTH
from .presets import REVEAL_THRESHOLD, initial_transform, resolve_preset
from .registry import SnippetTemplateRegistry, get_template_registry

logger = logging.getLogger(__name__)

CHARTS_LOADER_URL = "https://www.gstatic.com/charts/loader.js"
CHARTS_LOAD_TIMEOUT_MS = 10000
CHARTS_PACKAGES = ["corechart", "table"]
ELEMENT_ID_PREFIX = "gs-chart-"

EMBED_TEMPLATE = "embed_snippet.html.j2"
CHARTS_TEMPLATE = "charts_snippet.html.j2"

# Colours end up inside a style attribute; anything beyond colour syntax is dropped
_CSS_COLOR = re.compile(r"^(#[0-9A-Fa-f]{3,8}|[A-Za-z]+|(rgb|rgba|hsl|hsla)\([0-9.,%\s/-]+\))$")

# Caller-supplied ids land in CSS selectors and getElementById calls
_ELEMENT_ID = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")

_JS_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class UnsupportedModeError(ValueError):
    """Raised for render modes that have no snippet renderer."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"Unsupported mode: {mode}")


def new_element_id() -> str:
    """Random wrapper id, unique enough for many snippets on one host page."""
    return f"{ELEMENT_ID_PREFIX}{uuid.uuid4().hex[:12]}"


def css_number(value: float) -> str:
    """Format a number for CSS without float noise (600.0 -> 600)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.6f}".rstrip("0").rstrip(".")


def js_literal(value: Any) -> str:
    """JSON literal that is safe to place inside an inline <script>."""
    text = json.dumps(value, ensure_ascii=False, allow_nan=False)
    for raw, escaped in _JS_ESCAPES.items():
        text = text.replace(raw, escaped)
    return text


def safe_css_color(value: Optional[str], fallback: str) -> str:
    """Return value if it looks like a CSS colour, otherwise fallback."""
    if value and _CSS_COLOR.match(value.strip()):
        return value.strip()
    if value:
        logger.warning(f"Ignoring unsafe CSS colour value: {value!r}")
    return fallback


class SnippetGenerator:
    """Renders snippet templates for every supported render mode."""

    def __init__(self, registry: Optional[SnippetTemplateRegistry] = None):
        """Initialize the generator.

        Args:
            registry: Template registry (default: global singleton)
        """
        self.registry = registry or get_template_registry()

        # Includes need a real loader, so the registry's sources back a DictLoader
        self.env = Environment(
            loader=DictLoader(self.registry.all_templates()),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["css_number"] = css_number
        self.env.filters["js"] = js_literal

    def generate(self, config: RenderConfig, element_id: Optional[str] = None) -> str:
        """Generate the embeddable snippet for a config.

        Args:
            config: Validated RenderConfig variant
            element_id: Wrapper id override (default: random)

        Returns:
            Markup + inline style + inline script

        Raises:
            UnsupportedModeError: For modes without a renderer (echarts)
            ValueError: If element_id is not a plain identifier or rendering fails
        """
        if element_id is None:
            element_id = new_element_id()
        elif not _ELEMENT_ID.match(element_id):
            raise ValueError(f"Invalid element id: {element_id!r}")

        if isinstance(config, GoogleEmbedConfig):
            context = self._embed_context(config, element_id)
            return self.render_template(EMBED_TEMPLATE, context)
        if isinstance(config, GoogleChartsConfig):
            context = self._charts_context(config, element_id)
            return self.render_template(CHARTS_TEMPLATE, context)
        if isinstance(config, EChartsConfig):
            raise UnsupportedModeError(config.mode)
        assert_never(config)

    def render_template(self, name: str, context: dict[str, Any]) -> str:
        """Render a registry template by file name."""
        try:
            template = self.env.get_template(name)
            return template.render(**context).strip() + "\n"
        except TemplateError as e:
            raise ValueError(f"Template rendering error for {name}: {e}")

    # -- Context builders --

    def _common_context(self, config: RenderConfig, element_id: str) -> dict[str, Any]:
        preset = resolve_preset(config.animate.preset)
        return {
            "element_id": element_id,
            "preset": preset.value,
            "initial_transform": initial_transform(preset),
            "duration_ms": config.animate.duration_ms,
            "reveal_threshold": REVEAL_THRESHOLD,
        }

    def _frame_context(self, frame: FrameConfig) -> dict[str, Any]:
        return {
            "radius_px": frame.radius_px,
            "border_width": frame.border_width,
            "border_color": safe_css_color(frame.border_color, DEFAULT_BORDER_COLOR),
            "background_color": safe_css_color(frame.background_color, "transparent"),
        }

    def _embed_context(self, config: GoogleEmbedConfig, element_id: str) -> dict[str, Any]:
        context = self._common_context(config, element_id)
        context.update(
            {
                "src": config.src,
                "base_width": config.base_width,
                "base_height": config.base_height,
                "aspect_ratio": round(config.aspect_ratio, 6),
                "frame": self._frame_context(config.frame),
            }
        )
        return context

    def _charts_context(self, config: GoogleChartsConfig, element_id: str) -> dict[str, Any]:
        options = dump_render_config(config)["options"]
        width = config.options.width or DEFAULT_CHART_WIDTH
        height = config.options.height or DEFAULT_CHART_HEIGHT

        context = self._common_context(config, element_id)
        context.update(
            {
                "chart_type": config.chart_type.value,
                "data": config.data_source.data or [],
                "options": options,
                "base_width": width,
                "base_height": height,
                "aspect_ratio": round(width / height, 6),
                "frame": self._frame_context(config.frame),
                "loader_url": CHARTS_LOADER_URL,
                "load_timeout_ms": CHARTS_LOAD_TIMEOUT_MS,
                "packages": CHARTS_PACKAGES,
            }
        )
        return context


# Global generator instance
_generator: Optional[SnippetGenerator] = None


def get_snippet_generator() -> SnippetGenerator:
    """Get the global snippet generator instance."""
    global _generator
    if _generator is None:
        _generator = SnippetGenerator()
    return _generator


def generate_snippet(config: RenderConfig, element_id: Optional[str] = None) -> str:
    """Generate the embeddable snippet for a config with the global generator."""
    return get_snippet_generator().generate(config, element_id)
