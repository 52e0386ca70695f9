"""Standalone embed page and live preview.

Both pages wrap the snippet generator's output in a minimal HTML document.
Nothing here re-implements scaling or animation: the preview an author sees
and the page a visitor opens run exactly the markup and script a host site
would paste.
"""

import logging
from typing import Optional

from ..codec import InvalidConfigError, decode_config
from ..render_config.schemas import RenderConfig, RendererMode
from ..snippets.generator import SnippetGenerator, UnsupportedModeError, get_snippet_generator

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "page.html.j2"

SUPPORTED_EMBED_MODES = {RendererMode.GOOGLE_EMBED.value, RendererMode.GOOGLE_CHARTS.value}

MISSING_PARAM_MESSAGE = "Missing config parameter 'c' in URL"


def _render_page(
    title: str,
    snippet: str = "",
    error: Optional[str] = None,
    error_title: str = "",
    generator: Optional[SnippetGenerator] = None,
) -> str:
    gen = generator or get_snippet_generator()
    return gen.render_template(
        PAGE_TEMPLATE,
        {"title": title, "snippet": snippet, "error": error, "error_title": error_title},
    )


def render_error_page(
    title: str,
    message: str,
    generator: Optional[SnippetGenerator] = None,
) -> str:
    """HTML page showing a single error box."""
    return _render_page(title, error=message, error_title=title, generator=generator)


def _render_config(config: RenderConfig, title: str, generator: Optional[SnippetGenerator]) -> str:
    if config.mode not in SUPPORTED_EMBED_MODES:
        raise UnsupportedModeError(config.mode)
    gen = generator or get_snippet_generator()
    return _render_page(title, snippet=gen.generate(config), generator=gen)


def render_embed_page(config: RenderConfig, generator: Optional[SnippetGenerator] = None) -> str:
    """Full page hosting one chart, as served behind a share URL.

    Raises:
        UnsupportedModeError: If config.mode has no page renderer
    """
    return _render_config(config, "Chart", generator)


def render_preview_page(config: RenderConfig, generator: Optional[SnippetGenerator] = None) -> str:
    """Author-side live preview of a config.

    Raises:
        UnsupportedModeError: If config.mode has no page renderer
    """
    return _render_config(config, "Chart preview", generator)


def render_embed_request(
    encoded: Optional[str],
    generator: Optional[SnippetGenerator] = None,
) -> tuple[int, str]:
    """Handle the ``c`` query parameter of an ``/embed`` request.

    Args:
        encoded: Value of the ``c`` query parameter, if any

    Returns:
        (HTTP status, HTML). Failures render an error page instead of raising.
    """
    if not encoded:
        return 400, render_error_page("Error", MISSING_PARAM_MESSAGE, generator)

    try:
        config = decode_config(encoded)
    except InvalidConfigError as e:
        logger.info(f"Rejected embed config: {e}")
        return 400, render_error_page("Error", str(e), generator)

    try:
        return 200, render_embed_page(config, generator)
    except UnsupportedModeError as e:
        return 400, render_error_page("Error", str(e), generator)
