"""Full-page renderings: the standalone embed page and the authoring preview."""

from .renderer import (
    SUPPORTED_EMBED_MODES,
    render_embed_page,
    render_embed_request,
    render_error_page,
    render_preview_page,
)

__all__ = [
    "SUPPORTED_EMBED_MODES",
    "render_embed_page",
    "render_embed_request",
    "render_error_page",
    "render_preview_page",
]
