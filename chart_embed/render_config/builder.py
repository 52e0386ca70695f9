"""Build full render configs from parser output and author-picked options.

The authoring flow is: paste -> parser draft -> merge with the UI's styling
and animation choices -> full config. Numbers coming from UI controls are
clamped into the schema's ranges here, so a slider overshoot never turns into
a validation error further down.
"""

from typing import Any, Optional, Union

from .catalog_registry import DEFAULT_PALETTE, get_catalog_registry
from .schemas import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_DURATION_MS,
    MAX_BORDER_WIDTH,
    MAX_DURATION_MS,
    MAX_RADIUS_PX,
    AnimateConfig,
    AnimationPreset,
    ChartAreaOptions,
    ChartOptions,
    DataSource,
    FrameConfig,
    GoogleChartsConfig,
    GoogleChartType,
    GoogleEmbedConfig,
    LegendOptions,
)
from ..parser.schemas import EmbedDraft

DEFAULT_CHART_WIDTH = 800
DEFAULT_CHART_HEIGHT = 500


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def build_animate(
    preset: Union[AnimationPreset, str, None] = None,
    duration_ms: Optional[float] = None,
) -> AnimateConfig:
    """Animation block with defaults and a clamped duration."""
    return AnimateConfig(
        preset=AnimationPreset(preset) if preset else AnimationPreset.FADE_UP,
        duration_ms=clamp(
            DEFAULT_DURATION_MS if duration_ms is None else duration_ms,
            0,
            MAX_DURATION_MS,
        ),
    )


def build_frame(
    radius_px: Optional[float] = None,
    border_width: Optional[float] = None,
    border_color: Optional[str] = None,
    background_color: Optional[str] = None,
) -> FrameConfig:
    """Frame block with clamped numbers.

    An empty ``background_color`` means "none picked" and stays absent.
    """
    return FrameConfig(
        radius_px=clamp(radius_px or 0, 0, MAX_RADIUS_PX),
        border_width=clamp(border_width or 0, 0, MAX_BORDER_WIDTH),
        border_color=border_color or DEFAULT_BORDER_COLOR,
        background_color=background_color or None,
    )


def build_embed_config(
    draft: EmbedDraft,
    preset: Union[AnimationPreset, str, None] = None,
    duration_ms: Optional[float] = None,
    radius_px: Optional[float] = None,
    border_width: Optional[float] = None,
    border_color: Optional[str] = None,
    background_color: Optional[str] = None,
) -> GoogleEmbedConfig:
    """Merge a parser draft with the author's styling into a full embed config.

    Args:
        draft: Successful parser output
        preset: Animation preset (default fade-up)
        duration_ms: Animation length, clamped to [0, 5000]
        radius_px: Corner radius, clamped to [0, 24]
        border_width: Border width, clamped to [0, 8]
        border_color: Border colour (default #76B900)
        background_color: Optional wrapper background

    Returns:
        GoogleEmbedConfig

    Raises:
        pydantic.ValidationError: If the draft's src or dimensions are invalid
    """
    return GoogleEmbedConfig(
        src=draft.src,
        base_width=draft.base_width,
        base_height=draft.base_height,
        animate=build_animate(preset, duration_ms),
        frame=build_frame(radius_px, border_width, border_color, background_color),
    )


def build_charts_config(
    data: Optional[list[list[Any]]] = None,
    chart_type: Union[GoogleChartType, str, None] = None,
    title: str = "",
    palette: str = DEFAULT_PALETTE,
    legend_position: str = "bottom",
    sheets_url: Optional[str] = None,
    preset: Union[AnimationPreset, str, None] = None,
    duration_ms: Optional[float] = None,
    radius_px: Optional[float] = None,
    border_width: Optional[float] = None,
    border_color: Optional[str] = None,
    extra_options: Optional[dict[str, Any]] = None,
) -> GoogleChartsConfig:
    """Build a Google Charts config with the chart builder's defaults.

    Rows come either inline (``data``, manual source) or from ``sheets_url``
    (sheets source; rows may still be attached after a fetch).

    Raises:
        ValueError: If the palette name is unknown
    """
    colors = get_catalog_registry().get_palette(palette)
    if colors is None:
        raise ValueError(f"Unknown palette: {palette}")

    options: dict[str, Any] = {
        "title": title,
        "width": DEFAULT_CHART_WIDTH,
        "height": DEFAULT_CHART_HEIGHT,
        "colors": colors,
        "legend": LegendOptions(position=legend_position),
        "chart_area": ChartAreaOptions(width="80%", height="70%"),
    }
    options.update(extra_options or {})

    return GoogleChartsConfig(
        chart_type=GoogleChartType(chart_type) if chart_type else GoogleChartType.COLUMN,
        data_source=DataSource(
            type="sheets" if sheets_url else "manual",
            sheets_url=sheets_url,
            data=data,
        ),
        options=ChartOptions(**options),
        animate=build_animate(preset, duration_ms),
        frame=build_frame(radius_px, border_width, border_color),
    )
