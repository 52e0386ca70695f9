"""Render configuration schemas — the data model for one embeddable chart.

A RenderConfig is a tagged union keyed by ``mode``:

- ``google-embed``: a published Google Sheets chart shown through an iframe
  that is scaled to fit its container.
- ``google-charts``: tabular data drawn with the Google Charts library.
- ``echarts``: reserved for a future renderer. Only the data source shape is
  defined; nothing generates markup for it yet.

Wire names are camelCase (``baseWidth``, ``durationMs``) so encoded configs
stay compatible with the browser side. Python attributes are snake_case.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from urllib.parse import urlparse

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    field_validator,
    model_serializer,
)
from pydantic.alias_generators import to_camel

DEFAULT_BORDER_COLOR = "#76B900"
DEFAULT_DURATION_MS = 600
MAX_DURATION_MS = 5000
MAX_RADIUS_PX = 24
MAX_BORDER_WIDTH = 8


class AnimationPreset(str, Enum):
    """Entrance animation applied when the chart first scrolls into view."""

    FADE_UP = "fade-up"
    FADE = "fade"
    POP = "pop"
    REVEAL = "reveal"


class RendererMode(str, Enum):
    """Discriminant values for RenderConfig."""

    GOOGLE_EMBED = "google-embed"
    GOOGLE_CHARTS = "google-charts"
    ECHARTS = "echarts"


class GoogleChartType(str, Enum):
    """Google Charts visualization classes the charts renderer can draw."""

    AREA = "AreaChart"
    BAR = "BarChart"
    COLUMN = "ColumnChart"
    LINE = "LineChart"
    PIE = "PieChart"
    SCATTER = "ScatterChart"
    TABLE = "Table"
    COMBO = "ComboChart"


class _StrictModel(BaseModel):
    """Closed model: unknown keys are rejected, instances are immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class _OpenModel(BaseModel):
    """Passthrough model: unknown keys are kept verbatim.

    Frozen only at the top level: passthrough values are the plain dicts and
    lists they were parsed from. Consumers read them (or a dump) and never
    mutate them in place.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    @model_serializer(mode="wrap")
    def _keep_null_extras(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # exclude_none only applies to typed fields; a passthrough null is data
        data = handler(self)
        for key, value in (self.__pydantic_extra__ or {}).items():
            if value is None and key not in data:
                data[key] = None
        return data


# -- Shared blocks --


class AnimateConfig(_StrictModel):
    """Viewport reveal animation."""

    preset: AnimationPreset
    duration_ms: float = Field(
        default=DEFAULT_DURATION_MS,
        ge=0,
        le=MAX_DURATION_MS,
        allow_inf_nan=False,
        description="Transition length in milliseconds",
    )


class FrameConfig(_StrictModel):
    """Wrapper styling around the chart.

    ``border_color`` only has a visible effect when ``border_width > 0``.
    ``background_color`` is optional on purpose: absence means the wrapper
    stays transparent, which is different from any explicit colour.
    """

    radius_px: float = Field(default=0, ge=0, le=MAX_RADIUS_PX, allow_inf_nan=False)
    border_width: float = Field(default=0, ge=0, le=MAX_BORDER_WIDTH, allow_inf_nan=False)
    border_color: str = DEFAULT_BORDER_COLOR
    background_color: Optional[str] = None


# -- google-embed --


class GoogleEmbedConfig(_StrictModel):
    """A published Google Sheets chart rendered through a scaled iframe."""

    mode: Literal["google-embed"] = "google-embed"
    animate: AnimateConfig
    src: str = Field(..., description="Absolute http(s) URL of the published chart")
    base_width: float = Field(..., gt=0, allow_inf_nan=False)
    base_height: float = Field(..., gt=0, allow_inf_nan=False)
    frame: FrameConfig = Field(default_factory=FrameConfig)

    @field_validator("src")
    @classmethod
    def _require_absolute_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme.lower() not in ("http", "https") or not parsed.netloc:
            raise ValueError("src must be an absolute http(s) URL")
        return value

    @property
    def aspect_ratio(self) -> float:
        """Width / height of the authored chart."""
        return self.base_width / self.base_height


# -- google-charts --


class DataSource(_StrictModel):
    """Where a Google Charts config gets its rows from."""

    type: Literal["manual", "sheets"]
    sheets_url: Optional[str] = None
    data: Optional[list[list[Any]]] = None


class LegendOptions(_OpenModel):
    position: Optional[Literal["bottom", "top", "left", "right", "none"]] = None


class ChartAreaOptions(_OpenModel):
    width: Optional[str] = None
    height: Optional[str] = None


class ChartOptions(_OpenModel):
    """Google Charts options.

    Only the keys the authoring UI edits are typed. Anything else (``hAxis``,
    ``series``, ``isStacked``, ...) passes through untouched, including nested
    objects, so hand-tuned charts survive encode/decode.
    """

    title: Optional[str] = None
    width: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    background_color: Optional[str] = None
    colors: Optional[list[str]] = None
    legend: Optional[LegendOptions] = None
    chart_area: Optional[ChartAreaOptions] = None


class GoogleChartsConfig(_StrictModel):
    """Tabular data drawn client-side with the Google Charts library."""

    mode: Literal["google-charts"] = "google-charts"
    animate: AnimateConfig
    chart_type: GoogleChartType
    data_source: DataSource
    options: ChartOptions = Field(default_factory=ChartOptions)
    frame: FrameConfig = Field(default_factory=FrameConfig)


# -- echarts (reserved) --


class EChartsDataSource(_StrictModel):
    type: Literal["gviz", "sheets-api"]
    url: Optional[str] = None


class EChartsConfig(_StrictModel):
    """Placeholder for a future ECharts renderer."""

    mode: Literal["echarts"] = "echarts"
    animate: AnimateConfig
    data_source: EChartsDataSource


RenderConfig = Annotated[
    Union[GoogleEmbedConfig, GoogleChartsConfig, EChartsConfig],
    Field(discriminator="mode"),
]

render_config_adapter: TypeAdapter = TypeAdapter(RenderConfig)


def validate_render_config(data: Any) -> Union[GoogleEmbedConfig, GoogleChartsConfig, EChartsConfig]:
    """Validate a plain dict (wire form) into the matching RenderConfig variant.

    Raises:
        pydantic.ValidationError: If the data does not match any variant
    """
    return render_config_adapter.validate_python(data)


def dump_render_config(config: BaseModel) -> dict[str, Any]:
    """Wire form of a config: camelCase keys, unset optionals omitted."""
    return config.model_dump(mode="json", by_alias=True, exclude_none=True)

