"""API routes for building, encoding and decoding render configs."""

import logging
from typing import Any, Literal, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import Field, ValidationError

from ...codec import (
    InvalidConfigError,
    build_embed_url,
    decode_config,
    encode_config,
    summarize_validation_error,
)
from ...parser import EmbedDraft, parse_iframe_input
from ...render_config.builder import build_charts_config, build_embed_config
from ...render_config.catalog_registry import DEFAULT_PALETTE
from ...render_config.schemas import AnimationPreset, GoogleChartType, dump_render_config
from ...tabular import infer_data_types, parse_data, validate_chart_data
from ._common import ApiModel, config_or_400, public_origin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/configs", tags=["configs"])

# ============================================================================
# Request/Response Schemas
# ============================================================================


class StyleOptions(ApiModel):
    """Animation and frame choices from the authoring controls."""

    preset: Optional[AnimationPreset] = Field(default=None, description="Animation preset (default fade-up)")
    duration_ms: Optional[float] = Field(default=None, description="Clamped to [0, 5000]")
    radius_px: Optional[float] = Field(default=None, description="Clamped to [0, 24]")
    border_width: Optional[float] = Field(default=None, description="Clamped to [0, 8]")
    border_color: Optional[str] = None
    background_color: Optional[str] = Field(
        default=None, description="Empty or missing leaves the wrapper transparent"
    )


class BuildConfigRequest(StyleOptions):
    """Everything needed to assemble a full render config."""

    mode: Literal["google-embed", "google-charts"] = "google-embed"

    # google-embed
    input: Optional[str] = Field(default=None, description="Iframe code or URL, parsed when no draft is given")
    draft: Optional[EmbedDraft] = Field(default=None, description="Output of POST /v1/parse")

    # google-charts
    chart_type: Optional[GoogleChartType] = None
    title: str = ""
    palette: str = DEFAULT_PALETTE
    legend_position: Literal["bottom", "top", "left", "right", "none"] = "bottom"
    data: Optional[list[list[Any]]] = Field(default=None, description="Rows, header first")
    data_text: Optional[str] = Field(default=None, description="Pasted CSV/TSV, used when data is absent")
    sheets_url: Optional[str] = None
    options: Optional[dict[str, Any]] = Field(default=None, description="Extra Google Charts options")


class ConfigEnvelope(ApiModel):
    """A config together with its shareable forms."""

    config: dict[str, Any]
    encoded: str
    embed_url: str
    warnings: list[str] = Field(default_factory=list)


class EncodeRequest(ApiModel):
    config: dict[str, Any] = Field(..., description="Wire-form render config")


class DecodeRequest(ApiModel):
    encoded: str = Field(..., description="Value of the embed URL's c parameter")


class DecodeResponse(ApiModel):
    config: dict[str, Any]


def envelope(config, request: Request, warnings: Optional[list[str]] = None) -> ConfigEnvelope:
    """Wrap a config with its encoded string and share URL."""
    try:
        return ConfigEnvelope(
            config=dump_render_config(config),
            encoded=encode_config(config),
            embed_url=build_embed_url(public_origin(request), config),
            warnings=warnings or [],
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Config cannot be encoded: {e}")


def _draft_from_request(body: BuildConfigRequest) -> tuple[EmbedDraft, list[str]]:
    if body.draft is not None:
        return body.draft, []
    if body.input is None:
        raise HTTPException(status_code=400, detail="Either 'draft' or 'input' is required")
    result = parse_iframe_input(body.input)
    if not result.success or result.config is None:
        raise HTTPException(status_code=422, detail=result.errors)
    return result.config, result.warnings


def _rows_from_request(body: BuildConfigRequest) -> Optional[list[list[Any]]]:
    if body.data is not None:
        return body.data
    if not body.data_text:
        return None
    rows = parse_data(body.data_text)
    validation = validate_chart_data(rows)
    if not validation.valid:
        raise HTTPException(status_code=422, detail=validation.error)
    return infer_data_types(rows)


def build_from_request(body: BuildConfigRequest):
    """Assemble a config from a build request.

    Returns:
        (config, parser warnings)
    """
    try:
        if body.mode == "google-embed":
            draft, warnings = _draft_from_request(body)
            config = build_embed_config(
                draft,
                preset=body.preset,
                duration_ms=body.duration_ms,
                radius_px=body.radius_px,
                border_width=body.border_width,
                border_color=body.border_color,
                background_color=body.background_color,
            )
            return config, warnings

        config = build_charts_config(
            data=_rows_from_request(body),
            chart_type=body.chart_type,
            title=body.title,
            palette=body.palette,
            legend_position=body.legend_position,
            sheets_url=body.sheets_url,
            preset=body.preset,
            duration_ms=body.duration_ms,
            radius_px=body.radius_px,
            border_width=body.border_width,
            border_color=body.border_color,
            extra_options=body.options,
        )
        return config, []
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=summarize_validation_error(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# -- Endpoints --


@router.post("/build", response_model=ConfigEnvelope)
async def build_config(body: BuildConfigRequest, request: Request):
    """Build a full config from parsed input (or raw data) plus styling options."""
    config, warnings = build_from_request(body)
    logger.info(f"Built {config.mode} config")
    return envelope(config, request, warnings)


@router.post("/encode", response_model=ConfigEnvelope)
async def encode(body: EncodeRequest, request: Request):
    """Validate a config and return its encoded form and share URL."""
    config = config_or_400(body.config)
    return envelope(config, request)


@router.post("/decode", response_model=DecodeResponse)
async def decode(body: DecodeRequest):
    """Decode an encoded config back to its wire form."""
    try:
        config = decode_config(body.encoded)
    except InvalidConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DecodeResponse(config=dump_render_config(config))
