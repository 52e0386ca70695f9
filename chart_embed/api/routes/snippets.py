"""API routes for generating embeddable snippets."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import Field

from ...render_config.schemas import GoogleChartsConfig, RenderConfig
from ...sheets import get_sheets_fetcher
from ...snippets import UnsupportedModeError, generate_snippet
from ._common import ApiModel, config_or_400
from .configs import BuildConfigRequest, ConfigEnvelope, build_from_request, envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/snippets", tags=["snippets"])

# ============================================================================
# Request/Response Schemas
# ============================================================================


class SnippetRequest(ApiModel):
    """Generate a snippet for an already built config."""

    config: dict[str, Any] = Field(..., description="Wire-form render config")
    element_id: Optional[str] = Field(default=None, description="Wrapper id (default: random gs-chart-*)")


class SnippetFromInputRequest(BuildConfigRequest):
    """Build a config and generate its snippet in one call."""

    element_id: Optional[str] = None


class SnippetResponse(ConfigEnvelope):
    snippet: str


async def attach_sheet_rows(config: RenderConfig) -> RenderConfig:
    """Fill a sheets-sourced charts config with freshly fetched rows.

    Configs that already carry rows, and non-charts configs, pass through.
    """
    if not isinstance(config, GoogleChartsConfig):
        return config
    source = config.data_source
    if source.type != "sheets" or source.data or not source.sheets_url:
        return config

    result = await get_sheets_fetcher().fetch_table(source.sheets_url)
    if not result.success:
        raise HTTPException(status_code=result.status_code, detail=result.error)

    return config.model_copy(
        update={"data_source": source.model_copy(update={"data": result.rows})}
    )


def _snippet_or_400(config: RenderConfig, element_id: Optional[str]) -> str:
    try:
        return generate_snippet(config, element_id)
    except UnsupportedModeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        logger.error(f"Snippet generation failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


# -- Endpoints --


@router.post("", response_model=SnippetResponse)
async def create_snippet(body: SnippetRequest, request: Request):
    """Generate the copy-paste snippet for a config."""
    config = await attach_sheet_rows(config_or_400(body.config))
    snippet = _snippet_or_400(config, body.element_id)
    shared = envelope(config, request)
    return SnippetResponse(snippet=snippet, **shared.model_dump())


@router.post("/from-input", response_model=SnippetResponse)
async def create_snippet_from_input(body: SnippetFromInputRequest, request: Request):
    """Parse/build a config from authoring input and generate its snippet."""
    config, warnings = build_from_request(body)
    config = await attach_sheet_rows(config)
    snippet = _snippet_or_400(config, body.element_id)
    shared = envelope(config, request, warnings)
    return SnippetResponse(snippet=snippet, **shared.model_dump())
