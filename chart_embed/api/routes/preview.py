"""API route for the author-side live preview."""

from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import Field

from ...pages import render_preview_page
from ...snippets import UnsupportedModeError
from ._common import ApiModel, config_or_400
from .snippets import attach_sheet_rows

router = APIRouter(prefix="/preview", tags=["preview"])


class PreviewRequest(ApiModel):
    config: dict[str, Any] = Field(..., description="Wire-form render config")


@router.post("", response_class=HTMLResponse)
async def preview(body: PreviewRequest):
    """Render a config in a standalone page, exactly as the snippet would."""
    config = await attach_sheet_rows(config_or_400(body.config))
    try:
        return HTMLResponse(render_preview_page(config))
    except UnsupportedModeError as e:
        raise HTTPException(status_code=400, detail=str(e))
