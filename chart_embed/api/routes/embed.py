"""Standalone embed page behind shareable ``/embed?c=...`` URLs."""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ...pages import render_embed_request

router = APIRouter(tags=["embed"])


@router.get("/embed", response_class=HTMLResponse)
async def embed_page(c: Optional[str] = None):
    """Decode the ``c`` parameter and render the chart full-page.

    Missing or invalid configs render an error page with status 400.
    """
    status_code, html = render_embed_request(c)
    return HTMLResponse(html, status_code=status_code)
