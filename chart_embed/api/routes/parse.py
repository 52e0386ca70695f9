"""API route for parsing pasted iframe markup."""

from fastapi import APIRouter
from pydantic import Field

from ...parser import ParseResult, parse_iframe_input
from ._common import ApiModel

router = APIRouter(prefix="/parse", tags=["parse"])


class ParseRequest(ApiModel):
    """Raw text pasted by the author."""

    input: str = Field(..., description="Iframe embed code or a bare chart URL")


@router.post("", response_model=ParseResult)
async def parse_input(request: ParseRequest):
    """Extract src, width and height from pasted iframe code.

    Parsing problems are reported in the body (``success: false``), not as
    HTTP errors.
    """
    return parse_iframe_input(request.input)
