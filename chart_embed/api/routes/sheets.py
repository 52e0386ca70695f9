"""API route for fetching published Google Sheets server-side (CORS bypass)."""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ...sheets import get_sheets_fetcher

router = APIRouter(prefix="/sheets", tags=["sheets"])


@router.get("/fetch")
async def fetch_sheet(
    url: str = Query(default="", description="Spreadsheet or published CSV URL"),
    parsed: bool = Query(default=False, description="Return typed rows instead of CSV text"),
):
    """Fetch a sheet's CSV.

    Failures answer with the upstream status code (400 for rejected URLs)
    and an ``{"error": ...}`` body.
    """
    fetcher = get_sheets_fetcher()
    result = await (fetcher.fetch_table(url) if parsed else fetcher.fetch_csv(url))
    if not result.success:
        return JSONResponse({"error": result.error}, status_code=result.status_code)
    return {"success": True, "data": result.rows if parsed else result.data}
