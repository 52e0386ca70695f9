"""API route for parsing pasted tabular data."""

from typing import Any

from fastapi import APIRouter
from pydantic import Field

from ...tabular import DataValidation, infer_data_types, parse_data, validate_chart_data
from ._common import ApiModel

router = APIRouter(prefix="/data", tags=["data"])


class DataParseRequest(ApiModel):
    text: str = Field(..., description="CSV, or TSV pasted from a spreadsheet")
    infer_types: bool = Field(default=True, description="Convert numeric cells to numbers")


class DataParseResponse(ApiModel):
    rows: list[list[Any]]
    validation: DataValidation


@router.post("/parse", response_model=DataParseResponse)
async def parse_table(body: DataParseRequest):
    """Parse pasted rows and report whether they can be charted.

    Invalid data still comes back with the parsed rows so the UI can show
    what it got.
    """
    rows = parse_data(body.text)
    validation = validate_chart_data(rows)
    if body.infer_types:
        rows = infer_data_types(rows)
    return DataParseResponse(rows=rows, validation=validation)
