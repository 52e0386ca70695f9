"""Parse, validate and type tabular chart data.

Rows arrive as text pasted from a spreadsheet (tab separated) or as CSV,
either typed by the author or fetched from a published sheet. The first row
is always the header.
"""

import csv
import io
import math
import re
from typing import Any, Optional, Union

from pydantic import BaseModel

SHEETS_BASE_URL = "https://docs.google.com/spreadsheets/d"

_SHEETS_ID_PATTERNS = [
    re.compile(r"/spreadsheets/d/([a-zA-Z0-9_-]+)"),
    re.compile(r"^([a-zA-Z0-9_-]+)$"),
]
_GID = re.compile(r"[#&?]gid=([0-9]+)")

Cell = Union[str, int, float]


class DataValidation(BaseModel):
    """Result of validate_chart_data."""

    valid: bool
    error: Optional[str] = None


def _drop_blank(rows: list[list[str]]) -> list[list[str]]:
    return [row for row in rows if any(cell for cell in row)]


def parse_csv(text: str) -> list[list[str]]:
    """Parse CSV text into rows of trimmed cells.

    Quoted fields may contain commas and doubled quotes. Blank lines are skipped.
    """
    reader = csv.reader(io.StringIO(text.strip()))
    return _drop_blank([[cell.strip() for cell in row] for row in reader])


def parse_tsv(text: str) -> list[list[str]]:
    """Parse tab-separated text, as copied out of Excel or Sheets."""
    rows = [
        [cell.strip() for cell in line.split("\t")]
        for line in text.strip().splitlines()
    ]
    return _drop_blank(rows)


def parse_data(text: str) -> list[list[str]]:
    """Parse pasted data, treating it as TSV if it contains a tab, else CSV."""
    if "\t" in text:
        return parse_tsv(text)
    return parse_csv(text)


def validate_chart_data(data: Optional[list[list[Any]]]) -> DataValidation:
    """Check that data has a header, at least one row, and a consistent width."""
    if not data:
        return DataValidation(valid=False, error="No data provided")

    if len(data) < 2:
        return DataValidation(
            valid=False,
            error="Data must have at least a header row and one data row",
        )

    column_count = len(data[0])
    if column_count == 0:
        return DataValidation(valid=False, error="Data must have at least one column")

    for index, row in enumerate(data[1:], start=2):
        if len(row) != column_count:
            return DataValidation(
                valid=False,
                error=(
                    f"Row {index} has {len(row)} columns, "
                    f"but header has {column_count} columns"
                ),
            )

    return DataValidation(valid=True)


def _to_number(cell: str) -> Optional[Union[int, float]]:
    try:
        return int(cell)
    except ValueError:
        pass
    try:
        value = float(cell)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def infer_data_types(data: list[list[str]]) -> list[list[Cell]]:
    """Convert numeric-looking cells to numbers.

    The header row and the first column (usually labels) are left as strings.
    """
    if not data:
        return []

    result: list[list[Cell]] = [list(data[0])]
    for row in data[1:]:
        typed: list[Cell] = []
        for index, cell in enumerate(row):
            number = _to_number(cell) if index > 0 and cell != "" else None
            typed.append(cell if number is None else number)
        result.append(typed)
    return result


def extract_sheets_id(url: str) -> Optional[str]:
    """Spreadsheet id from a Google Sheets URL, or the bare id itself."""
    for pattern in _SHEETS_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def extract_gid(url: str) -> Optional[str]:
    """Sheet tab id (``gid``) from a spreadsheet URL's query or fragment."""
    match = _GID.search(url)
    return match.group(1) if match else None


def sheets_csv_url(sheets_id: str, gid: Optional[str] = None) -> str:
    """CSV export URL for a published spreadsheet (visualization endpoint)."""
    gid_param = f"&gid={gid}" if gid else ""
    return f"{SHEETS_BASE_URL}/{sheets_id}/gviz/tq?tqx=out:csv{gid_param}"
