"""Tabular input: pasted CSV/TSV rows for the google-charts variant."""

from .parsing import (
    DataValidation,
    extract_gid,
    extract_sheets_id,
    infer_data_types,
    parse_csv,
    parse_data,
    parse_tsv,
    sheets_csv_url,
    validate_chart_data,
)

__all__ = [
    "DataValidation",
    "extract_gid",
    "extract_sheets_id",
    "infer_data_types",
    "parse_csv",
    "parse_data",
    "parse_tsv",
    "sheets_csv_url",
    "validate_chart_data",
]
