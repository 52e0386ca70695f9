"""Server-side Google Sheets fetching (CORS bypass for published CSVs)."""

from .client import SheetsFetcher, SheetsFetchResult, get_sheets_fetcher

__all__ = ["SheetsFetcher", "SheetsFetchResult", "get_sheets_fetcher"]
