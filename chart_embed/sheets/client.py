"""Fetch published Google Sheets as CSV on behalf of the browser.

Browsers cannot read a published sheet's CSV cross-origin, so the authoring
UI asks the service to fetch it. The fetcher only talks to an allow-list of
hosts over https; it is not a general-purpose proxy.

Environment variables:
    SHEETS_FETCH_TIMEOUT: Request timeout in seconds (default 15)
    SHEETS_ALLOWED_HOSTS: Comma-separated host allow-list (default docs.google.com)

Failures never raise: every outcome is a SheetsFetchResult carrying the
status code the API should answer with.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from ..tabular.parsing import (
    extract_gid,
    extract_sheets_id,
    infer_data_types,
    parse_csv,
    sheets_csv_url,
    validate_chart_data,
)

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; AdvancedGoogleCharts/1.0)"
DEFAULT_TIMEOUT = 15.0
DEFAULT_ALLOWED_HOSTS = ("docs.google.com",)
# Publish-to-web CSVs redirect to a per-document host under this domain
REDIRECT_HOST_SUFFIXES = (".googleusercontent.com",)

PERMISSION_DENIED_MESSAGE = (
    "❌ Permission Denied ({status}): Your sheet is NOT publicly accessible.\n\n"
    "📝 Try this instead:\n"
    "1. Go to File → Share → Publish to web\n"
    '2. Choose "Comma-separated values (.csv)"\n'
    "3. Click Publish\n"
    '4. Copy the CSV URL it gives you (should contain "/pub?output=csv")\n'
    "5. Paste that URL here"
)
NOT_FOUND_MESSAGE = "Sheet not found (404). Check that the URL is correct and the sheet exists."
EMPTY_SHEET_MESSAGE = "The spreadsheet appears to be empty."

# Paths that already return CSV and must not be rewritten
_CSV_MARKERS = ("output=csv", "format=csv", "tqx=out:csv")


class DisallowedRedirectError(httpx.RequestError):
    """Raised from the request hook when a redirect leaves the allowed hosts."""


@dataclass
class SheetsFetchResult:
    """Outcome of a sheet fetch."""
    success: bool
    data: Optional[str] = None  # Raw CSV text
    rows: Optional[list[list[Any]]] = None  # Parsed, typed rows (fetch_table only)
    error: Optional[str] = None
    status_code: int = 200


def _allowed_hosts_from_env() -> tuple[str, ...]:
    raw = os.environ.get("SHEETS_ALLOWED_HOSTS")
    if not raw:
        return DEFAULT_ALLOWED_HOSTS
    return tuple(h.strip().lower() for h in raw.split(",") if h.strip())


def _timeout_from_env() -> float:
    raw = os.environ.get("SHEETS_FETCH_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid SHEETS_FETCH_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT


def describe_status(status: int) -> str:
    """User-facing message for a non-2xx response from Google."""
    if status in (401, 403):
        return PERMISSION_DENIED_MESSAGE.format(status=status)
    if status == 404:
        return NOT_FOUND_MESSAGE
    return f"Failed to fetch data. Status: {status}"


class SheetsFetcher:
    """Async CSV fetcher for published Google Sheets."""

    def __init__(
        self,
        allowed_hosts: Optional[tuple[str, ...]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            allowed_hosts: Hosts that may be fetched (default docs.google.com)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.allowed_hosts = tuple(h.lower() for h in (allowed_hosts or DEFAULT_ALLOWED_HOSTS))
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
            event_hooks={"request": [self._check_redirect_target]},
        )

    def is_allowed(self, url: str) -> bool:
        """True if url is https and its host is on the allow-list."""
        parsed = urlparse(url)
        return parsed.scheme == "https" and (parsed.hostname or "") in self.allowed_hosts

    def is_allowed_redirect(self, url: str) -> bool:
        """True if a redirect hop may be followed: allowed host or a Google content host."""
        parsed = urlparse(url)
        host = (parsed.hostname or "").lower()
        if parsed.scheme != "https":
            return False
        return host in self.allowed_hosts or host.endswith(REDIRECT_HOST_SUFFIXES)

    async def _check_redirect_target(self, request: httpx.Request) -> None:
        url = str(request.url)
        if not self.is_allowed_redirect(url):
            raise DisallowedRedirectError(
                f"Redirect to {request.url.host} is not allowed", request=request
            )

    def resolve_csv_url(self, url: str) -> str:
        """Rewrite a spreadsheet editor/share URL to its CSV export URL.

        URLs that already ask for CSV (publish-to-web, export, gviz) are kept.
        """
        if any(marker in url for marker in _CSV_MARKERS):
            return url
        if "/spreadsheets/d/" not in url:
            return url
        sheets_id = extract_sheets_id(url)
        if sheets_id is None:
            return url
        return sheets_csv_url(sheets_id, extract_gid(url))

    async def fetch_csv(self, url: str) -> SheetsFetchResult:
        """Fetch a sheet's CSV text.

        Args:
            url: Spreadsheet URL or published CSV URL

        Returns:
            SheetsFetchResult with ``data`` on success; never raises
        """
        url = (url or "").strip()
        if not url:
            return SheetsFetchResult(
                success=False, error="Missing sheets URL parameter", status_code=400
            )
        if not self.is_allowed(url):
            hosts = ", ".join(self.allowed_hosts)
            return SheetsFetchResult(
                success=False,
                error=f"Only https URLs on {hosts} can be fetched.",
                status_code=400,
            )

        csv_url = self.resolve_csv_url(url)
        try:
            response = await self._client.get(csv_url)
        except DisallowedRedirectError as e:
            logger.warning(f"Sheets fetch for {csv_url} blocked: {e}")
            return SheetsFetchResult(success=False, error=str(e), status_code=400)
        except httpx.HTTPError as e:
            logger.warning(f"Sheets fetch failed for {csv_url}: {e}")
            return SheetsFetchResult(
                success=False,
                error=f"Failed to fetch data: {str(e) or type(e).__name__}",
                status_code=500,
            )

        if not response.is_success:
            logger.warning(f"Sheets fetch for {csv_url} returned {response.status_code}")
            return SheetsFetchResult(
                success=False,
                error=describe_status(response.status_code),
                status_code=response.status_code,
            )

        return SheetsFetchResult(success=True, data=response.text)

    async def fetch_table(self, url: str) -> SheetsFetchResult:
        """Fetch, parse, validate and type a sheet's rows.

        Returns:
            SheetsFetchResult with ``rows`` on success; validation problems
            come back with status 422
        """
        result = await self.fetch_csv(url)
        if not result.success:
            return result

        rows = parse_csv(result.data or "")
        if not rows:
            return SheetsFetchResult(success=False, error=EMPTY_SHEET_MESSAGE, status_code=422)

        validation = validate_chart_data(rows)
        if not validation.valid:
            return SheetsFetchResult(success=False, error=validation.error, status_code=422)

        result.rows = infer_data_types(rows)
        return result

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()


# Singleton instance
_fetcher: Optional[SheetsFetcher] = None


def get_sheets_fetcher() -> SheetsFetcher:
    """Get or create the global SheetsFetcher instance."""
    global _fetcher
    if _fetcher is None:
        _fetcher = SheetsFetcher(
            allowed_hosts=_allowed_hosts_from_env(),
            timeout=_timeout_from_env(),
        )
    return _fetcher


async def close_sheets_fetcher():
    """Close and forget the global fetcher (app shutdown)."""
    global _fetcher
    if _fetcher is not None:
        await _fetcher.close()
        _fetcher = None
