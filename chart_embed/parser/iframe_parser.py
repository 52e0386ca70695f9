"""Extract src/width/height from pasted iframe markup or a bare URL.

Extraction is purely textual. The input is untrusted and is never handed to
an HTML parser or DOM, so nothing in it can run or load.
"""

import logging
import math
import re
from typing import Optional

from .schemas import DEFAULT_BASE_HEIGHT, DEFAULT_BASE_WIDTH, EmbedDraft, ParseResult

logger = logging.getLogger(__name__)

GOOGLE_DOCS_HOST = "docs.google.com"

_URL_ONLY = re.compile(r"^https?://", re.IGNORECASE)

# Quoted attribute values may contain ">"
_IFRAME_TAG = re.compile(r"<iframe\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*>", re.IGNORECASE)
_LOOSE_IFRAME_TAG = re.compile(r"<iframe\b[^>]*>", re.IGNORECASE)

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"


def _attr_pattern(name: str) -> re.Pattern:
    return re.compile(
        rf"(?:^|[\s\"'])({name})\s*=\s*(?:\"([^\"]*)\"|'([^']*)'|([^\s\"'>]+))",
        re.IGNORECASE,
    )


def _numeric_attr_pattern(name: str) -> re.Pattern:
    return re.compile(
        rf"(?:^|[\s\"']){name}\s*=\s*[\"']?\s*{_NUMBER}",
        re.IGNORECASE,
    )


_SRC_ATTR = _attr_pattern("src")
_WIDTH_ATTR = _numeric_attr_pattern("width")
_HEIGHT_ATTR = _numeric_attr_pattern("height")


def _extract_src(tag: str) -> Optional[str]:
    match = _SRC_ATTR.search(tag)
    if not match:
        return None
    value = next(g for g in match.groups()[1:] if g is not None)
    value = value.strip()
    return value or None


def _extract_dimension(tag: str, pattern: re.Pattern) -> Optional[float]:
    match = pattern.search(tag)
    if not match:
        return None
    value = float(match.group(1))
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _parse_url_only(url: str) -> ParseResult:
    warnings = [
        f"URL-only input detected. Using default dimensions "
        f"({DEFAULT_BASE_WIDTH}x{DEFAULT_BASE_HEIGHT}). "
        "Please provide full iframe code for accurate dimensions."
    ]
    if GOOGLE_DOCS_HOST not in url:
        warnings.append(
            "URL does not appear to be from docs.google.com. "
            "Ensure it's a valid Google Sheets published chart URL."
        )
    return ParseResult(
        success=True,
        config=EmbedDraft(
            src=url,
            base_width=DEFAULT_BASE_WIDTH,
            base_height=DEFAULT_BASE_HEIGHT,
        ),
        warnings=warnings,
    )


def parse_iframe_input(text: str) -> ParseResult:
    """Parse user-provided iframe embed code or a bare chart URL.

    Args:
        text: Raw pasted text

    Returns:
        ParseResult; never raises
    """
    text = (text or "").strip()
    if not text:
        return ParseResult(success=False, errors=["Input is empty"])

    # Heuristic kept as-is: any "<" disqualifies URL-only handling
    if _URL_ONLY.match(text) and "<" not in text:
        return _parse_url_only(text)

    warnings: list[str] = []
    try:
        tag_match = _IFRAME_TAG.search(text) or _LOOSE_IFRAME_TAG.search(text)
        if not tag_match:
            return ParseResult(
                success=False,
                errors=[
                    "No <iframe> tag found in input. Please paste the full "
                    "iframe embed code or just the URL."
                ],
            )
        tag = tag_match.group(0)

        src = _extract_src(tag)
        if src is None:
            return ParseResult(
                success=False,
                errors=["No src attribute found in iframe tag."],
            )

        width = _extract_dimension(tag, _WIDTH_ATTR)
        if width is None:
            width = float(DEFAULT_BASE_WIDTH)
            warnings.append(
                f"No width attribute found, defaulting to {DEFAULT_BASE_WIDTH}px."
            )

        height = _extract_dimension(tag, _HEIGHT_ATTR)
        if height is None:
            height = float(DEFAULT_BASE_HEIGHT)
            warnings.append(
                f"No height attribute found, defaulting to {DEFAULT_BASE_HEIGHT}px."
            )

        if GOOGLE_DOCS_HOST not in src:
            warnings.append(
                "The src URL does not appear to be from docs.google.com. "
                "This may not work as expected."
            )

        return ParseResult(
            success=True,
            config=EmbedDraft(src=src, base_width=width, base_height=height),
            warnings=warnings,
        )
    except Exception as e:
        logger.warning(f"Unexpected error while parsing iframe input: {e}")
        return ParseResult(
            success=False,
            warnings=warnings,
            errors=[f"Parse error: {e}"],
        )
