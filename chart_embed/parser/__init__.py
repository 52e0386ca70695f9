"""Input parser: pasted iframe markup or a bare URL into an embed draft."""

from .iframe_parser import parse_iframe_input
from .schemas import EmbedDraft, ParseResult

__all__ = ["EmbedDraft", "ParseResult", "parse_iframe_input"]
