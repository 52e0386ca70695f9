"""Config codec — RenderConfig <-> URL-safe string for shareable embed URLs.

Encoding: compact JSON -> UTF-8 -> base64url with the "=" padding stripped.
Decoding reverses that, then re-validates against the RenderConfig schema.
Every decode failure surfaces as InvalidConfigError; a partially populated
config is never returned.
"""

import base64
import binascii
import json
import logging
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from ..render_config.schemas import dump_render_config, validate_render_config

logger = logging.getLogger(__name__)

_BASE64_CHARS = re.compile(r"^[A-Za-z0-9+/_-]*={0,2}$")


class InvalidConfigError(ValueError):
    """Raised when an encoded config cannot be decoded into a valid RenderConfig."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid config: {reason}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported JSON constant {name}")


def summarize_validation_error(error: ValidationError) -> str:
    """One-line "loc: msg; ..." summary of a pydantic ValidationError."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


def encode_config(config: BaseModel) -> str:
    """Encode a RenderConfig as an unpadded base64url string.

    Args:
        config: Any RenderConfig variant

    Returns:
        String containing only [A-Za-z0-9_-]
    """
    payload = json.dumps(
        dump_render_config(config),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    encoded = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def decode_config(text: str):
    """Decode and validate a string produced by encode_config.

    Standard base64 (``+``, ``/``, padded) is accepted as well.

    Args:
        text: Encoded config, typically the ``c`` query parameter

    Returns:
        The matching RenderConfig variant

    Raises:
        InvalidConfigError: On bad encoding, malformed JSON or schema mismatch
    """
    if not isinstance(text, str) or not text:
        raise InvalidConfigError("empty config string")
    if not _BASE64_CHARS.match(text):
        raise InvalidConfigError("not a base64url string")

    standard = text.rstrip("=").replace("-", "+").replace("_", "/")
    standard += "=" * (-len(standard) % 4)

    try:
        raw = base64.b64decode(standard, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidConfigError(f"bad base64 encoding ({e})") from None

    try:
        data = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise InvalidConfigError(f"malformed JSON ({e})") from None

    return load_config(data)


def load_config(data: Any):
    """Validate an already-parsed wire-form config.

    Raises:
        InvalidConfigError: If data is not an object or matches no variant
    """
    if not isinstance(data, dict):
        raise InvalidConfigError("expected a JSON object")

    try:
        return validate_render_config(data)
    except ValidationError as e:
        reason = summarize_validation_error(e)
        logger.debug(f"Rejected decoded config: {reason}")
        raise InvalidConfigError(reason) from None
    except RecursionError:
        raise InvalidConfigError("config nested too deeply") from None


def build_embed_url(origin: str, config: BaseModel) -> str:
    """Shareable standalone embed URL: ``<origin>/embed?c=<encoded>``."""
    return f"{origin.rstrip('/')}/embed?c={encode_config(config)}"
