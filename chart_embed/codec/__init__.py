"""Config codec: shareable, URL-safe encoding of render configs."""

from .encoding import (
    InvalidConfigError,
    build_embed_url,
    decode_config,
    encode_config,
    load_config,
    summarize_validation_error,
)

__all__ = [
    "InvalidConfigError",
    "build_embed_url",
    "decode_config",
    "encode_config",
    "load_config",
    "summarize_validation_error",
]
