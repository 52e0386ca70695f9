"""Helpers shared by the route modules."""

import os
from typing import Any

from fastapi import HTTPException, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...codec import InvalidConfigError, load_config
from ...render_config.schemas import RenderConfig


class ApiModel(BaseModel):
    """Request/response body with camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def public_origin(request: Request) -> str:
    """Origin used in share URLs (CHART_EMBED_PUBLIC_ORIGIN, else the request's)."""
    configured = os.environ.get("CHART_EMBED_PUBLIC_ORIGIN")
    if configured:
        return configured.rstrip("/")
    return str(request.base_url).rstrip("/")


def config_or_400(data: dict[str, Any]) -> RenderConfig:
    """Validate a wire-form config from a request body or raise 400."""
    try:
        return load_config(data)
    except InvalidConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
