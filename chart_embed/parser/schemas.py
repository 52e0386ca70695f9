"""Parser result schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..render_config.schemas import AnimateConfig, AnimationPreset, FrameConfig

DEFAULT_BASE_WIDTH = 700
DEFAULT_BASE_HEIGHT = 300


class EmbedDraft(BaseModel):
    """Embed-variant fields recovered from pasted markup.

    Styling and animation are placeholders here; the config builder replaces
    them with whatever the author picked before a full GoogleEmbedConfig is
    produced.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mode: Literal["google-embed"] = "google-embed"
    src: str
    base_width: float = DEFAULT_BASE_WIDTH
    base_height: float = DEFAULT_BASE_HEIGHT
    animate: AnimateConfig = Field(
        default_factory=lambda: AnimateConfig(preset=AnimationPreset.FADE_UP)
    )
    frame: FrameConfig = Field(default_factory=FrameConfig)


class ParseResult(BaseModel):
    """Outcome of parsing pasted iframe markup or a bare URL.

    ``config`` is only present when ``success`` is true. Warnings never block
    success; errors always do.
    """

    success: bool
    config: Optional[EmbedDraft] = None
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
