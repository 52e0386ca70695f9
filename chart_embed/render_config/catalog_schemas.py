"""Catalog schemas — what the authoring UI can offer in its pickers."""

from pydantic import BaseModel, Field

from .schemas import AnimationPreset, GoogleChartType


class ChartTypeEntry(BaseModel):
    """One selectable Google Charts visualization."""

    key: GoogleChartType
    label: str
    description: str = ""


class PresetEntry(BaseModel):
    """One selectable reveal animation."""

    key: AnimationPreset
    label: str


class Catalog(BaseModel):
    """Everything loaded from definitions/catalog.yaml."""

    chart_types: list[ChartTypeEntry] = Field(default_factory=list)
    palettes: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Palette name -> ordered list of CSS colours",
    )
    presets: list[PresetEntry] = Field(default_factory=list)
