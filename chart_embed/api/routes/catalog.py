"""API routes for the authoring catalog (chart types, palettes, presets)."""

from fastapi import APIRouter, HTTPException

from ...render_config.catalog_registry import get_catalog_registry
from ...render_config.catalog_schemas import ChartTypeEntry, PresetEntry

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/chart-types", response_model=list[ChartTypeEntry])
async def list_chart_types():
    """List chart types the google-charts renderer can draw."""
    return get_catalog_registry().list_chart_types()


@router.get("/palettes", response_model=dict[str, list[str]])
async def list_palettes():
    """List named colour palettes."""
    return get_catalog_registry().list_palettes()


@router.get("/palettes/{name}", response_model=list[str])
async def get_palette(name: str):
    """Get one palette's colours."""
    registry = get_catalog_registry()
    palette = registry.get_palette(name)
    if palette is None:
        available = list(registry.list_palettes())
        raise HTTPException(
            status_code=404,
            detail=f"Palette '{name}' not found. Available: {available}",
        )
    return palette


@router.get("/presets", response_model=list[PresetEntry])
async def list_presets():
    """List animation presets."""
    return get_catalog_registry().list_presets()
