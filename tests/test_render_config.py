import pytest
from pydantic import ValidationError

from chart_embed.parser import EmbedDraft
from chart_embed.render_config.builder import build_charts_config, build_embed_config
from chart_embed.render_config.catalog_registry import CatalogRegistry, get_catalog_registry
from chart_embed.render_config.schemas import (
    AnimateConfig,
    AnimationPreset,
    GoogleChartType,
    GoogleEmbedConfig,
    dump_render_config,
    validate_render_config,
)

from .samples import CHART_SRC


# -- Schemas --


def test_embed_requires_positive_dimensions():
    with pytest.raises(ValidationError):
        GoogleEmbedConfig(
            src=CHART_SRC,
            base_width=0,
            base_height=300,
            animate=AnimateConfig(preset=AnimationPreset.FADE),
        )


def test_embed_rejects_infinite_dimensions():
    with pytest.raises(ValidationError):
        GoogleEmbedConfig(
            src=CHART_SRC,
            base_width=float("inf"),
            base_height=300,
            animate=AnimateConfig(preset=AnimationPreset.FADE),
        )


def test_configs_are_frozen(embed_config):
    with pytest.raises(ValidationError):
        embed_config.base_width = 10


def test_discriminator_selects_variant(charts_config):
    config = validate_render_config(dump_render_config(charts_config))
    assert config.mode == "google-charts"
    assert config.chart_type is GoogleChartType.LINE


def test_unknown_chart_type_is_rejected(charts_config):
    payload = dump_render_config(charts_config)
    payload["chartType"] = "RadarChart"
    with pytest.raises(ValidationError):
        validate_render_config(payload)


def test_unknown_frame_key_is_rejected(embed_config):
    payload = dump_render_config(embed_config)
    payload["frame"]["shadow"] = True
    with pytest.raises(ValidationError):
        validate_render_config(payload)


def test_frame_ranges(embed_config):
    payload = dump_render_config(embed_config)
    payload["frame"]["radiusPx"] = 25
    with pytest.raises(ValidationError):
        validate_render_config(payload)


# -- Builder --


def test_build_embed_config_clamps_options():
    draft = EmbedDraft(src=CHART_SRC, base_width=600, base_height=371)
    config = build_embed_config(
        draft,
        preset="reveal",
        duration_ms=99999,
        radius_px=100,
        border_width=-3,
        background_color="",
    )
    assert config.animate.preset is AnimationPreset.REVEAL
    assert config.animate.duration_ms == 5000
    assert config.frame.radius_px == 24
    assert config.frame.border_width == 0
    assert config.frame.border_color == "#76B900"
    assert config.frame.background_color is None
    assert (config.base_width, config.base_height) == (600, 371)


def test_build_embed_config_defaults():
    config = build_embed_config(EmbedDraft(src=CHART_SRC))
    assert config.animate.preset is AnimationPreset.FADE_UP
    assert config.animate.duration_ms == 600
    assert (config.base_width, config.base_height) == (700, 300)


def test_build_charts_config_defaults():
    config = build_charts_config(data=[["a", "b"], ["x", 1]])
    assert config.chart_type is GoogleChartType.COLUMN
    assert config.data_source.type == "manual"
    options = dump_render_config(config)["options"]
    assert options["width"] == 800
    assert options["height"] == 500
    assert options["legend"] == {"position": "bottom"}
    assert options["chartArea"] == {"width": "80%", "height": "70%"}
    assert options["colors"][0] == "#76B900"


def test_build_charts_config_sheets_source_and_extra_options():
    config = build_charts_config(
        sheets_url="https://docs.google.com/spreadsheets/d/abc/edit",
        chart_type="PieChart",
        palette="material",
        extra_options={"pieHole": 0.4},
    )
    assert config.data_source.type == "sheets"
    assert config.data_source.data is None
    options = dump_render_config(config)["options"]
    assert options["pieHole"] == 0.4
    assert options["colors"][0] == "#3366CC"


def test_build_charts_config_unknown_palette():
    with pytest.raises(ValueError, match="Unknown palette: neon"):
        build_charts_config(data=[["a"], ["b"]], palette="neon")


# -- Catalog --


def test_catalog_contents():
    registry = get_catalog_registry()
    assert registry.count() == 8
    assert {entry.key for entry in registry.list_chart_types()} == set(GoogleChartType)
    assert [entry.key for entry in registry.list_presets()] == list(AnimationPreset)
    assert set(registry.list_palettes()) == {"nvidia", "material", "pastel", "vibrant"}


def test_catalog_missing_definitions_dir(tmp_path):
    registry = CatalogRegistry(definitions_dir=tmp_path)
    assert registry.count() == 0
    assert registry.get_palette("nvidia") is None
