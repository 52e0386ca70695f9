import pytest

from chart_embed.render_config.schemas import (
    AnimateConfig,
    AnimationPreset,
    DataSource,
    EChartsConfig,
    EChartsDataSource,
    FrameConfig,
    GoogleChartsConfig,
    GoogleChartType,
    GoogleEmbedConfig,
)

from .samples import CHART_SRC, IFRAME


@pytest.fixture
def iframe_code():
    return IFRAME


@pytest.fixture
def embed_config():
    return GoogleEmbedConfig(
        src=CHART_SRC,
        base_width=600,
        base_height=371,
        animate=AnimateConfig(preset=AnimationPreset.FADE_UP, duration_ms=600),
        frame=FrameConfig(radius_px=12, border_width=2),
    )


@pytest.fixture
def charts_config():
    return GoogleChartsConfig(
        chart_type=GoogleChartType.LINE,
        data_source=DataSource(
            type="manual",
            data=[["Month", "Sales"], ["Jan", 10], ["Feb", 12.5]],
        ),
        options={"title": "Sales", "width": 800, "height": 500, "hAxis": {"title": "Month"}},
        animate=AnimateConfig(preset=AnimationPreset.POP),
    )


@pytest.fixture
def echarts_config():
    return EChartsConfig(
        animate=AnimateConfig(preset=AnimationPreset.FADE),
        data_source=EChartsDataSource(type="gviz", url="https://docs.google.com/x"),
    )
