from chart_embed.codec import encode_config
from chart_embed.pages import (
    render_embed_page,
    render_embed_request,
    render_error_page,
    render_preview_page,
)


def test_missing_parameter():
    status, html = render_embed_request(None)
    assert status == 400
    assert "Missing config parameter" in html
    assert "gs-chart-wrapper" not in html


def test_invalid_parameter():
    status, html = render_embed_request("not-a-config")
    assert status == 400
    assert "Invalid config:" in html


def test_unsupported_mode(echarts_config):
    status, html = render_embed_request(encode_config(echarts_config))
    assert status == 400
    assert "Unsupported mode: echarts" in html


def test_valid_embed(embed_config):
    status, html = render_embed_request(encode_config(embed_config))
    assert status == 200
    assert html.startswith("<!DOCTYPE html>")
    assert "gs-chart-wrapper" in html
    assert "gs-embed-error" not in html.split("<body>")[1]


def test_charts_embed_page(charts_config):
    html = render_embed_page(charts_config)
    assert 'data-chart-type="LineChart"' in html


def test_preview_uses_the_snippet(embed_config):
    html = render_preview_page(embed_config)
    assert "<title>Chart preview</title>" in html
    assert "Math.min(containerWidth / baseWidth, containerHeight / baseHeight)" in html


def test_error_page_escapes_message():
    html = render_error_page("Oops", "<b>bad</b>")
    assert "<b>bad</b>" not in html
    assert "&lt;b&gt;bad&lt;/b&gt;" in html
