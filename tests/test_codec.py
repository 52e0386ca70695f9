import base64
import json
import re

import pytest

from chart_embed.codec import (
    InvalidConfigError,
    build_embed_url,
    decode_config,
    encode_config,
    load_config,
)
from chart_embed.render_config.schemas import (
    AnimateConfig,
    AnimationPreset,
    FrameConfig,
    GoogleChartsConfig,
    GoogleEmbedConfig,
    dump_render_config,
)


def _encode_raw(payload) -> str:
    raw = json.dumps(payload).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decode_raw(encoded: str):
    padded = encoded + "=" * (-len(encoded) % 4)
    return json.loads(base64.urlsafe_b64decode(padded))


def test_round_trip_embed(embed_config):
    assert decode_config(encode_config(embed_config)) == embed_config


def test_round_trip_charts_keeps_unknown_options(charts_config):
    decoded = decode_config(encode_config(charts_config))
    assert isinstance(decoded, GoogleChartsConfig)
    assert decoded == charts_config
    assert dump_render_config(decoded)["options"]["hAxis"] == {"title": "Month"}
    assert decoded.data_source.data == [["Month", "Sales"], ["Jan", 10], ["Feb", 12.5]]


PASSTHROUGH_OPTIONS = [
    {"interpolateNulls": None},
    {"vAxis": {"minValue": None, "maxValue": 10}},
    {"series": [{"type": "line"}, None, {"color": "#000"}]},
    {"hAxis": {"gridlines": {"count": None, "units": {"years": {"format": ["yyyy"]}}}}},
    {"isStacked": None, "vAxes": {"0": {"title": None}}, "ticks": [1, None, 2.5]},
    {"legend": {"position": "top", "textStyle": None}},
]


@pytest.mark.parametrize("options", PASSTHROUGH_OPTIONS)
def test_round_trip_keeps_passthrough_values(options):
    config = GoogleChartsConfig(
        chart_type="LineChart",
        data_source={"type": "manual", "data": [["a", "b"], ["x", None]]},
        options=options,
        animate=AnimateConfig(preset=AnimationPreset.FADE),
    )
    decoded = decode_config(encode_config(config))
    assert decoded == config
    wire_options = _decode_raw(encode_config(config))["options"]
    for key, value in options.items():
        assert wire_options[key] == value


def test_unset_typed_options_stay_absent():
    config = GoogleChartsConfig(
        chart_type="LineChart",
        data_source={"type": "manual"},
        options={"interpolateNulls": None},
        animate=AnimateConfig(preset=AnimationPreset.FADE),
    )
    wire_options = _decode_raw(encode_config(config))["options"]
    assert wire_options == {"interpolateNulls": None}
    assert "data" not in _decode_raw(encode_config(config))["dataSource"]


def test_round_trip_echarts(echarts_config):
    assert decode_config(encode_config(echarts_config)) == echarts_config


def test_encoded_is_url_safe(embed_config):
    encoded = encode_config(embed_config)
    assert re.fullmatch(r"[A-Za-z0-9_-]+", encoded)


def test_wire_form_is_camel_case(embed_config):
    payload = _decode_raw(encode_config(embed_config))
    assert payload["mode"] == "google-embed"
    assert payload["baseWidth"] == 600
    assert payload["frame"]["radiusPx"] == 12
    assert payload["animate"]["durationMs"] == 600


def test_absent_background_stays_absent(embed_config):
    payload = _decode_raw(encode_config(embed_config))
    assert "backgroundColor" not in payload["frame"]
    assert decode_config(encode_config(embed_config)).frame.background_color is None


def test_non_ascii_round_trip():
    config = GoogleChartsConfig(
        chart_type="PieChart",
        data_source={"type": "manual", "data": [["Région", "Ventes €"], ["Île", 3]]},
        options={"title": "Résumé 📈"},
        animate=AnimateConfig(preset=AnimationPreset.REVEAL),
    )
    assert decode_config(encode_config(config)) == config


def test_standard_alphabet_with_padding_is_accepted(embed_config):
    encoded = encode_config(embed_config)
    standard = encoded.replace("-", "+").replace("_", "/")
    standard += "=" * (-len(standard) % 4)
    assert decode_config(standard) == embed_config


@pytest.mark.parametrize("text", ["", "not base64!", "@@@@"])
def test_bad_encoding(text):
    with pytest.raises(InvalidConfigError) as exc_info:
        decode_config(text)
    assert str(exc_info.value).startswith("Invalid config: ")


def test_malformed_json():
    text = base64.urlsafe_b64encode(b"{not json").decode("ascii").rstrip("=")
    with pytest.raises(InvalidConfigError, match="^Invalid config: malformed JSON"):
        decode_config(text)


def test_json_that_is_not_an_object():
    with pytest.raises(InvalidConfigError, match="expected a JSON object"):
        decode_config(_encode_raw([1, 2, 3]))


def test_schema_mismatch():
    with pytest.raises(InvalidConfigError, match="^Invalid config: "):
        decode_config(_encode_raw({"mode": "google-embed", "src": "https://docs.google.com/x"}))


def test_unknown_mode():
    with pytest.raises(InvalidConfigError):
        decode_config(_encode_raw({"mode": "highcharts", "animate": {"preset": "fade"}}))


def test_unknown_top_level_key_is_rejected(embed_config):
    payload = dump_render_config(embed_config)
    payload["extra"] = True
    with pytest.raises(InvalidConfigError):
        decode_config(_encode_raw(payload))


def test_out_of_range_duration_is_rejected(embed_config):
    payload = dump_render_config(embed_config)
    payload["animate"]["durationMs"] = 9000
    with pytest.raises(InvalidConfigError, match="durationMs"):
        decode_config(_encode_raw(payload))


def test_non_http_src_is_rejected(embed_config):
    payload = dump_render_config(embed_config)
    payload["src"] = "javascript:alert(1)"
    with pytest.raises(InvalidConfigError):
        decode_config(_encode_raw(payload))


def test_nan_constant_is_rejected():
    text = base64.urlsafe_b64encode(b'{"mode":"google-embed","baseWidth":NaN}').decode("ascii")
    with pytest.raises(InvalidConfigError, match="malformed JSON"):
        decode_config(text.rstrip("="))


def test_load_config_from_dict(embed_config):
    assert load_config(dump_render_config(embed_config)) == embed_config


def test_build_embed_url(embed_config):
    url = build_embed_url("https://charts.example.com/", embed_config)
    assert url == f"https://charts.example.com/embed?c={encode_config(embed_config)}"


def test_embed_config_with_background_round_trips():
    config = GoogleEmbedConfig(
        src="https://docs.google.com/chart",
        base_width=700,
        base_height=300,
        animate=AnimateConfig(preset=AnimationPreset.FADE),
        frame=FrameConfig(background_color="#ffffff"),
    )
    decoded = decode_config(encode_config(config))
    assert decoded.frame.background_color == "#ffffff"
