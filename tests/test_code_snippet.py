from services.code_snippet import format_prop, render_snippet
from services.property_schema import DEFAULT_PROPERTIES


def _prop_lines(snippet):
    lines = [line.strip() for line in snippet.splitlines()]
    start = lines.index("onValueChange={setColor}") + 1
    end = lines.index("/>")
    return lines[start:end]


def test_default_configuration_has_no_extra_props():
    snippet = render_snippet(DEFAULT_PROPERTIES, "#06B5EF", 364)
    assert 'useState("#06B5EF")' in snippet
    assert 'maxWidth: "364px"' in snippet
    assert _prop_lines(snippet) == []
    assert snippet.endswith("}\n")


def test_changed_props_in_schema_order():
    props = dict(DEFAULT_PROPERTIES)
    props.update({"containerBorderWidth": 3, "enabledModes": ("hex",), "isRTL": True})
    snippet = render_snippet(props, "#06B5EF", 364)
    assert _prop_lines(snippet) == [
        "isRTL={true}",
        'enabledModes={["hex"]}',
        "containerBorderWidth={3}",
    ]


def test_color_is_state_not_prop():
    snippet = render_snippet({"value": "#FF0000"}, "#FF0000", 364)
    assert 'useState("#FF0000")' in snippet
    assert _prop_lines(snippet) == []


def test_integral_float_width():
    assert 'maxWidth: "420px"' in render_snippet({}, "#000", 420.0)


def test_format_prop():
    assert format_prop("hexLabel", "HEX") == 'hexLabel="HEX"'
    assert format_prop("showContrast", False) == "showContrast={false}"
    assert format_prop("badgeIconStrokeWidth", 2.25) == "badgeIconStrokeWidth={2.25}"
    assert format_prop("hexLabel", 'say "hi"') == 'hexLabel="say \\"hi\\""'
