from services.presets import get_preset, get_presets
from services.property_bag import resolve
from services.property_schema import DEFAULT_PROPERTIES, check_value, is_known


def test_default_preset_is_empty():
    assert dict(get_preset("default").props) == {}
    assert list(get_presets())[0] == "default"


def test_unknown_preset_falls_back_to_default():
    assert get_preset("does-not-exist").name == "default"


def test_presets_only_use_known_well_typed_keys():
    for preset in get_presets().values():
        for key, value in preset.props.items():
            assert is_known(key), (preset.name, key)
            assert check_value(key, value), (preset.name, key)


def test_resolved_presets_are_complete():
    for preset in get_presets().values():
        assert set(resolve(preset.props)) == set(DEFAULT_PROPERTIES)


def test_preset_without_color_keeps_default_color():
    minimal = get_preset("minimal")
    assert "value" not in minimal.props
    assert resolve(minimal.props)["value"] == DEFAULT_PROPERTIES["value"]
