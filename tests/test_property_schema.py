import pytest

from services import property_schema
from services.property_schema import (
    DEFAULT_PROPERTIES,
    SCHEMA,
    SchemaError,
    check_value,
    coerce_input,
    default_for,
    type_of,
)
from utils.constants import PropertyType


def test_default_table_is_complete():
    assert set(DEFAULT_PROPERTIES) == set(SCHEMA)
    for key, spec in SCHEMA.items():
        assert DEFAULT_PROPERTIES[key] == spec.default
        assert check_value(key, spec.default), key


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_PROPERTIES["value"] = "#000000"


def test_known_defaults():
    assert default_for("value") == "#06B5EF"
    assert default_for("enabledModes") == ("hex", "rgb", "hsl")
    assert default_for("containerBorderWidth") == 1
    assert default_for("contrastFormat") == "value:1"
    assert default_for("colorPreviewPosition") == "contrast"


def test_every_key_has_exactly_one_type():
    assert type_of("value") is PropertyType.COLOR
    assert type_of("isRTL") is PropertyType.BOOL
    assert type_of("containerBorderWidth") is PropertyType.NUMBER
    assert type_of("containerRadius") is PropertyType.LENGTH
    assert type_of("defaultFormat") is PropertyType.CHOICE
    assert type_of("hexLabel") is PropertyType.TEXT
    assert type_of("enabledModes") is PropertyType.MODES


def test_unknown_key_raises_schema_error():
    with pytest.raises(SchemaError) as info:
        default_for("notAProperty")
    assert info.value.key == "notAProperty"
    assert "notAProperty" in str(info.value)
    # SchemaError is a KeyError so mapping-style callers can catch it
    with pytest.raises(KeyError):
        type_of("notAProperty")


def test_groups_cover_every_key_in_order():
    groups = property_schema.groups()
    assert list(groups)[0] == "General"
    flattened = [key for keys in groups.values() for key in keys]
    assert flattened == property_schema.keys()


@pytest.mark.parametrize(
    "text, expected",
    [("3", 3), ("2.5", 2.5), (" 4.0 ", 4), ("abc", 0), ("", 0), ("nan", 0), ("inf", 0)],
)
def test_coerce_numeric_input(text, expected):
    result = coerce_input("containerBorderWidth", text)
    assert result == expected
    assert type(result) is type(expected)


def test_coerce_leaves_other_types_alone():
    assert coerce_input("containerRadius", "12px") == "12px"
    assert coerce_input("hexLabel", "abc") == "abc"


def test_check_value_rejects_wrong_types():
    assert not check_value("containerBorderWidth", "wide")
    assert not check_value("containerBorderWidth", True)
    assert not check_value("isRTL", "true")
    assert not check_value("defaultFormat", "cmyk")
    assert not check_value("enabledModes", ["hex", "cmyk"])
    assert check_value("enabledModes", ["hex"])
    assert check_value("enabledModes", [])
    assert not check_value("value", 123)
