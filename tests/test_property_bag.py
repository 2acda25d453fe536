import logging

import pytest

from services.property_bag import (
    EMPTY_BAG,
    diff_from_defaults,
    make_bag,
    merge,
    resolve,
    to_plain_dict,
)
from services.property_schema import DEFAULT_PROPERTIES


def test_merge_with_empty_override_is_identity():
    base = make_bag({"isRTL": True, "containerBorderWidth": 3})
    merged = merge(base, {})
    assert merged == base
    assert merged is not base


def test_merge_override_wins_and_inputs_untouched():
    base = {"isRTL": True, "hexLabel": "HEX"}
    override = {"hexLabel": "Hex"}
    merged = merge(base, override)
    assert merged == {"isRTL": True, "hexLabel": "Hex"}
    assert base == {"isRTL": True, "hexLabel": "HEX"}
    assert override == {"hexLabel": "Hex"}


def test_merged_bag_is_read_only():
    with pytest.raises(TypeError):
        merge({}, {"isRTL": True})["isRTL"] = False


def test_unknown_override_keys_are_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        merged = merge({}, {"bogus": 1, "isRTL": True})
    assert dict(merged) == {"isRTL": True}
    assert "bogus" in caplog.text


def test_lists_are_frozen():
    bag = make_bag({"enabledModes": ["hex", "rgb"]})
    assert bag["enabledModes"] == ("hex", "rgb")


def test_resolve_is_complete():
    resolved = resolve(EMPTY_BAG)
    assert resolved == DEFAULT_PROPERTIES
    resolved = resolve({"containerBorderWidth": 3})
    assert set(resolved) == set(DEFAULT_PROPERTIES)
    assert resolved["containerBorderWidth"] == 3
    assert resolved["value"] == DEFAULT_PROPERTIES["value"]


def test_diff_from_defaults_skips_default_values():
    bag = {"containerBorderWidth": 1, "isRTL": True, "value": "#FF0000"}
    assert diff_from_defaults(bag) == {"value": "#FF0000", "isRTL": True}
    assert list(diff_from_defaults(bag)) == ["value", "isRTL"]


def test_to_plain_dict_converts_tuples():
    plain = to_plain_dict(make_bag({"enabledModes": ("hex",), "isRTL": False}))
    assert plain == {"enabledModes": ["hex"], "isRTL": False}
    plain["isRTL"] = True
