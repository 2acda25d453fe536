import json

from PyQt6.QtTest import QSignalSpy

from services.configurator_service import (
    IMPORT_FAILURE_MESSAGE,
    ConfiguratorService,
)
from services.property_schema import DEFAULT_PROPERTIES


def test_initial_state(service):
    assert dict(service.props()) == {}
    assert service.resolved() == DEFAULT_PROPERTIES
    assert service.color() == "#06B5EF"
    assert service.max_width() == 364
    assert service.current_preset() == "default"
    assert not service.history.can_undo()


def test_set_property_merges_and_resolves(service):
    assert service.set_property("containerBorderWidth", 3)
    assert service.props()["containerBorderWidth"] == 3
    assert service.resolved()["containerBorderWidth"] == 3
    assert service.resolved()["containerRadius"] == "12px"


def test_setting_same_value_is_not_a_change(service):
    service.set_property("isRTL", True)
    spy = QSignalSpy(service.props_changed)
    assert service.set_property("isRTL", True) is False
    assert len(spy) == 0


def test_reset_property_falls_back_to_default(service):
    service.set_property("hexLabel", "Hex")
    assert service.reset_property("hexLabel")
    assert "hexLabel" not in service.props()
    assert service.resolved()["hexLabel"] == "HEX"


def test_color_follows_bag_when_props_change(service):
    seen = []
    service.props_changed.connect(lambda resolved: seen.append((resolved["value"], service.color())))
    service.set_property("value", "#FF0000")
    assert seen == [("#FF0000", "#FF0000")]
    assert service.color() == "#FF0000"


def test_widget_echo_converges_in_one_step(service):
    echoes = []

    def echo(color):
        echoes.append(color)
        service.set_color(color)

    service.color_changed.connect(echo)
    service.set_property("value", "#FF0000")
    assert echoes == ["#FF0000"]
    assert len(service.history._undo_stack) == 1


def test_set_color_updates_bag(service):
    spy = QSignalSpy(service.color_changed)
    assert service.set_color("#123456")
    assert service.props()["value"] == "#123456"
    assert len(spy) == 1
    assert service.set_color("#123456") is False
    assert service.set_color(None) is False
    assert len(spy) == 1


def test_preset_scenario(service):
    service.apply_preset("ember")
    assert service.color() == "#F97316"
    assert service.resolved()["containerBorderWidth"] == 2

    service.set_color("#123456")
    assert service.props()["value"] == "#123456"

    service.apply_preset("default")
    assert dict(service.props()) == {}
    assert service.color() == "#06B5EF"
    assert service.resolved()["containerBorderWidth"] == 1


def test_presets_are_order_independent(bus):
    direct = ConfiguratorService(bus=bus)
    direct.apply_preset("minimal")

    via = ConfiguratorService(bus=bus)
    via.apply_preset("ember")
    via.set_property("isRTL", True)
    via.apply_preset("minimal")

    assert via.resolved() == direct.resolved()
    assert via.color() == direct.color()


def test_apply_preset_emits_preset_changed(service):
    names = []
    service.preset_changed.connect(names.append)
    service.apply_preset("light")
    service.apply_preset("light")
    assert names == ["light"]


def test_unknown_preset_applies_default(service):
    service.apply_preset("light")
    service.apply_preset("no-such-preset")
    assert service.current_preset() == "default"
    assert service.color() == "#06B5EF"


def test_max_width_validation(service):
    spy = QSignalSpy(service.max_width_changed)
    assert service.set_max_width(500)
    assert service.max_width() == 500
    assert service.set_max_width("wide") is False
    assert service.set_max_width(True) is False
    assert service.set_max_width(float("nan")) is False
    assert service.max_width() == 500
    assert len(spy) == 1


def test_import_merges_onto_current_state(service):
    service.set_property("isRTL", True)
    imported = QSignalSpy(service.import_succeeded)
    doc = {"props": {"containerBorderWidth": 3, "value": "#FF0000"}, "maxWidth": 500}
    assert service.import_text(json.dumps(doc))
    assert len(imported) == 1
    assert service.props()["isRTL"] is True
    assert service.props()["containerBorderWidth"] == 3
    assert service.color() == "#FF0000"
    assert service.max_width() == 500


def test_import_is_one_undo_step(service):
    service.import_text('{"props": {"containerBorderWidth": 3, "value": "#FF0000"}, "maxWidth": 500}')
    assert service.undo()
    assert dict(service.props()) == {}
    assert service.color() == "#06B5EF"
    assert service.max_width() == 364


def test_failed_import_leaves_state_untouched(service):
    service.set_property("containerBorderWidth", 3)
    before = service.state()
    failures = []
    service.import_failed.connect(failures.append)
    for text in ("{not json", '{"nope": 1}', '{"props": [1, 2]}', "[]"):
        assert service.import_text(text) is False
        assert service.state() == before
    assert failures == [IMPORT_FAILURE_MESSAGE] * 4
    assert service.history.undo_text() == "Edit containerBorderWidth"


def test_import_ignores_unknown_keys_and_nulls(service):
    service.set_property("containerBorderWidth", 3)
    assert service.import_text('{"props": {"bogus": 1, "containerBorderWidth": null, "isRTL": true}}')
    assert "bogus" not in service.props()
    assert service.props()["containerBorderWidth"] == 3
    assert service.props()["isRTL"] is True


def test_import_with_bad_max_width_keeps_width(service):
    service.set_max_width(500)
    assert service.import_text('{"props": {}, "maxWidth": "wide"}')
    assert service.max_width() == 500


def test_strict_import_drops_wrong_types(bus):
    strict = ConfiguratorService(bus=bus, strict_import=True)
    strict.import_text('{"props": {"containerBorderWidth": "wide", "isRTL": true}}')
    assert "containerBorderWidth" not in strict.props()
    assert strict.props()["isRTL"] is True


def test_permissive_import_keeps_wrong_types(service):
    service.import_text('{"props": {"containerBorderWidth": "wide"}}')
    assert service.props()["containerBorderWidth"] == "wide"


def test_export_import_round_trip(bus):
    source = ConfiguratorService(bus=bus)
    source.apply_preset("rtl")
    source.set_properties({"containerBorderWidth": 3, "enabledModes": ["hex", "rgb"]})
    source.set_color("#ABCDEF")
    source.set_max_width(420)

    target = ConfiguratorService(bus=bus)
    assert target.import_text(source.export_text())
    assert target.props() == source.props()
    assert target.resolved() == source.resolved()
    assert target.color() == "#ABCDEF"
    assert target.max_width() == 420


def test_export_document_contains_only_set_keys(service):
    service.set_property("isRTL", True)
    assert service.export_document() == {"props": {"isRTL": True}, "maxWidth": 364}


def test_export_and_import_file(service, tmp_path, bus):
    service.set_property("hexLabel", "Hex")
    path = tmp_path / "out" / "color-picker-config.json"
    service.export_file(str(path))

    other = ConfiguratorService(bus=bus)
    assert other.import_file(str(path))
    assert other.props()["hexLabel"] == "Hex"


def test_import_missing_file_fails(service, tmp_path):
    failures = []
    service.import_failed.connect(failures.append)
    assert service.import_file(str(tmp_path / "missing.json")) is False
    assert failures == [IMPORT_FAILURE_MESSAGE]


def test_import_file_async_applies_result(service, tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"props": {"isRTL": true}, "maxWidth": 300}', encoding="utf-8")
    signals, runnable = service.import_file_async(str(path))
    done = QSignalSpy(service.import_succeeded)
    runnable.run()
    assert len(done) == 1
    assert service.props()["isRTL"] is True
    assert service.max_width() == 300


def test_import_file_async_reports_read_errors(service, tmp_path):
    failures = []
    service.import_failed.connect(failures.append)
    _signals, runnable = service.import_file_async(str(tmp_path / "missing.json"))
    runnable.run()
    assert failures == [IMPORT_FAILURE_MESSAGE]


def test_undo_redo_restores_color(service):
    service.set_property("value", "#FF0000")
    service.apply_preset("minimal")
    assert service.color() == "#06B5EF"

    assert service.undo()
    assert service.color() == "#FF0000"
    assert service.current_preset() == "default"
    assert service.redo()
    assert service.current_preset() == "minimal"
    assert service.color() == "#06B5EF"


def test_consecutive_color_changes_merge(service):
    for color in ("#111111", "#222222", "#333333"):
        service.set_color(color)
    assert len(service.history._undo_stack) == 1
    assert service.history.undo_text() == "Change Color"
    service.undo()
    assert service.color() == "#06B5EF"


def test_reset_clears_history(service):
    service.apply_preset("ember")
    service.set_max_width(600)
    service.reset()
    assert service.current_preset() == "default"
    assert service.max_width() == 364
    assert dict(service.props()) == {}
    assert not service.history.can_undo()


def test_bus_receives_configuration(service, bus):
    published = []
    bus.configuration_changed.connect(published.append)
    service.set_property("isRTL", True)
    assert published
    config = published[-1]
    assert config["props"]["isRTL"] is True
    assert config["color"] == "#06B5EF"
    assert config["maxWidth"] == 364


def test_huge_number_import_still_round_trips(bus):
    source = ConfiguratorService(bus=bus)
    assert source.import_text('{"props": {"saturationHeight": 1e400, "isRTL": true}}')
    assert "saturationHeight" not in source.props()

    target = ConfiguratorService(bus=bus)
    assert target.import_text(source.export_text())
    assert target.resolved() == source.resolved()


def test_edit_preset_export_import_scenario(bus):
    engine = ConfiguratorService(bus=bus)
    engine.set_property("containerBorderWidth", 3)
    assert engine.resolved()["containerBorderWidth"] == 3

    engine.apply_preset("minimal")
    assert engine.resolved()["value"] == DEFAULT_PROPERTIES["value"]
    assert engine.color() == DEFAULT_PROPERTIES["value"]
    assert engine.resolved()["containerBorderWidth"] == 1

    exported = engine.export_text()
    fresh = ConfiguratorService(bus=bus)
    assert fresh.import_text(exported)
    assert fresh.resolved() == engine.resolved()
    assert fresh.color() == engine.color()
    assert fresh.max_width() == engine.max_width()
