from components.code_preview import CodePreview
from components.picker_preview import PickerPreview, css_px, qcolor


def test_css_px():
    assert css_px("12px") == 12
    assert css_px(" 8 ") == 8
    assert css_px(2.5) == 2.5
    assert css_px("50%", 4) == 4
    assert css_px(True, 1) == 1


def test_qcolor_falls_back():
    assert qcolor("#FF0000").name() == "#ff0000"
    assert qcolor("not a color", "#00ff00").name() == "#00ff00"
    assert qcolor(None).name() == "#000000"


def test_picker_preview_tracks_color(service):
    preview = PickerPreview(service)
    service.set_color("#FF0000")
    assert preview.color_edit.text() == "#FF0000"

    preview.color_edit.setText("#00FF00")
    preview.color_edit.editingFinished.emit()
    assert service.color() == "#00FF00"
    assert preview.canvas.color == "#00FF00"


def test_picker_preview_paints(service):
    preview = PickerPreview(service)
    preview.resize(400, 400)
    service.apply_preset("ember")
    assert not preview.grab().isNull()


def test_code_preview_follows_bus(service, bus):
    view = CodePreview(bus, service.configuration())
    assert 'useState("#06B5EF")' in view.text()
    service.set_property("isRTL", True)
    assert "isRTL={true}" in view.text()
    service.set_color("#FF0000")
    assert 'useState("#FF0000")' in view.text()
