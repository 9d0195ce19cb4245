"""Tests for widget protocols and adapters."""


def test_adapters_satisfy_protocols(qapp):
    from academic_console.protocols import (
        ChangeSignalEmitter,
        ComboBoxAdapter,
        PlaceholderCapable,
        RangeConfigurable,
        SpinBoxAdapter,
        ValueGettable,
        ValueSettable,
    )

    combo = ComboBoxAdapter()
    spin = SpinBoxAdapter()
    for widget in (combo, spin):
        assert isinstance(widget, ValueGettable)
        assert isinstance(widget, ValueSettable)
        assert isinstance(widget, ChangeSignalEmitter)
    assert isinstance(combo, PlaceholderCapable)
    assert isinstance(spin, RangeConfigurable)


def test_combo_matches_ids_as_strings(qapp):
    """A draft holding "3" selects the option whose value is 3."""
    from academic_console.protocols import ComboBoxAdapter

    combo = ComboBoxAdapter()
    combo.set_options([(1, "2023-27 - B.Tech"), (3, "2024-28 - M.Tech")])
    combo.set_value("3")
    assert combo.get_value() == 3

    combo.set_value("missing")
    assert combo.get_value() == ""

    combo.set_value(1)
    combo.set_options([(1, "renamed"), (2, "new")])
    assert combo.get_value() == 1
    assert combo.currentText() == "renamed"


def test_spinbox_does_not_clamp_by_default(qapp):
    from academic_console.protocols import SpinBoxAdapter

    spin = SpinBoxAdapter()
    spin.set_value(-5)
    assert spin.get_value() == -5
    spin.set_value("not a number")
    assert spin.get_value() == 0


def test_checkbox_and_file_picker(qapp, tmp_path):
    from academic_console.protocols import CheckBoxAdapter, FilePickerAdapter

    check = CheckBoxAdapter()
    check.set_value(None)
    assert check.get_value() is False

    picker = FilePickerAdapter()
    changes = []
    picker.connect_change_signal(changes.append)
    document = tmp_path / "certificate.pdf"
    picker.set_value(str(document))
    assert picker.get_value() == str(document)
    assert changes == [str(document)]
    picker.set_value("")
    assert changes[-1] == ""


def test_every_adapter_is_a_field_widget(qapp):
    """set_invalid toggles the dynamic property the dialog stylesheet keys on."""
    from academic_console.protocols import (
        CheckBoxAdapter,
        FieldWidget,
        FilePickerAdapter,
        LineEditAdapter,
        ListLineEditAdapter,
        TextEditAdapter,
    )

    for adapter_class in (LineEditAdapter, ListLineEditAdapter, TextEditAdapter, CheckBoxAdapter,
                          FilePickerAdapter):
        widget = adapter_class()
        assert isinstance(widget, FieldWidget)
        widget.set_invalid(True)
        assert widget.property("invalid") == "true"
        widget.set_invalid(False)
        assert widget.property("invalid") == "false"
