"""Tests for theming system."""


def test_color_scheme_hex_and_contrast():
    """Light scheme text is readable on its panels."""
    from academic_console.theming import ColorScheme

    scheme = ColorScheme.create_light_theme()
    assert scheme.to_hex((255, 0, 16)) == "#ff0010"
    assert scheme.validate_wcag_contrast(scheme.text_primary, scheme.panel_bg)
    assert not scheme.validate_wcag_contrast((200, 200, 200), (255, 255, 255))


def test_dark_theme_differs():
    from academic_console.theming import ColorScheme

    light = ColorScheme.create_light_theme().get_color_dict()
    dark = ColorScheme.create_dark_theme().get_color_dict()
    assert light.keys() == dark.keys()
    assert light["panel_bg"] != dark["panel_bg"]


def test_notification_style_follows_kind():
    from academic_console.theming import ColorScheme, StyleSheetGenerator

    scheme = ColorScheme()
    generator = StyleSheetGenerator(scheme)
    assert scheme.to_hex(scheme.status_error) in generator.generate_notification_style(is_error=True)
    assert scheme.to_hex(scheme.status_success) in generator.generate_notification_style(is_error=False)
    assert generator.get_status_color_hex("error") == scheme.to_hex(scheme.status_error)


def test_dialog_style_marks_invalid_inputs():
    from academic_console.theming import ColorScheme, StyleSheetGenerator

    scheme = ColorScheme()
    style = StyleSheetGenerator(scheme).generate_dialog_style()
    assert 'invalid="true"' in style
    assert scheme.to_hex(scheme.input_error_border) in style


def test_button_variants(qapp):
    """Delete buttons use the error color; unknown variants fail loudly."""
    import pytest

    from academic_console.theming import ColorScheme, StyleSheetGenerator

    scheme = ColorScheme()
    generator = StyleSheetGenerator(scheme)
    assert scheme.to_hex(scheme.status_error) in generator.generate_button_style("danger")
    assert scheme.to_hex(scheme.button_normal_bg) in generator.generate_button_style()
    assert "QPushButton:checked" in generator.generate_page_button_style()
    assert generator.get_status_color_hex("info") == scheme.to_hex(scheme.text_accent)
    with pytest.raises(ValueError, match="Unknown button variant"):
        generator.generate_button_style("ghost")
