"""Tests for theming system."""


def test_color_scheme_creation():
    """Test ColorScheme instantiation and conversions."""
    from pyqt_inspector.theming import ColorScheme

    scheme = ColorScheme()
    assert scheme.to_hex((255, 0, 16)) == "#ff0010"
    assert scheme.to_hex(scheme.window_bg) == "#1e1e1e"
    assert "editable_value" in scheme.get_color_dict()


def test_to_qcolor(qapp):
    """Test QColor conversion."""
    from pyqt_inspector.theming import ColorScheme

    color = ColorScheme().to_qcolor((1, 2, 3))
    assert (color.red(), color.green(), color.blue()) == (1, 2, 3)


def test_light_theme():
    """Test light theme differs from the dark default."""
    from pyqt_inspector.theming import ColorScheme

    light = ColorScheme.create_light_theme()
    assert light.window_bg != ColorScheme().window_bg
    assert light.text_primary == (0, 0, 0)


def test_style_generator():
    """Test style sheets use the scheme's colors."""
    from pyqt_inspector.theming import ColorScheme, StyleSheetGenerator

    scheme = ColorScheme()
    styles = StyleSheetGenerator(scheme)

    assert styles.generate_label_style(scheme.field_name) == "color: #99ccff;"
    assert styles.generate_label_style(scheme.field_name, 11) == "color: #99ccff; font-size: 11pt;"
    assert scheme.to_hex(scheme.editing_border) in styles.generate_drag_value_style(editing=True)
    assert scheme.to_hex(scheme.editable_value) in styles.generate_drag_value_style(editing=False)
    for style in (styles.generate_window_style(), styles.generate_list_style(),
                  styles.generate_tab_bar_style(), styles.generate_card_style(),
                  styles.generate_button_style()):
        assert style.strip()
