"""Tests for the centralized theme system."""

from dataclasses import fields, replace
from unittest.mock import MagicMock, patch

from PySide6.QtCore import Qt
from pytestqt.qtbot import QtBot

from soundsnacks.ui.theme import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    ThemeManager,
)


class TestThemePalette:
    """Test ThemePalette dataclass."""

    def test_dark_palette_name(self) -> None:
        assert DARK_PALETTE.name == "dark"

    def test_light_palette_name(self) -> None:
        assert LIGHT_PALETTE.name == "light"

    def test_palette_is_frozen(self) -> None:
        """Test that palette is immutable."""
        try:
            DARK_PALETTE.background = "#000000"  # type: ignore[misc]
            raise AssertionError("Should have raised FrozenInstanceError")
        except AttributeError:
            pass

    def test_palettes_have_all_fields(self) -> None:
        """Test that every color field is filled in both palettes."""
        for palette in (DARK_PALETTE, LIGHT_PALETTE):
            for f in fields(palette):
                assert getattr(palette, f.name).startswith("#"), f.name

    def test_playing_border_stands_out(self) -> None:
        """Test that playing and paused borders differ in both palettes."""
        for palette in (DARK_PALETTE, LIGHT_PALETTE):
            assert palette.tile_playing != palette.tile_paused

    def test_palette_name_non_hex_background(self) -> None:
        """Test name property with a non-hex background color."""
        palette = replace(DARK_PALETTE, background="rgb(30, 30, 30)")
        assert palette.name == "dark"

    def test_palette_name_follows_background(self) -> None:
        assert replace(DARK_PALETTE, background="#fafafa").name == "light"
        assert replace(LIGHT_PALETTE, background="#101010").name == "dark"


class TestThemeManager:
    """Test ThemeManager."""

    def test_default_palette_is_dark(self) -> None:
        manager = ThemeManager()
        assert manager.palette.name == "dark"
        assert manager.is_dark

    def test_apply_light_theme(self, qtbot: QtBot) -> None:
        manager = ThemeManager()
        manager.apply_theme(LIGHT_PALETTE)
        assert manager.palette is LIGHT_PALETTE
        assert not manager.is_dark

    def test_theme_changed_signal(self, qtbot: QtBot) -> None:
        """Test that theme_changed emits on a palette switch."""
        manager = ThemeManager()
        with qtbot.waitSignal(manager.theme_changed):
            manager.apply_theme(LIGHT_PALETTE)

    def test_theme_changed_not_emitted_for_same_theme(self, qtbot: QtBot) -> None:
        manager = ThemeManager()
        with qtbot.assertNotEmitted(manager.theme_changed):
            manager.apply_theme(DARK_PALETTE)

    def test_apply_theme_sets_app_stylesheet(self, qtbot: QtBot) -> None:
        from PySide6.QtWidgets import QApplication

        manager = ThemeManager()
        manager.apply_theme(LIGHT_PALETTE)
        app = QApplication.instance()
        assert LIGHT_PALETTE.scrollbar in app.styleSheet()  # type: ignore[union-attr]

    def test_global_stylesheet_uses_palette(self) -> None:
        manager = ThemeManager()
        stylesheet = manager._global_stylesheet()
        assert "QToolTip" in stylesheet
        assert "QScrollBar" in stylesheet
        assert DARK_PALETTE.scrollbar in stylesheet

    def test_global_stylesheet_styles_window_chrome(self) -> None:
        """Test that the toolbar and status bar follow the palette."""
        manager = ThemeManager()
        manager.apply_theme(LIGHT_PALETTE)
        stylesheet = manager._global_stylesheet()
        assert "QToolBar" in stylesheet
        assert "QStatusBar" in stylesheet
        assert LIGHT_PALETTE.text_secondary in stylesheet
        assert LIGHT_PALETTE.surface_elevated in stylesheet


class TestPreferences:
    """Test stored theme preferences."""

    def test_pinned_light(self, qtbot: QtBot) -> None:
        manager = ThemeManager()
        manager.apply_preference("light")
        assert manager.palette is LIGHT_PALETTE

    def test_pinned_theme_ignores_system_changes(self, qtbot: QtBot) -> None:
        """Test that a pinned theme is kept when the system scheme flips."""
        manager = ThemeManager()
        manager.apply_preference("light")
        with patch.object(manager, "detect_system_theme", return_value=DARK_PALETTE):
            manager._on_system_theme_changed()
        assert manager.palette is LIGHT_PALETTE

    def test_system_preference_follows_changes(self, qtbot: QtBot) -> None:
        manager = ThemeManager()
        manager.apply_preference("dark")
        manager.apply_preference("system")
        with patch.object(manager, "detect_system_theme", return_value=LIGHT_PALETTE):
            manager._on_system_theme_changed()
        assert manager.palette is LIGHT_PALETTE

    def test_unknown_preference_means_system(self, qtbot: QtBot) -> None:
        manager = ThemeManager()
        with patch.object(manager, "detect_system_theme", return_value=LIGHT_PALETTE):
            manager.apply_preference("neon")
        assert manager.palette is LIGHT_PALETTE


class TestSystemDetection:
    """Test ThemeManager with mocked Qt APIs."""

    def test_detect_system_theme_no_app(self) -> None:
        manager = ThemeManager()
        with patch("soundsnacks.ui.theme.QGuiApplication.instance", return_value=None):
            assert manager.detect_system_theme() is DARK_PALETTE

    def test_detect_system_theme_light_mode(self) -> None:
        mock_hints = MagicMock()
        mock_hints.colorScheme.return_value = Qt.ColorScheme.Light
        mock_app = MagicMock()
        mock_app.styleHints.return_value = mock_hints

        manager = ThemeManager()
        with patch("soundsnacks.ui.theme.QGuiApplication.instance", return_value=mock_app):
            assert manager.detect_system_theme() is LIGHT_PALETTE

    def test_detect_system_theme_no_color_scheme_api(self) -> None:
        """Test fallback to dark when colorScheme is not available."""
        mock_hints = MagicMock()
        mock_hints.colorScheme.side_effect = AttributeError("no colorScheme")
        mock_app = MagicMock()
        mock_app.styleHints.return_value = mock_hints

        manager = ThemeManager()
        with patch("soundsnacks.ui.theme.QGuiApplication.instance", return_value=mock_app):
            assert manager.detect_system_theme() is DARK_PALETTE

    def test_connect_system_theme_changes_no_api(self) -> None:
        mock_hints = MagicMock()
        mock_hints.colorSchemeChanged.connect.side_effect = AttributeError("no signal")
        mock_app = MagicMock()
        mock_app.styleHints.return_value = mock_hints

        manager = ThemeManager()
        with patch("soundsnacks.ui.theme.QGuiApplication.instance", return_value=mock_app):
            manager.connect_system_theme_changes()
