"""Window colors and dark/light switching.

The palette covers chrome only: window, dialogs, borders and the state
rings drawn around tiles. A tile's fill is its category color, which is
user data and never comes from here.

Usage:
    from soundsnacks.ui.theme import theme_manager

    p = theme_manager.palette
    label.setStyleSheet(f"color: {p.text_secondary};")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from soundsnacks.models.color import relative_luminance
from soundsnacks.ui.tokens import sizing, spacing

logger = logging.getLogger(__name__)

_DARK_LUMINANCE = 0.2


@dataclass(frozen=True)
class ThemePalette:
    """Chrome colors as CSS hex strings."""

    background: str
    surface: str
    surface_hover: str
    surface_selected: str
    surface_dim: str  # inputs
    surface_elevated: str  # dialogs over the grid
    border: str
    border_selected: str
    text: str
    text_secondary: str
    text_disabled: str
    error: str
    warning: str  # destructive buttons
    accent: str
    scrollbar: str
    scrollbar_hover: str
    tile_playing: str
    tile_paused: str
    drop_target: str

    @property
    def name(self) -> str:
        """Return 'dark' or 'light' based on background luminance."""
        if not self.background.startswith("#"):
            return "dark"
        return "dark" if relative_luminance(self.background) < _DARK_LUMINANCE else "light"


DARK_PALETTE = ThemePalette(
    background="#1e1e1e",
    surface="#2d2d2d",
    surface_hover="#404040",
    surface_selected="#3a3a5a",
    surface_dim="#2a2a2a",
    surface_elevated="#353535",
    border="#333333",
    border_selected="#6a6a9a",
    text="#e0e0e0",
    text_secondary="#aaaaaa",
    text_disabled="#666666",
    error="#F44336",
    warning="#ffff80",
    accent="#FF8C00",
    scrollbar="#555555",
    scrollbar_hover="#777777",
    tile_playing="#ffffff",
    tile_paused="#aaaaaa",
    drop_target="#FF8C00",
)

LIGHT_PALETTE = ThemePalette(
    background="#f5f5f5",
    surface="#ffffff",
    surface_hover="#e8e8e8",
    surface_selected="#d0d0f0",
    surface_dim="#eeeeee",
    surface_elevated="#f0f0f0",
    border="#cccccc",
    border_selected="#8080c0",
    text="#1a1a1a",
    text_secondary="#555555",
    text_disabled="#999999",
    error="#D32F2F",
    warning="#F9A825",
    accent="#E67E00",
    scrollbar="#bbbbbb",
    scrollbar_hover="#999999",
    tile_playing="#1a1a1a",
    tile_paused="#777777",
    drop_target="#E67E00",
)


def _gui_app() -> QGuiApplication | None:
    raw_app = QGuiApplication.instance()
    return None if raw_app is None else cast(QGuiApplication, raw_app)


class ThemeManager(QObject):
    """Holds the active palette and follows the OS scheme when asked to.

    ``theme_changed`` fires only when the palette flips between dark and
    light, so widgets restyle once per switch.

    Example:
        theme_manager.apply_preference(config.get_theme())
        theme_manager.theme_changed.connect(tile.refresh_theme)
    """

    theme_changed = Signal()

    def __init__(self) -> None:
        super().__init__()
        self._palette = DARK_PALETTE
        self._follow_system = True

    @property
    def palette(self) -> ThemePalette:
        return self._palette

    @property
    def is_dark(self) -> bool:
        return self._palette.name == "dark"

    def detect_system_theme(self) -> ThemePalette:
        """Return the palette matching the OS scheme, dark when unknown."""
        app = _gui_app()
        if app is None:
            return DARK_PALETTE
        try:
            scheme = app.styleHints().colorScheme()
        except AttributeError:
            logger.debug("Qt cannot report the color scheme, using dark")
            return DARK_PALETTE
        return LIGHT_PALETTE if scheme == Qt.ColorScheme.Light else DARK_PALETTE

    def apply_preference(self, preference: str) -> None:
        """Apply "dark", "light" or "system"; anything else means "system"."""
        pinned = {"dark": DARK_PALETTE, "light": LIGHT_PALETTE}.get(preference)
        self._follow_system = pinned is None
        self.apply_theme(pinned)

    def apply_theme(self, palette: ThemePalette | None = None) -> None:
        """Switch to ``palette``, or to the detected OS palette if None."""
        if palette is None:
            palette = self.detect_system_theme()

        switched = palette.name != self._palette.name
        self._palette = palette
        logger.info("Theme applied: %s", palette.name)

        raw_app = QApplication.instance()
        if raw_app is not None:
            cast(QApplication, raw_app).setStyleSheet(self._global_stylesheet())

        if switched:
            self.theme_changed.emit()

    def connect_system_theme_changes(self) -> None:
        """Re-apply the OS palette when the OS scheme changes."""
        app = _gui_app()
        if app is None:
            return
        try:
            app.styleHints().colorSchemeChanged.connect(self._on_system_theme_changed)
        except AttributeError:
            logger.debug("Qt cannot report color scheme changes")

    def _on_system_theme_changed(self) -> None:
        if self._follow_system:
            logger.info("System color scheme changed")
            self.apply_theme()

    def _global_stylesheet(self) -> str:
        p = self._palette
        return f"""
            QMainWindow, QStatusBar {{
                background-color: {p.background};
                color: {p.text_secondary};
            }}
            QToolBar {{
                background-color: {p.surface};
                border-bottom: 1px solid {p.border};
                spacing: {spacing.sm}px;
            }}
            QToolTip {{
                background-color: {p.surface_elevated};
                color: {p.text};
                border: 1px solid {p.border};
                padding: {spacing.xs}px;
            }}
            QScrollBar:vertical {{
                background: transparent;
                width: {sizing.scrollbar_width}px;
            }}
            QScrollBar::handle:vertical {{
                background: {p.scrollbar};
                min-height: {sizing.scrollbar_min_handle}px;
                border-radius: {sizing.scrollbar_width // 2}px;
            }}
            QScrollBar::handle:vertical:hover {{
                background: {p.scrollbar_hover};
            }}
        """


theme_manager = ThemeManager()
