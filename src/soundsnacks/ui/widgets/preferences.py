"""Preferences dialog for SoundSnacks.

Provides a tabbed dialog for the playback volume, grid layout, theme and
data directory settings.

Usage:
    from soundsnacks.ui.widgets.preferences import PreferencesDialog

    dialog = PreferencesDialog(config, parent=window)
    dialog.settings_changed.connect(on_settings_changed)
    dialog.exec()
"""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QSpinBox,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from soundsnacks.core.config import MAX_GRID_COLUMNS, MIN_GRID_COLUMNS, ConfigManager
from soundsnacks.ui.theme import theme_manager
from soundsnacks.ui.tokens import sizing, spacing, typography
from soundsnacks.ui.widgets.dialogs import accent_button_style, secondary_button_style


class PreferencesDialog(QDialog):
    """Tabbed preferences dialog.

    Tabs: Playback, Appearance, Storage. A changed data directory takes
    effect on the next launch.

    Example:
        dialog = PreferencesDialog(config, parent=window)
        dialog.settings_changed.connect(lambda: print("Settings updated"))
        dialog.exec()
    """

    settings_changed = Signal()

    def __init__(
        self,
        config: ConfigManager,
        parent: QWidget | None = None,
    ) -> None:
        """Initialize the preferences dialog.

        Args:
            config: ConfigManager for reading/writing settings.
            parent: Parent widget.
        """
        super().__init__(parent)
        self._config = config
        self.setWindowTitle("Preferences")
        self.setMinimumWidth(440)
        self._setup_ui()
        self._load()

    def _setup_ui(self) -> None:
        """Build the dialog UI with tabs and buttons."""
        p = theme_manager.palette

        self.setStyleSheet(f"""
            PreferencesDialog {{
                background-color: {p.surface_elevated};
            }}
            QTabWidget::pane {{
                border: 1px solid {p.border};
                border-radius: {sizing.border_radius_md}px;
                background: {p.surface};
                padding: {spacing.sm}px;
            }}
            QTabBar::tab {{
                background: {p.surface_dim};
                border: 1px solid {p.border};
                padding: {spacing.sm}px {spacing.lg}px;
                color: {p.text_secondary};
            }}
            QTabBar::tab:selected {{
                background: {p.surface};
                color: {p.text};
                font-weight: bold;
            }}
            QLabel {{
                background: transparent;
                color: {p.text};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setSpacing(spacing.md)
        layout.setContentsMargins(spacing.lg, spacing.lg, spacing.lg, spacing.lg)

        self._tabs = QTabWidget()
        self._tabs.addTab(self._create_playback_tab(), "Playback")
        self._tabs.addTab(self._create_appearance_tab(), "Appearance")
        self._tabs.addTab(self._create_storage_tab(), "Storage")
        layout.addWidget(self._tabs)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(spacing.sm)
        btn_row.addStretch()

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(secondary_button_style())
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(cancel_btn)

        ok_btn = QPushButton("OK")
        ok_btn.setDefault(True)
        ok_btn.setStyleSheet(accent_button_style())
        ok_btn.clicked.connect(self._ok)
        btn_row.addWidget(ok_btn)

        layout.addLayout(btn_row)

    def _create_playback_tab(self) -> QWidget:
        tab = QWidget()
        form = QFormLayout(tab)
        form.setSpacing(spacing.md)

        row = QHBoxLayout()
        self._volume = QSlider(Qt.Orientation.Horizontal)
        self._volume.setRange(0, 100)
        row.addWidget(self._volume, 1)
        self._volume_label = QLabel()
        self._volume_label.setMinimumWidth(40)
        self._volume.valueChanged.connect(lambda v: self._volume_label.setText(f"{v}%"))
        row.addWidget(self._volume_label)
        form.addRow("Volume:", row)
        return tab

    def _create_appearance_tab(self) -> QWidget:
        tab = QWidget()
        form = QFormLayout(tab)
        form.setSpacing(spacing.md)

        self._theme_combo = QComboBox()
        self._theme_combo.addItem("System", "system")
        self._theme_combo.addItem("Dark", "dark")
        self._theme_combo.addItem("Light", "light")
        form.addRow("Theme:", self._theme_combo)

        self._columns = QSpinBox()
        self._columns.setRange(MIN_GRID_COLUMNS, MAX_GRID_COLUMNS)
        form.addRow("Grid columns:", self._columns)
        return tab

    def _create_storage_tab(self) -> QWidget:
        tab = QWidget()
        form = QFormLayout(tab)
        form.setSpacing(spacing.md)

        path_row = QHBoxLayout()
        self._data_dir = QLineEdit()
        self._data_dir.setPlaceholderText("Default location")
        path_row.addWidget(self._data_dir)
        browse_btn = QPushButton("Browse…")
        browse_btn.clicked.connect(self._browse_data_dir)
        path_row.addWidget(browse_btn)
        form.addRow("Data folder:", path_row)

        p = theme_manager.palette
        info = QLabel("The database and imported sounds live here.\nRestart to apply a change.")
        info.setStyleSheet(f"color: {p.text_disabled}; font-size: {typography.small}pt;")
        info.setWordWrap(True)
        form.addRow("", info)
        return tab

    def _browse_data_dir(self) -> None:
        path = QFileDialog.getExistingDirectory(self, "Data folder", self._data_dir.text())
        if path:
            self._data_dir.setText(path)

    def _load(self) -> None:
        """Load current settings into widgets."""
        c = self._config
        self._volume.setValue(c.get_volume())
        self._volume_label.setText(f"{c.get_volume()}%")
        idx = self._theme_combo.findData(c.get_theme())
        if idx >= 0:
            self._theme_combo.setCurrentIndex(idx)
        self._columns.setValue(c.get_grid_columns())
        self._data_dir.setText(str(c.get_data_dir()))

    def _save(self) -> None:
        """Save widget values to config."""
        c = self._config
        c.set_volume(self._volume.value())
        theme = self._theme_combo.currentData()
        if isinstance(theme, str):
            c.set_theme(theme)
        c.set_grid_columns(self._columns.value())

        text = self._data_dir.text().strip()
        if text and Path(text) != c.get_data_dir():
            c.set_data_dir(Path(text))
        c.sync()

    def _ok(self) -> None:
        """Save settings, apply the theme, emit signal, and close."""
        self._save()
        theme_manager.apply_preference(self._config.get_theme())
        self.settings_changed.emit()
        self.accept()
