"""Main application window.

Layout:
+------------------------------------------------------+
| Add Sound | Categories | Pause | Stop | ⚙  [Filter ▾] |
+------------------------------------------------------+
|  [tile] [tile] [tile] [tile] [tile]                  |
|  [tile] [tile] ...                                   |
+------------------------------------------------------+
| status messages                                      |
+------------------------------------------------------+
"""

import logging

from PySide6.QtCore import Signal, Slot
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QComboBox, QLabel, QMainWindow, QSizePolicy, QToolBar, QWidget

from soundsnacks.core.config import ConfigManager
from soundsnacks.core.playback import PlaybackController, PlaybackState
from soundsnacks.core.state import SoundboardStore
from soundsnacks.errors import SoundboardError
from soundsnacks.models.category import Category
from soundsnacks.models.sound import Sound
from soundsnacks.ui.panels.sound_grid import DEFAULT_COLUMNS, SoundGridPanel
from soundsnacks.ui.theme import theme_manager
from soundsnacks.ui.tokens import spacing, typography
from soundsnacks.ui.widgets.category_manager import CategoryManagerDialog
from soundsnacks.ui.widgets.dialogs import ConfirmDialog, SoundFormDialog

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000
_ALL_CATEGORIES = "All"


class MainWindow(QMainWindow):
    """Main soundboard window.

    The window connects to a SoundboardStore and a PlaybackController and
    keeps the grid in sync with both: collection changes rebuild the grid,
    playback changes restyle a single tile.

    Example:
        store = SoundboardStore(repository, files, playback)
        window = MainWindow(store, playback, config)
        store.load()
        window.show()
    """

    preferences_applied = Signal()

    def __init__(
        self,
        store: SoundboardStore,
        playback: PlaybackController,
        config: ConfigManager | None = None,
    ) -> None:
        """Initialize the main window.

        Args:
            store: Store holding sounds and categories.
            playback: Controller for tile taps and the Stop action.
            config: Optional ConfigManager for preferences.
        """
        super().__init__()
        self._store = store
        self._playback = playback
        self._config = config
        self._filter: str | None = None

        self._setup_ui()
        self._setup_style()
        self._connect_signals()

        theme_manager.theme_changed.connect(self._refresh_theme)

        # Pick up whatever the store already holds
        self._on_categories_changed(store.categories)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("SoundSnacks")
        self.setMinimumSize(720, 480)

        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self._add_action = QAction("Add Sound", self)
        self._add_action.triggered.connect(self.open_add_sound)
        toolbar.addAction(self._add_action)

        self._categories_action = QAction("Categories", self)
        self._categories_action.triggered.connect(self.open_category_manager)
        toolbar.addAction(self._categories_action)

        self._pause_action = QAction("Pause", self)
        self._pause_action.setToolTip("Pause the playing sound; tap its tile to resume")
        self._pause_action.setEnabled(False)
        self._pause_action.triggered.connect(self._playback.pause)
        toolbar.addAction(self._pause_action)

        self._stop_action = QAction("Stop", self)
        self._stop_action.setEnabled(False)
        self._stop_action.triggered.connect(self._playback.stop)
        toolbar.addAction(self._stop_action)

        self._prefs_action = QAction("⚙", self)
        self._prefs_action.setToolTip("Preferences")
        self._prefs_action.setEnabled(self._config is not None)
        self._prefs_action.triggered.connect(self.open_preferences)
        toolbar.addAction(self._prefs_action)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        toolbar.addWidget(spacer)

        self._filter_label = QLabel("Category:")
        toolbar.addWidget(self._filter_label)
        self._filter_combo = QComboBox()
        self._filter_combo.setMinimumWidth(160)
        self._filter_combo.currentIndexChanged.connect(self._on_filter_changed)
        toolbar.addWidget(self._filter_combo)

        columns = self._config.get_grid_columns() if self._config else DEFAULT_COLUMNS
        self._grid = SoundGridPanel(columns=columns)
        self.setCentralWidget(self._grid)

    def _setup_style(self) -> None:
        """Set up basic styling."""
        p = theme_manager.palette
        self.setStyleSheet(f"""
            QMainWindow {{
                background-color: {p.background};
            }}
            QWidget {{
                color: {p.text};
                font-family: {typography.font_family};
                font-size: {typography.subtitle}pt;
            }}
            QToolBar {{
                background-color: {p.surface};
                border: none;
                padding: {spacing.xs}px;
                spacing: {spacing.sm}px;
            }}
            QComboBox {{
                background: {p.surface_dim};
                border: 1px solid {p.border};
                padding: {spacing.xs}px {spacing.sm}px;
            }}
        """)
        self.statusBar().setStyleSheet(
            f"background-color: {p.background}; color: {p.text_secondary};"
            f" font-size: {typography.small}pt;"
        )

    def _refresh_theme(self) -> None:
        """Refresh all styles when theme changes."""
        self._setup_style()
        self._grid.refresh_theme()

    def _connect_signals(self) -> None:
        """Connect store, playback and grid signals."""
        self._store.sounds_changed.connect(self._on_sounds_changed)
        self._store.categories_changed.connect(self._on_categories_changed)
        self._playback.state_changed.connect(self._on_playback_state_changed)

        self._grid.sound_clicked.connect(self._on_sound_clicked)
        self._grid.edit_requested.connect(self.open_edit_sound)
        self._grid.delete_requested.connect(self.confirm_delete_sound)
        self._grid.reorder_requested.connect(self._on_reorder_requested)

    # -- Accessors -------------------------------------------------------------

    @property
    def grid(self) -> SoundGridPanel:
        """Return the sound grid panel."""
        return self._grid

    @property
    def filter_combo(self) -> QComboBox:
        return self._filter_combo

    @property
    def stop_action(self) -> QAction:
        return self._stop_action

    @property
    def pause_action(self) -> QAction:
        return self._pause_action

    @property
    def config(self) -> ConfigManager | None:
        """Return the config manager."""
        return self._config

    @property
    def category_filter(self) -> str | None:
        """Return the category shown, or None for all sounds."""
        return self._filter

    def show_status(self, message: str) -> None:
        """Show a transient message in the status bar."""
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    # -- Store / playback updates ----------------------------------------------

    @Slot(object)
    def _on_sounds_changed(self, _sounds: list[Sound]) -> None:
        self._refresh_grid()

    @Slot(object)
    def _on_categories_changed(self, categories: list[Category]) -> None:
        """Rebuild the filter list; colors may have changed so redraw the grid."""
        names = [c.name for c in categories]
        if self._filter is not None and self._filter not in names:
            self._filter = None

        self._filter_combo.blockSignals(True)
        self._filter_combo.clear()
        self._filter_combo.addItem(_ALL_CATEGORIES, None)
        for name in names:
            self._filter_combo.addItem(name, name)
        index = self._filter_combo.findData(self._filter) if self._filter else 0
        self._filter_combo.setCurrentIndex(max(index, 0))
        self._filter_combo.blockSignals(False)

        self._refresh_grid()

    @Slot(object)
    def _on_playback_state_changed(self, sound_id: str | None) -> None:
        self._stop_action.setEnabled(self._playback.has_session)
        self._pause_action.setEnabled(self._playback.state is PlaybackState.PLAYING)
        if sound_id is None:
            return
        if sound_id == self._playback.current_id:
            state = self._playback.state
        else:
            state = PlaybackState.IDLE
        self._grid.set_state(sound_id, state)

    def _on_filter_changed(self, _index: int) -> None:
        data = self._filter_combo.currentData()
        self._filter = data if isinstance(data, str) else None
        logger.debug("Category filter: %s", self._filter or _ALL_CATEGORIES)
        self._refresh_grid()

    def set_category_filter(self, name: str | None) -> None:
        """Show only the sounds of ``name`` (None shows every sound)."""
        index = self._filter_combo.findData(name) if name else 0
        if index >= 0:
            self._filter_combo.setCurrentIndex(index)

    def _refresh_grid(self) -> None:
        sounds = self._store.sounds_in(self._filter)
        entries = [(s, self._store.appearance_for(s)) for s in sounds]
        states = {s.id: self._playback.state_for(s) for s in sounds}
        self._grid.set_sounds(entries, states)

    # -- Grid actions ----------------------------------------------------------

    @Slot(str)
    def _on_sound_clicked(self, sound_id: str) -> None:
        sound = self._store.get_sound(sound_id)
        if sound is None:
            return
        self._playback.toggle(sound)
        if self._playback.current_id != sound_id:
            self.show_status(f"Cannot play “{sound.description}”")

    @Slot(str, str)
    def _on_reorder_requested(self, dragged_id: str, target_id: str) -> None:
        self._store.reorder(dragged_id, target_id)

    def open_add_sound(self) -> None:
        """Open the form for importing a new sound."""
        dialog = SoundFormDialog(self._store, parent=self)
        if dialog.exec() and dialog.saved_sound is not None:
            self.show_status(f"Added “{dialog.saved_sound.description}”")

    @Slot(str)
    def open_edit_sound(self, sound_id: str) -> None:
        """Open the form for editing a sound."""
        sound = self._store.get_sound(sound_id)
        if sound is None:
            return
        dialog = SoundFormDialog(self._store, parent=self, sound=sound)
        if dialog.exec() and dialog.saved_sound is not None:
            self.show_status(f"Saved “{dialog.saved_sound.description}”")

    @Slot(str)
    def confirm_delete_sound(self, sound_id: str) -> None:
        """Ask for confirmation, then delete a sound."""
        sound = self._store.get_sound(sound_id)
        if sound is None:
            return
        if not ConfirmDialog.ask(self, "Delete Sound", f"Delete “{sound.description}”?"):
            return
        try:
            self._store.delete_sound(sound_id)
        except SoundboardError as e:
            self.show_status(str(e))
            return
        self.show_status(f"Deleted “{sound.description}”")

    def open_category_manager(self) -> None:
        """Open the category manager."""
        dialog = CategoryManagerDialog(self._store, parent=self)
        dialog.exec()

    def open_preferences(self) -> None:
        """Open the preferences dialog."""
        if not self._config:
            return
        from soundsnacks.ui.widgets.preferences import PreferencesDialog  # noqa: PLC0415

        dialog = PreferencesDialog(self._config, parent=self)
        dialog.settings_changed.connect(self.apply_preferences)
        dialog.exec()

    def apply_preferences(self) -> None:
        """Apply stored grid and playback settings."""
        if not self._config:
            return
        self._grid.set_columns(self._config.get_grid_columns())
        self._playback.set_volume(self._config.get_volume())
        self.preferences_applied.emit()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        """Stop playback before closing.

        Args:
            event: The close event.
        """
        self._playback.stop()
        super().closeEvent(event)
