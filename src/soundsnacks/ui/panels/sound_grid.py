"""Sound grid panel - sound tiles laid out in fixed columns, in order."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from soundsnacks.core.playback import PlaybackState
from soundsnacks.core.state import SoundAppearance
from soundsnacks.models.sound import Sound
from soundsnacks.ui.theme import theme_manager
from soundsnacks.ui.tokens import spacing, typography
from soundsnacks.ui.widgets.sound_tile import SoundTile

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 5


class SoundGridPanel(QWidget):
    """Scrollable grid of sound tiles.

    Tiles are placed row by row in the order given. Dropping one tile on
    another is forwarded as ``reorder_requested``; the panel never reorders
    by itself.

    Example:
        panel = SoundGridPanel(columns=5)
        panel.set_sounds([(sound, store.appearance_for(sound)) for sound in sounds])
        panel.reorder_requested.connect(store.reorder)
    """

    sound_clicked = Signal(str)  # sound_id
    edit_requested = Signal(str)  # sound_id
    delete_requested = Signal(str)  # sound_id
    reorder_requested = Signal(str, str)  # dragged_id, target_id

    def __init__(self, columns: int = DEFAULT_COLUMNS) -> None:
        """Initialize the grid panel.

        Args:
            columns: Number of tiles per row.
        """
        super().__init__()
        self._columns = max(1, columns)
        self._tiles: dict[str, SoundTile] = {}
        self._order: list[str] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(spacing.xs)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background-color: transparent; border: none; }")

        self._container = QWidget()
        self._container.setStyleSheet("background-color: transparent;")
        self._grid = QGridLayout(self._container)
        self._grid.setContentsMargins(spacing.md, spacing.md, spacing.md, spacing.md)
        self._grid.setSpacing(spacing.md)
        self._grid.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

        scroll.setWidget(self._container)
        layout.addWidget(scroll)

        self._empty_label = QLabel("No sounds yet. Use “Add Sound” to import one.")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._empty_label)
        self._apply_label_style()
        self._empty_label.setVisible(True)

    @property
    def columns(self) -> int:
        """Return the number of tiles per row."""
        return self._columns

    @property
    def tile_ids(self) -> list[str]:
        """Return the IDs of the tiles in display order."""
        return list(self._order)

    def tile(self, sound_id: str) -> SoundTile | None:
        """Return the tile for a sound, if shown."""
        return self._tiles.get(sound_id)

    def set_columns(self, columns: int) -> None:
        """Change the number of tiles per row and re-lay the grid.

        Args:
            columns: Number of tiles per row.
        """
        columns = max(1, columns)
        if columns == self._columns:
            return
        self._columns = columns
        self._relayout()

    def set_sounds(
        self,
        entries: list[tuple[Sound, SoundAppearance]],
        states: dict[str, PlaybackState] | None = None,
    ) -> None:
        """Show the given sounds, reusing tiles that still exist.

        Args:
            entries: (sound, appearance) pairs in display order.
            states: Optional playback state per sound id.
        """
        states = states or {}
        new_ids = [sound.id for sound, _ in entries]

        for sid in set(self._tiles) - set(new_ids):
            tile = self._tiles.pop(sid)
            self._grid.removeWidget(tile)
            tile.setParent(None)
            tile.deleteLater()

        for sound, appearance in entries:
            state = states.get(sound.id, PlaybackState.IDLE)
            tile = self._tiles.get(sound.id)
            if tile is None:
                tile = SoundTile(sound, appearance, state)
                tile.clicked.connect(self.sound_clicked.emit)
                tile.edit_requested.connect(self.edit_requested.emit)
                tile.delete_requested.connect(self.delete_requested.emit)
                tile.dropped.connect(self.reorder_requested.emit)
                self._tiles[sound.id] = tile
            else:
                tile.update_sound(sound, appearance)
                tile.set_state(state)

        self._order = new_ids
        self._relayout()
        logger.debug("Grid shows %d sounds", len(new_ids))

    def set_state(self, sound_id: str, state: PlaybackState) -> None:
        """Update the playback state shown on one tile.

        Args:
            sound_id: The sound ID.
            state: New playback state.
        """
        tile = self._tiles.get(sound_id)
        if tile is not None:
            tile.set_state(state)

    def _relayout(self) -> None:
        for tile in self._tiles.values():
            self._grid.removeWidget(tile)
        for index, sid in enumerate(self._order):
            row, col = divmod(index, self._columns)
            self._grid.addWidget(self._tiles[sid], row, col)
        self._empty_label.setVisible(not self._order)

    def _apply_label_style(self) -> None:
        p = theme_manager.palette
        self._empty_label.setStyleSheet(
            f"font-size: {typography.subtitle}pt; color: {p.text_secondary};"
        )

    def refresh_theme(self) -> None:
        """Re-apply theme colors to the panel and every tile."""
        self._apply_label_style()
        for tile in self._tiles.values():
            tile.refresh_theme()
