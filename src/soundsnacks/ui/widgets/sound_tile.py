"""Sound tile widget - one colored, tappable, draggable cell of the grid.

A tile shows the sound's description and its category label on the
category color. Tapping it toggles playback; dragging it onto another
tile asks for a reorder.
"""

from __future__ import annotations

from PySide6.QtCore import QMimeData, QPoint, Qt, Signal
from PySide6.QtGui import (
    QContextMenuEvent,
    QDrag,
    QDragEnterEvent,
    QDragLeaveEvent,
    QDropEvent,
    QMouseEvent,
)
from PySide6.QtWidgets import QFrame, QLabel, QMenu, QVBoxLayout

from soundsnacks.core.playback import PlaybackState
from soundsnacks.core.state import SoundAppearance
from soundsnacks.models.color import shade
from soundsnacks.models.sound import Sound
from soundsnacks.ui.theme import theme_manager
from soundsnacks.ui.tokens import sizing, spacing, typography

SOUND_ID_MIME = "application/x-soundsnacks-sound-id"

_STATE_GLYPHS = {
    PlaybackState.IDLE: "",
    PlaybackState.PLAYING: "▶",
    PlaybackState.PAUSED: "❙❙",
}


class SoundTile(QFrame):
    """Tile widget for one sound.

    Signals:
        clicked: Emitted on a tap that did not turn into a drag (sound_id).
        edit_requested: Emitted from the context menu (sound_id).
        delete_requested: Emitted from the context menu (sound_id).
        dropped: Emitted when another tile is dropped here
            (dragged_id, target_id).

    Example:
        tile = SoundTile(sound, appearance)
        tile.clicked.connect(lambda sid: controller.toggle(store.get_sound(sid)))
    """

    clicked = Signal(str)  # sound_id
    edit_requested = Signal(str)  # sound_id
    delete_requested = Signal(str)  # sound_id
    dropped = Signal(str, str)  # dragged_id, target_id

    def __init__(
        self,
        sound: Sound,
        appearance: SoundAppearance,
        state: PlaybackState = PlaybackState.IDLE,
    ) -> None:
        """Initialize the tile.

        Args:
            sound: The sound shown by this tile.
            appearance: Resolved colors and category label.
            state: Initial playback state.
        """
        super().__init__()
        self._sound = sound
        self._appearance = appearance
        self._state = state
        self._press_pos: QPoint | None = None
        self._drop_hover = False

        self.setAcceptDrops(True)
        self.setFixedSize(sizing.tile_width, sizing.tile_height)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._setup_ui()
        self._update_style()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(spacing.md, spacing.md, spacing.md, spacing.md)
        layout.setSpacing(spacing.xs)

        self._state_label = QLabel()
        self._state_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        layout.addWidget(self._state_label)

        self._description_label = QLabel()
        self._description_label.setWordWrap(True)
        self._description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._description_label, 1)

        self._category_label = QLabel()
        self._category_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._category_label)

        self._refresh_labels()

    @property
    def sound_id(self) -> str:
        """Return the ID of the sound shown."""
        return self._sound.id

    @property
    def sound(self) -> Sound:
        """Return the sound shown."""
        return self._sound

    @property
    def state(self) -> PlaybackState:
        """Return the displayed playback state."""
        return self._state

    @property
    def description_text(self) -> str:
        return self._description_label.text()

    @property
    def category_text(self) -> str:
        return self._category_label.text()

    def update_sound(self, sound: Sound, appearance: SoundAppearance) -> None:
        """Show new data for the same tile.

        Args:
            sound: Updated sound.
            appearance: Updated colors and label.
        """
        self._sound = sound
        self._appearance = appearance
        self._refresh_labels()
        self._update_style()

    def set_state(self, state: PlaybackState) -> None:
        """Show a playback state.

        Args:
            state: IDLE, PLAYING or PAUSED.
        """
        if state is self._state:
            return
        self._state = state
        self._refresh_labels()
        self._update_style()

    def _refresh_labels(self) -> None:
        fg = self._appearance.foreground
        self._description_label.setText(self._sound.description)
        self._description_label.setStyleSheet(
            f"font-size: {typography.title}pt; font-weight: bold;"
            f" color: {fg}; background: transparent;"
        )
        self._category_label.setText(self._appearance.label)
        self._category_label.setStyleSheet(
            f"font-size: {typography.caption}pt; color: {fg}; background: transparent;"
        )
        self._state_label.setText(_STATE_GLYPHS[self._state])
        self._state_label.setStyleSheet(
            f"font-size: {typography.small}pt; color: {fg}; background: transparent;"
        )
        tooltip = self._sound.description
        if self._appearance.is_fallback:
            tooltip += f"\nCategory '{self._sound.category}' no longer exists"
        self.setToolTip(tooltip)

    def _update_style(self) -> None:
        """Update the border for playback and drop-hover state."""
        p = theme_manager.palette
        if self._drop_hover:
            border = f"{sizing.tile_border_active}px dashed {p.drop_target}"
        elif self._state is PlaybackState.PLAYING:
            border = f"{sizing.tile_border_active}px solid {p.tile_playing}"
        elif self._state is PlaybackState.PAUSED:
            border = f"{sizing.tile_border_active}px dotted {p.tile_paused}"
        else:
            border = f"1px solid {p.border}"
        self.setStyleSheet(f"""
            SoundTile {{
                background-color: {self._appearance.background};
                border-radius: {sizing.border_radius_lg}px;
                border: {border};
            }}
            SoundTile:hover {{
                background-color: {shade(self._appearance.background, 1.15)};
            }}
        """)

    def refresh_theme(self) -> None:
        """Re-apply palette colors after a theme change."""
        self._update_style()

    # -- Mouse: tap vs drag ----------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Remember where a left press started.

        Args:
            event: The mouse event.
        """
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position().toPoint()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Start a drag once the pointer leaves the drag threshold.

        Args:
            event: The mouse event.
        """
        if self._press_pos is not None and event.buttons() & Qt.MouseButton.LeftButton:
            distance = (event.position().toPoint() - self._press_pos).manhattanLength()
            if distance > sizing.drag_threshold:
                self._press_pos = None
                self._start_drag()
                return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Emit clicked if the press did not become a drag.

        Args:
            event: The mouse event.
        """
        if event.button() == Qt.MouseButton.LeftButton and self._press_pos is not None:
            self._press_pos = None
            event.accept()
            self.clicked.emit(self._sound.id)
            return
        super().mouseReleaseEvent(event)

    def _start_drag(self) -> None:
        mime = QMimeData()
        mime.setData(SOUND_ID_MIME, self._sound.id.encode("utf-8"))
        drag = QDrag(self)
        drag.setMimeData(mime)
        drag.setPixmap(self.grab())
        drag.setHotSpot(QPoint(self.width() // 2, self.height() // 2))
        drag.exec(Qt.DropAction.MoveAction)

    # -- Drop target -----------------------------------------------------------

    @staticmethod
    def dragged_id(mime: QMimeData) -> str | None:
        """Return the sound id carried by a tile drag, or None."""
        if not mime.hasFormat(SOUND_ID_MIME):
            return None
        return bytes(mime.data(SOUND_ID_MIME).data()).decode("utf-8")

    def dragEnterEvent(self, event: QDragEnterEvent) -> None:  # noqa: N802
        """Accept drags carrying another tile's sound id."""
        dragged = self.dragged_id(event.mimeData())
        if dragged is None or dragged == self._sound.id:
            event.ignore()
            return
        self._drop_hover = True
        self._update_style()
        event.acceptProposedAction()

    def dragLeaveEvent(self, event: QDragLeaveEvent) -> None:  # noqa: N802
        """Clear the drop highlight."""
        self._drop_hover = False
        self._update_style()
        super().dragLeaveEvent(event)

    def dropEvent(self, event: QDropEvent) -> None:  # noqa: N802
        """Ask for the dragged sound to take this tile's position."""
        self._drop_hover = False
        self._update_style()
        dragged = self.dragged_id(event.mimeData())
        if dragged is None:
            event.ignore()
            return
        event.acceptProposedAction()
        self.accept_drop(dragged)

    def accept_drop(self, dragged_id: str) -> None:
        """Emit ``dropped`` for a sound dragged onto this tile.

        Args:
            dragged_id: ID of the dragged sound.
        """
        if dragged_id == self._sound.id:
            return
        self.dropped.emit(dragged_id, self._sound.id)

    # -- Context menu ----------------------------------------------------------

    def contextMenuEvent(self, event: QContextMenuEvent) -> None:  # noqa: N802
        """Show the Edit/Delete menu on right-click.

        Args:
            event: The context menu event.
        """
        menu = QMenu(self)
        edit_action = menu.addAction("Edit…")
        delete_action = menu.addAction("Delete…")
        action = menu.exec(event.globalPos())
        if action == edit_action:
            self.edit_requested.emit(self._sound.id)
        elif action == delete_action:
            self.delete_requested.emit(self._sound.id)
