"""Category manager dialog - list, create, edit and delete categories."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QIcon, QPixmap
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from soundsnacks.core.state import SoundboardStore
from soundsnacks.errors import SoundboardError
from soundsnacks.models.category import Category
from soundsnacks.ui.theme import theme_manager
from soundsnacks.ui.tokens import sizing, spacing, typography
from soundsnacks.ui.widgets.dialogs import (
    CategoryFormDialog,
    ConfirmDialog,
    accent_button_style,
    secondary_button_style,
)

logger = logging.getLogger(__name__)

_ID_ROLE = Qt.ItemDataRole.UserRole


def swatch_icon(color_hex: str) -> QIcon:
    """Return a square icon filled with ``color_hex``."""
    pixmap = QPixmap(sizing.swatch, sizing.swatch)
    pixmap.fill(QColor(color_hex))
    return QIcon(pixmap)


class CategoryManagerDialog(QDialog):
    """Dialog listing every category with its color.

    The default category is marked and cannot be edited or deleted.
    Deleting a category leaves the sounds that use it untouched.

    Example:
        dialog = CategoryManagerDialog(store, parent=window)
        dialog.exec()
    """

    def __init__(self, store: SoundboardStore, parent: QWidget | None = None) -> None:
        """Initialize the manager.

        Args:
            store: Store owning the categories.
            parent: Parent widget.
        """
        super().__init__(parent)
        self._store = store
        self.setWindowTitle("Categories")
        self.setMinimumSize(360, 420)
        self._setup_ui()
        self._populate(store.categories)
        store.categories_changed.connect(self._populate)

    def _setup_ui(self) -> None:
        p = theme_manager.palette
        self.setStyleSheet(f"""
            CategoryManagerDialog {{
                background-color: {p.surface_elevated};
            }}
            QListWidget {{
                background: {p.surface};
                border: 1px solid {p.border};
                border-radius: {sizing.border_radius_md}px;
                color: {p.text};
                font-size: {typography.body}pt;
            }}
            QListWidget::item {{
                padding: {spacing.sm}px;
            }}
            QListWidget::item:selected {{
                background: {p.surface_selected};
                color: {p.text};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setSpacing(spacing.md)
        layout.setContentsMargins(spacing.lg, spacing.lg, spacing.lg, spacing.lg)

        self._list = QListWidget()
        self._list.currentItemChanged.connect(self._update_buttons)
        self._list.itemDoubleClicked.connect(lambda _item: self.edit_selected())
        layout.addWidget(self._list)

        self._status = QLabel()
        self._status.setWordWrap(True)
        self._status.setStyleSheet(
            f"color: {p.error}; font-size: {typography.small}pt; background: transparent;"
        )
        layout.addWidget(self._status)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(spacing.sm)

        self._add_btn = QPushButton("Add…")
        self._add_btn.setStyleSheet(accent_button_style())
        self._add_btn.clicked.connect(self.add_category)
        btn_row.addWidget(self._add_btn)

        self._edit_btn = QPushButton("Edit…")
        self._edit_btn.setStyleSheet(secondary_button_style())
        self._edit_btn.clicked.connect(self.edit_selected)
        btn_row.addWidget(self._edit_btn)

        self._delete_btn = QPushButton("Delete…")
        self._delete_btn.setStyleSheet(secondary_button_style())
        self._delete_btn.clicked.connect(self.delete_selected)
        btn_row.addWidget(self._delete_btn)

        btn_row.addStretch()

        close_btn = QPushButton("Close")
        close_btn.setStyleSheet(secondary_button_style())
        close_btn.clicked.connect(self.accept)
        btn_row.addWidget(close_btn)

        layout.addLayout(btn_row)
        self._update_buttons()

    def _populate(self, categories: list[Category]) -> None:
        """Rebuild the list, keeping the selection when possible."""
        selected = self.selected_category()
        selected_id = selected.id if selected else None

        self._list.blockSignals(True)
        self._list.clear()
        for category in categories:
            text = category.name
            if category.is_default:
                text += "  (Default)"
            item = QListWidgetItem(swatch_icon(category.color_hex), text)
            item.setData(_ID_ROLE, category.id)
            self._list.addItem(item)
            if category.id == selected_id:
                self._list.setCurrentItem(item)
        self._list.blockSignals(False)
        self._update_buttons()

    @property
    def row_count(self) -> int:
        return self._list.count()

    def select(self, category_id: str) -> None:
        """Select the row for ``category_id``."""
        for row in range(self._list.count()):
            item = self._list.item(row)
            if item.data(_ID_ROLE) == category_id:
                self._list.setCurrentItem(item)
                return

    def selected_category(self) -> Category | None:
        """Return the selected category, if any."""
        item = self._list.currentItem()
        if item is None:
            return None
        return self._store.get_category(item.data(_ID_ROLE))

    def can_modify_selected(self) -> bool:
        category = self.selected_category()
        return category is not None and not category.is_default

    def _update_buttons(self) -> None:
        can_modify = self.can_modify_selected()
        self._edit_btn.setEnabled(can_modify)
        self._delete_btn.setEnabled(can_modify)

    # -- Actions ---------------------------------------------------------------

    def add_category(self) -> None:
        """Open the form for a new category."""
        self._status.clear()
        dialog = CategoryFormDialog(self._store, self)
        if dialog.exec() == QDialog.DialogCode.Accepted and dialog.saved_category:
            self.select(dialog.saved_category.id)

    def edit_selected(self) -> None:
        """Open the form for the selected user category."""
        category = self.selected_category()
        if category is None or category.is_default:
            return
        self._status.clear()
        dialog = CategoryFormDialog(self._store, self, category=category)
        dialog.exec()

    def delete_selected(self) -> None:
        """Delete the selected user category after confirmation."""
        category = self.selected_category()
        if category is None or category.is_default:
            return
        in_use = sum(1 for s in self._store.sounds if s.category == category.name)
        message = f"Delete the category “{category.name}”?"
        if in_use:
            message += f"\n{in_use} sound(s) will keep the name but lose the color."
        if not ConfirmDialog.ask(self, "Delete Category", message):
            return
        try:
            self._store.delete_category(category.id)
        except SoundboardError as e:
            logger.warning("Cannot delete category %s: %s", category.name, e)
            self._status.setText(str(e))
