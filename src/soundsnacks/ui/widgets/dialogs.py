"""Themed dialog widgets for SoundSnacks.

Provides the sound form (add/edit), the category form and a confirmation
dialog, all styled to match the application theme. Forms run their
action on submit and keep the dialog open with an inline message when
the action raises ``SoundboardError``.

Usage:
    from soundsnacks.ui.widgets.dialogs import SoundFormDialog

    dialog = SoundFormDialog(store, parent=window)
    if dialog.exec() == QDialog.DialogCode.Accepted:
        print(dialog.saved_sound)
"""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QColorDialog,
    QComboBox,
    QDialog,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from soundsnacks.core.state import SoundboardStore
from soundsnacks.errors import SoundboardError
from soundsnacks.models.category import DEFAULT_CATEGORY_COLOR, Category
from soundsnacks.models.color import normalize_hex
from soundsnacks.models.sound import Sound
from soundsnacks.ui.theme import theme_manager
from soundsnacks.ui.tokens import sizing, spacing, typography

logger = logging.getLogger(__name__)

AUDIO_FILE_FILTER = "Audio files (*.mp3 *.wav *.m4a)"


def secondary_button_style() -> str:
    """Return the stylesheet for Cancel-style buttons."""
    p = theme_manager.palette
    return f"""
        QPushButton {{
            background: {p.surface_hover};
            border: 1px solid {p.border};
            border-radius: {sizing.border_radius_md}px;
            padding: {spacing.sm}px {spacing.lg}px;
            color: {p.text};
            font-size: {typography.body}pt;
        }}
        QPushButton:hover {{
            background: {p.surface_selected};
        }}
        QPushButton:disabled {{
            color: {p.text_disabled};
        }}
    """


def accent_button_style() -> str:
    """Return the stylesheet for the default (OK/Save) button."""
    p = theme_manager.palette
    return f"""
        QPushButton {{
            background: {p.accent};
            border: none;
            border-radius: {sizing.border_radius_md}px;
            padding: {spacing.sm}px {spacing.lg}px;
            color: #ffffff;
            font-size: {typography.body}pt;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background: {p.warning};
        }}
    """


def _field_style() -> str:
    p = theme_manager.palette
    return f"""
        QLineEdit, QComboBox {{
            background: {p.surface_dim};
            border: 1px solid {p.border};
            border-radius: {sizing.border_radius_md}px;
            padding: {spacing.sm}px;
            font-size: {typography.subtitle}pt;
            color: {p.text};
            selection-background-color: {p.accent};
        }}
        QLineEdit:focus, QComboBox:focus {{
            border: 1px solid {p.accent};
        }}
        QLabel {{
            background: transparent;
            color: {p.text};
        }}
    """


class _FormDialog(QDialog):
    """Base for themed forms: title, form rows, error label, buttons."""

    def __init__(self, parent: QWidget | None, title: str, submit_text: str) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.WindowTitleHint
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowCloseButtonHint
        )
        self.setMinimumWidth(360)

        p = theme_manager.palette
        self.setStyleSheet(f"""
            QDialog {{
                background-color: {p.surface_elevated};
                border: 1px solid {p.border_selected};
                border-radius: {sizing.border_radius_lg}px;
            }}
        """ + _field_style())

        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(spacing.md)
        self._layout.setContentsMargins(spacing.xl, spacing.lg, spacing.xl, spacing.lg)

        title_label = QLabel(title)
        title_label.setStyleSheet(
            f"font-size: {typography.heading}pt; font-weight: bold;"
            f" color: {p.text}; background: transparent;"
        )
        self._layout.addWidget(title_label)

        self._form = QFormLayout()
        self._form.setSpacing(spacing.md)
        self._layout.addLayout(self._form)

        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(
            f"color: {p.error}; font-size: {typography.small}pt; background: transparent;"
        )
        self._error_label.hide()
        self._layout.addWidget(self._error_label)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(spacing.sm)
        btn_row.addStretch()

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(secondary_button_style())
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(cancel_btn)

        self._submit_btn = QPushButton(submit_text)
        self._submit_btn.setDefault(True)
        self._submit_btn.setStyleSheet(accent_button_style())
        self._submit_btn.clicked.connect(self.submit)
        btn_row.addWidget(self._submit_btn)

        self._layout.addLayout(btn_row)

    @property
    def error_text(self) -> str:
        """Return the inline error message ('' if none is shown)."""
        return self._error_label.text() if not self._error_label.isHidden() else ""

    def show_error(self, message: str) -> None:
        self._error_label.setText(message)
        self._error_label.show()

    def clear_error(self) -> None:
        self._error_label.clear()
        self._error_label.hide()

    def submit(self) -> bool:
        """Run the form action; accept on success, show the error otherwise.

        Returns:
            True if the dialog was accepted.
        """
        self.clear_error()
        try:
            self._perform()
        except SoundboardError as e:
            logger.info("%s rejected: %s", self.windowTitle(), e)
            self.show_error(str(e))
            return False
        self.accept()
        return True

    def _perform(self) -> None:
        raise NotImplementedError


class SoundFormDialog(_FormDialog):
    """Add a new sound or edit an existing one.

    In add mode the form asks for an audio file; in edit mode it shows the
    order field instead and the file stays as it is.

    Example:
        dialog = SoundFormDialog(store, parent=window, sound=store.get_sound(sid))
        dialog.exec()
    """

    def __init__(
        self,
        store: SoundboardStore,
        parent: QWidget | None = None,
        *,
        sound: Sound | None = None,
    ) -> None:
        """Initialize the sound form.

        Args:
            store: Store that performs the add/edit.
            parent: Parent widget.
            sound: Sound to edit; None to add a new one.
        """
        title = "Edit Sound" if sound is not None else "Add Sound"
        super().__init__(parent, title, "Save")
        self._store = store
        self._sound = sound
        self._source: Path | None = None
        self._saved: Sound | None = None
        self._setup_fields()

    def _setup_fields(self) -> None:
        self._description = QLineEdit(self._sound.description if self._sound else "")
        self._description.setPlaceholderText("Sound name")
        self._form.addRow("Name:", self._description)

        self._category = QComboBox()
        names = [c.name for c in self._store.categories]
        self._category.addItems(names)
        if not names:
            # Nothing to pick from: let the user type a name
            self._category.setEditable(True)
        if self._sound is not None:
            if self._sound.category not in names:
                self._category.addItem(self._sound.category)
            self._category.setCurrentText(self._sound.category)
        self._form.addRow("Category:", self._category)

        if self._sound is None:
            file_row = QHBoxLayout()
            self._file_label = QLabel("No file selected")
            self._file_label.setStyleSheet(
                f"color: {theme_manager.palette.text_secondary}; background: transparent;"
            )
            file_row.addWidget(self._file_label, 1)
            browse_btn = QPushButton("Choose…")
            browse_btn.setStyleSheet(secondary_button_style())
            browse_btn.clicked.connect(self._browse)
            file_row.addWidget(browse_btn)
            self._form.addRow("Audio file:", file_row)
        else:
            self._order = QLineEdit(str(self._sound.order))
            self._form.addRow("Order:", self._order)

    @property
    def is_edit(self) -> bool:
        return self._sound is not None

    @property
    def source(self) -> Path | None:
        """Return the chosen audio file (add mode)."""
        return self._source

    @property
    def saved_sound(self) -> Sound | None:
        """Return the sound created or updated by the last submit."""
        return self._saved

    def set_source(self, path: Path | None) -> None:
        """Set the audio file to import.

        Args:
            path: Chosen file, or None to clear.
        """
        self._source = path
        if hasattr(self, "_file_label"):
            self._file_label.setText(path.name if path else "No file selected")

    def _browse(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Choose an audio file", str(Path.home()), AUDIO_FILE_FILTER
        )
        if path:
            self.set_source(Path(path))

    def _perform(self) -> None:
        description = self._description.text()
        category = self._category.currentText()
        if self._sound is None:
            self._saved = self._store.add_sound(description, category, self._source)
        else:
            self._saved = self._store.edit_sound(
                self._sound.id, description, category, self._order.text()
            )


class CategoryFormDialog(_FormDialog):
    """Create a category or edit a user-created one.

    Example:
        dialog = CategoryFormDialog(store, parent=window)
        dialog.exec()
    """

    def __init__(
        self,
        store: SoundboardStore,
        parent: QWidget | None = None,
        *,
        category: Category | None = None,
    ) -> None:
        """Initialize the category form.

        Args:
            store: Store that performs the create/update.
            parent: Parent widget.
            category: Category to edit; None to create a new one.
        """
        title = "Edit Category" if category is not None else "New Category"
        super().__init__(parent, title, "Save")
        self._store = store
        self._category = category
        self._saved: Category | None = None
        self._setup_fields()

    def _setup_fields(self) -> None:
        self._name = QLineEdit(self._category.name if self._category else "")
        self._name.setPlaceholderText("Category name")
        self._form.addRow("Name:", self._name)

        color_row = QHBoxLayout()
        self._swatch = QLabel()
        self._swatch.setFixedSize(sizing.swatch, sizing.swatch)
        color_row.addWidget(self._swatch)
        self._color = QLineEdit(
            self._category.color_hex if self._category else DEFAULT_CATEGORY_COLOR
        )
        self._color.setPlaceholderText("#RRGGBB")
        self._color.textChanged.connect(self._update_swatch)
        color_row.addWidget(self._color, 1)
        pick_btn = QPushButton("Pick…")
        pick_btn.setStyleSheet(secondary_button_style())
        pick_btn.clicked.connect(self._pick_color)
        color_row.addWidget(pick_btn)
        self._form.addRow("Color:", color_row)
        self._update_swatch()

    @property
    def saved_category(self) -> Category | None:
        """Return the category created or updated by the last submit."""
        return self._saved

    def set_color(self, color_hex: str) -> None:
        self._color.setText(color_hex)

    def _update_swatch(self) -> None:
        try:
            color = normalize_hex(self._color.text())
        except ValueError:
            color = "transparent"
        self._swatch.setStyleSheet(
            f"background-color: {color};"
            f" border: 1px solid {theme_manager.palette.border};"
            f" border-radius: {sizing.border_radius_sm}px;"
        )

    def _pick_color(self) -> None:
        try:
            initial = QColor(normalize_hex(self._color.text()))
        except ValueError:
            initial = QColor(DEFAULT_CATEGORY_COLOR)
        color = QColorDialog.getColor(initial, self, "Category color")
        if color.isValid():
            self.set_color(color.name().upper())

    def _perform(self) -> None:
        name = self._name.text()
        color = self._color.text()
        if self._category is None:
            self._saved = self._store.create_category(name, color)
        else:
            self._saved = self._store.update_category(self._category.id, name, color)


class ConfirmDialog(QDialog):
    """A themed yes/no confirmation dialog.

    Example:
        if ConfirmDialog.ask(self, "Delete Sound", "Delete “Boo”?"):
            store.delete_sound(sound_id)
    """

    def __init__(
        self,
        parent: QWidget | None,
        title: str,
        message: str,
        *,
        confirm_text: str = "Delete",
    ) -> None:
        """Initialize the confirmation dialog.

        Args:
            parent: Parent widget.
            title: Dialog window title.
            message: Question shown to the user.
            confirm_text: Label of the confirming button.
        """
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setMinimumWidth(320)
        p = theme_manager.palette
        self.setStyleSheet(f"QDialog {{ background-color: {p.surface_elevated}; }}")

        layout = QVBoxLayout(self)
        layout.setSpacing(spacing.md)
        layout.setContentsMargins(spacing.xl, spacing.lg, spacing.xl, spacing.lg)

        label = QLabel(message)
        label.setWordWrap(True)
        label.setStyleSheet(
            f"font-size: {typography.body}pt; color: {p.text}; background: transparent;"
        )
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(secondary_button_style())
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(cancel_btn)
        confirm_btn = QPushButton(confirm_text)
        confirm_btn.setStyleSheet(accent_button_style())
        confirm_btn.clicked.connect(self.accept)
        btn_row.addWidget(confirm_btn)
        layout.addLayout(btn_row)

    @staticmethod
    def ask(
        parent: QWidget | None,
        title: str,
        message: str,
        *,
        confirm_text: str = "Delete",
    ) -> bool:
        """Show the dialog and return True if the user confirmed."""
        dialog = ConfirmDialog(parent, title, message, confirm_text=confirm_text)
        return dialog.exec() == QDialog.DialogCode.Accepted
