"""Tests for the sound, category and confirmation dialogs."""

from pathlib import Path
from unittest.mock import patch

from PySide6.QtWidgets import QDialog
from pytestqt.qtbot import QtBot

from soundsnacks.core.sound_files import SoundFileStore
from soundsnacks.core.state import SoundboardStore
from soundsnacks.models.category import DEFAULT_CATEGORY_COLOR
from soundsnacks.ui.widgets.dialogs import (
    CategoryFormDialog,
    ConfirmDialog,
    SoundFormDialog,
)


class TestSoundFormAdd:
    """Test the sound form in add mode."""

    def test_fields(self, qtbot: QtBot, store: SoundboardStore) -> None:
        store.seed_categories()
        dialog = SoundFormDialog(store)
        qtbot.addWidget(dialog)

        assert not dialog.is_edit
        assert dialog.windowTitle() == "Add Sound"
        assert dialog._category.count() == 13
        assert not dialog._category.isEditable()
        assert dialog.source is None

    def test_no_categories_allows_typing(self, qtbot: QtBot, store: SoundboardStore) -> None:
        dialog = SoundFormDialog(store)
        qtbot.addWidget(dialog)
        assert dialog._category.isEditable()

    def test_missing_file_error_keeps_dialog_open(
        self, qtbot: QtBot, store: SoundboardStore
    ) -> None:
        """Test that a validation error is shown inline and nothing is saved."""
        store.seed_categories()
        dialog = SoundFormDialog(store)
        qtbot.addWidget(dialog)
        dialog._description.setText("Boo")

        assert dialog.submit() is False
        assert dialog.error_text == "Select an audio file"
        assert dialog.result() != QDialog.DialogCode.Accepted
        assert store.sounds == []

    def test_empty_name_error(self, qtbot: QtBot, store: SoundboardStore, clip: Path) -> None:
        store.seed_categories()
        dialog = SoundFormDialog(store)
        qtbot.addWidget(dialog)
        dialog.set_source(clip)

        assert dialog.submit() is False
        assert dialog.error_text == "Sound name cannot be empty"

    def test_save(
        self,
        qtbot: QtBot,
        store: SoundboardStore,
        files: SoundFileStore,
        clip: Path,
    ) -> None:
        store.seed_categories()
        dialog = SoundFormDialog(store)
        qtbot.addWidget(dialog)
        dialog._description.setText("Boo")
        dialog._category.setCurrentText("Gritos")
        dialog.set_source(clip)
        assert dialog._file_label.text() == "clip.wav"

        assert dialog.submit() is True
        assert dialog.result() == QDialog.DialogCode.Accepted
        assert dialog.error_text == ""

        sound = dialog.saved_sound
        assert sound is not None
        assert sound.category == "Gritos"
        assert store.sounds == [sound]
        assert files.path_for(sound.file_name).exists()  # type: ignore[arg-type]

    def test_error_cleared_on_retry(
        self, qtbot: QtBot, store: SoundboardStore, clip: Path
    ) -> None:
        store.seed_categories()
        dialog = SoundFormDialog(store)
        qtbot.addWidget(dialog)
        dialog._description.setText("Boo")
        dialog.submit()
        assert dialog.error_text

        dialog.set_source(clip)
        assert dialog.submit() is True
        assert dialog.error_text == ""


class TestSoundFormEdit:
    """Test the sound form in edit mode."""

    def test_prefilled(self, qtbot: QtBot, store: SoundboardStore, clip: Path) -> None:
        store.seed_categories()
        sound = store.add_sound("Boo", "Memes", clip)
        dialog = SoundFormDialog(store, sound=sound)
        qtbot.addWidget(dialog)

        assert dialog.is_edit
        assert dialog.windowTitle() == "Edit Sound"
        assert dialog._description.text() == "Boo"
        assert dialog._category.currentText() == "Memes"
        assert dialog._order.text() == "1"

    def test_bad_order(self, qtbot: QtBot, store: SoundboardStore, clip: Path) -> None:
        store.seed_categories()
        sound = store.add_sound("Boo", "Memes", clip)
        dialog = SoundFormDialog(store, sound=sound)
        qtbot.addWidget(dialog)
        dialog._order.setText("zero")

        assert dialog.submit() is False
        assert dialog.error_text == "Order must be a positive number"
        assert store.get_sound(sound.id) == sound

    def test_save(self, qtbot: QtBot, store: SoundboardStore, clip: Path) -> None:
        store.seed_categories()
        sound = store.add_sound("Boo", "Memes", clip)
        dialog = SoundFormDialog(store, sound=sound)
        qtbot.addWidget(dialog)
        dialog._description.setText("Boo!")
        dialog._category.setCurrentText("Risas")
        dialog._order.setText("3")

        assert dialog.submit() is True
        updated = store.get_sound(sound.id)
        assert updated is not None
        assert updated.description == "Boo!"
        assert updated.category == "Risas"
        assert updated.order == 3

    def test_deleted_category_is_listed(
        self, qtbot: QtBot, store: SoundboardStore, clip: Path
    ) -> None:
        """Test that a sound's missing category stays selectable."""
        sound = store.add_sound("Boo", "Borrada", clip)
        store.seed_categories()
        dialog = SoundFormDialog(store, sound=sound)
        qtbot.addWidget(dialog)
        assert dialog._category.currentText() == "Borrada"


class TestCategoryForm:
    """Test the category form."""

    def test_defaults(self, qtbot: QtBot, store: SoundboardStore) -> None:
        dialog = CategoryFormDialog(store)
        qtbot.addWidget(dialog)
        assert dialog.windowTitle() == "New Category"
        assert dialog._color.text() == DEFAULT_CATEGORY_COLOR

    def test_create(self, qtbot: QtBot, store: SoundboardStore) -> None:
        dialog = CategoryFormDialog(store)
        qtbot.addWidget(dialog)
        dialog._name.setText("Nuevos")
        dialog.set_color("#00aa00")

        assert dialog.submit() is True
        assert dialog.saved_category is not None
        assert dialog.saved_category.color_hex == "#00AA00"
        assert [c.name for c in store.categories] == ["Nuevos"]

    def test_duplicate_name(self, qtbot: QtBot, store: SoundboardStore) -> None:
        store.seed_categories()
        dialog = CategoryFormDialog(store)
        qtbot.addWidget(dialog)
        dialog._name.setText("gritos")

        assert dialog.submit() is False
        assert dialog.error_text == "A category with that name already exists"

    def test_invalid_color(self, qtbot: QtBot, store: SoundboardStore) -> None:
        dialog = CategoryFormDialog(store)
        qtbot.addWidget(dialog)
        dialog._name.setText("Nuevos")
        dialog.set_color("blue")

        assert dialog.submit() is False
        assert "Invalid color" in dialog.error_text
        assert "transparent" in dialog._swatch.styleSheet()

    def test_edit(self, qtbot: QtBot, store: SoundboardStore) -> None:
        category = store.create_category("Viejos", "#123456")
        dialog = CategoryFormDialog(store, category=category)
        qtbot.addWidget(dialog)
        assert dialog._name.text() == "Viejos"
        dialog._name.setText("Nuevos")

        assert dialog.submit() is True
        assert store.get_category(category.id).name == "Nuevos"  # type: ignore[union-attr]


class TestConfirmDialog:
    """Test ConfirmDialog."""

    def test_accept(self, qtbot: QtBot) -> None:
        dialog = ConfirmDialog(None, "Delete Sound", "Delete “Boo”?")
        qtbot.addWidget(dialog)
        dialog.accept()
        assert dialog.result() == QDialog.DialogCode.Accepted

    def test_ask_confirmed(self, qtbot: QtBot) -> None:
        with patch.object(ConfirmDialog, "exec", return_value=QDialog.DialogCode.Accepted):
            assert ConfirmDialog.ask(None, "Delete Sound", "Delete?") is True

    def test_ask_cancelled(self, qtbot: QtBot) -> None:
        with patch.object(ConfirmDialog, "exec", return_value=QDialog.DialogCode.Rejected):
            assert ConfirmDialog.ask(None, "Delete Sound", "Delete?") is False
