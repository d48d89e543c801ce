"""Central soundboard store with Qt signals for reactive UI updates.

The SoundboardStore holds the loaded sounds and categories, performs every
management operation through the repository, and emits Qt signals when
either collection changes. UI widgets connect to these signals to update
themselves.

Error policy:
- Validation problems raise ``ValidationError`` before anything changes.
- Save failures propagate as ``StorageError`` from the add/edit flows and
  from category create/update; delete, reorder and seeding only log them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from soundsnacks.core.categories import (
    find_category,
    missing_seed_categories,
    validate_category,
)
from soundsnacks.core.playback import PlaybackController
from soundsnacks.core.reorder import reorder, sort_by_order
from soundsnacks.core.sound_files import SoundFileStore, validate_extension
from soundsnacks.errors import StorageError, ValidationError
from soundsnacks.models.category import DEFAULT_CATEGORY_NAME, Category
from soundsnacks.models.color import FALLBACK_COLOR, text_color_for
from soundsnacks.models.sound import Sound
from soundsnacks.storage.repository import Repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SoundAppearance:
    """How a sound tile is colored.

    Attributes:
        background: Tile color (the category's, or the neutral fallback).
        foreground: Text color chosen for contrast with ``background``.
        label: Category label shown on the tile.
        is_fallback: True if the sound's category does not exist.
    """

    background: str
    foreground: str
    label: str
    is_fallback: bool = False


def parse_order(value: str | int) -> int:
    """Parse an order field into a positive integer.

    Raises:
        ValidationError: If the value is not a whole number above zero.
    """
    try:
        order = int(str(value).strip())
    except ValueError as e:
        raise ValidationError("Order must be a positive number") from e
    if order <= 0:
        raise ValidationError("Order must be a positive number")
    return order


def _required(value: str, message: str) -> str:
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(message)
    return trimmed


class SoundboardStore(QObject):
    """Central store emitting Qt signals on changes.

    Example:
        store = SoundboardStore(repository, files, playback)
        store.sounds_changed.connect(grid.set_sounds)
        store.load()
        store.seed_categories()
        store.add_sound("Boo", "Gritos", Path("clip.wav"))
    """

    sounds_changed = Signal(object)  # list[Sound], sorted by order
    categories_changed = Signal(object)  # list[Category], sorted by name

    def __init__(
        self,
        repository: Repository,
        files: SoundFileStore,
        playback: PlaybackController | None = None,
    ) -> None:
        """Initialize the store with empty collections.

        Args:
            repository: Persistence gateway.
            files: Store for imported audio files.
            playback: Controller to stop when a playing sound is deleted.
        """
        super().__init__()
        self._repo = repository
        self._files = files
        self._playback = playback
        self._sounds: list[Sound] = []
        self._categories: list[Category] = []

    @property
    def sounds(self) -> list[Sound]:
        """Return all sounds sorted by order."""
        return list(self._sounds)

    @property
    def categories(self) -> list[Category]:
        """Return all categories sorted by name."""
        return list(self._categories)

    @property
    def files(self) -> SoundFileStore:
        """Return the sound file store."""
        return self._files

    def load(self) -> None:
        """Load both collections from the repository and emit signals."""
        try:
            self._sounds = self._repo.sounds()
            self._categories = self._repo.categories()
        except StorageError as e:
            logger.error("Failed to load soundboard: %s", e)
            self._sounds = []
            self._categories = []
        logger.info(
            "Loaded %d sounds and %d categories", len(self._sounds), len(self._categories)
        )
        self.categories_changed.emit(self.categories)
        self.sounds_changed.emit(self.sounds)

    # -- Lookups ---------------------------------------------------------------

    def get_sound(self, sound_id: str) -> Sound | None:
        """Get a sound by ID."""
        for sound in self._sounds:
            if sound.id == sound_id:
                return sound
        return None

    def get_category(self, category_id: str) -> Category | None:
        """Get a category by ID."""
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def category_for(self, sound: Sound) -> Category | None:
        """Return the category a sound refers to, or None if it is gone."""
        return find_category(self._categories, sound.category)

    def sounds_in(self, category_name: str | None) -> list[Sound]:
        """Return sounds of one category (all sounds for None), in order."""
        if category_name is None:
            return self.sounds
        return [s for s in self._sounds if s.category == category_name]

    def appearance_for(self, sound: Sound) -> SoundAppearance:
        """Resolve the tile colors for ``sound``.

        A sound whose category no longer exists gets the neutral fallback
        color and the default category's label.
        """
        category = self.category_for(sound)
        if category is None:
            return SoundAppearance(
                background=FALLBACK_COLOR,
                foreground=text_color_for(FALLBACK_COLOR),
                label=DEFAULT_CATEGORY_NAME,
                is_fallback=True,
            )
        return SoundAppearance(
            background=category.color_hex,
            foreground=text_color_for(category.color_hex),
            label=category.name,
        )

    # -- Categories ------------------------------------------------------------

    def seed_categories(self) -> int:
        """Insert the default and preset categories on first launch.

        Does nothing if any category is stored, or if the stored categories
        cannot be read. Calling this twice never duplicates anything.

        Returns:
            Number of categories inserted.
        """
        if self._categories:
            return 0
        try:
            stored = self._repo.categories()
        except StorageError as e:
            logger.warning("Seeding skipped, categories unreadable: %s", e)
            return 0
        if stored:
            return 0

        missing = missing_seed_categories(stored)
        for category in missing:
            self._repo.insert(category)
        try:
            self._repo.save()
        except StorageError as e:
            logger.warning("Seeding categories failed: %s", e)
            return 0

        self._categories = sorted([*self._categories, *missing], key=lambda c: c.name)
        logger.info("Seeded %d categories", len(missing))
        self.categories_changed.emit(self.categories)
        return len(missing)

    def create_category(self, name: str, color_hex: str) -> Category:
        """Create a category.

        Raises:
            ValidationError: Empty or duplicate name, or invalid color.
            StorageError: If the save fails.
        """
        clean_name, color = validate_category(name, color_hex, self._categories)
        category = Category(name=clean_name, color_hex=color)
        self._repo.insert(category)
        self._repo.save()

        self._categories = sorted([*self._categories, category], key=lambda c: c.name)
        logger.info("Created category %s", category.name)
        self.categories_changed.emit(self.categories)
        return category

    def update_category(self, category_id: str, name: str, color_hex: str) -> Category:
        """Rename and/or recolor a category.

        Sounds keep the name they were saved with.

        Raises:
            ValidationError: Unknown id, default category, empty or
                duplicate name, or invalid color.
            StorageError: If the save fails.
        """
        category = self.get_category(category_id)
        if category is None:
            raise ValidationError("Category not found")
        clean_name, color = validate_category(
            name, color_hex, self._categories, editing=category
        )
        updated = replace(category, name=clean_name, color_hex=color)
        self._repo.update(updated)
        self._repo.save()

        self._categories = sorted(
            [updated if c.id == category_id else c for c in self._categories],
            key=lambda c: c.name,
        )
        logger.info("Updated category %s -> %s", category.name, updated.name)
        self.categories_changed.emit(self.categories)
        return updated

    def delete_category(self, category_id: str) -> None:
        """Delete a category without touching the sounds that use it.

        Raises:
            ValidationError: Unknown id or the default category.
        """
        category = self.get_category(category_id)
        if category is None:
            raise ValidationError("Category not found")
        if category.is_default:
            raise ValidationError("The default category cannot be deleted")

        try:
            self._repo.delete(category)
            self._repo.save()
        except StorageError as e:
            self._repo.discard()
            logger.warning("Deleting category %s was not saved: %s", category.name, e)

        self._categories = [c for c in self._categories if c.id != category_id]
        logger.info("Deleted category %s", category.name)
        self.categories_changed.emit(self.categories)

    # -- Sounds ----------------------------------------------------------------

    def add_sound(self, description: str, category: str, source: Path | None) -> Sound:
        """Import an audio file as a new custom sound at the end of the grid.

        Raises:
            ValidationError: Empty fields, no file, or unsupported extension.
            FileSystemError: If the file cannot be copied.
            StorageError: If the save fails (the copied file is removed).
        """
        clean_description = _required(description, "Sound name cannot be empty")
        clean_category = _required(category, "Category cannot be empty")
        if source is None:
            raise ValidationError("Select an audio file")
        validate_extension(source)

        file_name, ext = self._files.import_file(source)
        sound = Sound(
            description=clean_description,
            category=clean_category,
            order=len(self._sounds) + 1,
            file_name=file_name,
            file_extension=ext,
            is_custom=True,
        )
        self._repo.insert(sound)
        try:
            self._repo.save()
        except StorageError:
            self._files.remove(file_name)
            raise

        self._sounds.append(sound)
        logger.info("Added sound %s (%s)", sound.description, file_name)
        self.sounds_changed.emit(self.sounds)
        return sound

    def edit_sound(
        self,
        sound_id: str,
        description: str,
        category: str,
        order: str | int,
    ) -> Sound:
        """Update a sound's description, category and order.

        The audio file keeps its name.

        Raises:
            ValidationError: Unknown id, empty fields, or a bad order.
            StorageError: If the save fails.
        """
        sound = self.get_sound(sound_id)
        if sound is None:
            raise ValidationError("Sound not found")
        clean_description = _required(description, "Sound name cannot be empty")
        clean_category = _required(category, "Category cannot be empty")
        new_order = parse_order(order)

        updated = replace(
            sound, description=clean_description, category=clean_category, order=new_order
        )
        self._repo.update(updated)
        self._repo.save()

        self._sounds = sort_by_order(
            [updated if s.id == sound_id else s for s in self._sounds]
        )
        logger.info("Edited sound %s", sound_id)
        self.sounds_changed.emit(self.sounds)
        return updated

    def delete_sound(self, sound_id: str) -> None:
        """Delete a sound and, if imported, its audio file.

        Raises:
            ValidationError: Unknown id.
        """
        sound = self.get_sound(sound_id)
        if sound is None:
            raise ValidationError("Sound not found")

        if self._playback is not None and self._playback.current_id == sound_id:
            self._playback.stop()

        if sound.is_custom and sound.file_name:
            self._files.remove(sound.file_name)

        try:
            self._repo.delete(sound)
            self._repo.save()
        except StorageError as e:
            self._repo.discard()
            logger.warning("Deleting sound %s was not saved: %s", sound_id, e)

        self._sounds = [s for s in self._sounds if s.id != sound_id]
        logger.info("Deleted sound %s", sound.description)
        self.sounds_changed.emit(self.sounds)

    def reorder(self, dragged_id: str, destination_id: str) -> bool:
        """Move a sound onto another's position and renumber all orders.

        Returns:
            True if the order changed.
        """
        reordered = reorder(self._sounds, dragged_id, destination_id)
        if [(s.id, s.order) for s in reordered] == [(s.id, s.order) for s in self._sounds]:
            return False

        try:
            for sound in reordered:
                self._repo.update(sound)
            self._repo.save()
        except StorageError as e:
            self._repo.discard()
            logger.warning("Reorder was not saved: %s", e)

        self._sounds = reordered
        logger.debug("Moved %s onto %s", dragged_id, destination_id)
        self.sounds_changed.emit(self.sounds)
        return True
