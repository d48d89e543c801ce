"""Sound model representing one clip on the board."""

import uuid
from dataclasses import dataclass, field

SUPPORTED_EXTENSIONS = frozenset({"mp3", "wav", "m4a"})


@dataclass(frozen=True, slots=True)
class Sound:
    """A playable clip.

    The audio source is either a bundled asset (``asset_name``) or a file
    in the sounds directory (``file_name`` plus ``file_extension``).
    ``category`` holds a category *name*; it may refer to a category that
    no longer exists.

    Attributes:
        description: Display text shown on the tile.
        category: Name of the category this sound belongs to.
        order: 1-based position in the grid.
        asset_name: Name of a bundled asset, if any.
        file_name: File name inside the sounds directory, if any.
        file_extension: Lower-case extension without the dot.
        is_custom: True if the user imported the file.
        id: Unique identifier, stable across renames.
    """

    description: str
    category: str
    order: int
    asset_name: str | None = None
    file_name: str | None = None
    file_extension: str | None = None
    is_custom: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def source_ref(self) -> str:
        """Return a human-readable reference to the audio source."""
        if self.asset_name:
            return self.asset_name
        if self.file_name:
            return self.file_name
        return ""

    @property
    def has_source(self) -> bool:
        """Return True if the sound points at any audio at all."""
        return bool(self.asset_name or (self.file_name and self.file_extension))
