"""Exception hierarchy for soundboard operations.

Every user-facing operation raises a subclass of :class:`SoundboardError`
so the UI can catch one type and show its message.
"""


class SoundboardError(Exception):
    """Base class for all soundboard errors."""


class ValidationError(SoundboardError):
    """Input was rejected; nothing was changed."""


class StorageError(SoundboardError):
    """The persistence layer failed to save."""


class PlaybackError(SoundboardError):
    """Audio could not be loaded or played."""


class FileSystemError(SoundboardError):
    """A sound file could not be copied into the sounds directory."""
