"""Core business logic layer.

This module contains the application logic that sits between the
repository and the Qt UI layer.

Classes:
    SoundboardStore: Central store with Qt signals.
    PlaybackController: Single-session playback state machine.
    SoundFileStore: Imported audio files on disk.
    ConfigManager: QSettings wrapper for configuration.
"""

from soundsnacks.core.config import ConfigManager
from soundsnacks.core.playback import PlaybackController, PlaybackState
from soundsnacks.core.reorder import reorder
from soundsnacks.core.sound_files import SoundFileStore
from soundsnacks.core.state import SoundboardStore

__all__ = [
    "ConfigManager",
    "PlaybackController",
    "PlaybackState",
    "SoundFileStore",
    "SoundboardStore",
    "reorder",
]
