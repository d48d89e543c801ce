"""Configuration manager using QSettings for persistent storage."""

import logging
from pathlib import Path

from PySide6.QtCore import QSettings, QStandardPaths

from soundsnacks.core.sound_files import SOUNDS_DIRNAME
from soundsnacks.storage.database import database_url

logger = logging.getLogger(__name__)

# Storage
_KEY_DATA_DIR = "storage/data_dir"

# Playback
_KEY_VOLUME = "playback/volume"

# Grid
_KEY_GRID_COLUMNS = "grid/columns"

# Appearance
_KEY_THEME = "appearance/theme"

DEFAULT_VOLUME = 100
DEFAULT_GRID_COLUMNS = 5
MIN_GRID_COLUMNS = 2
MAX_GRID_COLUMNS = 10
THEMES = ("system", "dark", "light")


def default_data_dir() -> Path:
    """Return the platform application-data directory."""
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppDataLocation
    )
    if not location:
        return Path.home() / ".soundsnacks"
    return Path(location)


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\SoundSnacks\\SoundSnacks
    - macOS: ~/Library/Preferences/com.SoundSnacks.SoundSnacks.plist
    - Linux: ~/.config/SoundSnacks/SoundSnacks.conf

    Example:
        config = ConfigManager()
        files = SoundFileStore(config.sounds_dir)
        repo = Repository.open(config.database_url)
    """

    def __init__(
        self,
        organization: str = "SoundSnacks",
        application: str = "SoundSnacks",
        *,
        data_dir: Path | None = None,
    ) -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
            data_dir: Override for the data directory (not persisted).
        """
        self._settings = QSettings(organization, application)
        self._data_dir_override = data_dir

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Storage ---------------------------------------------------------------

    def get_data_dir(self) -> Path:
        """Return the directory holding the database and sounds.

        Returns:
            The command-line override, the stored value, or the platform default.
        """
        if self._data_dir_override is not None:
            return self._data_dir_override
        value = self._settings.value(_KEY_DATA_DIR, "", str)
        return Path(str(value)) if value else default_data_dir()

    def set_data_dir(self, path: Path | None) -> None:
        """Persist a custom data directory, or None to use the default.

        Args:
            path: Directory path.
        """
        self._settings.setValue(_KEY_DATA_DIR, str(path) if path else "")

    @property
    def sounds_dir(self) -> Path:
        """Return the directory for imported sound files."""
        return self.get_data_dir() / SOUNDS_DIRNAME

    @property
    def database_url(self) -> str:
        """Return the SQLAlchemy URL of the sounds database."""
        return database_url(self.get_data_dir())

    def ensure_data_dir(self) -> Path:
        """Create the data and sounds directories if needed."""
        data_dir = self.get_data_dir()
        try:
            self.sounds_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create data directory %s: %s", data_dir, e)
        return data_dir

    # -- Playback --------------------------------------------------------------

    def get_volume(self) -> int:
        """Return the playback volume.

        Returns:
            Volume 0-100 (default 100).
        """
        value = self._settings.value(_KEY_VOLUME, DEFAULT_VOLUME, int)
        return max(0, min(100, int(value)))  # type: ignore[arg-type]

    def set_volume(self, volume: int) -> None:
        """Set the playback volume.

        Args:
            volume: Volume 0-100.
        """
        self._settings.setValue(_KEY_VOLUME, max(0, min(100, volume)))

    # -- Grid ------------------------------------------------------------------

    def get_grid_columns(self) -> int:
        """Return the number of tiles per grid row.

        Returns:
            Column count (default 5).
        """
        value = self._settings.value(_KEY_GRID_COLUMNS, DEFAULT_GRID_COLUMNS, int)
        return max(MIN_GRID_COLUMNS, min(MAX_GRID_COLUMNS, int(value)))  # type: ignore[arg-type]

    def set_grid_columns(self, columns: int) -> None:
        """Set the number of tiles per grid row.

        Args:
            columns: Column count (2-10).
        """
        self._settings.setValue(
            _KEY_GRID_COLUMNS, max(MIN_GRID_COLUMNS, min(MAX_GRID_COLUMNS, columns))
        )

    # -- Appearance ------------------------------------------------------------

    def get_theme(self) -> str:
        """Return the theme preference.

        Returns:
            One of "system", "dark", "light". Default "system".
        """
        value = self._settings.value(_KEY_THEME, "system", str)
        return str(value) if value in THEMES else "system"

    def set_theme(self, theme: str) -> None:
        """Set the theme preference.

        Args:
            theme: One of "system", "dark", "light".
        """
        self._settings.setValue(_KEY_THEME, theme if theme in THEMES else "system")

    # -- General ---------------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
