"""App-private storage for imported sound files.

Imported clips are copied into a ``Sounds`` directory under a freshly
generated name (``<uuid4>.<ext>``) so two imports of ``clip.wav`` never
collide. Bundled clips live in the package ``assets`` directory.

Usage:
    from soundsnacks.core.sound_files import SoundFileStore

    files = SoundFileStore(data_dir / "Sounds")
    file_name, ext = files.import_file(Path("~/clip.wav").expanduser())
    data = files.load(sound)
"""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path

from soundsnacks.errors import FileSystemError, ValidationError
from soundsnacks.models.sound import SUPPORTED_EXTENSIONS, Sound

logger = logging.getLogger(__name__)

SOUNDS_DIRNAME = "Sounds"
ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"


def extension_of(path: Path) -> str:
    """Return the lower-case extension of ``path`` without the dot."""
    return path.suffix.lstrip(".").lower()


def validate_extension(path: Path) -> str:
    """Return the extension of ``path`` if it is a supported audio type.

    Raises:
        ValidationError: For any extension other than mp3, wav or m4a.
    """
    ext = extension_of(path)
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValidationError("Only MP3, WAV or M4A files are accepted")
    return ext


class SoundFileStore:
    """Copy, read and remove audio files for sounds.

    Example:
        files = SoundFileStore(Path("/data/Sounds"))
        name, ext = files.import_file(Path("/tmp/clip.wav"))
        files.remove(name)
    """

    def __init__(self, sounds_dir: Path, assets_dir: Path = ASSETS_DIR) -> None:
        """Initialize the store.

        Args:
            sounds_dir: Directory holding imported files (created on demand).
            assets_dir: Directory holding bundled assets.
        """
        self._sounds_dir = sounds_dir
        self._assets_dir = assets_dir

    @property
    def sounds_dir(self) -> Path:
        """Return the directory holding imported files."""
        return self._sounds_dir

    @property
    def assets_dir(self) -> Path:
        """Return the directory holding bundled assets."""
        return self._assets_dir

    def path_for(self, file_name: str) -> Path:
        """Return the full path of an imported file."""
        return self._sounds_dir / file_name

    def import_file(self, source: Path) -> tuple[str, str]:
        """Copy ``source`` into the sounds directory under a new name.

        Args:
            source: File chosen by the user.

        Returns:
            Tuple of (generated file name, lower-case extension).

        Raises:
            ValidationError: If the extension is not supported.
            FileSystemError: If the directory or copy cannot be written.
        """
        ext = validate_extension(source)
        file_name = f"{uuid.uuid4()}.{ext}"
        destination = self.path_for(file_name)
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, destination)
        except OSError as e:
            logger.error("Failed to copy %s to %s: %s", source, destination, e)
            raise FileSystemError(f"Error saving file: {e.strerror or e}") from e
        logger.info("Imported %s as %s", source.name, file_name)
        return file_name, ext

    def remove(self, file_name: str) -> bool:
        """Delete an imported file, ignoring failures.

        Returns:
            True if the file was removed.
        """
        path = self.path_for(file_name)
        try:
            path.unlink()
        except OSError as e:
            logger.warning("Could not remove %s: %s", path, e)
            return False
        logger.debug("Removed %s", path)
        return True

    def load(self, sound: Sound) -> bytes | None:
        """Read the audio bytes for ``sound``.

        Looks for a bundled asset by name, then the imported file, then a
        bundled file with the same name.

        Returns:
            The file contents, or None if nothing readable was found.
        """
        if not sound.has_source:
            logger.debug("Sound %s has no audio source", sound.id)
            return None

        if sound.asset_name:
            data = self._read_asset(sound.asset_name)
            if data is not None:
                return data
            logger.warning("Bundled asset not found: %s", sound.asset_name)

        if sound.file_name and sound.file_extension:
            data = self._read(self.path_for(sound.file_name))
            if data is not None:
                return data
            data = self._read(self._assets_dir / sound.file_name)
            if data is None:
                stem = Path(sound.file_name).stem
                data = self._read(self._assets_dir / f"{stem}.{sound.file_extension}")
            if data is not None:
                return data
            logger.warning("Sound file not found: %s", sound.file_name)

        return None

    def _read_asset(self, name: str) -> bytes | None:
        candidate = self._assets_dir / name
        if candidate.suffix:
            return self._read(candidate)
        for ext in sorted(SUPPORTED_EXTENSIONS):
            data = self._read(self._assets_dir / f"{name}.{ext}")
            if data is not None:
                return data
        return None

    @staticmethod
    def _read(path: Path) -> bytes | None:
        try:
            return path.read_bytes()
        except OSError:
            return None
