"""Tests for imported and bundled sound files."""

from pathlib import Path
from unittest.mock import patch

import pytest

from fakes import WAV_BYTES, write_clip
from soundsnacks.core.sound_files import SoundFileStore, extension_of, validate_extension
from soundsnacks.errors import FileSystemError, ValidationError
from soundsnacks.models.sound import Sound


class TestExtensions:
    """Test extension checks."""

    @pytest.mark.parametrize(
        ("name", "expected"), [("a.MP3", "mp3"), ("b.wav", "wav"), ("c.tar.m4a", "m4a")]
    )
    def test_supported(self, name: str, expected: str) -> None:
        assert validate_extension(Path(name)) == expected

    @pytest.mark.parametrize("name", ["notes.txt", "clip.ogg", "noext"])
    def test_unsupported(self, name: str) -> None:
        with pytest.raises(ValidationError, match="MP3, WAV or M4A"):
            validate_extension(Path(name))

    def test_extension_of(self) -> None:
        assert extension_of(Path("/x/y/Clip.WaV")) == "wav"


class TestImport:
    """Test copying files into the store."""

    def test_import_copies_bytes(self, files: SoundFileStore, clip: Path) -> None:
        """The copy has a generated name and the original bytes."""
        file_name, ext = files.import_file(clip)

        assert ext == "wav"
        assert file_name.endswith(".wav")
        assert file_name != clip.name
        assert files.path_for(file_name).read_bytes() == WAV_BYTES
        assert clip.exists()

    def test_same_file_twice_gets_two_names(self, files: SoundFileStore, clip: Path) -> None:
        first, _ = files.import_file(clip)
        second, _ = files.import_file(clip)
        assert first != second

    def test_copy_failure(self, files: SoundFileStore, clip: Path) -> None:
        failure = OSError(28, "No space")
        with patch("soundsnacks.core.sound_files.shutil.copyfile", side_effect=failure):
            with pytest.raises(FileSystemError, match="No space"):
                files.import_file(clip)

    def test_missing_source(self, files: SoundFileStore, tmp_path: Path) -> None:
        with pytest.raises(FileSystemError):
            files.import_file(tmp_path / "gone.mp3")

    def test_remove(self, files: SoundFileStore, clip: Path) -> None:
        file_name, _ = files.import_file(clip)
        assert files.remove(file_name) is True
        assert not files.path_for(file_name).exists()

    def test_remove_missing_is_quiet(self, files: SoundFileStore) -> None:
        assert files.remove("nothing.wav") is False


class TestLoad:
    """Test reading audio for a sound."""

    def test_load_imported(self, files: SoundFileStore, imported_sound: Sound) -> None:
        assert files.load(imported_sound) == WAV_BYTES

    def test_load_bundled_asset(self, files: SoundFileStore) -> None:
        """A bundled asset is found by name, with or without extension."""
        write_clip(files.assets_dir, "risa.mp3", b"ID3asset")
        sound = Sound(description="Risa", category="Risas", order=1, asset_name="risa")
        assert files.load(sound) == b"ID3asset"

    def test_file_name_falls_back_to_assets(self, files: SoundFileStore) -> None:
        """A non-imported file name is looked up among the bundled files."""
        write_clip(files.assets_dir, "golpe.wav", b"RIFFgolpe")
        sound = Sound(
            description="Golpe",
            category="Golpes",
            order=1,
            file_name="golpe.wav",
            file_extension="wav",
        )
        assert files.load(sound) == b"RIFFgolpe"

    def test_missing_returns_none(self, files: SoundFileStore) -> None:
        sound = Sound(
            description="Ghost", category="x", order=1, file_name="x.mp3", file_extension="mp3"
        )
        assert files.load(sound) is None

    def test_no_source_returns_none(self, files: SoundFileStore) -> None:
        assert files.load(Sound(description="Empty", category="x", order=1)) is None

    def test_file_name_without_extension_is_not_read(self, files: SoundFileStore) -> None:
        """A record with a file name but no extension points at no audio."""
        sound = Sound(description="Half", category="x", order=1, file_name="x.mp3")
        assert not sound.has_source
        with patch.object(files, "_read") as read:
            assert files.load(sound) is None
        read.assert_not_called()
