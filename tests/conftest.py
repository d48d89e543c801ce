"""Test fixtures for soundsnacks tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from fakes import FakeBackend, write_clip
from soundsnacks.core.config import ConfigManager
from soundsnacks.core.playback import PlaybackController
from soundsnacks.core.sound_files import SoundFileStore
from soundsnacks.core.state import SoundboardStore
from soundsnacks.models.sound import Sound
from soundsnacks.storage import MEMORY_URL, Repository


@pytest.fixture
def repo() -> Generator[Repository, None, None]:
    """Return a repository over a fresh in-memory database."""
    repository = Repository.open(MEMORY_URL)
    yield repository
    repository.close()


@pytest.fixture
def files(tmp_path: Path) -> SoundFileStore:
    """Return a file store rooted in the test's temp directory."""
    return SoundFileStore(tmp_path / "data" / "Sounds", assets_dir=tmp_path / "assets")


@pytest.fixture
def backend() -> FakeBackend:
    """Return a fake audio backend."""
    return FakeBackend()


@pytest.fixture
def playback(files: SoundFileStore, backend: FakeBackend) -> PlaybackController:
    """Return a playback controller on the fake backend."""
    return PlaybackController(files, backend)


@pytest.fixture
def store(
    repo: Repository, files: SoundFileStore, playback: PlaybackController
) -> SoundboardStore:
    """Return a loaded store with no data."""
    soundboard = SoundboardStore(repo, files, playback)
    soundboard.load()
    return soundboard


@pytest.fixture
def clip(tmp_path: Path) -> Path:
    """Return the path of a small WAV file outside the data directory."""
    return write_clip(tmp_path / "incoming")


@pytest.fixture
def imported_sound(files: SoundFileStore, clip: Path) -> Sound:
    """Return a sound whose file has been imported into the file store."""
    file_name, ext = files.import_file(clip)
    return Sound(
        description="Clip",
        category="Gritos",
        order=1,
        file_name=file_name,
        file_extension=ext,
        is_custom=True,
    )


@pytest.fixture
def config(tmp_path: Path) -> Generator[ConfigManager, None, None]:
    """Return a fresh ConfigManager for each test."""
    # Use unique organization/app to avoid test interference
    manager = ConfigManager("SoundSnacksTest", "TestConfig", data_dir=tmp_path / "data")
    manager.clear()
    yield manager
    manager.clear()
