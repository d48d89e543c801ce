"""Tests for the SQLAlchemy-backed repository."""

from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from soundsnacks.errors import StorageError
from soundsnacks.models.category import Category
from soundsnacks.models.sound import Sound
from soundsnacks.storage import Repository, database_url


def _sound(description: str, order: int, category: str = "Memes") -> Sound:
    return Sound(
        description=description,
        category=category,
        order=order,
        file_name="x.wav",
        file_extension="wav",
        is_custom=True,
    )


class TestCategories:
    """Test category persistence."""

    def test_insert_and_query_sorted(self, repo: Repository) -> None:
        """Categories come back sorted by name."""
        repo.insert(Category(name="Risas", color_hex="#FFFF00"))
        repo.insert(Category(name="Gritos", color_hex="#FF0000"))
        repo.save()

        assert [c.name for c in repo.categories()] == ["Gritos", "Risas"]

    def test_update(self, repo: Repository) -> None:
        category = Category(name="Old", color_hex="#000000")
        repo.insert(category)
        repo.save()

        repo.update(replace(category, name="New", color_hex="#FFFFFF"))
        repo.save()

        stored = repo.categories()
        assert len(stored) == 1
        assert stored[0].id == category.id
        assert stored[0].name == "New"
        assert stored[0].color_hex == "#FFFFFF"

    def test_update_unknown_raises(self, repo: Repository) -> None:
        with pytest.raises(StorageError):
            repo.update(Category(name="Ghost"))

    def test_delete(self, repo: Repository) -> None:
        category = Category(name="Temp")
        repo.insert(category)
        repo.save()

        repo.delete(category)
        repo.save()
        assert repo.categories() == []

    def test_delete_unknown_is_noop(self, repo: Repository) -> None:
        repo.delete(Category(name="Ghost"))
        repo.save()


class TestSounds:
    """Test sound persistence."""

    def test_sorted_by_order(self, repo: Repository) -> None:
        for description, order in (("c", 3), ("a", 1), ("b", 2)):
            repo.insert(_sound(description, order))
        repo.save()

        assert [s.description for s in repo.sounds()] == ["a", "b", "c"]
        assert repo.count_sounds() == 3

    def test_filter_by_category(self, repo: Repository) -> None:
        repo.insert(_sound("a", 1, "Memes"))
        repo.insert(_sound("b", 2, "Risas"))
        repo.save()

        assert [s.description for s in repo.sounds("Risas")] == ["b"]

    def test_round_trip_fields(self, repo: Repository) -> None:
        """Every field survives a save and reload."""
        sound = Sound(
            description="Boo",
            category="Gritos",
            order=7,
            asset_name=None,
            file_name="abc.m4a",
            file_extension="m4a",
            is_custom=True,
        )
        repo.insert(sound)
        repo.save()
        assert repo.sounds() == [sound]

    def test_save_failure_rolls_back(self, repo: Repository) -> None:
        """A failed commit raises StorageError and leaves nothing staged."""
        repo.insert(_sound("a", 1))
        with patch.object(
            repo.session, "commit", side_effect=OperationalError("commit", {}, Exception("disk"))
        ), pytest.raises(StorageError, match="Could not save"):
            repo.save()

        assert repo.sounds() == []

    def test_discard_drops_staged_update(self, repo: Repository) -> None:
        sound = _sound("a", 1)
        repo.insert(sound)
        repo.save()

        repo.update(replace(sound, order=5))
        repo.discard()
        repo.save()

        assert repo.sounds() == [sound]


class TestFileDatabase:
    """Test a database stored on disk."""

    def test_data_survives_reopen(self, tmp_path: Path) -> None:
        url = database_url(tmp_path)
        first = Repository.open(url)
        first.insert(Category(name="Memes", color_hex="#FF69B4"))
        first.save()
        first.close()

        second = Repository.open(url)
        try:
            assert [c.name for c in second.categories()] == ["Memes"]
        finally:
            second.close()
        assert (tmp_path / "soundsnacks.db").exists()

    def test_open_unwritable_location(self, tmp_path: Path) -> None:
        missing = tmp_path / "no" / "such" / "dir"
        with pytest.raises(StorageError, match="Cannot open database"):
            Repository.open(database_url(missing))
