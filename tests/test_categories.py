"""Tests for category presets and validation."""

import pytest

from soundsnacks.core.categories import (
    PRESET_CATEGORIES,
    find_category,
    missing_seed_categories,
    seed_entries,
    validate_category,
)
from soundsnacks.errors import ValidationError
from soundsnacks.models.category import DEFAULT_CATEGORY_NAME, Category


@pytest.fixture
def existing() -> list[Category]:
    """Return the default category plus two user categories."""
    return [
        Category(name=DEFAULT_CATEGORY_NAME, id="default"),
        Category(name="Memes", color_hex="#FF69B4", id="memes"),
        Category(name="Risas", color_hex="#FFFF00", id="risas"),
    ]


class TestSeed:
    """Test the first-launch seed list."""

    def test_seed_has_thirteen_entries(self) -> None:
        entries = seed_entries()
        assert len(entries) == 13
        assert entries[0][0] == DEFAULT_CATEGORY_NAME
        assert entries[1:] == list(PRESET_CATEGORIES)

    def test_seed_names_unique(self) -> None:
        names = [name for name, _ in seed_entries()]
        assert len(set(names)) == len(names)

    def test_missing_skips_existing(self, existing: list[Category]) -> None:
        """Names already stored are not seeded again."""
        missing = missing_seed_categories(existing)
        names = {c.name for c in missing}
        assert DEFAULT_CATEGORY_NAME not in names
        assert "Memes" not in names
        assert len(missing) == 13 - 3

    def test_missing_on_empty(self) -> None:
        assert len(missing_seed_categories([])) == 13


class TestValidateCategory:
    """Test validate_category."""

    def test_valid_new_category(self, existing: list[Category]) -> None:
        """Names are trimmed and colors normalized."""
        assert validate_category("  Golpes ", "ebb04b", existing) == ("Golpes", "#EBB04B")

    def test_empty_name(self, existing: list[Category]) -> None:
        with pytest.raises(ValidationError, match="Name cannot be empty"):
            validate_category("   ", "#000000", existing)

    @pytest.mark.parametrize("name", ["memes", "MEMES", "  Memes  "])
    def test_duplicate_is_case_insensitive(self, existing: list[Category], name: str) -> None:
        with pytest.raises(ValidationError, match="already exists"):
            validate_category(name, "#000000", existing)

    def test_edit_may_keep_own_name(self, existing: list[Category]) -> None:
        """A category being edited does not collide with itself."""
        memes = existing[1]
        assert validate_category("memes", "#112233", existing, editing=memes) == (
            "memes",
            "#112233",
        )

    def test_edit_to_other_name_collides(self, existing: list[Category]) -> None:
        with pytest.raises(ValidationError, match="already exists"):
            validate_category("Risas", "#112233", existing, editing=existing[1])

    def test_default_cannot_be_modified(self, existing: list[Category]) -> None:
        with pytest.raises(ValidationError, match="default category"):
            validate_category("Otra", "#112233", existing, editing=existing[0])

    @pytest.mark.parametrize("color", ["", "#12345", "red", "#GGGGGG"])
    def test_invalid_color(self, existing: list[Category], color: str) -> None:
        with pytest.raises(ValidationError, match="Invalid color"):
            validate_category("Nueva", color, existing)


class TestFindCategory:
    """Test name lookup used to resolve a sound's category."""

    def test_exact_match(self, existing: list[Category]) -> None:
        found = find_category(existing, "Memes")
        assert found is not None
        assert found.id == "memes"

    def test_lookup_is_exact(self, existing: list[Category]) -> None:
        """Sounds refer to categories by their exact stored name."""
        assert find_category(existing, "memes") is None
        assert find_category(existing, "Gone") is None


class TestCategoryModel:
    """Test the Category dataclass."""

    def test_default_flag(self, existing: list[Category]) -> None:
        assert existing[0].is_default
        assert not existing[1].is_default

    def test_matches_ignores_case_and_spaces(self) -> None:
        assert Category(name="Efectos Mágicos").matches("  efectos mágicos ")

    def test_ids_are_unique(self) -> None:
        assert Category(name="a").id != Category(name="a").id
