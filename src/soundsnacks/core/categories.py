"""Category presets and validation rules."""

from collections.abc import Iterable

from soundsnacks.errors import ValidationError
from soundsnacks.models.category import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_NAME, Category
from soundsnacks.models.color import normalize_hex

# Inserted on first launch, after the default category
PRESET_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Gritos", "#FF0000"),
    ("Saludos", "#00FF00"),
    ("Golpes", "#EBB04B"),
    ("Disparos", "#4B5EAA"),
    ("Risas", "#FFFF00"),
    ("Burlas", "#800080"),
    ("Victorias", "#FFD700"),
    ("Derrotas", "#808080"),
    ("Animales", "#8B4513"),
    ("Memes", "#FF69B4"),
    ("Efectos Mágicos", "#FF00FF"),
    ("Sonidos Locos", "#FF4500"),
)


def seed_entries() -> list[tuple[str, str]]:
    """Return the default category followed by the presets."""
    return [(DEFAULT_CATEGORY_NAME, DEFAULT_CATEGORY_COLOR), *PRESET_CATEGORIES]


def missing_seed_categories(existing: Iterable[Category]) -> list[Category]:
    """Return seed categories whose names are not already taken."""
    names = {c.name for c in existing}
    missing: list[Category] = []
    for name, color in seed_entries():
        if name not in names:
            missing.append(Category(name=name, color_hex=color))
            names.add(name)
    return missing


def validate_category(
    name: str,
    color_hex: str,
    existing: Iterable[Category],
    *,
    editing: Category | None = None,
) -> tuple[str, str]:
    """Check a category form and return the cleaned ``(name, color_hex)``.

    Args:
        name: Requested name (trimmed before checking).
        color_hex: Requested color.
        existing: All stored categories.
        editing: The category being edited, excluded from the duplicate check.

    Raises:
        ValidationError: If the name is empty or taken, the color is
            invalid, or ``editing`` is the default category.
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Name cannot be empty")

    editing_id = editing.id if editing else None
    if any(c.matches(trimmed) and c.id != editing_id for c in existing):
        raise ValidationError("A category with that name already exists")

    if editing is not None and editing.is_default:
        raise ValidationError("The default category cannot be modified")

    try:
        color = normalize_hex(color_hex)
    except ValueError as e:
        raise ValidationError(f"Invalid color: {color_hex}") from e

    return trimmed, color


def find_category(categories: Iterable[Category], name: str) -> Category | None:
    """Find the category a sound refers to by name (exact match)."""
    for category in categories:
        if category.name == name:
            return category
    return None
