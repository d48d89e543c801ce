"""Category model: a named, colored grouping of sounds."""

import uuid
from dataclasses import dataclass, field

from soundsnacks.models.color import FALLBACK_COLOR

DEFAULT_CATEGORY_NAME = "Sin categoría"
DEFAULT_CATEGORY_COLOR = FALLBACK_COLOR


@dataclass(frozen=True, slots=True)
class Category:
    """A sound category.

    Attributes:
        name: Unique (case-insensitive) display name.
        color_hex: Swatch color as ``#RRGGBB``.
        id: Unique identifier.
    """

    name: str
    color_hex: str = DEFAULT_CATEGORY_COLOR
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def is_default(self) -> bool:
        """Return True for the protected "uncategorized" bucket."""
        return self.name == DEFAULT_CATEGORY_NAME

    def matches(self, name: str) -> bool:
        """Return True if ``name`` equals this category's name, ignoring case and padding."""
        return self.name.strip().lower() == name.strip().lower()
