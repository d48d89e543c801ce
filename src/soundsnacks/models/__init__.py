"""Data models for sounds and categories."""

from soundsnacks.models.category import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_NAME, Category
from soundsnacks.models.sound import SUPPORTED_EXTENSIONS, Sound

__all__ = [
    "Category",
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_CATEGORY_NAME",
    "SUPPORTED_EXTENSIONS",
    "Sound",
]
