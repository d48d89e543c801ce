"""Reusable UI widgets."""

from soundsnacks.ui.widgets.category_manager import CategoryManagerDialog
from soundsnacks.ui.widgets.dialogs import CategoryFormDialog, ConfirmDialog, SoundFormDialog
from soundsnacks.ui.widgets.preferences import PreferencesDialog
from soundsnacks.ui.widgets.sound_tile import SoundTile

__all__ = [
    "CategoryFormDialog",
    "CategoryManagerDialog",
    "ConfirmDialog",
    "PreferencesDialog",
    "SoundFormDialog",
    "SoundTile",
]
