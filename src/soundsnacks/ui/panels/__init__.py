"""UI panels for the main window."""

from soundsnacks.ui.panels.sound_grid import SoundGridPanel

__all__ = ["SoundGridPanel"]
