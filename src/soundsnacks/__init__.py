"""SoundSnacks - a desktop soundboard with color-coded categories."""

__version__ = "1.0.0"
