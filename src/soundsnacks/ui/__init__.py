"""Qt user interface for SoundSnacks."""
