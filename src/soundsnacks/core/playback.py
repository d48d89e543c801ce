"""Playback controller: a single-session state machine.

States are ``IDLE``, ``PLAYING(id)`` and ``PAUSED(id)``. At most one
audio session exists at a time; starting a new one stops the previous
one first. The audio layer reports the end of a clip asynchronously; the
controller receives that report through a queued Qt connection, so the
state is only ever mutated on the controller's own (GUI) thread.

Example:
    controller = PlaybackController(files)
    controller.state_changed.connect(grid.refresh_tile)
    controller.toggle(sound)
"""

from __future__ import annotations

import logging
from enum import Enum

from PySide6.QtCore import QObject, Qt, Signal, Slot

from soundsnacks.core.audio import AudioBackend, AudioSession, QtAudioBackend
from soundsnacks.core.sound_files import SoundFileStore
from soundsnacks.errors import PlaybackError
from soundsnacks.models.sound import Sound

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    """Transient playback state of a sound."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class PlaybackController(QObject):
    """Owns the one active audio session.

    Signals:
        state_changed: Emitted with the id of the sound whose state changed
            (the id is None only if no sound was involved).
    """

    state_changed = Signal(object)  # sound id or None

    def __init__(
        self,
        files: SoundFileStore,
        backend: AudioBackend | None = None,
        volume: int = 100,
    ) -> None:
        """Initialize the controller.

        Args:
            files: Store used to load each sound's bytes.
            backend: Audio backend; defaults to Qt Multimedia.
            volume: Output volume 0-100 applied to every session.
        """
        super().__init__()
        self._files = files
        self._backend = backend or QtAudioBackend()
        self._volume = max(0, min(100, volume))
        self._session: AudioSession | None = None
        self._current_id: str | None = None
        self._state = PlaybackState.IDLE

    @property
    def current_id(self) -> str | None:
        """Return the id of the playing or paused sound."""
        return self._current_id

    @property
    def state(self) -> PlaybackState:
        """Return the controller state."""
        return self._state

    @property
    def has_session(self) -> bool:
        """Return True if an audio session is loaded."""
        return self._session is not None

    @property
    def volume(self) -> int:
        """Return the output volume (0-100)."""
        return self._volume

    def set_volume(self, volume: int) -> None:
        """Set the output volume, applying it to the current session too."""
        self._volume = max(0, min(100, volume))
        if self._session is not None:
            self._session.set_volume(self._volume / 100)

    # -- Queries ---------------------------------------------------------------

    def state_for(self, sound: Sound) -> PlaybackState:
        """Return the state of ``sound`` (IDLE unless it is the current one)."""
        if sound.id != self._current_id:
            return PlaybackState.IDLE
        return self._state

    def is_playing(self, sound: Sound) -> bool:
        return self.state_for(sound) is PlaybackState.PLAYING

    def is_paused(self, sound: Sound) -> bool:
        return self.state_for(sound) is PlaybackState.PAUSED

    # -- Transitions -----------------------------------------------------------

    def play(self, sound: Sound) -> None:
        """Start ``sound`` from the beginning.

        If the sound's audio cannot be found, nothing changes. If the
        backend rejects the audio, the controller ends up idle.
        """
        data = self._files.load(sound)
        if data is None:
            logger.warning("No audio data for sound %s (%s)", sound.id, sound.source_ref)
            return

        previous_id = self._discard_session()

        try:
            session = self._backend.create_session(
                data, sound.file_extension or "", self._volume / 100
            )
        except PlaybackError as e:
            logger.warning("Cannot play sound %s: %s", sound.id, e)
            self._current_id = None
            self._state = PlaybackState.IDLE
            if previous_id is not None:
                self.state_changed.emit(previous_id)
            return

        # Queued: the media layer may report from another thread
        session.finished.connect(self._on_session_finished, Qt.ConnectionType.QueuedConnection)
        session.failed.connect(self._on_session_failed, Qt.ConnectionType.QueuedConnection)

        self._session = session
        self._current_id = sound.id
        self._state = PlaybackState.PLAYING
        session.play()
        logger.debug("Playing %s", sound.id)

        if previous_id is not None and previous_id != sound.id:
            self.state_changed.emit(previous_id)
        self.state_changed.emit(sound.id)

    def toggle(self, sound: Sound) -> None:
        """Tap behavior for a tile.

        A different sound switches playback to ``sound``; the same sound
        while playing restarts it; the same sound while paused resumes.
        """
        if self._current_id != sound.id:
            self.stop()
            self.play(sound)
            return

        if self._state is PlaybackState.PLAYING:
            self.stop()
            self.play(sound)
            return

        if self._state is PlaybackState.PAUSED and self._session is not None:
            self._session.play()
            self._state = PlaybackState.PLAYING
            logger.debug("Resumed %s", sound.id)
            self.state_changed.emit(sound.id)

    def pause(self) -> None:
        """Pause the current sound if it is playing."""
        if self._state is not PlaybackState.PLAYING or self._session is None:
            return
        self._session.pause()
        self._state = PlaybackState.PAUSED
        logger.debug("Paused %s", self._current_id)
        self.state_changed.emit(self._current_id)

    def stop(self) -> None:
        """Stop and discard the current session."""
        previous_id = self._discard_session()
        self._current_id = None
        self._state = PlaybackState.IDLE
        if previous_id is not None:
            self.state_changed.emit(previous_id)

    def _discard_session(self) -> str | None:
        """Stop the current session and return the id it was playing."""
        previous_id = self._current_id
        session = self._session
        self._session = None
        if session is not None:
            session.finished.disconnect(self._on_session_finished)
            session.failed.disconnect(self._on_session_failed)
            session.dispose()
        return previous_id

    # -- Session callbacks (delivered on this object's thread) ------------------

    @Slot(object)
    def _on_session_finished(self, session: object) -> None:
        if session is not self._session:
            logger.debug("Ignoring completion from a stale session")
            return
        finished_id = self._current_id
        logger.debug("Finished %s", finished_id)
        self._reset()
        self.state_changed.emit(finished_id)

    @Slot(object, str)
    def _on_session_failed(self, session: object, message: str) -> None:
        if session is not self._session:
            return
        failed_id = self._current_id
        logger.warning("Playback of %s failed: %s", failed_id, message)
        self._reset()
        self.state_changed.emit(failed_id)

    def _reset(self) -> None:
        session = self._session
        self._session = None
        self._current_id = None
        self._state = PlaybackState.IDLE
        if session is not None:
            session.deleteLater()
