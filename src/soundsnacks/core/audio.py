"""Audio backend: one playback session per loaded clip.

A session wraps the platform media player around a clip's bytes. It
emits ``finished`` exactly once when playback reaches the end of the
clip (never after an explicit :meth:`AudioSession.stop`) and ``failed``
if the media layer reports an error. Both signals carry the session
itself so a receiver can tell a stale session from the current one.

The production backend uses Qt Multimedia. Tests substitute their own
:class:`AudioBackend` so no audio device is needed.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QObject, QUrl, Signal
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from soundsnacks.errors import PlaybackError

logger = logging.getLogger(__name__)


class AudioSession(QObject):
    """A loaded clip that can be played, paused and stopped."""

    finished = Signal(object)  # self, on natural end of playback
    failed = Signal(object, str)  # self, error message

    def play(self) -> None:
        """Start or resume playback."""
        raise NotImplementedError

    def pause(self) -> None:
        """Pause playback, keeping the position."""
        raise NotImplementedError

    def stop(self) -> None:
        """Stop playback; ``finished`` will not be emitted afterwards."""
        raise NotImplementedError

    def set_volume(self, volume: float) -> None:
        """Set the output volume (0.0 to 1.0)."""
        raise NotImplementedError

    @property
    def is_playing(self) -> bool:
        """Return True while audio is being rendered."""
        raise NotImplementedError

    def dispose(self) -> None:
        """Stop and release the session's resources."""
        self.stop()
        self.deleteLater()


class AudioBackend:
    """Factory for audio sessions."""

    def create_session(self, data: bytes, extension: str, volume: float = 1.0) -> AudioSession:
        """Create a session for ``data``.

        Args:
            data: Raw audio file contents.
            extension: File extension hinting at the container format.
            volume: Initial output volume (0.0 to 1.0).

        Raises:
            PlaybackError: If the data cannot be used.
        """
        raise NotImplementedError


class QtAudioSession(AudioSession):
    """Session playing in-memory bytes through ``QMediaPlayer``."""

    def __init__(self, data: bytes, extension: str, volume: float = 1.0) -> None:
        """Load ``data`` into a buffer and attach a media player to it.

        Raises:
            PlaybackError: If ``data`` is empty or the buffer cannot be opened.
        """
        super().__init__()
        if not data:
            raise PlaybackError("No audio data")

        self._done = False
        self._buffer = QBuffer(self)
        self._buffer.setData(QByteArray(data))
        if not self._buffer.open(QIODevice.OpenModeFlag.ReadOnly):
            raise PlaybackError("Could not open audio buffer")

        self._output = QAudioOutput(self)
        self._output.setVolume(volume)

        self._player = QMediaPlayer(self)
        self._player.setAudioOutput(self._output)
        self._player.mediaStatusChanged.connect(self._on_media_status_changed)
        self._player.errorOccurred.connect(self._on_error)
        # The URL only tells the decoder which format to expect
        self._player.setSourceDevice(self._buffer, QUrl(f"sound.{extension or 'mp3'}"))

    def play(self) -> None:
        self._player.play()

    def pause(self) -> None:
        self._player.pause()

    def stop(self) -> None:
        self._done = True
        self._player.stop()

    def set_volume(self, volume: float) -> None:
        self._output.setVolume(max(0.0, min(1.0, volume)))

    @property
    def is_playing(self) -> bool:
        return self._player.playbackState() == QMediaPlayer.PlaybackState.PlayingState

    def _on_media_status_changed(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.MediaStatus.EndOfMedia and not self._done:
            self._done = True
            self.finished.emit(self)
        elif status == QMediaPlayer.MediaStatus.InvalidMedia and not self._done:
            self._done = True
            self.failed.emit(self, "Invalid or unsupported audio data")

    def _on_error(self, error: QMediaPlayer.Error, message: str) -> None:
        if error == QMediaPlayer.Error.NoError or self._done:
            return
        self._done = True
        logger.warning("Media player error (%s): %s", error, message)
        self.failed.emit(self, message)


class QtAudioBackend(AudioBackend):
    """Backend creating :class:`QtAudioSession` objects."""

    def create_session(self, data: bytes, extension: str, volume: float = 1.0) -> AudioSession:
        return QtAudioSession(data, extension, volume)
