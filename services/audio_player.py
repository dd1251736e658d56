import logging
from pathlib import Path

import pygame

from services.errors import DeviceError, PlaybackError

logger = logging.getLogger(__name__)

MIXER_FREQUENCY = 44100
MIXER_SIZE = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 512


class AudioPlayer:
    """Singleton wrapper around the pygame mixer's single music slot.

    The device is opened once per process with open_stream(); every track
    after that reuses it.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            self._stream_open = False
            self._initialized = True

    def open_stream(self) -> None:
        """Open the output device.

        Raises:
            DeviceError: If no audio device can be opened.
        """
        if self._stream_open:
            return
        try:
            pygame.mixer.init(
                frequency=MIXER_FREQUENCY,
                size=MIXER_SIZE,
                channels=MIXER_CHANNELS,
                buffer=MIXER_BUFFER,
            )
        except pygame.error as e:
            logger.critical(f"Failed to open audio device: {e}")
            raise DeviceError(f"Cannot open audio output device: {e}") from e
        self._stream_open = True
        logger.info("Audio output opened")

    def play(self, path: Path) -> None:
        """Decode and start a file, replacing whatever was loaded.

        Raises:
            PlaybackError: If the file cannot be loaded or played.
        """
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play()
        except (pygame.error, OSError) as e:
            logger.error(f"Failed to play {path}: {e}")
            raise PlaybackError(f"Cannot play {path.name}: {e}") from e

    def pause(self) -> None:
        pygame.mixer.music.pause()

    def resume(self) -> None:
        pygame.mixer.music.unpause()

    def stop(self) -> None:
        if self._stream_open:
            pygame.mixer.music.stop()

    def is_idle(self) -> bool:
        """True when nothing is queued on the output (paused also counts)."""
        return not pygame.mixer.music.get_busy()

    def get_position(self) -> float:
        """Return seconds played of the current track."""
        return max(0, pygame.mixer.music.get_pos()) / 1000.0

    def close(self) -> None:
        if self._stream_open:
            pygame.mixer.music.stop()
            pygame.mixer.quit()
            self._stream_open = False
            logger.info("Audio output closed")
