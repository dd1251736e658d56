from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from models.entry import Entry
from models.playback import PlaybackState
from services.audio_player import AudioPlayer
from services.errors import PlaybackError

logger = logging.getLogger(__name__)


class PlaybackController:
    """Play/pause/stop state machine with auto-advance.

    Holds the path of the playing track, never the listing it came from,
    so directory changes do not disturb playback.
    """

    def __init__(self, audio_player: AudioPlayer):
        self._audio_player = audio_player
        self._state: PlaybackState = PlaybackState.IDLE
        self._now_playing: Optional[Path] = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def now_playing(self) -> Optional[Path]:
        return self._now_playing

    def get_position(self) -> float:
        """Elapsed seconds of the current track, 0.0 when idle."""
        if self._state is PlaybackState.IDLE:
            return 0.0
        return self._audio_player.get_position()

    def play(self, path: Path) -> None:
        """Stop whatever is playing and start path.

        Raises:
            PlaybackError: If the file cannot be decoded or played. The
                controller is left IDLE.
        """
        self._audio_player.stop()
        try:
            self._audio_player.play(path)
        except PlaybackError:
            self._state = PlaybackState.IDLE
            self._now_playing = None
            raise

        self._state = PlaybackState.PLAYING
        self._now_playing = path
        logger.info(f"Playing {path}")

    def pause(self) -> None:
        if self._state is PlaybackState.PLAYING:
            self._audio_player.pause()
            self._state = PlaybackState.PAUSED

    def resume(self) -> None:
        if self._state is PlaybackState.PAUSED:
            self._audio_player.resume()
            self._state = PlaybackState.PLAYING

    def toggle_pause(self) -> None:
        """Pause while playing, resume while paused, ignore while idle."""
        if self._state is PlaybackState.PLAYING:
            self.pause()
        elif self._state is PlaybackState.PAUSED:
            self.resume()

    def stop(self) -> None:
        self._audio_player.stop()
        if self._now_playing is not None:
            logger.info(f"Stopped {self._now_playing}")
        self._state = PlaybackState.IDLE
        self._now_playing = None

    def tick(self, entries: Sequence[Entry]) -> Optional[Path]:
        """Advance if the playing track has ended.

        Must be called on a regular cadence; end of track is only
        observable as the output going idle.

        Returns:
            Path of the newly started track, or None if nothing advanced.
        """
        if self._state is not PlaybackState.PLAYING:
            return None
        if not self._audio_player.is_idle():
            return None
        logger.debug(f"Track ended: {self._now_playing}")
        return self.advance(entries)

    def advance(self, entries: Sequence[Entry]) -> Optional[Path]:
        """Play the next audio entry after now_playing, wrapping once.

        Candidates that fail to decode are skipped. The scan visits each
        entry at most once.

        Returns:
            Path of the started track, or None if there was no audio entry
            (the controller is then IDLE).

        Raises:
            PlaybackError: If audio entries exist but none could be played.
        """
        count = len(entries)
        start = 0
        for index, entry in enumerate(entries):
            if entry.path == self._now_playing:
                start = index + 1
                break

        last_error: Optional[PlaybackError] = None
        for offset in range(count):
            entry = entries[(start + offset) % count]
            if not entry.is_audio:
                continue
            try:
                self.play(entry.path)
                return entry.path
            except PlaybackError as e:
                logger.warning(f"Skipping unplayable track {entry.path}: {e}")
                last_error = e

        self.stop()
        if last_error is not None:
            raise PlaybackError(f"No playable track left: {last_error}") from last_error
        return None
