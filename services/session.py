from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from models.command import Command
from models.playback import OrderingMode, PlaybackState
from services.audio_player import AudioPlayer
from services.directory_lister import DirectoryLister
from services.errors import ListingError, PlaybackError
from services.navigation import NavigationState
from services.playback_controller import PlaybackController
from services.playlist_ordering import PlaylistOrdering

logger = logging.getLogger(__name__)


class Session:
    """Owns navigation and playback for the lifetime of the process.

    Every command and tick runs here on the UI loop. Per-operation
    failures become a one-line status message instead of an exception.
    """

    def __init__(self, navigation: NavigationState, playback: PlaybackController):
        self.navigation = navigation
        self.playback = playback
        self.status_message: Optional[str] = None
        self.status_is_error = False
        self.running = True

    @classmethod
    def create(
        cls,
        start_path: Path,
        audio_player: AudioPlayer,
        lister: Optional[DirectoryLister] = None,
        ordering: Optional[PlaylistOrdering] = None,
    ) -> "Session":
        """Build a session and list the starting directory.

        Raises:
            ListingError: If the starting directory cannot be listed.
        """
        navigation = NavigationState(start_path, lister=lister, ordering=ordering)
        navigation.refresh_listing()
        return cls(navigation, PlaybackController(audio_player))

    @property
    def playback_state(self) -> PlaybackState:
        return self.playback.state

    @property
    def now_playing(self) -> Optional[Path]:
        return self.playback.now_playing

    def dispatch(self, command: Command) -> Optional[str]:
        """Apply one command and return a status message, if any."""
        handlers = {
            Command.QUIT: self._quit,
            Command.TOGGLE_SHUFFLE: self._toggle_shuffle,
            Command.STOP: self._stop,
            Command.SELECT_NEXT: self.navigation.select_next,
            Command.SELECT_PREVIOUS: self.navigation.select_previous,
            Command.LEAVE_DIRECTORY: self._leave_directory,
            Command.ACTIVATE: self._activate,
            Command.PAUSE_OR_RESUME: self._pause_or_resume,
        }
        self.status_is_error = False
        message = handlers[command]()
        self.status_message = message
        return message

    def tick(self) -> Optional[str]:
        """Auto-advance if the current track has finished."""
        try:
            started = self.playback.tick(self.navigation.entries)
        except PlaybackError as e:
            logger.error(f"Auto-advance failed: {e}")
            self.status_message = self._fail(str(e))
            return self.status_message
        if started is None:
            return None
        self.status_is_error = False
        self.status_message = f"Now playing {started.name}"
        return self.status_message

    def _fail(self, message: str) -> str:
        self.status_is_error = True
        return message

    def _quit(self) -> None:
        self.playback.stop()
        self.running = False
        logger.info("Session ended")

    def _toggle_shuffle(self) -> str:
        mode = self.navigation.toggle_ordering_mode()
        return "Shuffle ON" if mode is OrderingMode.SHUFFLED else "Shuffle OFF"

    def _stop(self) -> None:
        self.playback.stop()

    def _leave_directory(self) -> Optional[str]:
        try:
            self.navigation.leave_to_parent()
        except ListingError as e:
            return self._fail(str(e))
        return None

    def _activate(self) -> Optional[str]:
        try:
            path = self.navigation.enter_selected()
        except ListingError as e:
            return self._fail(str(e))
        if path is None:
            return None

        try:
            self.playback.play(path)
        except PlaybackError as e:
            logger.error(f"Playback failed: {e}")
            return self._fail(str(e))
        return f"Now playing {path.name}"

    def _pause_or_resume(self) -> Optional[str]:
        if self.playback.state is PlaybackState.IDLE:
            return None
        self.playback.toggle_pause()
        return "Paused" if self.playback.state is PlaybackState.PAUSED else "Resumed"
