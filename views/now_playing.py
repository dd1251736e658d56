from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Static

from models.entry import format_time
from models.playback import PlaybackState
from services.session import Session

PROGRESS_UPDATE_INTERVAL = 0.5

STATE_ICONS = {
    PlaybackState.IDLE: "■",
    PlaybackState.PLAYING: "▶",
    PlaybackState.PAUSED: "⏸",
}


class NowPlayingView(Container):
    """Widget displaying the currently loaded track."""

    DEFAULT_CSS = """
    NowPlayingView {
        background: #1a1a1a;
        border: solid #cc5500;
        padding: 1 2;
    }

    NowPlayingView .track-title {
        color: #ffb347;
        text-style: bold;
    }

    NowPlayingView .track-metadata {
        color: #888888;
    }

    NowPlayingView .state-display {
        color: #ff8c00;
        padding: 1 0 0 0;
    }
    """

    def __init__(self, session: Session, **kwargs):
        """Initialize NowPlayingView with a session reference."""
        super().__init__(**kwargs)
        self.session = session
        self._update_timer = None
        self._title_widget: Static | None = None
        self._folder_widget: Static | None = None
        self._time_widget: Static | None = None
        self._state_widget: Static | None = None

    def compose(self) -> ComposeResult:
        """Compose the now playing view with track info."""
        with Vertical():
            yield Static("♪", classes="music-icon")
            yield Static("No track playing", id="np-title", classes="track-title")
            yield Static("Folder: -", id="np-folder", classes="track-metadata")
            yield Static("0:00", id="np-time", classes="track-metadata")
            yield Static("State: Idle", id="np-state", classes="state-display")

    def on_mount(self) -> None:
        """Start update timer for elapsed time."""
        self._title_widget = self.query_one("#np-title", Static)
        self._folder_widget = self.query_one("#np-folder", Static)
        self._time_widget = self.query_one("#np-time", Static)
        self._state_widget = self.query_one("#np-state", Static)

        self._update_timer = self.set_interval(PROGRESS_UPDATE_INTERVAL, self.update_progress)
        self.update_progress()

    def update_progress(self) -> None:
        """Update all display widgets with current playback information."""
        if self._state_widget is None:
            return

        now_playing = self.session.now_playing
        playback_state = self.session.playback_state

        if now_playing is not None:
            self._title_widget.update(now_playing.name)
            self._folder_widget.update(f"Folder: {now_playing.parent}")
            self._time_widget.update(format_time(self.session.playback.get_position()))
        else:
            self._title_widget.update("No track playing")
            self._folder_widget.update("Folder: -")
            self._time_widget.update("0:00")

        icon = STATE_ICONS[playback_state]
        self._state_widget.update(f"{icon} State: {playback_state.value.capitalize()}")
