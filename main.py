from textual.app import App, ComposeResult
from textual.widgets import Footer
from textual.containers import Horizontal
from textual.binding import Binding
import logging
import os
import sys
from pathlib import Path

from models.command import Command, KEY_COMMANDS, COMMAND_LABELS
from models.playback import OrderingMode
from widgets import Header, HelpScreen
from views import BrowserView, NowPlayingView
from services.audio_player import AudioPlayer
from services.errors import DeviceError, HomeDirectoryError, ListingError
from services.music_dir import resolve_music_dir
from services.session import Session

TICK_INTERVAL = 0.05

logger = logging.getLogger(__name__)

# Only the first key of each command shows in the footer.
HIDDEN_KEYS = {"down", "up", "enter"}


def setup_logging() -> Path | None:
    """Send logs to a file; the terminal belongs to the TUI.

    Returns the log file path, or None when there is no home directory to
    hold it. In that case logging is silenced and startup goes on to report
    the missing home directory itself.
    """
    level = os.environ.get("DIRPLAY_LOG_LEVEL", "INFO").upper()
    try:
        log_dir = Path.home() / '.local' / 'share' / 'dirplay'
    except (RuntimeError, KeyError):
        log_dir = None

    if log_dir is None:
        handler: logging.Handler = logging.NullHandler()
        log_file = None
    else:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / 'dirplay.log'
        handler = logging.FileHandler(log_file)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )
    return log_file


def _build_bindings() -> list[Binding]:
    bindings = [
        Binding(
            key,
            f"dispatch('{command.value}')",
            COMMAND_LABELS[command],
            show=key not in HIDDEN_KEYS,
            priority=True,
        )
        for key, command in KEY_COMMANDS.items()
    ]
    bindings.append(Binding("?", "show_help", "Help", priority=True))
    return bindings


class DirplayApp(App):
    """Terminal file browser that plays the audio files it finds."""

    CSS = """
    Screen {
        background: #1a1a1a;
    }

    #main-container {
        height: 1fr;
    }

    #browser {
        width: 2fr;
    }

    #now_playing {
        width: 1fr;
    }
    """

    BINDINGS = _build_bindings()

    def __init__(self, session: Session, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()

        with Horizontal(id="main-container"):
            yield BrowserView(self.session, id="browser")
            yield NowPlayingView(self.session, id="now_playing")

        yield Footer()

    async def on_mount(self) -> None:
        """Draw the initial listing and start the end-of-track poll."""
        await self._refresh_views()
        self.set_interval(TICK_INTERVAL, self._tick)

    async def _refresh_views(self) -> None:
        header = self.query_one(Header)
        header.current_path = str(self.session.navigation.current_path)
        header.is_shuffle = self.session.navigation.ordering_mode is OrderingMode.SHUFFLED
        header.playback_state = self.session.playback_state.value

        await self.query_one("#browser", BrowserView).sync()
        self.query_one("#now_playing", NowPlayingView).update_progress()

    def _notify_status(self, message: str | None) -> None:
        if not message:
            return
        if self.session.status_is_error:
            self.notify(f"❌ {message}", severity="error", timeout=4)
        else:
            self.notify(message, timeout=2)

    async def _tick(self) -> None:
        """Poll for the end of the current track and auto-advance."""
        before = (self.session.playback_state, self.session.now_playing)
        try:
            message = self.session.tick()
        except Exception as e:
            logger.error(f"Error during track auto-advance: {e}")
            self.notify("❌ Error advancing to next track", severity="error", timeout=3)
            await self._refresh_views()
            return

        # Advance can go idle without a message when no audio is left.
        after = (self.session.playback_state, self.session.now_playing)
        if message or after != before:
            self._notify_status(message)
            await self._refresh_views()

    async def action_dispatch(self, command_name: str) -> None:
        """Route a bound key's command to the session."""
        if isinstance(self.screen, HelpScreen):
            self.screen.dismiss()
            return

        try:
            message = self.session.dispatch(Command(command_name))
        except Exception as e:
            logger.error(f"Error handling {command_name}: {type(e).__name__}: {e}")
            self.notify(f"❌ {type(e).__name__}: {str(e)[:50]}", severity="error", timeout=4)
            return

        if not self.session.running:
            self.exit()
            return

        self._notify_status(message)
        await self._refresh_views()

    def action_show_help(self) -> None:
        """Show the key binding help screen."""
        if not isinstance(self.screen, HelpScreen):
            self.push_screen(HelpScreen())


def main():
    """Entry point for dirplay.

    Startup resource failures (no home directory, no audio device) are
    fatal; everything after that is reported inside the UI.
    """
    log_file = setup_logging()
    logger.info("=" * 60)
    logger.info("dirplay starting up")
    logger.info("=" * 60)

    audio_player = AudioPlayer()
    try:
        music_dir = resolve_music_dir()
        audio_player.open_stream()
        session = Session.create(music_dir, audio_player)

        app = DirplayApp(session)
        app.run()

        logger.info("dirplay shut down cleanly")

    except (DeviceError, HomeDirectoryError, ListingError) as e:
        logger.critical(f"Fatal error during startup: {e}")
        print("\n❌ dirplay cannot start\n")
        print(f"{e}\n")
        if log_file is not None:
            print(f"Check {log_file} for more details.\n")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("dirplay interrupted by user")
        sys.exit(0)
    finally:
        audio_player.close()


if __name__ == "__main__":
    main()
