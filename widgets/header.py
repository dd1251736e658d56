from textual.widgets import Static
from textual.reactive import reactive
from textual.containers import Vertical
from textual.app import ComposeResult
from rich.text import Text
from styles import COLOR_PRIMARY, COLOR_HIGHLIGHT, COLOR_DIRECTORY, COLOR_MUTED, COLOR_DIM

DIRPLAY_TITLE = "▌▌ DIRPLAY ▐▐  terminal file browser & player"


class Header(Vertical):
    current_path: reactive[str] = reactive("")
    is_shuffle: reactive[bool] = reactive(False)
    playback_state: reactive[str] = reactive("idle")

    DEFAULT_CSS = """
    Header {
        height: auto;
        padding: 0 1;
    }

    Header > #header-logo {
        color: #ff8c00;
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(DIRPLAY_TITLE, id="header-logo")
        yield Static(self._render_status_bar(), id="header-status")

    def _render_status_bar(self) -> Text:
        result = Text(no_wrap=True, overflow="ellipsis")

        result.append("Path ", style=COLOR_MUTED)
        result.append(self.current_path, style=COLOR_DIRECTORY)

        result.append("    │    State ", style=COLOR_MUTED)
        result.append(self.playback_state.upper(), style=f"{COLOR_HIGHLIGHT} bold")

        result.append("    │    Shuffle ", style=COLOR_MUTED)
        if self.is_shuffle:
            result.append("ON", style=f"{COLOR_PRIMARY} bold")
        else:
            result.append("OFF", style=COLOR_DIM)

        return result

    def watch_current_path(self, new_value: str) -> None:
        self._refresh_status_bar()

    def watch_is_shuffle(self, new_value: bool) -> None:
        self._refresh_status_bar()

    def watch_playback_state(self, new_value: str) -> None:
        self._refresh_status_bar()

    def _refresh_status_bar(self) -> None:
        if not self.is_mounted:
            return
        self.query_one("#header-status", Static).update(self._render_status_bar())
