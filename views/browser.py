from __future__ import annotations

import logging
from pathlib import Path

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import ListView, ListItem, Label

from models.entry import Entry, EntryKind
from services.session import Session
from styles import COLOR_PRIMARY, COLOR_DIRECTORY, COLOR_HIGHLIGHT, COLOR_MUTED

logger = logging.getLogger(__name__)

ENTRY_ICONS = {
    EntryKind.DIRECTORY: "📁",
    EntryKind.AUDIO_FILE: "🎵",
    EntryKind.OTHER_FILE: "📄",
}


class BrowserView(Container):
    """Directory listing with the selection cursor. Draws session state only."""

    DEFAULT_CSS = """
    BrowserView {
        background: #1a1a1a;
        border: solid #ff8c00;
        padding: 0 1;
    }

    BrowserView > #browser-title {
        color: #ff8c00;
        text-style: bold;
        padding: 0 0 1 0;
    }

    BrowserView > #entry-list {
        background: #1a1a1a;
    }
    """

    def __init__(self, session: Session, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self._generation: int | None = None
        self._now_playing: Path | None = None
        self._labels: list[Label] = []

    def compose(self) -> ComposeResult:
        yield Label("", id="browser-title")
        yield ListView(id="entry-list")

    async def sync(self) -> None:
        """Bring the widget in line with the session's navigation state."""
        navigation = self.session.navigation
        self.query_one("#browser-title", Label).update(str(navigation.current_path))

        list_view = self.query_one("#entry-list", ListView)
        now_playing = self.session.now_playing

        if navigation.generation != self._generation:
            await list_view.clear()
            self._labels = [
                Label(self._render_entry(entry, now_playing)) for entry in navigation.entries
            ]
            if self._labels:
                await list_view.extend(ListItem(label) for label in self._labels)
            else:
                empty = ListItem(Label(Text("  (empty directory)", style=COLOR_MUTED)))
                await list_view.append(empty)
            self._generation = navigation.generation
            self._now_playing = now_playing
            logger.debug(f"Rebuilt listing for {navigation.current_path}")
        elif now_playing != self._now_playing:
            for label, entry in zip(self._labels, navigation.entries):
                label.update(self._render_entry(entry, now_playing))
            self._now_playing = now_playing

        if navigation.selected_index is not None:
            list_view.index = navigation.selected_index

    def _render_entry(self, entry: Entry, now_playing: Path | None) -> Text:
        result = Text()
        marker = "♪ " if entry.path == now_playing else "  "
        result.append(marker, style=f"{COLOR_HIGHLIGHT} bold")

        icon = ENTRY_ICONS[entry.kind]
        if entry.kind is EntryKind.DIRECTORY:
            result.append(f"{icon} {entry.name}", style=COLOR_DIRECTORY)
        elif entry.kind is EntryKind.AUDIO_FILE:
            result.append(f"{icon} {entry.name}", style=COLOR_PRIMARY)
        else:
            result.append(f"{icon} {entry.name}", style=COLOR_MUTED)
        return result
