from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Container, VerticalScroll
from textual.app import ComposeResult

from models.entry import AUDIO_EXTENSIONS

HELP_TEXT = """[bold #ff8c00]📁 DIRPLAY - Terminal File Browser & Player[/bold #ff8c00]

[bold]NAVIGATION[/bold]
  j / Down    Move selection down (wraps)
  k / Up      Move selection up (wraps)
  l / Enter   Enter directory or play file
  h           Go to parent directory

[bold]PLAYBACK CONTROLS[/bold]
  s           Pause / resume
  Esc         Stop playback
  d           Toggle shuffle

[bold]OTHER[/bold]
  ?           Show this help
  q           Quit application

[bold]PLAYBACK[/bold]
  • When a track ends the next audio file in the listing plays
  • Shuffle keeps folders on top and reorders files
  • Audio files: {extensions} (lowercase extensions only)
  • ♪ marks the track that is playing"""


class HelpScreen(ModalScreen[None]):
    """Modal screen displaying key bindings."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-container {
        width: 70;
        height: 80%;
        background: #1a1a1a;
        border: thick #cc5500;
        padding: 1 2;
    }

    #help-scroll {
        width: 100%;
        height: 1fr;
        margin-bottom: 1;
    }

    #help-content {
        width: 100%;
        height: auto;
    }

    #help-close-button {
        width: 100%;
        height: auto;
        background: #2d2d2d;
        color: #ff8c00;
        border: solid #ff8c00;
        text-style: bold;
    }

    #help-close-button:focus {
        border: solid #ffb347;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        extensions = ", ".join(sorted(AUDIO_EXTENSIONS))
        with Container(id="help-container"):
            with VerticalScroll(id="help-scroll"):
                yield Static(HELP_TEXT.format(extensions=extensions), id="help-content")

            yield Button("Close (Esc)", id="help-close-button", variant="primary")

    def on_mount(self) -> None:
        """Focus the button when screen mounts."""
        self.call_after_refresh(self._focus_button)

    def _focus_button(self) -> None:
        self.query_one("#help-close-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle close button press."""
        if event.button.id == "help-close-button":
            self.dismiss()

    async def on_key(self, event) -> None:
        """Handle key events."""
        if event.key == "escape":
            self.dismiss()
            event.prevent_default()
            event.stop()
