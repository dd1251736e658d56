from __future__ import annotations

from enum import Enum


class Command(Enum):
    """Fixed set of user commands."""
    QUIT = "quit"
    TOGGLE_SHUFFLE = "toggle_shuffle"
    STOP = "stop"
    SELECT_NEXT = "select_next"
    SELECT_PREVIOUS = "select_previous"
    LEAVE_DIRECTORY = "leave_directory"
    ACTIVATE = "activate"
    PAUSE_OR_RESUME = "pause_or_resume"


# Key names as reported by Textual. Bindings are fixed, not configurable.
KEY_COMMANDS: dict[str, Command] = {
    "q": Command.QUIT,
    "j": Command.SELECT_NEXT,
    "down": Command.SELECT_NEXT,
    "k": Command.SELECT_PREVIOUS,
    "up": Command.SELECT_PREVIOUS,
    "l": Command.ACTIVATE,
    "enter": Command.ACTIVATE,
    "h": Command.LEAVE_DIRECTORY,
    "d": Command.TOGGLE_SHUFFLE,
    "s": Command.PAUSE_OR_RESUME,
    "escape": Command.STOP,
}

COMMAND_LABELS: dict[Command, str] = {
    Command.QUIT: "Quit",
    Command.SELECT_NEXT: "Down",
    Command.SELECT_PREVIOUS: "Up",
    Command.ACTIVATE: "Open/Play",
    Command.LEAVE_DIRECTORY: "Parent",
    Command.TOGGLE_SHUFFLE: "Shuffle",
    Command.PAUSE_OR_RESUME: "Pause/Resume",
    Command.STOP: "Stop",
}


def command_for_key(key: str) -> Command | None:
    """Return the command bound to a key, or None if the key is unbound."""
    return KEY_COMMANDS.get(key)
