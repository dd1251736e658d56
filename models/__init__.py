from .entry import Entry, EntryKind, AUDIO_EXTENSIONS, format_time
from .playback import PlaybackState, OrderingMode
from .command import Command, KEY_COMMANDS, command_for_key

__all__ = [
    "Entry",
    "EntryKind",
    "AUDIO_EXTENSIONS",
    "format_time",
    "PlaybackState",
    "OrderingMode",
    "Command",
    "KEY_COMMANDS",
    "command_for_key",
]
