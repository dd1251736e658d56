from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Matched case-sensitively: "song.MP3" is not an audio file.
AUDIO_EXTENSIONS = frozenset({"mp3", "flac"})


class EntryKind(Enum):
    """Kind of a listed filesystem child."""
    DIRECTORY = "directory"
    AUDIO_FILE = "audio_file"
    OTHER_FILE = "other_file"

    @classmethod
    def for_file(cls, path: Path) -> "EntryKind":
        """Classify a non-directory path by its extension."""
        if path.suffix[1:] in AUDIO_EXTENSIONS:
            return cls.AUDIO_FILE
        return cls.OTHER_FILE


@dataclass(frozen=True)
class Entry:
    """One child of the directory being browsed."""
    path: Path
    kind: EntryKind

    @classmethod
    def from_path(cls, path: Path, is_dir: bool) -> "Entry":
        kind = EntryKind.DIRECTORY if is_dir else EntryKind.for_file(path)
        return cls(path=path, kind=kind)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_audio(self) -> bool:
        return self.kind is EntryKind.AUDIO_FILE


def format_time(seconds: float) -> str:
    """Format seconds as M:SS."""
    total = max(0, int(seconds))
    return f"{total // 60}:{total % 60:02d}"
