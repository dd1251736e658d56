import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from services.errors import PlaybackError
from services.playlist_ordering import PlaylistOrdering


class FakeAudioPlayer:
    """Stands in for the pygame-backed AudioPlayer; never touches a device."""

    def __init__(self):
        self.calls = []
        self.idle = False
        self.position = 0.0
        self.unplayable = set()

    def open_stream(self):
        self.calls.append(("open_stream",))

    def play(self, path):
        self.calls.append(("play", path))
        if path.name in self.unplayable:
            raise PlaybackError(f"Cannot play {path.name}: corrupt")
        self.idle = False

    def pause(self):
        self.calls.append(("pause",))

    def resume(self):
        self.calls.append(("resume",))

    def stop(self):
        self.calls.append(("stop",))

    def is_idle(self):
        return self.idle

    def get_position(self):
        return self.position

    def close(self):
        self.calls.append(("close",))

    def played(self):
        return [call[1] for call in self.calls if call[0] == "play"]


@pytest.fixture
def audio_player():
    return FakeAudioPlayer()


@pytest.fixture
def seeded_ordering():
    return PlaylistOrdering(random.Random(1234))


@pytest.fixture
def music_dir(tmp_path):
    """Directory with b.mp3, a.flac and an empty-ish sub/ folder."""
    root = tmp_path / "music"
    root.mkdir()
    (root / "b.mp3").touch()
    (root / "a.flac").touch()
    (root / "sub").mkdir()
    (root / "sub" / "nested.mp3").touch()
    return root


@pytest.fixture
def mixed_music_dir(tmp_path):
    """Directory with audio, non-audio files and several subfolders."""
    root = tmp_path / "library"
    root.mkdir()
    for name in ["zeta", "alpha", "mid"]:
        (root / name).mkdir()
    for name in ["track3.mp3", "track1.flac", "cover.jpg", "notes.txt", "LOUD.MP3"]:
        (root / name).touch()
    (root / "alpha" / "inner.mp3").touch()
    return root
