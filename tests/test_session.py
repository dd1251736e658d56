import shutil

import pytest

from models.command import Command, KEY_COMMANDS, command_for_key
from models.playback import OrderingMode, PlaybackState
from services.errors import ListingError
from services.session import Session


@pytest.fixture
def session(music_dir, audio_player):
    return Session.create(music_dir, audio_player)


class TestKeyBindings:
    """Tests for the fixed key map."""

    @pytest.mark.parametrize("key, command", [
        ("q", Command.QUIT),
        ("j", Command.SELECT_NEXT),
        ("down", Command.SELECT_NEXT),
        ("k", Command.SELECT_PREVIOUS),
        ("up", Command.SELECT_PREVIOUS),
        ("l", Command.ACTIVATE),
        ("enter", Command.ACTIVATE),
        ("h", Command.LEAVE_DIRECTORY),
        ("d", Command.TOGGLE_SHUFFLE),
        ("s", Command.PAUSE_OR_RESUME),
        ("escape", Command.STOP),
    ])
    def test_key_maps_to_command(self, key, command):
        assert command_for_key(key) is command

    def test_unbound_key(self):
        assert command_for_key("x") is None

    def test_every_command_has_a_key(self):
        assert set(KEY_COMMANDS.values()) == set(Command)


class TestEndToEnd:
    """The browse-and-play scenario."""

    def test_sorted_listing_and_play(self, session, music_dir, audio_player):
        """[b.mp3, a.flac, sub/] lists as [sub/, a.flac, b.mp3]; activating a.flac plays it."""
        names = [entry.name for entry in session.navigation.entries]
        assert names == ["sub", "a.flac", "b.mp3"]

        session.dispatch(Command.SELECT_NEXT)
        assert session.navigation.selected_index == 1

        message = session.dispatch(Command.ACTIVATE)

        assert session.playback_state is PlaybackState.PLAYING
        assert session.now_playing == music_dir / "a.flac"
        assert message == "Now playing a.flac"
        assert not session.status_is_error

    def test_auto_advance_through_directory(self, session, music_dir, audio_player):
        """Tracks advance in listing order, then wrap to the first audio file."""
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)

        audio_player.idle = True
        assert session.tick() == "Now playing b.mp3"
        assert session.now_playing == music_dir / "b.mp3"

        audio_player.idle = True
        session.tick()
        assert session.now_playing == music_dir / "a.flac"

    def test_playback_survives_directory_change(self, session, music_dir, audio_player):
        """Entering a directory keeps the current track playing."""
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)
        session.dispatch(Command.SELECT_PREVIOUS)

        session.dispatch(Command.ACTIVATE)

        assert session.navigation.current_path == music_dir / "sub"
        assert session.now_playing == music_dir / "a.flac"
        assert session.playback_state is PlaybackState.PLAYING

    def test_advance_uses_current_listing(self, session, music_dir, audio_player):
        """After moving directories, the next track comes from the new listing."""
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)
        session.dispatch(Command.SELECT_PREVIOUS)
        session.dispatch(Command.ACTIVATE)

        audio_player.idle = True
        session.tick()

        assert session.now_playing == music_dir / "sub" / "nested.mp3"


class TestDispatch:
    """Tests for command routing."""

    def test_activate_directory(self, session, music_dir):
        """Activating a directory enters it without playing."""
        assert session.dispatch(Command.ACTIVATE) is None

        assert session.navigation.current_path == music_dir / "sub"
        assert session.playback_state is PlaybackState.IDLE

    def test_leave_directory(self, session, music_dir):
        session.dispatch(Command.ACTIVATE)

        session.dispatch(Command.LEAVE_DIRECTORY)

        assert session.navigation.current_path == music_dir

    def test_pause_or_resume(self, session):
        """s toggles pause only once something is loaded."""
        assert session.dispatch(Command.PAUSE_OR_RESUME) is None
        assert session.playback_state is PlaybackState.IDLE

        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)

        assert session.dispatch(Command.PAUSE_OR_RESUME) == "Paused"
        assert session.playback_state is PlaybackState.PAUSED
        assert session.dispatch(Command.PAUSE_OR_RESUME) == "Resumed"
        assert session.playback_state is PlaybackState.PLAYING

    def test_activate_while_paused_plays_selection(self, session, music_dir):
        """Activate always means enter or play, even while paused."""
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)
        session.dispatch(Command.PAUSE_OR_RESUME)
        session.dispatch(Command.SELECT_NEXT)

        session.dispatch(Command.ACTIVATE)

        assert session.playback_state is PlaybackState.PLAYING
        assert session.now_playing == music_dir / "b.mp3"

    def test_stop(self, session):
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)

        session.dispatch(Command.STOP)

        assert session.playback_state is PlaybackState.IDLE
        assert session.now_playing is None

    def test_toggle_shuffle(self, session):
        """d flips the ordering mode and reports it."""
        assert session.dispatch(Command.TOGGLE_SHUFFLE) == "Shuffle ON"
        assert session.navigation.ordering_mode is OrderingMode.SHUFFLED
        assert session.navigation.entries[0].name == "sub"

        assert session.dispatch(Command.TOGGLE_SHUFFLE) == "Shuffle OFF"
        assert session.navigation.ordering_mode is OrderingMode.SORTED

    def test_quit_stops_playback(self, session, audio_player):
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)

        session.dispatch(Command.QUIT)

        assert session.running is False
        assert session.playback_state is PlaybackState.IDLE


class TestErrorRecovery:
    """Per-operation failures become status messages."""

    def test_unplayable_file_reports_and_stays_usable(self, session, music_dir, audio_player):
        """A corrupt file leaves the session idle and able to play others."""
        audio_player.unplayable.add("a.flac")
        session.dispatch(Command.SELECT_NEXT)

        message = session.dispatch(Command.ACTIVATE)

        assert "a.flac" in message
        assert session.status_is_error
        assert session.playback_state is PlaybackState.IDLE

        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)
        assert session.now_playing == music_dir / "b.mp3"
        assert not session.status_is_error

    def test_vanished_directory_keeps_listing(self, session, music_dir):
        """Entering a deleted directory reports and keeps the old listing."""
        shutil.rmtree(music_dir / "sub")

        message = session.dispatch(Command.ACTIVATE)

        assert message is not None
        assert session.status_is_error
        assert session.navigation.current_path == music_dir
        assert len(session.navigation.entries) == 3

    def test_auto_advance_failure_reports(self, session, audio_player):
        """When no remaining track can play, tick reports and goes idle."""
        session.dispatch(Command.SELECT_NEXT)
        session.dispatch(Command.ACTIVATE)
        audio_player.unplayable.update({"a.flac", "b.mp3"})
        audio_player.idle = True

        message = session.tick()

        assert message is not None
        assert session.status_is_error
        assert session.playback_state is PlaybackState.IDLE

    def test_unreadable_start_directory(self, tmp_path, audio_player):
        """Session creation surfaces a ListingError for a bad start path."""
        with pytest.raises(ListingError):
            Session.create(tmp_path / "missing", audio_player)
