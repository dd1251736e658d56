import importlib
import logging
from pathlib import Path

import pytest

import main


@pytest.fixture
def captured_config(monkeypatch):
    """Record logging.basicConfig calls instead of touching the root logger."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    yield calls
    for kwargs in calls:
        for handler in kwargs["handlers"]:
            handler.close()


def _no_home(cls):
    raise RuntimeError("Could not determine home directory.")


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_logs_under_home(self, tmp_path, monkeypatch, captured_config):
        """The log file lives under ~/.local/share/dirplay."""
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        monkeypatch.setenv("DIRPLAY_LOG_LEVEL", "debug")

        log_file = main.setup_logging()

        assert log_file == tmp_path / ".local" / "share" / "dirplay" / "dirplay.log"
        assert log_file.parent.is_dir()
        assert captured_config[0]["level"] == logging.DEBUG
        assert isinstance(captured_config[0]["handlers"][0], logging.FileHandler)

    def test_missing_home_silences_logging(self, monkeypatch, captured_config):
        """Without a home directory, logging is disabled rather than crashing."""
        monkeypatch.setattr(Path, "home", classmethod(_no_home))

        assert main.setup_logging() is None
        assert isinstance(captured_config[0]["handlers"][0], logging.NullHandler)

    def test_import_does_not_need_home(self, monkeypatch):
        """Importing the app module never resolves the home directory."""
        monkeypatch.setattr(Path, "home", classmethod(_no_home))

        importlib.reload(main)
