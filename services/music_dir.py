import logging
import os
import sys
from pathlib import Path
from typing import Optional

from services.errors import HomeDirectoryError

logger = logging.getLogger(__name__)

MUSIC_DIR_ENV = "DIRPLAY_MUSIC_DIR"


def _home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError(f"Cannot determine home directory: {e}") from e


def _read_user_dirs(home: Path) -> Optional[Path]:
    """Read XDG_MUSIC_DIR from the xdg-user-dirs config file."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    config_dir = Path(config_home) if config_home else home / ".config"
    user_dirs = config_dir / "user-dirs.dirs"

    try:
        lines = user_dirs.read_text(encoding="utf-8").splitlines()
    except OSError:
        return None

    for line in lines:
        line = line.strip()
        if not line.startswith("XDG_MUSIC_DIR="):
            continue
        value = line.split("=", 1)[1].strip().strip('"')
        value = value.replace("$HOME", str(home))
        path = Path(value)
        # xdg-user-dirs points a disabled entry at $HOME itself
        if path == home:
            return None
        return path if path.is_absolute() else home / path
    return None


def platform_music_dir(home: Path) -> Optional[Path]:
    """Return the platform's configured music directory, if it has one."""
    if sys.platform.startswith("linux"):
        env_value = os.environ.get("XDG_MUSIC_DIR")
        if env_value:
            return Path(env_value).expanduser()
        return _read_user_dirs(home)
    return home / "Music"


def resolve_music_dir() -> Path:
    """Pick the directory to start browsing in.

    Order: $DIRPLAY_MUSIC_DIR, the platform music directory if it exists,
    then ~/Music (created if absent).

    Raises:
        HomeDirectoryError: If no home directory can be determined or
            ~/Music cannot be created.
    """
    override = os.environ.get(MUSIC_DIR_ENV)
    if override:
        path = Path(override).expanduser()
        if path.is_dir():
            logger.info(f"Using music directory from {MUSIC_DIR_ENV}: {path}")
            return path.absolute()
        logger.warning(f"{MUSIC_DIR_ENV} is not a directory, ignoring: {path}")

    home = _home()

    platform_dir = platform_music_dir(home)
    if platform_dir is not None and platform_dir.is_dir():
        return platform_dir.absolute()

    fallback = home / "Music"
    try:
        fallback.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise HomeDirectoryError(f"Cannot create {fallback}: {e}") from e
    logger.info(f"Using music directory {fallback}")
    return fallback.absolute()
