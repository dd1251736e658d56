class DirplayError(Exception):
    """Base exception for dirplay."""


class ListingError(DirplayError):
    """Directory could not be listed (missing, unreadable, not a directory)."""


class PlaybackError(DirplayError):
    """Track could not be decoded or started."""


class DeviceError(DirplayError):
    """Audio output device could not be opened."""


class HomeDirectoryError(DirplayError):
    """No usable default music directory could be resolved."""
