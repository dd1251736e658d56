from .audio_player import AudioPlayer
from .directory_lister import DirectoryLister
from .errors import DirplayError, ListingError, PlaybackError, DeviceError, HomeDirectoryError
from .music_dir import resolve_music_dir
from .navigation import NavigationState
from .playback_controller import PlaybackController
from .playlist_ordering import PlaylistOrdering
from .session import Session

__all__ = [
    'AudioPlayer',
    'DirectoryLister',
    'DirplayError',
    'ListingError',
    'PlaybackError',
    'DeviceError',
    'HomeDirectoryError',
    'resolve_music_dir',
    'NavigationState',
    'PlaybackController',
    'PlaylistOrdering',
    'Session',
]
