from .browser import BrowserView
from .now_playing import NowPlayingView

__all__ = ["BrowserView", "NowPlayingView"]
