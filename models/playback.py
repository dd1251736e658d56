from enum import Enum


class PlaybackState(Enum):
    """Playback states. Stopping returns to IDLE."""
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class OrderingMode(Enum):
    """How a directory listing becomes the displayed sequence."""
    SORTED = "sorted"
    SHUFFLED = "shuffled"

    def toggled(self) -> "OrderingMode":
        if self is OrderingMode.SORTED:
            return OrderingMode.SHUFFLED
        return OrderingMode.SORTED
