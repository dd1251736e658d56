import random
from typing import Iterable, List, Optional

from models.entry import Entry
from models.playback import OrderingMode


def _sort_key(entry: Entry) -> tuple[str, str]:
    return entry.name, str(entry.path)


class PlaylistOrdering:
    """Turns a directory listing into the displayed, playable sequence.

    Directories always come first in name order. Files follow, either in
    name order or freshly shuffled on every call in SHUFFLED mode.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def order(self, entries: Iterable[Entry], mode: OrderingMode) -> List[Entry]:
        """Order entries for the given mode. Empty input gives an empty list."""
        entries = list(entries)
        dirs = sorted((e for e in entries if e.is_dir), key=_sort_key)
        files = sorted((e for e in entries if not e.is_dir), key=_sort_key)

        if mode is OrderingMode.SHUFFLED:
            self._rng.shuffle(files)

        return dirs + files
