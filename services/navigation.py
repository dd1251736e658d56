from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from models.entry import Entry
from models.playback import OrderingMode
from services.directory_lister import DirectoryLister
from services.playlist_ordering import PlaylistOrdering

logger = logging.getLogger(__name__)


class NavigationState:
    """Current directory, its ordered entries and the selection cursor.

    The listing and the cursor are only ever replaced together, so the
    selected index always refers to the listing currently shown.
    """

    def __init__(
        self,
        start_path: Path,
        lister: Optional[DirectoryLister] = None,
        ordering: Optional[PlaylistOrdering] = None,
        mode: OrderingMode = OrderingMode.SORTED,
    ):
        self._current_path: Path = Path(start_path).absolute()
        self._lister = lister or DirectoryLister()
        self._ordering = ordering or PlaylistOrdering()
        self._mode = mode
        self._listing: frozenset[Entry] = frozenset()
        self._entries: tuple[Entry, ...] = ()
        self._selected_index: Optional[int] = None
        self._generation: int = 0

    @property
    def current_path(self) -> Path:
        return self._current_path

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    @property
    def ordering_mode(self) -> OrderingMode:
        return self._mode

    @property
    def generation(self) -> int:
        """Bumped every time entries are replaced."""
        return self._generation

    @property
    def selected_entry(self) -> Optional[Entry]:
        if self._selected_index is None:
            return None
        return self._entries[self._selected_index]

    def refresh_listing(self) -> None:
        """Re-list the current directory.

        Raises:
            ListingError: If the directory cannot be read. State is left unchanged.
        """
        self._load(self._current_path)

    def select_next(self) -> None:
        """Move the cursor down, wrapping past the last entry to the first."""
        if not self._entries:
            return
        self._selected_index = (self._selected_index + 1) % len(self._entries)
        logger.debug(f"Selected index {self._selected_index}")

    def select_previous(self) -> None:
        """Move the cursor up, wrapping before the first entry to the last."""
        if not self._entries:
            return
        self._selected_index = (self._selected_index - 1) % len(self._entries)
        logger.debug(f"Selected index {self._selected_index}")

    def enter_selected(self) -> Optional[Path]:
        """Enter the selected directory, or report the selected file.

        Returns:
            The selected file's path, or None if a directory was entered or
            nothing is selected.

        Raises:
            ListingError: If the selected directory cannot be read.
        """
        entry = self.selected_entry
        if entry is None:
            return None
        if entry.is_dir:
            self._load(entry.path)
            return None
        return entry.path

    def leave_to_parent(self) -> None:
        """Move to the parent directory. No-op at the filesystem root.

        Raises:
            ListingError: If the parent cannot be read.
        """
        parent = self._current_path.parent
        if parent == self._current_path:
            return
        self._load(parent)

    def set_ordering_mode(self, mode: OrderingMode) -> None:
        """Switch ordering mode and reorder the current listing in place."""
        self._mode = mode
        self._replace(self._current_path, self._listing)
        logger.info(f"Ordering mode set to {mode.value}")

    def toggle_ordering_mode(self) -> OrderingMode:
        self.set_ordering_mode(self._mode.toggled())
        return self._mode

    def _load(self, path: Path) -> None:
        listing = self._lister.list(path)
        self._replace(path, listing)
        logger.info(f"Browsing {path} ({len(listing)} entries)")

    def _replace(self, path: Path, listing: frozenset[Entry]) -> None:
        entries = tuple(self._ordering.order(listing, self._mode))
        self._current_path = path
        self._listing = listing
        self._entries = entries
        self._selected_index = 0 if entries else None
        self._generation += 1
