import logging
import os
from pathlib import Path

from models.entry import Entry
from services.errors import ListingError

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Lists the immediate children of a directory."""

    def list(self, path: Path) -> frozenset[Entry]:
        """Return the entries directly under path.

        Listing is non-recursive, so symlinked directory cycles are harmless.

        Args:
            path: Directory to list.

        Returns:
            Frozen set of Entry objects, one per child.

        Raises:
            ListingError: If the directory is missing, unreadable or not a directory.
        """
        entries = []
        try:
            with os.scandir(path) as children:
                for child in children:
                    try:
                        is_dir = child.is_dir()
                    except OSError:
                        is_dir = False
                    entries.append(Entry.from_path(Path(child.path), is_dir))
        except OSError as e:
            logger.error(f"Cannot list {path}: {e}")
            raise ListingError(f"Cannot read {path}: {e.strerror or e}") from e

        logger.debug(f"Listed {len(entries)} entries in {path}")
        return frozenset(entries)
