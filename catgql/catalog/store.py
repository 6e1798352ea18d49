"""
In-memory catalog store.

The store owns an append-only list of entries. Each call takes the lock for
its whole duration, so `list` always sees a consistent snapshot and
concurrent `add` calls never lose entries.
"""
import threading
from typing import Iterable, List, Optional

from catgql.core.logger import setup_logger
from .schema import CatalogEntry, SAMPLE_ENTRIES

logger = setup_logger(__name__, include_location=True)


class CatalogStore:

    def __init__(self, entries: Optional[Iterable[CatalogEntry]] = None):
        self._entries: List[CatalogEntry] = list(entries) if entries is not None else []
        self._lock = threading.Lock()

    @classmethod
    def with_samples(cls) -> "CatalogStore":
        return cls(SAMPLE_ENTRIES)

    def list(self) -> List[CatalogEntry]:
        """Return a copy of the current entries in insertion order."""
        with self._lock:
            return self._entries.copy()

    def add(self, entry: CatalogEntry) -> None:
        """Append an entry. Duplicates are kept."""
        with self._lock:
            self._entries.append(entry)
            size = len(self._entries)
        logger.debug(f"Added cat '{entry.name}' to catalog", extra={"catalog_size": size})

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
