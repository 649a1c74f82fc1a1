"""In-memory TTL cache for domain check results."""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Any

from ..models import DomainCheck


@dataclass
class CacheEntry:
    key: str
    data: DomainCheck
    timestamp: float


class ResultCache:
    """Thread-safe, process-local cache of per-domain results.

    Entries go stale after ``ttl_seconds``. Stale entries are dropped when
    read, or in bulk by ``sweep()``. Nothing is written to disk.
    """

    def __init__(self, ttl_seconds: float = 30 * 60, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(domain: str) -> str:
        return domain.lower()

    def _is_fresh(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.timestamp < self.ttl

    def get(self, domain: str) -> Optional[DomainCheck]:
        """Get cached result if not expired."""
        key = self._key(domain)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if not self._is_fresh(entry, self._clock()):
                del self._entries[key]
                return None

            return entry.data

    def set(self, domain: str, data: DomainCheck):
        """Insert or replace the result for a domain."""
        key = self._key(domain)
        entry = CacheEntry(key=key, data=data, timestamp=self._clock())
        with self._lock:
            self._entries[key] = entry

    def sweep(self) -> int:
        """Remove expired entries; returns how many were dropped."""
        now = self._clock()
        with self._lock:
            expired = [k for k, e in self._entries.items() if not self._is_fresh(e, now)]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            entries = list(self._entries.values())
        available = sum(1 for e in entries if e.data.available)
        return {
            'total_entries': len(entries),
            'available_domains': available,
            'unavailable_domains': len(entries) - available,
            'ttl_seconds': self.ttl
        }
