"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class _Entry:
    val: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Key/value store of raw bytes, reaped in the background.

    Every ``interval`` seconds a background thread drops entries that are
    older than ``interval``.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = float(interval)
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry] = {}
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    @property
    def interval(self) -> float:
        """Seconds between reaps, and the age past which entries expire."""
        return self._interval

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier value."""
        with self._lock:
            self._entries[key] = _Entry(bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None when absent."""
        with self._lock:
            entry = self._entries.get(key)
        return entry.val if entry is not None else None

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def close(self) -> None:
        """Stop the background reaper; stored entries stay readable."""
        self._stop.set()
        if self._reaper.is_alive() and threading.current_thread() is not self._reaper:
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self._reap()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self._interval
            ]
            for key in expired:
                del self._entries[key]