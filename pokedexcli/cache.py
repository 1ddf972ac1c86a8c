"""A small thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    data: bytes


class Cache:
    """Maps keys to bytes; a background thread drops entries older than ``interval`` seconds."""

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, daemon=True)
        self._reaper.start()

    def add(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(data))

    def get(self, key: str) -> bytes | None:
        """Return the data stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.data

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stop_reaping(self) -> None:
        """Stop the background thread that removes expired entries."""
        self._stop.set()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop_reaping()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            now = time.monotonic()
            with self._lock:
                expired = [
                    key
                    for key, entry in self._entries.items()
                    if now - entry.created_at > self.interval
                ]
                for key in expired:
                    del self._entries[key]