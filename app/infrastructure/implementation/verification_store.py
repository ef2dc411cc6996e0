"""
In-memory store for short-lived verification data (one-time codes).

One instance is created when the application starts and kept on
``app.state``; a background task calls ``sweep`` periodically. Entries do not
survive a restart.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from app.core import config
from app.infrastructure.interfaces.verification_store import IVerificationStore

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    value: Any
    expires_at: float


class InMemoryVerificationStore(IVerificationStore):
    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        default_ttl: float = config.VERIFICATION_TTL_SECONDS,
    ):
        self._clock = clock
        self._default_ttl = default_ttl
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def put(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        if ttl is None:
            ttl = self._default_ttl
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        with self._lock:
            self._entries[key] = _Entry(value, self._clock() + ttl)
        logger.info(f"Stored verification entry for {key}")

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                return None
            return entry.value

    def delete(self, key: str) -> bool:
        with self._lock:
            removed = self._entries.pop(key, None) is not None
        if removed:
            logger.info(f"Deleted verification entry for {key}")
        return removed

    def sweep(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [k for k, e in self._entries.items() if now >= e.expires_at]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.info(f"Swept {len(expired)} expired verification entries")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
