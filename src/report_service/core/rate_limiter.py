"""
Failed-login throttle.

A fixed window per caller origin: the window opens on the origin's first
failed login and closes once it has elapsed. Only failing origins are
tracked, and expired windows are dropped, so the table stays bounded by the
origins that failed within the last window. In-memory and best effort;
concurrent requests from one origin may undercount.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class AttemptRecord:
    count: int
    window_start: float


class LoginRateLimiter:
    """Counts failed logins per origin within a rolling window"""

    def __init__(
        self,
        max_attempts: int = 7,
        window_seconds: float = 15 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self.clock = clock
        self._records: Dict[str, AttemptRecord] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._records)

    def _expired(self, record: AttemptRecord, now: float) -> bool:
        return now - record.window_start > self.window_seconds

    def _current(self, origin: str, now: float) -> Optional[AttemptRecord]:
        """The origin's live record, dropping it if its window has passed"""
        record = self._records.get(origin)
        if record is not None and self._expired(record, now):
            del self._records[origin]
            return None
        return record

    def _sweep(self, now: float) -> None:
        """Drop every expired record, at most once per window"""
        if now - self._last_sweep <= self.window_seconds:
            return
        expired = [origin for origin, record in self._records.items() if self._expired(record, now)]
        for origin in expired:
            del self._records[origin]
        self._last_sweep = now

    def is_blocked(self, origin: str) -> bool:
        """True once the origin has used up its attempts for the current window"""
        record = self._current(origin, self.clock())
        return record is not None and record.count >= self.max_attempts

    def record_failure(self, origin: str) -> int:
        """Count a failed login; returns the failures so far in this window"""
        now = self.clock()
        self._sweep(now)
        record = self._current(origin, now)
        if record is None:
            record = AttemptRecord(count=0, window_start=now)
            self._records[origin] = record
        record.count += 1
        if record.count >= self.max_attempts:
            logger.warning(f"Login attempts exhausted for origin {origin}")
        return record.count

    def reset(self) -> None:
        """Forget every origin"""
        self._records.clear()
