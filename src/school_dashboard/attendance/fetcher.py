"""Simulated attendance fetch with cancellation.

Every new fetch cancels the token of the one before it; when a superseded
fetch wakes up from its delay it raises ``FetchCancelledError`` instead of
publishing its (stale) snapshot.
"""

from __future__ import annotations

import asyncio
import random
import threading
from typing import Optional

from ..common.logger import get_logger
from ..core.constants import ATTENDANCE_FETCH_DELAY_SECONDS, TOTAL_STAFF, TOTAL_STUDENTS
from ..core.exceptions import FetchCancelledError
from .metrics import generate_attendance_snapshot
from .model import AttendanceFilters, AttendanceSnapshot

logger = get_logger(__name__)


class CancellationToken:
    def __init__(self):
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise FetchCancelledError("La consulta de asistencia fue reemplazada por una más reciente")


class AttendanceFetcher:
    def __init__(
        self,
        *,
        delay_seconds: float = ATTENDANCE_FETCH_DELAY_SECONDS,
        total_students: int = TOTAL_STUDENTS,
        total_staff: int = TOTAL_STAFF,
        rng: Optional[random.Random] = None,
    ):
        self._delay = float(delay_seconds)
        self._total_students = int(total_students)
        self._total_staff = int(total_staff)
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._current: Optional[CancellationToken] = None
        self._latest: Optional[AttendanceSnapshot] = None

    @property
    def latest(self) -> Optional[AttendanceSnapshot]:
        return self._latest

    @property
    def is_loading(self) -> bool:
        return self._current is not None

    def begin(self) -> CancellationToken:
        """Register a new fetch, cancelling whichever one is still in flight."""
        with self._lock:
            if self._current is not None:
                self._current.cancel()
            self._current = CancellationToken()
            return self._current

    async def fetch(self, filters: AttendanceFilters, token: Optional[CancellationToken] = None) -> AttendanceSnapshot:
        token = token or self.begin()
        await asyncio.sleep(self._delay)

        with self._lock:
            if token.cancelled:
                logger.info("attendance fetch superseded: %s", filters.to_dict())
            token.raise_if_cancelled()
            snapshot = generate_attendance_snapshot(
                filters,
                total_students=self._total_students,
                total_staff=self._total_staff,
                rng=self._rng,
            )
            self._latest = snapshot
            if self._current is token:
                self._current = None
        return snapshot
