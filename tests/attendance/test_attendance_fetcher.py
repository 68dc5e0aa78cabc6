from __future__ import annotations

import asyncio
import random

import pytest

from school_dashboard.attendance.fetcher import AttendanceFetcher, CancellationToken
from school_dashboard.attendance.model import AttendanceFilters
from school_dashboard.core.enums import PopulationFocus
from school_dashboard.core.exceptions import FetchCancelledError


def _fetcher(delay=0.01):
    return AttendanceFetcher(delay_seconds=delay, total_students=1681, total_staff=112, rng=random.Random(1))


def test_single_fetch_publishes_snapshot():
    fetcher = _fetcher(delay=0)

    snapshot = asyncio.run(fetcher.fetch(AttendanceFilters()))

    assert fetcher.latest is snapshot
    assert fetcher.is_loading is False


def test_newer_fetch_cancels_the_older_one():
    fetcher = _fetcher()
    students = AttendanceFilters()
    teachers = AttendanceFilters(population_focus=PopulationFocus.TEACHERS)

    async def scenario():
        first = asyncio.create_task(fetcher.fetch(students))
        await asyncio.sleep(0)
        second = asyncio.create_task(fetcher.fetch(teachers))
        return await asyncio.gather(first, second, return_exceptions=True)

    stale, fresh = asyncio.run(scenario())

    assert isinstance(stale, FetchCancelledError)
    assert fresh.filters == teachers
    assert fetcher.latest is fresh
    assert fetcher.is_loading is False


def test_begin_marks_loading_until_latest_completes():
    fetcher = _fetcher(delay=0)
    old = fetcher.begin()
    new = fetcher.begin()

    assert old.cancelled is True
    assert fetcher.is_loading is True

    with pytest.raises(FetchCancelledError):
        asyncio.run(fetcher.fetch(AttendanceFilters(), old))
    assert fetcher.is_loading is True

    asyncio.run(fetcher.fetch(AttendanceFilters(), new))
    assert fetcher.is_loading is False


def test_token_raise_if_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()

    token.cancel()
    with pytest.raises(FetchCancelledError):
        token.raise_if_cancelled()
