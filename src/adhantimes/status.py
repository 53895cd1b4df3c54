"""Status layer — which prayer is current, which is next, and how long until it."""

from collections.abc import Sequence
from datetime import datetime, time, timedelta

from adhantimes.models import PrayerEvent, PrayerStatus
from adhantimes.schedule import PRAYER_NAMES

_DAY_SECONDS = 24 * 60 * 60


class ScheduleError(ValueError):
    """Schedule is not the five prayers in Fajr → Isha order."""


def _check_schedule(schedule: Sequence[PrayerEvent]) -> None:
    names = tuple(event.name for event in schedule)
    if names != PRAYER_NAMES:
        raise ScheduleError(f"Expected prayers {PRAYER_NAMES}, got {names}")


def resolve_status(
    schedule: Sequence[PrayerEvent], now: datetime | time
) -> PrayerStatus:
    """Resolve the current and next prayer at now.

    Before Fajr, the current prayer is the previous day's Isha. After Isha,
    the next prayer is the following day's Fajr and the countdown runs past
    midnight.

    Args:
        schedule: Five PrayerEvents in Fajr → Isha order.
        now: Local wall-clock time. Seconds count toward the remaining time.

    Returns:
        PrayerStatus with remaining time always positive.

    Raises:
        ScheduleError: If schedule is not the five prayers in order.
    """
    _check_schedule(schedule)
    if isinstance(now, datetime):
        now = now.time()

    now_minutes = now.hour * 60 + now.minute
    current = schedule[-1]
    upcoming = schedule[0]
    for i, event in enumerate(schedule):
        if now_minutes < event.minutes:
            upcoming = event
            current = schedule[i - 1] if i > 0 else schedule[-1]
            break

    now_seconds = now_minutes * 60 + now.second + now.microsecond / 1_000_000
    remaining = upcoming.minutes * 60 - now_seconds
    if remaining <= 0:
        remaining += _DAY_SECONDS

    return PrayerStatus(
        current=current.name,
        next=upcoming.name,
        remaining=timedelta(seconds=remaining),
    )
