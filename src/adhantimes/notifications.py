"""Prayer-time notifications.

A NotificationScheduler is an explicit handle owned by the caller. Calling
``reschedule`` again (new day, new location) cancels every pending timer first,
so the same prayer is never announced twice.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from datetime import datetime

from adhantimes.models import PrayerEvent

logger = logging.getLogger(__name__)

Notify = Callable[[str, str], None]


def notification_text(event: PrayerEvent) -> tuple[str, str]:
    """Return (title, body) for a prayer notification."""
    return f"{event.name} Prayer Time", f"It's time for {event.name} prayer"


class NotificationScheduler:
    """Schedules one notification per remaining prayer of the current day.

    Args:
        notify: Called with (title, body) when a prayer is due.
        clock: Returns the current local datetime.
        timer_factory: Builds a timer with threading.Timer's signature.
    """

    def __init__(
        self,
        notify: Notify,
        clock: Callable[[], datetime] = datetime.now,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self._notify = notify
        self._clock = clock
        self._timer_factory = timer_factory
        self._timers: dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    @property
    def pending(self) -> list[str]:
        """Names of prayers with a notification still scheduled."""
        with self._lock:
            return list(self._timers)

    def cancel(self) -> None:
        """Cancel every pending notification."""
        with self._lock:
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()

    def reschedule(self, schedule: Sequence[PrayerEvent]) -> list[str]:
        """Replace all pending notifications with ones for schedule.

        Prayers whose time has already passed today are skipped.

        Returns:
            Names of the prayers that were scheduled.
        """
        self.cancel()
        now = self._clock()
        with self._lock:
            for event in schedule:
                hours, minutes = divmod(event.minutes, 60)
                due = now.replace(hour=hours, minute=minutes, second=0, microsecond=0)
                if due <= now:
                    continue
                delay = (due - now).total_seconds()
                timer = self._timer_factory(delay, self._fire, args=(event,))
                timer.daemon = True
                timer.start()
                self._timers[event.name] = timer
            scheduled = list(self._timers)
        logger.info("Scheduled prayer notifications: %s", ", ".join(scheduled) or "none")
        return scheduled

    def _fire(self, event: PrayerEvent) -> None:
        with self._lock:
            self._timers.pop(event.name, None)
        title, body = notification_text(event)
        logger.debug("Firing notification for %s", event.name)
        self._notify(title, body)
