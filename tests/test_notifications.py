from datetime import datetime

from pytz import utc

from adhantimes.location import observer_now
from adhantimes.notifications import NotificationScheduler, notification_text
from adhantimes.qibla import KAABA
from adhantimes.schedule import generate_schedule

SCHEDULE = generate_schedule(KAABA)


class FakeTimer:
    created: list["FakeTimer"] = []

    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


def _scheduler(now, sent):
    FakeTimer.created = []
    return NotificationScheduler(
        lambda title, body: sent.append((title, body)),
        clock=lambda: now,
        timer_factory=FakeTimer,
    )


def test_only_remaining_prayers_are_scheduled():
    scheduler = _scheduler(datetime(2024, 5, 1, 13, 0), [])
    assert scheduler.reschedule(SCHEDULE) == ["Asr", "Maghrib", "Isha"]
    assert scheduler.pending == ["Asr", "Maghrib", "Isha"]
    assert [t.interval for t in FakeTimer.created] == [9900.0, 19200.0, 24300.0]
    assert all(t.started and t.daemon for t in FakeTimer.created)


def test_nothing_scheduled_after_isha():
    scheduler = _scheduler(datetime(2024, 5, 1, 21, 0), [])
    assert scheduler.reschedule(SCHEDULE) == []
    assert scheduler.pending == []


def test_reschedule_clears_previous_timers():
    scheduler = _scheduler(datetime(2024, 5, 1, 4, 0), [])
    scheduler.reschedule(SCHEDULE)
    first_batch = list(FakeTimer.created)
    scheduler.reschedule(SCHEDULE)

    assert len(first_batch) == 5
    assert all(t.cancelled for t in first_batch)
    assert scheduler.pending == ["Fajr", "Dhuhr", "Asr", "Maghrib", "Isha"]
    assert len(FakeTimer.created) == 10


def test_firing_sends_notification_and_clears_pending():
    sent = []
    scheduler = _scheduler(datetime(2024, 5, 1, 19, 0), sent)
    scheduler.reschedule(SCHEDULE)
    FakeTimer.created[0].fire()

    assert sent == [("Isha Prayer Time", "It's time for Isha prayer")]
    assert scheduler.pending == []


def test_cancel():
    scheduler = _scheduler(datetime(2024, 5, 1, 4, 0), [])
    scheduler.reschedule(SCHEDULE)
    scheduler.cancel()
    assert scheduler.pending == []
    assert all(t.cancelled for t in FakeTimer.created)


def test_notification_text():
    assert notification_text(SCHEDULE[0]) == (
        "Fajr Prayer Time",
        "It's time for Fajr prayer",
    )


def test_observer_clock_sets_delays_in_observer_wall_time():
    # 03:30 UTC is 06:30 in Mecca: Fajr has passed, Dhuhr is 6h away.
    clock = observer_now(KAABA, datetime(2024, 5, 1, 3, 30, tzinfo=utc))
    scheduler = _scheduler(clock, [])
    assert scheduler.reschedule(SCHEDULE) == ["Dhuhr", "Asr", "Maghrib", "Isha"]
    assert FakeTimer.created[0].interval == 6 * 3600.0
