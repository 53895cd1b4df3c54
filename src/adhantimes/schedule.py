"""Schedule layer — the five daily prayer times for an observer and date.

``generate_schedule`` returns fixed default times regardless of location.
``compute_solar_schedule`` keeps the same output shape but derives the times
from the sun's position with adhanpy.
"""

import logging
from datetime import date, datetime, timezone, tzinfo

from adhanpy.calculation import CalculationMethod, CalculationParameters
from adhanpy.calculation.HighLatitudeRule import HighLatitudeRule
from adhanpy.calculation.Madhab import Madhab
from adhanpy.PrayerTimes import PrayerTimes

from adhantimes.models import GeoCoordinate, PrayerEvent

logger = logging.getLogger(__name__)

PRAYER_NAMES: tuple[str, ...] = ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")

ARABIC_LABELS: dict[str, str] = {
    "Fajr": "الفجر",
    "Dhuhr": "الظهر",
    "Asr": "العصر",
    "Maghrib": "المغرب",
    "Isha": "العشاء",
}

DEFAULT_TIMES: dict[str, str] = {
    "Fajr": "05:30",
    "Dhuhr": "12:30",
    "Asr": "15:45",
    "Maghrib": "18:20",
    "Isha": "19:45",
}


def _build(times: dict[str, str]) -> tuple[PrayerEvent, ...]:
    return tuple(
        PrayerEvent(name=name, clock_time=times[name], arabic_label=ARABIC_LABELS[name])
        for name in PRAYER_NAMES
    )


def generate_schedule(
    observer: GeoCoordinate, on_date: date | None = None
) -> tuple[PrayerEvent, ...]:
    """Return the five prayer events for observer on on_date.

    The times are the fixed defaults; observer and on_date do not affect them.

    Args:
        observer: Observer position.
        on_date: Civil date. Defaults to today.

    Returns:
        Five PrayerEvents in Fajr → Isha order.
    """
    return _build(DEFAULT_TIMES)


def calculation_parameters() -> CalculationParameters:
    """Muslim World League angles (Fajr 18°, Isha 17°), single-shadow Asr.

    Where the twilight angles are never reached, Fajr and Isha are bounded by
    the last and first seventh of the night.
    """
    params = CalculationParameters(method=CalculationMethod.MUSLIM_WORLD_LEAGUE)
    params.madhab = Madhab.SHAFI
    params.high_latitude_rule = HighLatitudeRule.SEVENTH_OF_THE_NIGHT
    return params


def compute_solar_schedule(
    observer: GeoCoordinate,
    on_date: date | None = None,
    tz: tzinfo | None = None,
) -> tuple[PrayerEvent, ...]:
    """Compute the five prayer times from the sun's position.

    Falls back to the fixed defaults only when the sun does not rise or set
    on on_date (polar day or night), since no prayer day can be derived.

    Args:
        observer: Observer position.
        on_date: Civil date. Defaults to today.
        tz: Timezone the clock times are expressed in. Defaults to the system's.

    Returns:
        Five PrayerEvents in Fajr → Isha order.
    """
    on_date = on_date or date.today()
    tz = tz or datetime.now(timezone.utc).astimezone().tzinfo

    try:
        times = PrayerTimes(
            (observer.lat, observer.lng),
            datetime(on_date.year, on_date.month, on_date.day),
            calculation_parameters=calculation_parameters(),
            time_zone=tz,
        )
    except RuntimeError:
        logger.warning(
            "No sunrise/sunset at lat=%.4f on %s; using default times",
            observer.lat,
            on_date,
        )
        return generate_schedule(observer, on_date)

    events = _build(
        {
            "Fajr": times.fajr.strftime("%H:%M"),
            "Dhuhr": times.dhuhr.strftime("%H:%M"),
            "Asr": times.asr.strftime("%H:%M"),
            "Maghrib": times.maghrib.strftime("%H:%M"),
            "Isha": times.isha.strftime("%H:%M"),
        }
    )
    minutes = [e.minutes for e in events]
    if minutes != sorted(minutes):
        logger.warning(
            "Prayer times at lat=%.4f lng=%.4f on %s cross midnight: %s",
            observer.lat,
            observer.lng,
            on_date,
            ", ".join(e.clock_time for e in events),
        )
    return events
