"""Calendar layer — approximate Gregorian → Hijri conversion and observance lookup.

The arithmetic uses a fixed 354-day year and 29.5-day month, so results drift
from the true (observed or tabular) Hijri calendar by a day or more. Callers only
depend on ``convert_to_hijri``; a precise algorithm can replace it in place.
"""

import logging
import math
from datetime import date, datetime

from adhantimes.models import HijriDate

logger = logging.getLogger(__name__)

HIJRI_EPOCH = date(622, 7, 16)  # 1 Muharram 1 AH (approximate)
_YEAR_DAYS = 354
_MONTH_DAYS = 29.5

HIJRI_MONTHS: tuple[str, ...] = (
    "Muharram",
    "Safar",
    "Rabi' al-awwal",
    "Rabi' al-thani",
    "Jumada al-awwal",
    "Jumada al-thani",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

HIJRI_MONTHS_ARABIC: tuple[str, ...] = (
    "محرم",
    "صفر",
    "ربيع الأول",
    "ربيع الثاني",
    "جمادى الأولى",
    "جمادى الآخرة",
    "رجب",
    "شعبان",
    "رمضان",
    "شوال",
    "ذو القعدة",
    "ذو الحجة",
)

# (month name, first day, last day, label); evaluated in order, several may match
_OBSERVANCE_RULES: tuple[tuple[str, int, int, str], ...] = (
    ("Ramadan", 1, 1, "Start of Ramadan"),
    ("Ramadan", 27, 30, "Laylat al-Qadr"),
    ("Dhu al-Hijjah", 8, 12, "Hajj Period"),
    ("Dhu al-Hijjah", 10, 10, "Eid al-Adha"),
    ("Shawwal", 1, 1, "Eid al-Fitr"),
    ("Muharram", 1, 1, "Islamic New Year"),
    ("Muharram", 10, 10, "Day of Ashura"),
)


def _days_since_epoch(civil: date | datetime) -> int:
    if isinstance(civil, datetime):
        civil = civil.date()
    return civil.toordinal() - HIJRI_EPOCH.toordinal()


def convert_to_hijri(civil: date | datetime) -> HijriDate:
    """Convert a civil date to an approximate Hijri date.

    Dates before the epoch are clamped to 1 Muharram 1 AH.

    Args:
        civil: Gregorian date. For a datetime, its wall-clock date is used.

    Returns:
        HijriDate with month_index always in 0..11.
    """
    days_diff = _days_since_epoch(civil)
    if days_diff < 0:
        logger.debug("Pre-epoch date %s clamped to 1 Muharram 1 AH", civil)
        days_diff = 0

    year = days_diff // _YEAR_DAYS + 1
    day_of_year = days_diff % _YEAR_DAYS
    month_index = math.floor(day_of_year / _MONTH_DAYS)
    day = math.floor(day_of_year % _MONTH_DAYS) + 1

    if not 0 <= month_index < len(HIJRI_MONTHS):
        month_index = 0

    return HijriDate(
        day=day,
        month_index=month_index,
        month_name=HIJRI_MONTHS[month_index],
        month_name_arabic=HIJRI_MONTHS_ARABIC[month_index],
        year=year,
    )


def get_observances(month_name: str, day: int) -> list[str]:
    """Return the observances falling on the given Hijri month/day, in table order."""
    return [
        label
        for month, first, last, label in _OBSERVANCE_RULES
        if month == month_name and first <= day <= last
    ]


def format_hijri(hijri: HijriDate, lang: str = "en") -> str:
    """Render a HijriDate for display ("9 Ramadan 1447 AH" / "9 رمضان 1447 هـ")."""
    if lang == "ar":
        return f"{hijri.day} {hijri.month_name_arabic} {hijri.year} هـ"
    return f"{hijri.day} {hijri.month_name} {hijri.year} AH"
