"""Data model definitions — value types passed between the calendar, qibla, schedule, and status layers."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class GeoCoordinate:
    """A point on Earth. Range is not checked here."""

    lat: float  # Latitude (decimal degrees, -90..90)
    lng: float  # Longitude (decimal degrees, -180..180)


@dataclass(frozen=True)
class HijriDate:
    """Result of converting a civil date to the Hijri calendar."""

    day: int  # 1..30
    month_index: int  # 0..11, index into the month-name tables
    month_name: str  # Latin transliteration ("Ramadan")
    month_name_arabic: str  # Arabic script ("رمضان")
    year: int  # AH, >= 1


@dataclass(frozen=True)
class QiblaResult:
    """Direction and rough distance from an observer to the Kaaba."""

    bearing_deg: float  # Initial great-circle bearing, clockwise from true north, [0, 360)
    distance_km: float  # Planar approximation, not geodesic


@dataclass(frozen=True)
class PrayerEvent:
    """One of the five daily prayers with its local clock time."""

    name: str  # "Fajr", "Dhuhr", "Asr", "Maghrib" or "Isha"
    clock_time: str  # "HH:MM", 24-hour local time
    arabic_label: str  # "الفجر", ...

    @property
    def minutes(self) -> int:
        """Minutes since local midnight."""
        hours, minutes = self.clock_time.split(":")
        return int(hours) * 60 + int(minutes)


@dataclass(frozen=True)
class PrayerStatus:
    """Current/next prayer at a given instant, recomputed on every tick."""

    current: str
    next: str
    remaining: timedelta  # Until the next prayer, always positive

    @property
    def hours(self) -> int:
        return int(self.remaining.total_seconds()) // 3600

    @property
    def minutes(self) -> int:
        return (int(self.remaining.total_seconds()) % 3600) // 60

    @property
    def countdown(self) -> str:
        return f"{self.hours}h {self.minutes}m"
