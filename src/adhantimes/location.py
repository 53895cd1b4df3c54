"""Location layer — observer resolution, geocoding, and observer timezone lookup."""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, tzinfo

import httpx
from pytz import UnknownTimeZoneError, timezone, utc
from timezonefinder import TimezoneFinder

from adhantimes.models import GeoCoordinate
from adhantimes.qibla import KAABA

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()

FALLBACK_LABEL = "Mecca"
DEVICE_LABEL = "Your Location"


class GeocodingError(Exception):
    """Geocoder call failure."""


@dataclass(frozen=True)
class ObserverLocation:
    """Resolved observer position plus where it came from."""

    coordinate: GeoCoordinate
    label: str  # Display name ("Your Location", geocoder address, "Mecca")
    is_fallback: bool  # True when no usable location was supplied


def is_valid_coordinate(lat: float | None, lng: float | None) -> bool:
    """True for finite lat in [-90, 90] and lng in [-180, 180]."""
    if lat is None or lng is None:
        return False
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90 <= lat <= 90 and -180 <= lng <= 180


def resolve_observer(
    lat: float | None, lng: float | None, label: str = DEVICE_LABEL
) -> ObserverLocation:
    """Turn a raw (possibly missing) position into an ObserverLocation.

    Missing, denied or out-of-range positions resolve to the Kaaba.
    """
    if not is_valid_coordinate(lat, lng):
        if lat is not None or lng is not None:
            logger.warning("Ignoring invalid location lat=%s lng=%s", lat, lng)
        return ObserverLocation(coordinate=KAABA, label=FALLBACK_LABEL, is_fallback=True)
    assert lat is not None and lng is not None
    return ObserverLocation(
        coordinate=GeoCoordinate(lat=lat, lng=lng), label=label, is_fallback=False
    )


def geocode_address(address: str) -> ObserverLocation:
    """Resolve an address string with the Nominatim (OpenStreetMap) geocoder.

    Args:
        address: Address or place name in any language.

    Returns:
        ObserverLocation labelled with the geocoder's display name.

    Raises:
        GeocodingError: When the address cannot be found.
        httpx.HTTPError: On transport or HTTP status errors.
    """
    params = {"q": address, "format": "json", "limit": 1}
    headers = {"User-Agent": "adhantimes/0.1"}
    resp = httpx.get(
        "https://nominatim.openstreetmap.org/search",
        params=params,
        headers=headers,
        timeout=10,
    )
    resp.raise_for_status()
    results = resp.json()
    if not results:
        raise GeocodingError(f"Address not found: {address}")
    r = results[0]
    return resolve_observer(float(r["lat"]), float(r["lon"]), label=r["display_name"])


def timezone_name(coordinate: GeoCoordinate) -> str | None:
    """IANA timezone name at coordinate, or None over open sea."""
    return _tf.timezone_at(lat=coordinate.lat, lng=coordinate.lng)


def observer_timezone(coordinate: GeoCoordinate) -> tzinfo | None:
    """pytz timezone in effect at coordinate, or None if it cannot be resolved."""
    tz_str = timezone_name(coordinate)
    if tz_str is None:
        logger.info("No timezone for lat=%s lng=%s", coordinate.lat, coordinate.lng)
        return None
    try:
        return timezone(tz_str)
    except UnknownTimeZoneError:
        logger.warning("pytz does not know timezone %s", tz_str)
        return None


def observer_now(coordinate: GeoCoordinate, now: datetime | None = None) -> datetime:
    """Wall-clock time at coordinate as an aware datetime.

    Falls back to the system's local timezone when none is found for coordinate.

    Args:
        coordinate: Observer position.
        now: Instant to convert (aware). Defaults to the current time.
    """
    now = now or datetime.now(utc)
    local_tz = observer_timezone(coordinate)
    if local_tz is None:
        return now.astimezone()
    return now.astimezone(local_tz)
