"""Qibla layer — bearing and distance from an observer to the Kaaba."""

import math

from adhantimes.models import GeoCoordinate, QiblaResult

KAABA = GeoCoordinate(lat=21.4225, lng=39.8262)

_KM_PER_DEGREE = 111
_EARTH_RADIUS_KM = 6371.0


def qibla_bearing(observer: GeoCoordinate) -> float:
    """Initial great-circle bearing from observer to the Kaaba, in [0, 360)."""
    phi1 = math.radians(observer.lat)
    phi2 = math.radians(KAABA.lat)
    d_lambda = math.radians(KAABA.lng - observer.lng)

    y = math.sin(d_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        d_lambda
    )

    theta = math.atan2(y, x)
    bearing = (theta * 180 / math.pi + 360) % 360
    # Float rounding can land exactly on 360
    return 0.0 if bearing >= 360 else bearing


def approximate_distance_km(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Euclidean distance in degree space × 111 km.

    Rough estimate only: it ignores meridian convergence, so it overstates
    east-west distances away from the equator. Use great_circle_distance_km
    for a geodesic figure.
    """
    return math.hypot(a.lat - b.lat, a.lng - b.lng) * _KM_PER_DEGREE


def great_circle_distance_km(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Haversine distance on a spherical Earth (R = 6371 km)."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = phi2 - phi1
    d_lambda = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * _EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def compute_qibla(observer: GeoCoordinate) -> QiblaResult:
    """Compute the Qibla bearing and approximate distance for an observer.

    At the Kaaba itself the direction is undefined; bearing and distance are
    both reported as 0.

    Args:
        observer: Observer position. Out-of-range values still produce a number.

    Returns:
        QiblaResult with bearing in [0, 360) and the planar distance estimate.
    """
    if observer.lat == KAABA.lat and observer.lng == KAABA.lng:
        return QiblaResult(bearing_deg=0.0, distance_km=0.0)
    return QiblaResult(
        bearing_deg=qibla_bearing(observer),
        distance_km=approximate_distance_km(observer, KAABA),
    )


def relative_rotation(bearing_deg: float, heading_deg: float | None = None) -> float:
    """Rotation to apply to a compass needle so it points at the Qibla.

    A missing heading (no sensor) is treated as 0, i.e. the device faces north.
    """
    return bearing_deg - (heading_deg or 0.0)


def heading_from_alpha(alpha: float | None) -> float:
    """Convert a DeviceOrientation ``alpha`` reading to a compass heading."""
    if alpha is None:
        return 0.0
    return (360 - alpha) % 360
