import math

import pytest

from adhantimes.models import GeoCoordinate, QiblaResult
from adhantimes.qibla import (
    KAABA,
    approximate_distance_km,
    compute_qibla,
    great_circle_distance_km,
    heading_from_alpha,
    qibla_bearing,
    relative_rotation,
)

LONDON = GeoCoordinate(lat=51.5074, lng=-0.1278)
NEW_YORK = GeoCoordinate(lat=40.7128, lng=-74.0060)
MEDINA = GeoCoordinate(lat=24.4709, lng=39.6122)


def test_observer_at_kaaba_is_degenerate():
    assert compute_qibla(KAABA) == QiblaResult(bearing_deg=0.0, distance_km=0.0)


def test_london_bearing():
    assert compute_qibla(LONDON).bearing_deg == pytest.approx(119.0, abs=1.0)


def test_new_york_bearing():
    assert compute_qibla(NEW_YORK).bearing_deg == pytest.approx(58.5, abs=1.0)


def test_medina_faces_south():
    assert 170 < compute_qibla(MEDINA).bearing_deg < 180


def test_distance_is_planar_approximation():
    result = compute_qibla(LONDON)
    expected = math.hypot(LONDON.lat - KAABA.lat, LONDON.lng - KAABA.lng) * 111
    assert result.distance_km == pytest.approx(expected)
    assert result.distance_km == pytest.approx(5551, abs=2)


def test_great_circle_distance_mecca_medina():
    assert 330 < great_circle_distance_km(KAABA, MEDINA) < 350
    assert great_circle_distance_km(KAABA, KAABA) == 0.0


def test_planar_and_geodesic_distances_differ():
    assert approximate_distance_km(LONDON, KAABA) != pytest.approx(
        great_circle_distance_km(LONDON, KAABA), rel=0.01
    )


@pytest.mark.parametrize("lat", [-120.0, -90.0, -45.5, 0.0, 21.4225, 60.0, 90.0, 200.0])
@pytest.mark.parametrize("lng", [-540.0, -180.0, -74.0, 0.0, 39.8262, 139.7, 180.0, 720.0])
def test_bearing_always_in_range(lat, lng):
    bearing = qibla_bearing(GeoCoordinate(lat=lat, lng=lng))
    assert 0 <= bearing < 360


def test_compute_qibla_is_repeatable():
    assert compute_qibla(NEW_YORK) == compute_qibla(NEW_YORK)


def test_relative_rotation():
    assert relative_rotation(119.0) == 119.0
    assert relative_rotation(119.0, None) == 119.0
    assert relative_rotation(119.0, 100.0) == 19.0
    assert relative_rotation(10.0, 30.0) == -20.0


@pytest.mark.parametrize(
    "alpha, heading", [(None, 0.0), (0.0, 0.0), (90.0, 270.0), (270.0, 90.0)]
)
def test_heading_from_alpha(alpha, heading):
    assert heading_from_alpha(alpha) == heading
