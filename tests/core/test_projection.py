"""Tests for WGS84 to UTM projection."""

import math

import pytest

from adapt_visualizer.core.errors import InvalidCoordinateError
from adapt_visualizer.core.geometry import GeoPoint
from adapt_visualizer.core.projection import GeodeticProjector, utm_epsg, utm_zone


def test_project_is_bit_identical_across_calls_and_instances() -> None:
    """Equal input should give exactly equal output every time."""
    point = GeoPoint(-93.6213, 42.0187)
    first = GeodeticProjector().project(point)
    again = GeodeticProjector().project(GeoPoint(-93.6213, 42.0187))
    assert first == again
    assert first.x.hex() == again.x.hex()
    assert first.y.hex() == again.y.hex()
    assert GeodeticProjector().project(point) == first


def test_project_central_meridian_on_equator_is_false_easting() -> None:
    """Zone 15 central meridian at the equator maps to (500000, 0)."""
    planar = GeodeticProjector().project(GeoPoint(-93.0, 0.0))
    assert planar.epsg == 32615
    assert planar.x == pytest.approx(500000.0, abs=1e-6)
    assert planar.y == pytest.approx(0.0, abs=1e-6)


def test_project_uses_southern_zone_below_equator() -> None:
    """Southern latitudes should use EPSG 327zz with false northing."""
    planar = GeodeticProjector().project(GeoPoint(-47.9, -15.8))
    assert planar.epsg == 32723
    assert 0.0 < planar.y < 10_000_000.0


def test_project_distances_are_metric() -> None:
    """One millidegree of latitude should be about 111 m."""
    projector = GeodeticProjector()
    south = projector.project(GeoPoint(-93.62, 42.020))
    north = projector.project(GeoPoint(-93.62, 42.021))
    distance = math.hypot(north.x - south.x, north.y - south.y)
    assert distance == pytest.approx(111.0, abs=1.0)


@pytest.mark.parametrize(
    "lon, lat",
    [
        (180.5, 10.0),
        (-181.0, 10.0),
        (10.0, 90.1),
        (10.0, -95.0),
        (float("nan"), 10.0),
        (10.0, float("inf")),
    ],
)
def test_project_rejects_out_of_range_coordinates(lon: float, lat: float) -> None:
    """Out-of-range or non-finite input should fail rather than clamp."""
    with pytest.raises(InvalidCoordinateError):
        GeodeticProjector().project(GeoPoint(lon, lat))


def test_invalid_coordinate_error_is_value_error() -> None:
    """Callers catching ValueError should also catch coordinate failures."""
    with pytest.raises(ValueError, match="longitude"):
        utm_epsg(GeoPoint(200.0, 0.0))


def test_utm_zone_bands() -> None:
    """Zones are 6 degree bands numbered from 180W, clamped at 180E."""
    assert utm_zone(-180.0) == 1
    assert utm_zone(-93.6) == 15
    assert utm_zone(0.0) == 31
    assert utm_zone(179.9) == 60
    assert utm_zone(180.0) == 60


def test_project_many_keeps_batch_in_first_point_zone() -> None:
    """A line straddling a zone edge should stay in one planar frame."""
    west = GeoPoint(-96.01, 40.0)
    east = GeoPoint(-95.99, 40.0)
    projector = GeodeticProjector()
    assert projector.project(west).epsg == 32614
    assert projector.project(east).epsg == 32615

    batch = projector.project_many([west, east])
    assert [p.epsg for p in batch] == [32614, 32614]
    assert batch[1].x - batch[0].x == pytest.approx(1704.0, rel=0.01)


def test_fixed_zone_projector_overrides_point_zone() -> None:
    """A projector pinned to a zone projects every point into it."""
    projector = GeodeticProjector(epsg=32614)
    assert projector.project(GeoPoint(-93.6, 42.0)).epsg == 32614
    assert projector.project_many([]) == []
