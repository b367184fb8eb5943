"""Pytest bootstrap helpers shared by all test domains."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from shapely.geometry import LineString, MultiPolygon, Point, Polygon

# Qt widgets are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def _append_repo_root() -> None:
    """Ensure repository root is present in import path."""
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_text = str(repo_root)
    if repo_root_text in sys.path:
        return
    sys.path.insert(0, repo_root_text)


_append_repo_root()

from adapt_visualizer.adm import (  # noqa: E402
    AbCurve,
    AbLine,
    EnumeratedMeter,
    EnumeratedValue,
    FieldBoundary,
    NumericMeter,
    NumericRepresentationValue,
    OperationData,
    Representation,
    Section,
    SpatialRecord,
)

# One millidegree is roughly 83 m east-west and 111 m north-south here
FIELD_LON = -93.62
FIELD_LAT = 42.02


def _field_coord(dx: float, dy: float) -> tuple[float, float]:
    """Return lon/lat offset from the test field corner in millidegrees."""
    return FIELD_LON + dx * 1e-3, FIELD_LAT + dy * 1e-3


def _field_point(dx: float, dy: float) -> Point:
    return Point(*_field_coord(dx, dy))


@pytest.fixture
def ab_line() -> AbLine:
    return AbLine(reference_id=1, a=_field_point(0, 0), b=_field_point(1, 2))


@pytest.fixture
def ab_curve() -> AbCurve:
    small = LineString([_field_coord(0, 0), _field_coord(0.5, 0.2), _field_coord(1, 0.5)])
    large = LineString([_field_coord(0, 0), _field_coord(4, 1), _field_coord(8, 5)])
    return AbCurve(reference_id=2, shape=[small, large])


@pytest.fixture
def field_boundary() -> FieldBoundary:
    square = Polygon(
        [_field_coord(0, 0), _field_coord(2, 0), _field_coord(2, 2), _field_coord(0, 2)],
        holes=[[_field_coord(0.5, 0.5), _field_coord(1, 0.5), _field_coord(1, 1)]],
    )
    triangle = Polygon([_field_coord(3, 0), _field_coord(6, 0), _field_coord(4, 4)])
    return FieldBoundary(
        spatial_data=MultiPolygon([square, triangle]), description="Home field"
    )


@pytest.fixture
def planting_meters() -> dict:
    """Meters of a planter: speed and work state at depth 0, rate at depth 1."""
    return {
        "speed": NumericMeter(Representation("vrVehicleSpeed"), unit_code="km/h"),
        "state": EnumeratedMeter(Representation("dtRecordingStatus")),
        "hidden": NumericMeter(None, unit_code="V"),
        "rate": NumericMeter(Representation("vrSeedRateSeedsActual"), unit_code="seeds/ha"),
    }


@pytest.fixture
def planting_operation(planting_meters) -> OperationData:
    """Operation with three records; the last record misses rate and state."""
    meters = planting_meters
    records = [
        SpatialRecord(
            geometry=_field_point(0, 0),
            meter_values={
                meters["speed"]: NumericRepresentationValue(12.5, "km/h"),
                meters["state"]: EnumeratedValue("dtiRecordingStatusOn"),
                meters["hidden"]: NumericRepresentationValue(13.8, "V"),
                meters["rate"]: NumericRepresentationValue(80000.0, "seeds/ha"),
            },
        ),
        SpatialRecord(
            geometry=_field_point(0, 1),
            meter_values={
                meters["speed"]: NumericRepresentationValue(9.75, "km/h"),
                meters["state"]: EnumeratedValue("dtiRecordingStatusOff"),
                meters["rate"]: NumericRepresentationValue(79500.5, "seeds/ha"),
            },
        ),
        SpatialRecord(
            geometry=_field_point(0, 2),
            meter_values={meters["speed"]: NumericRepresentationValue(0.0, "km/h")},
        ),
    ]
    sections = [
        Section(meters=[meters["rate"]], depth=1),
        Section(meters=[meters["speed"], meters["hidden"], meters["state"]], depth=0),
    ]
    return OperationData(sections=sections, spatial_records=records)


@pytest.fixture
def field_point():
    """Factory for points offset from the test field corner in millidegrees."""
    return _field_point
