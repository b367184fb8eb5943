"""Built-in demonstration dataset for the visualizer window."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta

import numpy as np
from loguru import logger
from shapely.geometry import LineString, MultiPolygon, Point, Polygon

from adapt_visualizer.adm.field_boundaries import FieldBoundary
from adapt_visualizer.adm.guidance import (
    AbCurve,
    AbLine,
    APlus,
    CenterPivot,
    GuidanceGroup,
    GuidancePattern,
    MultiAbLine,
    Spiral,
)
from adapt_visualizer.adm.logged_data import (
    EnumeratedMeter,
    EnumeratedValue,
    LoggedData,
    Meter,
    NumericMeter,
    NumericRepresentationValue,
    OperationData,
    Representation,
    Section,
    SpatialRecord,
)

# South-west corner of the demo field (central Iowa)
ORIGIN_LON = -93.62
ORIGIN_LAT = 42.02
FIELD_SIZE_DEG = (0.006, 0.004)


@dataclass
class SampleCatalog:
    """Data-model objects shown by the main window."""

    logged_data: list[LoggedData] = field(default_factory=list)
    field_boundaries: list[FieldBoundary] = field(default_factory=list)
    guidance_groups: list[GuidanceGroup] = field(default_factory=list)
    guidance_patterns: list[GuidancePattern] = field(default_factory=list)


def _offset(dx: float, dy: float) -> tuple[float, float]:
    return ORIGIN_LON + dx, ORIGIN_LAT + dy


def build_field_boundary() -> FieldBoundary:
    """Return a two-polygon boundary; the main polygon has a waterway hole."""
    width, height = FIELD_SIZE_DEG
    main = Polygon(
        [_offset(0, 0), _offset(width, 0), _offset(width, height), _offset(0, height)],
        holes=[[
            _offset(0.002, 0.001),
            _offset(0.003, 0.001),
            _offset(0.003, 0.002),
            _offset(0.002, 0.002),
        ]],
    )
    corner = Polygon(
        [
            _offset(width + 0.001, 0),
            _offset(width + 0.003, 0),
            _offset(width + 0.002, 0.002),
        ]
    )
    return FieldBoundary(spatial_data=MultiPolygon([main, corner]), description="North 80")


def build_guidance_patterns() -> list[GuidancePattern]:
    """Return one pattern of every variant, ids 1..6."""
    width, height = FIELD_SIZE_DEG
    ab_line = AbLine(
        reference_id=1,
        description="Main AB",
        a=Point(*_offset(0.0005, 0.0005)),
        b=Point(*_offset(width - 0.0005, height - 0.0005)),
    )
    theta = np.linspace(0.0, math.pi, 24)
    curve_a = LineString(
        [_offset(0.0005 + 0.005 * t / math.pi, 0.001 + 0.001 * math.sin(t)) for t in theta]
    )
    curve_b = LineString(
        [_offset(0.0005 + 0.005 * t / math.pi, 0.002 + 0.001 * math.sin(t)) for t in theta]
    )
    turns = np.linspace(0.0, 6.0 * math.pi, 200)
    spiral = LineString(
        [
            _offset(0.003 + 0.00015 * t * math.cos(t), 0.002 + 0.0001 * t * math.sin(t))
            for t in turns
        ]
    )
    return [
        ab_line,
        AbCurve(reference_id=2, description="Terrace", shape=[curve_a, curve_b]),
        MultiAbLine(
            reference_id=3,
            description="Tramlines",
            ab_lines=[
                AbLine(
                    reference_id=31,
                    a=Point(*_offset(0.0005, 0.001)),
                    b=Point(*_offset(width - 0.0005, 0.001)),
                ),
                AbLine(
                    reference_id=32,
                    a=Point(*_offset(0.001, 0.0005)),
                    b=Point(*_offset(0.001, height - 0.0005)),
                ),
            ],
        ),
        Spiral(reference_id=4, description="Spiral", shape=spiral),
        APlus(reference_id=5, description="A+", point=Point(*_offset(0.001, 0.001)), heading=45.0),
        CenterPivot(reference_id=6, description="Pivot", center=Point(*_offset(0.003, 0.002))),
    ]


def build_guidance_groups() -> list[GuidanceGroup]:
    return [
        GuidanceGroup(guidance_pattern_ids=[1], description="AB line"),
        GuidanceGroup(guidance_pattern_ids=[2], description="Terrace curve"),
        GuidanceGroup(guidance_pattern_ids=[3], description="Tramlines"),
        GuidanceGroup(guidance_pattern_ids=[4, 5], description="Spiral + A+"),
        GuidanceGroup(guidance_pattern_ids=[6], description="Center pivot"),
    ]


def build_logged_data(record_count: int = 200, seed: int = 7) -> LoggedData:
    """Return a planting operation with speed, work state and per-row rates.

    Records are produced on demand from ``seed`` so releasing them only drops
    the cached list.
    """
    speed = NumericMeter(Representation("vrVehicleSpeed", "Speed"), unit_code="km/h")
    work_state = EnumeratedMeter(
        Representation("dtRecordingStatus", "Recording status"),
        domain_codes=["dtiRecordingStatusOn", "dtiRecordingStatusOff"],
    )
    untagged = Meter(description="Raw CAN channel")
    row_meters = [
        NumericMeter(Representation("vrSeedRateSeedsActual", f"Row {row}"), unit_code="seeds/ha")
        for row in (1, 2)
    ]
    sections = [
        Section(meters=[speed, work_state, untagged], depth=0, description="Implement"),
        Section(meters=[row_meters[0]], depth=1, description="Row 1"),
        Section(meters=[row_meters[1]], depth=1, description="Row 2"),
    ]
    cache: dict[str, list[SpatialRecord]] = {}

    def records() -> list[SpatialRecord]:
        if "records" not in cache:
            rng = np.random.default_rng(seed)
            start = datetime(2024, 5, 2, 9, 30)
            width, height = FIELD_SIZE_DEG
            result = []
            for i in range(record_count):
                lon, lat = _offset(width * i / record_count, height * 0.5)
                values = {
                    speed: NumericRepresentationValue(round(float(rng.normal(8.0, 0.4)), 2), "km/h"),
                    work_state: EnumeratedValue(
                        "dtiRecordingStatusOn" if i % 50 else "dtiRecordingStatusOff"
                    ),
                }
                for meter in row_meters:
                    # every seventh record drops the row readings
                    if i % 7:
                        values[meter] = NumericRepresentationValue(
                            float(rng.integers(78000, 82000)), "seeds/ha"
                        )
                result.append(
                    SpatialRecord(
                        geometry=Point(lon, lat),
                        timestamp=start + timedelta(seconds=i),
                        meter_values=values,
                    )
                )
            cache["records"] = result
        return cache["records"]

    def release() -> None:
        cache.clear()
        logger.debug("Sample spatial records released")

    operation = OperationData(
        sections=sections, spatial_records=records, operation_type="SowingAndPlanting"
    )
    return LoggedData(
        operation_data=[operation],
        description="Planting 2024",
        release_spatial_data=release,
    )


def build_sample_catalog() -> SampleCatalog:
    """Return the full demonstration catalog."""
    return SampleCatalog(
        logged_data=[build_logged_data()],
        field_boundaries=[build_field_boundary()],
        guidance_groups=build_guidance_groups(),
        guidance_patterns=build_guidance_patterns(),
    )
