"""Guidance pattern types.

Shapes are shapely geometries in geographic coordinates (x = longitude,
y = latitude).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from shapely.geometry import LineString, Point


@dataclass
class GuidancePatternBase:
    """Fields shared by all guidance pattern variants."""

    reference_id: int
    description: str = ""


@dataclass
class APlus(GuidancePatternBase):
    """Single-point pattern with a heading."""

    point: Point = field(default_factory=lambda: Point(0.0, 0.0))
    heading: float = 0.0


@dataclass
class AbLine(GuidancePatternBase):
    """Straight line through points A and B."""

    a: Point = field(default_factory=lambda: Point(0.0, 0.0))
    b: Point = field(default_factory=lambda: Point(0.0, 0.0))
    heading: float = 0.0


@dataclass
class AbCurve(GuidancePatternBase):
    """Curved path made of one or more line strings."""

    shape: list[LineString] = field(default_factory=list)


@dataclass
class MultiAbLine(GuidancePatternBase):
    """Set of straight lines driven as one pattern."""

    ab_lines: list[AbLine] = field(default_factory=list)


@dataclass
class Spiral(GuidancePatternBase):
    """Spiral path stored as one line string."""

    shape: LineString = field(default_factory=lambda: LineString())


@dataclass
class CenterPivot(GuidancePatternBase):
    """Circular pattern around a pivot center."""

    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    start_point: Point | None = None
    end_point: Point | None = None


GuidancePattern = Union[APlus, AbLine, AbCurve, MultiAbLine, Spiral, CenterPivot]


@dataclass
class GuidanceGroup:
    """Named selection of guidance patterns referenced by id."""

    guidance_pattern_ids: list[int] = field(default_factory=list)
    description: str = ""
