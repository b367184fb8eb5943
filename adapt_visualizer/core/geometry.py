"""Point and extent value types shared by the projection pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True)
class GeoPoint:
    """Geographic coordinate in decimal degrees (WGS84).

    Parameters
    ----------
    longitude : float
        East-positive longitude in ``[-180, 180]``.
    latitude : float
        North-positive latitude in ``[-90, 90]``.
    """

    longitude: float
    latitude: float

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> list[GeoPoint]:
        """Build points from ``(lon, lat)`` pairs such as shapely coords.

        Examples
        --------
        >>> GeoPoint.from_coords([(139.7, 35.6)])
        [GeoPoint(longitude=139.7, latitude=35.6)]
        """
        return [cls(float(coord[0]), float(coord[1])) for coord in coords]


@dataclass(frozen=True)
class PlanarPoint:
    """Projected coordinate in meters.

    Parameters
    ----------
    x : float
        Easting.
    y : float
        Northing.
    epsg : int
        EPSG code of the UTM zone the point was projected into.
    """

    x: float
    y: float
    epsg: int


@dataclass(frozen=True)
class PixelPoint:
    """Canvas coordinate, origin at the extent minimum corner."""

    x: float
    y: float


@dataclass(frozen=True)
class Extent:
    """Axis-aligned bounding box of a batch of planar points."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def planar_array(points: Sequence[PlanarPoint]) -> np.ndarray:
    """Stack planar points into an array of shape ``(N, 2)``.

    Parameters
    ----------
    points : Sequence[PlanarPoint]
        Projected points.

    Returns
    -------
    numpy.ndarray
        Coordinates with dtype ``float64``; shape ``(0, 2)`` when empty.
    """
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray([(point.x, point.y) for point in points], dtype=np.float64)
