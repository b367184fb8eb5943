"""WGS84 to UTM projection of geographic points.

The zone is derived from longitude (6 degree bands) and the hemisphere from the
sign of latitude, giving EPSG ``326zz`` (north) or ``327zz`` (south).
Transformers are built once per EPSG code and reused.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Optional, Sequence

from loguru import logger
from pyproj import Transformer

from adapt_visualizer.core.errors import InvalidCoordinateError
from adapt_visualizer.core.geometry import GeoPoint, PlanarPoint

WGS84_EPSG = 4326


@lru_cache(maxsize=None)
def _utm_transformer(epsg: int) -> Transformer:
    """Return a cached WGS84 -> UTM transformer (lon/lat axis order)."""
    logger.debug(f"Creating transformer EPSG:{WGS84_EPSG} -> EPSG:{epsg}")
    return Transformer.from_crs(
        f"EPSG:{WGS84_EPSG}",
        f"EPSG:{epsg}",
        always_xy=True,
    )


def validate_geo_point(point: GeoPoint) -> None:
    """Check that a point lies in valid degree ranges.

    Raises
    ------
    InvalidCoordinateError
        Raised for non-finite values, longitude outside ``[-180, 180]`` or
        latitude outside ``[-90, 90]``.
    """
    lon, lat = point.longitude, point.latitude
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise InvalidCoordinateError(f"non-finite coordinate: ({lon}, {lat})")
    if not -180.0 <= lon <= 180.0:
        raise InvalidCoordinateError(f"longitude out of range: {lon}")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinateError(f"latitude out of range: {lat}")


def utm_zone(longitude: float) -> int:
    """Return the UTM zone number (1..60) containing a longitude.

    Examples
    --------
    >>> utm_zone(-93.6)
    15
    >>> utm_zone(180.0)
    60
    """
    return min(int((longitude + 180.0) // 6.0) + 1, 60)


def utm_epsg(point: GeoPoint) -> int:
    """Return the WGS84/UTM EPSG code for the zone containing ``point``."""
    validate_geo_point(point)
    base = 32600 if point.latitude >= 0.0 else 32700
    return base + utm_zone(point.longitude)


class GeodeticProjector:
    """Projects geographic points to UTM meters.

    Parameters
    ----------
    epsg : int, optional
        Fixed target UTM EPSG code. When omitted every point is projected into
        its own zone.

    Examples
    --------
    >>> projector = GeodeticProjector()
    >>> planar = projector.project(GeoPoint(-93.6, 42.0))
    >>> planar.epsg
    32615
    """

    def __init__(self, epsg: Optional[int] = None) -> None:
        self.epsg = epsg

    def project(self, point: GeoPoint, epsg: Optional[int] = None) -> PlanarPoint:
        """Project one point.

        Parameters
        ----------
        point : GeoPoint
            Input coordinate.
        epsg : int, optional
            Target zone overriding the projector default.

        Returns
        -------
        PlanarPoint
            Easting/northing in meters.

        Raises
        ------
        InvalidCoordinateError
            Raised when the input is out of range or projects to a
            non-finite value.
        """
        validate_geo_point(point)
        target = epsg or self.epsg or utm_epsg(point)
        x, y = _utm_transformer(target).transform(point.longitude, point.latitude)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidCoordinateError(
                f"({point.longitude}, {point.latitude}) has no finite "
                f"projection in EPSG:{target}"
            )
        return PlanarPoint(float(x), float(y), target)

    def project_many(self, points: Sequence[GeoPoint]) -> list[PlanarPoint]:
        """Project a batch into a single zone.

        The zone comes from the projector default or, failing that, from the
        first point, so shapes straddling a zone edge keep one planar frame.
        """
        if not points:
            return []
        target = self.epsg or utm_epsg(points[0])
        return [self.project(point, target) for point in points]
