"""Fit projected shapes into a fixed-size canvas.

A shape is scaled by one uniform ``delta`` (meters per canvas unit) computed
from its own extent, so separate shapes may use separate scales.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger

from adapt_visualizer.core.errors import DegenerateViewportError
from adapt_visualizer.core.geometry import Extent, PixelPoint, PlanarPoint, planar_array

DEFAULT_MARGIN = 25.0


def compute_extent(points: Sequence[PlanarPoint]) -> Extent:
    """Return the bounding box of a non-empty point batch."""
    coord_array = planar_array(points)
    if coord_array.shape[0] == 0:
        raise DegenerateViewportError("cannot compute extent of an empty point set")
    min_x, min_y = coord_array.min(axis=0)
    max_x, max_y = coord_array.max(axis=0)
    return Extent(float(min_x), float(max_x), float(min_y), float(max_y))


def compute_delta(
    points: Sequence[PlanarPoint],
    viewport_width: float,
    viewport_height: float,
    margin: float = DEFAULT_MARGIN,
) -> tuple[Extent, float]:
    """Compute extent and uniform scale for fitting points into a canvas.

    The width ratio is used only when the usable canvas is narrower than it
    is tall and the shape is taller than it is wide; otherwise the height
    ratio is used. When the selected axis has zero distance the other axis
    ratio is taken so the scale stays positive.

    Parameters
    ----------
    points : Sequence[PlanarPoint]
        Projected shape vertices.
    viewport_width, viewport_height : float
        Canvas size in canvas units.
    margin : float
        Border reserved on every side of the canvas.

    Returns
    -------
    tuple[Extent, float]
        Extent of ``points`` and ``delta`` (meters per canvas unit, > 0).

    Raises
    ------
    DegenerateViewportError
        Raised when the usable canvas has no area, the point set is empty or
        all points coincide.

    Examples
    --------
    >>> pts = [PlanarPoint(0.0, 0.0, 32615), PlanarPoint(100.0, 50.0, 32615)]
    >>> compute_delta(pts, 150, 150, margin=25)[1]
    0.5
    """
    usable_width = viewport_width - 2 * margin
    usable_height = viewport_height - 2 * margin
    if usable_width <= 0 or usable_height <= 0:
        raise DegenerateViewportError(
            f"usable canvas {usable_width}x{usable_height} has no area"
        )

    extent = compute_extent(points)
    lon_distance = extent.width
    lat_distance = extent.height
    if lon_distance == 0 and lat_distance == 0:
        raise DegenerateViewportError("all points coincide; extent has no size")

    if usable_width < usable_height and lat_distance > lon_distance:
        delta = lon_distance / usable_width
        if delta == 0:
            delta = lat_distance / usable_height
    else:
        delta = lat_distance / usable_height
        if delta == 0:
            delta = lon_distance / usable_width

    logger.debug(
        f"Extent {lon_distance:.2f}x{lat_distance:.2f} m on "
        f"{usable_width}x{usable_height} canvas -> delta {delta:.6f}"
    )
    return extent, float(delta)


def to_pixel(point: PlanarPoint, extent: Extent, delta: float) -> PixelPoint:
    """Map one planar point onto the canvas of its extent."""
    if not delta > 0:
        raise DegenerateViewportError(f"delta must be positive, got {delta}")
    return PixelPoint((point.x - extent.min_x) / delta, (point.y - extent.min_y) / delta)


def to_pixels(
    points: Sequence[PlanarPoint], extent: Extent, delta: float
) -> list[PixelPoint]:
    """Map a batch of planar points onto the canvas of their extent."""
    if not delta > 0:
        raise DegenerateViewportError(f"delta must be positive, got {delta}")
    coord_array = planar_array(points)
    origin = np.asarray([extent.min_x, extent.min_y], dtype=np.float64)
    pixel_array = (coord_array - origin) / delta
    return [PixelPoint(float(x), float(y)) for x, y in pixel_array]


def fit_to_canvas(
    points: Sequence[PlanarPoint],
    viewport_width: float,
    viewport_height: float,
    margin: float = DEFAULT_MARGIN,
) -> list[PixelPoint]:
    """Scale one shape onto the canvas using only its own extent."""
    extent, delta = compute_delta(points, viewport_width, viewport_height, margin)
    return to_pixels(points, extent, delta)
