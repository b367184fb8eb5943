"""Plan-view rendering of field boundaries."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from adapt_visualizer.adm.field_boundaries import FieldBoundary
from adapt_visualizer.core.geometry import GeoPoint
from adapt_visualizer.core.projection import GeodeticProjector
from adapt_visualizer.core.sinks import DrawingSink
from adapt_visualizer.core.viewport import DEFAULT_MARGIN, fit_to_canvas


class BoundaryRenderer:
    """Draws the exterior ring of every boundary polygon.

    Each ring is scaled on its own extent. Interior rings (holes) are not
    drawn.

    Parameters
    ----------
    projector : GeodeticProjector, optional
        Geographic to planar projector.
    margin : float
        Canvas border passed to the viewport scaler.
    """

    def __init__(
        self,
        projector: Optional[GeodeticProjector] = None,
        margin: float = DEFAULT_MARGIN,
    ) -> None:
        self.projector = projector or GeodeticProjector()
        self.margin = margin

    def render(self, field_boundary: FieldBoundary, sink: DrawingSink) -> None:
        """Clear the canvas and draw all polygons of ``field_boundary``."""
        polygons = list(field_boundary.spatial_data.geoms)
        with sink.session() as session:
            session.clear()
            for polygon in polygons:
                if len(polygon.interiors) > 0:
                    logger.warning(
                        f"Boundary '{field_boundary.description}': "
                        f"{len(polygon.interiors)} interior ring(s) not drawn"
                    )
                # shapely repeats the first vertex to close the ring
                ring_points = GeoPoint.from_coords(polygon.exterior.coords[:-1])
                planar_points = self.projector.project_many(ring_points)
                pixel_points = fit_to_canvas(
                    planar_points, session.width, session.height, self.margin
                )
                session.draw_polygon(pixel_points)
        logger.info(
            f"Rendered boundary '{field_boundary.description}' "
            f"({len(polygons)} polygon(s))"
        )
