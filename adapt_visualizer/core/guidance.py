"""Plan-view rendering of guidance patterns.

Each polyline is projected and scaled on its own extent, so lines of one
pattern are not drawn to a common scale.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from loguru import logger
from shapely.geometry import LineString

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
from adapt_visualizer.core.errors import PatternNotFoundError, PatternNotImplementedError
from adapt_visualizer.core.geometry import GeoPoint
from adapt_visualizer.core.projection import GeodeticProjector
from adapt_visualizer.core.sinks import DrawingSink, DrawSession
from adapt_visualizer.core.viewport import DEFAULT_MARGIN, fit_to_canvas


def find_pattern(
    patterns: Iterable[GuidancePattern], reference_id: int
) -> GuidancePattern:
    """Return the pattern with ``reference_id``.

    Raises
    ------
    PatternNotFoundError
        Raised when no pattern carries the id.
    """
    for pattern in patterns:
        if pattern.reference_id == reference_id:
            return pattern
    raise PatternNotFoundError(reference_id)


class GuidanceRenderer:
    """Draws guidance patterns onto a :class:`DrawingSink`.

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

    def render(self, pattern: GuidancePattern, sink: DrawingSink) -> None:
        """Clear the canvas and draw one pattern."""
        with sink.session() as session:
            session.clear()
            self._render_pattern(pattern, session)

    def render_group(
        self,
        group: GuidanceGroup,
        patterns: Sequence[GuidancePattern],
        sink: DrawingSink,
    ) -> None:
        """Clear the canvas and draw every pattern referenced by ``group``.

        Nothing is committed when any id is missing or any pattern fails.
        """
        with sink.session() as session:
            session.clear()
            for reference_id in group.guidance_pattern_ids:
                pattern = find_pattern(patterns, reference_id)
                self._render_pattern(pattern, session)
        logger.info(
            f"Rendered guidance group '{group.description}' "
            f"({len(group.guidance_pattern_ids)} pattern(s))"
        )

    def _render_pattern(self, pattern: GuidancePattern, session: DrawSession) -> None:
        logger.debug(f"Rendering {type(pattern).__name__} #{pattern.reference_id}")
        match pattern:
            case APlus():
                self._render_a_plus(pattern)
            case MultiAbLine():
                for ab_line in pattern.ab_lines:
                    self._render_ab_line(ab_line, session)
            case AbLine():
                self._render_ab_line(pattern, session)
            case AbCurve():
                for line_string in pattern.shape:
                    self._render_line_string(line_string, session)
            case Spiral():
                self._render_line_string(pattern.shape, session)
            case CenterPivot():
                raise PatternNotImplementedError(pattern)
            case _:
                raise PatternNotImplementedError(pattern)

    def _render_a_plus(self, a_plus: APlus) -> None:
        # Point markers are not drawn yet; projecting still validates the input.
        self.projector.project(GeoPoint(a_plus.point.x, a_plus.point.y))
        logger.debug(f"APlus #{a_plus.reference_id} has no visual representation")

    def _render_ab_line(self, ab_line: AbLine, session: DrawSession) -> None:
        self._render_points(
            [
                GeoPoint(ab_line.a.x, ab_line.a.y),
                GeoPoint(ab_line.b.x, ab_line.b.y),
            ],
            session,
        )

    def _render_line_string(self, line_string: LineString, session: DrawSession) -> None:
        self._render_points(GeoPoint.from_coords(line_string.coords), session)

    def _render_points(self, points: list[GeoPoint], session: DrawSession) -> None:
        planar_points = self.projector.project_many(points)
        pixel_points = fit_to_canvas(
            planar_points, session.width, session.height, self.margin
        )
        session.draw_polyline(pixel_points)
