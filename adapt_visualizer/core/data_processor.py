"""Entry points that route data-model objects to renderers and sinks."""

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from adapt_visualizer.adm.field_boundaries import FieldBoundary
from adapt_visualizer.adm.guidance import GuidanceGroup, GuidancePattern
from adapt_visualizer.adm.logged_data import LoggedData, OperationData
from adapt_visualizer.core.boundary import BoundaryRenderer
from adapt_visualizer.core.guidance import GuidanceRenderer
from adapt_visualizer.core.projection import GeodeticProjector
from adapt_visualizer.core.sinks import DrawingSink, TableSink
from adapt_visualizer.core.tabulator import MeterTabulator, Table
from adapt_visualizer.core.viewport import DEFAULT_MARGIN


class DataProcessor:
    """Routes operations, boundaries and guidance to the viewer sinks.

    Parameters
    ----------
    canvas : DrawingSink
        Plan-view surface for boundaries and guidance.
    table : TableSink
        Raw-data surface for tabulated meter values.
    projector : GeodeticProjector, optional
        Shared projector for both renderers.
    margin : float
        Canvas border used when scaling shapes.

    Examples
    --------
    >>> processor = DataProcessor(MemoryCanvas(), MemoryTable())
    >>> processor.process_boundary(field_boundary)
    """

    def __init__(
        self,
        canvas: DrawingSink,
        table: TableSink,
        projector: Optional[GeodeticProjector] = None,
        margin: float = DEFAULT_MARGIN,
    ) -> None:
        self.canvas = canvas
        self.table = table
        projector = projector or GeodeticProjector()
        self.boundary_renderer = BoundaryRenderer(projector, margin)
        self.guidance_renderer = GuidanceRenderer(projector, margin)
        self.tabulator = MeterTabulator()

    def set_margin(self, margin: float) -> None:
        """Update the canvas border of both renderers."""
        self.boundary_renderer.margin = margin
        self.guidance_renderer.margin = margin

    def process_operation_data(self, operation_data: OperationData) -> Table:
        """Tabulate ``operation_data`` into the table sink.

        The table is built completely before the sink is touched.
        """
        table = self.tabulator.build_table(operation_data)
        table.write_to(self.table)
        return table

    def process_boundary(self, field_boundary: FieldBoundary) -> None:
        self.boundary_renderer.render(field_boundary, self.canvas)

    def process_guidance(
        self,
        guidance_group: GuidanceGroup,
        guidance_patterns: Sequence[GuidancePattern],
    ) -> None:
        self.guidance_renderer.render_group(
            guidance_group, guidance_patterns, self.canvas
        )

    def process_logged_data(self, logged_data: LoggedData, index: int = 0) -> Table:
        """Tabulate one operation of ``logged_data`` and release its records.

        Parameters
        ----------
        logged_data : LoggedData
            Work record.
        index : int
            Position of the operation in ``logged_data.operation_data``.

        Returns
        -------
        Table
            The table written to the sink.
        """
        try:
            operation_data = logged_data.operation_data[index]
            logger.info(
                f"Processing operation {index} of '{logged_data.description}'"
            )
            return self.process_operation_data(operation_data)
        finally:
            if logged_data.release_spatial_data is not None:
                logged_data.release_spatial_data()
                logger.debug(f"Released spatial data of '{logged_data.description}'")
