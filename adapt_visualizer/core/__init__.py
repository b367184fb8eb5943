# ADAPT Visualizer Core Module
"""
Core pipeline for the ADAPT Visualizer.

Contains:
- WGS84 to UTM projection
- Viewport scaling of projected shapes
- Guidance pattern and field boundary rendering
- Meter value tabulation
"""

from adapt_visualizer.core.boundary import BoundaryRenderer
from adapt_visualizer.core.data_processor import DataProcessor
from adapt_visualizer.core.errors import (
    DegenerateViewportError,
    InvalidCoordinateError,
    PatternNotFoundError,
    PatternNotImplementedError,
    UnsupportedMeterKindError,
    VisualizerError,
)
from adapt_visualizer.core.geometry import Extent, GeoPoint, PixelPoint, PlanarPoint
from adapt_visualizer.core.guidance import GuidanceRenderer, find_pattern
from adapt_visualizer.core.projection import GeodeticProjector
from adapt_visualizer.core.sinks import DrawingSink, MemoryCanvas, MemoryTable, TableSink
from adapt_visualizer.core.tabulator import MeterTabulator, Table
from adapt_visualizer.core.viewport import compute_delta, fit_to_canvas, to_pixel, to_pixels

__all__ = [
    "BoundaryRenderer",
    "DataProcessor",
    "DegenerateViewportError",
    "DrawingSink",
    "Extent",
    "GeoPoint",
    "GeodeticProjector",
    "GuidanceRenderer",
    "InvalidCoordinateError",
    "MemoryCanvas",
    "MemoryTable",
    "MeterTabulator",
    "PatternNotFoundError",
    "PatternNotImplementedError",
    "PixelPoint",
    "PlanarPoint",
    "Table",
    "TableSink",
    "UnsupportedMeterKindError",
    "VisualizerError",
    "compute_delta",
    "find_pattern",
    "fit_to_canvas",
    "to_pixel",
    "to_pixels",
]
