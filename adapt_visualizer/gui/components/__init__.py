"""Reusable Qt widgets acting as drawing and table sinks."""

from adapt_visualizer.gui.components.raw_data_table import RawDataTable
from adapt_visualizer.gui.components.spatial_viewer import SpatialViewer

__all__ = ["RawDataTable", "SpatialViewer"]
