"""Main window interfaces."""

from adapt_visualizer.gui.interfaces.raw_data_interface import RawDataInterface
from adapt_visualizer.gui.interfaces.settings_interface import SettingsInterface
from adapt_visualizer.gui.interfaces.spatial_interface import SpatialInterface

__all__ = ["RawDataInterface", "SettingsInterface", "SpatialInterface"]
