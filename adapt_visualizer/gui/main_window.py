from typing import Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QIcon

from loguru import logger

from qfluentwidgets import (
    FluentWindow,
    FluentIcon as FIF,
    NavigationItemPosition,
    setTheme,
)

from adapt_visualizer.core.data_processor import DataProcessor
from adapt_visualizer.gui.config import cfg
from adapt_visualizer.gui.interfaces import (
    RawDataInterface,
    SettingsInterface,
    SpatialInterface,
)
from adapt_visualizer.utils.sample_data import SampleCatalog


class MainWindow(FluentWindow):
    """
    Main Window using Fluent Design.
    """

    def __init__(self, catalog: Optional[SampleCatalog] = None):
        super().__init__()

        # Create interfaces
        self.spatial_tab = SpatialInterface(self)
        self.raw_data_tab = RawDataInterface(self)
        self.settings_tab = SettingsInterface(self)

        # Set object names for FluentWindow navigation
        self.spatial_tab.setObjectName("spatial_tab")
        self.raw_data_tab.setObjectName("raw_data_tab")
        self.settings_tab.setObjectName("settings_tab")

        # Both tabs share one processor so renderers and sinks stay paired
        self.processor = DataProcessor(
            self.spatial_tab.viewer,
            self.raw_data_tab.table,
            margin=cfg.get(cfg.viewportMargin),
        )
        self.spatial_tab.set_processor(self.processor)
        self.raw_data_tab.set_processor(self.processor)

        self.init_navigation()
        self.init_window()

        if catalog is not None:
            self.load_catalog(catalog)

        logger.info("MainWindow initialized successfully")

    def init_navigation(self):
        self.addSubInterface(self.spatial_tab, FIF.GLOBE, "Spatial Viewer")
        self.addSubInterface(self.raw_data_tab, FIF.DOCUMENT, "Raw Data")

        self.navigationInterface.addSeparator()

        self.addSubInterface(
            self.settings_tab,
            FIF.SETTING,
            "Settings",
            NavigationItemPosition.BOTTOM
        )

    def init_window(self):
        self.resize(1200, 800)
        self.setWindowIcon(QIcon(":/qfluentwidgets/images/logo.png"))
        self.setWindowTitle("ADAPT Visualizer")

        # Apply Theme
        setTheme(cfg.get(cfg.themeMode))

        # Center window
        screen = QApplication.primaryScreen()
        if screen is not None:
            desktop = screen.availableGeometry()
            w, h = desktop.width(), desktop.height()
            self.move(w//2 - self.width()//2, h//2 - self.height()//2)

    def load_catalog(self, catalog: SampleCatalog) -> None:
        """Populate both tabs from a catalog of data-model objects."""
        logger.info(
            f"Loading catalog: {len(catalog.logged_data)} logged data, "
            f"{len(catalog.field_boundaries)} boundaries, "
            f"{len(catalog.guidance_groups)} guidance groups"
        )
        self.raw_data_tab.set_logged_data(catalog.logged_data)
        self.spatial_tab.set_items(
            catalog.field_boundaries,
            catalog.guidance_groups,
            catalog.guidance_patterns,
        )

    def closeEvent(self, event):
        logger.info("MainWindow closing")
        self.spatial_tab.viewer.clear_canvas()
        super().closeEvent(event)
