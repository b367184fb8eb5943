from PySide6.QtGui import QColor
from qfluentwidgets import (
    QConfig,
    qconfig,
    ColorConfigItem,
    OptionsConfigItem,
    OptionsValidator,
    RangeConfigItem,
    RangeValidator,
    EnumSerializer,
    Theme
)

from loguru import logger

from adapt_visualizer import __version__


class Config(QConfig):
    """
    Configuration for the application.
    """

    # Theme Mode: Light, Dark, Auto
    themeMode = OptionsConfigItem(
        "General", "ThemeMode", Theme.AUTO, OptionsValidator(Theme), EnumSerializer(Theme), restart=False
    )

    # Pen used for boundaries and guidance lines
    penColor = ColorConfigItem("Spatial", "PenColor", QColor("#000000"))
    penWidth = RangeConfigItem("Spatial", "PenWidth", 2, RangeValidator(1, 10))

    # Border kept free on every side of the spatial viewer
    viewportMargin = RangeConfigItem("Spatial", "ViewportMargin", 25, RangeValidator(0, 200))


YEAR = 2025
VERSION = __version__

cfg = Config()
qconfig.load('config.json', cfg)
logger.debug(
    f"Spatial config: pen={cfg.get(cfg.penColor).name()} "
    f"width={cfg.get(cfg.penWidth)} margin={cfg.get(cfg.viewportMargin)}"
)
