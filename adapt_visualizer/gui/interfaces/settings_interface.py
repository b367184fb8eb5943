"""
Settings interface editing the shared :data:`cfg` items.
"""

from typing import Optional

from loguru import logger
from PySide6.QtWidgets import QLabel, QWidget
from qfluentwidgets import (
    ColorSettingCard,
    ExpandLayout,
    OptionsSettingCard,
    RangeSettingCard,
    ScrollArea,
    SettingCard,
    SettingCardGroup,
    setTheme,
)
from qfluentwidgets import FluentIcon as FIF

from adapt_visualizer.gui.config import VERSION, YEAR, cfg


class SettingsInterface(ScrollArea):
    """
    Settings Interface.

    Cards write straight to ``cfg``; the spatial interface listens to the
    item signals and redraws.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.scrollWidget = QWidget()
        self.expandLayout = ExpandLayout(self.scrollWidget)

        self.setWidget(self.scrollWidget)
        self.setWidgetResizable(True)

        self._init_ui()

    def _init_ui(self):
        """Initialize UI controls."""
        self.settingLabel = QLabel("Settings", self)
        self.settingLabel.setStyleSheet("font-size: 24px; font-weight: bold;")

        # --- Appearance Group ---
        self.appearanceGroup = SettingCardGroup("Appearance", self.scrollWidget)
        self.themeCard = OptionsSettingCard(
            cfg.themeMode,
            FIF.BRUSH,
            "Application theme",
            "Change the appearance of the window and canvas",
            texts=["Light", "Dark", "Use system setting"],
            parent=self.appearanceGroup
        )
        self.themeCard.optionChanged.connect(self._on_theme_changed)
        self.appearanceGroup.addSettingCard(self.themeCard)

        # --- Spatial Viewer Group ---
        self.spatialGroup = SettingCardGroup("Spatial viewer", self.scrollWidget)
        self.penColorCard = ColorSettingCard(
            cfg.penColor,
            FIF.PALETTE,
            "Pen color",
            "Line color of boundaries and guidance patterns",
            parent=self.spatialGroup
        )
        self.penWidthCard = RangeSettingCard(
            cfg.penWidth,
            FIF.EDIT,
            "Pen width",
            "Line width in pixels",
            parent=self.spatialGroup
        )
        self.marginCard = RangeSettingCard(
            cfg.viewportMargin,
            FIF.ZOOM,
            "Viewport margin",
            "Border kept free around every drawn shape",
            parent=self.spatialGroup
        )
        self.spatialGroup.addSettingCard(self.penColorCard)
        self.spatialGroup.addSettingCard(self.penWidthCard)
        self.spatialGroup.addSettingCard(self.marginCard)

        # --- About Group ---
        self.aboutGroup = SettingCardGroup("About", self.scrollWidget)
        self.aboutCard = SettingCard(
            FIF.INFO,
            "ADAPT Visualizer",
            f"© {YEAR} ADAPT Visualizer contributors. Version {VERSION}",
            self.aboutGroup
        )
        self.aboutGroup.addSettingCard(self.aboutCard)

        # --- Add Groups to Layout ---
        self.expandLayout.setSpacing(28)
        self.expandLayout.setContentsMargins(60, 60, 60, 60)
        self.expandLayout.addWidget(self.settingLabel)
        self.expandLayout.addWidget(self.appearanceGroup)
        self.expandLayout.addWidget(self.spatialGroup)
        self.expandLayout.addWidget(self.aboutGroup)

    def _on_theme_changed(self, item):
        theme = cfg.get(item)
        logger.info(f"Theme changed to {theme}")
        setTheme(theme)
