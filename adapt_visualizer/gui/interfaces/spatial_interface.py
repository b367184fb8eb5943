"""
Plan-view interface for field boundaries and guidance groups.
"""

from typing import List, Optional, Sequence, Tuple

from loguru import logger
from PySide6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget
from qfluentwidgets import ComboBox, InfoBar, InfoBarPosition, StrongBodyLabel

from adapt_visualizer.adm.field_boundaries import FieldBoundary
from adapt_visualizer.adm.guidance import GuidanceGroup, GuidancePattern
from adapt_visualizer.core.data_processor import DataProcessor
from adapt_visualizer.core.errors import VisualizerError
from adapt_visualizer.gui.components.spatial_viewer import SpatialViewer
from adapt_visualizer.gui.config import cfg


class SpatialInterface(QWidget):
    """
    Selector of boundaries/guidance groups above a :class:`SpatialViewer`.

    Render failures are reported with an InfoBar; the viewer keeps its
    previous content.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.viewer = SpatialViewer(self)
        self.processor: Optional[DataProcessor] = None
        self._entries: List[Tuple[str, object]] = []
        self._guidance_patterns: List[GuidancePattern] = []
        self._init_ui()

        self.viewer.sigResized.connect(self._on_viewer_resized)
        cfg.penColor.valueChanged.connect(self._on_pen_color_changed)
        cfg.penWidth.valueChanged.connect(self._on_pen_width_changed)
        cfg.viewportMargin.valueChanged.connect(self._on_margin_changed)

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        selector_layout = QHBoxLayout()
        selector_layout.addWidget(StrongBodyLabel("Show"))
        self.combo_item = ComboBox(self)
        self.combo_item.setMinimumWidth(320)
        self.combo_item.currentIndexChanged.connect(self._on_item_selected)
        selector_layout.addWidget(self.combo_item)
        selector_layout.addStretch()

        layout.addLayout(selector_layout)
        layout.addWidget(self.viewer, 1)

    def set_processor(self, processor: DataProcessor) -> None:
        self.processor = processor

    def set_items(
        self,
        field_boundaries: Sequence[FieldBoundary],
        guidance_groups: Sequence[GuidanceGroup],
        guidance_patterns: Sequence[GuidancePattern],
    ) -> None:
        """
        Fill the selector with boundaries followed by guidance groups.

        The first entry is drawn immediately when the viewer is visible,
        otherwise on its first resize.
        """
        self._guidance_patterns = list(guidance_patterns)
        self._entries = [
            (f"Boundary: {boundary.description}", boundary)
            for boundary in field_boundaries
        ] + [
            (f"Guidance: {group.description}", group)
            for group in guidance_groups
        ]
        self.combo_item.blockSignals(True)
        self.combo_item.clear()
        self.combo_item.addItems([label for label, _ in self._entries])
        self.combo_item.blockSignals(False)
        if self._entries:
            self.combo_item.setCurrentIndex(0)
            if self.viewer.isVisible():
                self.show_item(0)

    def show_item(self, index: int, notify: bool = True) -> bool:
        """
        Render one selector entry.

        Parameters
        ----------
        index : int
            Selector position.
        notify : bool
            Show an InfoBar on failure in addition to logging it.

        Returns
        -------
        bool
            False when nothing was rendered.
        """
        if self.processor is None or not 0 <= index < len(self._entries):
            return False
        label, item = self._entries[index]
        try:
            if isinstance(item, FieldBoundary):
                self.processor.process_boundary(item)
            else:
                self.processor.process_guidance(item, self._guidance_patterns)
        except VisualizerError as e:
            logger.error(f"Failed to render '{label}': {e}")
            if notify:
                InfoBar.error(
                    title="Render failed",
                    content=str(e),
                    position=InfoBarPosition.TOP_RIGHT,
                    duration=5000,
                    parent=self
                )
            return False
        return True

    def _on_item_selected(self, index: int) -> None:
        self.show_item(index)

    def _on_viewer_resized(self) -> None:
        self.show_item(self.combo_item.currentIndex(), notify=False)

    def _on_pen_color_changed(self, color) -> None:
        self.viewer.set_pen(color=color)

    def _on_pen_width_changed(self, width: int) -> None:
        self.viewer.set_pen(width=width)

    def _on_margin_changed(self, margin: int) -> None:
        self.viewer.set_margin(margin)
        if self.processor is not None:
            self.processor.set_margin(margin)
        self.show_item(self.combo_item.currentIndex(), notify=False)
