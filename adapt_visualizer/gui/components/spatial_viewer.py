"""Plan-view canvas for boundaries and guidance patterns."""

from __future__ import annotations

from typing import List, Optional

import darkdetect
import numpy as np
import pyqtgraph as pg
from loguru import logger
from PySide6.QtCore import Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QVBoxLayout, QWidget
from qfluentwidgets import Theme

from adapt_visualizer.core.sinks import DrawingSink, DrawSession, ShapeKind
from adapt_visualizer.gui.config import cfg


def _canvas_background(is_dark: bool) -> str:
    """Return canvas background color for current theme."""
    return "#272727" if is_dark else "#FFFFFF"


class SpatialViewer(QWidget, DrawingSink):
    """
    PyQtGraph canvas receiving committed draw sessions.

    Canvas units map one-to-one onto the plot view; the view keeps
    ``margin`` units free on every side, so shapes scaled into the usable
    area appear inside the widget. North is up.

    Signals
    -------
    sigResized : Signal()
        Emitted after the widget size changed; shapes are scaled to the
        size at draw time, so owners redraw on this signal.

    Parameters
    ----------
    parent : QWidget, optional
        Parent widget.
    pen_color : str or QColor, optional
        Line color. Defaults to the configured pen color.
    pen_width : int, optional
        Line width. Defaults to the configured pen width.

    Examples
    --------
    >>> viewer = SpatialViewer()
    >>> with viewer.session() as session:
    ...     session.clear()
    """

    sigResized = Signal()

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        pen_color=None,
        pen_width: Optional[int] = None,
    ) -> None:
        super().__init__(parent)
        self._pen_color = QColor(pen_color) if pen_color else cfg.get(cfg.penColor)
        self._pen_width = pen_width or cfg.get(cfg.penWidth)
        self._margin = float(cfg.get(cfg.viewportMargin))
        self._items: List[pg.PlotCurveItem] = []
        self._init_ui()
        self._apply_theme()
        cfg.themeChanged.connect(self._apply_theme)

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.plot_widget = pg.PlotWidget(self)
        self.plot_widget.setAspectLocked(True)
        self.plot_widget.setMouseEnabled(x=False, y=False)
        plot_item = self.plot_widget.getPlotItem()
        plot_item.hideAxis('left')
        plot_item.hideAxis('bottom')
        plot_item.hideButtons()
        layout.addWidget(self.plot_widget)

    def _is_dark_theme(self) -> bool:
        theme = cfg.themeMode.value
        if theme == Theme.AUTO:
            return bool(darkdetect.isDark())
        return theme == Theme.DARK

    def _apply_theme(self) -> None:
        self.plot_widget.setBackground(QColor(_canvas_background(self._is_dark_theme())))

    def _make_pen(self):
        return pg.mkPen(color=self._pen_color, width=self._pen_width)

    @property
    def items(self) -> List[pg.PlotCurveItem]:
        """Curve items currently shown."""
        return list(self._items)

    def set_pen(self, color=None, width: Optional[int] = None) -> None:
        """Change pen color and/or width of current and future shapes."""
        if color is not None:
            self._pen_color = QColor(color)
        if width is not None:
            self._pen_width = width
        pen = self._make_pen()
        for item in self._items:
            item.setPen(pen)

    def set_margin(self, margin: float) -> None:
        self._margin = float(margin)

    def canvas_size(self) -> tuple[float, float]:
        return float(self.width()), float(self.height())

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.sigResized.emit()

    def apply_session(self, session: DrawSession) -> None:
        """Show the shapes of a committed session."""
        if session.cleared:
            self.clear_canvas()

        pen = self._make_pen()
        for command in session.commands:
            x = np.asarray([point.x for point in command.points], dtype=np.float64)
            y = np.asarray([point.y for point in command.points], dtype=np.float64)
            if command.kind == ShapeKind.POLYGON and x.size > 0:
                x = np.append(x, x[0])
                y = np.append(y, y[0])
            curve = pg.PlotCurveItem(x=x, y=y, pen=pen)
            self.plot_widget.addItem(curve)
            self._items.append(curve)

        self.plot_widget.setRange(
            xRange=(-self._margin, session.width - self._margin),
            yRange=(-self._margin, session.height - self._margin),
            padding=0.0,
        )
        logger.debug(f"SpatialViewer shows {len(self._items)} shape(s)")

    def clear_canvas(self) -> None:
        """Remove all shapes."""
        for item in self._items:
            self.plot_widget.removeItem(item)
        self._items.clear()
