"""Drawing and table sink contracts with in-memory implementations.

Drawing goes through :meth:`DrawingSink.session`: operations are staged on a
:class:`DrawSession` and handed to the sink only when the ``with`` block exits
normally. A failure inside the block discards the staged operations, so the
sink keeps whatever it showed before.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Protocol, Sequence

from loguru import logger

from adapt_visualizer.core.geometry import PixelPoint


class ShapeKind(str, Enum):
    """Drawable primitive kinds."""

    POLYLINE = "polyline"
    POLYGON = "polygon"


@dataclass(frozen=True)
class DrawCommand:
    """One staged primitive in canvas coordinates."""

    kind: ShapeKind
    points: tuple[PixelPoint, ...]


@dataclass
class DrawSession:
    """Canvas handle yielded by :meth:`DrawingSink.session`.

    Parameters
    ----------
    width, height : float
        Canvas size the renderers scale into.
    """

    width: float
    height: float
    cleared: bool = False
    commands: list[DrawCommand] = field(default_factory=list)

    def clear(self) -> None:
        """Drop everything drawn so far, including the sink's current content."""
        self.cleared = True
        self.commands.clear()

    def draw_polyline(self, points: Sequence[PixelPoint]) -> None:
        self.commands.append(DrawCommand(ShapeKind.POLYLINE, tuple(points)))

    def draw_polygon(self, points: Sequence[PixelPoint]) -> None:
        self.commands.append(DrawCommand(ShapeKind.POLYGON, tuple(points)))


class DrawingSink:
    """Mixin for canvases that accept committed draw sessions.

    Subclasses implement :meth:`canvas_size` and :meth:`apply_session`.
    """

    def canvas_size(self) -> tuple[float, float]:
        raise NotImplementedError

    def apply_session(self, session: DrawSession) -> None:
        raise NotImplementedError

    @contextmanager
    def session(self) -> Iterator[DrawSession]:
        """Open a draw session committed on success, discarded on failure."""
        width, height = self.canvas_size()
        draw_session = DrawSession(width=width, height=height)
        try:
            yield draw_session
        except Exception:
            logger.warning(
                f"Draw session aborted; discarded {len(draw_session.commands)} "
                "staged shape(s)"
            )
            raise
        self.apply_session(draw_session)


class TableSink(Protocol):
    """Row/column surface that receives tabulated meter values."""

    def clear_table(self) -> None: ...

    def set_columns(self, headers: Sequence[str]) -> None: ...

    def append_row(self, values: Sequence[str]) -> None: ...


class MemoryCanvas(DrawingSink):
    """Headless drawing sink keeping committed commands in a list.

    Examples
    --------
    >>> canvas = MemoryCanvas(400, 300)
    >>> with canvas.session() as session:
    ...     session.clear()
    ...     session.draw_polyline([PixelPoint(0, 0), PixelPoint(1, 1)])
    >>> len(canvas.commands)
    1
    """

    def __init__(self, width: float = 800, height: float = 600) -> None:
        self.width = width
        self.height = height
        self.commands: list[DrawCommand] = []
        self.commit_count = 0

    def canvas_size(self) -> tuple[float, float]:
        return self.width, self.height

    def apply_session(self, session: DrawSession) -> None:
        if session.cleared:
            self.commands = []
        self.commands.extend(session.commands)
        self.commit_count += 1


class MemoryTable:
    """Headless table sink."""

    def __init__(self) -> None:
        self.columns: list[str] = []
        self.rows: list[list[str]] = []

    def clear_table(self) -> None:
        self.columns = []
        self.rows = []

    def set_columns(self, headers: Sequence[str]) -> None:
        self.columns = list(headers)

    def append_row(self, values: Sequence[str]) -> None:
        self.rows.append(list(values))
