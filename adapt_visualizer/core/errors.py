"""Exception hierarchy for the projection, rendering and tabulation pipeline."""

from __future__ import annotations


class VisualizerError(Exception):
    """Base class for all visualizer failures."""


class InvalidCoordinateError(VisualizerError, ValueError):
    """Raised when a geodetic coordinate is outside valid degree ranges."""


class DegenerateViewportError(VisualizerError, ValueError):
    """Raised when a point set or canvas cannot produce a finite scale."""


class PatternNotFoundError(VisualizerError, LookupError):
    """Raised when a guidance group references an unknown pattern id."""

    def __init__(self, reference_id: int) -> None:
        super().__init__(f"guidance pattern not found: {reference_id}")
        self.reference_id = reference_id


class PatternNotImplementedError(VisualizerError, NotImplementedError):
    """Raised for guidance pattern variants that have no renderer."""

    def __init__(self, pattern: object) -> None:
        super().__init__(
            f"rendering not implemented for {type(pattern).__name__}"
        )
        self.pattern = pattern


class UnsupportedMeterKindError(VisualizerError, TypeError):
    """Raised when a meter is neither numeric nor enumerated."""

    def __init__(self, meter: object) -> None:
        super().__init__(f"unsupported meter kind: {type(meter).__name__}")
        self.meter = meter
