"""In-memory agricultural data model consumed by the visualizer."""

from adapt_visualizer.adm.field_boundaries import FieldBoundary
from adapt_visualizer.adm.guidance import (
    AbCurve,
    AbLine,
    APlus,
    CenterPivot,
    GuidanceGroup,
    GuidancePattern,
    MultiAbLine,
    Spiral,
)
from adapt_visualizer.adm.logged_data import (
    EnumeratedMeter,
    EnumeratedValue,
    LoggedData,
    Meter,
    NumericMeter,
    NumericRepresentationValue,
    OperationData,
    Representation,
    Section,
    SpatialRecord,
)

__all__ = [
    "APlus",
    "AbCurve",
    "AbLine",
    "CenterPivot",
    "EnumeratedMeter",
    "EnumeratedValue",
    "FieldBoundary",
    "GuidanceGroup",
    "GuidancePattern",
    "LoggedData",
    "Meter",
    "MultiAbLine",
    "NumericMeter",
    "NumericRepresentationValue",
    "OperationData",
    "Representation",
    "Section",
    "Spiral",
    "SpatialRecord",
]
