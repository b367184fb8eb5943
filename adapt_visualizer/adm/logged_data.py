"""Logged operation data: meters, sections and spatial records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional, Union

from shapely.geometry import Point


@dataclass(frozen=True)
class Representation:
    """Identifies what a meter measures; ``code`` is its short display name."""

    code: str
    description: str = ""


@dataclass(frozen=True)
class NumericRepresentationValue:
    """Numeric reading with its unit-of-measure code."""

    quantity: float
    unit_code: str
    representation: Optional[Representation] = None


@dataclass(frozen=True)
class EnumeratedValue:
    """Enumerated reading, e.g. a work state such as ``dtiRecordingStatusOn``."""

    code: str
    representation: Optional[Representation] = None


MeterValue = Union[NumericRepresentationValue, EnumeratedValue]


@dataclass(eq=False)
class Meter:
    """Measurement channel of a section.

    Meters compare and hash by identity so they can key record values.
    """

    representation: Optional[Representation] = None
    description: str = ""


@dataclass(eq=False)
class NumericMeter(Meter):
    """Meter producing :class:`NumericRepresentationValue` readings."""

    unit_code: str = ""


@dataclass(eq=False)
class EnumeratedMeter(Meter):
    """Meter producing :class:`EnumeratedValue` readings."""

    domain_codes: list[str] = field(default_factory=list)


@dataclass
class SpatialRecord:
    """One positioned, timestamped sample of all meters."""

    geometry: Optional[Point] = None
    timestamp: Optional[datetime] = None
    meter_values: dict[Meter, MeterValue] = field(default_factory=dict)

    def get_meter_value(self, meter: Meter) -> Optional[MeterValue]:
        return self.meter_values.get(meter)


@dataclass
class Section:
    """Implement subdivision at one depth carrying its own meters."""

    meters: list[Meter] = field(default_factory=list)
    depth: int = 0
    description: str = ""

    def get_meters(self) -> list[Meter]:
        return list(self.meters)


@dataclass
class OperationData:
    """Logged data of one operation.

    Parameters
    ----------
    sections : list[Section]
        Sections at every depth; ``get_sections`` filters by ``depth``.
    spatial_records : Iterable[SpatialRecord] or callable
        Records in logging order, or a factory returning them so large
        streams can be produced lazily.
    max_depth : int, optional
        Number of depth levels. Defaults to one past the deepest section.
    """

    sections: list[Section] = field(default_factory=list)
    spatial_records: Union[
        Iterable[SpatialRecord], Callable[[], Iterable[SpatialRecord]]
    ] = field(default_factory=list)
    max_depth: Optional[int] = None
    operation_type: str = ""

    def __post_init__(self) -> None:
        if self.max_depth is None:
            self.max_depth = max((s.depth for s in self.sections), default=-1) + 1

    def get_sections(self, depth: int) -> list[Section]:
        return [section for section in self.sections if section.depth == depth]

    def get_spatial_records(self) -> Iterator[SpatialRecord]:
        records = self.spatial_records
        if callable(records):
            records = records()
        return iter(records)


@dataclass
class LoggedData:
    """Work record holding one or more operations.

    ``release_spatial_data`` is invoked once a consumer is done with the
    record streams so the provider can free them.
    """

    operation_data: list[OperationData] = field(default_factory=list)
    description: str = ""
    release_spatial_data: Optional[Callable[[], None]] = None
