"""Tabulation of logged meter values.

One column per meter with a representation, one row per spatial record.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np
import pandas as pd
from loguru import logger

from adapt_visualizer.adm.logged_data import (
    EnumeratedMeter,
    EnumeratedValue,
    Meter,
    NumericMeter,
    NumericRepresentationValue,
    OperationData,
    Section,
    SpatialRecord,
)
from adapt_visualizer.core.errors import UnsupportedMeterKindError
from adapt_visualizer.core.sinks import TableSink


@dataclass
class Table:
    """Tabulated meter values.

    Parameters
    ----------
    columns : list[str]
        Representation codes in meter order.
    rows : list[list[str]]
        One list of cell texts per spatial record, aligned with ``columns``.
    """

    columns: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def write_to(self, sink: TableSink) -> None:
        """Replace the content of ``sink`` with this table."""
        sink.clear_table()
        sink.set_columns(self.columns)
        for row in self.rows:
            sink.append_row(row)

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a string-valued DataFrame.

        Duplicate representation codes are kept as duplicate column labels.
        """
        return pd.DataFrame(self.rows, columns=self.columns, dtype=object)


# Magnitudes outside this range switch to exponent notation
_PLAIN_MIN = 1e-4
_PLAIN_MAX = 1e15


def format_quantity(quantity: float) -> str:
    """Format a number independently of the host locale.

    Uses the shortest round-trip digits with a ``.`` decimal point.
    Integral values drop the fractional part; magnitudes below ``1e-4`` or
    from ``1e15`` up use an upper-case exponent with at least two digits.
    Non-finite values print as ``NaN``, ``Infinity`` and ``-Infinity``.

    Examples
    --------
    >>> format_quantity(12.5)
    '12.5'
    >>> format_quantity(3.0)
    '3'
    >>> format_quantity(1e20)
    '1E+20'
    """
    value = float(quantity)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value != 0 and not _PLAIN_MIN <= abs(value) < _PLAIN_MAX:
        text = np.format_float_scientific(value, unique=True, trim="-")
        mantissa, exponent = text.split("e")
        return f"{mantissa}E{int(exponent):+03d}"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_meter_value(record: SpatialRecord, meter: Meter) -> str:
    """Return the cell text of ``meter`` in ``record``.

    Raises
    ------
    UnsupportedMeterKindError
        Raised when the meter is neither numeric nor enumerated.
    """
    if isinstance(meter, NumericMeter):
        value = record.get_meter_value(meter)
        if not isinstance(value, NumericRepresentationValue):
            return ""
        return f"{format_quantity(value.quantity)} {value.unit_code}"
    if isinstance(meter, EnumeratedMeter):
        value = record.get_meter_value(meter)
        if not isinstance(value, EnumeratedValue):
            return ""
        return value.code
    raise UnsupportedMeterKindError(meter)


def iter_sections(operation_data: OperationData) -> Iterator[Section]:
    """Yield sections depth by depth in declared order."""
    for depth in range(operation_data.max_depth):
        yield from operation_data.get_sections(depth)


def collect_meters(operation_data: OperationData) -> list[Meter]:
    """Return meters with a representation in tabulation order."""
    return [
        meter
        for section in iter_sections(operation_data)
        for meter in section.get_meters()
        if meter.representation is not None
    ]


class MeterTabulator:
    """Builds a :class:`Table` from an operation's records.

    Examples
    --------
    >>> table = MeterTabulator().build_table(operation_data)
    >>> table.columns
    ['Speed', 'WorkState']
    """

    def build_table(self, operation_data: OperationData) -> Table:
        meters = collect_meters(operation_data)
        table = Table(columns=[meter.representation.code for meter in meters])
        unsupported: set[int] = set()

        for record in operation_data.get_spatial_records():
            row = []
            for meter in meters:
                try:
                    row.append(format_meter_value(record, meter))
                except UnsupportedMeterKindError as exc:
                    if id(meter) not in unsupported:
                        unsupported.add(id(meter))
                        logger.warning(f"{exc}; column left empty")
                    row.append("")
            table.rows.append(row)

        logger.info(
            f"Tabulated {len(table.rows)} record(s) x {len(table.columns)} meter(s)"
        )
        return table
