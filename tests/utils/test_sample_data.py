"""Tests for the built-in demonstration catalog."""

import pytest

from adapt_visualizer.core.data_processor import DataProcessor
from adapt_visualizer.core.errors import PatternNotImplementedError
from adapt_visualizer.core.sinks import MemoryCanvas, MemoryTable
from adapt_visualizer.utils import build_sample_catalog
from adapt_visualizer.utils.sample_data import build_logged_data


@pytest.fixture
def catalog():
    return build_sample_catalog()


def test_every_group_except_pivot_renders(catalog) -> None:
    processor = DataProcessor(MemoryCanvas(800, 600), MemoryTable())
    drawn = {}
    for group in catalog.guidance_groups[:-1]:
        processor.process_guidance(group, catalog.guidance_patterns)
        drawn[group.description] = len(processor.canvas.commands)

    assert drawn == {
        "AB line": 1,
        "Terrace curve": 2,
        "Tramlines": 2,
        "Spiral + A+": 1,
    }
    with pytest.raises(PatternNotImplementedError):
        processor.process_guidance(catalog.guidance_groups[-1], catalog.guidance_patterns)


def test_sample_boundary_renders(catalog) -> None:
    canvas = MemoryCanvas(800, 600)
    DataProcessor(canvas, MemoryTable()).process_boundary(catalog.field_boundaries[0])
    assert [len(c.points) for c in canvas.commands] == [4, 3]


def test_sample_table_has_duplicate_row_rate_columns(catalog) -> None:
    table = DataProcessor(MemoryCanvas(), MemoryTable()).process_logged_data(
        catalog.logged_data[0]
    )

    assert table.columns == [
        "vrVehicleSpeed",
        "dtRecordingStatus",
        "vrSeedRateSeedsActual",
        "vrSeedRateSeedsActual",
    ]
    assert len(table.rows) == 200
    # every seventh record carries no row readings
    assert table.rows[0][2:] == ["", ""]
    assert table.rows[1][2].endswith(" seeds/ha")
    assert table.rows[0][1] == "dtiRecordingStatusOff"
    assert table.to_frame().shape == (200, 4)


def test_released_records_are_rebuilt_identically() -> None:
    logged = build_logged_data(record_count=20, seed=3)
    operation = logged.operation_data[0]
    first = list(operation.get_spatial_records())

    logged.release_spatial_data()
    second = list(operation.get_spatial_records())

    assert first is not second
    assert [r.timestamp for r in first] == [r.timestamp for r in second]
    assert [list(r.meter_values.values()) for r in first] == [
        list(r.meter_values.values()) for r in second
    ]
