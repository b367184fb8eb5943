"""Tests for the spatial and raw-data interfaces."""

from __future__ import annotations

from unittest import mock

import pytest

from adapt_visualizer.adm import CenterPivot, GuidanceGroup, LoggedData
from adapt_visualizer.core.data_processor import DataProcessor
from adapt_visualizer.core.sinks import MemoryCanvas, MemoryTable
from adapt_visualizer.gui.config import VERSION, cfg
from adapt_visualizer.gui.interfaces import (
    RawDataInterface,
    SettingsInterface,
    SpatialInterface,
)


def _spatial_interface(qtbot, field_boundary, ab_line, ab_curve, field_point):
    interface = SpatialInterface()
    qtbot.addWidget(interface)
    interface.viewer.resize(400, 300)
    interface.set_processor(DataProcessor(interface.viewer, MemoryTable()))
    pivot = CenterPivot(reference_id=6, center=field_point(1, 1))
    interface.set_items(
        [field_boundary],
        [
            GuidanceGroup(guidance_pattern_ids=[1, 2], description="Lines"),
            GuidanceGroup(guidance_pattern_ids=[6], description="Pivot"),
        ],
        [ab_line, ab_curve, pivot],
    )
    return interface


def test_selector_lists_boundaries_then_groups(
    qtbot, field_boundary, ab_line, ab_curve, field_point
) -> None:
    interface = _spatial_interface(qtbot, field_boundary, ab_line, ab_curve, field_point)

    labels = [interface.combo_item.itemText(i) for i in range(interface.combo_item.count())]
    assert labels == ["Boundary: Home field", "Guidance: Lines", "Guidance: Pivot"]


def test_show_item_renders_boundary_and_group(
    qtbot, field_boundary, ab_line, ab_curve, field_point
) -> None:
    interface = _spatial_interface(qtbot, field_boundary, ab_line, ab_curve, field_point)

    assert interface.show_item(0, notify=False)
    assert len(interface.viewer.items) == 2
    assert interface.show_item(1, notify=False)
    assert len(interface.viewer.items) == 3


def test_failed_group_keeps_previous_drawing(
    qtbot, field_boundary, ab_line, ab_curve, field_point
) -> None:
    """Center pivot rendering fails and leaves the boundary on screen."""
    interface = _spatial_interface(qtbot, field_boundary, ab_line, ab_curve, field_point)
    interface.show_item(0, notify=False)
    before = interface.viewer.items

    assert interface.show_item(2, notify=False) is False
    assert interface.viewer.items == before


def test_show_item_without_processor_or_entry(qtbot) -> None:
    interface = SpatialInterface()
    qtbot.addWidget(interface)
    assert interface.show_item(0) is False

    interface.set_processor(DataProcessor(MemoryCanvas(), MemoryTable()))
    assert interface.show_item(5) is False


def test_raw_data_interface_tabulates_first_operation(qtbot, planting_operation) -> None:
    interface = RawDataInterface()
    qtbot.addWidget(interface)
    interface.set_processor(DataProcessor(MemoryCanvas(), interface.table))
    release = mock.Mock()
    planting_operation.operation_type = "SowingAndPlanting"

    interface.set_logged_data(
        [
            LoggedData(
                operation_data=[planting_operation],
                description="Planting",
                release_spatial_data=release,
            )
        ]
    )

    assert interface.combo_operation.itemText(0) == "Planting / SowingAndPlanting"
    assert interface.table.rowCount() == 3
    assert interface.label_summary.text() == "3 records, 3 meters"
    release.assert_called_once_with()


@pytest.fixture
def restore_spatial_config():
    """Put pen width and margin back without touching config.json."""
    saved = [(item, cfg.get(item)) for item in (cfg.penWidth, cfg.viewportMargin)]
    yield
    for item, value in saved:
        cfg.set(item, value, save=False)


def test_margin_setting_redraws_current_item(
    qtbot, field_boundary, ab_line, ab_curve, field_point, restore_spatial_config
) -> None:
    """Dropping the margin to zero scales the boundary to the full height."""
    interface = _spatial_interface(qtbot, field_boundary, ab_line, ab_curve, field_point)
    interface.show_item(0, notify=False)
    _, height = interface.viewer.canvas_size()

    cfg.set(cfg.viewportMargin, 0, save=False)

    assert interface.processor.boundary_renderer.margin == 0
    assert interface.processor.guidance_renderer.margin == 0
    _, y = interface.viewer.items[0].getData()
    assert max(y) == pytest.approx(height)


def test_pen_width_setting_restyles_items(
    qtbot, field_boundary, ab_line, ab_curve, field_point, restore_spatial_config
) -> None:
    interface = _spatial_interface(qtbot, field_boundary, ab_line, ab_curve, field_point)
    interface.show_item(0, notify=False)

    cfg.set(cfg.penWidth, 4, save=False)

    assert [item.opts["pen"].width() for item in interface.viewer.items] == [4, 4]


def test_settings_cards_edit_shared_config(qtbot) -> None:
    settings = SettingsInterface()
    qtbot.addWidget(settings)

    assert settings.themeCard.configItem is cfg.themeMode
    assert settings.penColorCard.configItem is cfg.penColor
    assert settings.penWidthCard.configItem is cfg.penWidth
    assert settings.marginCard.configItem is cfg.viewportMargin
    assert settings.marginCard.slider.value() == cfg.get(cfg.viewportMargin)
    assert VERSION in settings.aboutCard.contentLabel.text()
