"""Field boundary type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from shapely.geometry import MultiPolygon


@dataclass
class FieldBoundary:
    """Boundary of one field.

    Parameters
    ----------
    spatial_data : shapely.geometry.MultiPolygon
        Boundary polygons in geographic coordinates. Interior rings mark
        excluded areas.
    description : str
        Display name.
    field_id : int, optional
        Owning field reference.
    """

    spatial_data: MultiPolygon = field(default_factory=MultiPolygon)
    description: str = ""
    field_id: Optional[int] = None
