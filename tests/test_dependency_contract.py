"""Dependency contract tests for the runtime projection and GUI stack.

This module locks expected runtime dependency behavior.
"""

from pathlib import Path
import tomllib

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _dependencies() -> list[str]:
    data = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    return data["project"]["dependencies"]


def test_runtime_dependencies_contract() -> None:
    """Ensure runtime dependencies include pyproj and shapely.

    Returns
    -------
    None

    Examples
    --------
    >>> test_runtime_dependencies_contract()
    """
    deps = _dependencies()
    assert any(dep.startswith("pyproj") for dep in deps)
    assert any(dep.startswith("shapely") for dep in deps)
    assert any(dep.startswith("pyqtgraph") for dep in deps)


def test_no_raster_gis_stack() -> None:
    """Ensure raster and dataframe GIS packages are not required.

    Returns
    -------
    None

    Examples
    --------
    >>> test_no_raster_gis_stack()
    """
    deps = _dependencies()
    assert not any(dep.startswith("geopandas") for dep in deps)
    assert not any(dep.startswith("rasterio") for dep in deps)
