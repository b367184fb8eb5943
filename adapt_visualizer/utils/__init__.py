"""Utility package exports for the ADAPT Visualizer."""

from adapt_visualizer.utils.sample_data import SampleCatalog, build_sample_catalog

__all__ = [
    "SampleCatalog",
    "build_sample_catalog",
]
