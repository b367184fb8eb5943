# ADAPT Visualizer - Source Package
"""
ADAPT Visualizer: inspection GUI for agricultural field-operation data.

This package provides:
- UTM projection and viewport scaling of field geometry
- Plan-view rendering of field boundaries and guidance patterns
- Tabulation of logged meter values per spatial record
"""

__version__ = "0.1.0"
