"""Dashboard for editing the color list."""

from .app import ColorDashboard
from .controller import DashboardController
from .widgets import DataTableWidget, InputSliders, SwatchPreview

__all__ = [
    "ColorDashboard",
    "DashboardController",
    "DataTableWidget",
    "InputSliders",
    "SwatchPreview",
]
