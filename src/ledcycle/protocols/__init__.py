"""Protocol definitions for the dashboard boundary.

Widgets: capability interfaces any dashboard binding implements
(TableWidget, HsvSliders, ColorPreview).

For the worker boundary message format, see ledcycle.models.messages.
"""

from .widgets import ColorPreview, HsvSliders, TableWidget

__all__ = [
    "ColorPreview",
    "HsvSliders",
    "TableWidget",
]
