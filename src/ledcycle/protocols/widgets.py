"""Capability protocols for dashboard widgets.

The color sequencer never talks to a UI toolkit directly. Any dashboard
binding (the Textual dashboard, a remote widget SDK, a test double)
implements these protocols.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TableWidget(Protocol):
    """
    Table of color rows keyed by entry id.

    Threading:
        Called from the UI thread only.
    """

    def add_row(self, row_id: int, label: str, description: str) -> None:
        """Append a row."""
        ...

    def update_row(self, row_id: int, label: str, description: str) -> None:
        """Replace the label and description of an existing row."""
        ...

    def remove_row(self, row_id: int) -> None:
        """Remove a single row."""
        ...

    def select_row(self, row_id: int) -> None:
        """Show a row as selected."""
        ...

    def deselect_row(self, row_id: int) -> None:
        """Show a row as not selected."""
        ...

    def clear(self) -> None:
        """Remove every row."""
        ...


@runtime_checkable
class HsvSliders(Protocol):
    """The three H/S/V input sliders."""

    def write_values(self, h: float, s: float, v: float) -> None:
        """
        Show the given color on the sliders.

        Args:
            h: Hue in degrees (0-360)
            s: Saturation (0.0-1.0)
            v: Value (0.0-1.0)
        """
        ...

    def set_colors(self, hue: str, saturation: str, value: str) -> None:
        """
        Decorate each slider with a hex color string (e.g. '#FF0000').

        Args:
            hue: Color for the hue slider (the pure hue)
            saturation: Color for the saturation slider (hue at current saturation)
            value: Color for the value slider (gray at current value)
        """
        ...


@runtime_checkable
class ColorPreview(Protocol):
    """A widget previewing the current color (the dashboard's virtual LED)."""

    def turn_on(self) -> None:
        """Switch the preview on."""
        ...

    def set_color(self, hex_color: str) -> None:
        """Show a hex color string (e.g. '#FF0000')."""
        ...
