"""Glue between dashboard widgets, the color sequencer and the worker link."""

import logging
import math
from collections.abc import Sequence
from typing import Optional

from ledcycle.colors import hsv_to_rgb, rgb_to_hex
from ledcycle.core import ColorLink, ColorSequencer
from ledcycle.models import HSV, ColorMessage, MessageKind
from ledcycle.protocols import ColorPreview

logger = logging.getLogger(__name__)


def _parse_int(raw: object) -> Optional[int]:
    """Parse a widget value as an integer, truncating decimals ('12.7' -> 12)."""
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def _parse_float(raw: object) -> Optional[float]:
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class DashboardController:
    """
    Translates raw widget events into ColorSequencer calls.

    Widget values arrive untyped (strings from text inputs, ints from
    buttons, tuples from the table). Anything unparsable is logged at DEBUG
    and ignored; parsed slider values are clamped into range.

    Every sequencer update refreshes the preview and pushes a fresh
    snapshot of the color list to the worker.
    """

    def __init__(
        self,
        sequencer: ColorSequencer,
        link: ColorLink,
        preview: Optional[ColorPreview] = None,
    ):
        self.sequencer = sequencer
        self.link = link
        self._preview = preview

        if self._preview:
            self._preview.turn_on()
        self._preview_handle = self.sequencer.add_update_listener(self._on_preview_update)
        self._push_handle = self.sequencer.add_update_listener(self._on_colors_changed)

    def close(self) -> None:
        """Detach from the sequencer."""
        self.sequencer.remove_update_listener(self._preview_handle)
        self.sequencer.remove_update_listener(self._push_handle)

    # =================================================================
    # Widget events
    # =================================================================

    def handle_table_command(self, params: Sequence[object]) -> None:
        """
        Handle a table widget command.

        Supported commands:
            ("select", row_id)
            ("deselect", row_id)
            ("order", old_index, new_index)
        """
        if not params:
            logger.debug("Ignoring empty table command")
            return

        command, *args = params
        if command == "select" and len(args) == 1:
            row_id = _parse_int(args[0])
            if row_id is not None:
                self.sequencer.select_row(row_id)
                return
        elif command == "deselect" and len(args) == 1:
            row_id = _parse_int(args[0])
            if row_id is not None:
                self.sequencer.deselect_row(row_id)
                return
        elif command == "order" and len(args) == 2:
            old_index, new_index = _parse_int(args[0]), _parse_int(args[1])
            if old_index is not None and new_index is not None:
                self.sequencer.reorder_row(old_index, new_index)
                return

        logger.debug(f"Ignoring table command: {params!r}")

    def write_hue(self, raw: object) -> None:
        """Handle a hue slider write (integer degrees)."""
        value = _parse_int(raw)
        if value is None:
            logger.debug(f"Ignoring hue input: {raw!r}")
            return
        self.sequencer.set_current_hue(_clamp(value, 0, 360))

    def write_saturation(self, raw: object) -> None:
        """Handle a saturation slider write."""
        value = _parse_float(raw)
        if value is None:
            logger.debug(f"Ignoring saturation input: {raw!r}")
            return
        self.sequencer.set_current_saturation(_clamp(value, 0.0, 1.0))

    def write_value(self, raw: object) -> None:
        """Handle a value slider write."""
        value = _parse_float(raw)
        if value is None:
            logger.debug(f"Ignoring value input: {raw!r}")
            return
        self.sequencer.set_current_value(_clamp(value, 0.0, 1.0))

    def press_add(self, raw: object = 1) -> None:
        """Handle the add button pin; acts on press (1) only."""
        if _parse_int(raw) == 1:
            logger.debug("Add color pressed")
            self.sequencer.add_row()

    def press_remove(self, raw: object = 1) -> None:
        """Handle the remove button pin; acts on press (1) only."""
        if _parse_int(raw) == 1:
            logger.debug("Remove color pressed")
            self.sequencer.remove_selected_rows()

    # =================================================================
    # Worker link
    # =================================================================

    def process_engine_messages(self) -> int:
        """
        Answer pending requests from the worker.

        Returns:
            Number of messages handled
        """
        handled = 0
        for message in self.link.receive_for_ui():
            if message.message == MessageKind.UPDATE_COLORS:
                self.push_colors()
                handled += 1
        return handled

    def load_colors(self, colors: Sequence[HSV]) -> None:
        """
        Replace the color list with the given colors, in order.

        Args:
            colors: Colors to load; an empty sequence leaves the list unchanged
        """
        if not colors:
            return

        self.sequencer.clear()
        for index, hsv in enumerate(colors):
            if index > 0:
                self.sequencer.add_row()
            self.sequencer.set_current_hue(hsv.h)
            self.sequencer.set_current_saturation(hsv.s)
            self.sequencer.set_current_value(hsv.v)

        logger.info(f"Loaded {len(colors)} color(s)")

    def push_colors(self) -> None:
        """Send the current color list to the worker."""
        snapshot = self.sequencer.get_snapshot()
        self.link.send_to_engine(ColorMessage.update_colors(snapshot))
        logger.debug(f"Pushed {len(snapshot)} color(s) to the worker")

    # =================================================================
    # Sequencer listeners
    # =================================================================

    def _on_preview_update(self, hsv: HSV) -> None:
        if self._preview:
            rgb = hsv_to_rgb(hsv.h, hsv.s, hsv.v)
            self._preview.set_color(rgb_to_hex(rgb.r, rgb.g, rgb.b))

    def _on_colors_changed(self, hsv: HSV) -> None:
        self.push_colors()
