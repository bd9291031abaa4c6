"""Color sequencer: the editable, ordered list of target colors."""

import logging
from collections.abc import Callable
from typing import Optional

from ledcycle.colors import hsv_to_hex, rgb_to_hex
from ledcycle.models import HSV, ColorEntry
from ledcycle.protocols import HsvSliders, TableWidget
from ledcycle.utils import ListenerHandle, ObserverManager

logger = logging.getLogger(__name__)

UpdateListener = Callable[[HSV], None]


class ColorSequencer:
    """
    Holds and edits the list of colors shown in the dashboard table.

    The list is never empty and entry ids are never reused. A set of
    selected ids determines the single *current* entry: the first entry in
    list order that is selected, otherwise the previous current entry if it
    still exists, otherwise the first entry. The current entry drives the
    H/S/V sliders, and every recompute invokes the update listeners with
    its color.

    Widgets:
        The table and sliders are optional capability objects. When one is
        missing its side effects are skipped, which is how the headless
        runner and most tests use the sequencer.

    Threading:
        All methods are called from the UI thread. Listeners are invoked on
        the same thread. Nothing here is shared with the cycling worker; it
        only ever receives copies from get_snapshot().
    """

    def __init__(
        self,
        table: Optional[TableWidget] = None,
        sliders: Optional[HsvSliders] = None,
    ):
        """
        Initialize the sequencer with a single default entry.

        Args:
            table: Table widget showing the color rows
            sliders: H/S/V sliders showing the current color
        """
        self._table = table
        self._sliders = sliders

        self._entries: list[ColorEntry] = []
        self._selected_ids: set[int] = set()
        self._current_id: Optional[int] = None
        self._next_id = 0

        self._listeners = ObserverManager[UpdateListener](observer_type_name="update")

        self.clear()
        logger.info("ColorSequencer initialized")

    # =================================================================
    # State access
    # =================================================================

    @property
    def current_id(self) -> int:
        """Get the id of the current entry."""
        return self._current_entry().id

    @property
    def current_hsv(self) -> HSV:
        """Get a copy of the current entry's color."""
        return self._current_entry().hsv.model_copy()

    @property
    def selected_ids(self) -> frozenset[int]:
        """Get the selected entry ids."""
        return frozenset(self._selected_ids)

    @property
    def entries(self) -> list[ColorEntry]:
        """Get a copy of the color list."""
        return self.get_snapshot()

    def get_snapshot(self) -> list[ColorEntry]:
        """
        Get a deep copy of the color list, in display order.

        Returns:
            List of entries that share nothing with the sequencer's state
        """
        return [entry.model_copy(deep=True) for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    # =================================================================
    # Listeners
    # =================================================================

    def add_update_listener(self, listener: UpdateListener) -> ListenerHandle:
        """
        Register a listener called with the current color after every recompute.

        The current row is recomputed immediately, so the new listener gets
        an initial value.

        Args:
            listener: Callable receiving a copy of the current HSV

        Returns:
            Handle to pass to remove_update_listener()
        """
        handle = self._listeners.register(listener)
        self.recompute_current_row()
        return handle

    def remove_update_listener(self, handle: ListenerHandle) -> None:
        """
        Unregister a listener.

        Args:
            handle: Handle returned by add_update_listener()
        """
        self._listeners.unregister(handle)

    # =================================================================
    # Row editing
    # =================================================================

    def add_row(self) -> ColorEntry:
        """
        Append a new row with the default color and select it exclusively.

        Returns:
            A copy of the new entry
        """
        entry = ColorEntry.default(self._allocate_id())
        self._entries.append(entry)

        if self._table:
            self._table.add_row(entry.id, "", entry.hsv.describe())
        self._select_exclusive(entry.id)

        self.recompute_current_row()

        logger.debug(f"Added row {entry.id}, {len(self._entries)} row(s)")
        return entry.model_copy(deep=True)

    def remove_selected_rows(self) -> None:
        """
        Remove every selected row.

        The table widget is fully re-rendered because positions change en
        masse. Removing the last row re-creates a default one.
        """
        indexes = sorted(
            (index for index, entry in enumerate(self._entries) if entry.id in self._selected_ids),
            reverse=True,
        )
        if not indexes:
            logger.debug("No selected rows to remove")
            return

        logger.debug(f"Remove rows at indexes: {indexes}")
        # Descending order keeps the remaining indexes valid
        for index in indexes:
            del self._entries[index]

        self._selected_ids.clear()

        if self._table:
            self._table.clear()
            for entry in self._entries:
                self._table.add_row(entry.id, "", entry.hsv.describe())
                self._table.deselect_row(entry.id)

        if not self._entries:
            self.add_row()
        else:
            self.recompute_current_row()

        logger.info(f"Removed {len(indexes)} row(s)")

    def clear(self) -> None:
        """Reset to a single default row."""
        self._selected_ids.clear()
        self._entries.clear()
        if self._table:
            self._table.clear()

        logger.debug("Color list cleared")
        self.add_row()

    def reorder_row(self, old_index: int, new_index: int) -> None:
        """
        Move the row at old_index to new_index.

        The relative order of all other rows is preserved. Indexes outside
        the list are ignored.
        """
        size = len(self._entries)
        if not (0 <= old_index < size and 0 <= new_index < size):
            logger.warning(f"Ignoring reorder {old_index} -> {new_index} (rows: {size})")
            return

        entry = self._entries.pop(old_index)
        self._entries.insert(new_index, entry)

        self.recompute_current_row()
        logger.debug(f"Row {entry.id} moved from {old_index} to {new_index}")

    # =================================================================
    # Selection
    # =================================================================

    def select_row(self, row_id: int) -> None:
        """Select a row, deselecting all others."""
        self._select_exclusive(row_id)
        self.recompute_current_row()

    def deselect_row(self, row_id: int) -> None:
        """
        Deselect a row.

        The current entry falls back to the previous current one, so
        deselecting the only selected row leaves the current entry (and its
        selection) unchanged until another row is selected.
        """
        self._selected_ids.discard(row_id)
        self.recompute_current_row()

    # =================================================================
    # Current color
    # =================================================================

    def set_current_hue(self, h: float) -> None:
        """Set the hue (0-360 degrees) of the current entry."""
        self._current_entry().hsv.h = h
        self.recompute_current_row()

    def set_current_saturation(self, s: float) -> None:
        """Set the saturation (0.0-1.0) of the current entry."""
        self._current_entry().hsv.s = s
        self.recompute_current_row()

    def set_current_value(self, v: float) -> None:
        """Set the value (0.0-1.0) of the current entry."""
        self._current_entry().hsv.v = v
        self.recompute_current_row()

    def recompute_current_row(self) -> None:
        """
        Re-derive the current entry and publish it.

        Synchronizes the sliders and the table with the current entry,
        re-selects it, and invokes every listener. This runs on every call,
        not only when the current entry changes: value edits and reorders
        have to reach the listeners too.
        """
        current = self._resolve_current_entry()
        self._current_id = current.id
        hsv = current.hsv

        if self._sliders:
            self._sliders.write_values(hsv.h, hsv.s, hsv.v)
            self._update_slider_colors(hsv)

        self._select_exclusive(current.id)
        if self._table:
            self._table.update_row(current.id, "", hsv.describe())

        self._listeners.notify(hsv.model_copy())
        logger.debug(f"Current row {current.id}: {hsv.describe()}")

    # =================================================================
    # Internals
    # =================================================================

    def _allocate_id(self) -> int:
        entry_id = self._next_id
        self._next_id += 1
        return entry_id

    def _resolve_current_entry(self) -> ColorEntry:
        for entry in self._entries:
            if entry.id in self._selected_ids:
                return entry

        for entry in self._entries:
            if entry.id == self._current_id:
                return entry

        return self._entries[0]

    def _current_entry(self) -> ColorEntry:
        for entry in self._entries:
            if entry.id == self._current_id:
                return entry
        return self._resolve_current_entry()

    def _select_exclusive(self, row_id: int) -> None:
        """Select a single row in both the state and the table widget."""
        for selected in list(self._selected_ids):
            if self._table:
                self._table.deselect_row(selected)
        self._selected_ids.clear()

        if self._table:
            self._table.select_row(row_id)
        self._selected_ids.add(row_id)

    def _update_slider_colors(self, hsv: HSV) -> None:
        hue_color = hsv_to_hex(HSV(h=hsv.h, s=1.0, v=1.0))
        saturation_color = hsv_to_hex(HSV(h=hsv.h, s=hsv.s, v=1.0))
        value_color = rgb_to_hex(hsv.v, hsv.v, hsv.v)
        self._sliders.set_colors(hue_color, saturation_color, value_color)
