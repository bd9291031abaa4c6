"""Textual bindings of the dashboard widget protocols."""

from textual.widgets import DataTable, Input, Static

from ledcycle.models import ColorEntry

SELECTED_MARKER = "●"


class DataTableWidget:
    """TableWidget backed by a Textual DataTable; rows are keyed by str(row_id)."""

    COLUMNS = (("", "selected"), ("Id", "id"), ("Label", "label"), ("Color", "color"))

    def __init__(self, table: DataTable):
        self.table = table
        if not self.table.columns:
            for label, key in self.COLUMNS:
                self.table.add_column(label, key=key)

    def _has_row(self, row_id: int) -> bool:
        return str(row_id) in self.table.rows

    def add_row(self, row_id: int, label: str, description: str) -> None:
        self.table.add_row("", str(row_id), label, description, key=str(row_id))

    def update_row(self, row_id: int, label: str, description: str) -> None:
        if not self._has_row(row_id):
            return
        self.table.update_cell(str(row_id), "label", label)
        self.table.update_cell(str(row_id), "color", description)

    def remove_row(self, row_id: int) -> None:
        if self._has_row(row_id):
            self.table.remove_row(str(row_id))

    def select_row(self, row_id: int) -> None:
        if not self._has_row(row_id):
            return
        self.table.update_cell(str(row_id), "selected", SELECTED_MARKER)
        self.table.move_cursor(row=self.table.get_row_index(str(row_id)))

    def deselect_row(self, row_id: int) -> None:
        if self._has_row(row_id):
            self.table.update_cell(str(row_id), "selected", "")

    def clear(self) -> None:
        self.table.clear()

    def show_entries(self, entries: list[ColorEntry], selected_ids: frozenset[int]) -> None:
        """Re-render every row in list order (after a reorder)."""
        self.clear()
        for entry in entries:
            self.add_row(entry.id, "", entry.hsv.describe())
        for entry in entries:
            if entry.id in selected_ids:
                self.select_row(entry.id)


class InputSliders:
    """HsvSliders backed by three Textual Inputs."""

    def __init__(self, hue: Input, saturation: Input, value: Input):
        self.hue = hue
        self.saturation = saturation
        self.value = value

    def write_values(self, h: float, s: float, v: float) -> None:
        # The hue field only accepts whole degrees
        self.hue.value = str(int(h))
        self.saturation.value = f"{s:g}"
        self.value.value = f"{v:g}"

    def set_colors(self, hue: str, saturation: str, value: str) -> None:
        self.hue.styles.border = ("tall", hue)
        self.saturation.styles.border = ("tall", saturation)
        self.value.styles.border = ("tall", value)


class SwatchPreview:
    """ColorPreview backed by a Static swatch (the on-screen LED)."""

    def __init__(self, swatch: Static):
        self.swatch = swatch

    def turn_on(self) -> None:
        self.swatch.update("LED")

    def set_color(self, hex_color: str) -> None:
        self.swatch.styles.background = hex_color
