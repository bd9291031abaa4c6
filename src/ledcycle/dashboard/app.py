"""Textual dashboard for editing the LED color cycle."""

import logging
from collections.abc import Sequence
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DataTable, Footer, Header, Input, Label, Static

from ledcycle.core import ColorLink, ColorSequencer
from ledcycle.models import HSV

from .controller import DashboardController
from .widgets import DataTableWidget, InputSliders, SwatchPreview

logger = logging.getLogger(__name__)


class ColorDashboard(App):
    """
    Textual UI for the color list.

    A pure UI layer: edits go through DashboardController to the
    ColorSequencer, and color lists reach the worker through the
    ColorLink. The worker itself is owned by the caller.

    The sequencer and controller are created on mount, once the widgets
    they drive exist.
    """

    TITLE = "LED Color Cycle"

    CSS = """
    #main {
        height: 1fr;
    }

    #colors {
        width: 2fr;
    }

    #editor {
        width: 1fr;
        padding: 0 1;
    }

    #preview {
        height: 5;
        content-align: center middle;
        margin-bottom: 1;
    }

    #buttons {
        height: auto;
    }

    #buttons Button {
        min-width: 10;
        margin-right: 1;
    }
    """

    BINDINGS = [
        Binding("a", "add_color", "Add", show=True),
        Binding("d", "remove_color", "Remove", show=True),
        Binding("ctrl+up", "move_up", "Move Up", show=True),
        Binding("ctrl+down", "move_down", "Move Down", show=True),
        Binding("escape", "deselect", "Deselect", show=False),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        link: ColorLink,
        poll_interval_ms: float = 50.0,
        initial_colors: Sequence[HSV] = (),
    ):
        """
        Initialize the dashboard.

        Args:
            link: Channel to the cycling worker
            poll_interval_ms: How often worker messages are processed
            initial_colors: Colors to start with (one default row if empty)
        """
        super().__init__()
        self.color_link = link
        self._poll_interval_ms = poll_interval_ms
        self._initial_colors = list(initial_colors)

        self.sequencer: Optional[ColorSequencer] = None
        self.controller: Optional[DashboardController] = None
        self._table: Optional[DataTableWidget] = None

    # =================================================================
    # Textual Lifecycle
    # =================================================================

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        yield Header()

        with Horizontal(id="main"):
            yield DataTable(id="colors", cursor_type="row", zebra_stripes=True)
            with Vertical(id="editor"):
                yield Static("", id="preview")
                yield Label("Hue (0-360)")
                yield Input(placeholder="hue", id="hue", type="integer")
                yield Label("Saturation (0-1)")
                yield Input(placeholder="saturation", id="saturation", type="number")
                yield Label("Value (0-1)")
                yield Input(placeholder="value", id="value", type="number")
                with Horizontal(id="buttons"):
                    yield Button("Add", id="add", variant="success")
                    yield Button("Remove", id="remove", variant="error")

        yield Footer()

    def on_mount(self) -> None:
        """Bind the widgets and start answering the worker."""
        self._table = DataTableWidget(self.query_one("#colors", DataTable))
        sliders = InputSliders(
            self.query_one("#hue", Input),
            self.query_one("#saturation", Input),
            self.query_one("#value", Input),
        )
        preview = SwatchPreview(self.query_one("#preview", Static))

        self.sequencer = ColorSequencer(self._table, sliders)
        self.controller = DashboardController(self.sequencer, self.color_link, preview)
        self.controller.load_colors(self._initial_colors)

        self.set_interval(self._poll_interval_ms / 1000.0, self._pump_worker_messages)
        logger.info("Dashboard mounted")

    def on_unmount(self) -> None:
        if self.controller:
            self.controller.close()
        logger.info("Dashboard unmounted")

    def _pump_worker_messages(self) -> None:
        if self.controller:
            self.controller.process_engine_messages()

    # =================================================================
    # Widget events
    # =================================================================

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if self.controller:
            self.controller.handle_table_command(("select", event.row_key.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.controller:
            return

        handlers = {
            "hue": self.controller.write_hue,
            "saturation": self.controller.write_saturation,
            "value": self.controller.write_value,
        }
        handler = handlers.get(event.input.id or "")
        if handler:
            handler(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add":
            self.action_add_color()
        elif event.button.id == "remove":
            self.action_remove_color()

    # =================================================================
    # Actions
    # =================================================================

    def action_add_color(self) -> None:
        if self.controller:
            self.controller.press_add(1)

    def action_remove_color(self) -> None:
        if self.controller:
            self.controller.press_remove(1)

    def action_move_up(self) -> None:
        self._move_current(-1)

    def action_move_down(self) -> None:
        self._move_current(1)

    def action_deselect(self) -> None:
        if self.controller and self.sequencer:
            self.controller.handle_table_command(("deselect", self.sequencer.current_id))

    def _move_current(self, offset: int) -> None:
        if not (self.controller and self.sequencer and self._table):
            return

        ids = [entry.id for entry in self.sequencer.entries]
        old_index = ids.index(self.sequencer.current_id)
        new_index = old_index + offset
        if not 0 <= new_index < len(ids):
            return

        self.controller.handle_table_command(("order", old_index, new_index))
        # A DataTable cannot move rows, so the reordered list is re-rendered
        self._table.show_entries(self.sequencer.entries, self.sequencer.selected_ids)
