"""Background worker running the color cycle."""

import logging
import threading
import time
from typing import Optional

from ledcycle.hardware import NullRgbOutput, RgbOutput
from ledcycle.models import HSV, AppConfig, ColorMessage, MessageKind

from .cycle_engine import ColorCycleEngine
from .link import ColorLink

logger = logging.getLogger(__name__)


class CycleWorker:
    """
    Runs a ColorCycleEngine on its own thread.

    On start the worker asks the dashboard for the color list, then ticks
    the engine every update interval. Between ticks it applies pending
    color list snapshots from the link. An error in one tick is logged and
    the loop carries on, so the LED keeps cycling.

    Threading:
        start()/stop() are called from the controlling thread. The engine
        and the output's write() are only touched by the worker thread once
        started. Tests can call step() directly without starting a thread.
    """

    def __init__(
        self,
        link: ColorLink,
        output: Optional[RgbOutput] = None,
        transition_duration_ms: float = 4000.0,
        update_interval_ms: float = 50.0,
    ):
        """
        Initialize the worker.

        Args:
            link: Channel to the dashboard
            output: LED output (no hardware if None)
            transition_duration_ms: Duration of one color transition
            update_interval_ms: Tick period
        """
        self._link = link
        self._output = output if output is not None else NullRgbOutput()
        self._engine = ColorCycleEngine(
            self._output,
            transition_duration_ms=transition_duration_ms,
            update_interval_ms=update_interval_ms,
        )

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def from_config(
        cls, link: ColorLink, config: AppConfig, output: Optional[RgbOutput] = None
    ) -> "CycleWorker":
        """Create a worker using the configured timing."""
        return cls(
            link,
            output,
            transition_duration_ms=config.transition_duration_ms,
            update_interval_ms=config.update_interval_ms,
        )

    @property
    def engine(self) -> ColorCycleEngine:
        """Get the engine driven by this worker."""
        return self._engine

    @property
    def output(self) -> RgbOutput:
        """Get the LED output."""
        return self._output

    @property
    def is_running(self) -> bool:
        """Check if the worker thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """
        Start the output and the cycling thread.

        Raises:
            GpioUnavailableError: If the GPIO output cannot be started
        """
        if self.is_running:
            logger.warning("CycleWorker is already running")
            return

        self._output.start()
        self._stop_event.clear()

        self._link.send_to_ui(ColorMessage.request_colors())

        self._thread = threading.Thread(target=self._run, name="ledcycle-worker", daemon=True)
        self._thread.start()
        logger.info("CycleWorker started")

    def stop(self) -> None:
        """Stop the cycling thread and release the output."""
        self._stop_event.set()

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=1.0)
            if self._thread.is_alive():
                # A tick is still running and may write to the output
                logger.warning("CycleWorker thread did not exit in time, output left running")
                return
        self._thread = None

        self._output.stop()
        logger.info("CycleWorker stopped")

    def step(self) -> HSV:
        """
        Apply pending messages, then tick the engine once.

        Returns:
            Color shown after the tick
        """
        self.process_messages()
        return self._engine.tick()

    def process_messages(self) -> int:
        """
        Apply pending color list snapshots.

        Returns:
            Number of snapshots applied
        """
        applied = 0
        for message in self._link.receive_for_engine():
            if message.message == MessageKind.UPDATE_COLORS and message.has_payload:
                if self._engine.replace_list(message.color_data):
                    applied += 1
            else:
                logger.debug(f"Ignoring message without colors: {message.message.value}")
        return applied

    def _run(self) -> None:
        interval = self._engine.update_interval_ms / 1000.0
        deadline = time.monotonic()

        while not self._stop_event.is_set():
            try:
                self.step()
            except Exception as e:
                logger.exception(f"Error in color tick: {e}")

            deadline += interval
            timeout = deadline - time.monotonic()
            if timeout < 0:
                # Fell behind; do not try to catch up with a burst of ticks
                deadline = time.monotonic()
                timeout = 0
            self._stop_event.wait(timeout)

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
        return False
