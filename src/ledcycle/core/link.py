"""Message channel between the dashboard and the cycling worker."""

import logging
from queue import Empty, Queue

from pydantic import ValidationError

from ledcycle.models import ColorMessage

logger = logging.getLogger(__name__)


class ColorLink:
    """
    Two one-way queues of serialized ColorMessages.

    Messages travel as JSON strings, so neither side can ever hold a
    reference into the other's state. Each direction preserves send order.
    Malformed or unrecognized messages are logged and dropped on receive.

    Threading:
        send_* may be called from any thread. Each receive_* side is meant
        for one consumer thread (the worker for the engine side, the UI
        thread for the dashboard side).
    """

    def __init__(self):
        self._to_engine: Queue[str] = Queue()
        self._to_ui: Queue[str] = Queue()

    def send_to_engine(self, message: ColorMessage) -> None:
        """Post a message from the dashboard to the worker."""
        self._to_engine.put_nowait(message.model_dump_json())

    def send_to_ui(self, message: ColorMessage) -> None:
        """Post a message from the worker to the dashboard."""
        self._to_ui.put_nowait(message.model_dump_json())

    def receive_for_engine(self) -> list[ColorMessage]:
        """Drain every pending message for the worker, in send order."""
        return self._drain(self._to_engine, "engine")

    def receive_for_ui(self) -> list[ColorMessage]:
        """Drain every pending message for the dashboard, in send order."""
        return self._drain(self._to_ui, "ui")

    @staticmethod
    def _drain(queue: Queue[str], side: str) -> list[ColorMessage]:
        messages: list[ColorMessage] = []
        while True:
            try:
                raw = queue.get_nowait()
            except Empty:
                return messages

            try:
                messages.append(ColorMessage.model_validate_json(raw))
            except ValidationError as e:
                logger.warning(f"Dropping malformed message for {side}: {e}")
