"""Tests for the background cycle worker."""

import threading
import time
from unittest.mock import Mock, patch

import pytest

from ledcycle.core import CycleWorker
from ledcycle.hardware import RgbOutput
from ledcycle.models import AppConfig, ColorMessage, OutputBackend


def wait_for(predicate, timeout: float = 2.0) -> bool:
    """Poll until predicate() is true or timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def worker(link, null_output):
    """Create a worker that is never started."""
    return CycleWorker(link, null_output)


@pytest.mark.unit
class TestStep:
    """Test single worker steps without a thread."""

    def test_applies_color_list(self, worker, link, three_colors):
        link.send_to_engine(ColorMessage.update_colors(three_colors))

        worker.step()

        assert [entry.id for entry in worker.engine.entries] == [10, 11, 12]
        assert worker.engine.progress == pytest.approx(50 / 4000)

    def test_last_snapshot_wins(self, worker, link, three_colors):
        link.send_to_engine(ColorMessage.update_colors(three_colors))
        link.send_to_engine(ColorMessage.update_colors(three_colors[2:]))

        assert worker.process_messages() == 2
        assert [entry.id for entry in worker.engine.entries] == [12]

    def test_ignores_request_and_empty_list(self, worker, link):
        link.send_to_engine(ColorMessage.request_colors())
        link.send_to_engine(ColorMessage.update_colors([]))

        assert worker.process_messages() == 0
        assert [entry.id for entry in worker.engine.entries] == [-1]

    def test_malformed_message_keeps_cycling(self, worker, link, three_colors):
        link.send_to_engine(ColorMessage.update_colors(three_colors))
        worker.step()
        link._to_engine.put("{broken")

        worker.step()

        assert [entry.id for entry in worker.engine.entries] == [10, 11, 12]
        assert worker.engine.progress == pytest.approx(100 / 4000)

    def test_from_config(self, link):
        config = AppConfig(
            output_backend=OutputBackend.NULL, update_interval_ms=20, transition_duration_ms=1000
        )
        worker = CycleWorker.from_config(link, config)
        assert worker.engine.update_interval_ms == 20
        assert worker.engine.transition_duration_ms == 1000


@pytest.mark.integration
class TestThread:
    """Test the worker thread."""

    def test_start_requests_colors(self, worker, link):
        with worker:
            messages = link.receive_for_ui()

        assert len(messages) == 1
        assert not messages[0].has_payload

    def test_cycles_on_thread(self, link, null_output, three_colors):
        worker = CycleWorker(link, null_output, transition_duration_ms=50, update_interval_ms=5)
        link.send_to_engine(ColorMessage.update_colors(three_colors))

        with worker:
            assert worker.is_running
            assert null_output.is_running
            assert wait_for(lambda: null_output.write_count >= 5)
            assert wait_for(lambda: [e.id for e in worker.engine.entries] == [10, 11, 12])

        assert not worker.is_running
        assert not null_output.is_running

    def test_tick_error_does_not_stop_thread(self, link):
        output = Mock(spec=RgbOutput)
        calls = []

        def write(rgb):
            calls.append(rgb)
            if len(calls) == 1:
                raise RuntimeError("PWM write failed")

        output.write.side_effect = write
        worker = CycleWorker(link, output, transition_duration_ms=50, update_interval_ms=5)

        with worker:
            assert wait_for(lambda: len(calls) >= 3)

        output.start.assert_called_once()
        output.stop.assert_called_once()

    def test_start_twice(self, worker):
        worker.start()
        try:
            thread = worker._thread
            worker.start()
            assert worker._thread is thread
        finally:
            worker.stop()

    def test_stop_keeps_output_while_tick_runs(self, link):
        output = Mock(spec=RgbOutput)
        in_tick = threading.Event()
        release = threading.Event()

        def write(rgb):
            in_tick.set()
            release.wait(5.0)

        output.write.side_effect = write
        worker = CycleWorker(link, output, update_interval_ms=5)
        worker.start()
        assert in_tick.wait(2.0)

        with patch.object(worker._thread, "join") as join:
            worker.stop()

        join.assert_called_once_with(timeout=1.0)
        output.stop.assert_not_called()
        assert worker.is_running

        release.set()
        assert wait_for(lambda: not worker._thread.is_alive())
        worker.stop()
        output.stop.assert_called_once()
