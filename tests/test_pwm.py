"""Tests for the RGB LED outputs."""

import sys
from unittest.mock import Mock, call, patch

import pytest

from ledcycle.exceptions import GpioUnavailableError
from ledcycle.hardware import GpioRgbOutput, NullRgbOutput, RgbOutput, create_rgb_output, duty_cycle
from ledcycle.models import RGB, AppConfig, OutputBackend


@pytest.fixture
def mock_gpio():
    """Install a mock RPi.GPIO module."""
    gpio = Mock()
    gpio.BCM = "BCM"
    gpio.OUT = "OUT"
    gpio.PWM.side_effect = lambda pin, frequency: Mock(name=f"pwm{pin}")

    rpi = Mock()
    rpi.GPIO = gpio

    with patch.dict(sys.modules, {"RPi": rpi, "RPi.GPIO": gpio}):
        yield gpio


@pytest.mark.unit
class TestDutyCycle:
    """Test intensity to duty cycle conversion."""

    @pytest.mark.parametrize(
        "value,expected", [(0.0, 0.0), (1.0, 100.0), (0.25, 25.0), (-0.5, 0.0), (1.5, 100.0)]
    )
    def test_duty_cycle(self, value, expected):
        assert duty_cycle(value) == pytest.approx(expected)


@pytest.mark.unit
class TestNullRgbOutput:
    """Test the hardware-free output."""

    def test_records_writes(self):
        output = NullRgbOutput()
        output.start()
        output.write(RGB(r=1, g=0, b=0))
        output.write(RGB(r=0, g=1, b=0))

        assert output.write_count == 2
        assert output.last_rgb == RGB(r=0, g=1, b=0)

    def test_implements_protocol(self):
        assert isinstance(NullRgbOutput(), RgbOutput)


@pytest.mark.unit
class TestGpioRgbOutput:
    """Test the RPi.GPIO software PWM output."""

    def test_start_sets_up_pins(self, mock_gpio):
        output = GpioRgbOutput(4, 5, 6, frequency=100)

        output.start()

        mock_gpio.setmode.assert_called_once_with("BCM")
        assert mock_gpio.setup.call_args_list == [call(4, "OUT"), call(5, "OUT"), call(6, "OUT")]
        assert mock_gpio.PWM.call_args_list == [call(4, 100), call(5, 100), call(6, 100)]
        assert output.is_running
        for pwm in output._channels:
            pwm.start.assert_called_once_with(0)

    def test_write_changes_duty_cycles(self, mock_gpio):
        output = GpioRgbOutput(4, 5, 6)
        output.start()
        red, green, blue = output._channels

        output.write(RGB(r=1.0, g=0.5, b=0.0))

        red.ChangeDutyCycle.assert_called_once_with(100.0)
        green.ChangeDutyCycle.assert_called_once_with(50.0)
        blue.ChangeDutyCycle.assert_called_once_with(0.0)

    def test_write_before_start_is_ignored(self):
        output = GpioRgbOutput(4, 5, 6)
        output.write(RGB(r=1, g=1, b=1))
        assert not output.is_running

    def test_stop_releases_pins(self, mock_gpio):
        output = GpioRgbOutput(4, 5, 6)
        output.start()
        channels = list(output._channels)

        output.stop()

        for pwm in channels:
            pwm.stop.assert_called_once()
        mock_gpio.cleanup.assert_called_once_with([4, 5, 6])
        assert not output.is_running

    def test_missing_driver(self):
        with patch.dict(sys.modules, {"RPi": None, "RPi.GPIO": None}):
            output = GpioRgbOutput(4, 5, 6)
            with pytest.raises(GpioUnavailableError) as exc_info:
                output.start()

        assert exc_info.value.recoverable
        assert "--backend null" in exc_info.value.recovery_hint

    def test_from_config(self):
        config = AppConfig(red_pin=17, green_pin=27, blue_pin=22, pwm_frequency=200)
        output = GpioRgbOutput.from_config(config)
        assert output.pins == (17, 27, 22)
        assert output.frequency == 200

    def test_setup_failure_releases_started_pins(self, mock_gpio):
        mock_gpio.setup.side_effect = [None, RuntimeError("No access to /dev/mem"), None]
        started = []

        def make_pwm(pin, frequency):
            started.append(Mock(name=f"pwm{pin}"))
            return started[-1]

        mock_gpio.PWM.side_effect = make_pwm
        output = GpioRgbOutput(4, 5, 6)

        with pytest.raises(GpioUnavailableError) as exc_info:
            output.start()

        assert "/dev/mem" in exc_info.value.technical_message
        assert exc_info.value.original_error == "No access to /dev/mem"
        assert not output.is_running
        mock_gpio.cleanup.assert_called_once_with([4, 5, 6])
        assert mock_gpio.PWM.call_args_list == [call(4, 100)]
        started[0].stop.assert_called_once()

    def test_restart_after_setup_failure(self, mock_gpio):
        mock_gpio.setup.side_effect = [RuntimeError("No access to /dev/mem"), None, None, None]
        output = GpioRgbOutput(4, 5, 6)

        with pytest.raises(GpioUnavailableError):
            output.start()
        output.start()

        assert output.is_running
        assert len(output._channels) == 3


@pytest.mark.unit
class TestCreateRgbOutput:
    """Test backend selection."""

    def test_gpio_backend(self):
        assert isinstance(create_rgb_output(AppConfig()), GpioRgbOutput)

    def test_null_backend(self):
        output = create_rgb_output(AppConfig(output_backend=OutputBackend.NULL))
        assert isinstance(output, NullRgbOutput)
