"""RGB LED outputs driven by the cycling worker."""

import logging
from typing import Any, Optional, Protocol, runtime_checkable

from ledcycle.exceptions import GpioUnavailableError
from ledcycle.models import RGB, AppConfig, OutputBackend

logger = logging.getLogger(__name__)


def duty_cycle(value: float) -> float:
    """Convert a 0.0-1.0 channel intensity to a PWM duty cycle (0-100%)."""
    return min(max(value, 0.0), 1.0) * 100.0


@runtime_checkable
class RgbOutput(Protocol):
    """
    Three-channel LED output.

    Threading:
        Owned by the cycling worker. start() and stop() are called from the
        thread controlling the worker, write() from the worker thread.
    """

    def start(self) -> None:
        """Acquire the hardware and switch all channels off."""
        ...

    def write(self, rgb: RGB) -> None:
        """Show a color."""
        ...

    def stop(self) -> None:
        """Switch all channels off and release the hardware."""
        ...


class NullRgbOutput:
    """Output that drives no hardware; keeps the last color for inspection."""

    def __init__(self):
        self.last_rgb: Optional[RGB] = None
        self.write_count = 0
        self.is_running = False

    def start(self) -> None:
        self.is_running = True
        logger.info("Null RGB output started (no hardware)")

    def write(self, rgb: RGB) -> None:
        self.last_rgb = rgb
        self.write_count += 1

    def stop(self) -> None:
        self.is_running = False


class GpioRgbOutput:
    """
    Software PWM on three Raspberry Pi GPIO pins via RPi.GPIO.

    RPi.GPIO is imported when the output starts, so this class can be
    constructed (and the rest of the package imported) on any machine.
    """

    def __init__(self, red_pin: int, green_pin: int, blue_pin: int, frequency: int = 100):
        """
        Initialize the output.

        Args:
            red_pin: BCM pin of the red channel
            green_pin: BCM pin of the green channel
            blue_pin: BCM pin of the blue channel
            frequency: PWM frequency in Hz
        """
        self.pins = (red_pin, green_pin, blue_pin)
        self.frequency = frequency
        self._gpio: Any = None
        self._channels: list[Any] = []

    @classmethod
    def from_config(cls, config: AppConfig) -> "GpioRgbOutput":
        """Create an output for the configured pins and frequency."""
        return cls(*config.pins, frequency=config.pwm_frequency)

    @property
    def is_running(self) -> bool:
        """Check if the PWM channels are active."""
        return bool(self._channels)

    def start(self) -> None:
        """
        Set up the pins and start PWM at 0% duty cycle.

        Raises:
            GpioUnavailableError: If RPi.GPIO is missing or cannot access the GPIO
        """
        if self._channels:
            logger.warning("GPIO output already started")
            return

        try:
            import RPi.GPIO as GPIO
        except (ImportError, RuntimeError) as e:
            # RPi.GPIO raises RuntimeError when imported off a Raspberry Pi
            raise GpioUnavailableError(str(e)) from e

        self._gpio = GPIO
        try:
            GPIO.setmode(GPIO.BCM)
            GPIO.setwarnings(False)

            for pin in self.pins:
                GPIO.setup(pin, GPIO.OUT)
                pwm = GPIO.PWM(pin, self.frequency)
                pwm.start(0)
                self._channels.append(pwm)
        except RuntimeError as e:
            # Typically "No access to /dev/mem" when not run with GPIO permissions
            logger.error(f"GPIO setup failed on pins {self.pins}: {e}")
            self._release()
            raise GpioUnavailableError(str(e)) from e

        logger.info(f"GPIO PWM started on pins {self.pins} at {self.frequency} Hz")

    def write(self, rgb: RGB) -> None:
        if not self._channels:
            logger.debug("GPIO output not started, dropping color")
            return

        for pwm, value in zip(self._channels, rgb.to_tuple()):
            pwm.ChangeDutyCycle(duty_cycle(value))

    def stop(self) -> None:
        """Stop PWM and release the pins."""
        if not self._channels:
            return

        self._release()
        logger.info("GPIO PWM stopped")

    def _release(self) -> None:
        for pwm in self._channels:
            pwm.stop()
        self._channels.clear()
        self._gpio.cleanup(list(self.pins))


def create_rgb_output(config: AppConfig) -> RgbOutput:
    """Create the output selected by the configuration's backend."""
    if config.output_backend == OutputBackend.GPIO:
        return GpioRgbOutput.from_config(config)
    return NullRgbOutput()
