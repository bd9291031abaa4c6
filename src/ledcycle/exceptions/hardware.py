"""Hardware output exceptions.

- HardwareError: Base class for output hardware errors
- GpioUnavailableError: The GPIO PWM driver cannot be used on this machine
"""

from typing import Optional

from .base import LedCycleError


class HardwareError(LedCycleError):
    """LED output hardware failed."""
    pass


class GpioUnavailableError(HardwareError):
    """RPi.GPIO is not installed or GPIO access is not possible."""

    def __init__(self, original_error: Optional[str] = None):
        """
        Initialize GPIO unavailable error.

        Args:
            original_error: The underlying import or driver error
        """
        technical = "RPi.GPIO could not be initialized"
        if original_error:
            technical += f": {original_error}"

        super().__init__(
            user_message="GPIO output is not available on this machine.",
            technical_message=technical,
            recoverable=True,
            recovery_hint=(
                "Install the GPIO extra on a Raspberry Pi (pip install 'ledcycle[rpi]'), "
                "or run without hardware: ledcycle run --backend null"
            ),
        )
        self.original_error = original_error
