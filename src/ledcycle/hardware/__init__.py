"""LED output hardware."""

from .pwm import GpioRgbOutput, NullRgbOutput, RgbOutput, create_rgb_output, duty_cycle

__all__ = [
    "GpioRgbOutput",
    "NullRgbOutput",
    "RgbOutput",
    "create_rgb_output",
    "duty_cycle",
]
