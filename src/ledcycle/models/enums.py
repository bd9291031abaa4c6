"""Enumerations for the LED color cycler."""

from enum import Enum


class OutputBackend(str, Enum):
    """Where the cycling worker writes its colors."""

    GPIO = "gpio"  # RPi.GPIO software PWM on three pins
    NULL = "null"  # No hardware, colors are only recorded
