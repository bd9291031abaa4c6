"""ledcycle: HSV color cycling for a PWM-driven RGB LED."""

__version__ = "0.1.0"

# Core components
from .core import ColorCycleEngine, ColorLink, ColorSequencer, CycleWorker

__all__ = [
    "ColorCycleEngine",
    "ColorLink",
    "ColorSequencer",
    "CycleWorker",
]
