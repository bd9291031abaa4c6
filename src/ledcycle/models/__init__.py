"""Data models for the LED color cycler."""

from .color import HSV, RGB, ColorEntry
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .enums import OutputBackend
from .messages import ColorMessage, MessageKind

__all__ = [
    "AppConfig",
    # Models
    "ColorEntry",
    "ColorMessage",
    "DEFAULT_CONFIG_PATH",
    "HSV",
    # Enums
    "MessageKind",
    "OutputBackend",
    "RGB",
]
