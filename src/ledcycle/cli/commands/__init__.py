"""CLI commands for ledcycle."""

from .color import color
from .config import config
from .run import run

__all__ = ["color", "config", "run"]
