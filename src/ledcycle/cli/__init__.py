"""Command line interface for ledcycle."""

from .main import cli

__all__ = ["cli"]
