"""Generic utility modules for ledcycle.

This package contains generic utilities that are not specific to LED colors:
- observer: Listener registry with handle-based removal
- persistence: JSON load/save of Pydantic models
"""

from .observer import ListenerHandle, ObserverManager
from .persistence import load_model, save_model

__all__ = ["ListenerHandle", "ObserverManager", "load_model", "save_model"]
