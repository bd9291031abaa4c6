"""Core color cycling components.

- ColorSequencer: editable color list behind the dashboard (UI thread)
- ColorCycleEngine: tick-driven interpolation through a color list
- ColorLink: serialized message queues between the two threads
- CycleWorker: runs the engine on a background thread
"""

from .cycle_engine import ColorCycleEngine, CycleState
from .link import ColorLink
from .sequencer import ColorSequencer
from .worker import CycleWorker

__all__ = [
    "ColorCycleEngine",
    "ColorLink",
    "ColorSequencer",
    "CycleState",
    "CycleWorker",
]
