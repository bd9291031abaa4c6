"""Color cycling state machine driven by a fixed tick."""

import logging
from dataclasses import dataclass
from typing import Optional

from ledcycle.colors import hsv_to_rgb, interpolate_hsv
from ledcycle.hardware import RgbOutput
from ledcycle.models import HSV, ColorEntry

logger = logging.getLogger(__name__)

# Id of the black entry an engine starts with; never produced by the sequencer
PLACEHOLDER_ID = -1


@dataclass(slots=True)
class CycleState:
    """
    Runtime state of the cycling engine.

    Kept as a dataclass rather than a Pydantic model: it is private to the
    engine and mutated on every tick.
    """

    entries: list[ColorEntry]   # Private copy of the color list, never empty
    next_id: int                # Id of the entry currently being approached
    current_color: HSV          # Color shown at the last tick
    last_color: HSV             # Start color of the running transition
    elapsed_ms: float = 0.0     # Time into the running transition


class ColorCycleEngine:
    """
    Cycles through a list of colors, interpolating between consecutive ones.

    Each tick advances the running transition by ``update_interval_ms``.
    When a transition completes, the reached color becomes the start of the
    next transition and the target moves to the following entry (wrapping).
    The cursor follows the target entry by id, so a replaced list that
    still contains the target continues right after it.

    With a single entry the start and target colors converge on that entry
    and the output holds it steadily.

    Threading:
        Not thread-safe. Owned by exactly one CycleWorker thread; list
        replacements arrive as messages applied between ticks.
    """

    def __init__(
        self,
        output: Optional[RgbOutput] = None,
        transition_duration_ms: float = 4000.0,
        update_interval_ms: float = 50.0,
    ):
        """
        Initialize the engine with a single black entry.

        Args:
            output: Where each tick's RGB color is written (optional)
            transition_duration_ms: Duration of one color transition
            update_interval_ms: Time added per tick

        Raises:
            ValueError: If a duration is not positive
        """
        if transition_duration_ms <= 0 or update_interval_ms <= 0:
            raise ValueError(
                f"Durations must be positive (transition={transition_duration_ms}, "
                f"interval={update_interval_ms})"
            )

        self._output = output
        self._transition_duration_ms = transition_duration_ms
        self._update_interval_ms = update_interval_ms

        self._state = CycleState(
            entries=[ColorEntry(id=PLACEHOLDER_ID, hsv=HSV.black())],
            next_id=PLACEHOLDER_ID,
            current_color=HSV.black(),
            last_color=HSV.black(),
        )

    # =================================================================
    # Inputs
    # =================================================================

    def replace_list(self, entries: list[ColorEntry]) -> bool:
        """
        Replace the color list wholesale.

        The running transition restarts from the currently shown color
        toward the entry after the previous target (the first entry if the
        previous target is gone), with elapsed time reset to zero.

        Args:
            entries: New color list (copied)

        Returns:
            True if applied, False if the list was empty and ignored
        """
        if not entries:
            logger.warning("Ignoring empty color list")
            return False

        self._state.entries = [entry.model_copy(deep=True) for entry in entries]
        self._advance_target(self._state.current_color)
        self._state.elapsed_ms = 0.0

        logger.debug(
            f"Color list replaced ({len(entries)} entries), next index {self.next_index}"
        )
        return True

    def tick(self) -> HSV:
        """
        Advance time by one update interval and output the resulting color.

        Returns:
            A copy of the color shown after this tick
        """
        state = self._state
        state.elapsed_ms += self._update_interval_ms

        if state.elapsed_ms >= self._transition_duration_ms:
            state.elapsed_ms = 0.0
            # The transition is complete, so the shown color is its target
            self._advance_target(self.target_color)

        state.current_color = interpolate_hsv(state.last_color, self.target_color, self.progress)

        if self._output is not None:
            color = state.current_color
            self._output.write(hsv_to_rgb(color.h, color.s, color.v))

        return state.current_color.model_copy()

    # =================================================================
    # State access
    # =================================================================

    @property
    def current_color(self) -> HSV:
        """Get the color shown at the last tick."""
        return self._state.current_color.model_copy()

    @property
    def last_color(self) -> HSV:
        """Get the start color of the running transition."""
        return self._state.last_color.model_copy()

    @property
    def target_color(self) -> HSV:
        """Get the color the running transition approaches."""
        index = self._index_of(self._state.next_id)
        if index < 0:
            return self._state.current_color.model_copy()
        return self._state.entries[index].hsv.model_copy()

    @property
    def next_index(self) -> int:
        """Get the list position of the target entry."""
        return self._index_of(self._state.next_id)

    @property
    def elapsed_ms(self) -> float:
        """Get the time into the running transition."""
        return self._state.elapsed_ms

    @property
    def progress(self) -> float:
        """Get the fraction (0.0-1.0) of the running transition completed."""
        return self._state.elapsed_ms / self._transition_duration_ms

    @property
    def entries(self) -> list[ColorEntry]:
        """Get a copy of the engine's color list."""
        return [entry.model_copy(deep=True) for entry in self._state.entries]

    @property
    def transition_duration_ms(self) -> float:
        """Get the duration of one transition."""
        return self._transition_duration_ms

    @property
    def update_interval_ms(self) -> float:
        """Get the time added per tick."""
        return self._update_interval_ms

    # =================================================================
    # Internals
    # =================================================================

    def _index_of(self, entry_id: int) -> int:
        for index, entry in enumerate(self._state.entries):
            if entry.id == entry_id:
                return index
        return -1

    def _advance_target(self, start_color: HSV) -> None:
        """Start a transition from start_color toward the entry after the target."""
        entries = self._state.entries
        new_index = (self._index_of(self._state.next_id) + 1) % len(entries)

        self._state.last_color = start_color.model_copy()
        self._state.next_id = entries[new_index].id
