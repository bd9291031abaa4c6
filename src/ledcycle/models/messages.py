"""Messages exchanged between the dashboard and the cycling worker."""

from enum import Enum

from pydantic import BaseModel, Field

from .color import ColorEntry


class MessageKind(str, Enum):
    """Kinds of messages crossing the worker boundary."""

    UPDATE_COLORS = "update_colors"  # Request (no payload) or full list snapshot


class ColorMessage(BaseModel):
    """A message crossing the worker boundary.

    Sent by the worker without ``color_data`` as a request for a snapshot,
    and by the dashboard with the full color list whenever it changes.
    """

    message: MessageKind = Field(description="Message kind")
    color_data: list[ColorEntry] | None = Field(
        default=None, description="Full color list snapshot, if any"
    )

    @classmethod
    def request_colors(cls) -> "ColorMessage":
        """Create a snapshot request."""
        return cls(message=MessageKind.UPDATE_COLORS)

    @classmethod
    def update_colors(cls, entries: list[ColorEntry]) -> "ColorMessage":
        """Create a snapshot message carrying copies of ``entries``."""
        return cls(
            message=MessageKind.UPDATE_COLORS,
            color_data=[entry.model_copy(deep=True) for entry in entries],
        )

    @property
    def has_payload(self) -> bool:
        """Check if this message carries a color list."""
        return self.color_data is not None
