"""Color models for the cycling LED."""

from pydantic import BaseModel, ConfigDict, Field


class HSV(BaseModel):
    """Hue/Saturation/Value color.

    Hue is in degrees, saturation and value are fractions. Assignments are
    validated because slider edits mutate the current entry in place.
    """

    model_config = ConfigDict(validate_assignment=True)

    h: float = Field(default=0.0, ge=0.0, le=360.0, description="Hue (0-360 degrees)")
    s: float = Field(default=1.0, ge=0.0, le=1.0, description="Saturation (0.0-1.0)")
    v: float = Field(default=1.0, ge=0.0, le=1.0, description="Value (0.0-1.0)")

    @classmethod
    def black(cls) -> "HSV":
        """Create black (all channels off)."""
        return cls(h=0.0, s=0.0, v=0.0)

    def describe(self) -> str:
        """Human-readable description used in table rows."""
        return f"h: {self.h:g}, s: {self.s:g}, v: {self.v:g}"


class RGB(BaseModel):
    """RGB intensities as floats.

    Channels are nominally in 0.0-1.0 but are not range-checked: converting an
    out-of-range HSV gives mathematically defined values and clamping is left
    to whoever drives the hardware.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(description="Red intensity")
    g: float = Field(description="Green intensity")
    b: float = Field(description="Blue intensity")

    @classmethod
    def off(cls) -> "RGB":
        """Create off (black) color."""
        return cls(r=0.0, g=0.0, b=0.0)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (r, g, b) tuple."""
        return (self.r, self.g, self.b)


class ColorEntry(BaseModel):
    """One row of the color list."""

    id: int = Field(description="Unique, never reused row id")
    hsv: HSV = Field(default_factory=HSV, description="Row color")

    @classmethod
    def default(cls, entry_id: int) -> "ColorEntry":
        """Create a new row with the default color (full red)."""
        return cls(id=entry_id, hsv=HSV(h=0.0, s=1.0, v=1.0))
