"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from ledcycle.utils.persistence import load_model, save_model

from .enums import OutputBackend

DEFAULT_CONFIG_PATH = Path.home() / ".ledcycle" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Output
    output_backend: OutputBackend = Field(
        default=OutputBackend.GPIO,
        description="Where colors are written: 'gpio' (RPi.GPIO PWM) or 'null' (no hardware)",
    )
    red_pin: int = Field(default=4, ge=0, le=27, description="BCM pin driving the red channel")
    green_pin: int = Field(default=5, ge=0, le=27, description="BCM pin driving the green channel")
    blue_pin: int = Field(default=6, ge=0, le=27, description="BCM pin driving the blue channel")
    pwm_frequency: int = Field(default=100, gt=0, description="Software PWM frequency (Hz)")

    # Cycling
    update_interval_ms: float = Field(
        default=50.0, gt=0.0, description="Period of the color update tick (milliseconds)"
    )
    transition_duration_ms: float = Field(
        default=4000.0, gt=0.0, description="Duration of one color transition (milliseconds)"
    )

    @property
    def pins(self) -> tuple[int, int, int]:
        """Get (red, green, blue) pin numbers."""
        return (self.red_pin, self.green_pin, self.blue_pin)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.ledcycle/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return load_model(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        save_model(self, path)
