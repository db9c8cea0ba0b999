"""Configuration management for drumjot."""

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from drumjot.units import Pixels

DEFAULT_QUARTER_NOTE_GAP = 40.0
DEFAULT_NOTE_WIDTH = 10.0
DEFAULT_TRACK_HEIGHT = 30.0
DEFAULT_PALETTE = (
    "#e6194b",
    "#3cb44b",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#42d4f4",
)


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel scale and colours used by the layout engine.

    Frozen so it can be part of a memoization key: changing the scale must
    never hit a layout computed for another scale.
    """

    quarter_note_gap: Pixels = Pixels(DEFAULT_QUARTER_NOTE_GAP)
    note_width: Pixels = Pixels(DEFAULT_NOTE_WIDTH)
    track_height: Pixels = Pixels(DEFAULT_TRACK_HEIGHT)
    palette: tuple[str, ...] = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        for name in ("quarter_note_gap", "note_width", "track_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not self.palette:
            raise ValueError("palette must contain at least one colour")
        object.__setattr__(self, "palette", tuple(self.palette))


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DRUMJOT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Layout scale
    quarter_note_gap_pixels: float = Field(
        default=DEFAULT_QUARTER_NOTE_GAP,
        gt=0,
        description="Width of one quarter note in pixels",
    )
    note_width: float = Field(
        default=DEFAULT_NOTE_WIDTH,
        gt=0,
        description="Width of the visual note marker in pixels",
    )
    track_height: float = Field(
        default=DEFAULT_TRACK_HEIGHT,
        gt=0,
        description="Height of one track row in pixels",
    )
    palette_colors: list[str] = Field(
        default=list(DEFAULT_PALETTE),
        min_length=1,
        description="Track colours, assigned by position in the declared track list",
    )

    # Engine
    cache_size: int = Field(
        default=128,
        ge=0,
        description="Maximum number of memoized loop layouts (0 disables caching)",
    )
    verbose: bool = Field(
        default=False,
        description="Print cache misses and loop failures while laying out",
    )

    def layout_config(self) -> LayoutConfig:
        """Build the immutable layout configuration consumed by the engine."""
        return LayoutConfig(
            quarter_note_gap=Pixels(self.quarter_note_gap_pixels),
            note_width=Pixels(self.note_width),
            track_height=Pixels(self.track_height),
            palette=tuple(self.palette_colors),
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**overrides: object) -> Settings:
    """Configure settings with overrides. Useful for testing."""
    global _settings
    _settings = Settings(**overrides)  # type: ignore[arg-type]
    return _settings
