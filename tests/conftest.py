"""Pytest fixtures for drumjot tests."""

import pytest

from drumjot import config
from drumjot.config import LayoutConfig
from drumjot.duration import Duration
from drumjot.engine import LayoutEngine
from drumjot.models.jot import TimeSignature


@pytest.fixture
def four_four() -> TimeSignature:
    """Return a 4/4 time signature (bar length 4 quarter notes)."""
    return TimeSignature(count=4, unit=Duration.QUARTER)


@pytest.fixture
def layout_config() -> LayoutConfig:
    """Return a layout config with round numbers for easy arithmetic."""
    return LayoutConfig(
        quarter_note_gap=10.0,
        note_width=4.0,
        track_height=20.0,
        palette=("red", "green"),
    )


@pytest.fixture
def engine(layout_config: LayoutConfig) -> LayoutEngine:
    """Return a layout engine with a fresh cache."""
    return LayoutEngine(config=layout_config)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate the global settings instance and environment between tests."""
    for name in (
        "DRUMJOT_QUARTER_NOTE_GAP_PIXELS",
        "DRUMJOT_NOTE_WIDTH",
        "DRUMJOT_TRACK_HEIGHT",
        "DRUMJOT_PALETTE_COLORS",
        "DRUMJOT_CACHE_SIZE",
        "DRUMJOT_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    yield
