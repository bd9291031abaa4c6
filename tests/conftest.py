"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from ledcycle.core import ColorLink, ColorSequencer
from ledcycle.hardware import NullRgbOutput
from ledcycle.models import HSV, AppConfig, ColorEntry, OutputBackend
from ledcycle.protocols import ColorPreview, HsvSliders, TableWidget


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_table():
    """Create a mock table widget."""
    return Mock(spec=TableWidget)


@pytest.fixture
def mock_sliders():
    """Create mock H/S/V sliders."""
    return Mock(spec=HsvSliders)


@pytest.fixture
def mock_preview():
    """Create a mock preview LED."""
    return Mock(spec=ColorPreview)


@pytest.fixture
def sequencer():
    """Create a sequencer without widgets."""
    return ColorSequencer()


@pytest.fixture
def link():
    """Create a dashboard/worker link."""
    return ColorLink()


@pytest.fixture
def null_output():
    """Create an output that records written colors."""
    return NullRgbOutput()


@pytest.fixture
def null_config():
    """Create a configuration that drives no hardware."""
    return AppConfig(output_backend=OutputBackend.NULL)


@pytest.fixture
def three_colors():
    """Red, green and blue entries."""
    return [
        ColorEntry(id=10, hsv=HSV(h=0, s=1, v=1)),
        ColorEntry(id=11, hsv=HSV(h=120, s=1, v=1)),
        ColorEntry(id=12, hsv=HSV(h=240, s=1, v=1)),
    ]
