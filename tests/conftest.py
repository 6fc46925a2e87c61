"""
Pytest fixtures and configuration for Sun Control tests.

Shared controllers, locations and reference instants.
"""
import os
from datetime import datetime

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from sun_control.controller import SunController
from sun_control.models import GeoCoordinate


@pytest.fixture
def controller():
    """Controller with the default configuration (11/10/1996 12:30 at 0, 0)."""
    return SunController()


@pytest.fixture
def london():
    return GeoCoordinate(51.5, 0.0)


@pytest.fixture
def equator():
    return GeoCoordinate(0.0, 0.0)


@pytest.fixture
def instants():
    """Reference instants (naive, UTC)."""
    return {
        'j2000': datetime(2000, 1, 1, 12, 0),
        'equinox_noon': datetime(2024, 3, 20, 12, 0),
        'equinox_dawn': datetime(2024, 3, 20, 6, 0),
        'equinox_dusk': datetime(2024, 3, 20, 18, 0),
        'solstice_noon': datetime(2024, 6, 21, 12, 0),
        'solstice_morning': datetime(2024, 6, 21, 9, 0),
    }


class Recorder:
    """Callable that records every argument it is called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)


@pytest.fixture
def recorder():
    return Recorder()
