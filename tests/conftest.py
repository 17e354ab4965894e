"""Shared pytest fixtures for colorkit tests."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from colorkit.rgba import RGBA


# =============================================================================
# Color fixtures
# =============================================================================

@pytest.fixture
def red():
    return RGBA(1.0, 0.0, 0.0)


@pytest.fixture
def green():
    return RGBA(0.0, 1.0, 0.0)


@pytest.fixture
def blue():
    return RGBA(0.0, 0.0, 1.0)


@pytest.fixture
def white():
    return RGBA(1.0, 1.0, 1.0)


@pytest.fixture
def black():
    return RGBA(0.0, 0.0, 0.0)


@pytest.fixture
def sample_colors():
    """
    A spread of colors covering primaries, secondaries, grays and a few
    in-between values, used for round-trip tests.
    """
    return [
        RGBA(1.0, 0.0, 0.0),
        RGBA(0.0, 1.0, 0.0),
        RGBA(0.0, 0.0, 1.0),
        RGBA(1.0, 1.0, 0.0),
        RGBA(0.0, 1.0, 1.0),
        RGBA(1.0, 0.0, 1.0),
        RGBA(0.5, 0.5, 0.5),
        RGBA(0.2, 0.4, 0.6),
        RGBA(0.9, 0.6, 0.1),
        RGBA(0.05, 0.02, 0.3),
    ]


@pytest.fixture
def rng():
    """Seeded numpy Generator for reproducible random selections."""
    return np.random.default_rng(42)


# =============================================================================
# Helpers
# =============================================================================

def hex_channels(hex_color: str) -> tuple[int, int, int]:
    """Byte values of a #RRGGBB string."""
    h = hex_color.lstrip("#")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


@pytest.fixture
def channels():
    return hex_channels


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the colorkit loggers."""
    caplog.set_level(logging.DEBUG, logger="colorkit")
    return caplog
