"""Pytest fixtures for beacon_score tests."""
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from beacon_score.config import DEFAULTS, ScoringConfig


# =============================================================================
# FAKE SHAPES
# =============================================================================


@dataclass(frozen=True)
class FakeContour:
    width: float
    height: float

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class FakeEllipse:
    """Ellipse with fixed measurements; scaling does not change the sample."""

    eccentricity: float
    area: float
    intensity: float
    name: str = ""

    def scale(self, factor: float) -> "FakeEllipse":
        return self

    def mean_intensity(self, gray: np.ndarray) -> float:
        return self.intensity


# =============================================================================
# FRAME FIXTURES
# =============================================================================


@pytest.fixture
def gray_frame():
    """100x100 grayscale frame (area 10000)."""
    return np.zeros((100, 100), dtype=np.uint8)


@pytest.fixture
def rgba_frame():
    return np.zeros((100, 100, 4), dtype=np.uint8)


@pytest.fixture
def config() -> ScoringConfig:
    return DEFAULTS


@pytest.fixture
def ideal_area(gray_frame, config):
    """Ellipse area (px) that sits exactly at the middle of the area band."""
    return config.ellipse_area_best * gray_frame.shape[0] * gray_frame.shape[1]


@pytest.fixture
def ideal_ellipse(config, ideal_area):
    return FakeEllipse(
        eccentricity=config.ellipse_eccentricity_best,
        area=ideal_area,
        intensity=config.ellipse_contrast_threshold / 2,
        name="ideal",
    )
