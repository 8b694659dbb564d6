"""Top-level package interface for beacon_score.

Expose the scorer, its configuration and the ranking helpers.
"""
from .config import DEFAULTS, ScoringConfig, apply_overrides, load_config
from .scoring import BeaconScorer
from .shapes import Contour, ContourLike, Ellipse, EllipseLike
from .subscore import normal_pdf, normal_pdf_normalized, subscore
from .types import Scored, rank, unwrap  # re-export

__all__ = [
    "BeaconScorer",
    "ScoringConfig",
    "DEFAULTS",
    "apply_overrides",
    "load_config",
    "Contour",
    "ContourLike",
    "Ellipse",
    "EllipseLike",
    "Scored",
    "rank",
    "unwrap",
    "subscore",
    "normal_pdf",
    "normal_pdf_normalized",
]
