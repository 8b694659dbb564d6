"""Per-frame scoring of beacon candidates.

Each candidate's composite score is the product of its subscores (see
``subscore.subscore``); candidates under the configured minimum, or whose
score is not finite, are dropped.
"""
import logging
import math
from typing import List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .config import DEFAULTS, ScoringConfig
from .shapes import ContourLike, EllipseLike
from .subscore import subscore
from .types import Scored, rank

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ContourLike)
E = TypeVar("E", bound=EllipseLike)

Point = Tuple[float, float]

# linear scale of the ellipse region sampled for contrast
CONTRAST_SAMPLE_SCALE = 0.5


def _keep(score: float, minimum: float) -> bool:
    # NaN never passes
    return math.isfinite(score) and score >= minimum


class BeaconScorer:
    def __init__(self, config: ScoringConfig = DEFAULTS):
        self.config = config

    def score_contours(
        self,
        contours: Sequence[C],
        estimate_location: Optional[Point] = None,
        estimate_distance: Optional[float] = None,
        rgba: Optional[np.ndarray] = None,
        gray: Optional[np.ndarray] = None,
    ) -> List[Scored[C]]:
        """
        Score contours by bounding-box aspect ratio. Output keeps input order.

        The estimates and frames are accepted for interface parity with
        score_ellipses and do not affect the score.
        """
        cfg = self.config
        scores: List[Scored[C]] = []

        for contour in contours:
            score = 1.0

            # the closer to the beacon's width/height ratio, the better
            width, height = contour.size
            with np.errstate(divide="ignore", invalid="ignore"):
                ratio = float(np.float64(width) / np.float64(height))
            ratio_subscore = subscore(ratio, cfg.contour_ratio_best, cfg.contour_ratio_variance,
                                      cfg.contour_ratio_bias, ignore_sign=False)
            score *= ratio_subscore

            # measured only, not part of the score yet
            area = float(width) * float(height)

            logger.debug("contour %r ratio=%.4f area=%.1f score=%.4f", contour, ratio, area, score)
            if _keep(score, cfg.contour_score_min):
                scores.append(Scored(contour, score))

        logger.debug("Kept %d of %d contours.", len(scores), len(contours))
        return scores

    def score_ellipses(
        self,
        ellipses: Sequence[E],
        estimate_location: Optional[Point] = None,
        estimate_distance: Optional[float] = None,
        gray: Optional[np.ndarray] = None,
    ) -> List[Scored[E]]:
        """
        Score ellipses by eccentricity, relative area and inner darkness.

        Returns the survivors best-first. ``gray`` is required; the estimate
        arguments are reserved for a proximity subscore and currently unused.
        """
        if gray is None:
            raise ValueError("score_ellipses requires a grayscale frame")

        cfg = self.config
        frame_area = float(gray.shape[0] * gray.shape[1])
        area_best = cfg.ellipse_area_best
        scores: List[Scored[E]] = []

        for ellipse in ellipses:
            score = 1.0

            # rounder than the ideal is not penalized, more elongated is
            eccentricity = ellipse.eccentricity
            eccentricity_subscore = subscore(eccentricity, cfg.ellipse_eccentricity_best,
                                             cfg.ellipse_eccentricity_variance,
                                             cfg.ellipse_eccentricity_bias, ignore_sign=False)
            score *= eccentricity_subscore

            # fraction of the frame, penalized on both sides of the band's midpoint
            area = _area_fraction(ellipse.area, frame_area)
            area_subscore = subscore(area, area_best, cfg.ellipse_area_variance,
                                     cfg.ellipse_area_bias, ignore_sign=True)
            score *= area_subscore

            # the darker the center, the better
            average = ellipse.scale(CONTRAST_SAMPLE_SCALE).mean_intensity(gray)
            contrast_subscore = subscore(average, cfg.ellipse_contrast_threshold,
                                         cfg.ellipse_contrast_variance,
                                         cfg.ellipse_contrast_bias, ignore_sign=False)
            score *= contrast_subscore

            logger.debug(
                "ellipse %r eccentricity=%.3f (%.3f) area=%.5f (%.3f) gray=%.1f (%.3f) score=%.4f",
                ellipse, eccentricity, eccentricity_subscore, area, area_subscore,
                average, contrast_subscore, score,
            )
            if _keep(score, cfg.ellipse_score_min):
                scores.append(Scored(ellipse, score))

        logger.debug("Kept %d of %d ellipses.", len(scores), len(ellipses))
        return rank(scores)


def _area_fraction(area: float, frame_area: float) -> float:
    # a zero-area ellipse has nothing to measure
    if not area > 0:
        return float("nan")
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(area) / np.float64(frame_area))
