"""Normalized-probability subscore shared by every scorer.

A subscore maps one measured attribute onto ``[0, bias]``: the bias is
awarded at the ideal value and decays along a Gaussian curve as the value
moves away from it.
"""
from typing import Union

import numpy as np

Number = Union[float, np.floating]


def normal_pdf(x: Number, variance: float, mean: float = 0.0) -> float:
    return float(np.exp(-((x - mean) ** 2) / (2.0 * variance)) / np.sqrt(2.0 * np.pi * variance))


def normal_pdf_normalized(x: Number, variance: float, mean: float = 0.0) -> float:
    """Gaussian density rescaled so that its peak (at ``mean``) is 1."""
    return normal_pdf(x, variance, mean) / normal_pdf(mean, variance, mean)


def subscore(
    value: Number,
    best_value: float,
    variance: float,
    bias: float,
    ignore_sign: bool = False,
) -> float:
    """
    Score ``value`` against ``best_value``.

    With ignore_sign=False only values above ``best_value`` are penalized;
    anything at or below it gets the full ``bias``. With ignore_sign=True the
    penalty is symmetric around ``best_value``.

    The deviation is normalized by ``best_value`` (must be nonzero) before the
    density is evaluated. NaN input propagates to a NaN subscore.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        delta = np.float64(value) - best_value
        if not ignore_sign:
            delta = np.maximum(delta, 0.0)
        score = normal_pdf_normalized(delta / best_value, variance) * bias
        # clamp so rounding never pushes a subscore above its bias
        return float(np.minimum(score, bias))
