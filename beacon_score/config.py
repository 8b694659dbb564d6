from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

# Physical beacon dimensions (cm), used for the ideal contour aspect ratio
BEACON_WIDTH = 21.8
BEACON_HEIGHT = 14.5
BEACON_WH_RATIO = BEACON_WIDTH / BEACON_HEIGHT


@dataclass(frozen=True)
class ScoringConfig:
    # contour: bounding-box width / height
    contour_ratio_best: float = BEACON_WH_RATIO    # ratio awarded the full bias
    contour_ratio_bias: float = 3.0
    contour_ratio_variance: float = 0.1
    contour_score_min: float = 0.0

    # ellipse: eccentricity, 0 is a circle
    ellipse_eccentricity_best: float = 0.4
    ellipse_eccentricity_bias: float = 3.0
    ellipse_eccentricity_variance: float = 0.1

    # ellipse: area as a fraction of the frame area
    ellipse_area_min: float = 0.0001
    ellipse_area_max: float = 0.01
    ellipse_area_variance: float = 1.0
    ellipse_area_bias: float = 2.0

    # ellipse: mean gray level of the inner half, darker is better
    ellipse_contrast_threshold: float = 60.0
    ellipse_contrast_bias: float = 7.0
    ellipse_contrast_variance: float = 0.1

    ellipse_score_min: float = 1.0

    def __post_init__(self) -> None:
        for name in ("contour_ratio_best", "ellipse_eccentricity_best", "ellipse_contrast_threshold"):
            if getattr(self, name) == 0:
                raise ValueError(f"{name} must be nonzero")
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith("_variance") and not value > 0:
                raise ValueError(f"{f.name} must be > 0, got {value}")
            if f.name.endswith("_bias") and not value >= 0:
                raise ValueError(f"{f.name} must be >= 0, got {value}")
        if self.ellipse_area_min > self.ellipse_area_max:
            raise ValueError("ellipse_area_min must not exceed ellipse_area_max")
        if self.ellipse_area_best == 0:
            raise ValueError("ellipse_area_min and ellipse_area_max cannot both be zero")

    @property
    def ellipse_area_best(self) -> float:
        # root mean square of the acceptable band edges
        return math.sqrt(self.ellipse_area_min ** 2 + self.ellipse_area_max ** 2) / 2


DEFAULTS = ScoringConfig()


def apply_overrides(base: ScoringConfig = DEFAULTS, **overrides: Optional[float]) -> ScoringConfig:
    # produce an overridden immutable config without mutating base
    known = {f.name for f in fields(ScoringConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"Unknown scoring parameter(s): {', '.join(unknown)}")
    changes = {k: float(v) for k, v in overrides.items() if v is not None}
    return replace(base, **changes)


def load_config(path: Union[str, Path]) -> ScoringConfig:
    """
    Load scoring overrides from a YAML or JSON file.

    - .yml/.yaml -> YAML, .json -> JSON, anything else: YAML (a superset of JSON)
    - Parameters may sit at the root or under a ``scoring:`` key
    - Missing parameters keep their DEFAULTS value
    """
    p = Path(path)
    data = p.read_text(encoding="utf-8")

    if p.suffix.lower() == ".json":
        cfg: Any = json.loads(data)
    else:
        cfg = yaml.safe_load(data)

    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValueError("Config root must be a mapping/object.")

    section: Dict[str, Any] = cfg.get("scoring", cfg)
    if not isinstance(section, dict):
        raise ValueError("'scoring' section must be a mapping/object.")

    return apply_overrides(DEFAULTS, **section)
