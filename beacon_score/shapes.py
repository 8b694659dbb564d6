from typing import Protocol, Tuple, runtime_checkable
import math
import numpy as np
import cv2


@runtime_checkable
class ContourLike(Protocol):
    @property
    def size(self) -> Tuple[float, float]:
        """Bounding-box (width, height)."""
        ...


@runtime_checkable
class EllipseLike(Protocol):
    @property
    def eccentricity(self) -> float: ...

    @property
    def area(self) -> float: ...

    def scale(self, factor: float) -> "EllipseLike": ...

    def mean_intensity(self, gray: np.ndarray) -> float: ...


class Contour:
    """Polygonal contour as returned by cv2.findContours, shape (N,1,2)."""

    def __init__(self, points: np.ndarray):
        self.points = np.asarray(points)
        x, y, w, h = cv2.boundingRect(self.points.reshape(-1, 1, 2).astype(np.int32))
        self._rect = (int(x), int(y), int(w), int(h))

    @property
    def bbox(self) -> Tuple[int, int, int, int]:
        return self._rect

    @property
    def size(self) -> Tuple[int, int]:
        _, _, w, h = self._rect
        return w, h

    @property
    def area(self) -> float:
        # bounding-box area, not the polygon area
        w, h = self.size
        return float(w * h)

    @property
    def center(self) -> Tuple[float, float]:
        x, y, w, h = self._rect
        return (x + w / 2.0, y + h / 2.0)

    def __repr__(self) -> str:
        return f"Contour(bbox={self._rect})"


class Ellipse:
    """
    Rotated ellipse in cv2.RotatedRect form: center (cx, cy), full axis
    lengths (w, h) and rotation angle in degrees, as cv2.fitEllipse returns.
    """

    def __init__(self, center: Tuple[float, float], axes: Tuple[float, float], angle: float = 0.0):
        self.center = (float(center[0]), float(center[1]))
        self.axes = (float(axes[0]), float(axes[1]))
        self.angle = float(angle)

    @classmethod
    def from_points(cls, points: np.ndarray) -> "Ellipse":
        # cv2.fitEllipse needs at least 5 points
        center, axes, angle = cv2.fitEllipse(np.asarray(points).reshape(-1, 1, 2).astype(np.float32))
        return cls(center, axes, angle)

    @property
    def major_axis(self) -> float:
        return max(self.axes)

    @property
    def minor_axis(self) -> float:
        return min(self.axes)

    @property
    def eccentricity(self) -> float:
        # NaN for a degenerate (zero-size) ellipse
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.float64(self.minor_axis) / np.float64(self.major_axis)
            return float(np.sqrt(1.0 - ratio * ratio))

    @property
    def area(self) -> float:
        return math.pi * (self.axes[0] / 2.0) * (self.axes[1] / 2.0)

    def scale(self, factor: float) -> "Ellipse":
        return Ellipse(self.center, (self.axes[0] * factor, self.axes[1] * factor), self.angle)

    def mask(self, shape: Tuple[int, ...]) -> np.ndarray:
        m = np.zeros(shape[:2], dtype=np.uint8)
        if self.axes[0] > 0 and self.axes[1] > 0:
            cv2.ellipse(m, (self.center, self.axes, self.angle), 255, -1)
        return m

    def mean_intensity(self, gray: np.ndarray) -> float:
        """Average gray level inside the ellipse; NaN if it covers no pixel."""
        m = self.mask(gray.shape)
        if not np.any(m):
            return float("nan")
        return float(cv2.mean(gray, mask=m)[0])

    def __repr__(self) -> str:
        return f"Ellipse(center={self.center}, axes={self.axes}, angle={self.angle})"
