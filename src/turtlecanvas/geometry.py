"""Angles, points, bounds and the affine matrices behind the layer transforms."""

import math
from dataclasses import dataclass

import numpy as np


def deg_to_rad(deg: float) -> float:
    return deg / 180 * math.pi


def rad_to_deg(rad: float) -> float:
    return rad * 180 / math.pi


def sin_cos(angle: float) -> tuple[float, float]:
    """Sine and cosine of an angle, as a 2-tuple."""
    return math.sin(angle), math.cos(angle)


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Bounds:
    """Canvas rectangle of `width` x `height` centred at the origin."""

    width: float = 300.0
    height: float = 300.0

    @property
    def max_x(self) -> float:
        return self.width / 2

    @property
    def min_x(self) -> float:
        return -self.max_x

    @property
    def max_y(self) -> float:
        return self.height / 2

    @property
    def min_y(self) -> float:
        return -self.max_y

    def contains(self, point: Point) -> bool:
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )


# Affine helpers. Matrices are 3x3 and act on column vectors (x, y, 1), so
# composing `current @ step` applies `step` first, like a 2d canvas context.


def identity() -> np.ndarray:
    return np.identity(3)


def translation(tx: float, ty: float) -> np.ndarray:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def scaling(sx: float, sy: float) -> np.ndarray:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def rotation(angle: float) -> np.ndarray:
    # Clockwise on a Y-down device for positive angles.
    s, c = sin_cos(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def apply(matrix: np.ndarray, points) -> list[tuple[float, float]]:
    """Map a sequence of (x, y) pairs through `matrix`."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) == 0:
        return []
    homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
    mapped = homogeneous @ matrix.T
    return [(float(x), float(y)) for x, y in mapped[:, :2]]
