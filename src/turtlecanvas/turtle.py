"""Turtle state: position, heading, pen and style."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .geometry import Point

LOG = logging.getLogger(__name__)


class Shape(str, Enum):
    TRIANGLE = "triangle"
    TURTLE = "turtle"
    SQUARE = "square"
    CIRCLE = "circle"

    @classmethod
    def parse(cls, name) -> "Shape":
        """Resolve a shape name, falling back to the default for unknown names."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            LOG.warning("Unknown shape %r, using %s", name, DEFAULT_SHAPE.value)
            return DEFAULT_SHAPE

    @property
    def vertices(self) -> tuple[tuple[float, float], ...]:
        return SHAPES[self]


DEFAULT_SHAPE = Shape.TRIANGLE

# Cursor outlines as (x, y) offsets from the turtle position, pointing up.
# Same outlines as the cpython turtle module.
SHAPES = {
    Shape.TRIANGLE: ((-5, 0), (5, 0), (0, 15)),
    Shape.TURTLE: (
        (0, 16), (-2, 14), (-1, 10), (-4, 7), (-7, 9),
        (-9, 8), (-6, 5), (-7, 1), (-5, -3), (-8, -6),
        (-6, -8), (-4, -5), (0, -7), (4, -5), (6, -8),
        (8, -6), (5, -3), (7, 1), (6, 5), (9, 8),
        (7, 9), (4, 7), (1, 10), (2, 14),
    ),
    Shape.SQUARE: ((10, -10), (10, 10), (-10, 10), (-10, -10)),
    Shape.CIRCLE: (
        (10, 0), (9.51, 3.09), (8.09, 5.88),
        (5.88, 8.09), (3.09, 9.51), (0, 10),
        (-3.09, 9.51), (-5.88, 8.09), (-8.09, 5.88),
        (-9.51, 3.09), (-10, 0), (-9.51, -3.09),
        (-8.09, -5.88), (-5.88, -8.09), (-3.09, -9.51),
        (0, -10), (3.09, -9.51), (5.88, -8.09),
        (8.09, -5.88), (9.51, -3.09),
    ),
}


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Colour:
    """Stroke colour: r, g, b in [0, 255] and alpha in [0, 1]."""

    r: float = 0
    g: float = 0
    b: float = 0
    a: float = 1

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 1) -> "Colour":
        colour = cls(
            _clamp(r, 0, 255), _clamp(g, 0, 255), _clamp(b, 0, 255), _clamp(a, 0, 1)
        )
        if colour != cls(r, g, b, a):
            LOG.debug("Clamped colour %s to %s", (r, g, b, a), colour)
        return colour

    def to_rgba(self) -> tuple[int, int, int, int]:
        """8-bit RGBA, as Pillow expects it."""
        return (
            round(self.r),
            round(self.g),
            round(self.b),
            round(self.a * 255),
        )


BLACK = Colour()


@dataclass
class TurtleState:
    """Everything that describes the turtle. A fresh instance is the default state."""

    position: Point = field(default_factory=Point)
    heading: float = 0.0
    pen_down: bool = True
    width: float = 1.0
    colour: Colour = BLACK
    visible: bool = True
    wrap: bool = True
    redraw: bool = True
    shape: Shape = DEFAULT_SHAPE
