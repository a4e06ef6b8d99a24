"""Trace a forward move across the canvas, wrapping at the edges."""

import logging
from dataclasses import dataclass

from .geometry import Bounds, Point, sin_cos

LOG = logging.getLogger(__name__)

# Direction components smaller than this never cross their axis.
EPSILON = 1e-12


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


def fold(point: Point, bounds: Bounds) -> Point:
    """Bring a point lying outside the canvas back in, as if it had wrapped."""
    x, y = point.x, point.y
    if not bounds.min_x <= x <= bounds.max_x:
        x = bounds.min_x + (x - bounds.min_x) % bounds.width
    if not bounds.min_y <= y <= bounds.max_y:
        y = bounds.min_y + (y - bounds.min_y) % bounds.height
    return Point(x, y)


def trace_forward(
    start: Point, heading: float, distance: float, bounds: Bounds, wrap: bool = True
) -> tuple[list[Segment], Point]:
    """
    Trace a straight move of `distance` along `heading` from `start`.

    With wrap on, the move is split wherever it leaves the canvas and resumes
    from the opposite edge, until the whole distance is covered. Each pass
    tests the right, left, top and bottom edges in that order against the
    naive endpoint and handles only the first one crossed, so a move leaving
    through a corner wraps horizontally first.

    Args:
        start: Current turtle position.
        heading: Radians clockwise from +Y.
        distance: Units to travel; negative values move backwards.
        bounds: Canvas rectangle.
        wrap: Whether to wrap at the edges.

    Returns:
        The traced segments, in order, and the final position. The segment
        lengths add up to `abs(distance)`.
    """
    sin_a, cos_a = sin_cos(heading)
    if distance < 0:
        sin_a, cos_a, distance = -sin_a, -cos_a, -distance

    segments: list[Segment] = []

    if not wrap:
        x, y = start.x, start.y
        if distance > 0:
            end = Point(x + sin_a * distance, y + cos_a * distance)
            segments.append(Segment(Point(x, y), end))
            return segments, end
        return segments, Point(x, y)

    if distance > 0 and not bounds.contains(start):
        folded = fold(start, bounds)
        LOG.debug("Folded %s into the canvas at %s", start, folded)
        start = folded
    x, y = start.x, start.y

    while distance > 0:
        new_x = x + sin_a * distance
        new_y = y + cos_a * distance

        if new_x > bounds.max_x and sin_a > EPSILON:
            cut, other, axis = bounds.max_x, bounds.min_x, "x"
        elif new_x < bounds.min_x and sin_a < -EPSILON:
            cut, other, axis = bounds.min_x, bounds.max_x, "x"
        elif new_y > bounds.max_y and cos_a > EPSILON:
            cut, other, axis = bounds.max_y, bounds.min_y, "y"
        elif new_y < bounds.min_y and cos_a < -EPSILON:
            cut, other, axis = bounds.min_y, bounds.max_y, "y"
        else:
            end = Point(new_x, new_y)
            segments.append(Segment(Point(x, y), end))
            return segments, end

        # After a corner exit the kept coordinate can sit past its own edge,
        # which puts that edge behind the turtle; never trace more than is left.
        if axis == "x":
            to_edge = min(abs((cut - x) / sin_a), distance)
            edge = Point(x + sin_a * to_edge, y + cos_a * to_edge)
            segments.append(Segment(Point(x, y), edge))
            x, y = other, edge.y
        else:
            to_edge = min(abs((cut - y) / cos_a), distance)
            edge = Point(x + sin_a * to_edge, y + cos_a * to_edge)
            segments.append(Segment(Point(x, y), edge))
            x, y = edge.x, other

        LOG.debug("Wrapped at %s=%s after %.3f units", axis, cut, to_edge)
        distance -= to_edge

    return segments, Point(x, y)
