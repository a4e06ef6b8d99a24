import math

import pytest

from turtlecanvas.geometry import Bounds, Point, deg_to_rad, sin_cos
from turtlecanvas.motion import fold, trace_forward


def total_length(segments):
    return sum(s.length for s in segments)


def test_top_wrap_scenario(bounds):
    segments, end = trace_forward(Point(0, 0), 0, 200, bounds)

    assert len(segments) == 2
    first, second = segments
    assert first.start == Point(0, 0)
    assert first.end.y == pytest.approx(150)
    assert second.start.y == pytest.approx(-150)
    assert second.end.y == pytest.approx(-100)
    assert end.x == pytest.approx(0)
    assert end.y == pytest.approx(-100)
    assert second.length == pytest.approx(50)


def test_zero_distance_does_nothing(bounds):
    segments, end = trace_forward(Point(10, 20), 1.0, 0, bounds)
    assert segments == []
    assert end == Point(10, 20)


def test_inside_move_is_one_segment(bounds):
    segments, end = trace_forward(Point(0, 0), deg_to_rad(90), 100, bounds)
    assert len(segments) == 1
    assert end.x == pytest.approx(100)
    assert end.y == pytest.approx(0)


@pytest.mark.parametrize("heading", [0, 17, 45, 90, 135, 180, 200, 271.5, 333])
@pytest.mark.parametrize("distance", [10, 451, 1234.5, -380])
def test_wrap_conserves_distance(bounds, heading, distance):
    segments, end = trace_forward(Point(12, -40), deg_to_rad(heading), distance, bounds)
    assert total_length(segments) == pytest.approx(abs(distance))
    assert math.isfinite(end.x) and math.isfinite(end.y)
    assert bounds.min_x - 1e-6 <= end.x <= bounds.max_x + 1e-6
    assert bounds.min_y - 1e-6 <= end.y <= bounds.max_y + 1e-6


@pytest.mark.parametrize("heading", [0, 33, 90, 181, 359])
@pytest.mark.parametrize("distance", [0, 25, 1000, -640])
def test_no_wrap_endpoint_is_exact(bounds, heading, distance):
    theta = deg_to_rad(heading)
    s, c = sin_cos(theta)
    segments, end = trace_forward(Point(3, 4), theta, distance, bounds, wrap=False)
    assert end == Point(3 + s * distance, 4 + c * distance)
    assert len(segments) == (1 if distance else 0)


def test_multiple_wraps_in_one_move(bounds):
    segments, end = trace_forward(Point(0, 0), 0, 1000, bounds)
    # 150 to the first edge, then three full crossings of 300
    assert len(segments) == 4
    assert end.y == pytest.approx(100)
    assert total_length(segments) == pytest.approx(1000)


def test_horizontal_heading_never_crosses_y(bounds):
    # cos(pi/2) is not exactly zero
    segments, end = trace_forward(Point(0, 0), math.pi / 2, 400, bounds)
    assert len(segments) == 2
    assert end.x == pytest.approx(100)
    assert end.y == pytest.approx(0)


def test_negative_distance_moves_backwards(bounds):
    segments, end = trace_forward(Point(0, 0), 0, -200, bounds)
    assert len(segments) == 2
    assert segments[0].end.y == pytest.approx(-150)
    assert end.y == pytest.approx(100)


def test_corner_exit_wraps_x_first(bounds):
    theta = deg_to_rad(45)
    distance = 150 * math.sqrt(2) + 10
    segments, end = trace_forward(Point(0, 0), theta, distance, bounds)

    assert segments[0].end.x == pytest.approx(150)
    assert segments[0].end.y == pytest.approx(150)
    assert segments[1].start.x == pytest.approx(-150)
    assert total_length(segments) == pytest.approx(distance)
    step = 10 / math.sqrt(2)
    assert end.x == pytest.approx(-150 + step, abs=1e-6)
    assert end.y == pytest.approx(-150 + step, abs=1e-6)


def test_x_edge_takes_priority_over_y(bounds):
    # leaves through the top first, but the right edge is tested first
    heading = math.atan2(0.5, math.sqrt(3) / 2)
    segments, end = trace_forward(Point(140, 140), heading, 100, bounds)
    assert segments[0].end.x == pytest.approx(150)
    assert segments[1].start.x == pytest.approx(-150)
    assert total_length(segments) == pytest.approx(100)
    assert math.isfinite(end.x) and math.isfinite(end.y)


def test_start_outside_canvas_stays_finite(bounds):
    segments, end = trace_forward(Point(500, 0), 0, 10, bounds)
    assert end.x == pytest.approx(-100)
    assert end.y == pytest.approx(10)
    assert total_length(segments) == pytest.approx(10)


def test_start_outside_without_wrap_is_untouched(bounds):
    _, end = trace_forward(Point(500, 0), 0, 10, bounds, wrap=False)
    assert end == Point(500, 10)


def test_fold():
    b = Bounds(300, 200)
    assert fold(Point(160, 0), b) == Point(-140, 0)
    assert fold(Point(0, -130), b) == Point(0, 70)
    assert fold(Point(150, 100), b) == Point(150, 100)


def test_wrap_on_non_square_canvas():
    b = Bounds(400, 100)
    _, end = trace_forward(Point(0, 0), math.pi / 2, 500, b)
    assert end.x == pytest.approx(100)
    _, end = trace_forward(Point(0, 0), 0, 120, b)
    assert end.y == pytest.approx(20)
