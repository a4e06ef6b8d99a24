"""Demo drawings built from the engine primitives."""

import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from .engine import TurtleEngine
from .errors import DemoError

DEMOS = {
    "spiral": {"name": "Random Spirals", "interval_ms": None, "defaults": {"count": 5}},
    "sierpinski": {"name": "Sierpinski Curve", "interval_ms": None, "defaults": {"size": 2, "level": 5}},
    "randstripe": {"name": "Random Stripes", "interval_ms": None, "defaults": {"count": 200}},
    "clock": {"name": "Analogue Clock", "interval_ms": 1000, "defaults": {"now": None}},
    "bounce": {"name": "Bouncing Rectangles", "interval_ms": 100, "defaults": {"count": 20}},
}


@dataclass
class Drop:
    x: float
    y: float
    velocity_x: float
    velocity_y: float
    size: float
    width: float
    colour: tuple[float, float, float, float]


class Bounce:
    """Rectangles bouncing off the sides of the canvas; `step` draws one frame."""

    def __init__(self, engine: TurtleEngine, count: int):
        self.engine = engine
        bounds = engine.bounds
        r = engine.random
        self.drops = [
            Drop(
                x=r(bounds.min_x, bounds.max_x),
                y=r(bounds.min_y, bounds.max_y),
                velocity_x=r(-6, 6),
                velocity_y=r(-6, 6),
                size=r(20, 300),
                width=r(1, 40),
                colour=(r(0, 255), r(0, 255), r(0, 255), engine.rng.random()),
            )
            for _ in range(abs(int(count)))
        ]

    def step(self):
        t = self.engine
        bounds = t.bounds
        t.set_redraw(False)
        t.clear()
        for d in self.drops:
            t.set_colour(*d.colour)
            t.set_width(d.width)
            t.goto(d.x, d.y)
            if d.y < bounds.min_y:
                d.velocity_y = -d.velocity_y
            elif d.y + d.size > bounds.max_y and d.velocity_y > 0:
                d.velocity_y = -d.velocity_y
            if d.x - d.width / 2 < bounds.min_x or d.x + d.width / 2 > bounds.max_x:
                d.velocity_x = -d.velocity_x
            t.forward(d.size)
            d.y += d.velocity_y
            d.x += d.velocity_x
        t.set_redraw(True)
        t.render()


class DemoRunner:
    """Runs the registered demos on an engine."""

    def __init__(self, engine: TurtleEngine):
        self.engine = engine

    def run(self, name: str, **options) -> Callable[[], None] | None:
        """
        Draw demo `name`.

        Animated demos draw their first frame and return the callback that
        draws the next one; static demos return None.
        """
        if name not in DEMOS:
            raise DemoError(f"Unknown demo: {name}")
        opts = {**DEMOS[name]["defaults"], **options}
        method = getattr(self, f"_demo_{name}")
        return method(**opts)

    def _batch(self, draw: Callable[[], None]):
        t = self.engine
        t.set_redraw(False)
        t.hide()
        draw()
        t.set_redraw(True)
        t.render()

    # -- spiral --

    def _spiral(self, steps: int, angle: float):
        t = self.engine
        width_inc = 5 / steps
        w = 0.1
        for _ in range(steps):
            t.set_width(w)
            t.forward(t.random(1, 10))
            t.turn_right(angle)
            angle -= 1
            w += width_inc

    def _demo_spiral(self, count: int):
        t = self.engine

        def draw():
            for _ in range(count):
                t.set_colour(t.random(0, 255), t.random(0, 255), t.random(0, 255), t.rng.random())
                t.goto(t.random(-150, 150), t.random(-150, 150))
                t.set_heading(t.random(0, 360))
                self._spiral(t.random(100, 1000), t.random(5, 90))

        self._batch(draw)

    # -- sierpinski --

    def _half_sierpinski(self, size: float, level: int):
        t = self.engine
        if level <= 0:
            t.forward(size)
            return

        def part():
            self._half_sierpinski(size, level - 1)
            t.turn_left(45)
            t.forward(size * math.sqrt(2))
            t.turn_left(45)
            self._half_sierpinski(size, level - 1)

        part()
        t.turn_right(90)
        t.forward(size)
        t.turn_right(90)
        part()

    def _demo_sierpinski(self, size: float, level: int):
        t = self.engine

        def draw():
            t.goto(0, -120)
            for _ in range(2):
                self._half_sierpinski(size, level)
                t.turn_right(90)
                t.forward(size)
                t.turn_right(90)

        self._batch(draw)

    # -- randstripe --

    def _demo_randstripe(self, count: int):
        t = self.engine

        def draw():
            for _ in range(count):
                t.goto(t.random(-150, 150), t.random(-150, 150))
                t.set_colour(t.random(0, 255), t.random(0, 255), t.random(0, 255), t.rng.random())
                t.set_heading(t.random(0, 180))
                t.set_width(t.random(1, 10))
                t.forward(t.random(10, 30))

        self._batch(draw)

    # -- clock --

    def _ticks(self, radius: float):
        t = self.engine
        tick_len = 7
        gap = radius - tick_len
        t.set_colour(0, 0, 255, 0.5)
        t.set_width(1)
        for theta in range(0, 360, 6):
            # hour positions hold the numbers
            if theta % 30 != 0:
                t.pen_up()
                t.goto(0, 0)
                t.set_heading(theta)
                t.forward(gap)
                t.pen_down()
                t.forward(tick_len)

    def _face(self, x: float, y: float, w: float, radius: float, sides: int):
        t = self.engine
        theta = 360 / sides
        side_len = 2 * radius * math.sin(math.radians(theta / 2))
        t.pen_up()
        t.goto(x, y)
        t.set_heading(0)
        t.forward(radius)
        t.turn_left(90)
        t.forward(side_len / 2)
        t.turn_right(180)
        t.pen_down()
        t.set_colour(0, 255, 0, 0.5)
        t.set_width(w)
        for _ in range(sides):
            t.forward(side_len)
            t.turn_right(theta)

    def _numbers(self, x: float, y: float, radius: float):
        t = self.engine
        t.pen_up()
        t.set_font(20)
        for hour in range(1, 13):
            t.goto(x, y)
            t.set_heading(hour * 30)
            t.forward(radius)
            t.write(hour)
        t.pen_down()

    def _hand(self, theta: float, w: float, length: float, colour: tuple):
        t = self.engine
        step_size = 5
        width_delta = w / (length / step_size)
        t.goto(0, 0)
        t.set_heading(theta)
        t.set_colour(*colour)
        for _ in range(0, int(length), step_size):
            t.set_width(w)
            t.forward(step_size)
            w -= width_delta

    def _hands(self, hours: int, minutes: int, seconds: int):
        self._hand(seconds * 6, 6, 100, (255, 0, 0, 0.5))
        minutes_and_seconds = minutes * 60 + seconds
        self._hand(minutes_and_seconds * 0.1, 10, 100, (0, 255, 0, 0.5))
        total = (hours % 12) * 3600 + minutes_and_seconds
        self._hand(total * 360 / 43200, 10, 60, (0, 0, 255, 0.5))

    def clock_frame(self, now: datetime | None = None):
        """Redraw the whole clock face for `now`."""
        t = self.engine
        now = now or datetime.now()

        def draw():
            t.clear()
            self._numbers(0, 0, 115)
            self._face(0, 0, 2, 130, 50)
            self._ticks(130)
            self._hands(now.hour, now.minute, now.second)

        self._batch(draw)

    def _demo_clock(self, now: datetime | None):
        self.clock_frame(now)
        return self.clock_frame

    # -- bounce --

    def _demo_bounce(self, count: int):
        t = self.engine
        t.set_wrap(False)
        t.hide()
        bounce = Bounce(t, count)
        bounce.step()
        return bounce.step
