"""The turtle engine: the primitive operations scripts and demos call."""

import copy
import functools
import math
import random as _random
import threading
from collections.abc import Callable
from pathlib import Path

from PIL import Image

from .animation import Animator
from .config import Config
from .errors import InvalidArgumentError, coerce_number
from .geometry import Bounds, Point, deg_to_rad
from .motion import Segment, trace_forward
from .render import Renderer
from .turtle import Colour, Shape, TurtleState


def synchronized(method):
    """Hold the engine lock for the duration of `method`."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock:
            return method(self, *args, **kwargs)

    return wrapper


class TurtleEngine:
    """
    One turtle on one canvas.

    Mutating operations finish with `redraw()`, which only renders when the
    turtle's redraw flag is on. For long drawings turn it off with
    `set_redraw(False)`, draw, turn it back on and call `render()` once.
    """

    def __init__(self, config: Config | None = None, rng: _random.Random | None = None):
        self.config = config or Config()
        self.bounds = Bounds(self.config.canvas.width, self.config.canvas.height)
        self.renderer = Renderer(self.config)
        self.rng = rng or _random.Random()
        self.lock = threading.RLock()
        self._state = TurtleState()
        self.render()

    # -- inspection --

    @property
    def state(self) -> TurtleState:
        """A copy of the current turtle state."""
        with self.lock:
            return copy.deepcopy(self._state)

    @property
    def position(self) -> tuple[float, float]:
        with self.lock:
            return self._state.position.as_tuple()

    @property
    def heading(self) -> float:
        """Heading in radians, clockwise from up."""
        with self.lock:
            return self._state.heading

    @property
    def frame(self) -> Image.Image | None:
        with self.lock:
            return self.renderer.frame

    @synchronized
    def image(self) -> Image.Image:
        return self.renderer.snapshot()

    @synchronized
    def save(self, path: str | Path):
        self.renderer.snapshot().save(path)

    # -- rendering --

    @synchronized
    def redraw(self):
        if self._state.redraw:
            self.render()

    @synchronized
    def render(self) -> Image.Image:
        return self.renderer.present(self._state)

    @synchronized
    def clear(self):
        """Clear the drawing, leaving the turtle where it is."""
        self.renderer.clear()
        self.redraw()

    @synchronized
    def reset(self):
        """Clear everything and put a default turtle back at the origin."""
        self.renderer.reset()
        self.renderer.set_font(self.config.text.font_size, self.config.text.font_path)
        self._state = TurtleState()
        self.render()

    # -- motion --

    @synchronized
    def forward(self, distance) -> list[Segment]:
        distance = coerce_number(distance, "distance")
        state = self._state
        segments, end = trace_forward(
            state.position, state.heading, distance, self.bounds, state.wrap
        )
        if state.pen_down:
            self.renderer.stroke(segments, state)
        state.position = end
        self.redraw()
        return segments

    def back(self, distance) -> list[Segment]:
        return self.forward(-coerce_number(distance, "distance"))

    @synchronized
    def turn_right(self, angle):
        self._state.heading += deg_to_rad(coerce_number(angle, "angle"))
        self.redraw()

    @synchronized
    def turn_left(self, angle):
        self._state.heading -= deg_to_rad(coerce_number(angle, "angle"))
        self.redraw()

    @synchronized
    def set_heading(self, angle):
        self._state.heading = deg_to_rad(coerce_number(angle, "angle"))
        self.redraw()

    @synchronized
    def goto(self, x, y):
        """Jump to (x, y). Nothing is drawn on the way, whatever the pen state."""
        self._state.position = Point(coerce_number(x, "x"), coerce_number(y, "y"))
        self.redraw()

    # -- pen and style --

    @synchronized
    def pen_up(self):
        self._state.pen_down = False

    @synchronized
    def pen_down(self):
        self._state.pen_down = True

    @synchronized
    def set_width(self, width):
        width = coerce_number(width, "width")
        if width <= 0:
            raise InvalidArgumentError("width", width, "expected a positive number")
        self._state.width = width

    @synchronized
    def set_colour(self, r, g, b, a=1):
        self._state.colour = Colour.clamped(
            coerce_number(r, "r"),
            coerce_number(g, "g"),
            coerce_number(b, "b"),
            coerce_number(a, "a"),
        )

    set_color = set_colour

    @synchronized
    def set_shape(self, name):
        self._state.shape = Shape.parse(name)
        self.redraw()

    @synchronized
    def set_font(self, size, path: str | None = None):
        size = coerce_number(size, "size")
        if size <= 0:
            raise InvalidArgumentError("size", size, "expected a positive number")
        self.renderer.set_font(round(size), path)

    @synchronized
    def show(self):
        self._state.visible = True
        self.redraw()

    @synchronized
    def hide(self):
        self._state.visible = False
        self.redraw()

    @synchronized
    def set_wrap(self, wrap: bool):
        self._state.wrap = bool(wrap)

    @synchronized
    def set_redraw(self, redraw: bool):
        self._state.redraw = bool(redraw)

    @synchronized
    def write(self, text):
        """Write `text` centred on the turtle."""
        self.renderer.write(str(text), self._state)
        self.redraw()

    # -- helpers for scripts --

    @synchronized
    def random(self, low, high) -> int:
        """Uniform random integer in [low, high]."""
        low = coerce_number(low, "min")
        high = coerce_number(high, "max")
        return math.floor(self.rng.random() * (high - low + 1) + low)

    def repeat(self, n, action: Callable[[], object]):
        for _ in range(int(coerce_number(n, "n"))):
            action()

    def animate(self, callback: Callable[[], object], interval_ms) -> Animator:
        """Start calling `callback` every `interval_ms` milliseconds."""
        interval = coerce_number(interval_ms, "interval_ms") / 1000
        if interval <= 0:
            raise InvalidArgumentError("interval_ms", interval_ms, "expected a positive number")
        return Animator(callback, interval, self.lock).start()
