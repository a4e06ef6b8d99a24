"""Two-layer rendering: the persistent drawing and the transient cursor."""

from collections.abc import Callable

from PIL import Image

from .config import Config
from .motion import Segment
from .surface import Layer, load_font
from .turtle import Shape, TurtleState


class Renderer:
    """
    Owns the two layers and composes them into frames.

    The persistent layer accumulates strokes and text until cleared. The
    transient layer is wiped and redrawn on every frame and only ever holds
    the cursor. Frames always put the cursor on top of the drawing.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        canvas = self.config.canvas
        self.persistent = Layer(canvas.width, canvas.height)
        self.transient = Layer(canvas.width, canvas.height)
        self.font = load_font(self.config.text.font_size, self.config.text.font_path)
        self.frame: Image.Image | None = None
        self.frames = 0
        self._listeners: list[Callable[[Image.Image], None]] = []

    def add_listener(self, listener: Callable[[Image.Image], None]):
        """Call `listener(frame)` after every presented frame."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[Image.Image], None]):
        self._listeners.remove(listener)

    def set_font(self, size: int, path: str | None = None):
        self.font = load_font(size, path)

    # -- persistent layer --

    def stroke(self, segments: list[Segment], state: TurtleState):
        if not segments:
            return
        paths = [(s.start.as_tuple(), s.end.as_tuple()) for s in segments]
        with self.persistent.scoped() as layer:
            layer.center_coords()
            layer.stroke(paths, state.width, state.colour.to_rgba())

    def write(self, message: str, state: TurtleState):
        with self.persistent.scoped() as layer:
            layer.center_coords()
            layer.text(
                state.position.as_tuple(), message, self.font, self.config.text.colour
            )

    def clear(self):
        """Erase the drawing. The cursor layer is left alone."""
        self.persistent.clear()

    def reset(self):
        self.persistent.clear()
        self.transient.clear()
        self.frame = None

    # -- transient layer --

    def draw_cursor(self, state: TurtleState):
        layer = self.transient
        layer.clear()
        if not state.visible:
            return

        x, y = state.position.as_tuple()
        vertices = Shape.parse(state.shape).vertices
        if len(vertices) < 1:
            return

        with layer.scoped():
            layer.center_coords()
            # rotate about the turtle's own position
            layer.translate(x, y)
            layer.rotate(-state.heading)
            layer.translate(-x, -y)
            layer.fill_polygon(
                [(x + cx, y + cy) for cx, cy in vertices], self.config.cursor.fill
            )

    # -- frames --

    def compose(self) -> Image.Image:
        """Drawing beneath, cursor on top."""
        frame = self.persistent.copy()
        frame.blit(self.transient)
        return frame.image

    def present(self, state: TurtleState) -> Image.Image:
        self.draw_cursor(state)
        self.frame = self.compose()
        self.frames += 1
        for listener in list(self._listeners):
            listener(self.frame)
        return self.frame

    def snapshot(self, background=None) -> Image.Image:
        """The last frame over an opaque background."""
        background = background or self.config.canvas.background
        frame = self.frame if self.frame is not None else self.compose()
        image = Image.new("RGBA", frame.size, tuple(background))
        image.alpha_composite(frame)
        return image.convert("RGB")
