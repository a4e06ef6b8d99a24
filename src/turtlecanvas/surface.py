"""Raster drawing surface with a canvas-style transform stack."""

from contextlib import contextmanager

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from . import geometry

TRANSPARENT = (0, 0, 0, 0)


def load_font(size: int = 10, path: str | None = None) -> ImageFont.ImageFont:
    if path:
        return ImageFont.truetype(path, size)
    return ImageFont.load_default(size)


class Layer:
    """
    An RGBA image plus a current transform.

    Every primitive maps its points through the current transform before
    drawing, so callers can work in whatever coordinate system they set up
    with `translate`, `rotate` and `scale`. `save` and `restore` push and pop
    the transform, like a 2d canvas context.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)
        self.matrix = geometry.identity()
        self._stack: list[np.ndarray] = []

    # -- transform stack --

    def save(self):
        self._stack.append(self.matrix.copy())

    def restore(self):
        if self._stack:
            self.matrix = self._stack.pop()

    @contextmanager
    def scoped(self):
        self.save()
        try:
            yield self
        finally:
            self.restore()

    def reset_transform(self):
        self.matrix = geometry.identity()

    def translate(self, tx: float, ty: float):
        self.matrix = self.matrix @ geometry.translation(tx, ty)

    def rotate(self, angle: float):
        self.matrix = self.matrix @ geometry.rotation(angle)

    def scale(self, sx: float, sy: float):
        self.matrix = self.matrix @ geometry.scaling(sx, sy)

    def center_coords(self):
        """Origin at the centre of the layer, Y pointing up."""
        self.translate(self.width / 2, self.height / 2)
        self.scale(1, -1)

    def to_device(self, points) -> list[tuple[float, float]]:
        return geometry.apply(self.matrix, points)

    # -- primitives --

    def clear(self):
        self.image.paste(TRANSPARENT, (0, 0, self.width, self.height))

    def stroke(self, paths, width: float, colour: tuple[int, int, int, int]):
        """Stroke polylines; overlapping parts of one stroke are not blended twice."""
        overlay = Image.new("RGBA", self.image.size, TRANSPARENT)
        draw = ImageDraw.Draw(overlay)
        line_width = max(1, round(width))
        drawn = False
        for path in paths:
            pts = self.to_device(path)
            if len(pts) < 2:
                continue
            draw.line(pts, fill=colour, width=line_width, joint="curve")
            drawn = True
        if drawn:
            self.image.alpha_composite(overlay)

    def fill_polygon(self, points, colour: tuple[int, int, int, int]):
        pts = self.to_device(points)
        if not pts:
            return
        overlay = Image.new("RGBA", self.image.size, TRANSPARENT)
        draw = ImageDraw.Draw(overlay)
        if len(pts) >= 3:
            draw.polygon(pts, fill=colour)
        elif len(pts) == 2:
            draw.line(pts, fill=colour)
        else:
            draw.point(pts, fill=colour)
        self.image.alpha_composite(overlay)

    def text(self, point, message: str, font, colour: tuple[int, int, int, int]):
        """Draw `message` centred on `point`, always upright."""
        ((x, y),) = self.to_device([point])
        overlay = Image.new("RGBA", self.image.size, TRANSPARENT)
        ImageDraw.Draw(overlay).text((x, y), message, fill=colour, font=font, anchor="mm")
        self.image.alpha_composite(overlay)

    def copy(self) -> "Layer":
        layer = Layer(self.width, self.height)
        layer.image = self.image.copy()
        return layer

    def blit(self, other: "Layer"):
        """Compose `other` over this layer."""
        self.image.alpha_composite(other.image)

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        return self.image.getpixel((x, y))
