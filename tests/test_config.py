import pytest

from turtlecanvas.config import CanvasConfig, Config
from turtlecanvas.errors import ConfigError, InvalidArgumentError, coerce_number
from turtlecanvas.geometry import Bounds, Point, deg_to_rad, rad_to_deg, sin_cos
from turtlecanvas.turtle import Colour, Shape


def test_defaults():
    config = Config()
    assert (config.canvas.width, config.canvas.height) == (300, 300)
    assert config.history.max_size == 1 << 20
    assert config.text.font_path is None


def test_round_trip(tmp_path):
    path = tmp_path / "turtlecanvas.json"
    Config(canvas=CanvasConfig(width=640, height=480)).save(path)
    loaded = Config.load(path)
    assert loaded.canvas.width == 640
    assert loaded.canvas.height == 480


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        Config.load(tmp_path / "nope.json")


@pytest.mark.parametrize("text", ["{not json", '{"canvas": {"width": -5}}', "[1, 2]"])
def test_invalid_file(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text)
    with pytest.raises(ConfigError):
        Config.load(path)


def test_bounds():
    b = Bounds(300, 200)
    assert (b.min_x, b.max_x, b.min_y, b.max_y) == (-150, 150, -100, 100)
    assert b.contains(Point(150, -100))
    assert not b.contains(Point(150.5, 0))


def test_angles():
    assert deg_to_rad(180) == pytest.approx(3.141592653589793)
    assert rad_to_deg(deg_to_rad(33)) == pytest.approx(33)
    assert sin_cos(0) == (0.0, 1.0)


@pytest.mark.parametrize("value,expected", [(3, 3.0), (2.5, 2.5), ("7", 7.0), (" -1.5 ", -1.5)])
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


@pytest.mark.parametrize("value", ["", "abc", None, {}, float("nan"), float("-inf")])
def test_coerce_number_rejects(value):
    with pytest.raises(InvalidArgumentError):
        coerce_number(value, "x")


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        coerce_number("abc")


def test_colour_clamp_and_rgba():
    colour = Colour.clamped(300, -10, 0, 2)
    assert colour == Colour(255, 0, 0, 1)
    assert colour.to_rgba() == (255, 0, 0, 255)
    assert Colour.clamped(12, 34, 56, 0.5) == Colour(12, 34, 56, 0.5)


def test_shape_parse():
    assert Shape.parse("circle") is Shape.CIRCLE
    assert Shape.parse(Shape.SQUARE) is Shape.SQUARE
    assert Shape.parse("blob") is Shape.TRIANGLE
    assert Shape.parse(None) is Shape.TRIANGLE
    assert len(Shape.TURTLE.vertices) == 24
