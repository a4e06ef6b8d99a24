"""turtlecanvas - Turtle graphics on a wrapping canvas."""

from .config import Config
from .engine import TurtleEngine
from .history import History
from .turtle import Colour, Shape, TurtleState

__version__ = "0.1.0"

__all__ = ["Colour", "Config", "History", "Shape", "TurtleEngine", "TurtleState"]
