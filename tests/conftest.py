import random

import pytest

from turtlecanvas.config import Config
from turtlecanvas.engine import TurtleEngine
from turtlecanvas.geometry import Bounds


@pytest.fixture
def bounds():
    return Bounds(300, 300)


@pytest.fixture
def engine():
    return TurtleEngine(Config(), random.Random(1234))
