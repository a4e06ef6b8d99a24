"""Exceptions and argument coercion."""

import math
import numbers


class TurtleCanvasError(Exception):
    """Base for all turtlecanvas errors"""


class InvalidArgumentError(TurtleCanvasError, ValueError):
    """Invalid argument"""

    def __init__(self, name: str, value, reason: str = "expected a number"):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}: {reason}, got {value!r}")


class HistoryError(TurtleCanvasError, ValueError):
    """Invalid history budget"""


class ConfigError(TurtleCanvasError):
    """Error loading configuration"""


class DemoError(TurtleCanvasError):
    """Unknown demo"""


class ConsoleError(TurtleCanvasError):
    """Console command could not be run"""


def coerce_number(value, name: str = "value") -> float:
    """Coerce ints, floats and numeric strings to a finite float."""
    if isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            raise InvalidArgumentError(name, value) from None
    elif isinstance(value, numbers.Real):
        result = float(value)
    else:
        raise InvalidArgumentError(name, value)

    if not math.isfinite(result):
        raise InvalidArgumentError(name, value, "expected a finite number")
    return result
