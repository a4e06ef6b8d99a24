"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

RGBA = tuple[int, int, int, int]


class CanvasConfig(BaseModel):
    width: int = Field(300, gt=0)
    height: int = Field(300, gt=0)
    background: RGBA = (255, 255, 255, 255)


class CursorConfig(BaseModel):
    fill: RGBA = (0, 128, 0, 255)


class TextConfig(BaseModel):
    font_path: str | None = None
    font_size: int = Field(10, gt=0)
    colour: RGBA = (0, 0, 0, 255)


class HistoryConfig(BaseModel):
    max_size: int = Field(1 << 20, ge=0)


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    cursor: CursorConfig = CursorConfig()
    text: TextConfig = TextConfig()
    history: HistoryConfig = HistoryConfig()

    @classmethod
    def load(cls, path: str | Path = "turtlecanvas.json") -> "Config":
        try:
            with open(path) as f:
                return cls(**json.load(f))
        except FileNotFoundError:
            raise ConfigError(f"{path} not found") from None
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            raise ConfigError(f"{path}: {e}") from e

    def save(self, path: str | Path = "turtlecanvas.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
