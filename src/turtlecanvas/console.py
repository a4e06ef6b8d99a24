"""Line-oriented command console over a fixed set of engine primitives."""

import logging
import shlex

from .engine import TurtleEngine
from .errors import ConsoleError, TurtleCanvasError
from .history import History

LOG = logging.getLogger(__name__)

# name -> (engine method, min args, max args)
COMMANDS = {
    "forward": ("forward", 1, 1),
    "back": ("back", 1, 1),
    "left": ("turn_left", 1, 1),
    "right": ("turn_right", 1, 1),
    "goto": ("goto", 2, 2),
    "heading": ("set_heading", 1, 1),
    "penup": ("pen_up", 0, 0),
    "pendown": ("pen_down", 0, 0),
    "width": ("set_width", 1, 1),
    "colour": ("set_colour", 3, 4),
    "shape": ("set_shape", 1, 1),
    "font": ("set_font", 1, 1),
    "show": ("show", 0, 0),
    "hide": ("hide", 0, 0),
    "wrap": ("set_wrap", 1, 1),
    "redraw": ("set_redraw", 1, 1),
    "render": ("render", 0, 0),
    "clear": ("clear", 0, 0),
    "reset": ("reset", 0, 0),
    "write": ("write", 1, 1),
}

ALIASES = {
    "fd": "forward",
    "bk": "back",
    "lt": "left",
    "rt": "right",
    "pu": "penup",
    "pd": "pendown",
    "color": "colour",
    "seth": "heading",
}

# commands whose single argument is a flag rather than a number
FLAGS = {"wrap", "redraw"}
TRUE_WORDS = {"1", "true", "on", "yes"}
FALSE_WORDS = {"0", "false", "off", "no"}


def _flag(word: str) -> bool:
    lowered = word.lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    raise ConsoleError(f"Expected on/off, got {word!r}")


class Console:
    """
    Runs one command per line against an engine.

    Lines are split shell-style; the first word picks a primitive from
    COMMANDS (or ALIASES) and the remaining words are its arguments. Several
    commands can share a line separated by `;`. Lines starting with `:` are
    meta commands for walking the history and are not recorded.
    """

    def __init__(self, engine: TurtleEngine, history: History | None = None):
        self.engine = engine
        self.history = history if history is not None else History(engine.config.history.max_size)

    def execute(self, line: str) -> str | None:
        """Run `line`; returns text for the user, if any."""
        line = line.strip()
        if not line:
            return None
        if line.startswith(":"):
            return self._meta(line[1:].strip())

        self.history.record(line)
        try:
            commands = self._split(line)
        except ValueError as e:
            raise ConsoleError(str(e)) from e

        for command in commands:
            self._run(command)
        return None

    @staticmethod
    def _split(line: str) -> list[list[str]]:
        lexer = shlex.shlex(line, posix=True, punctuation_chars=";")
        lexer.whitespace_split = True
        lexer.commenters = ""
        commands = [[]]
        for token in lexer:
            # a run of `;` comes back as one token
            if token and not token.strip(";"):
                commands.append([])
            else:
                commands[-1].append(token)
        return [c for c in commands if c]

    def _run(self, words: list[str]):
        name, args = words[0].lower(), words[1:]
        name = ALIASES.get(name, name)
        if name not in COMMANDS:
            raise ConsoleError(f"Unknown command: {words[0]}")

        method, low, high = COMMANDS[name]
        if not low <= len(args) <= high:
            expected = str(low) if low == high else f"{low}-{high}"
            raise ConsoleError(f"{name} takes {expected} argument(s), got {len(args)}")

        if name in FLAGS:
            args = [_flag(a) for a in args]

        LOG.debug("console: %s%s", method, tuple(args))
        try:
            getattr(self.engine, method)(*args)
        except TurtleCanvasError as e:
            raise ConsoleError(f"{name}: {e}") from e

    def _meta(self, word: str) -> str:
        if word == "prev":
            return self.history.recall_previous()
        if word == "next":
            return self.history.recall_next()
        if word == "history":
            return "\n".join(f"{i:4d}  {entry}" for i, entry in enumerate(self.history))
        if word == "help":
            return "Commands: " + ", ".join(sorted(COMMANDS)) + "\nMeta: :prev :next :history :help"
        raise ConsoleError(f"Unknown meta command: :{word}")
