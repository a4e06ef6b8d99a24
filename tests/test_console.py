import math

import pytest

from turtlecanvas.console import Console
from turtlecanvas.errors import ConsoleError
from turtlecanvas.history import History
from turtlecanvas.turtle import Colour, Shape


@pytest.fixture
def console(engine):
    return Console(engine)


def test_runs_primitives(console, engine):
    console.execute("forward 50")
    console.execute("right 90")
    console.execute("fd 25")
    assert engine.position == pytest.approx((25, 50))
    assert engine.heading == pytest.approx(math.pi / 2)


def test_several_commands_per_line(console, engine):
    console.execute("pu; goto 10 20 ; pd")
    assert engine.position == (10, 20)
    assert engine.state.pen_down


@pytest.mark.parametrize("line", ["fd 100;rt 90", "fd 100 ;rt 90", "fd 100;; rt 90"])
def test_semicolon_needs_no_spaces(console, engine, line):
    console.execute(line)
    assert engine.position == pytest.approx((0, 100))
    assert engine.heading == pytest.approx(math.pi / 2)


def test_semicolon_inside_quotes_is_text(console, engine, monkeypatch):
    written = []
    monkeypatch.setattr(engine, "write", written.append)
    console.execute('write "done;"; write "a; b"')
    assert written == ["done;", "a; b"]


def test_unclosed_quote(console):
    with pytest.raises(ConsoleError, match="quotation"):
        console.execute('write "oops')


def test_colour_with_optional_alpha(console, engine):
    console.execute("colour 10 20 30")
    assert engine.state.colour == Colour(10, 20, 30, 1)
    console.execute("color 300 0 0 0.5")
    assert engine.state.colour == Colour(255, 0, 0, 0.5)


def test_flags(console, engine):
    console.execute("wrap off")
    assert not engine.state.wrap
    console.execute("redraw no")
    assert not engine.state.redraw
    with pytest.raises(ConsoleError):
        console.execute("wrap maybe")


def test_quoted_text(console, engine):
    console.execute('write "hello there"')
    assert engine.renderer.persistent.image.getbbox() is not None


def test_shape(console, engine):
    console.execute("shape turtle")
    assert engine.state.shape is Shape.TURTLE


def test_unknown_command(console):
    with pytest.raises(ConsoleError, match="Unknown command"):
        console.execute("launch rockets")


def test_bad_arity(console):
    with pytest.raises(ConsoleError, match="takes 2"):
        console.execute("goto 1")


def test_bad_number(console):
    with pytest.raises(ConsoleError, match="distance"):
        console.execute("forward far")


def test_no_code_is_evaluated(console):
    with pytest.raises(ConsoleError):
        console.execute("__import__('os').system('true')")


def test_commands_are_recorded(engine):
    history = History()
    console = Console(engine, history)
    console.execute("fd 10")
    console.execute("rt 45")
    console.execute("")
    assert list(history) == ["fd 10", "rt 45"]


def test_failed_commands_are_still_recorded(console):
    with pytest.raises(ConsoleError):
        console.execute("bogus")
    assert console.history.newest() == "bogus"


def test_meta_recall(console):
    console.execute("fd 10")
    console.execute("rt 45")
    assert console.execute(":prev") == "rt 45"
    assert console.execute(":prev") == "fd 10"
    assert console.execute(":prev") == "fd 10"
    assert console.execute(":next") == "rt 45"
    assert console.execute(":next") == ""
    # meta commands are not recorded
    assert len(console.history) == 2


def test_meta_history_and_help(console):
    console.execute("fd 10")
    assert "fd 10" in console.execute(":history")
    assert "forward" in console.execute(":help")
    with pytest.raises(ConsoleError):
        console.execute(":bogus")


def test_history_budget_from_config(engine):
    assert Console(engine).history.max_size == engine.config.history.max_size
