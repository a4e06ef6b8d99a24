"""CLI for turtlecanvas."""

import logging
import random
from pathlib import Path

import click
from tqdm import tqdm

from .config import Config
from .errors import TurtleCanvasError


def _load_config(path: Path | None) -> Config:
    return Config.load(path) if path else Config()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """turtlecanvas - Turtle graphics on a wrapping canvas."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("name")
@click.option("--output", "-o", default="demo.png", type=Path)
@click.option("--frames", "-f", default=1, type=int, help="Frames for animated demos")
@click.option("--seed", "-s", type=int)
@click.option("--config", "-c", "config_path", type=Path)
def demo(name: str, output: Path, frames: int, seed: int | None, config_path: Path | None):
    """Draw a demo and save it as an image."""
    from .demos import DEMOS, DemoRunner
    from .engine import TurtleEngine

    try:
        engine = TurtleEngine(_load_config(config_path), random.Random(seed))
        next_frame = DemoRunner(engine).run(name)
    except TurtleCanvasError as e:
        raise click.ClickException(str(e))

    if next_frame is not None and frames > 1:
        for _ in tqdm(range(frames - 1), desc=DEMOS[name]["name"]):
            next_frame()

    engine.save(output)
    click.echo(f"Saved: {output}")


@main.command()
def demos():
    """List available demos."""
    from .demos import DEMOS

    for name, cfg in DEMOS.items():
        kind = f"animated, {cfg['interval_ms']} ms" if cfg["interval_ms"] else "static"
        click.echo(f"{name}: {cfg['name']} ({kind})")


@main.command()
def shapes():
    """List cursor shapes."""
    from .turtle import DEFAULT_SHAPE, Shape

    for shape in Shape:
        marker = " (default)" if shape is DEFAULT_SHAPE else ""
        click.echo(f"{shape.value}: {len(shape.vertices)} vertices{marker}")


@main.command()
@click.option("--output", "-o", type=Path, help="Save the drawing on exit")
@click.option("--config", "-c", "config_path", type=Path)
def console(output: Path | None, config_path: Path | None):
    """Interactive command prompt."""
    from .console import Console
    from .engine import TurtleEngine

    try:
        engine = TurtleEngine(_load_config(config_path))
    except TurtleCanvasError as e:
        raise click.ClickException(str(e))

    session = Console(engine)
    click.echo("Type :help for commands, :quit to leave.")
    while True:
        try:
            line = click.prompt("turtle", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        if line.strip() in (":quit", ":q"):
            break
        try:
            reply = session.execute(line)
        except TurtleCanvasError as e:
            click.echo(click.style(str(e), fg="red"))
            continue
        if reply:
            click.echo(reply)

    if output:
        engine.save(output)
        click.echo(f"Saved: {output}")


@main.command()
@click.option("--output", "-o", default="turtlecanvas.json", type=Path)
def config(output: Path):
    """Write the default configuration."""
    Config().save(output)
    click.echo(f"Saved: {output}")


if __name__ == "__main__":
    main()
