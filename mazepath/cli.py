"""
Command-line interface for mazepath.

Generate mazes, solve them between two cells, and walk a navigator through
them from the terminal.
"""

import sys

import click
import yaml
from click.core import ParameterSource

from mazepath import __version__
from mazepath.alg import MazeSession, PathFinder
from mazepath.config import LoggingConfig, MazeConfig, NavigatorConfig, SessionConfig, load_config
from mazepath.core import XorShiftRandom
from mazepath.geometry import MazeGenerator, verify_path_connectivity, verify_perfect_maze
from mazepath.utils import MazeError, configure_logging_from, get_logger

logger = get_logger(__name__)


def maze_options(func):
    """Options shared by every command that builds a maze."""
    func = click.option("--verbose", "-v", is_flag=True, help="Enable DEBUG logging")(func)
    func = click.option(
        "--mutation-rate", "-m", type=click.IntRange(min=0), default=100, show_default=True,
        help="Each wall opens with probability 1/RATE, 0 disables",
    )(func)
    func = click.option("--seed", "-s", type=int, default=None, help="xorshift seed (default: time-derived)")(func)
    func = click.option("--height", "-h", type=int, default=10, show_default=True, help="Logical maze height")(func)
    func = click.option("--width", "-w", type=int, default=20, show_default=True, help="Logical maze width")(func)
    return func


def _setup_logging(verbose: bool, logging_config: LoggingConfig | None = None) -> None:
    configure_logging_from(logging_config or LoggingConfig(), verbose=verbose)


def _fail(error: Exception) -> None:
    logger.error(f"{type(error).__name__}: {error}")
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="mazepath")
def main():
    """
    mazepath: grid maze generation and shortest paths

    Builds perfect mazes with recursive backtracking, relaxes them with
    random wall mutation, and walks shortest routes between cells.
    """


@main.command()
@maze_options
@click.option("--ascii/--no-ascii", "show_ascii", default=True, help="Print the maze as text")
def generate(width, height, seed, mutation_rate, verbose, show_ascii):
    """
    Generate a maze and report its structure.

    Examples:
        mazepath generate --width 20 --height 10 --seed 12345
        mazepath generate -w 40 -h 20 -m 0 --no-ascii
    """
    _setup_logging(verbose)
    try:
        rng = XorShiftRandom(seed)
        click.echo(f"Seed state: {rng.state}")
        logical, physical = MazeGenerator.generate(width, height, rng, mutation_rate)
    except MazeError as e:
        _fail(e)

    verification = verify_perfect_maze(logical)
    click.echo(f"Logical grid: {logical.width}x{logical.height}, {logical.edge_count()} passages")
    click.echo(f"Perfect maze: {verification['is_perfect']}")
    click.echo(f"Physical grid: {physical.width}x{physical.height}, {physical.path_count()} PATH cells")
    click.echo(f"PATH cells connected: {verify_path_connectivity(physical)}")

    if show_ascii:
        click.echo(physical.to_ascii())


@main.command()
@maze_options
@click.option("--start", nargs=2, type=int, default=(0, 0), show_default=True, help="Start cell X Y")
@click.option("--goal", nargs=2, type=int, required=True, help="Goal cell X Y")
@click.option("--ascii/--no-ascii", "show_ascii", default=False, help="Print the maze with the path")
def solve(width, height, seed, mutation_rate, verbose, start, goal, show_ascii):
    """
    Print the shortest path between two physical cells.

    Examples:
        mazepath solve -w 3 -h 3 -s 12345 -m 0 --start 0 0 --goal 4 4
    """
    _setup_logging(verbose)
    try:
        rng = XorShiftRandom(seed)
        _, physical = MazeGenerator.generate(width, height, rng, mutation_rate)
        path = PathFinder().find_path(physical, tuple(start), tuple(goal))
    except MazeError as e:
        _fail(e)

    click.echo(f"Steps: {len(path) - 1}")
    click.echo("Path: " + " ".join(f"({x},{y})" for x, y in path))

    if show_ascii:
        click.echo(physical.to_ascii(path=path, position=path[0], goal=path[-1]))


@main.command()
@maze_options
@click.option("--steps", "-n", type=click.IntRange(min=0), default=1000, show_default=True, help="advance() calls")
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None,
    help="YAML session configuration; options given on the command line take precedence",
)
@click.pass_context
def walk(ctx, width, height, seed, mutation_rate, verbose, steps, config_path):
    """
    Walk a navigator through a maze and report the goals it reaches.

    Examples:
        mazepath walk -w 50 -h 25 --steps 5000
        mazepath walk --config session.yaml
        mazepath walk --config session.yaml --seed 7 -n 200
    """
    try:
        if config_path is not None:
            config = _override_config(ctx, load_config(config_path))
        else:
            config = SessionConfig(
                maze=MazeConfig(width=width, height=height, mutation_rate=mutation_rate, seed=seed),
                navigator=NavigatorConfig(max_steps=steps),
            )
    except (OSError, ValueError, yaml.YAMLError) as e:
        _setup_logging(verbose)
        _fail(e)

    _setup_logging(verbose, config.logging)
    try:
        session = MazeSession(config)
        navigator = session.new_maze()
        click.echo(f"Maze {config.maze.width}x{config.maze.height}, mutation rate {config.maze.mutation_rate}")
        click.echo(f"Start {navigator.position}, first goal {navigator.goal} ({navigator.remaining_steps} steps)")
        reached = session.walk()
    except MazeError as e:
        _fail(e)

    click.echo(f"Steps taken: {config.navigator.max_steps}")
    click.echo(f"Goals reached: {reached}")
    click.echo(f"Final position: {navigator.position}, current goal: {navigator.goal}")


def _override_config(ctx: click.Context, config: SessionConfig) -> SessionConfig:
    """Replace config values with the options typed on the command line."""
    explicit = {
        name: ctx.params[name]
        for name in ("width", "height", "seed", "mutation_rate", "steps")
        if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE
    }
    if not explicit:
        return config

    logger.debug(f"Command-line options override the config file: {sorted(explicit)}")
    steps = explicit.pop("steps", config.navigator.max_steps)
    return SessionConfig(
        maze=MazeConfig.model_validate({**config.maze.model_dump(), **explicit}),
        navigator=NavigatorConfig(max_steps=steps),
        logging=config.logging,
    )


if __name__ == "__main__":
    main()
