"""
Unit tests for the mazepath command-line interface.

Tests the generate, solve and walk commands through click's CliRunner,
including error exits for invalid input.
"""

import pytest
from click.testing import CliRunner

from mazepath import __version__
from mazepath.cli import main
from mazepath.config import SessionConfig, save_config


@pytest.fixture
def runner():
    return CliRunner()


# ===================================================================
# Test generate
# ===================================================================


@pytest.mark.unit
def test_generate_scenario(runner):
    result = runner.invoke(main, ["generate", "-w", "3", "-h", "3", "-s", "12345", "-m", "0"])

    assert result.exit_code == 0, result.output
    assert "Seed state: 12345" in result.output
    assert "Logical grid: 3x3, 8 passages" in result.output
    assert "Perfect maze: True" in result.output
    assert "Physical grid: 6x6, 17 PATH cells" in result.output
    assert "PATH cells connected: True" in result.output


@pytest.mark.unit
def test_generate_ascii_dump(runner):
    result = runner.invoke(main, ["generate", "-w", "4", "-h", "2", "-s", "7", "-m", "0"])
    lines = result.output.rstrip("\n").split("\n")

    assert result.exit_code == 0
    assert lines[-1][0] == " "
    assert all(len(line) == 8 for line in lines[-4:])


@pytest.mark.unit
def test_generate_no_ascii(runner):
    result = runner.invoke(main, ["generate", "-w", "4", "-h", "2", "-s", "7", "--no-ascii"])

    assert result.exit_code == 0
    assert "#" not in result.output


@pytest.mark.unit
def test_generate_deterministic(runner):
    args = ["generate", "-w", "10", "-h", "6", "-s", "99", "-m", "10"]

    assert runner.invoke(main, args).output == runner.invoke(main, args).output


@pytest.mark.unit
@pytest.mark.parametrize(
    ("args", "fragment"),
    [
        (["-w", "0"], "INVALID_CONFIGURATION"),
        (["-h", "-2"], "INVALID_CONFIGURATION"),
        (["-s", "0"], "DEGENERATE_SEED"),
    ],
)
def test_generate_invalid_input(runner, args, fragment):
    result = runner.invoke(main, ["generate", *args])

    assert result.exit_code == 1
    assert fragment in result.output


@pytest.mark.unit
def test_negative_mutation_rate_rejected_by_click(runner):
    result = runner.invoke(main, ["generate", "-m", "-1"])

    assert result.exit_code == 2


# ===================================================================
# Test solve
# ===================================================================


@pytest.mark.unit
def test_solve_scenario(runner):
    result = runner.invoke(main, ["solve", "-w", "3", "-h", "3", "-s", "12345", "-m", "0", "--goal", "4", "4"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    steps = int(lines[0].split(": ")[1])
    cells = lines[1].removeprefix("Path: ").split(" ")
    assert cells[0] == "(0,0)"
    assert cells[-1] == "(4,4)"
    assert len(cells) - 1 == steps


@pytest.mark.unit
def test_solve_with_ascii(runner):
    result = runner.invoke(
        main, ["solve", "-w", "3", "-h", "3", "-s", "12345", "-m", "0", "--goal", "4", "4", "--ascii"]
    )

    assert result.exit_code == 0
    assert "@" in result.output
    assert "G" in result.output


@pytest.mark.unit
def test_solve_goal_on_wall(runner):
    result = runner.invoke(main, ["solve", "-w", "3", "-h", "3", "-s", "12345", "-m", "0", "--goal", "5", "5"])

    assert result.exit_code == 1
    assert "UNREACHABLE" in result.output


@pytest.mark.unit
def test_solve_goal_out_of_bounds(runner):
    result = runner.invoke(main, ["solve", "-w", "3", "-h", "3", "-s", "1", "--goal", "6", "0"])

    assert result.exit_code == 1
    assert "INVALID_CONFIGURATION" in result.output


@pytest.mark.unit
def test_solve_requires_goal(runner):
    result = runner.invoke(main, ["solve", "-s", "1"])

    assert result.exit_code == 2


# ===================================================================
# Test walk
# ===================================================================


@pytest.mark.unit
def test_walk(runner):
    result = runner.invoke(main, ["walk", "-w", "6", "-h", "4", "-s", "9", "-m", "10", "-n", "300"])

    assert result.exit_code == 0, result.output
    assert "Steps taken: 300" in result.output
    assert "Goals reached:" in result.output
    assert "Final position:" in result.output


@pytest.mark.unit
def test_walk_from_config(runner, tmp_path):
    path = tmp_path / "session.yaml"
    save_config(
        SessionConfig(
            maze={"width": 5, "height": 5, "seed": 21},
            navigator={"max_steps": 50},
            logging={"use_colors": False},
        ),
        path,
    )

    result = runner.invoke(main, ["walk", "--config", str(path)])

    assert result.exit_code == 0, result.output
    assert "Steps taken: 50" in result.output


@pytest.mark.unit
def test_walk_invalid_config(runner, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("maze:\n  width: 0\n")

    result = runner.invoke(main, ["walk", "--config", str(path)])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_walk_options_override_config(runner, tmp_path):
    path = tmp_path / "session.yaml"
    save_config(SessionConfig(maze={"width": 5, "height": 5, "seed": 21}, navigator={"max_steps": 50}), path)

    result = runner.invoke(main, ["walk", "--config", str(path), "-n", "20", "--width", "8"])

    assert result.exit_code == 0, result.output
    assert "Maze 8x5, mutation rate 100" in result.output
    assert "Steps taken: 20" in result.output


@pytest.mark.unit
def test_walk_config_keeps_unset_options(runner, tmp_path):
    """Option defaults never replace values from the file."""
    path = tmp_path / "session.yaml"
    save_config(SessionConfig(maze={"width": 7, "height": 3, "seed": 21, "mutation_rate": 0}), path)

    result = runner.invoke(main, ["walk", "--config", str(path), "-s", "22"])

    assert result.exit_code == 0, result.output
    assert "Maze 7x3, mutation rate 0" in result.output
    assert "Steps taken: 1000" in result.output


@pytest.mark.unit
def test_walk_invalid_override(runner, tmp_path):
    path = tmp_path / "session.yaml"
    save_config(SessionConfig(maze={"width": 5, "height": 5, "seed": 21}), path)

    result = runner.invoke(main, ["walk", "--config", str(path), "--height", "0"])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_walk_degenerate_seed(runner):
    result = runner.invoke(main, ["walk", "-s", "0"])

    assert result.exit_code == 1


# ===================================================================
# Test group
# ===================================================================


@pytest.mark.unit
def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.unit
def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    for command in ("generate", "solve", "walk"):
        assert command in result.output
