"""
Unit tests for mazepath.utils.exceptions.

Tests structured error messages, error codes and the validation helpers.
"""

import pytest

from mazepath.utils.exceptions import (
    DegenerateSeedError,
    InvalidConfigurationError,
    MazeError,
    UnreachableError,
    validate_cell,
    validate_dimensions,
)

# ===================================================================
# Test MazeError
# ===================================================================


@pytest.mark.unit
def test_maze_error_basic():
    error = MazeError("Something failed")

    assert str(error) == "[mazepath] Something failed"
    assert error.component == "mazepath"
    assert error.diagnostic_data == {}


@pytest.mark.unit
def test_maze_error_full_message():
    error = MazeError(
        "Something failed",
        component="Navigator",
        suggested_action="Try again",
        error_code="TEST_CODE",
        diagnostic_data={"cell": (1, 2)},
    )
    message = str(error)

    assert message.startswith("[Navigator] Something failed")
    assert "Suggestion: Try again" in message
    assert "Error Code: TEST_CODE" in message
    assert "Diagnostic Information:" in message
    assert "   - cell: (1, 2)" in message


# ===================================================================
# Test Subclasses
# ===================================================================


@pytest.mark.unit
def test_invalid_configuration_error():
    error = InvalidConfigurationError("width", -3, valid_range=(1, None), component="MazeGenerator")

    assert isinstance(error, MazeError)
    assert isinstance(error, ValueError)
    assert error.error_code == "INVALID_CONFIGURATION"
    assert error.parameter_name == "width"
    assert error.provided_value == -3
    assert error.diagnostic_data["valid_range"] == "[1, None]"
    assert "Increase width to at least 1" in error.suggested_action
    assert "Maze dimensions must be positive" in error.suggested_action


@pytest.mark.unit
def test_invalid_configuration_error_type_suggestion():
    error = InvalidConfigurationError("height", "10", expected_type=int)

    assert error.diagnostic_data["expected_type"] == "int"
    assert error.diagnostic_data["provided_type"] == "str"
    assert "Convert height to int" in error.suggested_action


@pytest.mark.unit
def test_invalid_configuration_error_default_suggestion():
    error = InvalidConfigurationError("goal", (9, 9), reason="outside grid")

    assert error.suggested_action == "Check goal value and try again"
    assert error.diagnostic_data["reason"] == "outside grid"


@pytest.mark.unit
def test_unreachable_error():
    error = UnreachableError(start=(0, 0), goal=(5, 5), component="PathFinder", reason="goal is a wall cell")

    assert error.start == (0, 0)
    assert error.goal == (5, 5)
    assert error.error_code == "UNREACHABLE"
    assert "No path from (0, 0) to (5, 5)" in str(error)
    assert not isinstance(error, ValueError)


@pytest.mark.unit
def test_degenerate_seed_error():
    error = DegenerateSeedError(1 << 32)

    assert isinstance(error, ValueError)
    assert error.seed == 1 << 32
    assert error.error_code == "DEGENERATE_SEED"
    assert error.diagnostic_data["masked_state"] == 0


# ===================================================================
# Test Validation Helpers
# ===================================================================


@pytest.mark.unit
def test_validate_dimensions_accepts_positive():
    validate_dimensions(1, 1)
    validate_dimensions(200, 100)


@pytest.mark.unit
@pytest.mark.parametrize(("width", "height", "name"), [(0, 1, "width"), (1, -1, "height"), (1.5, 2, "width")])
def test_validate_dimensions_rejects(width, height, name):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        validate_dimensions(width, height, component="test")

    assert exc_info.value.parameter_name == name
    assert exc_info.value.component == "test"


@pytest.mark.unit
def test_validate_dimensions_rejects_bool():
    with pytest.raises(InvalidConfigurationError):
        validate_dimensions(True, 3)


@pytest.mark.unit
def test_validate_cell():
    assert validate_cell((4, 6), (5, 3), "start") == (5, 3)
    assert validate_cell((4, 6), [0, 0], "start") == (0, 0)


@pytest.mark.unit
@pytest.mark.parametrize("cell", [(6, 0), (0, 4), (-1, 2), (1, 2, 3), None, 7])
def test_validate_cell_rejects(cell):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        validate_cell((4, 6), cell, "goal")

    assert exc_info.value.parameter_name == "goal"
