"""
Exception classes for mazepath with helpful error messages and user guidance.

Every error carries the component that raised it, an optional suggested
action, a stable error code and a small dictionary of diagnostic values.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation and path finding errors.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "mazepath"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidConfigurationError(MazeError, ValueError):
    """Exception raised when a maze parameter or endpoint is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
        reason: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        if reason:
            diagnostic_data["reason"] = reason

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        self.parameter_name = parameter_name
        self.provided_value = provided_value

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class UnreachableError(MazeError):
    """Exception raised when two cells are not connected along PATH cells."""

    def __init__(
        self,
        start: tuple[int, int],
        goal: tuple[int, int] | None,
        component: str | None = None,
        reason: str | None = None,
    ):
        diagnostic_data: dict[str, Any] = {"start": start, "goal": goal}
        if reason:
            diagnostic_data["reason"] = reason

        self.start = start
        self.goal = goal

        super().__init__(
            message=f"No path from {start} to {goal}",
            component=component,
            suggested_action="Regenerate the maze with a different seed or pick endpoints on PATH cells",
            error_code="UNREACHABLE",
            diagnostic_data=diagnostic_data,
        )


class DegenerateSeedError(MazeError, ValueError):
    """Exception raised when a seed would put xorshift into its zero fixed point."""

    def __init__(self, seed: int, component: str | None = None):
        self.seed = seed

        super().__init__(
            message=f"Seed {seed} leaves the generator in its zero state",
            component=component,
            suggested_action="Use a seed whose low 32 bits are not all zero, or omit it for a time-derived seed",
            error_code="DEGENERATE_SEED",
            diagnostic_data={"seed": seed, "masked_state": seed & 0xFFFFFFFF},
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif valid_range[1] is not None and provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if parameter_name in ("width", "height") and isinstance(provided_value, int) and provided_value <= 0:
        suggestions.append("Maze dimensions must be positive")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios


def validate_dimensions(width: Any, height: Any, component: str | None = None) -> None:
    """Validate logical maze dimensions (positive integers)."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigurationError(name, value, expected_type=int, component=component)
        if value < 1:
            raise InvalidConfigurationError(name, value, valid_range=(1, None), component=component)


def validate_cell(
    shape: tuple[int, int],
    cell: Any,
    parameter_name: str,
    component: str | None = None,
) -> tuple[int, int]:
    """
    Validate an ``(x, y)`` cell against an array shape ``(height, width)``.

    Returns:
        The cell as a tuple of two ints
    """
    try:
        x, y = (int(c) for c in cell)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            parameter_name, cell, expected_type=tuple, component=component, reason="expected an (x, y) pair"
        ) from e

    height, width = shape
    if not (0 <= x < width and 0 <= y < height):
        raise InvalidConfigurationError(
            parameter_name,
            cell,
            component=component,
            reason=f"outside grid of width {width} and height {height}",
        )
    return x, y
