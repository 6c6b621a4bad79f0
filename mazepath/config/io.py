"""
YAML I/O for session configurations.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from .core import SessionConfig


def load_config(path: str | Path) -> SessionConfig:
    """
    Load a session configuration from a YAML file.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    SessionConfig
        Validated session configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValidationError
        If configuration is invalid
    yaml.YAMLError
        If YAML syntax is invalid

    YAML Format
    -----------
    maze:
      width: 40
      height: 20
      mutation_rate: 100
      seed: 12345
    navigator:
      max_steps: 500
    logging:
      level: INFO
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}

    return SessionConfig.model_validate(data)


def save_config(config: SessionConfig, path: str | Path) -> None:
    """
    Save a session configuration to a YAML file.

    Parameters
    ----------
    config : SessionConfig
        Configuration to save
    path : str | Path
        Output path, parent directories are created
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
