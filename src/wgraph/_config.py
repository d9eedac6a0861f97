"""Configuration loading from pyproject.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, PositiveFloat, ValidationError

from ._errors import ConfigError
from ._io import DEFAULT_TRANSPORT_WEIGHTS
from ._shortest_path import HEURISTIC_SCALE


class WgraphConfig(BaseModel):
    """Configuration loaded from the ``[tool.wgraph]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    edges: Path | None = None
    coordinates: Path | None = None
    heuristic_scale: NonNegativeFloat = HEURISTIC_SCALE
    weights: dict[str, PositiveFloat] = Field(default_factory=lambda: dict(DEFAULT_TRANSPORT_WEIGHTS))
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> WgraphConfig:
    """Load and validate [tool.wgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed WgraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("wgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.wgraph] configuration: expected a table"
        raise ConfigError(msg)

    # Mode weights from the file override the defaults one by one
    weights = dict(DEFAULT_TRANSPORT_WEIGHTS)
    raw_weights = section.get("weights", {})
    if not isinstance(raw_weights, dict):
        msg = "Invalid [tool.wgraph].weights: expected a table"
        raise ConfigError(msg)
    weights.update(raw_weights)

    try:
        config = WgraphConfig.model_validate(
            {**section, "weights": weights, "project_root": project_root},
        )
    except ValidationError as e:
        msg = f"Invalid [tool.wgraph] configuration in {pyproject_path}:\n{e}"
        raise ConfigError(msg) from e

    # Resolve relative paths against the project root
    updates = {
        name: project_root / path
        for name in ("edges", "coordinates")
        if (path := getattr(config, name)) is not None and not path.is_absolute()
    }
    return config.model_copy(update=updates)


def get_config() -> WgraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        WgraphConfig (defaults if no pyproject.toml or no [tool.wgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return WgraphConfig()
    return load_config(pyproject_path)
