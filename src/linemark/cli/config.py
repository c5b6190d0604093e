#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the linemark CLI.

Config files supply option defaults. Supported formats are TOML, YAML, JSON
and a ``[tool.linemark]`` table in ``pyproject.toml``.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEDICATED_CONFIG_FILENAMES = [".linemark.toml", ".linemark.yaml", ".linemark.yml", ".linemark.json"]
PYPROJECT_FILENAME = "pyproject.toml"


def _require_mapping(config: Any, config_path: Path, kind: str) -> Dict[str, Any]:
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"{kind} config file {config_path} must contain a table at root level, got {type(config).__name__}"
        )
    return config


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.linemark]`` table from a pyproject.toml file.

    Returns
    -------
    dict
        The table's contents, or an empty dict when the table is absent

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is not valid TOML or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    section = data.get("tool", {}).get("linemark")
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.linemark] section in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    return _require_mapping(config, config_path, "TOML")


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    # An empty YAML document loads as None
    if config is None:
        return {}
    return _require_mapping(config, config_path, "YAML")


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    return _require_mapping(config, config_path, "JSON")


_LOADERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _load_toml_config,
    ".yaml": _load_yaml_config,
    ".yml": _load_yaml_config,
    ".json": _load_json_config,
}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported extension

    Examples
    --------
    >>> config = load_config_file(".linemark.toml")
    >>> print(config.get("log_level"))
    INFO

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)

    loader = _LOADERS.get(config_path.suffix.lower())
    if loader is None:
        raise argparse.ArgumentTypeError(
            f"Unsupported config file format: {config_path.suffix}. Use .json, .toml, or .yaml"
        )

    try:
        config = loader(config_path)
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    logger.debug("Loaded %d option(s) from %s", len(config), config_path)
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root. In each directory the
    dedicated config files are checked in order (``.linemark.toml``,
    ``.linemark.yaml``, ``.linemark.yml``, ``.linemark.json``), followed by a
    ``pyproject.toml`` that has a ``[tool.linemark]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None, home_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The parent-directory search of :func:`find_config_in_parents` runs first;
    the dedicated config files in the user's home directory are the fallback.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = home_dir or Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> tuple[Dict[str, Any], Optional[Path]]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (LINEMARK_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    tuple[dict, Path or None]
        The loaded configuration (empty when none was found) and the file it
        came from

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    path_str = explicit_path or env_var_path
    if path_str:
        return load_config_file(path_str), Path(path_str)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path), discovered_path

    return {}, None
