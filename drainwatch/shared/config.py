"""Locating and reading drainwatch config files."""

import os
from pathlib import Path
from typing import List, Optional, Union

import yaml
from dotenv import load_dotenv

# repo_root/drainwatch/shared/config.py -> repo_root/config/
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


def get_environment() -> str:
    """Environment name from DRAINWATCH_ENV, defaults to 'drainwatch'."""
    return os.getenv("DRAINWATCH_ENV", "drainwatch")


def get_config_path(
    config_name: Optional[str] = None,
    config_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Path of config-{environment}.yaml (or config_name) in config_dir."""
    config_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
    return config_dir / (config_name or f"config-{get_environment()}.yaml")


def config_search_paths(config_name: Optional[str] = None) -> List[Path]:
    """Candidate config files, in the order they are tried.

    The repo's config directory comes first, then the working directory,
    so an installed tool can still be pointed at a local file.
    """
    repo_path = get_config_path(config_name)
    return [repo_path, Path.cwd() / repo_path.name]


def find_config_file(path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Resolve the config file to load.

    Args:
        path: Explicit config file. If given it must exist.

    Returns:
        The first existing candidate, or None when there is no config file.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist.
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path

    for candidate in config_search_paths():
        if candidate.exists():
            return candidate
    return None


def load_yaml_config(config_path: Union[str, Path], load_env: bool = True) -> dict:
    """Read a YAML config file; an empty file gives an empty dict.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
    """
    if load_env:
        load_dotenv()

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_log_level(config: dict) -> str:
    """Log level from config, upper-cased, defaulting to INFO."""
    return str(config.get("log_level", "INFO")).upper()
