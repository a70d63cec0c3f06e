#!/usr/bin/env python3

import os
import json
import tomllib
from dataclasses import dataclass
from pathlib import Path

import logging
import sys

from .exit_codes import ConfigError

# Progress and errors go to stderr; stdout belongs to make
_handler = logging.StreamHandler(sys.stderr)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[_handler]
)
logger = logging.getLogger("omzport")

MAKEFILE_NAME = "Makefile"
DISTINFO_NAME = "distinfo"
PLIST_NAME = "pkg-plist"


def check_files_exist(*paths):
    """
    Verify that every path exists and is a regular file.

    Raises:
        ConfigError: on the first path that is missing or is a directory
    """
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"{path} does not exist. Please check your --omz-port parameter")
        if path.is_dir():
            raise ConfigError(
                f"{path} is a directory, and it must be a file. "
                f"Please check your --omz-port parameter"
            )


@dataclass(frozen=True)
class PortConfig:
    """Paths of the managed port files plus per-run flags."""
    port_path: Path
    makefile_path: Path
    distinfo_path: Path
    plist_path: Path
    force: bool = False
    dry_run: bool = False

    @classmethod
    def from_port_dir(cls, port_dir, force: bool = False, dry_run: bool = False) -> 'PortConfig':
        """
        Build the configuration for a port directory.

        The Makefile, distinfo and pkg-plist must all exist as regular
        files, otherwise no configuration is returned.
        """
        port_path = Path(port_dir)
        config = cls(
            port_path=port_path,
            makefile_path=port_path / MAKEFILE_NAME,
            distinfo_path=port_path / DISTINFO_NAME,
            plist_path=port_path / PLIST_NAME,
            force=force,
            dry_run=dry_run,
        )
        check_files_exist(config.makefile_path, config.distinfo_path, config.plist_path)
        return config


def get_config_path():
    """Get the path to the settings file.

    Checks in order:
    1. OMZPORT_CONFIG environment variable
    2. ~/.omzport/ directory
    """
    if 'OMZPORT_CONFIG' in os.environ:
        path = Path(os.environ['OMZPORT_CONFIG'])
        if path.exists():
            return path

    omzport_dir = Path.home() / '.omzport'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = omzport_dir / filename
        if path.exists():
            return path

    return omzport_dir / 'config.json'


def get_default_config():
    """Get default configuration."""
    return {
        "build": {
            "make_command": "make",
        },
        "github": {
            "api_url": "https://api.github.com",
        },
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        },
    }


def load_config():
    """Load settings from file, then apply environment overrides."""
    config_path = get_config_path()

    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                import yaml
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)
        except Exception as e:
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"Error loading config from {config_path}: expected a mapping")
        config = merge_configs(config, file_config)
        for section in get_default_config():
            if not isinstance(config[section], dict):
                raise ConfigError(
                    f"Error loading config from {config_path}: '{section}' must be a mapping"
                )
        logger.debug(f"Loaded settings from {config_path}")

    return apply_env_overrides(config)


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Override settings from OMZPORT_<SECTION>_<KEY> environment variables.

    Only keys already present in the settings are looked up, so
    OMZPORT_BUILD_MAKE_COMMAND=gmake sets build.make_command and
    unrelated OMZPORT_* variables are ignored. Values stay strings.
    """
    for section, values in config.items():
        if not isinstance(values, dict):
            continue
        for key in values:
            env_key = f"OMZPORT_{section}_{key}".upper()
            if env_key in os.environ:
                values[key] = os.environ[env_key]
                logger.debug(f"{section}.{key} overridden by {env_key}")

    return config


def configure_logging(config, verbose: bool = False):
    """Apply the logging section of the settings to the omzport logger."""
    logging_config = config.get("logging", {})
    level_name = "DEBUG" if verbose else str(logging_config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    fmt = logging_config.get("format")
    if fmt:
        _handler.setFormatter(logging.Formatter(fmt))
