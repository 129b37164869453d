#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr)  # Default to stderr
    ]
)
logger = logging.getLogger("ghanalytics")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. GHANALYTICS_CONFIG environment variable
    2. ~/.ghanalytics/ directory
    """
    if 'GHANALYTICS_CONFIG' in os.environ:
        return Path(os.environ['GHANALYTICS_CONFIG']).expanduser()

    config_dir = Path.home() / '.ghanalytics'
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path for saving
    return config_dir / 'config.json'


def read_config_file(config_path):
    """Parse a config file, choosing the format from its suffix."""
    suffix = config_path.suffix.lower()
    if suffix == '.toml':
        with open(config_path, 'rb') as f:
            return tomllib.load(f)
    with open(config_path, 'r') as f:
        if suffix in ('.yaml', '.yml'):
            return yaml.safe_load(f) or {}
        return json.load(f)


def load_config():
    """Load configuration from file.

    Defaults are merged with the config file, then with GHANALYTICS_*
    environment overrides. A config file named by GHANALYTICS_CONFIG must
    exist and parse; a broken file in the default location is logged and
    skipped.
    """
    config_path = get_config_path()
    explicit = 'GHANALYTICS_CONFIG' in os.environ

    # Start with default config
    config = get_default_config()

    if explicit and not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    if config_path.exists():
        try:
            file_config = read_config_file(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            if explicit:
                raise ConfigError(f"Error loading config from {config_path}: {e}") from e
            logger.error(f"Error loading config from {config_path}: {e}")
        else:
            if not isinstance(file_config, dict):
                raise ConfigError(f"Config file {config_path} must contain a mapping")
            config = merge_configs(config, file_config)

    # Apply environment variable overrides
    config = apply_env_overrides(config)

    return config


def get_default_config():
    """Get default configuration."""
    return {
        "data": {
            "directory": "data",
            "actors_file": "actors.csv",
            "commits_file": "commits.csv",
            "events_file": "events.csv",
            "repos_file": "repos.csv"
        },
        "ranking": {
            "default_limit": 10
        },
        "logging": {
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s"
        }
    }


def get_data_files(config):
    """Map store file kinds to the file names configured under ``data``."""
    data = config.get('data', {})
    return {
        kind: data[f'{kind}_file']
        for kind in ('actors', 'commits', 'events', 'repos')
        if data.get(f'{kind}_file')
    }


def configure_logging(config, verbose=False):
    """Apply the ``logging`` section; ``verbose`` forces DEBUG."""
    settings = config.get('logging', {})
    level = 'DEBUG' if verbose else str(settings.get('level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=settings.get('format', "%(levelname)s: %(message)s"),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


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
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: GHANALYTICS_SECTION_KEY
    For example: GHANALYTICS_RANKING_DEFAULT_LIMIT=25
    """
    env_prefix = "GHANALYTICS_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key in ('GHANALYTICS_CONFIG', 'GHANALYTICS_FORMAT'):
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            # If we are at the end of the env var, we have found the key to set
            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if not isinstance(current_level[matched_key], dict):
                # Path conflict, e.g., env var is longer but we found a non-dict value
                break
            current_level = current_level[matched_key]
            i += best_match_len

    return config
