"""
ringgraph.config.loader - Configuration file discovery and loading.

Configuration comes from three layers, later ones winning:
1. DEFAULT_CONFIG
2. A .ringgraph.toml file (found by walking up from the working directory)
3. RINGGRAPH_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError

from ringgraph.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """A configuration file could not be read or is invalid."""


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists.

    Args:
        content: TOML source text.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    return parse_toml_document(content).unwrap()


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text into a tomlkit document that preserves formatting."""
    try:
        return tomlkit.parse(content)
    except ParseError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def find_config_file(start: Path) -> Path | None:
    """Find .ringgraph.toml in start or any parent directory.

    Args:
        start: Directory to begin searching from.

    Returns:
        Path to the config file, or None if not found.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested dictionaries are merged key by key; any other value in override
    replaces the one in base.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(value: str) -> Any:
    """Convert an environment variable string to a typed value.

    - "true"/"false" (any case) become booleans
    - Integer literals become int
    - Strings starting with [ or { are parsed as JSON, falling back to the
      raw string when malformed
    - Everything else is returned unchanged
    """
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(value.strip())
    except ValueError:
        pass
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply RINGGRAPH_<SECTION>_<KEY> environment variables in place.

    RINGGRAPH_GRAPH_SIZE=8 sets config["graph"]["size"] to 8. The section is
    the first underscore-separated word, the key is the rest, both lowercased.
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX):].lower().partition("_")
        if not section or not key:
            continue
        value = _try_parse_env_value(raw)
        table = config.setdefault(section, {})
        if not isinstance(table, dict):
            raise ConfigError(f"Cannot apply {name}: {section} is not a table")
        table[key] = value
        logger.debug("Config override from %s: %s.%s = %r", name, section, key, value)
    return config


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of config with environment overrides applied."""
    return _apply_env_overrides(copy.deepcopy(config))


def validate_config(config: dict[str, Any]) -> list[str]:
    """Check configuration values.

    Returns:
        List of error messages, empty when the configuration is valid.
    """
    errors: list[str] = []
    for section in ("graph", "search", "weights", "output"):
        if not isinstance(config.get(section, {}), dict):
            errors.append(f"{section} must be a table, got {config[section]!r}")
    if errors:
        return errors

    size = config.get("graph", {}).get("size")
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        errors.append(f"graph.size must be a positive integer, got {size!r}")

    source = config.get("search", {}).get("source")
    if isinstance(source, bool) or not isinstance(source, int) or source < 0:
        errors.append(f"search.source must be a non-negative integer, got {source!r}")
    elif isinstance(size, int) and not isinstance(size, bool) and size > 0 and source >= size:
        errors.append(f"search.source {source} is not a vertex of a ring of size {size}")

    check_edges = config.get("weights", {}).get("check_edges")
    if not isinstance(check_edges, bool):
        errors.append(f"weights.check_edges must be true or false, got {check_edges!r}")

    quiet = config.get("output", {}).get("quiet", False)
    if not isinstance(quiet, bool):
        errors.append(f"output.quiet must be true or false, got {quiet!r}")

    return errors


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a configuration file merged over the defaults.

    Args:
        config_path: Path to a .ringgraph.toml file.

    Returns:
        Complete configuration dictionary with environment overrides.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    user_config = parse_toml(content)
    logger.debug("Loaded configuration from %s", config_path)
    return _apply_env_overrides(merge_configs(DEFAULT_CONFIG, user_config))


def get_config(
    config_path: Path | None = None,
    start_path: Path | None = None,
) -> dict[str, Any]:
    """Resolve the effective configuration.

    Uses config_path if given, otherwise searches upward from start_path
    (default: the working directory). Falls back to the defaults when no
    file exists.

    Raises:
        ConfigError: If a file is found but invalid.
    """
    if config_path is None:
        config_path = find_config_file(start_path or Path.cwd())
    if config_path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return apply_env_overrides(DEFAULT_CONFIG)
    return load_config(config_path)


__all__ = [
    "ConfigError",
    "parse_toml",
    "parse_toml_document",
    "find_config_file",
    "merge_configs",
    "apply_env_overrides",
    "validate_config",
    "load_config",
    "get_config",
]
