"""
ringgraph.config - Configuration loading and defaults
"""

from ringgraph.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from ringgraph.config.loader import (
    ConfigError,
    _apply_env_overrides,
    _try_parse_env_value,
    apply_env_overrides,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
    validate_config,
)

__all__ = [
    "load_config",
    "get_config",
    "find_config_file",
    "merge_configs",
    "apply_env_overrides",
    "validate_config",
    "parse_toml",
    "parse_toml_document",
    "ConfigError",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
]
