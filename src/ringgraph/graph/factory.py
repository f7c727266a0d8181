"""Graph Factory - Shared utility for building a RingGraph from configuration.

Commands use this single entry point so that config validation and
command-line overrides behave the same everywhere.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ringgraph.config import ConfigError, get_config, merge_configs, validate_config
from ringgraph.graph.ring import RingGraph


def apply_overrides(
    config: dict[str, Any],
    size: int | None = None,
    source: int | None = None,
) -> dict[str, Any]:
    """Return config with command-line values for graph.size and search.source.

    Arguments left as None keep the configured value. The input is not
    modified.
    """
    overrides: dict[str, Any] = {}
    if size is not None:
        overrides["graph"] = {"size": size}
    if source is not None:
        overrides["search"] = {"source": source}
    return merge_configs(config, overrides)


def build_graph(
    config: dict[str, Any],
    size: int | None = None,
    source: int | None = None,
) -> RingGraph:
    """Build a ring graph from a configuration dictionary.

    Overrides are applied before validation, so search.source is checked
    against the size of the ring actually built.

    Args:
        config: Effective configuration (see ringgraph.config.get_config).
        size: Vertex count from the command line; overrides graph.size.
        source: Start vertex from the command line; overrides search.source.

    Returns:
        The constructed RingGraph.

    Raises:
        ConfigError: If the configuration has invalid values.
    """
    config = apply_overrides(config, size, source)
    errors = validate_config(config)
    if errors:
        raise ConfigError("Invalid configuration: " + "; ".join(errors))
    return RingGraph.from_config(config)


def load_graph(
    config_path: Path | None = None,
    size: int | None = None,
    start_path: Path | None = None,
    source: int | None = None,
) -> tuple[dict[str, Any], RingGraph]:
    """Resolve configuration and build the graph in one step.

    Returns:
        Tuple of (config with overrides applied, graph).
    """
    config = apply_overrides(get_config(config_path, start_path=start_path), size, source)
    return config, build_graph(config)


__all__ = ["apply_overrides", "build_graph", "load_graph"]
