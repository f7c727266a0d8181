"""
ringgraph.config.defaults - Default configuration values.
"""

DEFAULT_CONFIG = {
    "graph": {
        # Number of vertices when none is given on the command line
        "size": 5,
    },
    "search": {
        # Start vertex for shortest path tables
        "source": 0,
    },
    "weights": {
        # Reject weight lookups for edges that are not part of the ring
        "check_edges": True,
    },
    "output": {
        "quiet": False,
    },
}

CONFIG_FILENAME = ".ringgraph.toml"

ENV_PREFIX = "RINGGRAPH_"
