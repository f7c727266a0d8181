"""
ringgraph.commands - CLI command implementations
"""

__all__ = [
    "check",
    "config_cmd",
    "search",
    "show",
]
