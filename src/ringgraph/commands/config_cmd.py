"""
ringgraph.commands.config_cmd - Inspect the effective configuration.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import tomlkit

from ringgraph.config import CONFIG_FILENAME, find_config_file, get_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    if args.config_action == "show":
        return run_show(args)
    elif args.config_action == "path":
        return run_path(args)

    print("Usage: ringgraph config {show|path}", file=sys.stderr)
    return 1


def run_show(args: argparse.Namespace) -> int:
    """Print the merged configuration as TOML."""
    config = get_config(args.config)
    print(tomlkit.dumps(config), end="")
    return 0


def run_path(args: argparse.Namespace) -> int:
    """Print which configuration file is in effect."""
    path = args.config or find_config_file(Path.cwd())
    if path is None:
        if not args.quiet:
            print(f"No {CONFIG_FILENAME} found, using defaults")
        return 1
    print(path)
    return 0
