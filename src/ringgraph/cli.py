"""
ringgraph.cli - Command-line interface.

Main entry point for the ringgraph CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ringgraph import __version__
from ringgraph.commands import check, config_cmd, search, show


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ringgraph",
        description="Implicit ring graphs for generic graph algorithms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ringgraph                     # Show the default ring (5 vertices)
  ringgraph show 8              # Incidence, edges and shortest paths for n=8
  ringgraph search 8 --source 3 # Shortest path table from vertex 3
  ringgraph check 8             # Verify the graph contract
  ringgraph check 8 -j          # Same, as JSON

Configuration:
  ringgraph config path         # Show config file location
  ringgraph config show         # View all settings

For detailed command help: ringgraph <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"ringgraph {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )
    parser.set_defaults(size=None, source=None)

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print incident edges, edge weights and a shortest path table",
    )
    _add_size_argument(show_parser)
    _add_source_argument(show_parser)

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Print the shortest path table from one vertex",
    )
    _add_size_argument(search_parser)
    _add_source_argument(search_parser)
    search_parser.add_argument(
        "--target",
        type=int,
        help="Also print the path to this vertex",
        metavar="V",
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Verify the graph against the graph contract",
    )
    _add_size_argument(check_parser)
    check_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output the report as JSON",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["show", "path"],
        default="show",
        help="show: print merged settings, path: print config file location",
    )

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information",
    )

    # completion command
    completion_parser = subparsers.add_parser(
        "completion",
        help="Generate shell tab-completion script",
    )
    completion_parser.add_argument(
        "--shell",
        choices=["bash", "zsh", "fish", "tcsh"],
        help="Shell type to generate completion for",
    )

    return parser


def _add_size_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "size",
        nargs="?",
        type=int,
        help="Number of vertices (default: graph.size from config, 5)",
    )


def _add_source_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        type=int,
        help="Start vertex for the shortest path search (default: search.source, 0)",
        metavar="V",
    )


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with -v, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install ringgraph[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # No command shows the default ring
    if not args.command:
        args.command = "show"

    try:
        # Dispatch to command handlers
        if args.command == "show":
            return show.run(args)
        elif args.command == "search":
            return search.run(args)
        elif args.command == "check":
            return check.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "version":
            return version_command(args)
        elif args.command == "completion":
            return completion_command(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


def version_command(args: argparse.Namespace) -> int:
    """Handle version command."""
    print(f"ringgraph {__version__}")
    return 0


def completion_command(args: argparse.Namespace) -> int:
    """Handle completion command - generate shell completion scripts."""
    try:
        import argcomplete  # noqa: F401
    except ImportError:
        print("Error: argcomplete not installed.", file=sys.stderr)
        print("Install with: pip install ringgraph[completion]", file=sys.stderr)
        return 1

    import subprocess

    cmd = ["register-python-argcomplete"]
    if args.shell in ("fish", "tcsh"):
        cmd.append(f"--shell={args.shell}")
    cmd.append("ringgraph")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        print("Error: register-python-argcomplete not found.", file=sys.stderr)
        print("Make sure argcomplete is properly installed.", file=sys.stderr)
        return 1
    if result.returncode != 0:
        print(f"Error generating completion script: {result.stderr}", file=sys.stderr)
        return 1
    print(result.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
