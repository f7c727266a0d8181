"""
ringgraph.commands.check - Verify a ring graph against the graph contract.

Runs every conformance rule for the capabilities the graph declares and
reports violations. Exit code 1 means at least one rule failed.
"""

from __future__ import annotations

import argparse
import json

from ringgraph.graph import Capability, check_contract
from ringgraph.graph.factory import load_graph


def run(args: argparse.Namespace) -> int:
    """Run the check command."""
    config, graph = load_graph(args.config, args.size)
    quiet = args.quiet or config["output"]["quiet"]
    violations = check_contract(graph)

    if args.json:
        report = {
            "n": graph.n,
            "capabilities": [c.name for c in Capability if c in graph.capabilities],
            "conforms": not violations,
            "violations": [
                {"rule": v.rule, "message": v.message, "vertex": v.vertex}
                for v in violations
            ],
        }
        print(json.dumps(report, indent=2))
        return 1 if violations else 0

    for violation in violations:
        print(f"✗ {violation}")

    if not quiet:
        if violations:
            print(f"{len(violations)} contract violation(s) for {graph!r}")
        else:
            print(f"✓ {graph!r} conforms to the graph contract")

    return 1 if violations else 0
