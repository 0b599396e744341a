"""Main CLI entry point for topogen."""

from __future__ import annotations

import argparse
import dataclasses
import sys

from topogen.cli import commands
from topogen.cli.config import load_graph
from topogen.config import EnumerationConfig
from topogen.errors import TopogenError
from topogen.logging import configure_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topogen",
        description="topogen - enumerate the topological orders of a DAG",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("graph", nargs="?", help="YAML/JSON graph file ({size: N, edges: [[v, w], ...]})")
    common.add_argument("--size", type=int, help="Number of nodes (instead of a graph file)")
    common.add_argument(
        "--edge",
        action="append",
        default=[],
        metavar="V,W",
        help="Edge V -> W (repeatable, instead of a graph file)",
    )
    common.add_argument(
        "--no-check-cycles",
        action="store_true",
        help="Skip cycle detection (cyclic input then yields truncated orders)",
    )
    common.add_argument("--log-level", help="Log level (default: TOPOGEN_LOG_LEVEL or WARNING)")
    common.add_argument("--log-json", action="store_true", help="Emit JSON log lines")

    orders_parser = subparsers.add_parser("orders", parents=[common], help="Print every topological order")
    orders_parser.add_argument("--limit", type=int, help="Stop after this many orders")

    subparsers.add_parser("count", parents=[common], help="Count the topological orders")
    subparsers.add_parser("deltas", parents=[common], help="Print the raw delta stream")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = EnumerationConfig.from_env()
        overrides: dict[str, object] = {}
        if args.no_check_cycles:
            overrides["check_cycles"] = False
        if args.log_level:
            overrides["log_level"] = args.log_level
        if args.log_json:
            overrides["log_json"] = True
        if overrides:
            config = dataclasses.replace(config, **overrides)

        configure_logging(json_format=config.log_json, level=config.log_level_number)
        logger = get_logger("topogen.cli")

        graph = load_graph(args.graph, args.size, args.edge)
        logger.debug("graph_loaded", size=graph.size(), edges=graph.edge_count())

        if args.command == "orders":
            commands.orders(graph, config, sys.stdout, limit=args.limit)
        elif args.command == "count":
            commands.count(graph, config, sys.stdout)
        elif args.command == "deltas":
            commands.deltas(graph, config, sys.stdout)
    except (TopogenError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
