"""CLI utility for single-position metric analysis.

Usage:
    python -m chessmetrics.cli <fen> [--indent N] [--debug SQUARE]...
    python -m chessmetrics.cli --metrics

Prints the metric report (or the metric catalog) as JSON on stdout.
Debug dumps go to stderr so stdout stays valid JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from chessmetrics.analysis import (
    SQUARE_ORDER,
    PositionSnapshot,
    debug_attacks,
    debug_board,
    debug_moves,
    debug_pieces,
)
from chessmetrics.config import Settings
from chessmetrics.errors import InvalidPositionError
from chessmetrics.metrics import CATEGORIES, MetricCalculator, get_metric_bounds, list_metric_names


def _catalog() -> dict:
    catalog = {}
    for category in CATEGORIES:
        entries = []
        for name in list_metric_names(category):
            bounds = get_metric_bounds(f"{category}.{name}")
            entries.append({
                "name": name,
                "min": bounds.min if bounds else None,
                "max": bounds.max if bounds else None,
            })
        catalog[category] = entries
    return catalog


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Tactical metrics for a single chess position",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("fen", nargs="?", help="Position FEN (quote the full string)")
    parser.add_argument(
        "--metrics", action="store_true",
        help="List registered metrics and their bounds instead of analyzing",
    )
    parser.add_argument(
        "--debug", metavar="SQUARE", action="append",
        help="Print the board, pieces, move counts and attackers of SQUARE to stderr (repeatable)",
    )
    parser.add_argument(
        "--indent", type=int, default=2,
        help="JSON indentation (default: 2)",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)

    if args.metrics:
        json.dump(_catalog(), sys.stdout, indent=args.indent)
        print()
        return
    if not args.fen:
        parser.error("a FEN is required unless --metrics is given")

    try:
        snapshot = PositionSnapshot.from_fen(
            args.fen, strict=settings.strict_fen, validate=settings.validate_positions,
        )
    except InvalidPositionError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.debug is not None:
        unknown = [sq for sq in args.debug if sq not in SQUARE_ORDER]
        if unknown:
            parser.error(f"unknown square(s): {', '.join(unknown)}")
        print(debug_board(snapshot, args.debug), file=sys.stderr)
        print(debug_pieces(snapshot), file=sys.stderr)
        print(debug_moves(snapshot), file=sys.stderr)
        for square in args.debug:
            print(debug_attacks(snapshot, square), file=sys.stderr)

    report = MetricCalculator().calculate(snapshot)
    result = {"fen": snapshot.fen, **report.to_dict()}
    json.dump(result, sys.stdout, indent=args.indent)
    print()


if __name__ == "__main__":
    main()
