"""Metric dispatcher: runs every registered metric and assembles the report."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any

from chessmetrics.analysis.constants import COLORS, SQUARE_ORDER
from chessmetrics.analysis.position import PositionSnapshot
from chessmetrics.analysis.rules import RulesEngine
from chessmetrics.analysis.types import Piece
from chessmetrics.config import Settings
from chessmetrics.errors import MetricCalculationError
from chessmetrics.metrics.base import Metric, MetricContext
from chessmetrics.metrics.registry import METRIC_REGISTRY, build_metadata

__all__ = ["MetricReport", "MetricCalculator", "calculate", "analyze_fen"]

logger = logging.getLogger(__name__)


@dataclass
class MetricReport:
    players: dict[str, dict[str, Any]] = field(default_factory=dict)
    pieces: list[dict[str, Any]] = field(default_factory=list)
    squares: list[dict[str, Any]] = field(default_factory=list)  # always 64, a8..h1

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def _subject_label(subject: Any) -> str:
    if isinstance(subject, Piece):
        return f"{subject.color} {subject.type} on {subject.square}"
    return str(subject)


class MetricCalculator:
    """Instantiates each registered metric once and applies it per subject."""

    def __init__(self, registry: dict[str, list[type[Metric]]] | None = None):
        metadata = build_metadata(registry if registry is not None else METRIC_REGISTRY)
        self._metrics: dict[str, list[tuple[str, Metric]]] = {
            "player": [], "piece": [], "square": [],
        }
        for desc, cls in metadata.values():
            self._metrics[desc.category].append((desc.name, cls()))

    def calculate(self, snapshot: PositionSnapshot) -> MetricReport:
        started = time.perf_counter()
        context = MetricContext(snapshot)

        players = {color: self._run("player", color, context, {}) for color in COLORS}
        pieces = [
            self._run("piece", p, context, {"type": p.type, "color": p.color, "square": p.square})
            for p in snapshot.pieces()
        ]
        squares = [self._run("square", sq, context, {"square": sq}) for sq in SQUARE_ORDER]

        logger.debug(
            "Calculated metrics for %s: %d pieces in %.1f ms",
            snapshot.fen, len(pieces), (time.perf_counter() - started) * 1000,
        )
        return MetricReport(players=players, pieces=pieces, squares=squares)

    def _run(self, category: str, subject: Any, context: MetricContext, record: dict[str, Any]) -> dict[str, Any]:
        for name, metric in self._metrics[category]:
            try:
                record[name] = metric.calculate(subject, context)
            except Exception as e:
                raise MetricCalculationError(f"{category}.{name}", _subject_label(subject), e) from e
        return record


def calculate(snapshot: PositionSnapshot) -> MetricReport:
    return MetricCalculator().calculate(snapshot)


def analyze_fen(
    fen: str,
    settings: Settings | None = None,
    engine: RulesEngine | None = None,
) -> MetricReport:
    """Parse, validate and analyze a FEN. Raises InvalidPositionError."""
    settings = settings or Settings()
    snapshot = PositionSnapshot.from_fen(
        fen, engine, strict=settings.strict_fen, validate=settings.validate_positions,
    )
    return calculate(snapshot)
