"""Player metrics: turn and aggregate mobility for one color."""

import logging

from chessmetrics.errors import MissingKingError
from chessmetrics.metrics.base import Metric, MetricContext
from chessmetrics.metrics.piece import piece_freedom

__all__ = [
    "IsMyTurnMetric",
    "PlayerFreedomMetric",
    "KingsFreedomMetric",
    "QueensFreedomMetric",
]

logger = logging.getLogger(__name__)


class IsMyTurnMetric(Metric):
    name = "isMyTurn"
    category = "player"
    description = "isMyTurn tells if this player is to move"

    def calculate(self, color: str, context: MetricContext) -> bool:
        return context.snapshot.turn == color


class PlayerFreedomMetric(Metric):
    name = "freedom"
    category = "player"
    description = "freedom tells the sum of freedoms of all pieces for this player"
    min_value = 0
    max_value = 218  # most legal moves known in a reachable position

    def calculate(self, color: str, context: MetricContext) -> int:
        snapshot = context.snapshot
        return sum(piece_freedom(snapshot, p) for p in snapshot.pieces(color))


class KingsFreedomMetric(Metric):
    name = "kingsFreedom"
    category = "player"
    description = "kingsFreedom tells the freedom of this player's king"
    min_value = 0
    max_value = 8

    def calculate(self, color: str, context: MetricContext) -> int:
        try:
            king = context.snapshot.require_king(color)
        except MissingKingError as e:
            logger.warning("kingsFreedom defaults to 0: %s", e)
            return 0
        return piece_freedom(context.snapshot, king)


class QueensFreedomMetric(Metric):
    name = "queensFreedom"
    category = "player"
    description = "queensFreedom tells the sum of freedoms of all queens for this player"
    min_value = 0
    max_value = 27

    def calculate(self, color: str, context: MetricContext) -> int:
        snapshot = context.snapshot
        return sum(piece_freedom(snapshot, q) for q in snapshot.pieces(color, "queen"))
