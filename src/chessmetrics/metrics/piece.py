"""Piece metrics: mobility, attack/defense status, pins."""

from chessmetrics.analysis.constants import opponent
from chessmetrics.analysis.pins import is_pinned
from chessmetrics.analysis.position import PositionSnapshot
from chessmetrics.analysis.types import Piece
from chessmetrics.metrics.base import Metric, MetricContext

__all__ = [
    "piece_freedom",
    "FreedomMetric",
    "IsAttackedMetric",
    "IsDefendedMetric",
    "IsHangingMetric",
    "IsPinnedMetric",
    "NumberOfAttackersMetric",
    "NumberOfDefendersMetric",
]


def piece_freedom(snapshot: PositionSnapshot, piece: Piece) -> int:
    """Legal moves of this piece, whoever is to move.

    Promotions count once per promoted-to piece, matching the move list.
    """
    return len(snapshot.legal_moves(piece.color, from_square=piece.square))


class FreedomMetric(Metric):
    name = "freedom"
    category = "piece"
    description = "freedom tells how many legal moves this piece can make"
    min_value = 0
    max_value = 27  # queen in the middle of an empty board

    def calculate(self, piece: Piece, context: MetricContext) -> int:
        return piece_freedom(context.snapshot, piece)


class NumberOfAttackersMetric(Metric):
    name = "numberOfAttackers"
    category = "piece"
    description = "numberOfAttackers tells how many enemy pieces attack this piece"
    min_value = 0
    max_value = 16

    def calculate(self, piece: Piece, context: MetricContext) -> int:
        return context.attacker_count(piece.square, opponent(piece.color))


class NumberOfDefendersMetric(Metric):
    name = "numberOfDefenders"
    category = "piece"
    description = "numberOfDefenders tells how many friendly pieces could recapture on this piece's square"
    min_value = 0
    max_value = 16

    def calculate(self, piece: Piece, context: MetricContext) -> int:
        return context.attacker_count(piece.square, piece.color)


class IsAttackedMetric(Metric):
    name = "isAttacked"
    category = "piece"
    description = "isAttacked tells if at least one enemy piece attacks this piece"

    def calculate(self, piece: Piece, context: MetricContext) -> bool:
        return context.attacker_count(piece.square, opponent(piece.color)) > 0


class IsDefendedMetric(Metric):
    name = "isDefended"
    category = "piece"
    description = "isDefended tells if a friendly piece could recapture on this piece's square"

    def calculate(self, piece: Piece, context: MetricContext) -> bool:
        return context.attacker_count(piece.square, piece.color) > 0


class IsHangingMetric(Metric):
    name = "isHanging"
    category = "piece"
    description = "isHanging tells if this piece is attacked and not defended"

    def calculate(self, piece: Piece, context: MetricContext) -> bool:
        attacked = context.attacker_count(piece.square, opponent(piece.color)) > 0
        defended = context.attacker_count(piece.square, piece.color) > 0
        return attacked and not defended


class IsPinnedMetric(Metric):
    name = "isPinned"
    category = "piece"
    description = "isPinned tells if moving this piece off its line would expose its own king"

    def calculate(self, piece: Piece, context: MetricContext) -> bool:
        return is_pinned(context.snapshot, piece)
