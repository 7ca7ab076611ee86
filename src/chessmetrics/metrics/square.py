"""Square metrics: attacker counts per color for every square."""

from chessmetrics.analysis.constants import BLACK, WHITE
from chessmetrics.metrics.base import Metric, MetricContext

__all__ = ["NumberOfWhiteAttackersMetric", "NumberOfBlackAttackersMetric"]


class NumberOfWhiteAttackersMetric(Metric):
    name = "numberOfWhiteAttackers"
    category = "square"
    description = "numberOfWhiteAttackers tells how many white pieces attack this square"
    min_value = 0
    max_value = 16

    def calculate(self, square: str, context: MetricContext) -> int:
        return context.attacker_count(square, WHITE)


class NumberOfBlackAttackersMetric(Metric):
    name = "numberOfBlackAttackers"
    category = "square"
    description = "numberOfBlackAttackers tells how many black pieces attack this square"
    min_value = 0
    max_value = 16

    def calculate(self, square: str, context: MetricContext) -> int:
        return context.attacker_count(square, BLACK)
