"""Metric base class and the per-call context shared by all calculators."""

from dataclasses import dataclass
from typing import Any

from chessmetrics.analysis.attacks import attackers
from chessmetrics.analysis.position import PositionSnapshot

__all__ = ["Metric", "MetricBounds", "MetricContext"]


@dataclass(frozen=True)
class MetricBounds:
    min: int
    max: int


class MetricContext:
    """One analysis call: the snapshot plus memoized attacker lists.

    Several piece and square metrics ask for the same (square, color)
    attackers; the memo lives and dies with the call.
    """

    def __init__(self, snapshot: PositionSnapshot):
        self.snapshot = snapshot
        self._attackers: dict[tuple[str, str], list[str]] = {}

    def attackers(self, square: str, color: str) -> list[str]:
        key = (square, color)
        if key not in self._attackers:
            self._attackers[key] = attackers(self.snapshot, square, color)
        return list(self._attackers[key])

    def attacker_count(self, square: str, color: str) -> int:
        if (square, color) not in self._attackers:
            self.attackers(square, color)
        return len(self._attackers[(square, color)])


class Metric:
    """A single named calculation over one subject.

    Subclasses set name/category/description (and bounds for numeric
    metrics) and implement calculate(). Subjects are a color name for
    player metrics, a Piece for piece metrics and a square name for
    square metrics. Implementations must be pure functions of
    (subject, context.snapshot).
    """

    name: str = ""
    category: str = ""
    description: str = ""
    min_value: int | None = None
    max_value: int | None = None

    def calculate(self, subject: Any, context: MetricContext) -> Any:
        raise NotImplementedError

    @classmethod
    def bounds(cls) -> MetricBounds | None:
        if cls.min_value is None or cls.max_value is None:
            return None
        return MetricBounds(min=cls.min_value, max=cls.max_value)
