"""Metric registry.

A static table: category -> ordered list of metric classes. Adding a
metric means writing the class and adding one entry here. Order within a
category is the key order of the report records.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessmetrics.errors import UnknownMetricError
from chessmetrics.metrics.base import Metric, MetricBounds
from chessmetrics.metrics.piece import (
    FreedomMetric,
    IsAttackedMetric,
    IsDefendedMetric,
    IsHangingMetric,
    IsPinnedMetric,
    NumberOfAttackersMetric,
    NumberOfDefendersMetric,
)
from chessmetrics.metrics.player import (
    IsMyTurnMetric,
    KingsFreedomMetric,
    PlayerFreedomMetric,
    QueensFreedomMetric,
)
from chessmetrics.metrics.square import NumberOfBlackAttackersMetric, NumberOfWhiteAttackersMetric

__all__ = [
    "CATEGORIES",
    "METRIC_REGISTRY",
    "METRIC_METADATA",
    "MetricDescriptor",
    "build_metadata",
    "get_metric_bounds",
    "get_metric_class",
    "get_metric_descriptor",
    "list_metric_names",
    "metric_descriptors",
]

CATEGORIES = ("player", "piece", "square")

METRIC_REGISTRY: dict[str, list[type[Metric]]] = {
    "player": [
        IsMyTurnMetric,
        PlayerFreedomMetric,
        KingsFreedomMetric,
        QueensFreedomMetric,
    ],
    "piece": [
        FreedomMetric,
        IsAttackedMetric,
        IsDefendedMetric,
        IsHangingMetric,
        IsPinnedMetric,
        NumberOfAttackersMetric,
        NumberOfDefendersMetric,
    ],
    "square": [
        NumberOfWhiteAttackersMetric,
        NumberOfBlackAttackersMetric,
    ],
}


@dataclass(frozen=True)
class MetricDescriptor:
    name: str        # short name, the report key
    class_name: str
    category: str    # "player", "piece" or "square"

    @property
    def full_name(self) -> str:
        return f"{self.category}.{self.name}"


def build_metadata(registry: dict[str, list[type[Metric]]]) -> dict[str, tuple[MetricDescriptor, type[Metric]]]:
    """full name -> (descriptor, class), checking the table is consistent.

    Raises UnknownMetricError for an unknown category, a class filed under
    the wrong category, a class with no name, or a duplicate name.
    """
    metadata: dict[str, tuple[MetricDescriptor, type[Metric]]] = {}
    for category, classes in registry.items():
        if category not in CATEGORIES:
            raise UnknownMetricError(f"unknown metric category: {category}")
        for cls in classes:
            if not cls.name or cls.category != category:
                raise UnknownMetricError(
                    f"{cls.__name__} cannot be registered as a {category} metric"
                )
            desc = MetricDescriptor(name=cls.name, class_name=cls.__name__, category=category)
            if desc.full_name in metadata:
                raise UnknownMetricError(f"duplicate metric name: {desc.full_name}")
            metadata[desc.full_name] = (desc, cls)
    return metadata


METRIC_METADATA = build_metadata(METRIC_REGISTRY)


def _lookup(full_name: str) -> tuple[MetricDescriptor, type[Metric]]:
    try:
        return METRIC_METADATA[full_name]
    except KeyError:
        raise UnknownMetricError(f"unknown metric: {full_name}") from None


def metric_descriptors(category: str | None = None) -> list[MetricDescriptor]:
    return [
        desc for desc, _ in METRIC_METADATA.values()
        if category is None or desc.category == category
    ]


def list_metric_names(category: str) -> list[str]:
    """Short metric names of a category, in report order."""
    if category not in CATEGORIES:
        raise UnknownMetricError(f"unknown metric category: {category}")
    return [desc.name for desc in metric_descriptors(category)]


def get_metric_descriptor(full_name: str) -> MetricDescriptor:
    return _lookup(full_name)[0]


def get_metric_class(full_name: str) -> type[Metric]:
    return _lookup(full_name)[1]


def get_metric_bounds(full_name: str) -> MetricBounds | None:
    """Declared {min, max} of a numeric metric; None for booleans."""
    return _lookup(full_name)[1].bounds()
