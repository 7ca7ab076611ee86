"""Metric calculators, the static registry and the report dispatcher."""

from chessmetrics.metrics.base import Metric, MetricBounds, MetricContext  # noqa: F401
from chessmetrics.metrics.player import *  # noqa: F401,F403
from chessmetrics.metrics.piece import *  # noqa: F401,F403
from chessmetrics.metrics.square import *  # noqa: F401,F403
from chessmetrics.metrics.registry import *  # noqa: F401,F403
from chessmetrics.metrics.calculator import *  # noqa: F401,F403
