"""Exception hierarchy shared by the analysis core, the API and the CLI."""


class ChessMetricsError(Exception):
    """Base class for all catchable chessmetrics errors."""


class InvalidPositionError(ChessMetricsError, ValueError):
    """The FEN is malformed or describes an illegal position."""

    def __init__(self, message: str, fen: str = ""):
        super().__init__(message)
        self.fen = fen


class MissingKingError(ChessMetricsError):
    """A color has no king on the board."""

    def __init__(self, color: str):
        super().__init__(f"no {color} king on the board")
        self.color = color


class HypotheticalPositionError(ChessMetricsError):
    """The rules engine refused to build a hypothetical variant of a position."""


class UnknownMetricError(ChessMetricsError, KeyError):
    """A metric name does not resolve to a registered calculator."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class MetricCalculationError(ChessMetricsError, RuntimeError):
    """A registered calculator raised while building a report."""

    def __init__(self, metric: str, subject: str, cause: Exception):
        super().__init__(f"{metric} failed for {subject}: {cause}")
        self.metric = metric
        self.subject = subject
