"""Tests for the metric registry and the report dispatcher."""

import json
import logging

import pytest

from chessmetrics.analysis import SQUARE_ORDER, PositionSnapshot
from chessmetrics.config import Settings
from chessmetrics.errors import InvalidPositionError, MetricCalculationError, UnknownMetricError
from chessmetrics.metrics import (
    CATEGORIES,
    METRIC_REGISTRY,
    FreedomMetric,
    IsMyTurnMetric,
    Metric,
    MetricBounds,
    MetricCalculator,
    analyze_fen,
    build_metadata,
    calculate,
    get_metric_bounds,
    get_metric_class,
    get_metric_descriptor,
    list_metric_names,
    metric_descriptors,
)


STARTING = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
AFTER_1E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
PETROV = "rnbqkb1r/pppp1ppp/5n2/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3"

PLAYER_METRICS = ["isMyTurn", "freedom", "kingsFreedom", "queensFreedom"]
PIECE_METRICS = [
    "freedom", "isAttacked", "isDefended", "isHanging",
    "isPinned", "numberOfAttackers", "numberOfDefenders",
]
SQUARE_METRICS = ["numberOfWhiteAttackers", "numberOfBlackAttackers"]


class BrokenMetric(Metric):
    name = "broken"
    category = "piece"

    def calculate(self, piece, context):
        return 1 // 0


class MisfiledMetric(Metric):
    name = "misfiled"
    category = "square"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_names_per_category(self):
        assert list_metric_names("player") == PLAYER_METRICS
        assert list_metric_names("piece") == PIECE_METRICS
        assert list_metric_names("square") == SQUARE_METRICS

    def test_unknown_category(self):
        with pytest.raises(UnknownMetricError):
            list_metric_names("board")

    def test_descriptors(self):
        desc = get_metric_descriptor("piece.freedom")
        assert desc.class_name == "FreedomMetric"
        assert desc.category == "piece"
        assert desc.full_name == "piece.freedom"
        assert get_metric_class("piece.freedom") is FreedomMetric
        assert get_metric_class("player.isMyTurn") is IsMyTurnMetric

    def test_full_names_unique(self):
        names = [d.full_name for d in metric_descriptors()]
        assert len(names) == len(set(names)) == 13

    @pytest.mark.parametrize("full_name,bounds", [
        ("player.freedom", MetricBounds(0, 218)),
        ("player.kingsFreedom", MetricBounds(0, 8)),
        ("player.queensFreedom", MetricBounds(0, 27)),
        ("piece.freedom", MetricBounds(0, 27)),
        ("piece.numberOfAttackers", MetricBounds(0, 16)),
        ("piece.numberOfDefenders", MetricBounds(0, 16)),
        ("square.numberOfWhiteAttackers", MetricBounds(0, 16)),
        ("square.numberOfBlackAttackers", MetricBounds(0, 16)),
    ])
    def test_numeric_bounds(self, full_name, bounds):
        assert get_metric_bounds(full_name) == bounds

    @pytest.mark.parametrize("full_name", ["player.isMyTurn", "piece.isHanging", "piece.isPinned"])
    def test_boolean_metrics_have_no_bounds(self, full_name):
        assert get_metric_bounds(full_name) is None

    def test_unknown_metric(self):
        with pytest.raises(UnknownMetricError) as exc_info:
            get_metric_bounds("piece.mobility")
        assert str(exc_info.value) == "unknown metric: piece.mobility"

    def test_unknown_metric_is_key_error(self):
        with pytest.raises(KeyError):
            get_metric_class("square.nothing")

    def test_misfiled_class_rejected(self):
        with pytest.raises(UnknownMetricError):
            build_metadata({"piece": [MisfiledMetric]})

    def test_unknown_category_rejected(self):
        with pytest.raises(UnknownMetricError):
            build_metadata({"board": [FreedomMetric]})

    def test_duplicate_rejected(self):
        with pytest.raises(UnknownMetricError):
            build_metadata({"piece": [FreedomMetric, FreedomMetric]})


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


class TestReport:
    @pytest.fixture
    def report(self):
        return calculate(PositionSnapshot.from_fen(STARTING))

    def test_players(self, report):
        assert list(report.players) == ["white", "black"]
        for color in ("white", "black"):
            assert list(report.players[color]) == PLAYER_METRICS
        assert report.players["white"]["isMyTurn"] is True
        assert report.players["black"]["isMyTurn"] is False
        assert report.players["white"]["freedom"] == 20

    def test_pieces(self, report):
        assert len(report.pieces) == 32
        first = report.pieces[0]
        assert list(first) == ["type", "color", "square"] + PIECE_METRICS
        assert (first["type"], first["color"], first["square"]) == ("rook", "black", "a8")

    def test_squares(self, report):
        assert [s["square"] for s in report.squares] == SQUARE_ORDER
        assert list(report.squares[0]) == ["square"] + SQUARE_METRICS

    def test_values_within_bounds(self, report):
        for category, records in (
            ("player", list(report.players.values())),
            ("piece", report.pieces),
            ("square", report.squares),
        ):
            for record in records:
                for name in list_metric_names(category):
                    bounds = get_metric_bounds(f"{category}.{name}")
                    if bounds is not None:
                        assert bounds.min <= record[name] <= bounds.max

    def test_deterministic(self):
        snap = PositionSnapshot.from_fen(PETROV)
        first = MetricCalculator().calculate(snap).to_json()
        second = MetricCalculator().calculate(snap).to_json()
        assert first == second

    def test_json_serializable(self, report):
        data = json.loads(report.to_json(indent=2))
        assert set(data) == {"players", "pieces", "squares"}
        assert len(data["squares"]) == 64

    def test_hanging_pieces_in_report(self):
        report = calculate(PositionSnapshot.from_fen(PETROV))
        hanging = {p["square"] for p in report.pieces if p["isHanging"]}
        assert {"e4", "e5"} <= hanging


class TestMetricCalculator:
    def test_registry_default(self):
        calc = MetricCalculator()
        report = calc.calculate(PositionSnapshot.from_fen(AFTER_1E4))
        assert report.players["black"]["isMyTurn"] is True

    def test_custom_registry(self):
        calc = MetricCalculator({"player": [IsMyTurnMetric]})
        report = calc.calculate(PositionSnapshot.from_fen(STARTING))
        assert report.players["white"] == {"isMyTurn": True}
        assert report.pieces[0] == {"type": "rook", "color": "black", "square": "a8"}
        assert report.squares[0] == {"square": "a8"}

    def test_bad_registry_rejected(self):
        with pytest.raises(UnknownMetricError):
            MetricCalculator({"piece": [MisfiledMetric]})

    def test_failing_metric_aborts_call(self, caplog):
        calc = MetricCalculator({"piece": [BrokenMetric]})
        with pytest.raises(MetricCalculationError) as exc_info:
            calc.calculate(PositionSnapshot.from_fen(STARTING))
        err = exc_info.value
        assert err.metric == "piece.broken"
        assert err.subject == "black rook on a8"
        assert isinstance(err.__cause__, ZeroDivisionError)
        assert "piece.broken failed" in str(err)
        # raised, not logged: the caller decides how to report it
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_registry_has_every_category(self):
        assert set(METRIC_REGISTRY) == set(CATEGORIES)


class TestAnalyzeFen:
    def test_default_settings(self):
        report = analyze_fen(STARTING, Settings(_env_file=None))
        assert report.players["white"]["freedom"] == 20

    def test_invalid_fen(self):
        with pytest.raises(InvalidPositionError):
            analyze_fen("invalid-fen", Settings(_env_file=None))

    def test_non_strict_settings(self):
        settings = Settings(_env_file=None, strict_fen=False)
        report = analyze_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", settings)
        assert len(report.pieces) == 32
