"""Constants and small utility functions shared across analysis submodules."""

import chess

__all__ = [
    "WHITE",
    "BLACK",
    "COLORS",
    "PIECE_TYPES",
    "SLIDER_TYPES",
    "SQUARE_ORDER",
    "_color_name",
    "_chess_color",
    "_piece_type_name",
    "_chess_piece_type",
    "opponent",
]

WHITE = "white"
BLACK = "black"
COLORS = (WHITE, BLACK)

PIECE_TYPES = ("pawn", "rook", "knight", "bishop", "queen", "king")
SLIDER_TYPES = ("rook", "bishop", "queen")

_PIECE_TYPE_NAMES: dict[chess.PieceType, str] = {
    chess.PAWN: "pawn",
    chess.KNIGHT: "knight",
    chess.BISHOP: "bishop",
    chess.ROOK: "rook",
    chess.QUEEN: "queen",
    chess.KING: "king",
}
_CHESS_PIECE_TYPES = {name: pt for pt, name in _PIECE_TYPE_NAMES.items()}

# Rank 8 down to rank 1, file a to h within each rank. Report order.
SQUARE_ORDER: list[str] = [
    chess.square_name(chess.square(f, r))
    for r in range(7, -1, -1)
    for f in range(8)
]


def _color_name(color: chess.Color) -> str:
    """Convert chess.Color bool to lowercase string."""
    return WHITE if color == chess.WHITE else BLACK


def _chess_color(color: str) -> chess.Color:
    """Inverse of _color_name."""
    if color == WHITE:
        return chess.WHITE
    if color == BLACK:
        return chess.BLACK
    raise ValueError(f"unknown color: {color!r}")


def _piece_type_name(piece_type: chess.PieceType) -> str:
    return _PIECE_TYPE_NAMES[piece_type]


def _chess_piece_type(name: str) -> chess.PieceType:
    return _CHESS_PIECE_TYPES[name]


def opponent(color: str) -> str:
    return BLACK if color == WHITE else WHITE
