"""Pin detection by line tracing from enemy sliders to the king.

Pin status is geometric: a piece with no legal moves can still be pinned,
so legal-move counts play no part here.
"""

import logging

from chessmetrics.analysis.geometry import (
    are_aligned,
    are_on_same_line,
    distance,
    same_diagonal,
    squares_between,
)
from chessmetrics.analysis.position import PositionSnapshot
from chessmetrics.analysis.types import Piece
from chessmetrics.errors import MissingKingError

__all__ = ["is_pinned", "find_pinner"]

logger = logging.getLogger(__name__)

_LINE_SLIDERS = {
    "orthogonal": ("rook", "queen"),
    "diagonal": ("bishop", "queen"),
}


def _slides_along(piece_type: str, a: str, b: str) -> bool:
    """Can a piece of this type move along the line through a and b?"""
    kind = "diagonal" if same_diagonal(a, b) else "orthogonal"
    return piece_type in _LINE_SLIDERS[kind]


def find_pinner(snapshot: PositionSnapshot, piece: Piece) -> Piece | None:
    """The enemy slider pinning piece to its own king, if any."""
    if piece.type == "king":
        return None
    try:
        king = snapshot.require_king(piece.color)
    except MissingKingError as e:
        logger.warning("Pin check for %s on %s skipped: %s", piece.type, piece.square, e)
        return None
    if not are_aligned(piece.square, king.square):
        return None

    candidates = []
    for enemy in snapshot.pieces():
        if enemy.color == piece.color:
            continue
        if not are_on_same_line(piece.square, king.square, enemy.square):
            continue
        if not _slides_along(enemy.type, enemy.square, king.square):
            continue
        path = squares_between(enemy.square, king.square)
        if piece.square not in path:
            continue
        blocked = any(sq != piece.square and snapshot.is_occupied(sq) for sq in path)
        if not blocked:
            candidates.append(enemy)

    if not candidates:
        return None
    return min(candidates, key=lambda p: distance(p.square, king.square))


def is_pinned(snapshot: PositionSnapshot, piece: Piece) -> bool:
    return find_pinner(snapshot, piece) is not None
