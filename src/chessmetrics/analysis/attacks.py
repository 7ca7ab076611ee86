"""Attack detection: which pieces could capture on a square.

A piece "attacks" a square if, with its side to move and an enemy pawn
dropped on that square, it has a legal move there. Dropping the pawn makes
empty squares and squares held by friendly pieces (defense) behave like
capture targets, and using legal moves means pinned pieces and a king
stepping into a guarded square are handled by the rules engine.
"""

import logging

from chessmetrics.analysis.geometry import to_coordinates
from chessmetrics.analysis.position import PositionSnapshot
from chessmetrics.errors import HypotheticalPositionError

__all__ = [
    "can_attack",
    "attackers",
    "number_of_attackers",
    "_geometric_attack",
]

logger = logging.getLogger(__name__)


def _geometric_attack(snapshot: PositionSnapshot, from_sq: str, to_sq: str, color: str) -> bool:
    """Movement-pattern attack test. Ignores blocking pieces.

    Only used when the rules engine refuses the hypothetical position, so
    sliders may be overcounted through blocked lines.
    """
    piece = snapshot.piece_at(from_sq)
    if piece is None or piece.color != color:
        return False

    ff, fr = to_coordinates(from_sq)
    tf, tr = to_coordinates(to_sq)
    df = abs(tf - ff)
    dr = abs(tr - fr)
    orthogonal = (df == 0) != (dr == 0)
    diagonal = df == dr and df > 0

    if piece.type == "pawn":
        forward = 1 if color == "white" else -1
        return df == 1 and tr - fr == forward
    if piece.type == "rook":
        return orthogonal
    if piece.type == "bishop":
        return diagonal
    if piece.type == "queen":
        return orthogonal or diagonal
    if piece.type == "knight":
        return (df, dr) in ((1, 2), (2, 1))
    if piece.type == "king":
        return max(df, dr) == 1
    return False


def _hypothetical_targets(snapshot: PositionSnapshot, to_sq: str, color: str) -> set[str] | None:
    """Origin squares of color's legal moves onto to_sq, or None if refused."""
    try:
        moves = snapshot.hypothetical_moves(to_sq, color)
    except HypotheticalPositionError as e:
        logger.debug("Hypothetical for %s on %s refused (%s); using geometric fallback", color, to_sq, e)
        return None
    return {m.from_square for m in moves if m.to_square == to_sq}


def can_attack(snapshot: PositionSnapshot, from_sq: str, to_sq: str, color: str) -> bool:
    """Could the color piece on from_sq capture on to_sq?"""
    if from_sq == to_sq:
        return False
    origins = _hypothetical_targets(snapshot, to_sq, color)
    if origins is None:
        return _geometric_attack(snapshot, from_sq, to_sq, color)
    return from_sq in origins


def attackers(snapshot: PositionSnapshot, square: str, color: str) -> list[str]:
    """Squares of color's pieces that attack square, in board order.

    One hypothetical serves every piece of the color: the variant depends
    only on the target square and the attacking color.
    """
    pieces = [p for p in snapshot.pieces(color) if p.square != square]
    origins = _hypothetical_targets(snapshot, square, color)
    if origins is None:
        return [p.square for p in pieces if _geometric_attack(snapshot, p.square, square, color)]
    return [p.square for p in pieces if p.square in origins]


def number_of_attackers(snapshot: PositionSnapshot, square: str, color: str) -> int:
    return len(attackers(snapshot, square, color))
