"""Plain-text dumps of a snapshot for the CLI and for test failure messages."""

from chessmetrics.analysis.attacks import attackers
from chessmetrics.analysis.constants import COLORS
from chessmetrics.analysis.position import PositionSnapshot

__all__ = ["debug_board", "debug_pieces", "debug_attacks", "debug_moves"]


def debug_board(snapshot: PositionSnapshot, highlight: list[str] | None = None) -> str:
    """ASCII board, followed by one line per highlighted square."""
    lines = [snapshot.ascii()]
    for sq in highlight or []:
        piece = snapshot.piece_at(sq)
        occupant = f"{piece.color} {piece.type}" if piece else "empty"
        lines.append(f"Highlighted: {sq} ({occupant})")
    return "\n".join(lines)


def debug_pieces(snapshot: PositionSnapshot) -> str:
    lines = ["Pieces on board:"]
    for p in snapshot.pieces():
        lines.append(f"  {p.symbol()} {p.color} {p.type} on {p.square}")
    return "\n".join(lines)


def debug_attacks(snapshot: PositionSnapshot, square: str) -> str:
    lines = [f"Attack information for {square}:"]
    for color in COLORS:
        found = attackers(snapshot, square, color)
        lines.append(f"  Attacked by {color}: {', '.join(found) if found else 'none'}")
    return "\n".join(lines)


def debug_moves(snapshot: PositionSnapshot) -> str:
    lines = [f"Current turn: {snapshot.turn}"]
    for color in COLORS:
        lines.append(f"  Legal moves for {color}: {len(snapshot.legal_moves(color))}")
    lines.append(f"  All moves (both colors): {len(snapshot.all_moves())}")
    return "\n".join(lines)
