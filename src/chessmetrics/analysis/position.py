"""Read-only position snapshot over a rules engine.

A PositionSnapshot is built once per analysis call and never changes.
It answers the handful of questions the analyzers ask (side to move,
piece list, legal moves per color, hypothetical variants) and keeps the
engine handle private.
"""

import re

from chessmetrics.analysis.constants import opponent
from chessmetrics.analysis.geometry import to_coordinates
from chessmetrics.analysis.rules import PythonChessEngine, RulesEngine
from chessmetrics.analysis.types import Move, Piece
from chessmetrics.errors import InvalidPositionError, MissingKingError

__all__ = ["PositionSnapshot", "validate_fen_format"]

_PLACEMENT_RE = re.compile(r"^[rnbqkpRNBQKP1-8/]+$")
_CASTLING_RE = re.compile(r"^(-|K?Q?k?q?)$")
_EP_RE = re.compile(r"^(-|[a-h][36])$")
_CLOCK_RE = re.compile(r"^\d+$")


def validate_fen_format(fen: str) -> None:
    """Structural FEN check: six fields with the expected alphabets.

    Raises InvalidPositionError naming the first offending field.
    """
    if not isinstance(fen, str) or not fen.strip():
        raise InvalidPositionError("Invalid FEN string format: empty", fen=str(fen))
    parts = fen.strip().split()
    if len(parts) != 6:
        raise InvalidPositionError(
            f"Invalid FEN string format: expected 6 fields, got {len(parts)}", fen=fen,
        )
    placement, turn, castling, ep, halfmove, fullmove = parts
    if not _PLACEMENT_RE.match(placement):
        raise InvalidPositionError("Invalid FEN string format: piece placement", fen=fen)
    if turn not in ("w", "b"):
        raise InvalidPositionError("Invalid FEN string format: side to move", fen=fen)
    if not _CASTLING_RE.match(castling):
        raise InvalidPositionError("Invalid FEN string format: castling rights", fen=fen)
    if not _EP_RE.match(ep):
        raise InvalidPositionError("Invalid FEN string format: en passant square", fen=fen)
    if not _CLOCK_RE.match(halfmove) or not _CLOCK_RE.match(fullmove):
        raise InvalidPositionError("Invalid FEN string format: move clocks", fen=fen)


class PositionSnapshot:
    def __init__(self, handle, engine: RulesEngine):
        self._handle = handle
        self._engine = engine
        self._pieces: tuple[Piece, ...] | None = None
        self._by_square: dict[str, Piece] | None = None
        self._moves_by_color: dict[str, tuple[Move, ...]] = {}

    @classmethod
    def from_fen(
        cls,
        fen: str,
        engine: RulesEngine | None = None,
        *,
        strict: bool = True,
        validate: bool = True,
    ) -> "PositionSnapshot":
        """Parse and (optionally) validate a FEN.

        strict: apply the six-field structural check first.
        validate: reject positions the engine considers illegal.
        """
        if strict:
            validate_fen_format(fen)
        engine = engine or PythonChessEngine()
        handle = engine.parse_position(fen)
        if validate and not engine.is_position_legal(handle):
            raise InvalidPositionError(f"Invalid chess position: {fen}", fen=fen)
        return cls(handle, engine)

    @property
    def fen(self) -> str:
        return self._engine.fen(self._handle)

    @property
    def turn(self) -> str:
        return self._engine.side_to_move(self._handle)

    def ascii(self) -> str:
        return self._engine.ascii(self._handle)

    # --- Pieces ---

    def pieces(self, color: str | None = None, piece_type: str | None = None) -> list[Piece]:
        """Pieces in rank-8-to-1, file-a-to-h order, optionally filtered."""
        if self._pieces is None:
            built = []
            for square, piece_type_, color_ in self._engine.occupants(self._handle):
                file, rank = to_coordinates(square)
                built.append(Piece(type=piece_type_, color=color_, square=square, file=file, rank=rank))
            self._pieces = tuple(built)
            self._by_square = {p.square: p for p in built}
        return [
            p for p in self._pieces
            if (color is None or p.color == color)
            and (piece_type is None or p.type == piece_type)
        ]

    def piece_at(self, square: str) -> Piece | None:
        if self._by_square is None:
            self.pieces()
        return self._by_square.get(square)

    def is_occupied(self, square: str) -> bool:
        return self.piece_at(square) is not None

    def king(self, color: str) -> Piece | None:
        kings = self.pieces(color, "king")
        return kings[0] if kings else None

    def require_king(self, color: str) -> Piece:
        king = self.king(color)
        if king is None:
            raise MissingKingError(color)
        return king

    # --- Moves ---

    def legal_moves(self, color: str | None = None, from_square: str | None = None) -> list[Move]:
        """Legal moves for color as if it were that color's turn.

        En passant is only kept for the side actually to move; for the
        other side the target square would be meaningless.
        """
        color = color or self.turn
        if color not in self._moves_by_color:
            self._moves_by_color[color] = tuple(self._engine.legal_moves(
                self._handle,
                force_side_to_move=color,
                clear_en_passant=color != self.turn,
            ))
        moves = self._moves_by_color[color]
        if from_square is None:
            return list(moves)
        return [m for m in moves if m.from_square == from_square]

    def all_moves(self) -> list[Move]:
        """Moves of both colors, side to move first."""
        return self.legal_moves(self.turn) + self.legal_moves(opponent(self.turn))

    def hypothetical_moves(self, target: str, attacking_color: str) -> list[Move]:
        """Legal moves of attacking_color with an enemy pawn placed on target.

        The variant has attacking_color to move and no en passant square.
        Raises HypotheticalPositionError if the engine refuses the variant.
        """
        variant = self._engine.place_piece(self._handle, target, "pawn", opponent(attacking_color))
        return self._engine.legal_moves(
            variant,
            force_side_to_move=attacking_color,
            clear_en_passant=True,
        )

    def __repr__(self) -> str:
        return f"PositionSnapshot({self.fen!r})"
