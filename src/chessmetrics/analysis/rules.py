"""Rules-engine boundary.

The analysis core never touches python-chess directly outside this module.
Everything it needs from a rules engine goes through RulesEngine, so tests
can swap in a fake engine and the snapshot never leaks a chess.Board.
"""

from typing import Any, Protocol

import chess

from chessmetrics.analysis.constants import (
    SQUARE_ORDER,
    _chess_color,
    _chess_piece_type,
    _color_name,
    _piece_type_name,
)
from chessmetrics.analysis.types import Move
from chessmetrics.errors import InvalidPositionError

__all__ = ["RulesEngine", "PythonChessEngine"]


class RulesEngine(Protocol):
    def parse_position(self, fen: str) -> Any:
        """Parse a FEN into an opaque handle. Raises InvalidPositionError."""
        ...

    def side_to_move(self, handle: Any) -> str: ...

    def occupants(self, handle: Any) -> list[tuple[str, str, str]]:
        """(square, piece type, color) for every occupied square."""
        ...

    def legal_moves(
        self,
        handle: Any,
        *,
        from_square: str | None = None,
        force_side_to_move: str | None = None,
        clear_en_passant: bool = False,
    ) -> list[Move]: ...

    def is_position_legal(self, handle: Any) -> bool: ...

    def place_piece(self, handle: Any, square: str, piece_type: str, color: str) -> Any:
        """Return a new handle with a piece put on square (replacing any occupant).

        May raise HypotheticalPositionError if the engine refuses the result.
        """
        ...

    def fen(self, handle: Any) -> str: ...

    def ascii(self, handle: Any) -> str: ...


class PythonChessEngine:
    """RulesEngine backed by python-chess. Handles are chess.Board instances.

    Handles are never mutated: variants are built on copies.
    """

    def parse_position(self, fen: str) -> chess.Board:
        try:
            return chess.Board(fen)
        except ValueError as e:
            raise InvalidPositionError(f"Invalid FEN: {e}", fen=fen) from e

    def side_to_move(self, handle: chess.Board) -> str:
        return _color_name(handle.turn)

    def occupants(self, handle: chess.Board) -> list[tuple[str, str, str]]:
        result = []
        for name in SQUARE_ORDER:
            piece = handle.piece_at(chess.parse_square(name))
            if piece is not None:
                result.append((name, _piece_type_name(piece.piece_type), _color_name(piece.color)))
        return result

    def legal_moves(
        self,
        handle: chess.Board,
        *,
        from_square: str | None = None,
        force_side_to_move: str | None = None,
        clear_en_passant: bool = False,
    ) -> list[Move]:
        board = handle
        turn = handle.turn if force_side_to_move is None else _chess_color(force_side_to_move)
        if turn != handle.turn or (clear_en_passant and handle.ep_square is not None):
            board = handle.copy(stack=False)
            board.turn = turn
            if clear_en_passant:
                board.ep_square = None

        from_mask = chess.BB_ALL
        if from_square is not None:
            from_mask = chess.BB_SQUARES[chess.parse_square(from_square)]

        color = _color_name(board.turn)
        moves = []
        for m in board.generate_legal_moves(from_mask=from_mask):
            moves.append(Move(
                from_square=chess.square_name(m.from_square),
                to_square=chess.square_name(m.to_square),
                piece=_piece_type_name(board.piece_type_at(m.from_square)),
                color=color,
                promotion=_piece_type_name(m.promotion) if m.promotion else None,
            ))
        return moves

    def is_position_legal(self, handle: chess.Board) -> bool:
        # Castling rights the rooks no longer allow are dropped during move
        # generation, so they do not make a position unusable.
        return not (handle.status() & ~chess.STATUS_BAD_CASTLING_RIGHTS)

    def place_piece(self, handle: chess.Board, square: str, piece_type: str, color: str) -> chess.Board:
        # python-chess accepts any placement; legality is judged per move later
        board = handle.copy(stack=False)
        board.set_piece_at(
            chess.parse_square(square),
            chess.Piece(_chess_piece_type(piece_type), _chess_color(color)),
        )
        return board

    def fen(self, handle: chess.Board) -> str:
        return handle.fen()

    def ascii(self, handle: chess.Board) -> str:
        return str(handle)
