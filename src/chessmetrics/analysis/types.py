"""Value types shared by the analysis core and the metric calculators."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Piece:
    type: str    # "pawn", "knight", ...
    color: str   # "white" or "black"
    square: str  # e.g. "e4"
    file: int    # 0-7, a-h
    rank: int    # 0-7, 1-8

    def symbol(self) -> str:
        """FEN letter: 'N' for a white knight, 'p' for a black pawn."""
        letter = "n" if self.type == "knight" else self.type[0]
        return letter.upper() if self.color == "white" else letter


@dataclass(frozen=True)
class Move:
    from_square: str
    to_square: str
    piece: str                    # type of the moving piece
    color: str                    # color of the moving piece
    promotion: str | None = None  # promoted-to type, if any
