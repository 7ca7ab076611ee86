"""Square geometry: coordinates, alignment and line tracing.

Squares are names ("e4"). Coordinates are (file, rank) with a1 = (0, 0)
and h8 = (7, 7), the same convention python-chess uses.
"""

import chess

__all__ = [
    "to_coordinates",
    "from_coordinates",
    "same_rank",
    "same_file",
    "same_diagonal",
    "are_aligned",
    "are_on_same_line",
    "squares_between",
    "distance",
    "direction",
]


def to_coordinates(square: str) -> tuple[int, int]:
    sq = chess.parse_square(square)
    return chess.square_file(sq), chess.square_rank(sq)


def from_coordinates(file: int, rank: int) -> str:
    return chess.square_name(chess.square(file, rank))


def _deltas(a: str, b: str) -> tuple[int, int]:
    fa, ra = to_coordinates(a)
    fb, rb = to_coordinates(b)
    return fb - fa, rb - ra


def same_rank(a: str, b: str) -> bool:
    return to_coordinates(a)[1] == to_coordinates(b)[1]


def same_file(a: str, b: str) -> bool:
    return to_coordinates(a)[0] == to_coordinates(b)[0]


def same_diagonal(a: str, b: str) -> bool:
    """True for two distinct squares on one diagonal."""
    df, dr = _deltas(a, b)
    return abs(df) == abs(dr) and df != 0


def are_aligned(a: str, b: str) -> bool:
    """Same rank, same file or same diagonal.

    Identical squares count as aligned; callers working with distinct
    squares should not depend on that.
    """
    df, dr = _deltas(a, b)
    return df == 0 or dr == 0 or abs(df) == abs(dr)


def are_on_same_line(s1: str, s2: str, s3: str) -> bool:
    """All three squares share one rank, one file or one diagonal.

    For diagonals every pair must be diagonal to each other, which rejects
    two different diagonals that merely cross at s2.
    """
    f1, r1 = to_coordinates(s1)
    f2, r2 = to_coordinates(s2)
    f3, r3 = to_coordinates(s3)
    if r1 == r2 == r3:
        return True
    if f1 == f2 == f3:
        return True
    return (
        abs(r1 - r2) == abs(f1 - f2)
        and abs(r2 - r3) == abs(f2 - f3)
        and abs(r1 - r3) == abs(f1 - f3)
    )


def direction(a: str, b: str) -> tuple[int, int]:
    """Unit step (-1, 0 or 1 per axis) from a toward b."""
    df, dr = _deltas(a, b)
    return (df > 0) - (df < 0), (dr > 0) - (dr < 0)


def squares_between(a: str, b: str) -> list[str]:
    """Squares strictly between a and b, ordered from a toward b.

    Empty when the squares are not aligned, identical or adjacent.
    """
    if a == b or not are_aligned(a, b):
        return []
    step_f, step_r = direction(a, b)
    f, r = to_coordinates(a)
    end = to_coordinates(b)
    squares = []
    f += step_f
    r += step_r
    while (f, r) != end:
        squares.append(from_coordinates(f, r))
        f += step_f
        r += step_r
    return squares


def distance(a: str, b: str) -> int:
    """Chebyshev (king-move) distance."""
    df, dr = _deltas(a, b)
    return max(abs(df), abs(dr))
