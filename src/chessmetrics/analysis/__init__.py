"""Pure-function position analysis package.

Geometry, the position snapshot, attack counting and pin detection. All
functions take a PositionSnapshot (or square names) and never change it.
"""

from chessmetrics.analysis.constants import *  # noqa: F401,F403
from chessmetrics.analysis.geometry import *  # noqa: F401,F403
from chessmetrics.analysis.attacks import *  # noqa: F401,F403
from chessmetrics.analysis.pins import *  # noqa: F401,F403
from chessmetrics.analysis.debug import *  # noqa: F401,F403

from chessmetrics.analysis.position import PositionSnapshot, validate_fen_format  # noqa: F401
from chessmetrics.analysis.rules import PythonChessEngine, RulesEngine  # noqa: F401
from chessmetrics.analysis.types import Move, Piece  # noqa: F401
