"""Tactical metrics for a single chess position.

Takes a FEN, returns per-player, per-piece and per-square facts: freedom,
attacker counts, attacked/defended/hanging status and pins to the king.
"""

__version__ = "1.0.0"
