"""
Game Systems
=============
Pure update functions that operate on the game state:
killer pursuit and cursor collision.
"""

from typing import List

from .components import Position
from .state import GameState


# =============================================================================
# PURSUIT
# =============================================================================

def chase_step(coord: int, target: int) -> int:
    """
    One-dimensional pursuit step along a single axis.

    Returns -1 when the target lies behind coord, +1 when it lies ahead
    and 0 once the axis is already aligned.
    """
    interval = target - coord
    if interval < 0:
        return -1
    if interval > 0:
        return 1
    return 0


def pursue(killer: Position, cursor: Position) -> Position:
    """Move a killer one cell toward the cursor, each axis independently."""
    return Position(
        killer.x + chase_step(killer.x, cursor.x),
        killer.y + chase_step(killer.y, cursor.y),
    )


def pursuit_system(state: GameState) -> List[Position]:
    """
    Compute the next position of every killer.

    Reads the state without mutating it. Results are not clamped to the
    board; the cursor is always in bounds so killers only ever close in.
    """
    return [pursue(killer, state.cursor) for killer in state.killers]


# =============================================================================
# COLLISION
# =============================================================================

def collision_check(state: GameState) -> bool:
    """True if any killer occupies the cursor's cell."""
    return any(killer == state.cursor for killer in state.killers)


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def nearest_killer_distance(state: GameState) -> int:
    """Grid distance from the cursor to the closest killer."""
    return min(manhattan_distance(k, state.cursor) for k in state.killers)
