"""
Game State
===========
The single mutable record owned by the game loop: board bounds,
the player cursor and the three killers.
"""

from dataclasses import dataclass
from typing import List

from .components import Position
from .config import KILLER_COUNT


@dataclass
class GameState:
    """Central game state container. Passed through all systems."""
    width: int
    height: int
    cursor: Position
    killers: List[Position]

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f'board must be at least 1x1, got {self.width}x{self.height}')
        self._check_killers(self.killers)

    @staticmethod
    def _check_killers(killers: List[Position]) -> None:
        if len(killers) != KILLER_COUNT:
            raise ValueError(f'expected {KILLER_COUNT} killers, got {len(killers)}')

    def replace_killers(self, killers: List[Position]) -> None:
        """Swap in a whole new killer set. Killers are never replaced one at a time."""
        self._check_killers(killers)
        self.killers = list(killers)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def snapshot(self) -> 'GameState':
        """Detached copy, safe to keep across ticks."""
        return GameState(
            width=self.width,
            height=self.height,
            cursor=self.cursor.copy(),
            killers=[k.copy() for k in self.killers],
        )


def start_position(width: int, height: int) -> Position:
    """Initial cursor cell: horizontally centered, one row above the middle."""
    return Position(width // 2, max(0, height // 2 - 1))
