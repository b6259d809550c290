"""
Component Definitions
======================
Plain dataclasses shared by the game systems.
"""

from dataclasses import dataclass


# =============================================================================
# GRID COMPONENTS
# =============================================================================

@dataclass
class Position:
    """Grid position in whole character cells (x = column, y = row)."""
    x: int = 0
    y: int = 0

    def copy(self) -> 'Position':
        return Position(self.x, self.y)

    def as_tuple(self):
        return self.x, self.y


@dataclass
class Renderable:
    """Visual representation of a marker on the board."""
    char: str = '?'
    color: int = 7  # ANSI 256 color
