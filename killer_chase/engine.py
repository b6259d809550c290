"""
Rendering Engine
=================
Full-repaint terminal renderer. Every frame clears the screen and
redraws all markers from the current game state.
"""

from typing import List

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .components import Position, Renderable
from .config import (
    PLAYER_CHAR, KILLER_CHAR, GAME_OVER_TEXT,
    NEON_CYAN, NEON_RED, WHITE
)
from .state import GameState


PLAYER_MARKER = Renderable(char=PLAYER_CHAR, color=NEON_CYAN)
KILLER_MARKER = Renderable(char=KILLER_CHAR, color=NEON_RED)


class GameRenderer:
    """
    Builds frames as escape-sequence strings and writes them to the terminal.

    Building and presenting are separate so a frame can be inspected
    without touching the terminal.
    """

    def __init__(self, term: Terminal):
        self.term = term
        self._normal = term.normal  # Cache reset sequence
        self.frames_presented = 0

    def _cell(self, pos: Position, marker: Renderable) -> str:
        return (
            self.term.move_xy(pos.x, pos.y)
            + self.term.color(marker.color)
            + marker.char
            + self._normal
        )

    def render_frame(self, state: GameState) -> str:
        """Clear the screen, hide the native cursor, draw player and killers."""
        parts: List[str] = [
            self.term.home,
            self.term.clear,
            self.term.hide_cursor,
            self._cell(state.cursor, PLAYER_MARKER),
        ]
        for killer in state.killers:
            # Killers are never clamped; skip any that sit off-screen
            if state.in_bounds(killer):
                parts.append(self._cell(killer, KILLER_MARKER))
        return ''.join(parts)

    def render_game_over(self, state: GameState) -> str:
        """Clear the screen and center the game-over banner."""
        x = max(0, state.width // 2 - len(GAME_OVER_TEXT) // 2)
        y = state.height // 2
        return (
            self.term.home
            + self.term.clear
            + self.term.move_xy(x, y)
            + self.term.color(WHITE)
            + GAME_OVER_TEXT
            + self._normal
        )

    def present(self, output: str) -> None:
        """Write a finished frame and flush it to the terminal."""
        if output:
            print(output, end='', file=self.term.stream, flush=True)
            self.frames_presented += 1
