"""
Player Module
==============
Keyboard input handling and clamped cursor movement.
"""

import logging
from typing import Optional, Tuple

from .state import GameState


logger = logging.getLogger(__name__)

# blessed key name -> (dx, dy)
DIRECTIONS = {
    'KEY_UP': (0, -1),
    'KEY_DOWN': (0, 1),
    'KEY_LEFT': (-1, 0),
    'KEY_RIGHT': (1, 0),
}


class InputHandler:
    """
    Translates keystrokes into pending actions.

    Actions triggered by a key are consumed on read, so each key press
    applies at most once.
    """

    def __init__(self):
        self._move: Optional[Tuple[int, int]] = None
        self._quit_triggered = False

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return

        if key.is_sequence:
            direction = DIRECTIONS.get(key.name)
            if direction is not None:
                self._move = direction
                return
        elif key.lower() == 'q':
            self._quit_triggered = True
            return

        logger.debug('ignored key %r (name=%s)', str(key), key.name)

    def consume_move(self) -> Optional[Tuple[int, int]]:
        """Check and consume a pending move, returns (dx, dy) or None."""
        move = self._move
        self._move = None
        return move

    def consume_quit(self) -> bool:
        """Check and consume quit trigger."""
        triggered = self._quit_triggered
        self._quit_triggered = False
        return triggered


def poll_key(term, timeout: float):
    """Wait at most `timeout` seconds for a keystroke. Returns an empty keystroke on timeout."""
    return term.inkey(timeout=timeout)


def move_cursor(state: GameState, dx: int, dy: int) -> None:
    """Move the cursor one cell, clamped to [0, dimension - 1] on both axes."""
    cursor = state.cursor
    cursor.x = min(max(cursor.x + dx, 0), state.width - 1)
    cursor.y = min(max(cursor.y + dy, 0), state.height - 1)


def player_input_system(state: GameState, input_handler: InputHandler) -> None:
    """Apply any pending move to the cursor."""
    move = input_handler.consume_move()
    if move is not None:
        move_cursor(state, *move)
