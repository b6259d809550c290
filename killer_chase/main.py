#!/usr/bin/env python3
"""
KILLER CHASE - Terminal Dodge Game
===================================
Keep your cursor away from three killers that chase it across the terminal.
Every few seconds the killers teleport to new random cells.

Controls:
    ARROWS  - Move
    Q       - Quit
"""

import logging
import random
import sys
import time
from enum import Enum, auto
from typing import Callable, Optional, Sequence

from blessed import Terminal

from .cli import parse_args
from .config import GameConfig, MIN_WIDTH, MIN_HEIGHT
from .engine import GameRenderer
from .logging_setup import setup_logging
from .player import InputHandler, player_input_system, poll_key
from .spawner import spawn_killers
from .state import GameState, start_position
from .systems import collision_check, nearest_killer_distance, pursuit_system


logger = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = auto()
    GAME_OVER = auto()
    QUIT = auto()


class Cadence:
    """
    Fixed-cadence scheduler: fires on the first tick, then once every `every` ticks.
    """

    def __init__(self, every: int):
        self.every = every
        self.countdown = 0

    def tick(self) -> bool:
        """Advance one tick; True when this tick is due."""
        due = self.countdown < 1
        if due:
            self.countdown = self.every
        self.countdown -= 1
        return due


# =============================================================================
# GAME
# =============================================================================

class Game:
    """Owns the game state and drives one session from first frame to exit."""

    def __init__(self, term: Terminal, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.perf_counter):
        self.term = term
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.clock = clock

        self.renderer = GameRenderer(term)
        self.input_handler = InputHandler()
        self.cadence = Cadence(self.config.killer_cadence)

        self.phase = Phase.RUNNING
        self.state: Optional[GameState] = None
        self.ticks = 0
        self.reseeds = 0
        self.last_tick = 0.0
        self.last_reseed = 0.0
        self.final_state: Optional[GameState] = None

    def start(self) -> None:
        """Build the board from the terminal size and draw the first frame."""
        width, height = self.term.width, self.term.height
        self.state = GameState(
            width=width,
            height=height,
            cursor=start_position(width, height),
            killers=spawn_killers(width, height, self.rng),
        )
        logger.info('game started on %dx%d board, cursor at %s',
                    width, height, self.state.cursor.as_tuple())

        self.renderer.present(self.renderer.render_frame(self.state))
        self.phase = Phase.RUNNING
        now = self.clock()
        self.last_tick = now
        self.last_reseed = now

    def tick(self) -> None:
        """One simulation step: collision check, optional killer advance, full redraw."""
        if collision_check(self.state):
            self._trigger_game_over()
            return

        if self.cadence.tick():
            self.state.replace_killers(pursuit_system(self.state))

        self.renderer.present(self.renderer.render_frame(self.state))
        self.ticks += 1

    def reseed(self) -> None:
        """Replace all killers with freshly randomized ones."""
        self.state.replace_killers(
            spawn_killers(self.state.width, self.state.height, self.rng)
        )
        self.reseeds += 1
        logger.info('killers reseeded (#%d), nearest at distance %d',
                    self.reseeds, nearest_killer_distance(self.state))

    def handle_input(self) -> None:
        """Poll one keystroke and apply it."""
        key = poll_key(self.term, self.config.poll_timeout)
        self.input_handler.process_key(key)

        if self.input_handler.consume_quit():
            self.stop(Phase.QUIT)
            return

        player_input_system(self.state, self.input_handler)

    def step(self) -> None:
        """One loop iteration: timing-gated tick, timing-gated reseed, input poll."""
        if self.phase is not Phase.RUNNING:
            return

        if self.clock() - self.last_tick >= self.config.tick_interval:
            self.tick()
            if self.phase is not Phase.RUNNING:
                return
            self.last_tick = self.clock()

        if self.clock() - self.last_reseed >= self.config.reseed_interval:
            self.reseed()
            self.last_reseed = self.clock()

        self.handle_input()

    def run(self) -> Phase:
        """Play until game over or quit. Returns the final phase."""
        self.start()
        while self.phase is Phase.RUNNING:
            self.step()
        return self.phase

    def stop(self, phase: Phase) -> None:
        """End the session, keeping a detached copy of the last board."""
        self.phase = phase
        self.final_state = self.state.snapshot() if self.state is not None else None
        logger.info('%s after %d ticks and %d frames',
                    phase.name, self.ticks, self.renderer.frames_presented)

    def _trigger_game_over(self):
        self.renderer.present(self.renderer.render_game_over(self.state))
        self.stop(Phase.GAME_OVER)


# =============================================================================
# MAIN LOOP
# =============================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Sets up the terminal and runs the game loop."""
    config = parse_args(argv)
    setup_logging(config.log_file, config.log_level)

    term = Terminal()

    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        return 1

    # Both contexts restore the terminal on every exit path, exceptions included
    with term.cbreak(), term.hidden_cursor():
        game = Game(term, config)
        try:
            phase = game.run()
        except KeyboardInterrupt:
            # Ctrl-C still raises SIGINT under cbreak; treat it as quit
            game.stop(Phase.QUIT)
            phase = game.phase
        except Exception:
            logger.exception('terminal failure, aborting')
            raise

    # Restore terminal
    print(term.normal, end='', flush=True)
    final = game.final_state
    if final is not None:
        logger.info('exited with phase %s: cursor %s, killers %s', phase.name,
                    final.cursor.as_tuple(), [k.as_tuple() for k in final.killers])
    return 0


if __name__ == '__main__':
    sys.exit(main())
