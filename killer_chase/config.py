"""
Game Configuration
===================
Tunable constants and the validated config bundle passed to the game loop.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# CONSTANTS
# =============================================================================

# Minimum gap between two simulation ticks (seconds)
TICK_INTERVAL = 0.001

# Killers advance once every N ticks; increase to make them slower
KILLER_CADENCE = 70

# Full killer re-randomization period (seconds)
RESEED_INTERVAL = 5.0

# Upper bound on how long a keyboard poll may block (seconds)
POLL_TIMEOUT = 0.001

KILLER_COUNT = 3

# Smallest board that still fits the centered game-over banner
MIN_WIDTH = 10
MIN_HEIGHT = 2

# Glyphs
PLAYER_CHAR = '0'
KILLER_CHAR = 'X'
GAME_OVER_TEXT = 'GAME OVER!'

# ANSI 256 color constants
NEON_CYAN = 51
NEON_RED = 196
WHITE = 255

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass
class GameConfig:
    """Runtime settings for one game session."""
    tick_interval: float = TICK_INTERVAL
    killer_cadence: int = KILLER_CADENCE
    reseed_interval: float = RESEED_INTERVAL
    poll_timeout: float = POLL_TIMEOUT
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError(f'tick_interval must be positive, got {self.tick_interval}')
        if self.killer_cadence < 1:
            raise ValueError(f'killer_cadence must be at least 1, got {self.killer_cadence}')
        if self.reseed_interval <= 0:
            raise ValueError(f'reseed_interval must be positive, got {self.reseed_interval}')
        if self.poll_timeout < 0:
            raise ValueError(f'poll_timeout must not be negative, got {self.poll_timeout}')
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f'unknown log level: {self.log_level}')
