"""
Killer Spawner
===============
Random placement of the killer set at startup and on every reseed.
"""

import random
from typing import List, Optional

from .components import Position
from .config import KILLER_COUNT


def spawn_killers(width: int, height: int,
                  rng: Optional[random.Random] = None) -> List[Position]:
    """
    Place a fresh set of killers uniformly across the board.

    Positions are independent of the cursor and of each other, so a killer
    can land right next to the player or on top of another killer.
    """
    if rng is None:
        rng = random.Random()
    return [
        Position(rng.randrange(width), rng.randrange(height))
        for _ in range(KILLER_COUNT)
    ]
