#!/usr/bin/env python3
"""
KILLER CHASE Launcher
======================
Run this script to start the game.
"""

import sys

from killer_chase.main import main

if __name__ == "__main__":
    sys.exit(main())
