"""
Killer Chase - a real-time terminal dodge game.
"""

__version__ = "0.1.0"
