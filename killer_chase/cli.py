import argparse
from typing import Optional, Sequence

from .config import (
    GameConfig, KILLER_CADENCE, RESEED_INTERVAL, TICK_INTERVAL, LOG_LEVELS
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='killer-chase',
        description='Killer Chase - dodge three killers with the arrow keys, q quits',
    )
    parser.add_argument('--killer-cadence', type=int, default=KILLER_CADENCE,
                        help=f'Killers move once every N ticks (default: {KILLER_CADENCE})')
    parser.add_argument('--reseed-interval', type=float, default=RESEED_INTERVAL,
                        help=f'Seconds between killer re-randomizations (default: {RESEED_INTERVAL})')
    parser.add_argument('--tick-interval', type=float, default=TICK_INTERVAL,
                        help=f'Minimum seconds between ticks (default: {TICK_INTERVAL})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for killer placement')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Write debug log to this file')
    parser.add_argument('--log-level', type=str.upper, default='INFO', choices=LOG_LEVELS,
                        help='Log level (default: INFO)')
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> GameConfig:
    """
    Parse command line arguments into a game config.

    Invalid values are reported through argparse and exit with status 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return GameConfig(
            tick_interval=args.tick_interval,
            killer_cadence=args.killer_cadence,
            reseed_interval=args.reseed_interval,
            seed=args.seed,
            log_file=args.log_file,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))
