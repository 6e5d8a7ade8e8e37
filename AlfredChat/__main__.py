"""
Entry point for AlfredChat application.
Starts the terminal chat; flags only tune logging.
"""

import argparse
import sys

from AlfredChat import __version__
from AlfredChat.config import config
from AlfredChat.core.client import run_client
from AlfredChat.core.logging import auto_configure, get_logging_manager

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def parse(argv=None):
    parser = argparse.ArgumentParser(prog='AlfredChat', description='Alfred terminal chat')
    parser.add_argument('--log-level', choices=LOG_LEVELS,
                        type=str.upper, default=config.LOG_LEVEL,
                        help='Log level (default: preset for ALFRED_ENV)')
    parser.add_argument('--log-dir', default=config.LOG_DIR,
                        help='Write log files to this directory (default: no log files)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    # argparse does not check choices against the default, which comes from ALFRED_LOG_LEVEL
    if args.log_level is not None and args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid ALFRED_LOG_LEVEL: {config.LOG_LEVEL!r} "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )

    return args


def main(argv=None) -> int:
    args = parse(argv)
    auto_configure(level=args.log_level, log_dir=args.log_dir)
    try:
        return run_client()
    finally:
        get_logging_manager().shutdown()


if __name__ == "__main__":
    sys.exit(main())
