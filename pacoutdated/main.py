#!/usr/bin/env python3
"""
Main Entry Point for pacoutdated
"""

import argparse
import sys

from .checker import OutdatedChecker
from .common.config_loader import load_config
from .common.errors import PacOutdatedError
from .common.logging_utils import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='pacoutdated',
        description='List installed packages whose version differs from the configured repositories',
    )
    parser.add_argument('--config', metavar='FILE', help='YAML settings file')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if args.debug:
            config['debug_mode'] = True
        setup_logging(config['debug_mode'], config['log_file'])

        OutdatedChecker(config).run()
    except PacOutdatedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
