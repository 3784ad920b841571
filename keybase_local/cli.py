#!/usr/bin/env python3
"""
keybase-local command line entry point
"""
import sys
import logging
import argparse

from keybase_local import Installation, VERSION
from keybase_local.core.exceptions import KeybaseLocalError, NotRunningError

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Setup logging to stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def running_version(installation):
    """Version of the running client, or None if it cannot be asked"""
    try:
        return installation.running_version()
    except NotRunningError:
        logger.warning("Keybase stopped before its version could be read")
    except FileNotFoundError as e:
        logger.warning(f"Could not run keybase: {e}")
    return None


def print_status(installation):
    print(f"Config file:  {installation.config.config_file}")
    print(f"Current user: {installation.current_user() or '(none)'}")
    if installation.current_user():
        print(f"Private dir:  {installation.private_dir()}")
        print(f"Public dir:   {installation.public_dir()}")

    running = installation.running()
    print(f"Running:      {'yes' if running else 'no'}")
    if running:
        print(f"Version:      {running_version(installation) or 'unknown'}")


def print_users(installation):
    for user in sorted(installation.local_users(), key=lambda u: u.username):
        print(user.username)


COMMANDS = {
    'status': print_status,
    'users': print_users,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='keybase-local',
        description='Inspect the local Keybase installation'
    )
    parser.add_argument('command', nargs='?', default='status', choices=sorted(COMMANDS),
                        help='What to show (default: status)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        installation = Installation.discover()
        COMMANDS[args.command](installation)
    except KeybaseLocalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
