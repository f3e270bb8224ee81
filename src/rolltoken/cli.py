"""
RollToken command line interface

    rolltoken generate [--offset N]
    rolltoken validate CODE
    rolltoken info

The shared secret is read from ROLLTOKEN_SECRET or prompted for with getpass.
It is never accepted as a command line argument.

Exit status:
    0  success / token valid
    1  token invalid
    2  configuration error
    3  clock unavailable
"""

import os
import sys
import getpass
import logging
import argparse

from . import config
from .exceptions import ConfigurationError, ClockUnavailable
from .rolling.manager import RollingTokenManager
from .utils.logger import setup_logger, set_console_level
from .utils.colorprint import print_error, print_success, print_warning, print_info

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG = 2
EXIT_CLOCK = 3

logger = logging.getLogger(__name__)


def build_parser():
    """Create the argument parser for the rolltoken command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--interval", type=int, default=None,
                        help=f"Seconds per rotation bucket (default: ${config.ENV_INTERVAL} or {config.DEFAULT_INTERVAL})")
    common.add_argument("--tolerance", type=int, default=None,
                        help=f"Buckets accepted on each side of now (default: ${config.ENV_TOLERANCE} or {config.DEFAULT_TOLERANCE})")
    common.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(prog="rolltoken",
                                     description=f"{config.APP_NAME}: shared-secret rolling tokens")
    parser.add_argument("--version", action="version", version=f"{config.APP_NAME} {config.APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", parents=[common], help="Print the token for the current bucket")
    gen.add_argument("--offset", type=int, default=0, help="Bucket offset from now (may be negative)")

    val = subparsers.add_parser("validate", parents=[common], help="Check a token against the current window")
    val.add_argument("code", help="Token code to check")

    subparsers.add_parser("info", parents=[common], help="Show the effective settings and current bucket")
    return parser


def read_secret():
    """
    Get the shared secret from the environment or an interactive prompt.

    Returns:
        str: The secret (may be empty, which the manager rejects)
    """
    secret = os.environ.get(config.ENV_SECRET)
    if secret:
        return secret
    return getpass.getpass("Shared secret: ")


def _generate(manager, args):
    token = manager.generate_token_with_offset(args.offset)
    print(token.code)
    print_info(f"bucket {token.bucket}, rotates in {manager.get_remaining_time()}s", stream=sys.stderr)
    return EXIT_OK


def _validate(manager, args):
    if manager.is_valid(args.code):
        print_success("VALID")
        return EXIT_OK
    print_warning("INVALID")
    return EXIT_INVALID


def _info(manager, args):
    print(f"interval:   {manager.interval}s")
    print(f"tolerance:  {manager.tolerance}")
    print(f"bucket:     {manager.current_bucket()}")
    print(f"remaining:  {manager.get_remaining_time()}s")
    return EXIT_OK


COMMANDS = {
    "generate": _generate,
    "validate": _validate,
    "info": _info,
}


def main(argv=None):
    """
    Entry point for the rolltoken console script.

    Args:
        argv (list): Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        int: Process exit status
    """
    args = build_parser().parse_args(argv)

    setup_logger()
    if args.debug:
        set_console_level(logging.DEBUG)

    try:
        settings = config.load_settings(interval=args.interval, tolerance=args.tolerance)
        try:
            secret = read_secret()
        except (EOFError, KeyboardInterrupt):
            raise ConfigurationError("No shared secret provided") from None
        manager = RollingTokenManager(secret, settings['interval'], settings['tolerance'])
        del secret
        return COMMANDS[args.command](manager, args)
    except ConfigurationError as e:
        print_error(f"Configuration error: {e}", stream=sys.stderr)
        return EXIT_CONFIG
    except ClockUnavailable as e:
        logger.critical(str(e))
        print_error(f"Clock unavailable: {e}", stream=sys.stderr)
        return EXIT_CLOCK


if __name__ == "__main__":
    sys.exit(main())
