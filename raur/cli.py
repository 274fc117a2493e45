"""
Command line entry point for RAUR
"""

import argparse
import sys
from typing import List, Optional

from raur import __version__
from raur.common.config_loader import ConfigLoader
from raur.common.logging_utils import get_logger, setup_logging
from raur.errors import RaurError
from raur.orchestrator.package_manager import PackageManager

logger = get_logger(__name__)

EXIT_FATAL = 2
EXIT_INTERRUPTED = 130

# subcommand -> (progress verb, PackageManager method)
COMMANDS = {
    'install': ('Installing', 'install'),
    'update': ('Updating', 'update'),
    'remove': ('Removing', 'remove'),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='raur',
        description='RAUR is an Arch User Repository helper for managing AUR packages with ease',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--skip-pgp-check', action='store_true', default=False,
                        help='pass --skippgpcheck to makepkg')
    parser.add_argument('--debug', action='store_true', default=False,
                        help='verbose output including every external command')
    parser.add_argument('--config', metavar='PATH', default=None,
                        help='YAML config file (default: ~/.config/raur/config.yaml)')

    # Lets --skip-pgp-check also follow the subcommand without clobbering it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--skip-pgp-check', action='store_true', default=argparse.SUPPRESS,
                        help='pass --skippgpcheck to makepkg')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    install = subparsers.add_parser('install', parents=[common], help='build and install a package from AUR')
    install.add_argument('package')

    update = subparsers.add_parser('update', parents=[common], help='reinstall a package if AUR has a new version')
    update.add_argument('package')

    remove = subparsers.add_parser('remove', parents=[common], help='remove a package with pacman -Rns')
    remove.add_argument('package')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    setup_logging(args.debug)

    try:
        config = ConfigLoader(args.config).load_config()
    except RaurError as e:
        logger.error(f"❌ {e}")
        return EXIT_FATAL

    if args.skip_pgp_check:
        config['skip_pgp_check'] = True
    if args.debug:
        config['debug'] = True

    setup_logging(config['debug'], config.get('log_file') or None)

    verb, method = COMMANDS[args.command]
    logger.info(f"{verb} {args.package}...")

    try:
        manager = PackageManager(config)
        return getattr(manager, method)(args.package)
    except RaurError as e:
        logger.error(f"❌ {e}")
        return EXIT_FATAL
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
