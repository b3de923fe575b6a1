"""
Entry point for ShadeFM.
"""
import argparse
import curses
import getpass
import locale
import logging
import os
import traceback

from . import __version__
from .core.app import ShadeFM
from .core.bootstrap import prepare_environment
from .core.config import load_config, save_config
from .core.errors import ShadeFMError

LOGGER = logging.getLogger(__name__)

KEY_PROMPT = 'Type the session password: '

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def setup_logging():
    """Enable debug logging to a file when SHADEFM_DEBUG is set."""
    if os.environ.get('SHADEFM_DEBUG'):
        logging.basicConfig(
            level=logging.DEBUG,
            format='[%(levelname)s] %(name)s: %(message)s',
            filename=os.environ.get('SHADEFM_LOG', 'shadefm-debug.log'),
        )


def build_parser():
    parser = argparse.ArgumentParser(
        prog='shadefm',
        description='Browse a directory tree, view files and write optionally obscured notes.',
    )
    parser.add_argument('--root', help='Root directory of the session (default: config or ".").')
    parser.add_argument('--config', help='Path to the TOML config file.')
    parser.add_argument('--init-config', action='store_true',
                        help='Write the effective config to the config path and exit.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def read_key(prompt=KEY_PROMPT):
    """Read the session key without echoing it."""
    return getpass.getpass(prompt)


def run(argv=None):
    """Run ShadeFM and return process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging()
    config = load_config(args.config)

    if args.init_config:
        path = save_config(config, args.config)
        print(f'Wrote {path}')
        return 0

    root = args.root or config.root
    try:
        key = read_key()
        session = ShadeFM.create(root, key, config)
    except KeyboardInterrupt:
        return 130
    except (OSError, EOFError, ShadeFMError) as e:
        LOGGER.error('startup failed: %s', e)
        print(f'Error: {e}')
        return 1

    prepare_environment()
    try:
        curses.wrapper(session.run)
    except KeyboardInterrupt:
        return 130
    except curses.error as e:
        print(f'Error: cannot initialize the terminal: {e}')
        return 1
    except Exception as e:
        # Any crash: restore the terminal first, then report.
        try:
            curses.endwin()
        except curses.error:
            pass
        LOGGER.exception('session crashed')
        print(f'\nError: {e}')
        traceback.print_exc()
        return 1

    print('End of the session')
    return 0


def main_cli():
    """Console script entrypoint."""
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
