#!/usr/bin/env python3
"""Entry point for pkgward."""

import argparse
import logging
import sys
from pathlib import Path

from .app import PkgWardApp
from .core.config_manager import ConfigManager
from .ui.console import ConsolePrompter
from .ui.prompts import PromptCancelled
from .utils.constants import (
    APP_NAME,
    CONFIG_FILE,
    EXIT_CANCELLED,
    EXIT_CONFIG_WRITE_FAILED,
    EXIT_OK,
    LOG_FILE,
)


def setup_logging(log_file: Path = LOG_FILE, verbose: bool = False):
    """Set up application logging.

    Args:
        log_file: File receiving the full INFO-level log
        verbose: Also echo DEBUG messages to stderr
    """
    handlers = []

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        handlers.append(file_handler)
    except OSError as e:
        print(f"Warning: cannot write log file {log_file}: {e}", file=sys.stderr)

    # Keep the terminal for prompts and results unless asked otherwise
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handlers.append(stream_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info(f"Starting {APP_NAME}")
    logger.info("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} - Install a package and manage the systemd service it provides"
    )
    parser.add_argument('--gui', action='store_true',
                        help='Ask and report through Qt dialogs instead of the terminal')
    parser.add_argument('--config', type=Path, default=CONFIG_FILE,
                        help=f'Path to the YAML config file (default: {CONFIG_FILE})')
    parser.add_argument('--log-file', type=Path, default=LOG_FILE,
                        help=f'Path to the log file (default: {LOG_FILE})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print debug logging to stderr')
    parser.add_argument('--init-config', action='store_true',
                        help='Write the current settings to the config file and exit')
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_file, args.verbose)
    logger = logging.getLogger(__name__)

    config_manager = ConfigManager(args.config)
    config_manager.load_config()

    if args.init_config:
        if not config_manager.save_config():
            print(f"Could not write {config_manager.config_file}", file=sys.stderr)
            return EXIT_CONFIG_WRITE_FAILED
        print(f"Wrote settings to {config_manager.config_file}")
        return EXIT_OK

    if args.gui:
        from .ui.dialogs import QtPrompter
        prompter = QtPrompter()
    else:
        prompter = ConsolePrompter()

    app = PkgWardApp.from_config(config_manager, prompter)

    try:
        package = prompter.ask_package()
        exit_code = app.run(package, prompter.ask_action)
    except PromptCancelled as e:
        logger.info(f"Prompt cancelled: {e}")
        return EXIT_CANCELLED

    logger.info(f"{APP_NAME} exited with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
