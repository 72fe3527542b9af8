"""
Application Initialization
==========================
This module wires logging, the Qt application and the main window together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Resolves configuration (command line first, then environment variables).
2. Sets up logging.
3. Instantiates the Main Window, which owns the visualization state.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from unlearnviz import config
from unlearnviz.app.application import create_app
from unlearnviz.logging_config import setup_logging, install_excepthook
from unlearnviz.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unlearnviz",
        description="Interactive scatter plot for adding, selecting and forgetting labeled points.",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help=f"Random seed for generated points (env: {config.SEED_ENV}).")
    parser.add_argument("--log-level", type=config.parse_log_level, default=None,
                        help=f"Logging level name, e.g. DEBUG (env: {config.LOG_LEVEL_ENV}).")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Optional path to also write logs to.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line and fill unset options from the environment."""
    args = build_parser().parse_args(argv)
    if args.seed is None:
        args.seed = config.env_int(config.SEED_ENV)
    if args.log_level is None:
        args.log_level = config.env_log_level()
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)
    install_excepthook()

    # 2. Create the Qt Application (Qt gets only the program name)
    app = create_app(sys.argv[:1])

    # 3. Initialize the Main Window
    window = MainWindow(seed=args.seed)
    window.show()
    logger.info(f"Started {config.VISIBLE_APP_NAME} (seed={args.seed}).")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
