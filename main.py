# main.py
# Main entry point for the Color Picker Builder application.

from __future__ import annotations

import argparse
import logging
import os
import sys

from utils.exception_safe_application import ExceptionSafeApplication

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-picker-builder",
        description="Configure a color picker component and export its configuration as JSON.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to an exported configuration (JSON) to import on startup",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Initializes the QApplication, sets up services, creates the main window,
    and starts the event loop.
    """
    raw_argv = list(sys.argv if argv is None else argv)
    args, _qt_args = build_parser().parse_known_args(raw_argv[1:])

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = ExceptionSafeApplication(raw_argv)
    app.setStyle("Fusion")

    # Imported after the application exists; the services are module singletons.
    from main_window import MainWindow

    initial_config = None
    if args.config:
        if os.path.exists(args.config):
            initial_config = args.config
        else:
            logger.warning("Configuration file not found at '%s'", args.config)

    main_win = MainWindow(initial_config_path=initial_config)
    main_win.show()

    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
