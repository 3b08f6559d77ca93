"""
Entry point for the wire canvas GUI.

Usage::

    python main.py
    python main.py --log-level DEBUG
    python main.py --config ./settings.json
"""

import argparse
import logging
import sys

from controllers.circuit_controller import CircuitController
from controllers.interaction_controller import InteractionController
from controllers.settings import SettingsRegistry
from models.circuit import build_demo_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wire-canvas",
        description="Place circuit elements and connect their terminals with wires.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a settings JSON file (default: ~/.wire-canvas/settings.json)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported here so the controllers stay usable without a display
    from PyQt6.QtWidgets import QApplication

    from GUI.main_window import MainWindow

    settings = SettingsRegistry(config_path=args.config)
    controller = InteractionController(CircuitController(build_demo_scene()), settings)

    app = QApplication(sys.argv[:1])
    window = MainWindow(controller)
    window.show()
    logger.info("Canvas ready with %d elements", len(controller.model.elements))
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
