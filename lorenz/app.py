"""
Lorenz Attractor - GUI entry point
"""

import argparse
import logging
import sys

from .core.controller import LorenzController
from .utils.config import Config, ConfigError
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lorenz attractor with looping background audio")
    parser.add_argument("--config", help="Config file (default: ~/.lorenz/config.json)")
    parser.add_argument("--audio", help="Audio file to loop (default: zimmer.wav)")
    parser.add_argument("--no-audio", action="store_true", help="Run without background audio")
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"],
                        help="Log level (default: from config, else info)")
    return parser


def load_config(args: argparse.Namespace) -> dict:
    """Read the config file and apply command line overrides"""
    config = Config(args.config)
    try:
        config.load()
        logger.info("Configuration: %s", config.config_path)
    except ConfigError as e:
        logger.error("%s; using defaults", e)
    if args.audio:
        config.set("audio", "file", args.audio)
    if args.no_audio:
        config.set("audio", "enabled", False)
    return config.get_all()


def configure_logging(args: argparse.Namespace, config: dict):
    """Apply the log level: --log-level, else the config's logging.level, else INFO"""
    setup_logging(args.log_level or config.get("logging", {}).get("level", "INFO"))


def main(argv=None):
    """Main application entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or "INFO")

    config = load_config(args)
    configure_logging(args, config)

    # Qt is imported here so the core stays usable without a display
    from PyQt6.QtWidgets import QApplication
    from .gui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else [sys.argv[0], *argv])
    app.setApplicationName("Lorenz Attractor")

    controller = LorenzController(config=config)
    controller.initialize()

    window = MainWindow(controller)
    window.show()
    window.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
