"""Application entry point.

This module provides the main() function that parses the command line,
configures logging, loads the viewer configuration and displays the
ViewerWindow.

Usage:
    zoompanviewer schematic.png
    zoompanviewer schematic.png --config framing.json --log-level DEBUG
    zoompanviewer schematic.png --start-zoom 1.0

    # Or as a module:
    python -m ZoomPanViewer.app schematic.png

    # Or from Python:
    from ZoomPanViewer import main
    main(["schematic.png"])
"""

import sys
import argparse
import logging
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from .core.config import ViewerConfig, ConfigError, load_config
from .ui.viewer import ViewerWindow

logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: List of arguments to parse. If None, uses sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="zoompanviewer",
        description="Zoom-and-pan viewer for a single large image",
    )
    parser.add_argument("image", nargs="?", default=None, help="Image file to open on startup")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file overriding zoom range and initial framing",
    )
    parser.add_argument(
        "--start-zoom",
        type=float,
        default=None,
        help="Multiplier applied to the contain-fit scale (overrides the config file)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: INFO)",
    )
    return parser.parse_args(args)


def setup_logging(level: str):
    """Configure application logging.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_config(config_path: Optional[str], start_zoom: Optional[float] = None) -> ViewerConfig:
    """Return the config from ``config_path`` (defaults when None).

    ``start_zoom`` replaces the configured value when given.
    """
    config = ViewerConfig() if config_path is None else load_config(config_path)
    if start_zoom is not None:
        config = config.with_overrides(start_zoom=start_zoom)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Run the viewer application.

    Args:
        argv: Command-line arguments without the program name
            (defaults to sys.argv[1:])

    Returns:
        Exit code from QApplication.exec(), or 1 on invalid configuration
    """
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = build_config(args.config, args.start_zoom)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    app = QApplication.instance() or QApplication(sys.argv[:1])
    logger.info("Starting ZoomPanViewer")

    w = ViewerWindow(config=config, image_path=args.image)
    w.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
