"""Main entry point for the TermiStat system monitor."""
import argparse
import logging
import sys
from dataclasses import replace
from .config.config_manager import ConfigManager, DEFAULT_CONFIG_PATH
from .core.session import Session


def setup_logging(log_file, level: str):
    """Log to a file when asked; stdout belongs to the dashboard."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    else:
        logging.getLogger("termistat").addHandler(logging.NullHandler())


def main(argv=None) -> int:
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(description="Terminal system resource monitor")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--refresh-rate", type=float, default=None)
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.log_level)

    # Load configuration - let it crash if bad
    config = ConfigManager.load_config(args.config)
    if args.refresh_rate is not None:
        config = replace(config, refresh_rate=args.refresh_rate)
    if args.no_color:
        config.display.show_colors = False

    return Session(config).run()


if __name__ == "__main__":
    sys.exit(main())
