"""Main entry point for the hostsnap metrics snapshot."""
import argparse
import logging
from typing import List, Optional

from .config.config_manager import ConfigError, ConfigManager
from .core.report import ReportBuilder
from .display import ReportPrinter

LOG_LEVELS = ["debug", "info", "warning", "error"]


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="hostsnap",
        description="Print a one-shot snapshot of host system metrics",
    )
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--no-color", action="store_true", help="do not colour failed metrics")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="warning",
                        help="diagnostic logging level (written to stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(message)s",
    )

    try:
        config = ConfigManager.load_config(args.config)
    except ConfigError as e:
        parser.error(str(e))
    if args.no_color:
        config.display.show_colors = False

    lines = ReportBuilder(config).build()
    ReportPrinter(config).print_report(lines)

    # Individual metric failures are already reported in the output
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
