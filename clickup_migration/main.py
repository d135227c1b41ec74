"""Main entry point for the ClickUp Progress Step migration tool."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from clickup_migration.config_loader import DEFAULT_CONFIG_FILE, LOG_LEVELS, load_config
from clickup_migration.display import configure_logging, logger
from clickup_migration.migration import run_migration
from clickup_migration.models import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Migrate the ClickUp 'Progress Step' custom field to task statuses",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to the YAML configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the status changes without updating any task",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Override the configured log level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, load configuration and run the migration.

    Returns:
        Process exit code: 0 on completion, 1 on configuration or unexpected errors

    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or "INFO")

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        logger.error("Error: %s", e.message)
        return 1

    if args.dry_run:
        config["dry_run"] = True
    if args.log_level:
        config["log_level"] = args.log_level
    configure_logging(config["log_level"], config.get("log_file"))

    logger.info("Configuration loaded successfully")
    logger.info("Space ID: %s", config["space_id"])

    try:
        run_migration(config)
    except Exception as e:  # noqa: BLE001
        logger.exception("Error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
