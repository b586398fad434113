import argparse
import logging
import sys
from typing import List, Optional

from vo_auto_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_section,
)
from vo_auto_generator.constants import DefaultConfig
from vo_auto_generator.exceptions import (
    ReEngineerError,
    ConfigurationError,
    DatabaseConnectionError,
    SchemaIntrospectionError,
    OutputWriteError,
)
from vo_auto_generator.generator import run


logger = get_colored_logger(__name__)

ERROR_LABELS = {
    ConfigurationError: "Configuration Error",
    DatabaseConnectionError: "Connection Error",
    SchemaIntrospectionError: "Schema Read Error",
    OutputWriteError: "Write Error",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbtovo",
        description="Generate Java value-object classes from an existing database schema.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=f"Path to the YAML (or XML) configuration file. Defaults to ./{DefaultConfig.CONFIG_FILE_NAME}.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Source root to generate into. Overrides packagePath from the config file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)
    logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    try:
        result = run(args.config, package_path=args.output_dir)
    except ReEngineerError as e:
        label = ERROR_LABELS.get(type(e), "Error")
        logger.error(f"{label}: {e}", exc_info=args.verbose)
        return 1
    except Exception as e:
        logger.error(f"An unexpected error occurred during generation: {e}", exc_info=True)
        return 1

    log_section(logger, "Completion")
    logger.info(f"Entities: {result.entity_count}")
    logger.info(f"Duration: {result.elapsed_ms} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
