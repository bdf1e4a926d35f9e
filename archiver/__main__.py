#!/usr/bin/env python3
"""
Single-Page Archiver - Main Entry Point

Parses the command line into an Options record, loads the ambient
configuration and sets up logging before handing the options over.
"""

import sys
from typing import List, Optional

from archiver.cli.arguments import CLIManager
from archiver.core.base import ConfigurationError
from archiver.core.config import ConfigManager
from archiver.core.logging import setup_logging, get_logger, logging_manager


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the archiver"""
    cli_manager = CLIManager()
    options = cli_manager.parse_options(argv)

    config_manager = ConfigManager()
    try:
        config_manager.load_config()
        logging_config = config_manager.logging_config
        setup_logging(
            level=logging_config.level,
            log_file=logging_config.file,
            max_size=logging_config.max_size,
            backup_count=logging_config.backup_count,
            no_color=options.no_color,
            silent=options.silent
        )
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger = get_logger()

    logger.debug("Resolved options:")
    logging_manager.log_options(options.as_dict())

    destination = "STDOUT" if options.output == "-" else options.output
    source = "STDIN" if options.target == "-" else options.target
    logger.info(f"Archiving {source} to {destination} (timeout {options.timeout}s)")
    if options.domains is not None:
        mode = "blacklist" if options.blacklist_domains else "whitelist"
        logger.info(f"Domain {mode}: {', '.join(options.domains)}")

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nArchiver interrupted by user", file=sys.stderr)
        sys.exit(130)
