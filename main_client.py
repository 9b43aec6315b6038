#!/usr/bin/env python3
"""
Main entry point for the Wiiload client.

Usage: main_client.py <file> [address]

Sends a .dol, .elf, .rpx or .wuhb file to a console running a Wiiload
receiver. Without an explicit address the WII environment variable
(or the .env file) supplies it.
"""

import sys

from client.wiiload import send_file
from config.settings import Config
from utils.logging import setup_logging, get_logger
from utils.exceptions import ConfigurationError, WiiloadError

logger = get_logger(__name__)


def main(argv=None) -> int:
    """Main entry point; returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = Config().load_wiiload_config()
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        logger.error("See .env.example for the available settings.")
        return 1

    setup_logging(config.log_level)

    if not argv or len(argv) > 2:
        logger.error("Usage: main_client.py <file> [address]")
        return 2

    path = argv[0]
    address = argv[1] if len(argv) == 2 else None

    try:
        report = send_file(
            path,
            address,
            fallback_address=config.address,
            timeout=config.timeout,
        )
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        logger.error(
            "Pass an address or set WII. "
            "See .env.example for the available settings."
        )
        return 1
    except WiiloadError as e:
        logger.error(f"Transfer failed: {e}")
        return 1

    logger.info(
        f"Delivered {report.filename} to {report.address}:{report.port} "
        f"({report.header_size} byte header, {report.payload_size} byte payload)"
    )
    return 0


def run() -> None:
    """Console script wrapper."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)


if __name__ == '__main__':
    run()
