#!/usr/bin/env python3
"""
Main entry point for the frame-data bot
"""

import asyncio
import logging
import sys

from .bot.dispatcher import CommandDispatcher
from .config import get_configuration
from .errors.handling import log_error
from .errors.internal import DataLoadError
from .frames.dustloop import DustloopClient
from .irc.connection import ConnectionManager

# Configure logging after imports to prevent other modules from configuring it
from .logging_config import LoggerConfigurator
from .logs.logger import logger


async def main() -> None:
    """Load settings and frame data, then keep the chat session alive forever.

    Raises:
        SystemExit: Configuration or the initial frame-data load failed.
    """
    try:
        logger.log_event("app", "start")
        config = get_configuration()
        logger.log_event("app", "config_loaded", **config.redacted())
        index = await DustloopClient().load_index()
        dispatcher = CommandDispatcher(index)
        await ConnectionManager(config, dispatcher).run_forever()
    except asyncio.CancelledError:
        raise
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
    except DataLoadError as e:
        log_error("Frame data unavailable", e)
        sys.exit(1)
    finally:
        logger.log_event("app", "shutdown")


def health_check() -> int:
    """Validate configuration without connecting; returns the exit code."""
    get_configuration()
    logging.info("✅ Health check passed - configuration is valid")
    return 0


def run(argv: list[str] | None = None) -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: If a critical error occurs during execution.
    """
    LoggerConfigurator().configure()
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "--health-check":
        sys.exit(health_check())
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, asyncio.CancelledError):
        sys.exit(0)
    except Exception as e:  # noqa: BLE001
        log_error("Top-level error", e)
        sys.exit(1)


if __name__ == "__main__":
    run()
