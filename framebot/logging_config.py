"""
Root logging setup for the frame-data bot, using colorlog.
"""

import atexit
import logging
import os
import sys

import colorlog

from .errors.handling import error_tally


class LoggerConfigurator:
    """Installs the colored root handler.

    ``DEBUG`` set to 'true', '1' or 'yes' selects DEBUG level, otherwise INFO.
    """

    def configure(self) -> None:
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logging.basicConfig(level=log_level, handlers=[handler], force=True)

        # Suppress websockets frame-level debug output
        logging.getLogger("websockets").setLevel(logging.INFO)

        atexit.register(self._log_final_error_summary)

    def _log_final_error_summary(self) -> None:
        logging.info("📊 Final error summary before shutdown:")
        error_tally.log_summary()
