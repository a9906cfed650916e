"""Configuration loading from the process environment."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors.internal import ConfigError
from .model import BotConfig

TOKEN_ENV = "TWITCH_TOKEN"
NICK_ENV = "TWITCH_NAME"
CHANNELS_ENV = "TWITCH_CHANNEL"
REQUIRED_ENV = (TOKEN_ENV, NICK_ENV, CHANNELS_ENV)


def load_config(environ: Mapping[str, str] | None = None) -> BotConfig:
    """Build a ``BotConfig`` from environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.

    Raises:
        ConfigError: A required variable is missing or a value is invalid.
    """
    env = os.environ if environ is None else environ
    missing = [name for name in REQUIRED_ENV if not env.get(name, "").strip()]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}",
            data={"missing": missing},
        )
    try:
        return BotConfig(
            token=env[TOKEN_ENV],
            nick=env[NICK_ENV],
            channels=env[CHANNELS_ENV],
        )
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigError(
            f"Invalid configuration for: {', '.join(fields)}", data={"fields": fields}
        ) from e


def get_configuration() -> BotConfig:
    """Load the configuration or stop the process.

    Raises:
        SystemExit: If required settings are missing or invalid.
    """
    try:
        config = load_config()
    except ConfigError as e:
        logging.error(f"⚠️ {e}")
        logging.error(
            f"📄 Set {', '.join(REQUIRED_ENV)} before starting the bot"
        )
        sys.exit(1)
    return config
