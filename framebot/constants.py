"""
Configuration constants for the frame-data bot

This module contains all configurable constants used throughout the application.
Each tunable can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Same contract as ``_get_env_int`` but for floats.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Twitch chat gateway (IRC lines over a plain websocket)
TWITCH_IRC_WS_URL = os.getenv("TWITCH_IRC_WS_URL", "ws://irc-ws.chat.twitch.tv:80")
WS_OPEN_TIMEOUT = _get_env_float("WS_OPEN_TIMEOUT", 10.0)  # handshake timeout (s)

# Seconds to wait between sessions. 0 reconnects immediately, forever.
RECONNECT_DELAY = _get_env_float("RECONNECT_DELAY", 0.0)

# Chat command grammar
COMMAND_PREFIX = "!"
FRAMES_COMMANDS = ("frames", "fd")
USAGE_HINT = "Invalid args, try: !frames <char> <move_query>"

# Dustloop wiki Cargo API (frame-data source)
DUSTLOOP_API_URL = os.getenv(
    "DUSTLOOP_API_URL", "https://www.dustloop.com/wiki/api.php"
)
DUSTLOOP_MOVE_TABLE = "MoveData_GGST"
DUSTLOOP_PAGE_SIZE = _get_env_int("DUSTLOOP_PAGE_SIZE", 500)
DUSTLOOP_REQUEST_TIMEOUT = _get_env_float("DUSTLOOP_REQUEST_TIMEOUT", 30.0)
LOOKUP_LOAD_MAX_ATTEMPTS = _get_env_int("LOOKUP_LOAD_MAX_ATTEMPTS", 5)
LOOKUP_LOAD_BACKOFF_MAX = _get_env_float("LOOKUP_LOAD_BACKOFF_MAX", 60.0)

# Move-name prefix matches shorter than this are ignored
MIN_PREFIX_MATCH_LENGTH = _get_env_int("MIN_PREFIX_MATCH_LENGTH", 2)
