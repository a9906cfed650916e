"""Configuration model and environment loader."""

from .loader import get_configuration, load_config
from .model import BotConfig, normalize_channels

__all__ = ["BotConfig", "get_configuration", "load_config", "normalize_channels"]
