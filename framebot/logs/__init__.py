"""Event logging: the template catalog and the shared ``logger``."""

from .event_catalog import EVENT_TEMPLATES, render
from .logger import BotLogger, logger

__all__ = ["BotLogger", "logger", "EVENT_TEMPLATES", "render"]
