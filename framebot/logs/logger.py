"""Event-style logger used across the bot."""

from __future__ import annotations

import logging

from .event_catalog import render


class BotLogger:
    """Writes one line per named event through a stdlib logger.

    Output goes through the root handlers installed by ``LoggerConfigurator``.
    """

    def __init__(self, name: str = "framebot") -> None:
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        *,
        exc_info: bool = False,
        **fields: object,
    ) -> None:
        """Log the ``domain``/``action`` event rendered from its template.

        ``user`` and ``channel`` go into the line prefix. At DEBUG level the
        remaining fields are appended as ``(key=value, ...)``.
        """
        user = fields.pop("user", None)
        channel = fields.pop("channel", None)
        prefix = str(user or "system")
        if channel:
            prefix = f"{prefix}#{str(channel).lstrip('#')}"
        message = f"[{prefix}] {render(domain, action, fields)}"
        if fields and self.logger.isEnabledFor(logging.DEBUG):
            context = ", ".join(f"{k}={v}" for k, v in fields.items())
            message = f"{message} ({context})"
        self.logger.log(level, message, exc_info=exc_info)


logger = BotLogger()
