from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

OAUTH_PREFIX = "oauth:"


def normalize_channels(channels: str | list[str] | Any) -> list[str]:
    """Normalize a channel list to lowercase ``#name`` entries.

    Accepts a comma-separated string or a list. Whitespace and empty entries
    are dropped and duplicates removed, keeping first-seen order.

    Raises:
        ValueError: The value is neither a string nor a list.
    """
    if isinstance(channels, str):
        channels = channels.split(",")
    if not isinstance(channels, list):
        raise ValueError("channels must be a comma-separated string or a list")
    normalized: list[str] = []
    for c in channels:
        if not isinstance(c, str):
            continue
        name = c.strip().lower()
        if not name:
            continue
        if not name.startswith("#"):
            name = f"#{name}"
        normalized.append(name)
    return list(dict.fromkeys(normalized))


class BotConfig(BaseModel):
    """Startup settings for the chat connection.

    Attributes:
        token: OAuth chat token, always carrying the ``oauth:`` prefix.
        nick: Login name of the bot account (lowercase).
        channels: Channels to join, ``#``-prefixed.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1)
    nick: str = Field(min_length=1, max_length=25)
    channels: list[str] = Field(min_length=1)

    @field_validator("token", mode="before")
    @classmethod
    def validate_token(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("token must be a non-empty string")
        token = v.strip()
        if token.startswith(OAUTH_PREFIX):
            token = token[len(OAUTH_PREFIX) :]
        if not token:
            raise ValueError("token must not be empty")
        return f"{OAUTH_PREFIX}{token}"

    @field_validator("nick", mode="before")
    @classmethod
    def validate_nick(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("nick must be a string")
        return v.strip().lower()

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> list[str]:
        return normalize_channels(v)

    @property
    def join_target(self) -> str:
        """Channels joined by commas, as sent in the JOIN line."""
        return ",".join(self.channels)

    def redacted(self) -> dict[str, Any]:
        """Settings safe for logging (token hidden)."""
        return {"nick": self.nick, "channels": self.join_target, "token": "***"}
