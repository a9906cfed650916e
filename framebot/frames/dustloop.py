"""Dustloop wiki client building the frame-data index.

Move data comes from the wiki's Cargo API (``action=cargoquery``), paged by
``DUSTLOOP_PAGE_SIZE`` rows. Transient HTTP failures are retried with
tenacity; anything left after the last attempt becomes ``DataLoadError``.
"""

from __future__ import annotations

import asyncio
import html
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..constants import (
    DUSTLOOP_API_URL,
    DUSTLOOP_MOVE_TABLE,
    DUSTLOOP_PAGE_SIZE,
    DUSTLOOP_REQUEST_TIMEOUT,
    LOOKUP_LOAD_BACKOFF_MAX,
    LOOKUP_LOAD_MAX_ATTEMPTS,
)
from ..errors.internal import DataLoadError, NetworkError, ParsingError
from ..logs.logger import logger
from .index import CHARACTER_ALIASES, FrameDataIndex, normalize
from .models import CharacterData, MoveRecord

# Cargo column -> MoveRecord attribute
FIELD_MAP: dict[str, str] = {
    "input": "input",
    "name": "name",
    "damage": "damage",
    "guard": "guard",
    "startup": "startup",
    "active": "active",
    "recovery": "recovery",
    "onBlock": "on_block",
    "onHit": "on_hit",
    "level": "level",
}
CHARACTER_FIELD = "chara"

_ALIASES_BY_KEY = {normalize(name): aliases for name, aliases in CHARACTER_ALIASES.items()}


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return html.unescape(str(value))


def parse_rows(payload: Mapping[str, Any]) -> list[dict[str, str]]:
    """Extract the row dicts from one ``cargoquery`` response.

    Raises:
        ParsingError: The response is an API error or has no result list.
    """
    if "error" in payload:
        error = payload["error"]
        info = error.get("info") if isinstance(error, Mapping) else error
        raise ParsingError(f"Dustloop API error: {info}")
    rows = payload.get("cargoquery")
    if not isinstance(rows, list):
        raise ParsingError("Dustloop response missing 'cargoquery' list")
    parsed: list[dict[str, str]] = []
    for row in rows:
        title = row.get("title") if isinstance(row, Mapping) else None
        if not isinstance(title, Mapping):
            logger.log_event("frames", "row_skipped", level=logging.DEBUG, row=row)
            continue
        parsed.append({k: _clean(v) for k, v in title.items()})
    return parsed


def build_characters(rows: list[dict[str, str]]) -> list[CharacterData]:
    """Group move rows per character, keeping first-seen order."""
    characters: dict[str, CharacterData] = {}
    for row in rows:
        chara = row.get(CHARACTER_FIELD, "").strip()
        move_input = row.get("input", "").strip()
        if not chara or not move_input:
            logger.log_event("frames", "row_skipped", level=logging.DEBUG, row=row)
            continue
        character = characters.get(chara)
        if character is None:
            character = CharacterData(
                name=chara, aliases=_ALIASES_BY_KEY.get(normalize(chara), ())
            )
            characters[chara] = character
        values = {attr: row.get(col, "") for col, attr in FIELD_MAP.items()}
        values["input"] = move_input
        character.moves.append(MoveRecord(**values))
    return list(characters.values())


class DustloopClient:
    """Loads the full GGST move table from Dustloop.

    Attributes:
        api_url: Cargo API endpoint.
        page_size: Rows requested per page.
        max_attempts: Load attempts before giving up.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        api_url: str = DUSTLOOP_API_URL,
        page_size: int = DUSTLOOP_PAGE_SIZE,
        max_attempts: int = LOOKUP_LOAD_MAX_ATTEMPTS,
        backoff_max: float = LOOKUP_LOAD_BACKOFF_MAX,
    ) -> None:
        self._session = session
        self.api_url = api_url
        self.page_size = page_size
        self.max_attempts = max_attempts
        self.backoff_max = backoff_max

    def _page_params(self, offset: int) -> dict[str, str]:
        return {
            "action": "cargoquery",
            "format": "json",
            "tables": DUSTLOOP_MOVE_TABLE,
            "fields": ",".join([CHARACTER_FIELD, *FIELD_MAP]),
            "limit": str(self.page_size),
            "offset": str(offset),
        }

    async def _fetch_page(
        self, session: aiohttp.ClientSession, offset: int
    ) -> list[dict[str, str]]:
        try:
            async with session.get(
                self.api_url, params=self._page_params(offset)
            ) as response:
                response.raise_for_status()
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise NetworkError(
                f"Dustloop request failed: {str(e)}", data={"offset": offset}
            ) from e
        except ValueError as e:
            raise ParsingError(f"Dustloop returned invalid JSON: {str(e)}") from e
        if not isinstance(payload, Mapping):
            raise ParsingError("Dustloop response is not a JSON object")
        rows = parse_rows(payload)
        logger.log_event(
            "frames", "load_page", level=logging.DEBUG, rows=len(rows), offset=offset
        )
        return rows

    async def fetch_rows(self, session: aiohttp.ClientSession) -> list[dict[str, str]]:
        rows: list[dict[str, str]] = []
        offset = 0
        while True:
            page = await self._fetch_page(session, offset)
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            offset += self.page_size

    async def _load_once(self) -> FrameDataIndex:
        if self._session is not None:
            rows = await self.fetch_rows(self._session)
        else:
            timeout = aiohttp.ClientTimeout(total=DUSTLOOP_REQUEST_TIMEOUT)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                rows = await self.fetch_rows(session)
        return FrameDataIndex(build_characters(rows))

    async def load_index(self) -> FrameDataIndex:
        """Download and index all moves, retrying transient failures.

        Raises:
            DataLoadError: The data could not be loaded or parsed.
        """
        logger.log_event("frames", "load_start", url=self.api_url)

        def before_retry(retry_state):
            if retry_state.attempt_number > 1:
                logger.log_event(
                    "frames",
                    "load_retry",
                    level=logging.WARNING,
                    attempt=retry_state.attempt_number,
                )

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, max=self.backoff_max),
            retry=retry_if_exception_type(NetworkError),
            before=before_retry,
            sleep=asyncio.sleep,
        )
        try:
            index = await retrying(self._load_once)
        except RetryError as e:
            cause = e.last_attempt.exception()
            raise DataLoadError(
                f"Frame data load failed after {self.max_attempts} attempts: {cause}"
            ) from cause
        except ParsingError as e:
            raise DataLoadError(f"Frame data could not be parsed: {str(e)}") from e

        logger.log_event(
            "frames", "loaded", characters=len(index), moves=index.move_count
        )
        return index


__all__ = ["DustloopClient", "FIELD_MAP", "build_characters", "parse_rows"]
