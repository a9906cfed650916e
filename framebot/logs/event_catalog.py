"""Event texts, keyed by (domain, action), read from event_templates.json."""

from __future__ import annotations

import json
from pathlib import Path


def _load() -> dict[tuple[str, str], str]:
    path = Path(__file__).with_name("event_templates.json")
    with path.open("r", encoding="utf-8") as f:
        raw: dict[str, dict[str, str]] = json.load(f)
    return {
        (domain, action): template
        for domain, actions in raw.items()
        for action, template in actions.items()
    }


EVENT_TEMPLATES = _load()


def render(domain: str, action: str, fields: dict[str, object]) -> str:
    """Fill the event's template; events without one get ``domain: action``."""
    template = EVENT_TEMPLATES.get((domain, action))
    if template is None:
        return f"{domain}: {action.replace('_', ' ')}"
    try:
        return template.format(**fields)
    except (KeyError, IndexError, ValueError):
        return template
