"""Event message templates keyed by ``(domain, action)``.

The templates live in ``event_templates.json`` next to this module and are
read once at import time.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")


def _load_event_templates(path: Path = TEMPLATES_PATH) -> dict[tuple[str, str], str]:
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    if not isinstance(raw, Mapping):
        return {}
    return {
        (domain, action): template
        for domain, actions in raw.items()
        if isinstance(actions, Mapping)
        for action, template in actions.items()
        if isinstance(template, str)
    }


EVENT_TEMPLATES = _load_event_templates()

__all__ = ["EVENT_TEMPLATES", "TEMPLATES_PATH"]
