"""Configuration loading utilities."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors.parsing import ConfigError
from .model import ParserConfig


def _read_json_object(path: str | os.PathLike[str]) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(
            f"Config file not found: {path}", data={"path": str(path)}
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(
            f"Config file could not be read: {path}: {e}", data={"path": str(path)}
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a JSON object: {path}",
            data={"path": str(path)},
        )
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ParserConfig:
    """Load and validate parser configuration.

    Precedence, lowest first: built-in defaults (themselves overridable via
    environment variables), the JSON file, then ``overrides``. Override
    values of None are ignored so unset CLI flags fall through.

    Args:
        path: JSON file to read. Falls back to IRCLINE_CONF_FILE when None.
        overrides: Explicit values that win over the file.

    Returns:
        Validated ParserConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or fails validation.
    """
    if path is None:
        path = os.environ.get("IRCLINE_CONF_FILE") or None

    data: dict[str, Any] = {}
    if path is not None:
        data.update(_read_json_object(path))
        logging.debug(f"Loaded parser config from {Path(path)}")
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ParserConfig.from_dict(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid parser configuration: {e.error_count()} error(s)",
            data={"path": str(path) if path else None, "errors": e.errors()},
        ) from e
