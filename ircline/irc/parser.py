"""IRC message parsing.

Lines have the shape::

    [@tag1=value1;tag2=value2 ][:source ]COMMAND[ param1 param2 ...][ :trailing]

Each line is scanned once, left to right, with a single cursor. Every
delimiter lookup is checked; a malformed line raises a ParseError subclass
naming the segment that failed.
"""

from __future__ import annotations

import logging

from ..config.model import DEFAULT_CONFIG, ParserConfig
from ..constants import (
    CARRIAGE_RETURN,
    LINE_SEPARATOR,
    PARAM_SEPARATOR,
    SOURCE_PREFIX,
    TAG_SEPARATOR,
    TAG_VALUE_SEPARATOR,
    TAGS_PREFIX,
    TRAILING_PREFIX,
)
from ..errors.parsing import (
    EmptyCommandError,
    EmptyLineError,
    MalformedTagEntryError,
    MissingCommandTerminatorError,
    MissingSourceTerminatorError,
    MissingTagsTerminatorError,
    ParseError,
)
from ..logs.logger import logger
from .models import Message

_TRAILING_DELIMITER = PARAM_SEPARATOR + TRAILING_PREFIX


def parse(text: str, config: ParserConfig | None = None) -> list[Message]:
    """Parse one or more newline-separated lines.

    Carriage returns are dropped and the text is split on newlines. The whole
    batch is rejected on the first bad line; use
    :func:`ircline.irc.stream.iter_results` for per-line results.

    Args:
        text: Raw protocol text.
        config: Parser switches; defaults to DEFAULT_CONFIG.

    Returns:
        One Message per line, in input order.

    Raises:
        ParseError: For the first line that fails to parse.
    """
    config = config or DEFAULT_CONFIG
    messages = [
        _parse_logged(line, config, lineno)
        for lineno, line in enumerate(split_lines(text, config), start=1)
    ]
    logger.log_event("parser", "batch_parsed", level=logging.DEBUG, count=len(messages))
    return messages


def parse_line(line: str, config: ParserConfig | None = None) -> Message:
    """Parse a single protocol line.

    Raises:
        ParseError: If the line is malformed.
        ValueError: If the input holds more than one line.
    """
    config = config or DEFAULT_CONFIG
    lines = split_lines(line, config)
    if len(lines) != 1:
        raise ValueError(
            f"parse_line expects a single line, got {len(lines)}; use parse() for batches"
        )
    return _parse_logged(lines[0], config, None)


def split_lines(text: str, config: ParserConfig | None = None) -> list[str]:
    """Strip carriage returns and split ``text`` into candidate lines.

    With ``allow_trailing_newline`` the one empty segment left behind by a
    final newline is dropped. Any other empty segment is kept so that parsing
    rejects it.
    """
    config = config or DEFAULT_CONFIG
    lines = text.replace(CARRIAGE_RETURN, "").split(LINE_SEPARATOR)
    if config.allow_trailing_newline and len(lines) > 1 and not lines[-1]:
        lines.pop()
        logger.log_event("parser", "trailing_newline_ignored", level=logging.DEBUG)
    return lines


def _parse_logged(line: str, config: ParserConfig, lineno: int | None) -> Message:
    try:
        return parse_single(line, config)
    except ParseError as e:
        logger.log_event(
            "parser",
            "line_rejected",
            level=logging.DEBUG,
            error=str(e),
            kind=e.kind.name,
            lineno=lineno,
        )
        raise


def parse_single(line: str, config: ParserConfig | None = None) -> Message:
    """Parse one already-split line without any preprocessing."""
    if not line:
        raise EmptyLineError(line=line)

    config = config or DEFAULT_CONFIG
    idx = 0
    tags: dict[str, str] = {}
    source: str | None = None

    if line.startswith(TAGS_PREFIX):
        end = line.find(PARAM_SEPARATOR)
        if end == -1:
            raise MissingTagsTerminatorError(line=line)
        tags = _parse_tags(line[1:end], config, line)
        idx = end + 1

    if line.startswith(SOURCE_PREFIX, idx):
        end = line.find(PARAM_SEPARATOR, idx + 1)
        if end == -1:
            raise MissingSourceTerminatorError(line=line)
        source = line[idx:end]
        idx = end + 1

    end = line.find(PARAM_SEPARATOR, idx)
    if end == -1:
        raise MissingCommandTerminatorError(line=line)
    command = line[idx:end]
    if not command:
        raise EmptyCommandError(line=line)
    idx = end + 1

    return Message(
        command=command,
        params=_parse_params(line, idx),
        tags=tags,
        source=source,
    )


def _parse_tags(payload: str, config: ParserConfig, line: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for entry in payload.split(TAG_SEPARATOR):
        # Only the first '=' separates; the value keeps any further ones.
        key, sep, value = entry.partition(TAG_VALUE_SEPARATOR)
        if not key or (not sep and not config.allow_bare_tags):
            raise MalformedTagEntryError(entry, line=line)
        tags[key] = value
    return tags


def _parse_params(line: str, idx: int) -> list[str]:
    # A ':' only opens the trailing parameter at the start of a token.
    if line.startswith(TRAILING_PREFIX, idx):
        middle, trailing = "", line[idx + 1 :]
    else:
        colon = line.find(_TRAILING_DELIMITER, idx)
        if colon == -1:
            middle, trailing = line[idx:], None
        else:
            middle, trailing = line[idx:colon], line[colon + 2 :]

    params = middle.split(PARAM_SEPARATOR) if middle else []
    if trailing is not None:
        params.append(trailing)
    return params


__all__ = ["parse", "parse_line", "parse_single", "split_lines"]
