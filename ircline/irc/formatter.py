"""IRC message formatting (Message back to wire text)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

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
from ..errors.parsing import FormatError
from .models import Message


def _check_field(name: str, value: str) -> None:
    if CARRIAGE_RETURN in value or LINE_SEPARATOR in value:
        raise FormatError(
            f"{name} may not contain line breaks: {value!r}", data={"field": name}
        )


def _format_tags(tags: Mapping[str, str]) -> str:
    entries = []
    for key, value in tags.items():
        _check_field("tag", key)
        _check_field("tag", value)
        if not key or TAG_VALUE_SEPARATOR in key or TAG_SEPARATOR in key or PARAM_SEPARATOR in key:
            raise FormatError(f"invalid tag key {key!r}", data={"field": "tag"})
        if TAG_SEPARATOR in value or PARAM_SEPARATOR in value:
            raise FormatError(
                f"tag value for {key!r} may not contain ';' or spaces",
                data={"field": "tag"},
            )
        entries.append(f"{key}{TAG_VALUE_SEPARATOR}{value}")
    return TAGS_PREFIX + TAG_SEPARATOR.join(entries)


def _format_params(params: Sequence[str]) -> str:
    *middle, last = params
    for param in middle:
        _check_field("param", param)
        if PARAM_SEPARATOR in param or param.startswith(TRAILING_PREFIX):
            raise FormatError(
                f"only the last parameter may contain spaces or start with ':'; got {param!r}",
                data={"field": "param"},
            )
    _check_field("param", last)
    if not last or PARAM_SEPARATOR in last or last.startswith(TRAILING_PREFIX):
        if middle == [""]:
            # "CMD  :x" reads back as a lone trailing param
            raise FormatError(
                "an empty first parameter cannot precede a ':' trailing parameter",
                data={"field": "param"},
            )
        last = TRAILING_PREFIX + last
    return PARAM_SEPARATOR.join([*middle, last])


def format_message(message: Message) -> str:
    """Render a Message as one wire line, without the CRLF terminator.

    A message without parameters is rendered as ``"COMMAND "`` so that the
    result satisfies the parser's command terminator rule.
    The source is written verbatim and must carry its leading ':'.

    Raises:
        FormatError: If a field cannot be represented on the wire.
    """
    command = message.command
    _check_field("command", command)
    if not command or PARAM_SEPARATOR in command:
        raise FormatError(f"invalid command {command!r}", data={"field": "command"})

    parts: list[str] = []
    if message.tags:
        parts.append(_format_tags(message.tags))
    if message.source is not None:
        source = message.source
        _check_field("source", source)
        if not source.startswith(SOURCE_PREFIX) or PARAM_SEPARATOR in source:
            raise FormatError(f"invalid source {message.source!r}", data={"field": "source"})
        parts.append(source)
    # Without a source a leading ':' (or '@' at line start) would be misread
    if message.source is None and (
        command.startswith(SOURCE_PREFIX) or (not parts and command.startswith(TAGS_PREFIX))
    ):
        raise FormatError(f"invalid command {command!r}", data={"field": "command"})
    parts.append(command)
    parts.append(_format_params(message.params) if message.params else "")
    return PARAM_SEPARATOR.join(parts)


__all__ = ["format_message"]
