"""Per-line parsing for streams of lines.

Unlike :func:`ircline.irc.parser.parse`, a bad line does not abort the run:
each line produces its own LineResult carrying either a Message or the
ParseError that rejected it.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from dataclasses import dataclass

from ..config.model import DEFAULT_CONFIG, ParserConfig
from ..constants import CARRIAGE_RETURN, LINE_SEPARATOR
from ..errors.parsing import ParseError
from ..logs.logger import logger
from .models import Message
from .parser import parse_single


@dataclass(frozen=True, slots=True)
class LineResult:
    lineno: int
    line: str
    message: Message | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.message is not None


def _clean(raw: str) -> str:
    return raw.replace(CARRIAGE_RETURN, "").rstrip(LINE_SEPARATOR)


def _parse_one(lineno: int, raw: str, config: ParserConfig) -> LineResult | None:
    line = _clean(raw)
    if not line:
        logger.log_event("stream", "blank_skipped", level=logging.DEBUG, lineno=lineno)
        return None
    try:
        return LineResult(lineno=lineno, line=line, message=parse_single(line, config))
    except ParseError as e:
        logger.log_event(
            "stream",
            "line_failed",
            level=logging.DEBUG,
            error=str(e),
            kind=e.kind.name,
            lineno=lineno,
        )
        return LineResult(lineno=lineno, line=line, error=e)


def iter_results(
    lines: Iterable[str], config: ParserConfig | None = None
) -> Iterator[LineResult]:
    """Yield a LineResult for every non-blank line, in input order.

    Trailing newlines and carriage returns are stripped, so an open text file
    can be passed directly. Line numbers are 1-based and count blank lines.
    """
    config = config or DEFAULT_CONFIG
    for lineno, raw in enumerate(lines, start=1):
        result = _parse_one(lineno, raw, config)
        if result is not None:
            yield result


async def aiter_results(
    lines: AsyncIterable[str], config: ParserConfig | None = None
) -> AsyncIterator[LineResult]:
    """Async counterpart of :func:`iter_results`."""
    config = config or DEFAULT_CONFIG
    lineno = 0
    async for raw in lines:
        lineno += 1
        result = _parse_one(lineno, raw, config)
        if result is not None:
            yield result


__all__ = ["LineResult", "iter_results", "aiter_results"]
