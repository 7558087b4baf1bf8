from __future__ import annotations

import io

import pytest

from ircline.config import ParserConfig
from ircline.errors import MalformedTagEntryError, MissingCommandTerminatorError
from ircline.irc.stream import LineResult, aiter_results, iter_results

LINES = [
    "@id=1 PRIVMSG #a :first\r\n",
    "PING\r\n",
    "\r\n",
    ":nick!u@h PRIVMSG #a :third\n",
]


def test_iter_results_reports_each_line():
    results = list(iter_results(LINES))
    assert [r.lineno for r in results] == [1, 2, 4]
    assert [r.ok for r in results] == [True, False, True]
    assert results[0].message.tags == {"id": "1"}
    assert results[0].line == "@id=1 PRIVMSG #a :first"
    assert isinstance(results[1].error, MissingCommandTerminatorError)
    assert results[1].message is None
    assert results[2].message.params == ("#a", "third")


def test_iter_results_accepts_text_file():
    fh = io.StringIO("PING a\nPING b\n")
    results = list(iter_results(fh))
    assert [r.message.params for r in results] == [("a",), ("b",)]


def test_iter_results_uses_config():
    lines = ["@flag CMD x"]
    assert isinstance(list(iter_results(lines))[0].error, MalformedTagEntryError)
    strict = list(iter_results(lines, ParserConfig(allow_bare_tags=True)))
    assert strict[0].message.tags == {"flag": ""}


def test_iter_results_is_lazy():
    def gen():
        yield "PING a"
        raise RuntimeError("should not be reached")

    it = iter_results(gen())
    assert next(it).ok


def test_line_result_ok_flag():
    assert not LineResult(lineno=1, line="x").ok


async def _aiter(items):
    for item in items:
        yield item


@pytest.mark.asyncio
async def test_aiter_results_matches_sync():
    async_results = [r async for r in aiter_results(_aiter(LINES))]
    sync_results = list(iter_results(LINES))
    assert [r.lineno for r in async_results] == [r.lineno for r in sync_results]
    assert [r.message for r in async_results] == [r.message for r in sync_results]
    assert [type(r.error) for r in async_results] == [type(r.error) for r in sync_results]
