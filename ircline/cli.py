"""Command-line interface for ircline.

Reads protocol lines from a file or stdin and writes one parsed message per
output line, either as JSON or re-formatted wire text.

Exit codes: 0 on success, 1 when any line failed to parse, 2 for
configuration or input errors, 130 when interrupted.
"""

from __future__ import annotations

import argparse
import contextlib
import io
import json
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from .config import ParserConfig, load_config
from .errors.handling import log_error
from .errors.parsing import ConfigError, FormatError, ParseError
from .irc import Message, format_message, iter_results, parse
from .logging_config import LoggerConfigurator, error_aggregator
from .logs.logger import logger


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ircline", description="Parse IRC protocol lines.")
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--config", default=None, help="JSON file with parser settings")
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Parse line by line and report bad lines instead of rejecting the whole input",
    )
    p.add_argument(
        "--allow-bare-tags",
        action="store_true",
        default=None,
        help="Accept tag entries without '=' (value becomes empty)",
    )
    p.add_argument(
        "--output",
        choices=("json", "wire"),
        default="json",
        help="Emit JSON objects or re-formatted protocol lines",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p


def _open_input(path: str) -> contextlib.AbstractContextManager[TextIO]:
    # Only "\n" ends a line; a lone "\r" is left for the parser to drop
    if path == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(newline="\n")
        return contextlib.nullcontext(sys.stdin)
    return open(path, encoding="utf-8", newline="\n")


def _render(message: Message, output: str) -> str:
    if output == "wire":
        return format_message(message)
    return json.dumps(message.to_dict(), ensure_ascii=False)


def _emit(messages: Iterable[Message], output: str) -> int:
    count = 0
    for message in messages:
        print(_render(message, output))
        count += 1
    return count


def _run_batch(fh: TextIO, config: ParserConfig, output: str) -> int:
    try:
        messages = parse(fh.read(), config)
    except ParseError as e:
        log_error("Input rejected", e)
        return 1
    count = _emit(messages, output)
    logger.log_event("app", "done", count=count)
    return 0


def _run_streaming(fh: TextIO, config: ParserConfig, output: str) -> int:
    count = failed = 0
    for result in iter_results(fh, config):
        if result.message is not None:
            count += _emit([result.message], output)
            continue
        failed += 1
        log_error(
            "Rejected line",
            result.error,
            context={"lineno": result.lineno},
            level=logging.WARNING,
        )
    if failed:
        error_aggregator.log_summary_report()
        logger.log_event("app", "done_with_errors", level=logging.WARNING, count=count, failed=failed)
        return 1
    logger.log_event("app", "done", count=count)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    LoggerConfigurator({"debug": args.debug}).configure()

    try:
        config = load_config(args.config, overrides={"allow_bare_tags": args.allow_bare_tags})
    except ConfigError as e:
        log_error("Configuration error", e)
        return 2
    logger.log_event("config", "loaded", level=logging.DEBUG, **config.to_dict())

    source = "stdin" if args.path == "-" else args.path
    logger.log_event("app", "start", level=logging.DEBUG, source=source)
    try:
        with _open_input(args.path) as fh:
            if args.keep_going:
                return _run_streaming(fh, config, args.output)
            return _run_batch(fh, config, args.output)
    except FormatError as e:
        log_error("Could not format message", e)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log_error("Could not read input", e, context={"path": source})
        return 2
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
