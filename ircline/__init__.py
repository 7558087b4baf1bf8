"""ircline: an RFC1459-style IRC line parser and formatter.

Parsing messages::

    >>> from ircline import parse_line
    >>> msg = parse_line(
    ...     "@id=123;name=rick :nick!user@host.tmi.twitch.tv PRIVMSG #rickastley :Never gonna give you up!"
    ... )
    >>> msg.tags["id"]
    '123'
    >>> msg.source
    ':nick!user@host.tmi.twitch.tv'
    >>> msg.params
    ('#rickastley', 'Never gonna give you up!')
"""

from .config import ParserConfig, load_config  # noqa: F401
from .errors import (  # noqa: F401
    ConfigError,
    EmptyCommandError,
    EmptyLineError,
    FormatError,
    IrcLineError,
    MalformedTagEntryError,
    MissingCommandTerminatorError,
    MissingSourceTerminatorError,
    MissingTagsTerminatorError,
    ParseError,
    ParseErrorKind,
)
from .irc import (  # noqa: F401
    LineResult,
    Message,
    aiter_results,
    format_message,
    iter_results,
    parse,
    parse_line,
)

__version__ = "0.3.0"

__all__ = [
    "ConfigError",
    "EmptyCommandError",
    "EmptyLineError",
    "FormatError",
    "IrcLineError",
    "LineResult",
    "MalformedTagEntryError",
    "Message",
    "MissingCommandTerminatorError",
    "MissingSourceTerminatorError",
    "MissingTagsTerminatorError",
    "ParseError",
    "ParseErrorKind",
    "ParserConfig",
    "aiter_results",
    "format_message",
    "iter_results",
    "load_config",
    "parse",
    "parse_line",
]
