from .parsing import (  # noqa: F401
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

__all__ = [
    "ConfigError",
    "EmptyCommandError",
    "EmptyLineError",
    "FormatError",
    "IrcLineError",
    "MalformedTagEntryError",
    "MissingCommandTerminatorError",
    "MissingSourceTerminatorError",
    "MissingTagsTerminatorError",
    "ParseError",
    "ParseErrorKind",
]
