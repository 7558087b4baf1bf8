"""Centralized error hierarchy.

These exceptions give callers semantic categories for everything that can go
wrong while turning wire text into messages and back. The parser never
recovers mid-line: every failure surfaces as one of the classes below.

Classes:
  IrcLineError                   – Base for all package errors.
  ParseError                     – A line could not be parsed.
    EmptyLineError               – Zero-length line.
    MissingTagsTerminatorError   – '@tags' segment not followed by a space.
    MalformedTagEntryError       – Tag entry without '=' or with an empty key.
    MissingSourceTerminatorError – ':source' segment not followed by a space.
    MissingCommandTerminatorError – Command token not followed by a space.
    EmptyCommandError            – Command token of zero length.
  FormatError                    – A message cannot be written as wire text.
  ConfigError                    – Configuration file unreadable or invalid.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto


class ParseErrorKind(Enum):
    MALFORMED_LINE = auto()
    EMPTY_LINE = auto()
    MISSING_TAGS_TERMINATOR = auto()
    MALFORMED_TAG_ENTRY = auto()
    MISSING_SOURCE_TERMINATOR = auto()
    MISSING_COMMAND_TERMINATOR = auto()
    EMPTY_COMMAND = auto()


class IrcLineError(Exception):
    """Base class for all package errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParseError(IrcLineError):
    """Raised when a raw protocol line cannot be parsed.

    Attributes:
        details: Human-readable diagnostic naming the failing segment.
        kind: Which segment failed, as a ParseErrorKind.
        line: The offending line, when known.
    """

    kind: ParseErrorKind = ParseErrorKind.MALFORMED_LINE
    default_details = "malformed line"

    def __init__(self, details: str | None = None, *, line: str | None = None) -> None:
        self.details = details or self.default_details
        self.line = line
        super().__init__(self.details, data={"kind": self.kind.name, "line": line})

    def __str__(self) -> str:
        return self.details

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.details!r}, line={self.line!r})"


class EmptyLineError(ParseError):
    kind = ParseErrorKind.EMPTY_LINE
    default_details = "line length cannot be 0"


class MissingTagsTerminatorError(ParseError):
    kind = ParseErrorKind.MISSING_TAGS_TERMINATOR
    default_details = "tags segment is not terminated by a space"


class MalformedTagEntryError(ParseError):
    kind = ParseErrorKind.MALFORMED_TAG_ENTRY
    default_details = "malformed tag entry"

    def __init__(self, entry: str, *, line: str | None = None) -> None:
        self.entry = entry
        super().__init__(f"malformed tag entry {entry!r}", line=line)


class MissingSourceTerminatorError(ParseError):
    kind = ParseErrorKind.MISSING_SOURCE_TERMINATOR
    default_details = "source segment is not terminated by a space"


class MissingCommandTerminatorError(ParseError):
    kind = ParseErrorKind.MISSING_COMMAND_TERMINATOR
    default_details = "command is not terminated by a space"


class EmptyCommandError(ParseError):
    kind = ParseErrorKind.EMPTY_COMMAND
    default_details = "command cannot be empty"


class FormatError(IrcLineError):
    """Raised when a Message cannot be represented as a single wire line."""


class ConfigError(IrcLineError):
    """Raised when a configuration file cannot be read or fails validation."""


__all__ = [
    "ParseErrorKind",
    "IrcLineError",
    "ParseError",
    "EmptyLineError",
    "MissingTagsTerminatorError",
    "MalformedTagEntryError",
    "MissingSourceTerminatorError",
    "MissingCommandTerminatorError",
    "EmptyCommandError",
    "FormatError",
    "ConfigError",
]
