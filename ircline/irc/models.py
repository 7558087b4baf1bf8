"""IRC message data model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class Message:
    """One parsed protocol line.

    Params and tags are stored as a tuple and a read-only mapping, so a
    Message is immutable all the way down.

    Attributes:
        tags: Tag key/value pairs; empty when the line carried no '@' segment.
        source: Raw prefix including its leading ':', or None when absent.
        command: Verb or three-digit numeric, case as received.
        params: Middle parameters in wire order, followed by the trailing
            parameter (spaces intact) when the line had one.
    """

    command: str
    params: tuple[str, ...] = ()
    tags: Mapping[str, str] = field(default_factory=dict)
    source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    @property
    def nick(self) -> str | None:
        """Nick portion of a ':nick!user@host' source."""
        if not self.source:
            return None
        name = self.source.lstrip(":").split("!", 1)[0].split("@", 1)[0]
        return name or None

    def to_dict(self) -> dict[str, Any]:
        return {
            "tags": dict(self.tags),
            "source": self.source,
            "command": self.command,
            "params": list(self.params),
        }


__all__ = ["Message"]
