from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..constants import ALLOW_BARE_TAGS, ALLOW_TRAILING_NEWLINE


class ParserConfig(BaseModel):
    """Parser behaviour switches.

    Attributes:
        allow_bare_tags: Accept tag entries without '=' and give them an
            empty value. When False such entries fail the line.
        allow_trailing_newline: Ignore the single empty segment produced by a
            final newline in batch input. Any other empty line still fails.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_bare_tags: bool = ALLOW_BARE_TAGS
    allow_trailing_newline: bool = ALLOW_TRAILING_NEWLINE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserConfig:
        """Create a ParserConfig from a dictionary, ignoring None values.

        Args:
            data: Mapping of field names to values.

        Returns:
            ParserConfig instance.
        """
        return cls.model_validate({k: v for k, v in data.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


DEFAULT_CONFIG = ParserConfig()
