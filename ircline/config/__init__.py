"""Configuration package exports."""

from .loader import load_config
from .model import DEFAULT_CONFIG, ParserConfig

__all__ = ["DEFAULT_CONFIG", "ParserConfig", "load_config"]
