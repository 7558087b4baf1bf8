"""
Configuration constants for ircline

This module contains the protocol delimiters and the parser defaults.
Each default can be overridden by setting an environment variable with the same name.
"""

import os

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean value from an environment variable.

    Accepts the usual spellings (true/false, 1/0, yes/no, on/off), case
    insensitive. If the variable is not set or cannot be parsed, prints a
    warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default value to return if parsing fails.

    Returns:
        The parsed boolean value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        print(
            f"Warning: Invalid boolean value for {name}='{value}', using default {default}"
        )
    return default


# Wire delimiters
TAGS_PREFIX = "@"
SOURCE_PREFIX = ":"
TRAILING_PREFIX = ":"
TAG_SEPARATOR = ";"
TAG_VALUE_SEPARATOR = "="
PARAM_SEPARATOR = " "
LINE_SEPARATOR = "\n"
CARRIAGE_RETURN = "\r"

# Parser defaults
ALLOW_BARE_TAGS = _get_env_bool(
    "IRCLINE_ALLOW_BARE_TAGS", False
)  # Tag entries without '=' get an empty value instead of failing the line
ALLOW_TRAILING_NEWLINE = _get_env_bool(
    "IRCLINE_ALLOW_TRAILING_NEWLINE", True
)  # Ignore the single empty segment left by a final newline in batch input
