"""Configuration utilities for ZOOKIT.

This module centralizes small helpers and constants related to configuration.
"""

import os

# The server stores TTLs in 40 bits of milliseconds.
DEFAULT_MAX_TTL_MS = 0xFF_FFFF_FFFF  # pragma: no mutate
MAX_TTL_ENV_VAR = "ZOOKIT_MAX_TTL_MS"  # pragma: no mutate


class InvalidConfigError(Exception):
    """Raised when a configuration value read from the environment is invalid."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value
        self.reason = reason


def get_max_ttl_ms() -> int:
    """Get the maximum accepted node TTL, in milliseconds.

    Reads `ZOOKIT_MAX_TTL_MS` on every call so tests and long-lived processes
    see changes to the environment.

    Returns:
        The configured maximum, or `DEFAULT_MAX_TTL_MS` when the variable
        is unset or empty.

    Raises:
        InvalidConfigError: If the variable is not a positive integer.
    """
    if not (raw := os.environ.get(MAX_TTL_ENV_VAR, "").strip()):
        return DEFAULT_MAX_TTL_MS
    try:
        value = int(raw, 0)
    except ValueError as e:
        raise InvalidConfigError(MAX_TTL_ENV_VAR, raw, "not an integer") from e
    if value <= 0:
        raise InvalidConfigError(MAX_TTL_ENV_VAR, raw, "must be positive")
    return value
