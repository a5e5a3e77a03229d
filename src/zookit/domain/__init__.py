"""Domain layer: creation modes, create-request rules and their errors."""

from .create_mode import CreateMode, parse_create_mode
from .errors import (
    CreateModeError,
    CreateRequestError,
    InvalidFlagError,
    InvalidFlagsError,
    InvalidPathError,
    InvalidTTLError,
    UnknownCreateModeError,
    ZookitError,
)

__all__ = [
    "CreateMode",
    "CreateModeError",
    "CreateRequestError",
    "InvalidFlagError",
    "InvalidFlagsError",
    "InvalidPathError",
    "InvalidTTLError",
    "UnknownCreateModeError",
    "ZookitError",
    "parse_create_mode",
]
