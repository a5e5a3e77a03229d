"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .create_mode import CreateMode


class ZookitError(Exception):
    """Base class for all zookit errors."""


# ============================================================================
#                           Creation mode errors
# ============================================================================


class CreateModeError(ZookitError):
    """Base class for errors raised while resolving a creation mode."""


class InvalidFlagError(CreateModeError):
    """Raised when an integer is not one of the legal creation flags."""

    def __init__(self, flag: object) -> None:
        super().__init__(f"invalid flag value: [{flag}]")
        self.flag = flag


class UnknownCreateModeError(CreateModeError):
    """Raised when a creation mode name does not match any mode."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown create mode: {name!r}")
        self.name = name


# ============================================================================
#                          Create request errors
# ============================================================================


class CreateRequestError(ZookitError):
    """Base class for create requests rejected before reaching the server."""


class InvalidFlagsError(CreateRequestError):
    """Raised when a creation mode is not accepted by a create operation."""

    def __init__(
        self, mode: CreateMode, operation: str, hint: str | None = None
    ) -> None:
        message = f"invalid flags for {operation}: {mode}"
        if hint:
            message += f" ({hint})"
        super().__init__(message)
        self.mode = mode
        self.operation = operation
        self.hint = hint


class InvalidTTLError(CreateRequestError):
    """Raised when a TTL is not within (0, max_ttl] milliseconds."""

    def __init__(self, ttl: object, max_ttl: int) -> None:
        super().__init__(f"invalid ttl: {ttl} (must be in 1..{max_ttl} ms)")
        self.ttl = ttl
        self.max_ttl = max_ttl


class InvalidPathError(CreateRequestError):
    """Raised when a node path violates the znode path syntax."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"invalid path {path!r}: {reason}")
        self.path = path
        self.reason = reason
