"""Node creation modes and their wire flags.

The coordination service encodes the creation semantics of a node as a
single small integer. This module is the one place where that integer is
translated into a `CreateMode` and validated; invalid flags never make it
into a create request.
"""

from __future__ import annotations

import logging
from enum import Enum

from .errors import InvalidFlagError, UnknownCreateModeError

logger = logging.getLogger(__name__)

FLAG_PERSISTENT = 0
FLAG_EPHEMERAL = 1
FLAG_SEQUENCE = 2
FLAG_EPHEMERAL_SEQUENTIAL = 3
FLAG_CONTAINER = 4
FLAG_TTL = 5
FLAG_PERSISTENT_SEQUENTIAL_WITH_TTL = 6

_EPHEMERAL_FLAGS = frozenset({FLAG_EPHEMERAL, FLAG_EPHEMERAL_SEQUENTIAL})
_SEQUENTIAL_FLAGS = frozenset(
    {FLAG_SEQUENCE, FLAG_EPHEMERAL_SEQUENTIAL, FLAG_PERSISTENT_SEQUENTIAL_WITH_TTL}
)
_TTL_FLAGS = frozenset({FLAG_TTL, FLAG_PERSISTENT_SEQUENTIAL_WITH_TTL})


class CreateMode(Enum):
    """Enumeration of node creation modes, valued by their wire flag."""

    PERSISTENT = FLAG_PERSISTENT
    EPHEMERAL = FLAG_EPHEMERAL
    PERSISTENT_SEQUENTIAL = FLAG_SEQUENCE
    EPHEMERAL_SEQUENTIAL = FLAG_EPHEMERAL_SEQUENTIAL
    CONTAINER = FLAG_CONTAINER
    PERSISTENT_WITH_TTL = FLAG_TTL
    PERSISTENT_SEQUENTIAL_WITH_TTL = FLAG_PERSISTENT_SEQUENTIAL_WITH_TTL

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, flag: int) -> CreateMode:
        """Return the creation mode encoded by `flag`.

        Args:
            flag: Wire integer of the mode, one of 0..6.

        Returns:
            The matching `CreateMode` member.

        Raises:
            InvalidFlagError: If `flag` is not a legal creation flag. Booleans
                and non-integers are rejected even when they compare equal
                to a legal flag.
        """
        if isinstance(flag, bool) or not isinstance(flag, int):
            logger.debug("Rejected non-integer create flag %r", flag)
            raise InvalidFlagError(flag)
        try:
            return cls(flag)
        except ValueError as e:
            logger.debug("Rejected create flag %d", flag)
            raise InvalidFlagError(flag) from e

    @classmethod
    def from_name(cls, name: str) -> CreateMode:
        """Look up a mode by name, ignoring case and `-`/`_` differences.

        Raises:
            UnknownCreateModeError: If no mode has that name.
        """
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError as e:
            raise UnknownCreateModeError(name) from e

    def to_flag(self) -> int:
        """Return the wire integer of this mode."""
        return self.value

    @property
    def is_ephemeral(self) -> bool:
        """Whether the node is removed when the creating session ends."""
        return self.value in _EPHEMERAL_FLAGS

    @property
    def is_sequential(self) -> bool:
        """Whether the server appends a monotonically increasing counter."""
        return self.value in _SEQUENTIAL_FLAGS

    @property
    def is_container(self) -> bool:
        """Whether the node is removed once its last child is deleted."""
        return self.value == FLAG_CONTAINER

    @property
    def is_ttl(self) -> bool:
        """Whether the node carries a time-to-live."""
        return self.value in _TTL_FLAGS


def parse_create_mode(flag: int) -> CreateMode:
    """Module-level alias of `CreateMode.parse`."""
    return CreateMode.parse(flag)
