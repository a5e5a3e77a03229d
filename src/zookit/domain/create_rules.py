"""Checks applied to a create request before it is sent to the server.

Each create operation accepts only some creation modes: TTL nodes must go
through the TTL-aware operation (which also needs a valid TTL), and the
container operation only creates containers.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from zookit.config import get_max_ttl_ms

from .create_mode import CreateMode
from .errors import InvalidFlagsError, InvalidTTLError

logger = logging.getLogger(__name__)


def check_create(mode: CreateMode) -> None:
    """Validate `mode` for a plain create.

    Raises:
        InvalidFlagsError: If `mode` needs a TTL.
    """
    if mode.is_ttl:
        logger.debug("Plain create rejected TTL mode %s", mode)
        raise InvalidFlagsError(mode, "create", "use create_ttl for TTL modes")


def check_create_container(mode: CreateMode) -> None:
    """Validate `mode` for a container create.

    Raises:
        InvalidFlagsError: If `mode` is not `CreateMode.CONTAINER`.
    """
    if not mode.is_container:
        logger.debug("Container create rejected mode %s", mode)
        raise InvalidFlagsError(mode, "create_container")


def check_create_ttl(
    mode: CreateMode, ttl: timedelta | int, max_ttl: int | None = None
) -> int:
    """Validate `mode` and `ttl` for a TTL create.

    Args:
        mode: Requested creation mode; must be a TTL mode.
        ttl: Time-to-live as a `timedelta` or in milliseconds.
        max_ttl: Upper bound in milliseconds. Defaults to the configured
            maximum (see `zookit.config.get_max_ttl_ms`).

    Returns:
        The TTL in whole milliseconds.

    Raises:
        InvalidFlagsError: If `mode` is not a TTL mode.
        InvalidTTLError: If the TTL is not a positive number of milliseconds
            not above `max_ttl`.
    """
    if not mode.is_ttl:
        logger.debug("TTL create rejected mode %s", mode)
        raise InvalidFlagsError(mode, "create_ttl")

    if max_ttl is None:
        max_ttl = get_max_ttl_ms()

    if isinstance(ttl, timedelta):
        ttl_ms = ttl // timedelta(milliseconds=1)
    elif isinstance(ttl, int) and not isinstance(ttl, bool):
        ttl_ms = ttl
    else:
        raise InvalidTTLError(ttl, max_ttl)

    if not 0 < ttl_ms <= max_ttl:
        logger.debug("TTL %s ms outside 1..%s", ttl_ms, max_ttl)
        raise InvalidTTLError(ttl_ms, max_ttl)
    return ttl_ms
