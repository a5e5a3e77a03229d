"""Znode path syntax validation."""

from __future__ import annotations

from .errors import InvalidPathError


def _is_forbidden_character(ch: str) -> bool:
    code = ord(ch)
    return (
        0x0000 < code <= 0x001F
        or 0x007F <= code <= 0x009F
        or 0xD800 <= code <= 0xF8FF
        or 0xFFF0 <= code <= 0xFFFF
    )


def validate_path(path: str, is_sequential: bool = False) -> None:
    """Validate a node path before it is used in a request.

    Paths are absolute, slash-separated and must not contain empty, ``.`` or
    ``..`` segments. A trailing slash is allowed only for sequential nodes,
    where the server appends the sequence counter to the given prefix.

    Args:
        path: The node path to check.
        is_sequential: Whether the path is the prefix of a sequential node.

    Raises:
        InvalidPathError: If the path violates the syntax; the error carries
            the first violation found.
    """
    if not path:
        raise InvalidPathError(path, "path cannot be empty")
    if path[0] != "/":
        raise InvalidPathError(path, "path must start with '/'")
    if path == "/":
        return
    if not is_sequential and path.endswith("/"):
        raise InvalidPathError(path, "path must not end with '/'")

    for i, ch in enumerate(path[1:], start=1):
        if ch == "\x00":
            raise InvalidPathError(path, f"null character at index {i}")
        if ch == "/" and path[i - 1] == "/":
            raise InvalidPathError(path, f"empty node name at index {i}")
        if ch == "." and path[i - 1] == "/":
            rest = path[i + 1 :]
            if rest == "" or rest.startswith("/"):
                raise InvalidPathError(path, f"relative path segment at index {i}")
            if rest[0] == "." and (rest == "." or rest[1] == "/"):
                raise InvalidPathError(path, f"relative path segment at index {i}")
        if _is_forbidden_character(ch):
            raise InvalidPathError(path, f"invalid character {ch!r} at index {i}")
