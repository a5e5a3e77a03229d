"""OSC-8 hyperlink helpers for the zookit CLI."""

import os
import sys
from typing import TextIO

_OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether `stream` renders OSC-8 hyperlinks.

    Returns False for anything that is not a TTY. Otherwise checks a small
    allowlist of terminal identifiers (``TERM_PROGRAM``, Windows Terminal,
    VTE-based terminals, Alacritty and Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in _OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, stream: TextIO | None = None) -> str:
    """Return `url` wrapped in OSC-8 escapes, or unchanged when unsupported."""
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
