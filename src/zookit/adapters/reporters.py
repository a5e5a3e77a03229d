"""Reporter implementations that record calls in memory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from zookit.interfaces.reporter import Reporter


@dataclass(frozen=True)
class Call:
    """A single recorded reporter invocation."""

    name: str
    args: tuple[Any, ...] = ()


@dataclass
class RecordingReporter(Reporter):
    """Reporter that records every call in order.

    Used to check exactly what an assertion helper reported. Not safe for
    concurrent use.
    """

    calls: list[Call] = field(default_factory=list)

    def helper(self) -> None:
        self.calls.append(Call("Helper"))

    def errorf(self, format: str, *args: Any) -> None:  # pylint: disable=redefined-builtin
        self.calls.append(Call("Errorf", (format, *args)))

    @property
    def errors(self) -> list[str]:
        """Formatted messages of all recorded `errorf` calls."""
        return [
            c.args[0] % c.args[1:] if len(c.args) > 1 else c.args[0]
            for c in self.calls
            if c.name == "Errorf"
        ]

    @property
    def failed(self) -> bool:
        """Whether any failure was recorded."""
        return any(c.name == "Errorf" for c in self.calls)
