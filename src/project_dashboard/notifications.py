"""User-facing notifications.

The dashboard reports outcomes through a ``Notifier`` rather than printing
directly, so the core stays usable without a terminal.
"""

from dataclasses import dataclass, field
from typing import Literal, Protocol

from rich.console import Console

Level = Literal["success", "info", "warning", "error"]

_STYLES: dict[Level, str] = {
    "success": "bold green",
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
}

_PREFIXES: dict[Level, str] = {
    "success": "✓",
    "info": "i",
    "warning": "!",
    "error": "✗",
}


class Notifier(Protocol):
    def notify(self, level: Level, message: str) -> None: ...


class ConsoleNotifier:
    """Prints notifications to a Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def notify(self, level: Level, message: str) -> None:
        style = _STYLES[level]
        self.console.print(f"[{style}]{_PREFIXES[level]}[/{style}] {message}", highlight=False)


@dataclass
class RecordingNotifier:
    """Keeps notifications in memory."""

    messages: list[tuple[Level, str]] = field(default_factory=list)

    def notify(self, level: Level, message: str) -> None:
        self.messages.append((level, message))

    def of_level(self, level: Level) -> list[str]:
        return [message for lvl, message in self.messages if lvl == level]
