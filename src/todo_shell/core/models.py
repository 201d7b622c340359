"""Domain models for todo-shell.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  Commands are what the parser produces;
outcomes are what :class:`~todo_shell.core.session.TodoSession` reports
back after applying one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

COMMAND_NAMES: tuple[str, ...] = ("add", "close", "exit", "swap", "history")
"""Keywords accepted as the first token of a command line, in prompt order."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AddCommand:
    """Append a new item to the end of the active list."""

    item: str
    """Item text, words rejoined with single spaces.  Never empty."""


@dataclass(frozen=True, slots=True)
class CloseCommand:
    """Remove the item at a 1-based position."""

    index: int
    """1-based position as typed.  Not range-checked by the parser."""


@dataclass(frozen=True, slots=True)
class SwapCommand:
    """Exchange the items at two 1-based positions."""

    first: int
    second: int


@dataclass(frozen=True, slots=True)
class ExitCommand:
    """End the session."""


@dataclass(frozen=True, slots=True)
class HistoryCommand:
    """Show the items closed during this session."""


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    """Catch-all for input that does not map to any other command."""

    line: str
    """The offending input, whitespace-normalised (runs collapsed, ends stripped)."""


Command = Union[
    AddCommand,
    CloseCommand,
    SwapCommand,
    ExitCommand,
    HistoryCommand,
    InvalidCommand,
]


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Added:
    item: str


@dataclass(frozen=True, slots=True)
class Closed:
    item: str
    index: int


@dataclass(frozen=True, slots=True)
class Swapped:
    first: int
    second: int


@dataclass(frozen=True, slots=True)
class HistoryShown:
    """Snapshot of the closed history, in removal order."""

    items: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return len(self.items) > 0


@dataclass(frozen=True, slots=True)
class Exited:
    pass


Outcome = Union[Added, Closed, Swapped, HistoryShown, Exited]
