"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O; persistence goes through :class:`TodoStore`.
* No imports from ``cli`` or ``infra``.
"""

from todo_shell.core.models import (
    AddCommand,
    CloseCommand,
    Command,
    ExitCommand,
    HistoryCommand,
    InvalidCommand,
    Outcome,
    SwapCommand,
)
from todo_shell.core.parser import parse_command
from todo_shell.core.protocols import TodoStore
from todo_shell.core.session import TodoSession

__all__: list[str] = [
    "AddCommand",
    "CloseCommand",
    "Command",
    "ExitCommand",
    "HistoryCommand",
    "InvalidCommand",
    "Outcome",
    "SwapCommand",
    "TodoSession",
    "TodoStore",
    "parse_command",
]
