"""Custom exception hierarchy for todo-shell.

All exceptions that cross layer boundaries must inherit from
:class:`TodoShellError`.  Raw ``OSError`` instances raised while touching
the todo file must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
TodoShellError
├── InvalidCommandError
├── InvalidIndexError
├── StoreError
│   ├── StoreReadError
│   └── StoreWriteError
└── EnvironmentError
"""

from __future__ import annotations


class TodoShellError(Exception):
    """Base exception for all todo-shell errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Session errors (non-fatal) --------------------------------------------

class InvalidCommandError(TodoShellError):
    """Raised when a line of input does not map to a known command."""


class InvalidIndexError(TodoShellError):
    """Raised when a close/swap index falls outside the active list."""

    def __init__(
        self,
        message: str,
        *,
        indices: tuple[int, ...] = (),
        size: int = 0,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.indices: tuple[int, ...] = indices
        self.size: int = size


# --- Persistence (fatal) ---------------------------------------------------

class StoreError(TodoShellError):
    """Raised when the todo file cannot be accessed."""


class StoreReadError(StoreError):
    """Raised when the todo file exists but cannot be read or decoded."""


class StoreWriteError(StoreError):
    """Raised when the todo file cannot be opened for writing or written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TodoShellError):
    """Raised when a required runtime dependency is not available."""


NON_FATAL_ERRORS: tuple[type[TodoShellError], ...] = (
    InvalidCommandError,
    InvalidIndexError,
)
"""Errors the shell reports inline before continuing the session."""
