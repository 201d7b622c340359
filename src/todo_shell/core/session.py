"""Core session service — owns the active list and the closed history.

The session is the single owner of both containers for the lifetime of
the process.  It delegates persistence to a
:class:`~todo_shell.core.protocols.TodoStore` injected at construction
time and is responsible for:

* Loading the active list exactly once, on construction.
* Validating 1-based indices against the current list length.
* Persisting the whole active list after every successful mutation.

Guarantees
----------
* A rejected command never mutates either container and never writes.
* No ``print()`` — callers render the returned outcome.
* Store errors propagate unchanged; there is no in-memory fallback.
"""

from __future__ import annotations

import logging

from todo_shell.core.models import (
    COMMAND_NAMES,
    AddCommand,
    Added,
    CloseCommand,
    Closed,
    Command,
    ExitCommand,
    Exited,
    HistoryCommand,
    HistoryShown,
    InvalidCommand,
    Outcome,
    SwapCommand,
    Swapped,
)
from todo_shell.core.protocols import TodoStore
from todo_shell.exceptions import InvalidCommandError, InvalidIndexError

logger = logging.getLogger(__name__)


class TodoSession:
    """In-memory todo state bound to a persistent store.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`TodoStore` protocol.  Its
        :meth:`~TodoStore.load` is called once, here.
    """

    def __init__(self, store: TodoStore) -> None:
        self._store: TodoStore = store
        self._active: list[str] = list(store.load())
        self._closed: list[str] = []
        logger.debug("Session started with %d item(s)", len(self._active))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def active(self) -> tuple[str, ...]:
        """Snapshot of the active list in display order."""
        return tuple(self._active)

    @property
    def closed(self) -> tuple[str, ...]:
        """Snapshot of the closed history in removal order."""
        return tuple(self._closed)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, item: str) -> Added:
        """Append *item* to the end of the active list and persist."""
        self._active.append(item)
        self._persist()
        logger.debug("Added item #%d", len(self._active))
        return Added(item=item)

    def close(self, index: int) -> Closed:
        """Remove the item at 1-based *index* and record it in history.

        Raises
        ------
        InvalidIndexError
            When *index* is outside ``1..len(active)``.
        """
        self._check_indices(index)
        item = self._active.pop(index - 1)
        self._closed.append(item)
        self._persist()
        logger.debug("Closed item #%d", index)
        return Closed(item=item, index=index)

    def swap(self, first: int, second: int) -> Swapped:
        """Exchange the items at two 1-based positions and persist.

        Equal indices are valid and leave the order unchanged.

        Raises
        ------
        InvalidIndexError
            When either index is outside ``1..len(active)``.
        """
        self._check_indices(first, second)
        a, b = first - 1, second - 1
        self._active[a], self._active[b] = self._active[b], self._active[a]
        self._persist()
        logger.debug("Swapped items #%d and #%d", first, second)
        return Swapped(first=first, second=second)

    def history(self) -> HistoryShown:
        """Return the closed history without touching any state."""
        return HistoryShown(items=self.closed)

    def apply(self, command: Command) -> Outcome:
        """Dispatch one parsed command.

        Raises
        ------
        InvalidCommandError
            For :class:`~todo_shell.core.models.InvalidCommand`.
        InvalidIndexError
            For close/swap with out-of-range indices.
        """
        if isinstance(command, AddCommand):
            return self.add(command.item)
        if isinstance(command, CloseCommand):
            return self.close(command.index)
        if isinstance(command, SwapCommand):
            return self.swap(command.first, command.second)
        if isinstance(command, HistoryCommand):
            return self.history()
        if isinstance(command, ExitCommand):
            return Exited()
        if isinstance(command, InvalidCommand):
            raise InvalidCommandError(
                "Invalid command",
                hint=f"Available commands: {', '.join(COMMAND_NAMES)}",
            )
        raise TypeError(f"Unsupported command type: {type(command).__name__}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_indices(self, *indices: int) -> None:
        size = len(self._active)
        if all(1 <= index <= size for index in indices):
            return
        logger.info("Rejected index %s for list of %d item(s)", indices, size)
        raise InvalidIndexError(
            "Invalid index",
            indices=indices,
            size=size,
            hint=_range_hint(size),
        )

    def _persist(self) -> None:
        self._store.save(self._active)


def _range_hint(size: int) -> str:
    """Describe the currently valid index range."""
    if size == 0:
        return "The todo list is empty."
    if size == 1:
        return "The only valid index is 1."
    return f"Valid indices are 1 to {size}."
