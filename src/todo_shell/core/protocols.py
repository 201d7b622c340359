"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class TodoStore(Protocol):
    """Contract for the durable home of the active list.

    Any object that implements :meth:`load` and :meth:`save` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def load(self) -> list[str]:
        """Return the persisted items in order.

        A store that has never been written must return an empty list
        rather than raising.

        Raises
        ------
        StoreReadError
            When existing content cannot be read.
        """
        ...  # pragma: no cover

    def save(self, items: Sequence[str]) -> None:
        """Replace the persisted content with *items*, in order.

        This is a whole-content overwrite, never an append.

        Raises
        ------
        StoreWriteError
            When the content cannot be written.
        """
        ...  # pragma: no cover
