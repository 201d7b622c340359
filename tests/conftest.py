"""Shared pytest fixtures and configuration for the todo-shell test suite.

Guidelines
----------
* No real terminal interaction — the shell loop is fed scripted lines.
* Filesystem tests use ``tmp_path`` only.
* Core tests use :class:`MemoryStore` and must not touch the disk.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import pytest


class MemoryStore:
    """In-memory :class:`~todo_shell.core.protocols.TodoStore` that records saves."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self.items: list[str] = list(items)
        self.loads: int = 0
        self.saves: list[list[str]] = []

    def load(self) -> list[str]:
        self.loads += 1
        return list(self.items)

    def save(self, items: Sequence[str]) -> None:
        self.items = list(items)
        self.saves.append(list(items))


@pytest.fixture
def memory_store() -> Callable[..., MemoryStore]:
    """Factory: ``memory_store("a", "b")`` → store preloaded with items."""

    def _make(*items: str) -> MemoryStore:
        return MemoryStore(items)

    return _make


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[], str | None]]:
    """Factory: ``scripted_input("add x", "exit")`` → a ``read_line`` callable.

    Returns ``None`` once the script runs out, like end of input.
    """

    def _make(*lines: str) -> Callable[[], str | None]:
        remaining = iter(lines)
        return lambda: next(remaining, None)

    return _make
