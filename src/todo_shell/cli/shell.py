"""Interactive session loop for the CLI layer.

This module is responsible for:

* Rendering the banner, the active list and the command prompt.
* Reading one command line per iteration (questionary on a terminal,
  plain ``readline`` on a pipe).
* Handing the parsed command to :class:`~todo_shell.core.session.TodoSession`
  and rendering the outcome or the non-fatal error.

All state lives in the session — this module only moves text between
the terminal and the core layer.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

from todo_shell.cli import exit_codes
from todo_shell.cli.console import console
from todo_shell.core.models import (
    COMMAND_NAMES,
    Added,
    Closed,
    Exited,
    HistoryShown,
    Outcome,
    Swapped,
)
from todo_shell.core.parser import parse_command
from todo_shell.core.session import TodoSession
from todo_shell.exceptions import (
    NON_FATAL_ERRORS,
    EnvironmentError,
    TodoShellError,
)

logger = logging.getLogger(__name__)

BANNER: str = "*" * 31
PROMPT: str = f"Enter command ({', '.join(COMMAND_NAMES)}):"

ReadLine = Callable[[], str | None]
"""Returns the next command line, or ``None`` once input is exhausted."""

_OUTCOME_STYLES: dict[type, str] = {
    Added: "green",
    Closed: "yellow",
    Swapped: "cyan",
}


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _build_item_label(index: int, item: str) -> str:
    """Build one active-list row: ``"💣 1. buy milk"``."""
    return f"💣 {index}. {item}"


def _build_closed_label(index: int, item: str) -> str:
    """Build one history row: ``"✅1. buy milk"``."""
    return f"✅{index}. {item}"


def _build_outcome_message(outcome: Outcome) -> str:
    """Single-line status for a successful mutation."""
    if isinstance(outcome, Added):
        return f"➕Added item: {outcome.item}"
    if isinstance(outcome, Closed):
        return f"➖Closed item: {outcome.item}"
    if isinstance(outcome, Swapped):
        return f"♻️Swapped {outcome.first} with {outcome.second}"
    raise TypeError(f"No status line for {type(outcome).__name__}")


def _build_error_message(exc: TodoShellError) -> str:
    """Single-line error; the hint, if any, follows on the same line."""
    message = f"❌{exc}"
    if exc.hint:
        message += f"  ({exc.hint})"
    return message


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_listing(items: Sequence[str]) -> None:
    """Print the banner and the 1-based active list."""
    console.print(BANNER)
    console.print("📋 Todo list:", style="bold")
    for i, item in enumerate(items, start=1):
        console.print(_build_item_label(i, item))


def render_prompt() -> None:
    console.print(f"\n💬 {PROMPT}")


def render_history(history: HistoryShown) -> None:
    """Print closed items in removal order."""
    console.print("🧾Completed items:", style="bold")
    for i, item in enumerate(history.items, start=1):
        console.print(_build_closed_label(i, item))
    console.print()


def render_outcome(outcome: Outcome) -> None:
    if isinstance(outcome, HistoryShown):
        render_history(outcome)
        return
    console.print(
        _build_outcome_message(outcome),
        style=_OUTCOME_STYLES.get(type(outcome)),
    )


def render_error(exc: TodoShellError) -> None:
    console.print(_build_error_message(exc), style="bold red")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def prompt_command() -> str | None:
    """Read one command line from the user.

    Returns
    -------
    str | None
        The raw line, or ``None`` on end of input (EOF on a pipe,
        Ctrl+C / Ctrl+D at the interactive prompt).
    """
    if not sys.stdin.isatty():
        line = sys.stdin.readline()
        return line if line else None

    questionary = _import_questionary()
    answer: str | None = questionary.text("", qmark="›").ask()
    return answer


# ---------------------------------------------------------------------------
# Public loop
# ---------------------------------------------------------------------------

def run_shell(session: TodoSession, read_line: ReadLine | None = None) -> int:
    """Drive the read-parse-apply-render loop until exit.

    Parameters
    ----------
    session:
        Owner of the active list and closed history.
    read_line:
        Source of command lines.  Defaults to :func:`prompt_command`.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` on ``exit`` or end of input.

    Raises
    ------
    StoreError
        When persisting a mutation fails.  The loop does not recover.
    """
    reader = read_line if read_line is not None else prompt_command

    console.clear()
    while True:
        render_listing(session.active)
        render_prompt()

        line = reader()
        console.clear()
        if line is None:
            logger.debug("Input exhausted; ending session")
            return exit_codes.SUCCESS

        command = parse_command(line)
        try:
            outcome = session.apply(command)
        except NON_FATAL_ERRORS as exc:
            render_error(exc)
            continue

        if isinstance(outcome, Exited):
            return exit_codes.SUCCESS
        render_outcome(outcome)
