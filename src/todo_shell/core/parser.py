"""Command parser — one line of text in, one command value out.

Pure and deterministic: no I/O, no state, and identical input always
yields an equal :data:`~todo_shell.core.models.Command`.
"""

from __future__ import annotations

import re

from todo_shell.core.models import (
    AddCommand,
    CloseCommand,
    Command,
    ExitCommand,
    HistoryCommand,
    InvalidCommand,
    SwapCommand,
)

_INDEX_RE = re.compile(r"\+?[0-9]+")

INDEX_MAX: int = 2**64 - 1
"""Largest accepted index; anything above parses as invalid."""
_INDEX_MAX_DIGITS: int = len(str(INDEX_MAX))


def parse_index(token: str | None) -> int | None:
    """Parse a non-negative integer token, or return ``None``.

    Only ASCII digits with an optional leading ``+`` are accepted, so
    ``"-1"``, ``"1_000"`` and non-ASCII digits are all rejected.  Values
    above :data:`INDEX_MAX` are rejected too; the digit count is checked
    before conversion so arbitrarily long tokens never reach ``int()``.
    """
    if token is None or _INDEX_RE.fullmatch(token) is None:
        return None
    digits = token.lstrip("+").lstrip("0")
    if len(digits) > _INDEX_MAX_DIGITS:
        return None
    value = int(digits or "0")
    if value > INDEX_MAX:
        return None
    return value


def parse_command(line: str) -> Command:
    """Map one line of user input to exactly one command variant.

    Rules
    -----
    * ``add <text...>`` — words rejoined with single spaces; no words is
      invalid.
    * ``close <n>`` — *n* must be a non-negative integer.
    * ``swap <a> <b>`` — both must be non-negative integers.
    * ``exit`` / ``history`` — trailing words are ignored.
    * Anything else, including blank input, is invalid.
    """
    words = line.split()
    if not words:
        return InvalidCommand(line="")

    keyword, args = words[0], words[1:]
    invalid = InvalidCommand(line=" ".join(words))

    if keyword == "add":
        if not args:
            return invalid
        return AddCommand(item=" ".join(args))

    if keyword == "close":
        index = parse_index(args[0] if args else None)
        if index is None:
            return invalid
        return CloseCommand(index=index)

    if keyword == "swap":
        first = parse_index(args[0] if len(args) > 0 else None)
        second = parse_index(args[1] if len(args) > 1 else None)
        if first is None or second is None:
            return invalid
        return SwapCommand(first=first, second=second)

    if keyword == "exit":
        return ExitCommand()

    if keyword == "history":
        return HistoryCommand()

    return invalid
