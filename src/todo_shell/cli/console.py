"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from todo_shell.exceptions import EnvironmentError

CLEAR_SCREEN: str = "\x1b[2J"
"""ANSI erase-display sequence emitted before each render."""


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout (or stderr).

	Emoji shortcodes and automatic highlighting are disabled so that item
	text is shown exactly as typed.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, emoji=False, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain stdout print.

		Text is never parsed as markup, so item text prints verbatim on both
		paths; *style* applies to the whole line and only on the Rich path.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects)
			return
		rich_console.print(*objects, style=style, markup=False)

	def clear(self) -> None:
		"""Erase the terminal display."""
		sys.stdout.write(CLEAR_SCREEN)
		sys.stdout.flush()


console = _ConsoleProxy()
