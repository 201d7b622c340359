"""CLI application entry point for todo-shell.

This module is the **sole error boundary** for the entire application.
It catches :class:`~todo_shell.exceptions.TodoShellError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  session and the infrastructure store.
* Non-fatal command errors never reach this module; the shell loop
  reports them inline.  Anything that does arrive here (store failures,
  missing UI dependencies) ends the process.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from todo_shell.cli import exit_codes
from todo_shell.cli.console import console, get_rich_console
from todo_shell.cli.shell import run_shell
from todo_shell.core.session import TodoSession
from todo_shell.exceptions import EnvironmentError, TodoShellError
from todo_shell.infra.text_file_store import DEFAULT_FILENAME, TextFileStore
from todo_shell.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Every flag is optional; with none given the shell opens
    ``todo_list.txt`` in the current directory.  Arguments the parser
    does not know are ignored by :func:`main`, not rejected.
    """
    parser = argparse.ArgumentParser(
        prog="todo-shell",
        description="Interactive single-file todo list for the terminal.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=DEFAULT_FILENAME,
        help=f"Path to the todo file (default: ./{DEFAULT_FILENAME}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug logging to stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    """Route package logs to a Rich handler on stderr when *verbose*."""
    if not verbose:
        return
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
            hint="--verbose needs rich for log output.",
        ) from exc

    handler = RichHandler(console=get_rich_console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger = logging.getLogger("todo_shell")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the todo-shell CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args, ignored = parser.parse_known_args(argv)
    _configure_logging(args.verbose)
    if ignored:
        logger.debug("Ignoring extra arguments: %s", ignored)

    store = TextFileStore(args.file)
    session = TodoSession(store)
    return run_shell(session)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TodoShellError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
