"""Allow ``python -m todo_shell`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m todo_shell`` behaves identically to the ``todo-shell``
console script.
"""

from __future__ import annotations

from todo_shell.cli.app import cli

if __name__ == "__main__":
    cli()
