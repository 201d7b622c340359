"""todo-shell — single-user interactive todo list for the terminal.

Keeps a flat text file of items in sync with an in-memory session
behind a small line-based command protocol.
"""

from todo_shell.version import __version__

__all__: list[str] = ["__version__"]
