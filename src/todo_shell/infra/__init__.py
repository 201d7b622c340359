"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~todo_shell.exceptions.TodoShellError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from todo_shell.infra.text_file_store import DEFAULT_FILENAME, TextFileStore

__all__: list[str] = [
    "DEFAULT_FILENAME",
    "TextFileStore",
]
