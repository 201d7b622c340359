"""Plain-text implementation of :class:`~todo_shell.core.protocols.TodoStore`.

This module is the **only** place in the codebase that touches the todo
file.  Every ``OSError`` is caught here and re-raised as a typed
:class:`~todo_shell.exceptions.StoreError` subclass — nothing raw escapes
the infrastructure boundary.

File format
-----------
UTF-8 text, one item per line, in display order.  Lines are split on
``\\n`` when reading (a trailing ``\\r`` is dropped); items are joined
with ``\\n`` and no trailing newline when writing.  Items are not
escaped, so an item containing a newline cannot round-trip.

Every save truncates and rewrites the whole file in place.  A failure
part-way through a write can leave the file truncated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from todo_shell.exceptions import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME: str = "todo_list.txt"
"""Store file name, resolved against the current working directory."""


def decode_lines(contents: str) -> list[str]:
    """Split file contents into items."""
    if not contents:
        return []
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def encode_lines(items: Sequence[str]) -> str:
    """Join items into file contents."""
    return "\n".join(items)


class TextFileStore:
    """Concrete :class:`TodoStore` backed by a single text file.

    Usage::

        store = TextFileStore(Path("todo_list.txt"))
        items = store.load()
        store.save([*items, "buy milk"])

    The file is opened and closed on every access; no handle is kept
    between calls.
    """

    def __init__(self, path: Path | str = DEFAULT_FILENAME) -> None:
        self.path: Path = Path(path)

    def load(self) -> list[str]:
        """Read all items, or return ``[]`` when the file does not exist.

        Raises
        ------
        StoreReadError
            When the file exists but cannot be opened, read or decoded.
        """
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                contents = f.read()
        except FileNotFoundError:
            logger.debug("No todo file at %s; starting empty", self.path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreReadError(
                f"Failed to read todo file {self.path}: {exc}",
                hint="Check that the file is readable UTF-8 text.",
            ) from exc

        items = decode_lines(contents)
        logger.debug("Loaded %d item(s) from %s", len(items), self.path)
        return items

    def save(self, items: Sequence[str]) -> None:
        """Overwrite the file with *items*.

        Raises
        ------
        StoreWriteError
            When the file cannot be opened for writing or written.
        """
        try:
            with open(self.path, "w", encoding="utf-8", newline="") as f:
                f.write(encode_lines(items))
        except OSError as exc:
            raise StoreWriteError(
                f"Failed to write todo file {self.path}: {exc}",
                hint="Check permissions and free space for the todo file's directory.",
            ) from exc
        logger.debug("Saved %d item(s) to %s", len(items), self.path)
