"""Tests for the interactive shell loop (cli/shell.py).

The loop is driven by scripted ``read_line`` callables and a
:class:`~conftest.MemoryStore`; output is captured with ``capsys``.  No
terminal and no questionary prompt is involved except where the prompt
itself is under test (mocked).
"""

from __future__ import annotations

import io
from unittest.mock import MagicMock, patch

import pytest

from todo_shell.cli import exit_codes
from todo_shell.cli.console import CLEAR_SCREEN
from todo_shell.cli.shell import (
    PROMPT,
    _build_closed_label,
    _build_error_message,
    _build_item_label,
    _build_outcome_message,
    prompt_command,
    run_shell,
)
from todo_shell.core.models import Added, Closed, Exited, Swapped
from todo_shell.core.session import TodoSession
from todo_shell.exceptions import InvalidIndexError, StoreWriteError, TodoShellError


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

class TestLabels:
    def test_item_label_is_one_based(self) -> None:
        assert _build_item_label(1, "buy milk") == "💣 1. buy milk"

    def test_closed_label(self) -> None:
        assert _build_closed_label(2, "walk dog") == "✅2. walk dog"

    def test_item_text_is_not_escaped(self) -> None:
        assert _build_item_label(1, "[red]x") == "💣 1. [red]x"


class TestOutcomeMessage:
    def test_added(self) -> None:
        assert _build_outcome_message(Added(item="x")) == "➕Added item: x"

    def test_closed(self) -> None:
        message = _build_outcome_message(Closed(item="b", index=2))
        assert "➖Closed item: b" in message

    def test_swapped(self) -> None:
        assert "Swapped 1 with 3" in _build_outcome_message(Swapped(first=1, second=3))

    def test_exit_has_no_status_line(self) -> None:
        with pytest.raises(TypeError):
            _build_outcome_message(Exited())


class TestErrorMessage:
    def test_without_hint(self) -> None:
        assert "❌Invalid command" in _build_error_message(TodoShellError("Invalid command"))

    def test_hint_on_same_line(self) -> None:
        message = _build_error_message(
            InvalidIndexError("Invalid index", hint="The todo list is empty."),
        )
        assert "\n" not in message
        assert "The todo list is empty." in message


# ---------------------------------------------------------------------------
# run_shell — scenarios
# ---------------------------------------------------------------------------

class TestRunShell:
    def test_exit_returns_success_without_writing(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store("a")
        code = run_shell(TodoSession(store), scripted_input("exit"))
        assert code == exit_codes.SUCCESS
        assert store.saves == []

    def test_end_of_input_returns_success(self, memory_store, scripted_input) -> None:
        code = run_shell(TodoSession(memory_store()), scripted_input())
        assert code == exit_codes.SUCCESS

    def test_lines_after_exit_are_not_read(self, memory_store, scripted_input) -> None:
        store = memory_store()
        run_shell(TodoSession(store), scripted_input("exit", "add late"))
        assert store.items == []

    def test_listing_is_one_based(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        run_shell(TodoSession(memory_store("a", "b")), scripted_input("exit"))
        out = capsys.readouterr().out
        assert "📋 Todo list:" in out
        assert "💣 1. a" in out
        assert "💣 2. b" in out
        assert PROMPT in out

    def test_screen_cleared_before_renders(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        run_shell(TodoSession(memory_store()), scripted_input("history", "exit"))
        out = capsys.readouterr().out
        assert out.startswith(CLEAR_SCREEN)
        assert out.count(CLEAR_SCREEN) == 3

    def test_listing_rerendered_after_every_command(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        run_shell(
            TodoSession(memory_store()),
            scripted_input("add a", "bogus", "close 9", "history", "exit"),
        )
        assert capsys.readouterr().out.count("📋 Todo list:") == 5

    def test_add(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store()
        run_shell(TodoSession(store), scripted_input("add   buy   milk", "exit"))
        out = capsys.readouterr().out
        assert store.items == ["buy milk"]
        assert "➕Added item: buy milk" in out
        assert "💣 1. buy milk" in out

    def test_close_middle(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store("a", "b", "c")
        session = TodoSession(store)
        run_shell(session, scripted_input("close 2", "exit"))
        assert store.items == ["a", "c"]
        assert session.closed == ("b",)
        assert "➖Closed item: b" in capsys.readouterr().out

    def test_swap(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store("a", "b", "c")
        run_shell(TodoSession(store), scripted_input("swap 1 3", "exit"))
        assert store.items == ["c", "b", "a"]
        assert "♻️Swapped 1 with 3" in capsys.readouterr().out

    def test_close_on_empty_list_reports_invalid_index(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store()
        code = run_shell(TodoSession(store), scripted_input("close 1", "exit"))
        assert code == exit_codes.SUCCESS
        assert store.saves == []
        assert "❌Invalid index" in capsys.readouterr().out

    def test_invalid_command_reported_and_loop_continues(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store()
        run_shell(TodoSession(store), scripted_input("dance", "add x", "exit"))
        assert "❌Invalid command" in capsys.readouterr().out
        assert store.items == ["x"]

    def test_history_after_two_closes(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        store = memory_store("a", "b", "c")
        session = TodoSession(store)
        run_shell(session, scripted_input("close 1", "close 2", "history", "exit"))
        out = capsys.readouterr().out

        assert "🧾Completed items:" in out
        assert out.index("✅1. a") < out.index("✅2. c")
        assert session.active == ("b",)
        assert len(store.saves) == 2

    def test_markup_in_items_is_shown_literally(
        self, memory_store, scripted_input, capsys: pytest.CaptureFixture[str],
    ) -> None:
        run_shell(TodoSession(memory_store()), scripted_input("add [bold]x[/bold]", "exit"))
        assert "[bold]x[/bold]" in capsys.readouterr().out

    def test_store_error_propagates(self, memory_store, scripted_input) -> None:
        store = memory_store()

        def _fail(_items: object) -> None:
            raise StoreWriteError("disk full")

        store.save = _fail  # type: ignore[method-assign]

        with pytest.raises(StoreWriteError):
            run_shell(TodoSession(store), scripted_input("add x", "exit"))

    def test_default_reader_is_prompt_command(
        self, memory_store, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from todo_shell.cli import shell as shell_module

        reader = MagicMock(side_effect=["add x", "exit"])
        monkeypatch.setattr(shell_module, "prompt_command", reader)

        store = memory_store()
        run_shell(TodoSession(store))

        assert reader.call_count == 2
        assert store.items == ["x"]


# ---------------------------------------------------------------------------
# prompt_command
# ---------------------------------------------------------------------------

class _TtyStdin(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestPromptCommand:
    def test_reads_line_from_pipe(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("add x\nexit\n"))
        assert prompt_command() == "add x\n"
        assert prompt_command() == "exit\n"
        assert prompt_command() is None

    def test_blank_line_on_pipe_is_not_eof(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
        assert prompt_command() == "\n"

    @patch("todo_shell.cli.shell._import_questionary")
    def test_uses_questionary_on_terminal(
        self, mock_q: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.stdin", _TtyStdin())
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.ask.return_value = "close 1"
        mock_q.return_value = questionary_mod

        assert prompt_command() == "close 1"
        questionary_mod.text.assert_called_once()

    @patch("todo_shell.cli.shell._import_questionary")
    def test_cancelled_prompt_is_end_of_input(
        self, mock_q: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.stdin", _TtyStdin())
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.ask.return_value = None
        mock_q.return_value = questionary_mod

        assert prompt_command() is None
