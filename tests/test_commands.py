from __future__ import annotations

from typing import Dict

import pytest

from snapedit.adapters.files import FileResult
from snapedit.buffer import TextBuffer
from snapedit.commands import MENU, CommandContext, command_names, execute


class MemoryFiles:
    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}

    def read_bytes(self, path) -> FileResult:
        key = str(path)
        if key not in self.files:
            return FileResult(False, key, f"Failed to load from {key}")
        return FileResult(True, key, f"Loaded from {key}", self.files[key])

    def write_bytes(self, path, data: bytes) -> FileResult:
        self.files[str(path)] = data
        return FileResult(True, str(path), f"Saved to {path}")


def make_context(text: str = "") -> CommandContext:
    buffer = TextBuffer()
    if text:
        buffer.append(text)
    return CommandContext(buffer=buffer, files=MemoryFiles())


def run(context: CommandContext, *lines: str):
    result = None
    for line in lines:
        result = execute(context, line)
    return result


def test_append_and_insert_keep_spacing() -> None:
    context = make_context()

    run(context, "append hello", "insert 5  world")

    assert context.buffer.text == "hello world"


def test_numeric_aliases() -> None:
    context = make_context()

    run(context, "1 abc", "2", "1 def")

    assert context.buffer.text == "abc\ndef"
    assert execute(context, "0").quit is True


def test_replace_command() -> None:
    context = make_context("hello world")

    result = execute(context, "replace 0 5 HELLO")

    assert result.ok
    assert context.buffer.text == "HELLO world"


def test_cut_copy_paste_commands() -> None:
    context = make_context("abcdef")

    assert execute(context, "cut 1 3").ok
    assert context.buffer.text == "aef"
    assert execute(context, "paste 4").status == "invalid_range"

    run(context, "paste 3")
    assert context.buffer.text == "aefbcd"

    run(context, "copy 0 1", "paste 0")
    assert context.buffer.text == "aaefbcd"


def test_delete_undo_redo_commands() -> None:
    context = make_context("abcdef")

    run(context, "delete 0 2")
    assert context.buffer.text == "cdef"
    run(context, "undo")
    assert context.buffer.text == "abcdef"
    run(context, "redo")
    assert context.buffer.text == "cdef"


def test_history_exhaustion_is_reported() -> None:
    context = make_context()

    result = execute(context, "undo")

    assert result.status == "nothing_to_undo"
    assert result.message == "Cannot undo further."


def test_invalid_range_is_reported() -> None:
    context = make_context("abc")

    result = execute(context, "paste 99")

    assert result.status == "invalid_range"
    assert result.message == "Invalid position."


def test_find_command() -> None:
    context = make_context("banana")

    assert execute(context, "find ana").message == "Found text at position 1"
    missing = execute(context, "find kiwi")
    assert missing.status == "not_found"
    assert missing.message == "Text not found."


def test_print_and_history_commands() -> None:
    context = make_context("abc")

    printed = execute(context, "print")
    assert printed.output == "abc"

    assert execute(context, "history").message == "undo=1 redo=0"


def test_save_and_load_commands() -> None:
    context = make_context("persist me")

    saved = execute(context, "save notes.txt")
    assert saved.ok
    assert context.files.files["notes.txt"] == b"persist me"

    other = CommandContext(buffer=TextBuffer(), files=context.files)
    loaded = execute(other, "load notes.txt")
    assert loaded.message == "Loaded from notes.txt"
    assert other.buffer.text == "persist me"


def test_load_failure_leaves_buffer() -> None:
    context = make_context("keep")

    result = execute(context, "load missing.txt")

    assert result.status == "io_error"
    assert context.buffer.text == "keep"


@pytest.mark.parametrize(
    "line", ["delete 1", "cut x 2", "paste", "insert here", "save", "find"]
)
def test_usage_errors(line: str) -> None:
    context = make_context("abc")

    result = execute(context, line)

    assert result.status == "command_usage"
    assert result.message is not None and result.message.startswith("Usage:")
    assert context.buffer.text == "abc"


def test_unknown_and_empty_commands() -> None:
    context = make_context()

    assert execute(context, "frobnicate").status == "command_error"
    assert execute(context, "   ").status == "command_empty"
    assert context.history == ["frobnicate"]


def test_clear_help_quit_flags() -> None:
    context = make_context()

    assert execute(context, "clear").clear is True
    assert execute(context, "help").output == MENU
    assert execute(context, "exit").quit is True


def test_command_names_exclude_numeric_aliases() -> None:
    names = command_names()

    assert "append" in names
    assert "paste" in names
    assert not any(name.isdigit() for name in names)
