from __future__ import annotations

from typing import List

from snapedit.adapters.textual import TextualEditorAdapter, TextualUIHooks
from snapedit.buffer import BufferView, TextBuffer
from snapedit.commands import CommandContext


def make_context() -> CommandContext:
    return CommandContext(buffer=TextBuffer())


def test_adapter_pushes_initial_view() -> None:
    views: List[BufferView] = []

    TextualEditorAdapter(make_context(), TextualUIHooks(update_buffer=views.append))

    assert len(views) == 1
    assert views[0].text == ""


def test_adapter_updates_buffer_and_status() -> None:
    views: List[BufferView] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=views.append,
        update_status=statuses.append,
    )
    adapter = TextualEditorAdapter(make_context(), hooks)

    adapter.submit("append hello")
    adapter.submit("delete 9 1")

    assert views[-1].text == "hello"
    assert views[-1].undo_depth == 1
    assert statuses == ["ok", "Invalid position or length."]


def test_adapter_routes_output_clear_and_quit() -> None:
    outputs: List[str] = []
    events: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda view: None,
        show_output=outputs.append,
        clear_screen=lambda: events.append("clear"),
        request_quit=lambda: events.append("quit"),
    )
    adapter = TextualEditorAdapter(make_context(), hooks)

    adapter.submit("append abc")
    adapter.submit("print")
    adapter.submit("clear")
    result = adapter.submit("quit")

    assert outputs == ["abc"]
    assert events == ["clear", "quit"]
    assert result.quit is True


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda view: None, log=logs.append)
    adapter = TextualEditorAdapter(make_context(), hooks)

    adapter.submit("append x")

    assert any(line.startswith("command ->") for line in logs)
    assert any("status='ok'" in line for line in logs)
