from __future__ import annotations

from typing import Iterator, List

from snapedit.adapters.console import run_console
from snapedit.buffer import TextBuffer
from snapedit.commands import MENU, CommandContext


def scripted(lines: List[str]):
    feed: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        del prompt
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read


def test_console_runs_until_quit() -> None:
    context = CommandContext(buffer=TextBuffer())
    output: List[str] = []

    executed = run_console(
        context,
        read=scripted(["append hi", "", "print", "quit", "append ignored"]),
        write=output.append,
        show_menu=False,
    )

    assert executed == 3
    assert context.buffer.text == "hi"
    assert output == ["Current saved text:", "hi"]


def test_console_stops_at_end_of_input_and_reports_errors() -> None:
    context = CommandContext(buffer=TextBuffer())
    output: List[str] = []
    cleared: List[bool] = []

    run_console(
        context,
        read=scripted(["undo", "clear", "bogus"]),
        write=output.append,
        clear=lambda: cleared.append(True),
    )

    assert output == [MENU, "Cannot undo further.", "Invalid command"]
    assert cleared == [True]
