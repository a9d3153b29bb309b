"""Interactive console loop driving the command layer."""

from __future__ import annotations

import os
from typing import Callable

from snapedit.commands import MENU, CommandContext, CommandResult, execute
from snapedit.runtime import telemetry

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def clear_screen() -> None:  # pragma: no cover - touches the real terminal
    os.system("cls" if os.name == "nt" else "clear")


def render_result(result: CommandResult, output: OutputFn) -> None:
    if result.message:
        output(result.message)
    if result.output is not None:
        output(result.output)


def run_console(
    context: CommandContext,
    *,
    read: InputFn = input,
    write: OutputFn = print,
    clear: Callable[[], None] = clear_screen,
    show_menu: bool = True,
) -> int:
    """Read commands until ``quit`` or end of input; return the command count."""

    if show_menu:
        write(MENU)
    executed = 0
    while True:
        try:
            line = read("> ")
        except EOFError:
            break
        result = execute(context, line)
        if result.status == "command_empty":
            continue
        executed += 1
        telemetry.record_event(
            "console.command",
            level="debug",
            data={"status": result.status, "length": context.buffer.length},
        )
        if result.clear:
            clear()
        render_result(result, write)
        if result.quit:
            break
    return executed


__all__ = ["clear_screen", "render_result", "run_console"]
