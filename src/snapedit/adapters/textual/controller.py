"""Textual-facing adapter that routes command lines into the buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from snapedit.buffer import BufferView
from snapedit.commands import CommandContext, CommandResult, execute


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    update_buffer: Callable[[BufferView], None]
    update_status: Callable[[str], None] = _noop
    show_output: Callable[[str], None] = _noop
    clear_screen: Callable[[], None] = _noop
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges submitted command lines to :func:`snapedit.commands.execute`."""

    def __init__(self, context: CommandContext, hooks: TextualUIHooks) -> None:
        self.context = context
        self.hooks = hooks
        self._refresh_buffer()

    def submit(self, line: str) -> CommandResult:
        self._log_state("command ->", line=line)
        result = execute(self.context, line)
        self._after_result(result)
        self._log_state(
            "result <-",
            status=result.status,
            message=result.message,
            quit=result.quit or None,
        )
        return result

    def _after_result(self, result: CommandResult) -> None:
        if result.clear:
            self.hooks.clear_screen()
        if result.output is not None:
            self.hooks.show_output(result.output)
        status = result.message or result.status
        if status and status != "command_empty":
            self.hooks.update_status(status)
        self._refresh_buffer()
        if result.quit:
            self.hooks.request_quit()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.context.buffer.view())

    def _log_state(self, prefix: str, **fields: Optional[object]) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.context.buffer
        return {
            "buffer": buffer.name,
            "length": buffer.length,
            "capacity": buffer.capacity,
            "undo": buffer.history.undo_depth,
            "redo": buffer.history.redo_depth,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
