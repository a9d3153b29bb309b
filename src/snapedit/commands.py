"""Line-oriented editing commands evaluated against a :class:`TextBuffer`."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from snapedit.adapters.files import ContentStore, LocalFiles
from snapedit.buffer import EditResult, TextBuffer


@dataclass(slots=True)
class CommandResult:
    """What a host should show or do after one command."""

    status: str
    message: Optional[str] = None
    output: Optional[str] = None
    quit: bool = False
    clear: bool = False

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass(slots=True)
class CommandContext:
    buffer: TextBuffer
    files: ContentStore = field(default_factory=LocalFiles)
    history: List[str] = field(default_factory=list)


CommandHandler = Callable[[CommandContext, str], CommandResult]


class CommandUsageError(ValueError):
    """Raised by handlers when arguments do not match the usage line."""


MENU = """\
Choose the command:
 1. append <text>            Append text
 2. newline                  Start new line
 3. save <path>              Save as file
 4. load <path>              Load file
 5. print                    Print current saved text
 6. find <text>              Find text
 7. insert <pos> <text>      Insert text at position
    replace <pos> <n> <text> Replace n bytes at position
 8. clear                    Clear console
 9. undo                     Undo
10. redo                     Redo
11. delete <pos> <n>         Delete text
12. cut <pos> <n>            Cut text
13. copy <pos> <n>           Copy text
14. paste <pos>              Paste text
    history                  Show undo/redo depth
 0. quit                     Exit
Text arguments start after a single space; extra spaces are kept."""


def execute(context: CommandContext, line: str) -> CommandResult:
    text = line.rstrip("\r\n").lstrip()
    if not text.strip():
        return CommandResult(status="command_empty")
    context.history.append(text)
    name, _, rest = text.partition(" ")
    handler = _COMMAND_HANDLERS.get(name.lower())
    if handler is None:
        return CommandResult(status="command_error", message="Invalid command")
    try:
        return handler(context, rest)
    except CommandUsageError as exc:
        return CommandResult(status="command_usage", message=str(exc))


def _from_edit(result: EditResult) -> CommandResult:
    if result.ok:
        return CommandResult(status="ok")
    return CommandResult(status=result.status, message=result.message)


def _ints(rest: str, count: int, usage: str) -> Tuple[List[int], str]:
    """Split ``count`` integers off the front of ``rest``; return them + the tail."""

    values: List[int] = []
    tail = rest
    for _ in range(count):
        token, _, tail = tail.lstrip(" ").partition(" ")
        try:
            values.append(int(token))
        except ValueError as exc:
            raise CommandUsageError(f"Usage: {usage}") from exc
    return values, tail


def _handle_append(context: CommandContext, rest: str) -> CommandResult:
    return _from_edit(context.buffer.append(rest))


def _handle_newline(context: CommandContext, rest: str) -> CommandResult:
    del rest
    return _from_edit(context.buffer.append("\n"))


def _handle_save(context: CommandContext, rest: str) -> CommandResult:
    path = rest.strip()
    if not path:
        raise CommandUsageError("Usage: save <path>")
    outcome = context.files.write_bytes(path, context.buffer.save_raw())
    return CommandResult(
        status="ok" if outcome.ok else "io_error", message=outcome.message
    )


def _handle_load(context: CommandContext, rest: str) -> CommandResult:
    path = rest.strip()
    if not path:
        raise CommandUsageError("Usage: load <path>")
    outcome = context.files.read_bytes(path)
    if not outcome.ok or outcome.data is None:
        return CommandResult(status="io_error", message=outcome.message)
    context.buffer.load_raw(outcome.data)
    return CommandResult(status="ok", message=outcome.message)


def _handle_print(context: CommandContext, rest: str) -> CommandResult:
    del rest
    return CommandResult(
        status="ok", message="Current saved text:", output=context.buffer.text
    )


def _handle_find(context: CommandContext, rest: str) -> CommandResult:
    if not rest:
        raise CommandUsageError("Usage: find <text>")
    offset = context.buffer.find_text(rest)
    if offset is None:
        return CommandResult(status="not_found", message="Text not found.")
    return CommandResult(status="ok", message=f"Found text at position {offset}")


def _handle_insert(context: CommandContext, rest: str) -> CommandResult:
    (pos,), text = _ints(rest, 1, "insert <pos> <text>")
    return _from_edit(context.buffer.insert_and_replace(pos, text, 0))


def _handle_replace(context: CommandContext, rest: str) -> CommandResult:
    (pos, count), text = _ints(rest, 2, "replace <pos> <n> <text>")
    return _from_edit(context.buffer.insert_and_replace(pos, text, count))


def _handle_range(
    context: CommandContext, rest: str, *, verb: str
) -> CommandResult:
    (pos, count), _ = _ints(rest, 2, f"{verb} <pos> <n>")
    operation: Callable[[int, int], EditResult] = getattr(
        context.buffer, f"{verb}_text"
    )
    return _from_edit(operation(pos, count))


def _handle_paste(context: CommandContext, rest: str) -> CommandResult:
    (pos,), _ = _ints(rest, 1, "paste <pos>")
    return _from_edit(context.buffer.paste_text(pos))


def _handle_undo(context: CommandContext, rest: str) -> CommandResult:
    del rest
    return _from_edit(context.buffer.undo())


def _handle_redo(context: CommandContext, rest: str) -> CommandResult:
    del rest
    return _from_edit(context.buffer.redo())


def _handle_history(context: CommandContext, rest: str) -> CommandResult:
    del rest
    history = context.buffer.history
    return CommandResult(
        status="ok", message=f"undo={history.undo_depth} redo={history.redo_depth}"
    )


def _handle_clear(context: CommandContext, rest: str) -> CommandResult:
    del context, rest
    return CommandResult(status="ok", clear=True)


def _handle_help(context: CommandContext, rest: str) -> CommandResult:
    del context, rest
    return CommandResult(status="ok", output=MENU)


def _handle_quit(context: CommandContext, rest: str) -> CommandResult:
    del context, rest
    return CommandResult(status="ok", quit=True)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "append": _handle_append,
    "newline": _handle_newline,
    "save": _handle_save,
    "load": _handle_load,
    "print": _handle_print,
    "find": _handle_find,
    "insert": _handle_insert,
    "replace": _handle_replace,
    "clear": _handle_clear,
    "undo": _handle_undo,
    "redo": _handle_redo,
    "delete": partial(_handle_range, verb="delete"),
    "cut": partial(_handle_range, verb="cut"),
    "copy": partial(_handle_range, verb="copy"),
    "paste": _handle_paste,
    "history": _handle_history,
    "help": _handle_help,
    "quit": _handle_quit,
    "exit": _handle_quit,
}

# numeric aliases follow the MENU listing
_COMMAND_HANDLERS.update(
    {
        "1": _handle_append,
        "2": _handle_newline,
        "3": _handle_save,
        "4": _handle_load,
        "5": _handle_print,
        "6": _handle_find,
        "7": _handle_insert,
        "8": _handle_clear,
        "9": _handle_undo,
        "10": _handle_redo,
        "11": _COMMAND_HANDLERS["delete"],
        "12": _COMMAND_HANDLERS["cut"],
        "13": _COMMAND_HANDLERS["copy"],
        "14": _handle_paste,
        "0": _handle_quit,
    }
)


def command_names() -> Tuple[str, ...]:
    return tuple(name for name in _COMMAND_HANDLERS if not name.isdigit())


__all__ = [
    "MENU",
    "CommandContext",
    "CommandResult",
    "CommandUsageError",
    "command_names",
    "execute",
]
