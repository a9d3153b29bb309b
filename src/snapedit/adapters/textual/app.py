"""Textual front end for the snapshot editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

try:  # pragma: no cover - imported only when the TUI is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use snapedit.adapters.textual.app"
    ) from exc

from snapedit.buffer import BufferView
from snapedit.commands import MENU, CommandContext

from .controller import TextualEditorAdapter, TextualUIHooks


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    output_text: str = ""


class SnapEditApp(App[None]):
    """Buffer view, output pane, status line and a command input."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-view {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
        overflow: auto;
    }

    #output-view {
        height: auto;
        max-height: 12;
        border: round $surface-lighten-1;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, context: CommandContext) -> None:
        super().__init__()
        self.context = context
        self._state = UIState()
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._output_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
            self._output_widget = Static(MENU, id="output-view", markup=False)
            yield self._output_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Input(placeholder="command (help for the list)", id="command-line")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_output=self._show_output,
            clear_screen=self._clear_output,
            request_quit=self.exit,
            log=self.log,
        )
        self.adapter = TextualEditorAdapter(self.context, hooks)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter is None:
            return
        self.adapter.submit(event.value)
        event.input.value = ""

    def _update_buffer(self, view: BufferView) -> None:
        self._state.buffer_text = view.text
        if self._buffer_widget:
            self._buffer_widget.update(view.text)
        self.sub_title = (
            f"{view.length}/{view.capacity} bytes  "
            f"undo {view.undo_depth}  redo {view.redo_depth}"
        )

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_output(self, text: str) -> None:
        self._state.output_text = text
        if self._output_widget:
            self._output_widget.update(text)

    def _clear_output(self) -> None:
        self._show_output("")
        self._update_status("")


def run_app(context: CommandContext, *, title: Optional[str] = None) -> None:
    app = SnapEditApp(context)
    if title:
        app.title = title
    app.run()


__all__ = ["SnapEditApp", "UIState", "run_app"]
