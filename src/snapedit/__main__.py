"""Command-line entry point: ``python -m snapedit [path]``."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from snapedit.adapters.console import run_console
from snapedit.adapters.files import LocalFiles
from snapedit.buffer import TextBuffer
from snapedit.commands import CommandContext
from snapedit.config import EditorConfig
from snapedit.runtime import telemetry


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snapedit", description="Edit a byte buffer with undo/redo history."
    )
    parser.add_argument("path", nargs="?", help="file to load before editing")
    parser.add_argument(
        "--tui", action="store_true", help="run the Textual interface"
    )
    parser.add_argument(
        "--preset",
        choices=telemetry.PRESETS,
        help="telemetry preset (default: SNAPEDIT_* environment)",
    )
    parser.add_argument(
        "--reference-quirks",
        action="store_true",
        help="record history exactly like the classic menu editor",
    )
    return parser.parse_args(argv)


def build_context(
    path: Optional[str] = None,
    *,
    config: Optional[EditorConfig] = None,
    report: Callable[[str], None] = print,
) -> CommandContext:
    """Create the editing context, loading ``path`` first when given."""

    context = CommandContext(buffer=TextBuffer(config=config), files=LocalFiles())
    if path:
        outcome = context.files.read_bytes(path)
        if outcome.ok and outcome.data is not None:
            context.buffer.load_raw(outcome.data)
        report(outcome.message)
    return context


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    config = EditorConfig.from_env()
    if args.reference_quirks:
        config = EditorConfig.reference(
            initial_capacity=config.initial_capacity, encoding=config.encoding
        )
    context = build_context(args.path, config=config)

    if args.tui:
        from snapedit.adapters.textual.app import run_app

        run_app(context, title=args.path or "snapedit")
    else:
        run_console(context)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
