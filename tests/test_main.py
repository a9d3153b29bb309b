from __future__ import annotations

from typing import List

from snapedit.__main__ import build_context


def test_build_context_loads_path_and_reports(tmp_path) -> None:
    source = tmp_path / "notes.txt"
    source.write_bytes(b"draft")
    messages: List[str] = []

    context = build_context(str(source), report=messages.append)

    assert context.buffer.get_text() == b"draft"
    assert messages == [f"Loaded from {source}"]


def test_build_context_reports_failed_load(tmp_path) -> None:
    missing = tmp_path / "missing.txt"
    messages: List[str] = []

    context = build_context(str(missing), report=messages.append)

    assert context.buffer.get_text() == b""
    assert messages == [f"Failed to load from {missing}"]


def test_build_context_without_path_is_silent() -> None:
    messages: List[str] = []

    context = build_context(report=messages.append)

    assert context.buffer.length == 0
    assert messages == []
