"""Editor configuration resolved from keyword arguments or ``SNAPEDIT_*`` env vars."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "SNAPEDIT_"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{ENV_PREFIX}{name.upper()} expects a boolean, got {raw!r}")


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Knobs for a :class:`~snapedit.buffer.TextBuffer`.

    The boolean switches restore history behaviour of the classic menu
    editor that is otherwise corrected:

    ``snapshot_before_validation``
        Record history before range checks, so a rejected edit still
        consumes an undo slot and clears redo.
    ``split_compound_edits``
        Cut and paste record two history entries (the outer call plus the
        inner delete/insert), needing two undos to reverse.
    ``cross_push_on_empty``
        ``undo``/``redo`` push the current state onto the opposite stack
        even when there is nothing to restore.
    """

    initial_capacity: int = 10
    encoding: str = "utf-8"
    snapshot_before_validation: bool = False
    split_compound_edits: bool = False
    cross_push_on_empty: bool = False

    def __post_init__(self) -> None:
        if self.initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{self.encoding}'") from exc

    @classmethod
    def reference(cls, **overrides: object) -> "EditorConfig":
        """Configuration reproducing every quirk of the classic menu editor."""

        values: dict[str, object] = {
            "snapshot_before_validation": True,
            "split_compound_edits": True,
            "cross_push_on_empty": True,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for item in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{item.name.upper()}")
            if raw is None:
                continue
            if item.name == "initial_capacity":
                try:
                    values[item.name] = int(raw)
                except ValueError as exc:
                    raise ValueError(
                        f"{ENV_PREFIX}INITIAL_CAPACITY expects an integer, got {raw!r}"
                    ) from exc
            elif item.name == "encoding":
                values[item.name] = raw.strip()
            else:
                values[item.name] = _parse_flag(item.name, raw)
        return cls(**values)  # type: ignore[arg-type]


__all__ = ["ENV_PREFIX", "EditorConfig"]
