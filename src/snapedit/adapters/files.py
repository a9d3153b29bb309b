"""Plain file load/save collaborators.

Content is persisted byte for byte: no header, no escaping, no metadata.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from snapedit.runtime import telemetry

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(slots=True)
class FileResult:
    ok: bool
    path: str
    message: str
    data: Optional[bytes] = None


class ContentStore(Protocol):
    """What the command layer needs to load and save buffer content."""

    def read_bytes(self, path: PathLike) -> FileResult:
        ...

    def write_bytes(self, path: PathLike, data: bytes) -> FileResult:
        ...


class LocalFiles:
    """:class:`ContentStore` backed by the local filesystem."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name

    def read_bytes(self, path: PathLike) -> FileResult:
        target = Path(path)
        try:
            data = target.read_bytes()
        except OSError as exc:
            self._report("file.read_failed", target, exc)
            return FileResult(False, str(target), f"Failed to load from {target}")
        telemetry.record_event(
            "file.read",
            data={"path": str(target), "bytes": len(data)},
            logger_name=self._logger_name,
        )
        return FileResult(True, str(target), f"Loaded from {target}", data)

    def write_bytes(self, path: PathLike, data: bytes) -> FileResult:
        target = Path(path)
        try:
            target.write_bytes(data)
        except OSError as exc:
            self._report("file.write_failed", target, exc)
            return FileResult(False, str(target), f"Failed to save to {target}")
        telemetry.record_event(
            "file.write",
            data={"path": str(target), "bytes": len(data)},
            logger_name=self._logger_name,
        )
        return FileResult(True, str(target), f"Saved to {target}")

    def _report(self, event: str, target: Path, exc: OSError) -> None:
        telemetry.record_event(
            event,
            level="warning",
            data={"path": str(target), "error": exc.strerror or str(exc)},
            logger_name=self._logger_name,
        )


__all__ = ["ContentStore", "FileResult", "LocalFiles"]
