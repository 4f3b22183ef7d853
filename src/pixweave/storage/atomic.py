"""Atomic filesystem write helpers."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import json
import os
import tempfile
from typing import IO, Any, Iterator


@contextmanager
def atomic_binary_writer(path: Path) -> Iterator[IO[bytes]]:
    """Yield a temp file handle that replaces ``path`` only if the block succeeds."""

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as handle:
            yield handle
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)


def atomic_write_text(path: Path, content: str) -> None:
    """Write text atomically using a temp file + rename."""

    with atomic_binary_writer(path) as handle:
        handle.write(content.encode("utf-8"))


def atomic_write_json(path: Path, payload: Any, indent: int = 2) -> None:
    """Write JSON atomically."""

    atomic_write_text(path, json.dumps(payload, indent=indent, sort_keys=True) + "\n")


def read_json(path: Path) -> Any:
    """Read JSON from disk."""

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
