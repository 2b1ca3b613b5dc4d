"""Line counting for text files."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Iterable, Iterator

_log = logging.getLogger(__name__)

_MAX_LINE_BYTES = 64 * 1024


def _iter_lines(stream: BinaryIO, *, stop_on_overflow: bool = False) -> Iterator[bytes]:
    """Yield the lines of ``stream`` without their line endings.

    A line of 64 KiB or more raises ``ValueError``, or ends the iteration
    quietly when ``stop_on_overflow`` is set.
    """
    for raw in stream:
        line = raw[:-1] if raw.endswith(b"\n") else raw
        if len(line) >= _MAX_LINE_BYTES:
            if stop_on_overflow:
                return
            raise ValueError(f"line too long: {len(line)} bytes")
        yield line[:-1] if line.endswith(b"\r") else line


def _worker_count() -> int:
    return os.cpu_count() or 1


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return the number of lines in the file at ``path``.

    A final line without a trailing newline still counts. Raises ``OSError``
    if the file cannot be read and ``ValueError`` if a line is too long.
    """
    with open(path, "rb") as stream:
        return sum(1 for _ in _iter_lines(stream))


def count_all_lines(paths: Iterable[str]) -> dict[str, int]:
    """Count lines in every file concurrently, keyed by path.

    Files that cannot be counted are logged and left out.
    """

    def attempt(path: str) -> tuple[str, int | None]:
        try:
            return path, count_lines(path)
        except (OSError, ValueError) as exc:
            _log.warning("error counting lines in %s: %s", path, exc)
            return path, None

    result: dict[str, int] = {}
    with ThreadPoolExecutor(max_workers=_worker_count()) as pool:
        for path, count in pool.map(attempt, list(paths)):
            if count is not None:
                result[path] = result.get(path, 0) + count
    return result