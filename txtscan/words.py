"""Word counting for text files."""

from __future__ import annotations

import logging
import os
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from itertools import groupby
from typing import Iterable

from .lines import _iter_lines, _worker_count

_log = logging.getLogger(__name__)


def tokenize(line: str) -> list[str]:
    """Split ``line`` into lower-case runs of letters; everything else separates."""
    return ["".join(run) for is_letter, run in groupby(line.lower(), str.isalpha) if is_letter]


def count_words(path: str | os.PathLike[str]) -> Counter[str]:
    """Return how often each word occurs in the file at ``path``.

    Counting stops silently at a line that is too long to read.
    Raises ``OSError`` if the file cannot be opened.
    """
    counts: Counter[str] = Counter()
    with open(path, "rb") as stream:
        for line in _iter_lines(stream, stop_on_overflow=True):
            counts.update(tokenize(line.decode("utf-8", errors="replace")))
    return counts


def count_words_in_all_files(paths: Iterable[str]) -> Counter[str]:
    """Count words in every file concurrently and sum the counts.

    Files that cannot be read are logged and left out.
    """

    def attempt(path: str) -> Counter[str] | None:
        try:
            return count_words(path)
        except OSError:
            _log.warning("err-counting-words, path: %s", path)
            return None

    total: Counter[str] = Counter()
    with ThreadPoolExecutor(max_workers=_worker_count()) as pool:
        for counts in pool.map(attempt, list(paths)):
            if counts is not None:
                total.update(counts)
    return total