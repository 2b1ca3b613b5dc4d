"""Command line entry point: report line counts and the most frequent words."""

from __future__ import annotations

import heapq
import logging
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .lines import count_all_lines
from .scanner import scan
from .words import count_words_in_all_files

_log = logging.getLogger(__name__)

_TOP_LIMIT = 10


@dataclass(frozen=True)
class WordCount:
    """A word together with how often it occurred."""

    word: str
    count: int


def top_words(counts: Mapping[str, int], limit: int = _TOP_LIMIT) -> list[WordCount]:
    """Return the ``limit`` most frequent words, most frequent first."""
    best = heapq.nlargest(limit, counts.items(), key=lambda item: item[1])
    return [WordCount(word, count) for word, count in best]


def execute(root: str) -> list[WordCount]:
    """Scan ``root``, log per-file line counts and the top words, and return those words.

    Raises ``OSError`` if the directory cannot be scanned.
    """
    paths = scan(root)

    for path, count in count_all_lines(paths).items():
        _log.info("path: %s, count: %d", path, count)

    top = top_words(count_words_in_all_files(paths))
    _log.info("info-top-10-words-by-count:")
    for entry in top:
        _log.info("%s: %d", entry.word, entry.count)
    _log.info("Processed %d files", len(paths))
    return top


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scanner on the directory named by the first argument."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _log.error("Usage: txtscan <directory>")
        return 1
    try:
        execute(args[0])
    except OSError as exc:
        _log.error("err-failed-to-scan-directory: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())