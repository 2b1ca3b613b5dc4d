"""Discovery of ``.txt`` files below a directory."""

from __future__ import annotations

import os
import stat
from typing import Iterator

_SUFFIX = ".txt"


def _is_text_file(name: str) -> bool:
    return name.lower().endswith(_SUFFIX)


def _walk(directory: str) -> Iterator[str]:
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)
        elif _is_text_file(entry.name):
            yield entry.path


def scan(root: str | os.PathLike[str]) -> list[str]:
    """Return the paths of all ``.txt`` files (any letter case) under ``root``.

    Directories are visited depth first in lexical order, and symbolic links
    are not followed. A missing or unreadable directory raises ``OSError``.
    """
    root_path = os.fspath(root)
    if not stat.S_ISDIR(os.lstat(root_path).st_mode):
        return [root_path] if _is_text_file(os.path.basename(root_path)) else []
    return list(_walk(root_path))