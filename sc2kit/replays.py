"""Finding replay files."""

from __future__ import annotations

import os

REPLAY_EXTENSION = ".sc2replay"


def is_replay_file(ext: str) -> bool:
    """True if ``ext`` is the replay file extension, ignoring case."""
    return ext.lower() == REPLAY_EXTENSION


def replays_in_dir(path: str | os.PathLike[str]) -> list[str]:
    """List replay files in a directory, or return a single replay path.

    Paths are absolute and sorted by file name. Raises OSError if the
    directory cannot be read.
    """
    path = os.path.abspath(path)
    if is_replay_file(os.path.splitext(path)[1]):
        return [path]
    with os.scandir(path) as entries:
        names = sorted(
            e.name
            for e in entries
            if not e.is_dir() and is_replay_file(os.path.splitext(e.name)[1])
        )
    return [os.path.join(path, name) for name in names]