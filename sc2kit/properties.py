"""Reading of simple ``key = value`` property files such as ExecuteInfo.txt."""

from __future__ import annotations

import os
from collections.abc import Iterable


def parse_properties(lines: Iterable[str]) -> dict[str, str]:
    """Parse ``key = value`` lines into a dict.

    Keys are stripped and values lose their leading whitespace only. Lines whose
    key starts with ``#`` are comments. A line without ``=`` maps to an empty value.
    """
    props: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.rstrip("\r\n").partition("=")
        key = key.strip()
        if key.startswith("#"):
            continue
        props[key] = value.lstrip() if sep else ""
    return props


def read_properties(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read a property file; raises OSError when it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_properties(handle)