"""Locating the game installation and its executables."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Mapping

from .properties import read_properties

log = logging.getLogger(__name__)

_REG_KEY = "HKCU\\Software\\Microsoft\\Windows\\CurrentVersion\\Explorer\\Shell Folders"
_REG_PREFIX = len("    Personal    REG_SZ    ")


def _system_name() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "darwin"
    return "linux"


def sc2_path(path: str) -> str:
    """Return the game root above the ``Versions`` folder in ``path``, or ``""``."""
    while True:
        prev, path = path, os.path.dirname(path)
        if os.path.basename(path) == "Versions":
            return os.path.dirname(path)
        if path == prev:
            return ""


def subdirs(directory: str) -> list[str]:
    """Sorted names of the subdirectories of ``directory``; empty if unreadable."""
    try:
        with os.scandir(directory) as entries:
            return sorted(e.name for e in entries if e.is_dir())
    except OSError:
        return []


def bin_path(system: str | None = None) -> str:
    """Path of the game binary relative to a version folder."""
    system = system or _system_name()
    if system == "windows":
        return "SC2_x64.exe"
    if system == "darwin":
        return "SC2.app/Contents/MacOS/SC2"
    return "SC2_x64"


def user_directory(system: str | None = None) -> str:
    """Directory holding the game's per-user data; raises OSError on failure."""
    system = system or _system_name()
    if system == "windows":
        try:
            result = subprocess.run(
                ["reg", "query", _REG_KEY, "/v", "Personal"],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            log.warning("Documents directory lookup failed: %s", (exc.output or "").strip())
            raise OSError("documents directory lookup failed") from exc
        lines = result.stdout.strip().splitlines()
        if len(lines) < 2:
            raise OSError("unexpected registry output")
        return lines[1][_REG_PREFIX:]
    home = os.path.expanduser("~")
    if system == "darwin":
        return os.path.join(home, "Library", "Application Support", "Blizzard")
    return home


def default_executable(
    env: Mapping[str, str] | None = None,
    user_dir: str | None = None,
    system: str | None = None,
) -> str:
    """Find the newest installed game executable.

    ``SC2PATH`` in ``env`` gives a starting point, which the ``executable`` entry
    of ExecuteInfo.txt in ``user_dir`` overrides. The highest version folder
    holding the binary then wins.
    """
    env = os.environ if env is None else env
    path = ""

    sc2_env = env.get("SC2PATH", "")
    if sc2_env:
        log.info("SC2PATH: %s", sc2_env)
        path = os.path.join(sc2_env, "Versions", "dummy")

    if user_dir is None:
        try:
            user_dir = user_directory(system)
        except OSError as exc:
            log.warning("Error getting user directory: %s", exc)
            user_dir = ""

    info_file = ""
    if user_dir:
        info_file = os.path.join(user_dir, "Starcraft II", "ExecuteInfo.txt")
        log.info("ExecuteInfo path: %s", info_file)

    try:
        props = read_properties(info_file)
    except OSError as exc:
        log.info("Error reading `executable`: %s", exc)
    else:
        path = props.get("executable", path)
        log.info("  executable = %s", path)

    root = sc2_path(path)
    if root:
        versions = os.path.join(root, "Versions")
        binary = bin_path(system)
        for sub in reversed(subdirs(versions)):
            candidate = os.path.join(versions, sub, binary)
            if os.path.exists(candidate):
                return candidate
    return path


def path_for_build(path: str, build: int) -> str:
    """Return the executable for base build ``build``; ``path`` itself when build is 0."""
    if not build:
        return path
    exe = os.path.basename(path)
    root = sc2_path(path)
    if not root:
        log.warning("Can't find game dir: %s", path)
    result = os.path.join(root, "Versions", f"Base{build}", exe)
    if not os.path.exists(result):
        log.warning("Base version not found: %s", result)
    return result