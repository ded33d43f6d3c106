"""Launching and stopping game processes."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .paths import _system_name, sc2_path

log = logging.getLogger(__name__)

LAUNCH_PORT_START = 8168


@dataclass
class LaunchSettings:
    """Options used when starting the game and joining matches or replays."""

    base_build: int = 0
    data_version: str = ""
    extra_args: tuple[str, ...] = ()
    realtime: bool = False
    connect_timeout: float = 120.0
    net_address: str = "127.0.0.1"
    raw: bool = True
    score: bool = True


@dataclass
class PortAllocator:
    """Hands out increasing port numbers, starting just above ``start``."""

    start: int = LAUNCH_PORT_START
    _current: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._current = self.start

    def next_port(self) -> int:
        self._current += 1
        return self._current


def launch_args(
    address: str,
    game_port: int,
    data_version: str = "",
    extra_args: Iterable[str] = (),
) -> list[str]:
    """Command-line arguments for a game instance listening on ``address:game_port``."""
    # Multiple fullscreen instances fail to start, so force windowed mode.
    args = ["-listen", address, "-port", str(game_port), "-displayMode", "0"]
    if data_version:
        args += ["-dataVersion", data_version]
    args.extend(extra_args)
    return args


def working_directory(path: str, system: str | None = None) -> str | None:
    """Directory to run the executable in; only set on Windows."""
    if (system or _system_name()) != "windows":
        return None
    support = "Support64" if "_x64" in os.path.basename(path) else "Support"
    return os.path.join(sc2_path(path), support)


def start_process(
    path: str, args: Sequence[str], system: str | None = None
) -> subprocess.Popen:
    """Start ``path`` with ``args``; raises OSError if it cannot be started."""
    proc = subprocess.Popen([path, *args], cwd=working_directory(path, system))
    log.info("Launched SC2 (%s), PID: %s", path, proc.pid)
    return proc


def kill_processes(pids: Iterable[int]) -> None:
    """Kill every process in ``pids``, ignoring ones that are already gone."""
    sig = getattr(signal, "SIGKILL", signal.SIGTERM)
    for pid in pids:
        if not pid:
            continue
        try:
            os.kill(pid, sig)
        except OSError:
            pass