"""Information about a running process taken from ``/proc``."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProcessInfo:
    """What ``proclore`` reports about one process."""

    pid: int
    state: str
    foreground: bool
    process_group: int
    virtual_memory: str | None = None
    executable: str | None = None


def parse_status(text: str) -> dict[str, str]:
    """Parse the ``Key:\\tvalue`` lines of a ``/proc/<pid>/status`` file."""
    fields = {}
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if sep:
            fields[key.strip()] = value.strip()
    return fields


def read_process_info(pid: int) -> ProcessInfo:
    """Gather information on ``pid``; 0 means the shell itself.

    Raises ``OSError`` when the process does not exist.
    """
    if pid == 0:
        pid = os.getpid()
    fields = parse_status(Path(f"/proc/{pid}/status").read_text())
    state = (fields.get("State") or "Z")[0]
    process_group = os.getpgid(pid)
    foreground = state.upper() != "Z" and process_group == os.getpgrp()
    try:
        executable: str | None = os.readlink(f"/proc/{pid}/exe")
    except OSError:
        executable = None
    return ProcessInfo(
        pid=pid,
        state=state,
        foreground=foreground,
        process_group=process_group,
        virtual_memory=fields.get("VmSize"),
        executable=executable,
    )


def format_process_info(info: ProcessInfo) -> str:
    """Render ``info`` as printed by ``proclore``."""
    lines = [
        f"pid : {info.pid}",
        f"process Status : {info.state}{'+' if info.foreground else ''}",
        f"Process group :{info.process_group}",
    ]
    if info.virtual_memory is not None:
        lines.append(f"Virtual memory : {info.virtual_memory}")
    if info.executable is not None:
        lines.append(f"executable path: {info.executable}")
    return "".join(f"{line}\n" for line in lines)


def parse_pid(args: list[str]) -> int:
    """Return the pid named by the arguments, 0 when none is given."""
    if not args:
        return 0
    if not args[0].isdigit():
        raise ValueError(f"invalid process id: {args[0]!r}")
    return int(args[0])