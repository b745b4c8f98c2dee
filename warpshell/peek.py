"""Directory listing with optional long format and hidden entries."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import time
from dataclasses import dataclass
from enum import Enum

from warpshell.state import ShellState

BLUE = "\x1b[34m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

_FLAGS = {
    "-l": (True, False),
    "-a": (False, True),
    "-la": (True, True),
    "-al": (True, True),
}

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


class EntryKind(Enum):
    """How an entry is coloured in a listing."""

    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    FILE = "file"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if mode & stat.S_IXUSR:
            return cls.EXECUTABLE
        return cls.FILE


@dataclass(frozen=True)
class PeekEntry:
    """One directory entry together with its status."""

    name: str
    kind: EntryKind
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    blocks: int

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> PeekEntry:
        return cls(
            name=name,
            kind=EntryKind.from_mode(st.st_mode),
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            mtime=st.st_mtime,
            blocks=getattr(st, "st_blocks", 0),
        )

    @property
    def owner(self) -> str:
        try:
            return pwd.getpwuid(self.uid).pw_name
        except KeyError:
            return str(self.uid)

    @property
    def group(self) -> str:
        try:
            return grp.getgrgid(self.gid).gr_name
        except KeyError:
            return str(self.gid)


def parse_peek_args(args: list[str]) -> tuple[bool, bool, str]:
    """Return ``(long, show_all, address)`` from the words after ``peek``.

    Flags are read until the first word that is not a flag; that word is the
    address and anything after it is ignored.
    """
    long = show_all = False
    for arg in args:
        flags = _FLAGS.get(arg)
        if flags is None:
            return long, show_all, arg
        long |= flags[0]
        show_all |= flags[1]
    return long, show_all, ""


def format_mode(mode: int) -> str:
    """Render a mode as ``drwxr-xr-x``."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def _resolve(state: ShellState, address: str) -> str:
    if address == "~":
        return state.home_dir
    if address in ("", "."):
        return "."
    if address == "-":
        return state.previous_dir
    return address


def list_entries(state: ShellState, address: str, show_all: bool) -> list[PeekEntry]:
    """Return the entries of ``address`` sorted by name.

    Hidden entries, ``.`` and ``..`` included, appear only with ``show_all``.
    Raises ``OSError`` when the directory cannot be read.
    """
    directory = _resolve(state, address)
    names = os.listdir(directory)
    if show_all:
        names += [".", ".."]
    else:
        names = [name for name in names if not name.startswith(".")]
    entries = []
    for name in sorted(names):
        try:
            st = os.stat(os.path.join(directory, name))
        except OSError:
            continue
        entries.append(PeekEntry.from_stat(name, st))
    return entries


def format_entry(entry: PeekEntry, long: bool) -> str:
    """Render one listing line without its trailing newline."""
    if entry.kind is EntryKind.DIRECTORY:
        name = f"{BLUE} {entry.name}{RESET}"
    elif entry.kind is EntryKind.EXECUTABLE:
        name = f"{GREEN} {entry.name}{RESET}"
    else:
        name = f" {entry.name}"
    if not long:
        return name
    stamp = time.ctime(entry.mtime)[4:16]
    return (
        f"{format_mode(entry.mode)}\t{entry.nlink}\t{entry.owner}\t{entry.group}"
        f"\t{entry.size}\t\t{stamp}\t\t{name}"
    )


def peek(state: ShellState, address: str, long: bool, show_all: bool) -> str:
    """Return the listing of ``address`` as it is printed."""
    entries = list_entries(state, address, show_all)
    lines = []
    if long:
        lines.append(f"total {sum(entry.blocks for entry in entries)}")
    lines.extend(format_entry(entry, long) for entry in entries)
    return "".join(f"{line}\n" for line in lines)