"""Recursive search for files and directories by name prefix."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass

from warpshell.state import ShellState
from warpshell.warp import warp

BLUE = "\x1b[34m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

NO_MATCHES = "No matches found !"
MISSING_PERMISSIONS = "Missing Permissions for task!"


class SeekError(Exception):
    """Raised for a malformed ``seek`` command."""


@dataclass(frozen=True)
class SeekMatch:
    """A found entry: its path relative to the search root and on disk."""

    display: str
    path: str
    is_dir: bool


def parse_seek_args(args: list[str]) -> tuple[bool, bool, bool, str, str | None]:
    """Return ``(execute, files_only, dirs_only, target, base)``."""
    execute = files_only = dirs_only = False
    rest = list(args)
    while rest and rest[0] in ("-e", "-f", "-d"):
        flag = rest.pop(0)
        if flag == "-e":
            execute = True
        elif flag == "-f":
            files_only = True
        else:
            dirs_only = True
    if not rest:
        raise SeekError("Error: Invalid Command as no target specified for seek")
    if files_only and dirs_only:
        raise SeekError("Invalid Flags")
    base = rest[1] if len(rest) > 1 else None
    return execute, files_only, dirs_only, rest[0], base


def find_matches(
    target: str, base: str, files_only: bool, dirs_only: bool
) -> Iterator[SeekMatch]:
    """Yield entries under ``base`` whose names start with ``target``.

    Hidden entries are neither matched nor descended into.
    """

    def walk(directory: str, relative: str) -> Iterator[SeekMatch]:
        try:
            names = sorted(os.listdir(directory))
        except OSError:
            return
        for name in names:
            if name.startswith("."):
                continue
            path = os.path.join(directory, name)
            is_dir = os.path.isdir(path)
            wanted = not files_only if is_dir else not dirs_only
            if name.startswith(target) and wanted:
                yield SeekMatch(f"{relative}/{name}", path, is_dir)
            if is_dir and not os.path.islink(path):
                yield from walk(path, f"{relative}/{name}")

    yield from walk(base, ".")


def count_matches(target: str, base: str, files_only: bool, dirs_only: bool) -> int:
    """Return how many entries ``find_matches`` yields."""
    return sum(1 for _ in find_matches(target, base, files_only, dirs_only))


def format_match(match: SeekMatch) -> str:
    """Colour a match blue for a directory and green for a file."""
    colour = BLUE if match.is_dir else GREEN
    return f"{colour}{match.display}{RESET}"


def seek(
    state: ShellState,
    target: str,
    base: str | None,
    execute: bool,
    files_only: bool,
    dirs_only: bool,
) -> str:
    """Search and return the output; with ``execute`` a lone directory is entered.

    The search runs under ``base`` (``~`` and ``-`` understood) or the current
    directory. Raises ``WarpError`` when ``base`` cannot be entered.
    """
    original = os.getcwd()
    if base is None:
        root = original
    else:
        warp(state, base)
        root = os.getcwd()
        os.chdir(original)

    matches = list(find_matches(target, root, files_only, dirs_only))
    lines = [] if matches else [NO_MATCHES]
    lines.extend(format_match(match) for match in matches)

    if execute and len(matches) == 1:
        match = matches[0]
        mode = os.stat(match.path).st_mode
        if match.is_dir:
            if mode & stat.S_IXUSR:
                os.chdir(match.path)
                state.previous_dir = original
            else:
                lines.append(MISSING_PERMISSIONS)
        elif not mode & stat.S_IRUSR:
            lines.append(MISSING_PERMISSIONS)

    return "".join(f"{line}\n" for line in lines)