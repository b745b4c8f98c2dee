"""Changing directory with support for ``~`` and ``-``."""

from __future__ import annotations

import os

from warpshell.state import ShellState


class WarpError(Exception):
    """Raised when the target directory cannot be entered."""


def warp(state: ShellState, address: str) -> str:
    """Change to ``address`` and return the new working directory.

    ``~`` means the shell's home and ``-`` the previous directory. On success
    the directory left behind becomes the new previous directory.
    """
    current = os.getcwd()
    if address == "~":
        target = state.home_dir
    elif address == "-":
        target = state.previous_dir
    else:
        target = address
    try:
        os.chdir(target)
    except OSError as exc:
        raise WarpError(f"Error in warp: {exc.strerror or exc}") from exc
    state.previous_dir = current
    return os.getcwd()