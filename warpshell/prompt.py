"""Rendering of the interactive prompt."""

from __future__ import annotations

import os
import pwd

from warpshell.state import ShellState


def display_path(home: str, cwd: str) -> str:
    """Show ``cwd`` relative to ``home`` with a ``~`` when it lies beneath it."""
    if cwd.startswith(home):
        return "~" + cwd[len(home):]
    return cwd


def render_prompt(state: ShellState, last_duration: int, last_command: str | None) -> str:
    """Build the prompt text; a foreground run longer than 2 s is reported."""
    parts = []
    try:
        parts.append(f"<{pwd.getpwuid(os.getuid()).pw_name}@")
    except KeyError:
        pass
    parts.append(f"{os.uname().nodename}:")
    parts.append(display_path(state.home_dir, os.getcwd()))
    if last_duration > 2:
        parts.append(f" {last_command} : {last_duration}")
    parts.append(">")
    return "".join(parts)