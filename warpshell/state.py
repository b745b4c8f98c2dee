"""Shared state carried by a shell session."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

HISTORY_FILENAME = "events_data.txt"


@dataclass
class BackgroundJob:
    """A command started in the background and not yet reaped."""

    pid: int
    name: str
    process: subprocess.Popen | None = field(default=None, repr=False, compare=False)


@dataclass
class ShellState:
    """Home directory, previous directory, history file and background jobs."""

    home_dir: str
    history_path: Path
    previous_dir: str = ""
    jobs: dict[int, BackgroundJob] = field(default_factory=dict)

    @classmethod
    def from_cwd(cls) -> ShellState:
        """Create a state whose home is the current working directory."""
        home = os.getcwd()
        return cls(home_dir=home, history_path=Path(home) / HISTORY_FILENAME)