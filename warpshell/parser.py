"""Splitting an input line into the commands it holds."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEPARATORS = ";&"
_WORD_SPLIT = re.compile(r"[ \t\n]+")
_SEGMENT_SPLIT = re.compile(r"[;&]")
HISTORY_COMMAND = "pastevents"


def tokenize(text: str) -> list[str]:
    """Split ``text`` into words on spaces, tabs and newlines."""
    return [word for word in _WORD_SPLIT.split(text) if word]


@dataclass(frozen=True)
class Command:
    """One command of a line and whether it runs in the background."""

    text: str
    background: bool = False

    @property
    def args(self) -> list[str]:
        """The command's words."""
        return tokenize(self.text)

    @property
    def name(self) -> str:
        """The first word, or an empty string for a blank command."""
        words = self.args
        return words[0] if words else ""


def split_commands(line: str) -> list[Command]:
    """Split ``line`` on ``;`` and ``&`` into commands.

    Separators are paired with the non-empty segments in order: a segment is
    a background command when the separator at its position is ``&``. Empty
    segments are dropped before the pairing, and segments without any word
    are dropped after it.
    """
    separators = [char for char in line if char in _SEPARATORS]
    segments = [segment for segment in _SEGMENT_SPLIT.split(line) if segment]
    commands = []
    for position, segment in enumerate(segments):
        background = position < len(separators) and separators[position] == "&"
        if tokenize(segment):
            commands.append(Command(segment, background))
    return commands


def should_record(line: str) -> bool:
    """Tell whether ``line`` belongs in the history.

    Blank lines and lines that mention ``pastevents`` anywhere are left out.
    """
    words = tokenize(line)
    return bool(words) and HISTORY_COMMAND not in words


def parse_history_index(token: str | None) -> int:
    """Read the number in ``token``, ignoring every character but digits.

    Raises ``ValueError`` when there is no digit to read.
    """
    digits = "".join(char for char in token or "" if "0" <= char <= "9")
    if not digits:
        raise ValueError(f"invalid history index: {token!r}")
    return int(digits)