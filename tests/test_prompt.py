import os
import pwd

import pytest

from warpshell.prompt import display_path, render_prompt
from warpshell.state import ShellState


def test_display_path_inside_home():
    assert display_path("/home/u", "/home/u/docs") == "~/docs"


def test_display_path_at_home():
    assert display_path("/home/u", "/home/u") == "~"


def test_display_path_outside_home():
    assert display_path("/home/u", "/tmp") == "/tmp"


def test_display_path_shorter_cwd_is_absolute():
    assert display_path("/home/u/deep", "/home") == "/home"


@pytest.fixture
def state(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return ShellState.from_cwd()


def test_render_prompt_at_home(state):
    user = pwd.getpwuid(os.getuid()).pw_name
    text = render_prompt(state, 0, None)
    assert text == f"<{user}@{os.uname().nodename}:~>"


def test_render_prompt_reports_long_command(state):
    text = render_prompt(state, 5, "sleep")
    assert text.endswith(":~ sleep : 5>")


def test_render_prompt_hides_short_command(state):
    text = render_prompt(state, 2, "sleep")
    assert "sleep" not in text
    assert text.endswith(":~>")


def test_render_prompt_in_subdirectory(state, tmp_path, monkeypatch):
    (tmp_path / "inner").mkdir()
    monkeypatch.chdir(tmp_path / "inner")
    assert render_prompt(state, 0, None).endswith(":~/inner>")