import os

import pytest

from warpshell.state import ShellState
from warpshell.warp import WarpError, warp


@pytest.fixture
def state(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    return ShellState.from_cwd()


def test_warp_into_subdirectory(state):
    home = os.getcwd()
    result = warp(state, "sub")
    assert result == os.getcwd()
    assert result == os.path.join(home, "sub")
    assert state.previous_dir == home


def test_warp_tilde_returns_home(state):
    warp(state, "sub")
    result = warp(state, "~")
    assert result == state.home_dir
    assert os.getcwd() == state.home_dir


def test_warp_dash_goes_back(state):
    home = os.getcwd()
    sub = warp(state, "sub")
    assert warp(state, "-") == home
    assert warp(state, "-") == sub


def test_warp_missing_directory_raises_and_keeps_state(state):
    before = os.getcwd()
    with pytest.raises(WarpError):
        warp(state, "does-not-exist")
    assert os.getcwd() == before
    assert state.previous_dir == ""


def test_warp_dash_without_previous_raises(state):
    with pytest.raises(WarpError):
        warp(state, "-")