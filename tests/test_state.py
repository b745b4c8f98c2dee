import os
from pathlib import Path

from warpshell.state import BackgroundJob, ShellState


def test_from_cwd_uses_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = ShellState.from_cwd()
    assert state.home_dir == os.getcwd()
    assert state.history_path == Path(os.getcwd()) / "events_data.txt"


def test_from_cwd_starts_without_previous_dir_or_jobs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = ShellState.from_cwd()
    assert state.previous_dir == ""
    assert state.jobs == {}


def test_jobs_are_independent_between_states(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = ShellState.from_cwd()
    second = ShellState.from_cwd()
    first.jobs[42] = BackgroundJob(pid=42, name="sleep")
    assert second.jobs == {}
    assert first.jobs[42].name == "sleep"


def test_background_job_equality_ignores_process():
    assert BackgroundJob(7, "ls", process=None) == BackgroundJob(7, "ls")