import pytest

from warpshell.history import History, HistoryError


@pytest.fixture
def history(tmp_path):
    return History(tmp_path / "events_data.txt", 15)


def test_missing_file_is_created_empty(history):
    assert history.entries() == []
    assert history.path.read_text() == " "


def test_add_strips_trailing_newline(history):
    history.add("ls -l\n")
    assert history.entries() == ["ls -l"]
    assert history.path.read_text() == "ls -l\n"


def test_consecutive_duplicates_are_skipped(history):
    history.add("echo hi\n")
    history.add("echo hi\n")
    history.add("pwd\n")
    history.add("echo hi\n")
    assert history.entries() == ["echo hi", "pwd", "echo hi"]


def test_limit_keeps_newest(history):
    commands = [f"cmd{n}" for n in range(20)]
    for command in commands:
        history.add(command)
    assert history.entries() == commands[-15:]


def test_purge_empties_history(history):
    history.add("ls")
    history.purge()
    assert history.entries() == []
    assert history.path.read_text() == " "


def test_render_lists_entries_in_order(history):
    history.add("ls")
    history.add("pwd")
    assert history.render() == "ls\npwd\n"


def test_get_counts_back_from_newest(history):
    for command in ("a", "b", "c"):
        history.add(command)
    assert [history.get(i) for i in (1, 2, 3)] == ["c", "b", "a"]


@pytest.mark.parametrize("index", [0, 4, -1])
def test_get_out_of_range_raises(history, index):
    for command in ("a", "b", "c"):
        history.add(command)
    with pytest.raises(HistoryError):
        history.get(index)


def test_get_on_empty_history_raises(history):
    with pytest.raises(HistoryError):
        history.get(1)


def test_history_persists_across_instances(history):
    history.add("warp ..")
    reopened = History(history.path, 15)
    assert reopened.entries() == ["warp .."]