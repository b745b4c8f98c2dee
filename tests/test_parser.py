import pytest

from warpshell.parser import (
    Command,
    parse_history_index,
    should_record,
    split_commands,
    tokenize,
)


def test_tokenize_splits_on_spaces_tabs_and_newlines():
    assert tokenize("ls  -l\t-a\n") == ["ls", "-l", "-a"]


def test_tokenize_blank_gives_nothing():
    assert tokenize(" \t\n") == []


def test_single_command_is_foreground():
    commands = split_commands("ls -l\n")
    assert commands == [Command("ls -l\n", False)]
    assert commands[0].args == ["ls", "-l"]
    assert commands[0].name == "ls"


def test_ampersand_marks_background():
    commands = split_commands("sleep 5 & echo hi\n")
    assert [command.background for command in commands] == [True, False]
    assert [command.name for command in commands] == ["sleep", "echo"]


def test_semicolon_keeps_foreground():
    commands = split_commands("warp a; peek -l")
    assert [command.background for command in commands] == [False, False]
    assert [command.args for command in commands] == [["warp", "a"], ["peek", "-l"]]


def test_trailing_ampersand_backgrounds_last_command():
    commands = split_commands("gedit &\n")
    assert len(commands) == 1
    assert commands[0].background is True
    assert commands[0].name == "gedit"


def test_blank_segments_are_dropped():
    commands = split_commands("ls ;  ; pwd")
    assert [command.name for command in commands] == ["ls", "pwd"]


def test_separators_pair_with_non_empty_segments():
    # "a&&b" holds two segments and two separators: both pair with "&".
    commands = split_commands("a&&b")
    assert [command.name for command in commands] == ["a", "b"]
    assert all(command.background for command in commands)


def test_empty_line_has_no_commands():
    assert split_commands("\n") == []


def test_command_count_never_exceeds_segments():
    line = "a & b ; c & d"
    commands = split_commands(line)
    assert len(commands) == line.count(";") + line.count("&") + 1


def test_should_record_ordinary_line():
    assert should_record("ls -l\n") is True


def test_should_not_record_blank_line():
    assert should_record("   \n") is False


def test_should_not_record_pastevents_anywhere():
    assert should_record("pastevents\n") is False
    assert should_record("ls ; pastevents purge") is False


def test_pastevents_as_part_of_word_is_recorded():
    assert should_record("echo pastevents2") is True


def test_parse_history_index_plain_number():
    assert parse_history_index("3") == 3


def test_parse_history_index_ignores_non_digits():
    assert parse_history_index("1x2") == 12


def test_parse_history_index_without_digits_raises():
    with pytest.raises(ValueError):
        parse_history_index("abc")


def test_parse_history_index_missing_token_raises():
    with pytest.raises(ValueError):
        parse_history_index(None)


def test_blank_command_name_is_empty():
    assert Command("   ").name == ""