import io
from unittest.mock import patch

import pytest

from learnkit.library import MusicEntry, MusicManager
from learnkit.mplayer import MusicShell, main


@pytest.fixture
def shell():
    return MusicShell(MusicManager(), io.StringIO())


def test_add_then_list(shell):
    assert shell.execute("lib add song singer track.mp3 mp3") is True
    shell.execute("lib list")
    assert shell.out.getvalue() == "1 : song singer track.mp3 mp3\n"


def test_add_assigns_ids_after_the_initial_one(shell):
    shell.execute("lib add a b c mp3")
    shell.execute("lib add d e f wav")
    assert [music.id for music in shell.library] == ["2", "3"]
    assert shell.library.get(1) == MusicEntry("3", "d", "e", "f", "wav")


def test_add_with_wrong_arguments(shell):
    shell.execute("lib add only two")
    assert shell.out.getvalue() == "USAGE: lib add <name> <artist> <source> <type>\n"
    assert len(shell.library) == 0


def test_remove_by_position(shell):
    shell.execute("lib add a b c mp3")
    shell.execute("lib add d e f wav")
    shell.execute("lib remove 1")
    assert [music.name for music in shell.library] == ["d"]


def test_remove_invalid_id(shell):
    shell.execute("lib add a b c mp3")
    shell.execute("lib remove x")
    assert shell.out.getvalue() == "Invalid ID\n"
    assert len(shell.library) == 1


def test_remove_out_of_range_leaves_library(shell):
    shell.execute("lib add a b c mp3")
    shell.execute("lib remove 9")
    assert len(shell.library) == 1


def test_unknown_lib_command(shell):
    shell.execute("lib shuffle")
    assert shell.out.getvalue() == "Unrecognized lib command: shuffle\n"


def test_play_missing_music(shell):
    shell.execute("play nothing")
    assert shell.out.getvalue() == "The music nothing does not exist.\n"


def test_play_usage(shell):
    shell.execute("play")
    assert shell.out.getvalue() == "USAGE: player <name>\n"


@patch("time.sleep")
def test_play_existing_music(sleep, shell, capsys):
    shell.execute("lib add song singer track.wav wav")
    shell.execute("play song")
    out = capsys.readouterr().out
    assert "Playing wav music file track.wav" in out
    assert "Finished playing wav music file track.wav" in out


@pytest.mark.parametrize("line", ["q", "e"])
def test_quit_commands(shell, line):
    assert shell.execute(line) is False


def test_unrecognized_command(shell):
    assert shell.execute("foo bar") is True
    assert shell.out.getvalue() == "Unrecognized command: foo\n"


def test_main_reads_commands(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("lib add a b c mp3\nlib list\nq\nlib list\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("1 : a b c mp3") == 1