import io

import pytest

from rankboard.cli import format_neighbors, help_text, main, parse_name_score, run
from rankboard.leaderboard import Leaderboard, Player


def _run(text, board=None):
    out = io.StringIO()
    lb = run(io.StringIO(text), out, board)
    return lb, out.getvalue()


def test_parse_name_score_pair():
    assert parse_name_score("alice 42") == ("alice", 42)


def test_parse_name_score_negative():
    assert parse_name_score("bob -7") == ("bob", -7)


def test_parse_name_score_integer_prefix():
    assert parse_name_score("bob 12abc") == ("bob", 12)


@pytest.mark.parametrize(
    "line", ["", "   ", "alice", "bob abc", "help 5", "exit 3", "quit 1", "x 99999999999"]
)
def test_parse_name_score_rejects(line):
    assert parse_name_score(line) is None


def test_help_text_lists_commands():
    text = help_text()
    assert text.startswith("Commands:\n")
    for word in ("help", "print", "validate", "exit"):
        assert f"  {word} " in text


def test_format_neighbors_marks_self():
    rows = [Player("a", 1), Player("b", 2)]
    assert format_neighbors(rows, "b") == "    a : 1\n -> b : 2\n"


def test_format_neighbors_empty():
    assert format_neighbors([], "a") == ""


def test_run_banner_and_eof():
    lb, out = _run("")
    assert out.startswith("RBT Leaderboard. Type 'help' for help.\n")
    assert len(lb) == 0


def test_run_one_line_entry():
    lb, out = _run("alice 42\n")
    assert lb.get_score("alice") == 42
    info = lb.compute_rank("alice")
    assert "\n=== Result ===\n" in out
    assert "Name : alice\n" in out
    assert "Score: 42\n" in out
    assert f"Rank : {info.rank} of {info.total_players}\n" in out
    assert f"Same score count: {info.same_score_count}\n" in out
    assert " -> alice : 42\n" in out
    assert "\nTree check: VALID\n" in out


def test_run_prompts_for_score():
    lb, out = _run("alice\n42\n")
    assert "score> " in out
    assert lb.get_score("alice") == 42


def test_run_bad_score():
    lb, out = _run("alice\nlots\n")
    assert "Please enter an integer score.\n" in out
    assert len(lb) == 0


def test_run_eof_while_waiting_for_score():
    lb, out = _run("alice\n")
    assert out.endswith("score> ")
    assert len(lb) == 0


def test_run_trims_spaces():
    lb, _ = _run("  \talice 5 \t\n")
    assert lb.get_score("alice") == 5


def test_run_exit_stops():
    lb, _ = _run("exit\nalice 5\n")
    assert len(lb) == 0


def test_run_quit_stops():
    lb, _ = _run("quit\nalice 5\n")
    assert len(lb) == 0


def test_run_commands():
    board = Leaderboard()
    board.add_or_update("carl", 150)
    _, out = _run("help\nprint\nvalidate\n", board)
    assert help_text() in out
    assert board.format_all() in out
    assert "VALID\n" in out


def test_run_update_existing_player():
    lb, out = _run("bob 80\nbob 140\n")
    assert lb.get_score("bob") == 140
    assert len(lb) == 1
    assert "Score: 140\n" in out


def test_run_empty_lines_ignored():
    lb, _ = _run("\n\nalice 3\n")
    assert lb.get_score("alice") == 3


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("dina 80\nexit\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Name : dina\n" in captured
    assert "Tree check: VALID" in captured