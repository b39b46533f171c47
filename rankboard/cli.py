"""Interactive leaderboard: enter names and scores, see ranks."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

from rankboard.leaderboard import Leaderboard, Player

_COMMANDS = frozenset({"help", "print", "validate", "exit", "quit"})
_INT_PREFIX = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def help_text() -> str:
    """Return the help message."""
    return (
        "Commands:\n"
        "  help      - show this help\n"
        "  print     - show full leaderboard\n"
        "  validate  - check red-black tree invariants\n"
        "  exit      - quit\n\n"
        "You can enter either:\n"
        "  <name> <score>   (one line)\n"
        "or:\n"
        "  <name>           (then I'll prompt for score)\n"
    )


def format_neighbors(rows: Iterable[Player], who: str) -> str:
    """Render rows, marking the one that belongs to ``who``."""
    return "".join(
        f"{' -> ' if row.name == who else '    '}{row.name} : {row.score}\n"
        for row in rows
    )


def _read_int(text: str) -> Optional[int]:
    """Read an integer from the start of ``text`` after any whitespace."""
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        return None
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def parse_name_score(line: str) -> Optional[tuple[str, int]]:
    """Parse ``"<name> <score>"``; return None for commands or a lone name."""
    parts = line.split(maxsplit=1)
    if not parts or parts[0] in _COMMANDS or len(parts) < 2:
        return None
    score = _read_int(parts[1])
    if score is None:
        return None
    return parts[0], score


def run(
    input_stream: TextIO,
    output_stream: TextIO,
    leaderboard: Optional[Leaderboard] = None,
) -> Leaderboard:
    """Run the prompt loop until EOF or ``exit``; return the leaderboard used."""
    board = leaderboard if leaderboard is not None else Leaderboard()
    out = output_stream.write
    out("RBT Leaderboard. Type 'help' for help.\n")

    while True:
        out("\nname or command> ")
        line = input_stream.readline()
        if not line:
            break
        if line.endswith("\n"):
            line = line[:-1]
        if not line:
            continue
        line = line.strip(" \t")

        if line == "help":
            out(help_text())
            continue
        if line == "print":
            out(board.format_all())
            continue
        if line == "validate":
            out("VALID\n" if board.validate_tree() else "INVALID\n")
            continue
        if line in ("exit", "quit"):
            break

        parsed = parse_name_score(line)
        if parsed is not None:
            name, score = parsed
        else:
            name = line
            out("score> ")
            output_stream.flush()
            score_line = input_stream.readline()
            if not score_line:
                break
            read = _read_int(score_line)
            if read is None:
                out("Please enter an integer score.\n")
                continue
            score = read

        board.add_or_update(name, score)

        try:
            info = board.compute_rank(name)
        except KeyError:
            out("Unexpected: player not found after update.\n")
            continue

        out("\n=== Result ===\n")
        out(f"Name : {name}\n")
        out(f"Score: {info.score}\n")
        out(f"Rank : {info.rank} of {info.total_players}\n")
        out(f"Same score count: {info.same_score_count}\n")

        around = board.neighbors_around(name, 2)
        if around:
            out("\nAround this rank:\n")
            out(format_neighbors(around, name))

        verdict = "VALID" if board.validate_tree() else "INVALID"
        out(f"\nTree check: {verdict}\n")

    return board


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive leaderboard on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Interactive leaderboard backed by a red-black tree."
    )
    parser.parse_args(argv if argv is not None else [])
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))