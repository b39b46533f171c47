"""A score leaderboard that keeps player scores in a red-black tree."""

from __future__ import annotations

from dataclasses import dataclass

from rankboard.rbt import RedBlackTree


@dataclass(frozen=True)
class Player:
    """One player's name and score."""

    name: str
    score: int


@dataclass(frozen=True)
class RankInfo:
    """Where a player stands on the board."""

    score: int
    rank: int
    same_score_count: int
    total_players: int


class Leaderboard:
    """Players with scores, ranked from the highest score down.

    Every score is also kept in a red-black tree, so the tree's invariants
    can be checked after each change.
    """

    def __init__(self) -> None:
        self._scores: dict[str, int] = {}
        self._tree = RedBlackTree()

    def __len__(self) -> int:
        return len(self._scores)

    def add_or_update(self, name: str, score: int) -> None:
        """Add a new player, or change the score of an existing one."""
        old = self._scores.get(name)
        if old is None:
            self._scores[name] = score
            self._tree.insert_data(score)
        elif old != score:
            self._scores[name] = score
            self._tree.remove(old)
            self._tree.insert_data(score)

    def get_score(self, name: str) -> int:
        """Return the player's score; raise KeyError if there is no such player."""
        return self._scores[name]

    def sorted_desc(self) -> list[Player]:
        """Return all players, highest score first; ties keep the order they joined."""
        players = [Player(name, score) for name, score in self._scores.items()]
        return sorted(players, key=lambda player: -player.score)

    def format_all(self) -> str:
        """Render the whole board, highest score first."""
        lines = ["=== Leaderboard (highest first) ===\n"]
        lines.extend(
            f"{position}. {player.name} : {player.score}\n"
            for position, player in enumerate(self.sorted_desc(), start=1)
        )
        return "".join(lines)

    def validate_tree(self) -> bool:
        """Check the red-black invariants of the score tree."""
        return self._tree.validate()

    def compute_rank(self, name: str) -> RankInfo:
        """Return the player's rank; raise KeyError if there is no such player."""
        score = self._scores[name]
        greater = sum(1 for other in self._scores.values() if other > score)
        ties = sum(1 for other in self._scores.values() if other == score)
        return RankInfo(
            score=score,
            rank=greater + 1,
            same_score_count=ties,
            total_players=len(self._scores),
        )

    def neighbors_around(self, name: str, half_window: int) -> list[Player]:
        """Return the rows around ``name``: up to ``half_window`` above and below.

        The list is empty when the player is not on the board.
        """
        rows = self.sorted_desc()
        position = next(
            (index for index, player in enumerate(rows) if player.name == name), None
        )
        if position is None:
            return []
        start = max(0, position - half_window)
        end = min(len(rows) - 1, position + half_window)
        if end < start:
            return []
        return rows[start : end + 1]