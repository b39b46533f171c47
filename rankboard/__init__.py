"""Score leaderboard backed by binary search and red-black trees, with an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["bst", "rbcore", "rbt", "leaderboard", "cli"]