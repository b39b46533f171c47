# rankboard

A small score leaderboard. Each player has one integer score; the board
reports a player's rank, how many players share that score, and the players
ranked just above and below. Every score is also kept in a red-black tree,
so the tree's invariants can be checked after each change.

The package also contains the trees themselves:

- `rankboard.bst.BST` is a plain binary search tree of integers. Duplicates
  go to the right, and removing a node with two children uses the in-order
  successor.
- `rankboard.rbt.RedBlackTree` is a self-balancing red-black tree of integers
  that allows duplicates. It supports insertion (`insert`, `insert_data`),
  removal (`remove`, `remove_node`), lookup (`get_node`, `in`), `len()` and
  in-order iteration, and `validate()` checks the colouring rules. Its
  insertion, rotations and validation live in `rankboard.rbcore`
  (`RedBlackTreeBase`, `RBNode`, `Color`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the leaderboard

```python
from rankboard.leaderboard import Leaderboard

board = Leaderboard()
board.add_or_update("alice", 120)
board.add_or_update("bob", 80)
board.add_or_update("carl", 150)
board.add_or_update("bob", 140)      # updates bob's score

info = board.compute_rank("bob")
print(info.rank, info.total_players, info.same_score_count)   # 2 3 1

for player in board.neighbors_around("bob", 1):
    print(player.name, player.score)

print(board.format_all())
assert board.validate_tree()
```

The rank is 1-based. Players with equal scores share a rank, which is one
more than the number of players with a strictly higher score.
`sorted_desc()` lists players highest score first, keeping the order in
which they joined among equal scores. `get_score()` and `compute_rank()`
raise `KeyError` for an unknown name; `neighbors_around()` returns an empty
list for one.

## Using the trees

```python
from rankboard.rbt import RedBlackTree

tree = RedBlackTree()
for value in (5, 3, 8, 3, 1):
    tree.insert_data(value)

tree.remove(3)
print(list(tree))        # [1, 3, 5, 8]
print(8 in tree, len(tree), tree.validate())   # True 4 True
```

`remove` takes out one node holding the value and does nothing if there is
none.

## Command line

```
rankboard
```

The command starts an interactive prompt on standard input. Enter
`<name> <score>` on one line, or just `<name>`, in which case the program
asks for the score on the next line. After each entry it shows the player's
score, rank, tie count, up to two players above and below, and whether the
tree is still valid.

Commands:

- `help` shows the help text
- `print` lists the full leaderboard, highest score first
- `validate` checks the red-black tree invariants
- `exit` or `quit` leaves the program (end of input does the same)

The prompt loop is also available as `rankboard.cli.run(input_stream,
output_stream, leaderboard=None)`, which works on any text streams and
returns the leaderboard it used.

## What it does not do

The leaderboard lives in memory only: nothing is saved to disk, and every
run of `rankboard` starts with an empty board. Players cannot be removed,
only added or given a new score.