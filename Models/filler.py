from .strategies import RandomizedFillStrategy
from .sudoku_logic import Grid


def generate(rng):
    """
    Build a completely filled, valid grid.

    Cells are filled row by row and each cell's candidates are shuffled with
    ``rng``, so the same seeded generator always yields the same grid.
    """
    search = RandomizedFillStrategy(rng).get_generator(Grid())
    try:
        for step in search:
            if step[0] == 'solution':
                return Grid.from_values(step[1])
    finally:
        search.close()
    # An empty board always has a completion
    raise RuntimeError("Backtracking exhausted without filling the grid")
