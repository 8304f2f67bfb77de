from .strategies import BacktrackingStrategy
from .sudoku_logic import Grid, InvalidParameter


def count_solutions(grid, cap=2):
    """
    Count completions of ``grid``, stopping as soon as ``cap`` are found.

    Returns 0 for an unsolvable grid, 1 for a uniquely solvable one and
    ``cap`` when there are at least that many.
    """
    if cap < 1:
        raise InvalidParameter(f"Solution cap must be at least 1, got {cap}")
    found = 0
    search = BacktrackingStrategy().get_generator(grid)
    try:
        for step in search:
            if step[0] == 'solution':
                found = step[2]
                if found >= cap:
                    break
    finally:
        search.close()
    return found


def has_unique_solution(grid):
    return count_solutions(grid, 2) == 1


def solve(grid):
    """Return the first completion of ``grid`` as a new Grid, or None."""
    search = BacktrackingStrategy().get_generator(grid)
    try:
        for step in search:
            if step[0] == 'solution':
                return Grid.from_values(step[1])
    finally:
        search.close()
    return None
