from contextlib import contextmanager
from dataclasses import dataclass

from Utils.log import get_logger

from .solver import has_unique_solution
from .sudoku_logic import CELLS, MAX_CLUES, MIN_CLUES, Grid, InvalidParameter

logger = get_logger(__name__)


@dataclass
class Puzzle:
    """A carved grid together with the solution it was carved from."""

    grid: Grid
    solution: Grid
    target: int
    clue_count: int

    @property
    def shortfall(self):
        """How many clues above the requested target carving had to stop at."""
        return self.clue_count - self.target


class _Removal:
    def __init__(self, index, previous):
        self.index = index
        self.previous = previous
        self.committed = False

    def commit(self):
        self.committed = True


@contextmanager
def tentative_removal(grid, index):
    """
    Empty ``index`` for the duration of the block.

    The value is put back on exit unless ``commit()`` was called, including
    when the block raises.
    """
    removal = _Removal(index, grid.clear(index))
    try:
        yield removal
    finally:
        if not removal.committed and removal.previous:
            grid.place(index, removal.previous)


def carve(complete_grid, target, rng):
    """
    Remove clues from ``complete_grid`` in a random order, keeping only
    removals after which the puzzle still has exactly one solution.

    Stops when ``target`` clues remain or every cell has been tried. The
    second case returns a puzzle with more clues than asked for.
    """
    if isinstance(target, bool) or not isinstance(target, int):
        raise InvalidParameter(f"Clue count must be an integer, got {target!r}")
    if not MIN_CLUES <= target <= MAX_CLUES:
        raise InvalidParameter(f"Clue count {target} is outside [{MIN_CLUES}, {MAX_CLUES}]")
    if not complete_grid.is_complete():
        raise InvalidParameter("Carving needs a completely filled grid")

    solution = complete_grid.copy()
    puzzle = complete_grid.copy()
    clues = puzzle.clue_count

    order = list(range(CELLS))
    rng.shuffle(order)

    tried = 0
    for index in order:
        if clues <= target:
            break
        if not puzzle.values[index]:
            continue
        tried += 1
        with tentative_removal(puzzle, index) as removal:
            if has_unique_solution(puzzle):
                removal.commit()
                clues -= 1

    logger.debug(f"Carved to {clues} clues (target {target}) after {tried} removal checks")
    return Puzzle(grid=puzzle, solution=solution, target=target, clue_count=clues)
