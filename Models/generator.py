import random

from .carver import carve
from .difficulty import resolve_target
from .filler import generate


def generate_complete_grid(seed=None):
    """81 row-major digits of a solved grid. The same seed gives the same grid."""
    return generate(random.Random(seed)).to_list()


def build_puzzle(seed=None, difficulty="medium", config=None):
    # The difficulty is checked before any generation work happens
    rng = random.Random(seed)
    target = resolve_target(difficulty, rng=rng, config=config)
    return carve(generate(rng), target, rng)


def generate_puzzle(seed=None, difficulty="medium", config=None):
    """Return ``(puzzle, solution)`` as 81 row-major values each, 0 marking a blank."""
    puzzle = build_puzzle(seed, difficulty, config)
    return puzzle.grid.to_list(), puzzle.solution.to_list()
