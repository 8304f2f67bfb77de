import random
import time
from dataclasses import dataclass

from Models.generator import build_puzzle
from Models.sudoku_logic import SudokuLogic
from Utils.log import get_logger
from Views.view import SudokuView


@dataclass
class GenerationResult:
    puzzle: list
    solution: list
    target: int
    clue_count: int
    seed: int

    @property
    def shortfall(self):
        return self.clue_count - self.target


class SudokuController:
    def __init__(self, view=None, config=None):
        self.view = view or SudokuView()
        self.config = config
        self.logger = get_logger(__name__)

        self.last_result = None

    def request_new_puzzle(self, seed=None, difficulty="medium"):
        # Pick a concrete seed so the run can be reproduced from the logs
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.logger.info(f"Generating puzzle (seed={seed}, difficulty={difficulty})")

        start_time = time.time()
        puzzle = build_puzzle(seed, difficulty, self.config)
        elapsed = time.time() - start_time

        result = GenerationResult(
            puzzle=puzzle.grid.to_list(),
            solution=puzzle.solution.to_list(),
            target=puzzle.target,
            clue_count=puzzle.clue_count,
            seed=seed,
        )
        if result.shortfall > 0:
            self.logger.warning(
                f"Stopped at {result.clue_count} clues, {result.shortfall} above the "
                f"requested {result.target}: no further clue could be removed uniquely"
            )
        self.logger.info(f"Generated puzzle with {result.clue_count} clues in {elapsed:.2f}s")

        self.last_result = result
        return result

    def show(self, result=None, with_solution=False):
        result = result or self.last_result
        if result is None:
            raise ValueError("No puzzle has been generated yet")
        text = self.view.render_text(result.puzzle)
        if with_solution:
            text += "\n\n" + self.view.render_text(result.solution)
        return text

    def save_plot(self, path, result=None, with_solution=False):
        result = result or self.last_result
        if result is None:
            raise ValueError("No puzzle has been generated yet")
        fig = self.view.render_figure(
            result.puzzle, result.solution if with_solution else None
        )
        fig.savefig(path)
        self.logger.info(f"Saved puzzle figure to {path}")
        return path

    @staticmethod
    def check(result):
        """True when the puzzle's clues agree with its solution and the solution is a valid grid."""
        return SudokuLogic.is_complete_solution(result.solution) and all(
            p == 0 or p == s for p, s in zip(result.puzzle, result.solution)
        )
