import argparse
import sys

from Controllers.controller import SudokuController
from Models.sudoku_logic import InvalidParameter
from Utils.log import get_logger, set_log_level

logger = get_logger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Generate a Sudoku puzzle with a unique solution")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed, the same seed reproduces the same puzzle")
    parser.add_argument("--difficulty", default="40",
                        help="easy, medium, hard, expert or an explicit clue count (17-81)")
    parser.add_argument("--solution", action="store_true",
                        help="Also print the solution")
    parser.add_argument("--plot", default=None, metavar="PATH",
                        help="Save a picture of the puzzle to PATH")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)

    controller = SudokuController()
    try:
        result = controller.request_new_puzzle(seed=args.seed, difficulty=args.difficulty)
    except InvalidParameter as e:
        logger.error(f"Invalid difficulty: {e}")
        parser.error(str(e))

    print(controller.show(result, with_solution=args.solution))
    if args.plot:
        controller.save_plot(args.plot, result, with_solution=args.solution)
    return 0


if __name__ == "__main__":
    sys.exit(main())
