from .sudoku_logic import CELLS, SIZE


class SolverStrategy:
    """
    Interface for the backtracking searches.

    The search keeps an explicit stack of frames ``[cell, remaining]`` instead
    of recursing, so depth never exceeds the 81 cells and the run can be
    stepped through as a generator. Subclasses choose the next cell to branch
    on and the order its candidates are tried in.
    """

    def select_cell(self, grid):
        raise NotImplementedError

    def order_candidates(self, grid, index):
        raise NotImplementedError

    def get_generator(self, grid, trace=False):
        """
        Yield ``(kind, a, b, c, step)`` tuples while exploring every completion
        of ``grid``. ``grid`` itself is left untouched.

        kinds: 'start', 'update' and 'backtrack' (only with ``trace``),
        'solution' (a = flat values, b = solutions so far) and 'done'
        (b = total solutions).
        """
        board = grid.copy()
        step_count = 0
        solutions = 0

        yield ('start', None, None, None, 0)

        stack = []
        first = self.select_cell(board)
        if first is None:
            solutions += 1
            yield ('solution', board.to_list(), solutions, None, step_count)
        else:
            candidates = self.order_candidates(board, first)
            if candidates:
                stack.append([first, candidates])

        while stack:
            index, remaining = stack[-1]
            if board.values[index]:
                # Undo the value tried last time we were at this frame
                r, c = divmod(index, SIZE)
                board.clear(index)
                if trace:
                    step_count += 1
                    yield ('backtrack', r, c, 0, step_count)
            if not remaining:
                stack.pop()
                continue

            value = remaining.pop()
            board.place(index, value)
            if trace:
                step_count += 1
                r, c = divmod(index, SIZE)
                yield ('update', r, c, value, step_count)

            nxt = self.select_cell(board)
            if nxt is None:
                solutions += 1
                yield ('solution', board.to_list(), solutions, None, step_count)
                continue

            candidates = self.order_candidates(board, nxt)
            if candidates:
                stack.append([nxt, candidates])

        yield ('done', None, solutions, None, step_count)


class BacktrackingStrategy(SolverStrategy):
    """Exhaustive search branching on the most constrained empty cell."""

    def select_cell(self, grid):
        best = None
        best_count = SIZE + 1
        values = grid.values
        for index in range(CELLS):
            if values[index]:
                continue
            count = len(grid.candidates(index))
            if count < best_count:
                best, best_count = index, count
                if count <= 1:
                    break
        return best

    def order_candidates(self, grid, index):
        # Frames pop from the end, so store descending to try ascending
        return sorted(grid.candidates(index), reverse=True)


class RandomizedFillStrategy(SolverStrategy):
    """Row-major search that tries candidates in an order drawn from ``rng``."""

    def __init__(self, rng):
        self.rng = rng

    def select_cell(self, grid):
        values = grid.values
        for index in range(CELLS):
            if not values[index]:
                return index
        return None

    def order_candidates(self, grid, index):
        nums = sorted(grid.candidates(index))
        self.rng.shuffle(nums)
        nums.reverse()
        return nums
