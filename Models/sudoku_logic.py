SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
MIN_CLUES = 17
MAX_CLUES = CELLS
DIGITS = frozenset(range(1, SIZE + 1))


class InvalidParameter(ValueError):
    """Raised when a clue count, difficulty or grid handed to the core is out of bounds."""


class SudokuLogic:
    """Helper functions for Sudoku rules on plain values."""

    @staticmethod
    def box_index(r, c):
        return (r // BOX) * BOX + c // BOX

    @staticmethod
    def position(index):
        return divmod(index, SIZE)

    @staticmethod
    def to_rows(values):
        return [list(values[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]

    @staticmethod
    def count_clues(values):
        return sum(1 for v in values if v != 0)

    @staticmethod
    def is_valid(values):
        """True when no digit repeats in a row, column or box. Blanks (0) are ignored."""
        if len(values) != CELLS:
            return False
        rows = [set() for _ in range(SIZE)]
        cols = [set() for _ in range(SIZE)]
        boxes = [set() for _ in range(SIZE)]
        for i, v in enumerate(values):
            if v == 0:
                continue
            if v not in DIGITS:
                return False
            r, c = divmod(i, SIZE)
            b = SudokuLogic.box_index(r, c)
            if v in rows[r] or v in cols[c] or v in boxes[b]:
                return False
            rows[r].add(v)
            cols[c].add(v)
            boxes[b].add(v)
        return True

    @staticmethod
    def is_complete_solution(values):
        return SudokuLogic.is_valid(values) and 0 not in values


class Grid:
    """
    A 9x9 board stored row-major, plus the digits already placed in every
    row, column and box.

    The occupancy sets are updated on each place/clear, which makes the
    legality check and the candidate lookup set operations instead of scans.
    A placement is checked before anything is written, so the board never
    holds a repeated digit.
    """

    def __init__(self):
        self.values = [0] * CELLS
        self.rows = [set() for _ in range(SIZE)]
        self.cols = [set() for _ in range(SIZE)]
        self.boxes = [set() for _ in range(SIZE)]
        self.filled = 0

    @classmethod
    def from_values(cls, values):
        """Build a grid from 81 row-major values (0 = blank) or from 9 rows of 9."""
        values = list(values)
        if len(values) == SIZE and all(isinstance(row, (list, tuple)) for row in values):
            values = [v for row in values for v in row]
        if len(values) != CELLS:
            raise InvalidParameter(f"Expected {CELLS} cells, got {len(values)}")
        grid = cls()
        for i, v in enumerate(values):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidParameter(f"Cell {i} holds a non-integer value: {v!r}")
            if v != 0:
                grid.place(i, v)
        return grid

    def copy(self):
        other = Grid.__new__(Grid)
        other.values = self.values[:]
        other.rows = [set(s) for s in self.rows]
        other.cols = [set(s) for s in self.cols]
        other.boxes = [set(s) for s in self.boxes]
        other.filled = self.filled
        return other

    def get(self, r, c):
        return self.values[r * SIZE + c]

    def candidates(self, index):
        r, c = divmod(index, SIZE)
        return DIGITS - self.rows[r] - self.cols[c] - self.boxes[SudokuLogic.box_index(r, c)]

    def can_place(self, index, value):
        if self.values[index] != 0 or value not in DIGITS:
            return False
        r, c = divmod(index, SIZE)
        return not (
            value in self.rows[r]
            or value in self.cols[c]
            or value in self.boxes[SudokuLogic.box_index(r, c)]
        )

    def place(self, index, value):
        if not 0 <= index < CELLS:
            raise InvalidParameter(f"Cell index {index} out of range")
        if not self.can_place(index, value):
            r, c = divmod(index, SIZE)
            raise InvalidParameter(f"Cannot place {value} at ({r}, {c})")
        r, c = divmod(index, SIZE)
        self.values[index] = value
        self.rows[r].add(value)
        self.cols[c].add(value)
        self.boxes[SudokuLogic.box_index(r, c)].add(value)
        self.filled += 1

    def clear(self, index):
        """Empty a cell and return the value it held (0 if it was already empty)."""
        value = self.values[index]
        if value == 0:
            return 0
        r, c = divmod(index, SIZE)
        self.values[index] = 0
        self.rows[r].discard(value)
        self.cols[c].discard(value)
        self.boxes[SudokuLogic.box_index(r, c)].discard(value)
        self.filled -= 1
        return value

    def is_complete(self):
        return self.filled == CELLS

    @property
    def clue_count(self):
        return self.filled

    def to_list(self):
        return self.values[:]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.values == other.values

    def __repr__(self):
        return f"Grid(filled={self.filled})"
