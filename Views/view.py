from Models.sudoku_logic import BOX, CELLS, SIZE, SudokuLogic

# Matplotlib imports
try:
    from matplotlib.figure import Figure
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


class SudokuView:
    """Turns row-major grids into text or a matplotlib figure."""

    blank = "."
    clue_color = "black"
    fill_color = "#1f4fd6"

    def render_text(self, values):
        if len(values) != CELLS:
            raise ValueError(f"Expected {CELLS} values, got {len(values)}")
        lines = []
        for r, row in enumerate(SudokuLogic.to_rows(values)):
            if r % BOX == 0 and r != 0:
                lines.append("------+-------+------")
            parts = []
            for c, val in enumerate(row):
                if c % BOX == 0 and c != 0:
                    parts.append("|")
                parts.append(str(val) if val != 0 else self.blank)
            lines.append(" ".join(parts))
        return "\n".join(lines)

    def render_figure(self, puzzle, solution=None):
        if not HAS_MATPLOTLIB:
            raise RuntimeError("Matplotlib is not installed.\nRun: pip install matplotlib")
        if len(puzzle) != CELLS or (solution is not None and len(solution) != CELLS):
            raise ValueError(f"Expected {CELLS} values per grid")

        fig = Figure(figsize=(5, 5), dpi=100)
        ax = fig.add_subplot(111)
        ax.set_xlim(0, SIZE)
        ax.set_ylim(SIZE, 0)
        ax.set_aspect("equal")
        ax.axis("off")

        # Thin cell lines, thick box lines
        for i in range(SIZE + 1):
            width = 2.5 if i % BOX == 0 else 0.8
            ax.plot([i, i], [0, SIZE], color="black", linewidth=width)
            ax.plot([0, SIZE], [i, i], color="black", linewidth=width)

        for index in range(CELLS):
            r, c = SudokuLogic.position(index)
            val = puzzle[index]
            color = self.clue_color
            if val == 0:
                if solution is None:
                    continue
                val = solution[index]
                color = self.fill_color
            ax.text(c + 0.5, r + 0.5, str(val), ha="center", va="center",
                    fontsize=16, color=color)
        return fig
