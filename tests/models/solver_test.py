# -*- coding: utf-8 -*-
"""Tests for the backtracking search and the uniqueness oracle."""
import random
import unittest

from Models.solver import count_solutions, has_unique_solution, solve
from Models.strategies import BacktrackingStrategy, RandomizedFillStrategy
from Models.sudoku_logic import Grid, InvalidParameter

from sudoku_fixtures import DEAD_END, PUZZLE, SOLUTION


class TestCountSolutions(unittest.TestCase):
    def test_unique_puzzle(self):
        grid = Grid.from_values(PUZZLE)
        self.assertEqual(count_solutions(grid, 2), 1)
        self.assertTrue(has_unique_solution(grid))

    def test_solve_matches_known_solution(self):
        solved = solve(Grid.from_values(PUZZLE))
        self.assertEqual(solved.to_list(), SOLUTION)

    def test_complete_grid_counts_once(self):
        self.assertEqual(count_solutions(Grid.from_values(SOLUTION), 2), 1)

    def test_unsolvable(self):
        grid = Grid.from_values(DEAD_END)
        self.assertEqual(count_solutions(grid, 2), 0)
        self.assertFalse(has_unique_solution(grid))
        self.assertIsNone(solve(grid))

    def test_cap_short_circuits(self):
        self.assertEqual(count_solutions(Grid(), 2), 2)
        self.assertEqual(count_solutions(Grid(), 5), 5)
        self.assertFalse(has_unique_solution(Grid()))

    def test_empty_band_has_several_solutions(self):
        # Rows of a band can be swapped without breaking any column or box
        values = SOLUTION[:]
        for index in range(27):
            values[index] = 0
        self.assertEqual(count_solutions(Grid.from_values(values), 2), 2)

    def test_rejects_bad_cap(self):
        with self.assertRaises(InvalidParameter):
            count_solutions(Grid(), 0)

    def test_grid_is_not_modified(self):
        grid = Grid.from_values(PUZZLE)
        count_solutions(grid, 2)
        count_solutions(Grid(), 2)
        self.assertEqual(grid.to_list(), PUZZLE)


class TestSearchSteps(unittest.TestCase):
    def test_single_blank_trace(self):
        values = SOLUTION[:]
        values[40] = 0
        steps = list(BacktrackingStrategy().get_generator(Grid.from_values(values), trace=True))
        self.assertEqual([s[0] for s in steps], ['start', 'update', 'solution', 'backtrack', 'done'])
        self.assertEqual(steps[1][1:4], (4, 4, SOLUTION[40]))
        self.assertEqual(steps[2][1], SOLUTION)
        self.assertEqual(steps[-1][2], 1)

    def test_untraced_search_only_reports_solutions(self):
        steps = list(BacktrackingStrategy().get_generator(Grid.from_values(PUZZLE)))
        self.assertEqual([s[0] for s in steps], ['start', 'solution', 'done'])
        self.assertEqual(steps[-1][2], 1)

    def test_dead_end_has_no_solution(self):
        steps = list(BacktrackingStrategy().get_generator(Grid.from_values(DEAD_END)))
        self.assertEqual(steps[-1][0], 'done')
        self.assertEqual(steps[-1][2], 0)

    def test_most_constrained_cell_first(self):
        values = SOLUTION[:]
        for index in list(range(27)) + [80]:
            values[index] = 0
        # The top band cells keep three candidates each, (8, 8) has one
        self.assertEqual(BacktrackingStrategy().select_cell(Grid.from_values(values)), 80)

    def test_randomized_fill_scans_row_major(self):
        grid = Grid.from_values(PUZZLE)
        strategy = RandomizedFillStrategy(random.Random(0))
        self.assertEqual(strategy.select_cell(grid), 2)
        self.assertEqual(sorted(strategy.order_candidates(grid, 2)), [1, 2, 4])
