"""Tests for the per-turn GameState."""

import unittest

from board.actions import Action, ActionType
from board.cell import COMPLETE_COST, Tree
from board.layout import standard_cells
from board.state import GameState


class TestCosts(unittest.TestCase):

    def setUp(self):
        trees = [
            Tree(7, 0, True), Tree(8, 0, True),
            Tree(1, 1, True),
            Tree(0, 3, True),
            Tree(4, 1, False), Tree(5, 0, False),
        ]
        self.state = GameState(standard_cells(), trees=trees)

    def test_seed_cost_counts_my_seeds(self):
        self.assertEqual(self.state.seed_cost(), 2)

    def test_grow_costs_count_my_trees_only(self):
        self.assertEqual(self.state.grow_cost(0), 1 + 1)
        self.assertEqual(self.state.grow_cost(1), 3 + 0)
        self.assertEqual(self.state.grow_cost(2), 7 + 1)

    def test_complete_cost(self):
        self.assertEqual(self.state.complete_cost(), COMPLETE_COST)

    def test_empty_board_costs(self):
        state = GameState(standard_cells())
        self.assertEqual(state.seed_cost(), 0)
        self.assertEqual(state.grow_cost(0), 1)
        self.assertEqual(state.grow_cost(1), 3)
        self.assertEqual(state.grow_cost(2), 7)


class TestCounts(unittest.TestCase):

    def setUp(self):
        trees = [
            Tree(7, 0, True), Tree(1, 1, True), Tree(0, 3, True),
            Tree(2, 3, True), Tree(4, 3, False),
        ]
        self.state = GameState(standard_cells(), trees=trees)

    def test_my_and_opponent_trees(self):
        self.assertEqual(len(self.state.my_trees()), 4)
        self.assertEqual(len(self.state.opponent_trees()), 1)

    def test_count_helpers(self):
        self.assertEqual(self.state.count_seeds(), 1)
        self.assertEqual(self.state.count_trees(), 4)
        self.assertEqual(self.state.count_trees_of_size(3), 2)

    def test_tree_at(self):
        self.assertEqual(self.state.tree_at(4), Tree(4, 3, False))
        self.assertIsNone(self.state.tree_at(30))


class TestSun(unittest.TestCase):

    def test_direction_follows_day(self):
        cells = standard_cells()
        self.assertEqual(GameState(cells, day=0).sun_direction, 0)
        self.assertEqual(GameState(cells, day=7).sun_direction, 1)
        self.assertEqual(GameState(cells, day=23).sun_direction, 5)
        self.assertEqual(GameState(cells, day=5).sun_direction_tomorrow, 0)

    def test_days_left(self):
        self.assertEqual(GameState(standard_cells(), day=20).days_left, 3)

    def test_todays_shadows(self):
        state = GameState(standard_cells(), day=0, trees=[Tree(0, 2, True)])
        self.assertTrue(state.is_shadowed(1))
        self.assertTrue(state.is_shadowed(7))
        self.assertFalse(state.is_shadowed(4))
        self.assertEqual(len(state.shadows_at(1)), 1)

    def test_shadows_turn_with_the_sun(self):
        state = GameState(standard_cells(), day=3, trees=[Tree(0, 2, True)])
        self.assertTrue(state.is_shadowed(4))
        self.assertFalse(state.is_shadowed(1))


class TestActions(unittest.TestCase):

    def setUp(self):
        self.state = GameState(
            standard_cells(),
            trees=[Tree(0, 1, True)],
            possible_actions=[
                Action.wait(), Action.grow(0), Action.seed(0, 1), Action.seed(0, 2),
            ],
        )

    def test_grouped_by_type(self):
        self.assertEqual(len(self.state.actions_of(ActionType.SEED)), 2)
        self.assertEqual(self.state.actions_of(ActionType.GROW), [Action.grow(0)])
        self.assertEqual(len(self.state.all_actions()), 4)

    def test_can_helpers(self):
        self.assertTrue(self.state.can_seed())
        self.assertTrue(self.state.can_grow())
        self.assertFalse(self.state.can_complete())

    def test_is_legal(self):
        self.assertTrue(self.state.is_legal(Action.grow(0, "msg")))
        self.assertTrue(self.state.is_legal(Action.seed(0, 2)))
        self.assertFalse(self.state.is_legal(Action.seed(0, 3)))
        self.assertFalse(self.state.is_legal(Action.complete(0)))

    def test_wait_always_legal(self):
        state = GameState(standard_cells())
        self.assertTrue(state.is_legal(Action.wait()))

    def test_actions_of_returns_copy(self):
        self.state.actions_of(ActionType.SEED).clear()
        self.assertTrue(self.state.can_seed())


if __name__ == "__main__":
    unittest.main()
