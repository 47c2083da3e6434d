import unittest

from game import (
    Snapshot,
    RED,
    BLUE,
    GREEN,
    YELLOW,
    NONE,
    neighbors,
    cluster_at,
    is_compact,
    float_one_step,
    can_pop,
    parse_matrix,
)


def make_snapshot(text):
    rows = parse_matrix(text)
    snap = Snapshot.create(len(rows), len(rows[0]))
    for r, row in enumerate(rows):
        for c, balloon in enumerate(row):
            snap.set(r, c, balloon)
    return snap


class TestRules(unittest.TestCase):
    def test_given_corner_when_neighbors_then_only_in_bounds_in_fixed_order(self):
        snap = Snapshot.create(3, 3)
        self.assertEqual(neighbors(snap, (0, 0)), [(0, 1), (1, 0)])
        self.assertEqual(neighbors(snap, (1, 1)), [(0, 1), (1, 0), (1, 2), (2, 1)])

    def test_given_board_when_cluster_at_then_matches_pop_without_mutating(self):
        snap = make_snapshot("""
            ^ ^ = o
            = ^ o o
            ^ ^ = o
        """)
        before = list(snap.grid)
        cells = cluster_at(snap, 0, 0)
        self.assertEqual(cells, {(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)})
        self.assertEqual(snap.grid, before)
        self.assertEqual(snap.copy().pop_cluster(0, 0, RED), len(cells))
        self.assertEqual(cluster_at(snap, 9, 9), set())

    def test_given_column_fill_when_is_compact_then_true(self):
        snap = make_snapshot("""
            ^ = o
            = . +
            . . .
        """)
        self.assertTrue(is_compact(snap))
        self.assertTrue(is_compact(Snapshot.create(2, 2)))

    def test_given_gap_above_balloon_when_is_compact_then_false(self):
        snap = make_snapshot("""
            ^ . o
            = + +
        """)
        self.assertFalse(is_compact(snap))

    def test_given_multi_row_gap_when_float_one_step_then_moves_one_row_per_call(self):
        snap = make_snapshot("""
            .
            .
            ^
        """)
        float_one_step(snap)
        self.assertEqual(snap.rows_as_strings(), ['.', '^', '.'])
        self.assertFalse(is_compact(snap))
        float_one_step(snap)
        self.assertEqual(snap.rows_as_strings(), ['^', '.', '.'])
        self.assertTrue(is_compact(snap))

    def test_given_scattered_board_when_floating_to_fixed_point_then_count_preserved(self):
        snap = make_snapshot("""
            . ^ . =
            = . . .
            . o . +
            + . ^ .
        """)
        count = snap.balloon_count()
        steps = 0
        while not is_compact(snap):
            float_one_step(snap)
            steps += 1
            self.assertEqual(snap.balloon_count(), count)
            self.assertLess(steps, 10)
        self.assertEqual(snap.rows_as_strings(), ['=^^=', '+o.+', '....', '....'])

    def test_given_checkerboard_when_can_pop_then_false(self):
        snap = make_snapshot("""
            ^ = ^ =
            = ^ = ^
            ^ = ^ =
            = ^ = ^
        """)
        self.assertFalse(can_pop(snap))
        self.assertFalse(can_pop(Snapshot.create(3, 3)))

    def test_given_pair_on_last_row_or_column_when_can_pop_then_true(self):
        last_row = make_snapshot("""
            ^ =
            o o
        """)
        self.assertTrue(can_pop(last_row))
        last_col = make_snapshot("""
            ^ +
            = +
        """)
        self.assertTrue(can_pop(last_col))
        single_row = make_snapshot("o = = ^")
        self.assertTrue(can_pop(single_row))

    def test_given_empty_cells_only_adjacent_when_can_pop_then_false(self):
        snap = make_snapshot("""
            ^ = o
            . . .
            . . .
        """)
        self.assertFalse(can_pop(snap))
        snap.set(1, 2, GREEN)
        self.assertTrue(can_pop(snap))
        snap.set(1, 2, YELLOW)
        self.assertFalse(can_pop(snap))
        self.assertEqual(snap.get(1, 0), NONE)
        self.assertEqual(snap.get(0, 1), BLUE)


if __name__ == '__main__':
    unittest.main(verbosity=2)
