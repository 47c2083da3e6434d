import unittest

from game import (
    BalloonGame,
    RED,
    BLUE,
    GREEN,
    YELLOW,
    NONE,
    cluster_at,
)

A, B, C, D = RED, BLUE, GREEN, YELLOW


def make_game(rows):
    return BalloonGame.create_from_matrix(rows, len(rows), len(rows[0]))


class TestBalloonPopBasics(unittest.TestCase):
    def test_scenario_from_four_by_four_board(self):
        game = make_game([
            [A, A, B, C],
            [B, B, C, C],
            [A, A, B, C],
            [D, D, D, D],
        ])
        # Only the top pair pops: row 1 separates it from the A pair in row 2.
        self.assertEqual(game.pop(0, 0), 2)
        self.assertEqual(game.score(), 2)
        self.assertEqual(game.get_balloon(0, 0), NONE)
        self.assertEqual(game.get_balloon(0, 1), NONE)
        self.assertEqual(game.get_balloon(2, 0), A)
        self.assertEqual(game.pop(3, 0), 4)
        self.assertEqual(game.score(), 14)

    def test_pop_clears_exactly_the_connected_cluster(self):
        game = make_game([
            [C, C, A, C],
            [A, C, A, C],
            [C, C, B, C],
        ])
        cluster = cluster_at(game.current, 0, 0)
        self.assertEqual(cluster, {(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)})
        before = {coord: game.get_balloon(*coord) for coord in game.current.coords()}
        n = game.pop(0, 0)
        self.assertEqual(n, len(cluster))
        self.assertEqual(game.score(), n * (n - 1))
        for coord, balloon in before.items():
            expected = NONE if coord in cluster else balloon
            self.assertEqual(game.get_balloon(*coord), expected)

    def test_undo_restores_grid_and_score(self):
        game = make_game([
            [A, A, B],
            [B, B, B],
        ])
        start = game.rows_as_strings()
        self.assertEqual(game.pop(1, 2), 4)
        self.assertEqual(game.score(), 12)
        self.assertEqual(game.undo(), True)
        self.assertEqual(game.rows_as_strings(), start)
        self.assertEqual(game.score(), 0)
        self.assertEqual(game.undo(), False)

    def test_float_until_compact_keeps_balloons(self):
        game = make_game([
            [A, B, A],
            [C, C, D],
            [A, B, A],
        ])
        self.assertEqual(game.pop(1, 0), 2)
        self.assertFalse(game.is_compact())
        count = game.balloon_count()
        game.float_until_compact()
        self.assertTrue(game.is_compact())
        self.assertEqual(game.balloon_count(), count)
        self.assertEqual(game.rows_as_strings(), ['^=^', '^=+', '..^'])
        # Floating joined the two A balloons in column 0.
        self.assertTrue(game.can_pop())
        self.assertEqual(game.pop(0, 0), 2)

    def test_checkerboard_cannot_pop(self):
        game = make_game([
            [A, B, A, B, A],
            [B, A, B, A, B],
            [A, B, A, B, A],
        ])
        self.assertFalse(game.can_pop())
        for r in range(3):
            for c in range(5):
                self.assertEqual(game.pop(r, c), 0)


if __name__ == '__main__':
    unittest.main()
