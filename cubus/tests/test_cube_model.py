import unittest
from collections import Counter

from cubus.core import CubeModel, Move, apply, inverse
from cubus.logic.moves import inverse_sequence, parse_sequence
from cubus.logic.scramble import random_sequence
from cubus.solve.equivalence_search import move_alphabet


class TestCubeModel(unittest.TestCase):
    def test_starts_solved(self):
        c = CubeModel(3)
        self.assertTrue(c.is_solved())
        self.assertEqual(c, CubeModel.solved(3))

    def test_X1_then_x1_returns(self):
        c = CubeModel(3)
        self.assertEqual(c.moved(Move("x", 1, 1)).moved(Move("x", 1, -1)), c)

    def test_every_move_then_inverse_returns(self):
        for size in (1, 2, 3, 4):
            start = CubeModel(size).apply_sequence(random_sequence(12, size, seed=size))
            for mv in move_alphabet(size):
                with self.subTest(size=size, move=mv):
                    self.assertEqual(apply(apply(start, mv), inverse(mv)), start)

    def test_2X1_equals_two_X1(self):
        c1 = CubeModel(3).moved(Move("x", 1, 2))
        c2 = CubeModel(3).moved(Move("x", 1, 1)).moved(Move("x", 1, 1))
        self.assertEqual(c1, c2)

    def test_3X0_equals_x0(self):
        self.assertEqual(
            CubeModel(3).moved(Move("x", 0, 3)),
            CubeModel(3).moved(Move("x", 0, -1)),
        )

    def test_full_turns_are_noops(self):
        start = CubeModel(3).apply_sequence(parse_sequence("X1 y0 Z2"))
        for mv in (Move("x", 1, 4), Move("y", 0, -4), Move("z", 2, 8), Move("y", None, 4)):
            with self.subTest(move=mv):
                self.assertEqual(start.moved(mv), start)

    def test_moved_does_not_change_original(self):
        c = CubeModel(3)
        c.moved(Move("y", 2, 1))
        self.assertTrue(c.is_solved())
        self.assertEqual(c, CubeModel(3))

    def test_top_layer_turn_brings_left_colors_to_front(self):
        faces = CubeModel(3).moved(Move("y", 2, 1)).facets()
        self.assertEqual(faces["F"][0], ["O", "O", "O"])
        self.assertEqual(faces["F"][1], ["G", "G", "G"])
        self.assertEqual(faces["U"], [["W"] * 3] * 3)

    def test_whole_cube_rotation_equals_every_layer(self):
        for size in (2, 3):
            whole = CubeModel(size).moved(Move("x", None, 1))
            layers = CubeModel(size).apply_sequence(Move("x", k, 1) for k in range(size))
            self.assertEqual(whole, layers)

    def test_whole_cube_rotation_differs_from_single_layer(self):
        whole = CubeModel(3).moved(Move("z", None, -1))
        self.assertTrue(whole.is_solved())
        self.assertNotEqual(whole, CubeModel(3))
        for k in range(3):
            self.assertNotEqual(whole, CubeModel(3).moved(Move("z", k, -1)))

    def test_center_twist_is_not_solved_state(self):
        # Girar la capa del medio 4 veces deja todo igual; 2 veces sobre cada eje no
        c = CubeModel(3).apply_sequence(parse_sequence("2X1 2Y1 2Z1"))
        self.assertNotEqual(c, CubeModel(3))

    def test_equal_states_share_hash(self):
        a = CubeModel(3).apply_sequence(parse_sequence("X1 X1"))
        b = CubeModel(3).moved(Move("x", 1, 2))
        self.assertEqual(a.to_hashable(), b.to_hashable())
        self.assertEqual(len({a, b, CubeModel(3)}), 2)

    def test_color_counts_remain_constant(self):
        for size in (2, 3, 5):
            c = CubeModel(size).apply_sequence(random_sequence(30, size, seed=7))
            counts = Counter(
                color
                for grid in c.facets().values()
                for row in grid
                for color in row
            )
            # Cada color debe aparecer N² veces
            for color in ["W", "Y", "O", "R", "G", "B"]:
                self.assertEqual(counts[color], size * size)

    def test_random_sequence_undone_by_inverse_sequence(self):
        for size in (1, 2, 3, 4, 6):
            seq = random_sequence(25, size, seed=42)
            c = CubeModel(size).apply_sequence(seq).apply_sequence(inverse_sequence(seq))
            self.assertEqual(c, CubeModel(size))

    def test_invalid_size(self):
        for size in (0, -1, 11):
            with self.assertRaises(ValueError):
                CubeModel(size)

    def test_invalid_layer(self):
        with self.assertRaises(ValueError):
            CubeModel(3).moved(Move("x", 3, 1))

    def test_zero_turns_rejected(self):
        with self.assertRaises(ValueError):
            CubeModel(3).moved(Move("x", 0, 0))

    def test_bricks_cover_the_surface(self):
        self.assertEqual(len(CubeModel(1).bricks()), 1)
        self.assertEqual(len(CubeModel(2).bricks()), 8)
        self.assertEqual(len(CubeModel(3).bricks()), 26)
        self.assertEqual(len(CubeModel(4).bricks()), 56)


if __name__ == "__main__":
    unittest.main()
