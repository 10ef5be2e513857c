import unittest

from line_resolver import procesar_linea


class TestLineResolver(unittest.TestCase):
    def test_procesar_linea_basic(self):
        # Merge identical
        merged, moved, fusiones, score = procesar_linea([2, 2, 0, 0])
        self.assertEqual(merged, [4, 0, 0, 0])
        self.assertEqual(score, 4)
        self.assertEqual(fusiones, [0])
        self.assertTrue(moved)

        # Multiple merges
        merged, moved, fusiones, score = procesar_linea([2, 2, 4, 4])
        self.assertEqual(merged, [4, 8, 0, 0])
        self.assertEqual(score, 12)
        self.assertEqual(fusiones, [0, 2])
        self.assertTrue(moved)

        # No merge, just move
        merged, moved, fusiones, score = procesar_linea([0, 2, 0, 4])
        self.assertEqual(merged, [2, 4, 0, 0])
        self.assertEqual(score, 0)
        self.assertEqual(fusiones, [])
        self.assertTrue(moved)

    def test_single_pass_merge(self):
        merged, moved, fusiones, score = procesar_linea([2, 2, 2, 2])
        self.assertEqual(merged, [4, 4, 0, 0])
        self.assertEqual(score, 8)
        self.assertEqual(fusiones, [0, 2])

        # The produced 4 does not merge with the existing 4
        merged, _, _, score = procesar_linea([4, 2, 2, 0])
        self.assertEqual(merged, [4, 4, 0, 0])
        self.assertEqual(score, 4)

    def test_leftmost_pair_wins(self):
        merged, _, fusiones, _ = procesar_linea([0, 2, 2, 2])
        self.assertEqual(merged, [4, 2, 0, 0])
        self.assertEqual(fusiones, [0])

    def test_merge_across_gap(self):
        merged, moved, _, score = procesar_linea([8, 0, 0, 8])
        self.assertEqual(merged, [16, 0, 0, 0])
        self.assertEqual(score, 16)
        self.assertTrue(moved)

    def test_no_move(self):
        for linea in ([0, 0, 0, 0], [2, 4, 8, 16], [2, 4, 0, 0]):
            merged, moved, fusiones, score = procesar_linea(linea)
            self.assertEqual(merged, linea)
            self.assertFalse(moved)
            self.assertEqual(fusiones, [])
            self.assertEqual(score, 0)

    def test_idempotent(self):
        for linea in ([0, 2, 0, 4], [2, 4, 0, 4], [0, 8, 8, 2], [2, 0, 2, 8]):
            merged, _, _, _ = procesar_linea(linea)
            again, moved, _, _ = procesar_linea(merged)
            self.assertFalse(moved)
            self.assertEqual(again, merged)

    def test_second_pass_merges_produced_pair(self):
        merged, _, _, _ = procesar_linea([2, 2, 2, 2])
        again, moved, _, score = procesar_linea(merged)
        self.assertEqual(again, [8, 0, 0, 0])
        self.assertTrue(moved)
        self.assertEqual(score, 8)

    def test_input_untouched(self):
        linea = [2, 2, 0, 4]
        procesar_linea(linea)
        self.assertEqual(linea, [2, 2, 0, 4])

    def test_other_lengths(self):
        merged, moved, _, _ = procesar_linea([2, 2, 2, 2, 2, 2])
        self.assertEqual(merged, [4, 4, 4, 0, 0, 0])
        self.assertTrue(moved)


if __name__ == '__main__':
    unittest.main()
