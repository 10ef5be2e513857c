import unittest

from undo_history import Historial


class TestHistorial(unittest.TestCase):
    def test_lifo(self):
        historial = Historial()
        historial.push([[2, 0], [0, 0]], 0)
        historial.push([[4, 0], [0, 0]], 4)
        self.assertEqual(historial.size(), 2)
        self.assertEqual(historial.pop()["puntuacion"], 4)
        self.assertEqual(historial.pop()["tablero"], ((2, 0), (0, 0)))
        self.assertIsNone(historial.pop())
        self.assertEqual(len(historial), 0)

    def test_snapshot_is_a_copy(self):
        historial = Historial()
        tablero = [[2, 0], [0, 0]]
        historial.push(tablero, 0)
        tablero[0][0] = 1024
        self.assertEqual(historial.pop()["tablero"][0][0], 2)

    def test_unbounded_by_default(self):
        historial = Historial()
        for i in range(500):
            historial.push([[0]], i)
        self.assertEqual(historial.size(), 500)

    def test_max_depth_drops_oldest(self):
        historial = Historial(max_profundidad=3)
        for i in range(5):
            historial.push([[0]], i)
        self.assertEqual(historial.size(), 3)
        self.assertEqual([historial.pop()["puntuacion"] for _ in range(3)], [4, 3, 2])

    def test_invalid_depth(self):
        with self.assertRaises(ValueError):
            Historial(max_profundidad=0)

    def test_clear(self):
        historial = Historial()
        historial.push([[2]], 0)
        historial.clear()
        self.assertEqual(historial.size(), 0)


if __name__ == '__main__':
    unittest.main()
