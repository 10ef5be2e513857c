import json
import os
import shutil
import tempfile
import unittest

from score_store import AlmacenRecordJSON, AlmacenRecordMemoria


class TestScoreStore(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.ruta = os.path.join(self.dir, "best_score.json")

    def tearDown(self):
        shutil.rmtree(self.dir)

    def test_missing_file(self):
        self.assertEqual(AlmacenRecordJSON(self.ruta).cargar(), 0)

    def test_save_and_load(self):
        AlmacenRecordJSON(self.ruta).guardar(2048)
        with open(self.ruta) as f:
            self.assertEqual(json.load(f), {'high_score': 2048})
        self.assertEqual(AlmacenRecordJSON(self.ruta).cargar(), 2048)

    def test_corrupt_file(self):
        with open(self.ruta, 'w') as f:
            f.write("not json")
        with self.assertLogs("2048", level="ERROR"):
            self.assertEqual(AlmacenRecordJSON(self.ruta).cargar(), 0)

    def test_memory_store(self):
        almacen = AlmacenRecordMemoria(valor=5)
        self.assertEqual(almacen.cargar(), 5)
        almacen.guardar(12)
        self.assertEqual(almacen.cargar(), 12)
        self.assertEqual(almacen.guardados, 1)


if __name__ == '__main__':
    unittest.main()
