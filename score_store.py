"""Best score persistence. The engine only needs cargar() and guardar(valor)."""
import json
import logging
import os

from constants import ARCHIVO_RECORD, NOMBRE_LOGGER

logger = logging.getLogger(NOMBRE_LOGGER)


class AlmacenRecordJSON:
    def __init__(self, ruta=ARCHIVO_RECORD):
        self.ruta = ruta

    def cargar(self):
        if not os.path.exists(self.ruta):
            return 0
        try:
            with open(self.ruta, 'r') as f:
                data = json.load(f)
            valor = int(data.get('high_score', 0))
            return max(valor, 0)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error loading best score: {e}")
        return 0

    def guardar(self, valor):
        try:
            with open(self.ruta, 'w') as f:
                json.dump({'high_score': int(valor)}, f)
        except OSError as e:
            logger.error(f"Error saving best score: {e}")


class AlmacenRecordMemoria:
    """In-process store, for tests and callers that persist elsewhere."""

    def __init__(self, valor=0):
        self.valor = valor
        self.guardados = 0

    def cargar(self):
        return self.valor

    def guardar(self, valor):
        self.valor = valor
        self.guardados += 1
