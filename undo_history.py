from grid import congelar_tablero


class Historial:
    """LIFO stack of (grid, score) snapshots taken before each committed move."""

    def __init__(self, max_profundidad=None):
        if max_profundidad is not None and max_profundidad < 1:
            raise ValueError(f"Invalid history depth: {max_profundidad}")
        self.max_profundidad = max_profundidad
        self._pila = []

    def push(self, tablero, puntuacion):
        if self.max_profundidad is not None and len(self._pila) >= self.max_profundidad:
            self._pila.pop(0)
        self._pila.append({
            "tablero": congelar_tablero(tablero),
            "puntuacion": puntuacion,
        })

    def pop(self):
        if not self._pila:
            return None
        return self._pila.pop()

    def size(self):
        return len(self._pila)

    def __len__(self):
        return len(self._pila)

    def clear(self):
        self._pila = []
