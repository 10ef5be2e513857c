import random
import logging

from constants import (
    TAMANO_DEFECTO, TAMANO_MIN, TAMANO_MAX, VALOR_VICTORIA, PROB_FICHA_DOS,
    FICHAS_INICIALES, NOMBRE_LOGGER, ESTADO_JUGANDO, ESTADO_GANADO,
    ESTADO_TERMINADO
)
from event_log import log_event
from grid import (
    crear_tablero, copiar_tablero, celdas_libres, ficha_maxima,
    contiene_valor, hay_fusion_adyacente, es_valor_ficha
)
from move_engine import resolver_movimiento, validar_direccion
from score_store import AlmacenRecordMemoria
from undo_history import Historial

logger = logging.getLogger(NOMBRE_LOGGER)


class Logica2048:
    def __init__(self, tamano=TAMANO_DEFECTO, valor_victoria=VALOR_VICTORIA,
                 rng=None, almacen=None, max_historial=None):
        if not isinstance(tamano, int) or not TAMANO_MIN <= tamano <= TAMANO_MAX:
            raise ValueError(f"Grid size {tamano} out of range ({TAMANO_MIN}-{TAMANO_MAX})")
        if (not isinstance(valor_victoria, int) or valor_victoria < 4
                or not es_valor_ficha(valor_victoria)):
            raise ValueError(f"Win value must be a power of two >= 4, got {valor_victoria}")

        self.tamano = tamano
        self.valor_victoria = valor_victoria
        self.rng = rng or random.Random()
        self.almacen = almacen if almacen is not None else AlmacenRecordMemoria()

        self.tablero = []
        self.puntuacion = 0
        self.max_ficha = 0

        # High Score Handling
        self.high_score = self.almacen.cargar()
        self.new_high_score = False  # Flag for current turn event

        self.ganado = False  # Reached the win value
        self.terminado = False
        self.seguir_jugando = False  # Don't announce the win again

        # Undo History
        self.history = Historial(max_historial)

        self.nuevo_juego()

    @property
    def estado(self):
        if self.terminado:
            return ESTADO_TERMINADO
        if self.ganado and not self.seguir_jugando:
            return ESTADO_GANADO
        return ESTADO_JUGANDO

    @property
    def undo_disponibles(self):
        return self.history.size()

    def obtener_tablero(self):
        return copiar_tablero(self.tablero)

    def nuevo_juego(self):
        self.tablero = crear_tablero(self.tamano)
        self.puntuacion = 0
        self.max_ficha = 0
        self.history.clear()
        self.ganado = False
        self.terminado = False
        self.seguir_jugando = False
        self.new_high_score = False
        for _ in range(FICHAS_INICIALES):
            self.agregar_ficha_random()
        self.max_ficha = ficha_maxima(self.tablero)
        log_event("START", f"New {self.tamano}x{self.tamano} game")
        return self.to_dict()

    def to_dict(self):
        return {
            'tablero': copiar_tablero(self.tablero),
            'puntuacion': self.puntuacion,
            'high_score': self.high_score,
            'estado': self.estado,
            'historial': self.history.size(),
            'ganado': self.ganado,
            'terminado': self.terminado,
            'seguir_jugando': self.seguir_jugando,
            'max_ficha': self.max_ficha,
        }

    def agregar_ficha_random(self):
        celdas = celdas_libres(self.tablero)
        if celdas:
            r, c = self.rng.choice(celdas)
            val = 2 if self.rng.random() < PROB_FICHA_DOS else 4
            self.tablero[r][c] = val
            return (r, c, val)
        return None

    def _resultado(self, moved, ficha_nueva=None, fusiones=None, victoria_nueva=False):
        resultado = self.to_dict()
        resultado.update({
            'moved': moved,
            'ficha_nueva': ficha_nueva,
            'fusiones': list(fusiones or []),
            'victoria_nueva': victoria_nueva,
        })
        return resultado

    def _actualizar_record(self):
        if self.puntuacion > self.high_score:
            self.high_score = self.puntuacion
            self.new_high_score = True
            self.almacen.guardar(self.high_score)
            log_event("RECORD", f"New best score {self.high_score}")
        else:
            self.new_high_score = False

    def mover(self, direccion):
        validar_direccion(direccion)

        if self.terminado and not self.seguir_jugando:
            return self._resultado(False)

        # Snapshot for Undo, pushed only if the move changes the grid
        tablero_ant = self.tablero
        score_ant = self.puntuacion

        movimiento = resolver_movimiento(self.tablero, direccion)
        if not movimiento['moved']:
            log_event("NOOP", f"{direccion} changed nothing")
            return self._resultado(False)

        self.history.push(tablero_ant, score_ant)
        self.tablero = movimiento['tablero']
        self.puntuacion += movimiento['puntos']
        self._actualizar_record()

        ficha_nueva = self.agregar_ficha_random()
        self.max_ficha = max(self.max_ficha, ficha_maxima(self.tablero))

        log_event("MOVE", f"{direccion}: +{movimiento['puntos']} -> {self.puntuacion}")
        victoria_nueva = False
        if (contiene_valor(self.tablero, self.valor_victoria)
                and not self.ganado and not self.seguir_jugando):
            self.ganado = True
            victoria_nueva = True
            log_event("WIN", f"Reached {self.valor_victoria} with score {self.puntuacion}")
        elif self.juego_terminado():
            self.terminado = True
            log_event("GAME_OVER", f"Final score {self.puntuacion}")

        return self._resultado(True, ficha_nueva, movimiento['fusiones'], victoria_nueva)

    def deshacer(self):
        estado_previo = self.history.pop()
        if estado_previo is None:
            return self.to_dict()

        self.tablero = copiar_tablero(estado_previo["tablero"])
        self.puntuacion = estado_previo["puntuacion"]
        self.max_ficha = ficha_maxima(self.tablero)
        # Undo always makes the game resumable; a win stays recorded
        self.terminado = False
        self.new_high_score = False
        log_event("UNDO", f"Restored score {self.puntuacion}, {self.history.size()} left")
        return self.to_dict()

    def continuar_juego(self):
        if self.estado != ESTADO_GANADO:
            logger.warning(f"Keep playing ignored in state {self.estado}")
            return False
        self.seguir_jugando = True
        log_event("CONTINUE", "Keep playing after win")
        return True

    def juego_terminado(self):
        if celdas_libres(self.tablero):
            return False
        return not hay_fusion_adyacente(self.tablero)

