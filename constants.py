"""Constants and configuration for the 2048 engine."""

# Game Configuration
ARCHIVO_AJUSTES = "settings.json"
ARCHIVO_RECORD = "best_score.json"
ARCHIVO_LOG = "game_events.log"
NOMBRE_LOGGER = "2048"

TAMANO_DEFECTO = 4
TAMANO_MIN = 2
TAMANO_MAX = 10
VALOR_VICTORIA = 2048

# Spawn odds: 2 with 90%, 4 otherwise
PROB_FICHA_DOS = 0.9
FICHAS_INICIALES = 2

# Directions accepted by the engine
ARRIBA = 'up'
ABAJO = 'down'
IZQUIERDA = 'left'
DERECHA = 'right'
DIRECCIONES = (ARRIBA, ABAJO, IZQUIERDA, DERECHA)

# Session states
ESTADO_JUGANDO = 'playing'
ESTADO_GANADO = 'won'
ESTADO_TERMINADO = 'game_over'

AJUSTES_POR_DEFECTO = {
    'tamano': TAMANO_DEFECTO,
    'valor_victoria': VALOR_VICTORIA,
    'max_historial': None,  # None: unbounded undo
    'archivo_record': ARCHIVO_RECORD,
}
