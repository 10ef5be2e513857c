"""Grid helpers: an NxN list of lists, 0 means empty."""


def es_valor_ficha(val):
    """True for 0 (empty) or a power of two >= 2."""
    return val == 0 or (val >= 2 and val & (val - 1) == 0)


def crear_tablero(tamano):
    if tamano < 1:
        raise ValueError(f"Invalid grid size: {tamano}")
    return [[0] * tamano for _ in range(tamano)]


def copiar_tablero(tablero):
    return [list(fila) for fila in tablero]


def congelar_tablero(tablero):
    """Immutable copy used by history snapshots."""
    return tuple(tuple(fila) for fila in tablero)


def _comprobar_posicion(tablero, r, c):
    tamano = len(tablero)
    if not (0 <= r < tamano and 0 <= c < tamano):
        raise IndexError(f"Cell ({r}, {c}) out of range for {tamano}x{tamano} grid")


def obtener_celda(tablero, pos):
    r, c = pos
    _comprobar_posicion(tablero, r, c)
    return tablero[r][c]


def fijar_celda(tablero, pos, val):
    r, c = pos
    _comprobar_posicion(tablero, r, c)
    if not es_valor_ficha(val):
        raise ValueError(f"Invalid tile value {val} at ({r}, {c})")
    tablero[r][c] = val


def celdas_libres(tablero):
    # Row-major so the enumeration is deterministic; randomness is applied by the caller
    libres = []
    for r, fila in enumerate(tablero):
        for c, val in enumerate(fila):
            if val == 0:
                libres.append((r, c))
    return libres


def ficha_maxima(tablero):
    m = 0
    for fila in tablero:
        for val in fila:
            if val > m:
                m = val
    return m


def contiene_valor(tablero, valor):
    return any(val == valor for fila in tablero for val in fila)


def hay_fusion_adyacente(tablero):
    """True if two horizontally or vertically adjacent cells share a non-zero value."""
    tamano = len(tablero)
    for r in range(tamano):
        for c in range(tamano):
            val = tablero[r][c]
            if val == 0:
                continue
            if c + 1 < tamano and tablero[r][c+1] == val:
                return True
            if r + 1 < tamano and tablero[r+1][c] == val:
                return True
    return False
