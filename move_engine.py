"""Direction handling on top of the line resolver.

Every direction is reduced to "slide toward index 0" by listing, for each
line, the real (row, col) positions in the order the resolver must see them.
Right and down walk their line backwards, so resolver index i lands on
column / row N-1-i.
"""
from constants import ARRIBA, ABAJO, IZQUIERDA, DERECHA, DIRECCIONES
from grid import copiar_tablero
from line_resolver import procesar_linea


def validar_direccion(direccion):
    if direccion not in DIRECCIONES:
        raise ValueError(
            f"Invalid direction: {direccion!r}. Must be one of {', '.join(DIRECCIONES)}"
        )


def posiciones_linea(tamano, direccion, k):
    """Positions of line k for direccion, ordered so sliding goes toward index 0."""
    if direccion == IZQUIERDA:
        return [(k, c) for c in range(tamano)]
    if direccion == DERECHA:
        return [(k, tamano - 1 - i) for i in range(tamano)]
    if direccion == ARRIBA:
        return [(r, k) for r in range(tamano)]
    if direccion == ABAJO:
        return [(tamano - 1 - i, k) for i in range(tamano)]
    validar_direccion(direccion)


def resolver_movimiento(tablero, direccion):
    """Apply a move to a copy of tablero.

    Returns a dict with 'moved', 'tablero' (new grid), 'puntos' and
    'fusiones' (real positions where a merge landed).
    """
    validar_direccion(direccion)
    tamano = len(tablero)
    nuevo_tablero = copiar_tablero(tablero)
    cambio = False
    puntos = 0
    fusiones = []

    for k in range(tamano):
        posiciones = posiciones_linea(tamano, direccion, k)
        linea = [tablero[r][c] for r, c in posiciones]
        procesada, moved, indices, pts = procesar_linea(linea)
        if moved:
            cambio = True
        for (r, c), val in zip(posiciones, procesada):
            nuevo_tablero[r][c] = val
        puntos += pts
        fusiones.extend(posiciones[i] for i in indices)

    return {
        'moved': cambio,
        'tablero': nuevo_tablero,
        'puntos': puntos,
        'fusiones': fusiones,
    }


def movimientos_validos(tablero):
    return [d for d in DIRECCIONES if resolver_movimiento(tablero, d)['moved']]
