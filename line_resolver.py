"""Slide-and-merge for a single line oriented toward index 0."""


def procesar_linea(linea):
    """Resolve one row or column.

    Returns (nueva_linea, moved, fusiones, pts). fusiones holds the index
    of each merged (left) cell in the zero-stripped line, before the cells
    emptied by merging are closed up.
    """
    filtrada = [val for val in linea if val != 0]
    pts = 0
    fusiones = []

    # Leftmost merge first; the emptied right cell stops a merged tile merging again
    for i in range(len(filtrada) - 1):
        if filtrada[i] != 0 and filtrada[i] == filtrada[i+1]:
            filtrada[i] *= 2
            pts += filtrada[i]
            filtrada[i+1] = 0
            fusiones.append(i)

    nueva_linea = [val for val in filtrada if val != 0]
    nueva_linea += [0] * (len(linea) - len(nueva_linea))
    moved = nueva_linea != list(linea)
    return nueva_linea, moved, fusiones, pts
