"""Settings file handling and session construction from settings."""
import json
import logging
import os

from constants import (
    ARCHIVO_AJUSTES, AJUSTES_POR_DEFECTO, NOMBRE_LOGGER, TAMANO_MIN, TAMANO_MAX
)
from game_logic import Logica2048
from grid import es_valor_ficha
from score_store import AlmacenRecordJSON

logger = logging.getLogger(NOMBRE_LOGGER)


def validar_ajustes(ajustes):
    tamano = ajustes['tamano']
    if not isinstance(tamano, int) or not TAMANO_MIN <= tamano <= TAMANO_MAX:
        raise ValueError(f"Size {tamano!r} out of range ({TAMANO_MIN}-{TAMANO_MAX})")

    victoria = ajustes['valor_victoria']
    if not isinstance(victoria, int) or victoria < 4 or not es_valor_ficha(victoria):
        raise ValueError(f"Win value {victoria!r} must be a power of two >= 4")

    max_historial = ajustes['max_historial']
    if max_historial is not None and (not isinstance(max_historial, int) or max_historial < 1):
        raise ValueError(f"History depth {max_historial!r} must be a positive integer or null")

    if not isinstance(ajustes['archivo_record'], str) or not ajustes['archivo_record']:
        raise ValueError("archivo_record must be a file path")
    return ajustes


def cargar_ajustes(ruta=ARCHIVO_AJUSTES):
    ajustes = dict(AJUSTES_POR_DEFECTO)
    if not os.path.exists(ruta):
        return ajustes
    try:
        with open(ruta, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings root must be an object")
        ajustes.update({k: v for k, v in data.items() if k in AJUSTES_POR_DEFECTO})
        return validar_ajustes(ajustes)
    except (OSError, ValueError) as e:
        logger.error(f"Error loading settings, using defaults: {e}")
    return dict(AJUSTES_POR_DEFECTO)


def guardar_ajustes(ajustes, ruta=ARCHIVO_AJUSTES):
    validar_ajustes(ajustes)
    try:
        with open(ruta, 'w') as f:
            json.dump(ajustes, f, indent=2)
    except OSError as e:
        logger.error(f"Error saving settings: {e}")


def crear_juego(ajustes=None, rng=None, almacen=None):
    if ajustes is None:
        ajustes = cargar_ajustes()
    else:
        ajustes = validar_ajustes({**AJUSTES_POR_DEFECTO, **ajustes})
    if almacen is None:
        almacen = AlmacenRecordJSON(ajustes['archivo_record'])
    return Logica2048(
        tamano=ajustes['tamano'],
        valor_victoria=ajustes['valor_victoria'],
        rng=rng,
        almacen=almacen,
        max_historial=ajustes['max_historial'],
    )
