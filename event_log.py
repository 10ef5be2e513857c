import logging
import os
import sys

from constants import ARCHIVO_LOG, NOMBRE_LOGGER


def configurar_logging(ruta=None):
    """Attach a file handler to the engine logger (once) and return the log path."""
    if ruta is None:
        if getattr(sys, 'frozen', False):
            # Frozen executable
            base_pth = os.path.dirname(sys.executable)
        else:
            base_pth = os.path.dirname(os.path.abspath(__file__))
        ruta = os.path.join(base_pth, ARCHIVO_LOG)

        # Fall back to the home directory if the install dir is read-only
        if not os.access(base_pth, os.W_OK):
            ruta = os.path.join(os.path.expanduser("~"), ARCHIVO_LOG)

    logger = logging.getLogger(NOMBRE_LOGGER)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.FileHandler(ruta, mode='a', encoding='utf-8')
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("--- LOG START ---")
    logger.info(f"Event log active at: {ruta}")
    return ruta


def log_event(category, message):
    # Strip trailing whitespace before logging
    msg_clean = str(message).rstrip()
    logging.getLogger(NOMBRE_LOGGER).info(f"[{category}] {msg_clean}")
