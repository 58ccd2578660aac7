# --------------------------------------------------------------
# File: log.py
# Description: Configuración centralizada del logging de la aplicación.
# --------------------------------------------------------------
"""Configura el logging estándar para los puntos de entrada."""

import logging
from typing import Optional

from iot_crypto import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Inicializa el logger raíz con el nivel configurado.

    Args:
        level (Optional[str]): Nivel explícito; si falta se usa `IOT_CRYPTO_LOG_LEVEL`.

    """

    name = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format=LOG_FORMAT)
