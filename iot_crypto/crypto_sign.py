# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Firmas ECDSA P-256 / SHA-256 con serialización DER.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación y validación ECDSA."""

from __future__ import annotations

import logging
from typing import Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from iot_crypto.constants import CURVE_ORDER, HASH
from iot_crypto.errors import (
    InvalidPublicKey,
    MalformedSignature,
    RngFailure,
)
from iot_crypto.keys import load_private_key, load_public_key

logger = logging.getLogger(__name__)


def parse_signature(signature: bytes) -> Tuple[int, int]:
    """Analiza estrictamente una firma DER y devuelve `(r, s)`.

    Args:
        signature (bytes): SEQUENCE DER con dos INTEGER.

    Returns:
        Tuple[int, int]: Componentes `r` y `s`.

    Raises:
        MalformedSignature: Si el DER no es canónico o `r`/`s` no están en [1, n-1].

    """

    try:
        r, s = decode_dss_signature(bytes(signature))
    except (ValueError, TypeError) as exc:
        raise MalformedSignature("Estructura DER inválida.") from exc
    # Rechaza codificaciones no canónicas y bytes sobrantes.
    if encode_dss_signature(r, s) != bytes(signature):
        raise MalformedSignature("Codificación DER no canónica.")
    if not (0 < r < CURVE_ORDER and 0 < s < CURVE_ORDER):
        raise MalformedSignature("r o s fuera de [1, n-1].")
    return r, s


def ecdsa_sign(message: bytes, private_key: bytes) -> bytes:
    """Firma el digest SHA-256 de `message` con un nonce aleatorio nuevo.

    Args:
        message (bytes): Mensaje que se firmará.
        private_key (bytes): Escalar privado de 32 bytes.

    Returns:
        bytes: Firma ECDSA en DER. Dos firmas del mismo mensaje difieren.

    Raises:
        InvalidPrivateKey: Si el escalar no es válido.
        RngFailure: Si la librería señala con `OSError` que no puede obtener
            aleatoriedad; cualquier otro fallo de la librería se propaga tal cual.

    """

    key = load_private_key(private_key)
    try:
        signature = key.sign(bytes(message), ec.ECDSA(HASH))
    except OSError as exc:
        raise RngFailure("No se pudo obtener el nonce de firma.") from exc
    logger.debug(f"Firma ECDSA generada ({len(signature)} bytes DER)")
    return signature


def ecdsa_verify(signature: bytes, message: bytes, public_key: bytes) -> bool:
    """Verifica una firma ECDSA sin lanzar excepciones ante datos del atacante.

    Firma mal formada, clave pública inválida y firma incorrecta se presentan
    igual: `False`.

    Args:
        signature (bytes): Firma DER.
        message (bytes): Mensaje original firmado.
        public_key (bytes): Punto SEC1 del firmante.

    Returns:
        bool: True solo si la firma es válida.

    """

    try:
        parse_signature(signature)
        key = load_public_key(public_key)
        key.verify(bytes(signature), bytes(message), ec.ECDSA(HASH))
    except (MalformedSignature, InvalidPublicKey, InvalidSignature, TypeError) as exc:
        logger.debug(f"Verificación ECDSA rechazada: {type(exc).__name__}")
        return False
    return True
