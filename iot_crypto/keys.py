# --------------------------------------------------------------
# File: keys.py
# Description: Generación de escalares privados P-256 y derivación de claves públicas.
# --------------------------------------------------------------
"""Gestión de pares de claves sobre NIST P-256."""

from __future__ import annotations

import logging
import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from iot_crypto import config
from iot_crypto.constants import (
    COMPRESSED_PUBLIC_KEY_SIZE,
    CURVE,
    CURVE_ORDER,
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
)
from iot_crypto.errors import InvalidPrivateKey, InvalidPublicKey, RngFailure
from iot_crypto.models import KeyPair

logger = logging.getLogger(__name__)


def random_bytes(size: int) -> bytes:
    """Obtiene `size` bytes del CSPRNG del sistema.

    Raises:
        RngFailure: Si el sistema no dispone de una fuente segura.

    """

    try:
        return os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        logger.error(f"CSPRNG no disponible: {exc}")
        raise RngFailure(f"No se pudieron obtener {size} bytes aleatorios.") from exc


def generate_private_key() -> bytes:
    """Genera un escalar privado uniforme en [1, n-1].

    Usa muestreo por rechazo: los candidatos iguales a 0 o >= n se descartan
    en lugar de reducirse módulo n.

    Returns:
        bytes: Escalar de 32 bytes big-endian.

    Raises:
        RngFailure: Si la fuente no está disponible o agota los reintentos.

    """

    for attempt in range(1, config.KEYGEN_MAX_ATTEMPTS + 1):
        candidate = random_bytes(PRIVATE_KEY_SIZE)
        scalar = int.from_bytes(candidate, "big")
        if 0 < scalar < CURVE_ORDER:
            if attempt > 1:
                logger.debug(f"Escalar aceptado tras {attempt} intentos")
            return candidate
    logger.error(f"Sin escalar válido tras {config.KEYGEN_MAX_ATTEMPTS} intentos")
    raise RngFailure("La fuente de entropía no produce escalares válidos.")


def private_scalar(private_key: bytes) -> int:
    """Valida la clave privada y devuelve su escalar.

    Raises:
        InvalidPrivateKey: Si no tiene 32 bytes o queda fuera de [1, n-1].

    """

    if not isinstance(private_key, (bytes, bytearray)) or len(private_key) != PRIVATE_KEY_SIZE:
        raise InvalidPrivateKey(f"La clave privada debe tener {PRIVATE_KEY_SIZE} bytes.")
    scalar = int.from_bytes(private_key, "big")
    if not 0 < scalar < CURVE_ORDER:
        raise InvalidPrivateKey("El escalar privado está fuera de [1, n-1].")
    return scalar


def load_private_key(private_key: bytes) -> ec.EllipticCurvePrivateKey:
    """Construye el objeto de clave privada de `cryptography`."""

    scalar = private_scalar(private_key)
    try:
        return ec.derive_private_key(scalar, CURVE)
    except ValueError as exc:
        raise InvalidPrivateKey(str(exc)) from exc


def load_public_key(public_key: bytes) -> ec.EllipticCurvePublicKey:
    """Decodifica un punto SEC1 (sin comprimir o comprimido) y lo valida en la curva.

    Raises:
        InvalidPublicKey: Si la longitud, el prefijo o el punto no son válidos.

    """

    if not isinstance(public_key, (bytes, bytearray)):
        raise InvalidPublicKey("La clave pública debe ser binaria.")
    size = len(public_key)
    if size == PUBLIC_KEY_SIZE and public_key[0] == 0x04:
        pass
    elif size == COMPRESSED_PUBLIC_KEY_SIZE and public_key[0] in (0x02, 0x03):
        pass
    else:
        # Incluye la codificación del punto en el infinito (0x00).
        raise InvalidPublicKey(f"Codificación SEC1 no admitida ({size} bytes).")
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(CURVE, bytes(public_key))
    except ValueError as exc:
        raise InvalidPublicKey("El punto no pertenece a la curva P-256.") from exc


def encode_public_key(public_key: ec.EllipticCurvePublicKey) -> bytes:
    """Serializa un punto en formato sin comprimir `04 ‖ X ‖ Y`."""

    return public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint,
    )


def derive_public_key(private_key: bytes) -> bytes:
    """Calcula `k · G` para el escalar dado.

    Args:
        private_key (bytes): Escalar privado de 32 bytes.

    Returns:
        bytes: Punto sin comprimir de 65 bytes que empieza por 0x04.

    """

    return encode_public_key(load_private_key(private_key).public_key())


def generate_keypair() -> KeyPair:
    """Genera un escalar nuevo junto con su clave pública."""

    private_key = generate_private_key()
    return KeyPair(private_key=private_key, public_key=derive_public_key(private_key))
