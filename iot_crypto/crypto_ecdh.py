# --------------------------------------------------------------
# File: crypto_ecdh.py
# Description: Acuerdo de claves ECDH P-256 entre dos dispositivos.
# --------------------------------------------------------------
"""Cálculo del secreto compartido y de la clave de sesión derivada."""

import logging

from cryptography.hazmat.primitives.asymmetric import ec

from iot_crypto.codec import encode
from iot_crypto.constants import SHARED_SECRET_SIZE
from iot_crypto.crypto_sym import derive_symmetric_key
from iot_crypto.errors import InvalidPublicKey
from iot_crypto.keys import load_private_key, load_public_key

logger = logging.getLogger(__name__)


def derive_shared_secret(private_key: bytes, peer_public_key: bytes) -> bytes:
    """Calcula la coordenada X afín de `Q_peer · k_own`.

    El resultado es simétrico: `S(A.priv, B.pub) == S(B.priv, A.pub)`. No es
    uniforme, por lo que debe pasar por un hash antes de usarse como clave
    (véase :func:`derive_session_key`).

    Args:
        private_key (bytes): Escalar privado propio de 32 bytes.
        peer_public_key (bytes): Punto SEC1 del otro extremo.

    Returns:
        bytes: Secreto compartido de 32 bytes big-endian.

    Raises:
        InvalidPublicKey: Si el punto del otro extremo no es válido.
        InvalidPrivateKey: Si el escalar propio no es válido.

    """

    peer = load_public_key(peer_public_key)
    own = load_private_key(private_key)
    try:
        shared = own.exchange(ec.ECDH(), peer)
    except ValueError as exc:
        raise InvalidPublicKey("El acuerdo produjo el punto en el infinito.") from exc
    logger.debug("Secreto compartido ECDH calculado")
    return shared.rjust(SHARED_SECRET_SIZE, b"\x00")


def derive_session_key(private_key: bytes, peer_public_key: bytes) -> bytes:
    """Deriva la clave simétrica de 256 bits de la pareja.

    Coincide con la clave que usa el AEAD cuando recibe como material el
    secreto compartido en hexadecimal.

    Returns:
        bytes: `SHA-256(hex(secreto_compartido))`.

    """

    shared_hex = encode(derive_shared_secret(private_key, peer_public_key))
    return derive_symmetric_key(shared_hex.encode("ascii"))
