# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-CCM para cifrado y descifrado autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger datos sensibles."""

import hashlib
import logging
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESCCM

from iot_crypto.constants import AES_KEY_SIZE, MAX_PAYLOAD_SIZE, NONCE_SIZE, TAG_SIZE
from iot_crypto.errors import AuthenticationFailed, PayloadTooLarge
from iot_crypto.keys import random_bytes
from iot_crypto.models import Envelope

logger = logging.getLogger(__name__)


def derive_symmetric_key(key_material: bytes) -> bytes:
    """Deriva una clave de 256 bits como SHA-256 del material recibido.

    Args:
        key_material (bytes): Material de longitud arbitraria (p. ej. el secreto
            compartido en hexadecimal).

    Returns:
        bytes: Digest de 32 bytes.

    """

    return hashlib.sha256(bytes(key_material)).digest()


def _check_size(size: int) -> None:
    if size >= MAX_PAYLOAD_SIZE:
        raise PayloadTooLarge(
            f"La carga debe ser menor que {MAX_PAYLOAD_SIZE} bytes, recibidos {size}."
        )


def _cipher(key_material: bytes) -> AESCCM:
    # AES-128: los 16 primeros bytes del digest.
    return AESCCM(derive_symmetric_key(key_material)[:AES_KEY_SIZE], tag_length=TAG_SIZE)


def aes_ccm_encrypt(
    key_material: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Cifra con AES-128-CCM usando un nonce aleatorio nuevo en cada llamada.

    Args:
        key_material (bytes): Material de clave de longitud arbitraria.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Sobre `nonce(12) ‖ ciphertext ‖ tag(16)`.

    Raises:
        RngFailure: Si no se puede generar el nonce.
        PayloadTooLarge: Si `plaintext` alcanza 2^24 bytes.

    """

    _check_size(len(plaintext))
    nonce = random_bytes(NONCE_SIZE)
    ct_full = _cipher(key_material).encrypt(nonce, bytes(plaintext), aad)
    envelope = Envelope(nonce=nonce, ciphertext=ct_full[:-TAG_SIZE], tag=ct_full[-TAG_SIZE:])
    logger.debug(f"Cifrado AES-CCM de {len(plaintext)} bytes")
    return envelope.to_bytes()


def aes_ccm_decrypt(
    key_material: bytes, envelope: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra un sobre AES-128-CCM verificando la etiqueta antes de liberar datos.

    Args:
        key_material (bytes): Material de clave usado al cifrar.
        envelope (bytes): Sobre `nonce ‖ ciphertext ‖ tag`.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        EnvelopeTooShort: Si el sobre tiene menos de 28 bytes.
        PayloadTooLarge: Si el ciphertext alcanza 2^24 bytes.
        AuthenticationFailed: Si la etiqueta no coincide (manipulación o clave errónea).

    """

    parts = Envelope.from_bytes(bytes(envelope))
    _check_size(len(parts.ciphertext))
    try:
        return _cipher(key_material).decrypt(parts.nonce, parts.ciphertext + parts.tag, aad)
    except InvalidTag as exc:
        logger.warning("Etiqueta AES-CCM inválida; sobre rechazado")
        raise AuthenticationFailed() from exc
