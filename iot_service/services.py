# --------------------------------------------------------------
# File: services.py
# Description: Frontera hexadecimal de las primitivas para los dispositivos IoT.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que aceptan y devuelven cadenas hexadecimales."""

import logging

from iot_crypto import codec
from iot_crypto.constants import PRIVATE_KEY_SIZE
from iot_crypto.crypto_ecdh import derive_shared_secret
from iot_crypto.crypto_sign import ecdsa_sign, ecdsa_verify
from iot_crypto.crypto_sym import aes_ccm_decrypt, aes_ccm_encrypt
from iot_crypto.errors import InvalidEncoding, InvalidPrivateKey, InvalidPublicKey
from iot_crypto.keys import derive_public_key as _derive_public_key
from iot_crypto.keys import generate_private_key as _generate_private_key

logger = logging.getLogger(__name__)


def _private_key(private_key_hex: str) -> bytes:
    """Decodifica una clave privada hexadecimal de 64 caracteres.

    Args:
        private_key_hex (str): Escalar privado en hexadecimal.

    Returns:
        bytes: Escalar de 32 bytes.
    """

    data = codec.decode(private_key_hex)
    if len(data) != PRIVATE_KEY_SIZE:
        raise InvalidPrivateKey(f"Se esperaban {2 * PRIVATE_KEY_SIZE} caracteres hexadecimales.")
    return data


def _public_key(public_key_hex: str) -> bytes:
    """Decodifica una clave pública hexadecimal; la validación del punto se hace después."""

    data = codec.decode(public_key_hex)
    if not data:
        raise InvalidPublicKey("Clave pública vacía.")
    return data


def generate_private_key() -> str:
    """Genera una clave privada y la devuelve como 64 caracteres hexadecimales."""

    return codec.encode(_generate_private_key())


def derive_public_key(private_key_hex: str) -> str:
    """Deriva la clave pública sin comprimir (130 caracteres, prefijo `04`)."""

    return codec.encode(_derive_public_key(_private_key(private_key_hex)))


def sign(message: str, private_key_hex: str) -> str:
    """Firma `message` (UTF-8) y devuelve la firma DER en hexadecimal.

    Args:
        message (str): Mensaje en claro.
        private_key_hex (str): Clave privada de 64 caracteres.

    Returns:
        str: Firma DER codificada en hexadecimal.
    """

    return codec.encode(ecdsa_sign(message.encode("utf-8"), _private_key(private_key_hex)))


def verify(signature_hex: str, message: str, public_key_hex: str) -> bool:
    """Verifica una firma; cualquier entrada inválida devuelve False.

    Args:
        signature_hex (str): Firma DER en hexadecimal.
        message (str): Mensaje original.
        public_key_hex (str): Clave pública en hexadecimal.

    Returns:
        bool: True si la firma es válida para el mensaje y la clave.
    """

    try:
        signature = codec.decode(signature_hex)
        public_key = codec.decode(public_key_hex)
    except InvalidEncoding:
        return False
    return ecdsa_verify(signature, message.encode("utf-8"), public_key)


def get_shared_key(private_key_hex: str, public_key_hex: str) -> str:
    """Calcula el secreto compartido ECDH (64 caracteres hexadecimales).

    El valor está pensado para pasarse como clave a :func:`encrypt`, que siempre
    lo somete a SHA-256 antes de usarlo.
    """

    secret = derive_shared_secret(_private_key(private_key_hex), _public_key(public_key_hex))
    return codec.encode(secret)


def encrypt(key: str, message: str) -> str:
    """Cifra `message` bajo el material `key` y devuelve el sobre en hexadecimal.

    Args:
        key (str): Material de clave de cualquier longitud.
        message (str): Mensaje en claro.

    Returns:
        str: `24 + 2 * len(message_utf8) + 32` caracteres hexadecimales.
    """

    envelope = aes_ccm_encrypt(key.encode("utf-8"), message.encode("utf-8"))
    return codec.encode(envelope)


def decrypt(key: str, envelope_hex: str) -> str:
    """Descifra un sobre hexadecimal producido por :func:`encrypt`.

    Args:
        key (str): Material de clave usado al cifrar.
        envelope_hex (str): Sobre `nonce ‖ ciphertext ‖ tag` en hexadecimal.

    Returns:
        str: Mensaje original.
    """

    plaintext = aes_ccm_decrypt(key.encode("utf-8"), codec.decode(envelope_hex))
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding("El texto descifrado no es UTF-8 válido.") from exc
