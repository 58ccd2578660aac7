# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de las primitivas criptográficas.
# --------------------------------------------------------------
"""Errores tipados para distinguir fallos de entrada de fallos del entorno.

Todos heredan de :class:`IotCryptoError` y exponen un ``code`` estable que
permite a los llamadores reaccionar sin analizar el mensaje.
"""


class IotCryptoError(Exception):
    """Excepción base de la librería.

    Attributes:
        message (str): Descripción legible del error.
        code (str): Identificador estable del tipo de error.
    """

    code = "iot_crypto_error"
    default_message = "Error criptográfico."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RngFailure(IotCryptoError):
    """La fuente de entropía no está disponible. Es fatal para la operación."""

    code = "rng_failure"
    default_message = "Fuente de aleatoriedad segura no disponible."


class InvalidEncoding(IotCryptoError):
    """Entrada hexadecimal mal formada."""

    code = "invalid_encoding"
    default_message = "Codificación hexadecimal inválida."


class InvalidPrivateKey(IotCryptoError):
    """Escalar privado con longitud incorrecta o fuera de [1, n-1]."""

    code = "invalid_private_key"
    default_message = "Clave privada inválida."


class InvalidPublicKey(IotCryptoError):
    """La clave pública no es un punto válido de la curva."""

    code = "invalid_public_key"
    default_message = "Clave pública inválida."


class MalformedSignature(IotCryptoError):
    """Firma DER estructuralmente inválida o con r/s fuera de rango."""

    code = "malformed_signature"
    default_message = "Firma DER mal formada."


class EnvelopeTooShort(IotCryptoError):
    """El sobre cifrado no alcanza nonce + tag."""

    code = "envelope_too_short"
    default_message = "Sobre cifrado demasiado corto."


class PayloadTooLarge(IotCryptoError):
    """La carga supera el máximo que admite AES-CCM con nonce de 12 bytes."""

    code = "payload_too_large"
    default_message = "Carga demasiado grande para AES-CCM."


class AuthenticationFailed(IotCryptoError):
    """Tag inválido: manipulación o clave incorrecta. No se libera texto en claro."""

    code = "authentication_failed"
    default_message = "Fallo de autenticación del sobre cifrado."


__all__ = [
    "IotCryptoError",
    "RngFailure",
    "InvalidEncoding",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "MalformedSignature",
    "EnvelopeTooShort",
    "PayloadTooLarge",
    "AuthenticationFailed",
]
