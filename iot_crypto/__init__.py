# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las primitivas criptográficas del paquete.
# --------------------------------------------------------------
"""Primitivas P-256 para dispositivos IoT: claves, ECDSA, ECDH y AES-CCM."""

__all__ = [
    "codec",
    "config",
    "constants",
    "crypto_ecdh",
    "crypto_sign",
    "crypto_sym",
    "errors",
    "keys",
    "log",
    "models",
]
