# --------------------------------------------------------------
# File: constants.py
# Description: Identificadores fijos del protocolo (curva, hash, AEAD y tamaños).
# --------------------------------------------------------------
"""Constantes del protocolo. No son parámetros negociables."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

CURVE = ec.SECP256R1()
HASH = hashes.SHA256()

# Orden del punto base de P-256.
CURVE_ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 65  # 0x04 ‖ X(32) ‖ Y(32)
COMPRESSED_PUBLIC_KEY_SIZE = 33
SHARED_SECRET_SIZE = 32
SYMMETRIC_KEY_SIZE = 32

# AES-128-CCM: se usan los 16 primeros bytes del digest SHA-256.
AES_KEY_SIZE = 16
NONCE_SIZE = 12
TAG_SIZE = 16
MIN_ENVELOPE_SIZE = NONCE_SIZE + TAG_SIZE
# CCM con nonce de 12 bytes codifica la longitud en 15 - 12 = 3 bytes.
MAX_PAYLOAD_SIZE = 2 ** (8 * (15 - NONCE_SIZE))
