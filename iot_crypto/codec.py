# --------------------------------------------------------------
# File: codec.py
# Description: Conversión entre bytes y cadenas hexadecimales en minúsculas.
# --------------------------------------------------------------
"""Codec hexadecimal usado en todas las fronteras externas."""

from __future__ import annotations

import re

from iot_crypto.errors import InvalidEncoding

__all__ = ["encode", "decode"]

HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


def encode(data: bytes) -> str:
    """Codifica bytes como `2 * len(data)` caracteres hexadecimales en minúsculas."""

    return bytes(data).hex()


def decode(value: str) -> bytes:
    """Decodifica una cadena hexadecimal de longitud par.

    Args:
        value (str): Dígitos hexadecimales, sin espacios ni prefijos.

    Returns:
        bytes: Datos binarios originales.

    Raises:
        InvalidEncoding: Si la longitud es impar o aparece un carácter no hexadecimal.

    """

    if not isinstance(value, str):
        raise InvalidEncoding(f"Se esperaba str, recibido {type(value).__name__}.")
    if len(value) % 2:
        raise InvalidEncoding("Longitud hexadecimal impar.")
    # bytes.fromhex tolera espacios; aquí solo se aceptan dígitos.
    if HEX.fullmatch(value) is None:
        raise InvalidEncoding("Carácter no hexadecimal en la entrada.")
    return bytes.fromhex(value)
