# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

from iot_crypto.constants import MIN_ENVELOPE_SIZE, NONCE_SIZE, TAG_SIZE
from iot_crypto.errors import EnvelopeTooShort


class KeyPair(BaseModel):
    """Par de claves P-256 en su forma binaria.

    Attributes:
        private_key (bytes): Escalar de 32 bytes big-endian. Nunca se transmite.
        public_key (bytes): Punto SEC1 sin comprimir de 65 bytes.

    """

    model_config = ConfigDict(frozen=True)

    private_key: bytes
    public_key: bytes

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()!r})"

    __str__ = __repr__


class Envelope(BaseModel):
    """Representa el resultado de una operación AES-CCM.

    Attributes:
        nonce (bytes): Nonce de 96 bits, único por (clave, mensaje).
        ciphertext (bytes): Datos cifrados sin etiqueta, misma longitud que el claro.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"nonce debe tener {NONCE_SIZE} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"tag debe tener {TAG_SIZE} bytes")
        return value

    def to_bytes(self) -> bytes:
        """Serializa como `nonce ‖ ciphertext ‖ tag`."""

        return self.nonce + self.ciphertext + self.tag

    @classmethod
    def from_bytes(cls, data: bytes) -> "Envelope":
        """Separa un sobre binario en sus tres componentes.

        Raises:
            EnvelopeTooShort: Si `data` no alcanza los 28 bytes de nonce + tag.

        """

        if len(data) < MIN_ENVELOPE_SIZE:
            raise EnvelopeTooShort(
                f"Se requieren al menos {MIN_ENVELOPE_SIZE} bytes, recibidos {len(data)}."
            )
        return cls(
            nonce=data[:NONCE_SIZE],
            ciphertext=data[NONCE_SIZE:-TAG_SIZE],
            tag=data[-TAG_SIZE:],
        )


class DemoStep(BaseModel):
    """Resultado de un paso de la demostración."""

    name: str
    ok: bool
    detail: str = ""


class DemoReport(BaseModel):
    """Informe completo de la demostración extremo a extremo."""

    steps: List[DemoStep] = []

    @property
    def ok(self) -> bool:
        return bool(self.steps) and all(step.ok for step in self.steps)
