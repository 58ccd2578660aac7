# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: pares de claves y configuración aislada.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from iot_crypto import config
from iot_crypto.keys import generate_keypair
from iot_crypto.models import KeyPair


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Restaura los valores por defecto de configuración para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar atributos del módulo.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setattr(config, "KEYGEN_MAX_ATTEMPTS", 64)
    monkeypatch.setattr(config, "DEMO_MESSAGE", "Hello, World!!!!!!!!")
    yield


@pytest.fixture
def alice() -> KeyPair:
    """Par de claves del primer dispositivo."""
    return generate_keypair()


@pytest.fixture
def bob() -> KeyPair:
    """Par de claves del segundo dispositivo."""
    return generate_keypair()


@pytest.fixture
def urandom_sequence(monkeypatch):
    """Sustituye `os.urandom` por una secuencia fija de respuestas.

    Returns:
        Callable[[list[bytes]], list[int]]: Instala la secuencia y devuelve la
        lista de tamaños solicitados.
    """

    def install(values):
        calls = []
        pending = list(values)

        def fake(size):
            calls.append(size)
            return pending.pop(0)

        monkeypatch.setattr("iot_crypto.keys.os.urandom", fake)
        return calls

    return install
