# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de lectura de configuración desde variables de entorno.
# --------------------------------------------------------------

import importlib
import logging

from iot_crypto import config
from iot_crypto.log import LOG_FORMAT, configure_logging


def test_config_reads_environment(monkeypatch):
    """Comprueba que los valores se tomen de las variables IOT_CRYPTO_*."""
    monkeypatch.setenv("IOT_CRYPTO_KEYGEN_MAX_ATTEMPTS", "7")
    monkeypatch.setenv("IOT_CRYPTO_LOG_LEVEL", "debug")
    monkeypatch.setenv("IOT_CRYPTO_DEMO_MESSAGE", "ping")
    try:
        importlib.reload(config)
        assert config.KEYGEN_MAX_ATTEMPTS == 7
        assert config.LOG_LEVEL == "DEBUG"
        assert config.DEMO_MESSAGE == "ping"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_configure_logging_uses_level(monkeypatch):
    """Verifica que configure_logging traduzca el nombre del nivel."""
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging("debug")
    assert calls["level"] == logging.DEBUG
    assert calls["format"] == LOG_FORMAT

    monkeypatch.setattr(config, "LOG_LEVEL", "NOPE")
    configure_logging()
    assert calls["level"] == logging.WARNING
