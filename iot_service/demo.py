# --------------------------------------------------------------
# File: demo.py
# Description: Flujo de demostración extremo a extremo entre dos dispositivos.
# --------------------------------------------------------------
"""Ejecuta la secuencia completa de primitivas y devuelve un informe por pasos."""

import logging
from typing import Callable, Optional

from iot_crypto import config
from iot_crypto.errors import IotCryptoError
from iot_crypto.models import DemoReport, DemoStep
from iot_service import services

logger = logging.getLogger(__name__)

# Firma ajena a cualquier clave recién generada; nunca debe verificar.
FOREIGN_SIGNATURE = (
    "304402206caa7f734d7ed1abdf6295922daf47e32efa849fbf8fd8128291f59135ad1763"
    "02200a529b628f534083c400c80822c64a68f08a188e7375c9b129a7a8a7d37d4542"
)
FOREIGN_MESSAGE = "Hello, World!"


def _step(report: DemoReport, name: str, action: Callable[[], tuple]) -> Optional[tuple]:
    """Ejecuta un paso y lo registra en el informe sin propagar errores criptográficos."""

    try:
        ok, detail, *values = action()
    except IotCryptoError as exc:
        logger.error(f"[{name}] {exc.code}: {exc.message}")
        report.steps.append(DemoStep(name=name, ok=False, detail=f"{exc.code}: {exc.message}"))
        return None
    report.steps.append(DemoStep(name=name, ok=ok, detail=detail))
    logger.info(f"[{name}] {'OK' if ok else 'FALLO'}")
    return tuple(values)


def run_demo(message: Optional[str] = None) -> DemoReport:
    """Reproduce el flujo firma → verificación → acuerdo → cifrado → descifrado.

    Args:
        message (Optional[str]): Mensaje a firmar y cifrar; por defecto `DEMO_MESSAGE`.

    Returns:
        DemoReport: Resultado de cada paso. `report.ok` indica éxito global.

    """

    message = config.DEMO_MESSAGE if message is None else message
    report = DemoReport()

    def keygen():
        priv = services.generate_private_key()
        return True, f"Private Key: {len(priv) // 2} bytes", priv

    values = _step(report, "generate_private_key", keygen)
    if values is None:
        return report
    (private_key,) = values

    def pubkey():
        pub = services.derive_public_key(private_key)
        return pub.startswith("04") and len(pub) == 130, f"Public Key: {pub}", pub

    values = _step(report, "derive_public_key", pubkey)
    if values is None:
        return report
    (public_key,) = values

    def signing():
        sig = services.sign(message, private_key)
        return True, f"Signature: {sig}", sig

    values = _step(report, "sign", signing)
    if values is None:
        return report
    (signature,) = values

    _step(
        report,
        "verify",
        lambda: (services.verify(signature, message, public_key), "Signature Valid"),
    )

    def agreement():
        alice_priv = services.generate_private_key()
        bob_priv = services.generate_private_key()
        shared_a = services.get_shared_key(alice_priv, services.derive_public_key(bob_priv))
        shared_b = services.get_shared_key(bob_priv, services.derive_public_key(alice_priv))
        return shared_a == shared_b, f"SharedKey Value: {shared_a}", shared_a, shared_b

    values = _step(report, "shared_key", agreement)
    if values is not None:
        shared_a, shared_b = values

        def roundtrip():
            encrypted = services.encrypt(shared_a, message)
            decrypted = services.decrypt(shared_b, encrypted)
            return decrypted == message, f"Encrypted: {encrypted}"

        _step(report, "encrypt_decrypt", roundtrip)

    def foreign():
        other_pub = services.derive_public_key(services.generate_private_key())
        accepted = services.verify(FOREIGN_SIGNATURE, FOREIGN_MESSAGE, other_pub)
        return not accepted, "Firma ajena rechazada" if not accepted else "Firma ajena aceptada"

    _step(report, "reject_foreign_signature", foreign)
    return report
