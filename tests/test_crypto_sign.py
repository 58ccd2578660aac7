# --------------------------------------------------------------
# File: test_crypto_sign.py
# Description: Pruebas para las primitivas de firma digital ECDSA P-256.
# --------------------------------------------------------------

import pytest
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

from iot_crypto.constants import CURVE_ORDER
from iot_crypto.crypto_sign import ecdsa_sign, ecdsa_verify, parse_signature
from iot_crypto.errors import InvalidPrivateKey, MalformedSignature, RngFailure
from iot_crypto.keys import derive_public_key

MESSAGE = b"Hello, World!!!!!!!!"


def _flip(data: bytes, bit: int) -> bytes:
    """Invierte un único bit de `data`.

    Args:
        data (bytes): Bloque original.
        bit (int): Índice del bit a invertir.

    Returns:
        bytes: Copia con el bit invertido.
    """
    out = bytearray(data)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)


def test_sign_verify_ok(alice):
    """Comprueba que la firma generada sea válida con la clave correspondiente."""
    sig = ecdsa_sign(MESSAGE, alice.private_key)
    assert ecdsa_verify(sig, MESSAGE, alice.public_key) is True


def test_concrete_scenario_message_changed():
    """Escenario fijo: la firma de un mensaje no valida otro distinto."""
    priv = bytes.fromhex("deadbeef" * 8)
    pub = derive_public_key(priv)
    assert pub[0] == 0x04 and len(pub) == 65
    sig = ecdsa_sign(b"Hello, World!!!!!!!!", priv)
    assert ecdsa_verify(sig, b"Hello, World!!!!!!!!", pub)
    assert not ecdsa_verify(sig, b"Hello, World!", pub)


def test_signatures_are_randomized_and_both_verify(alice):
    sig1 = ecdsa_sign(MESSAGE, alice.private_key)
    sig2 = ecdsa_sign(MESSAGE, alice.private_key)
    assert sig1 != sig2
    assert ecdsa_verify(sig1, MESSAGE, alice.public_key)
    assert ecdsa_verify(sig2, MESSAGE, alice.public_key)


def test_verify_fails_with_other_key(alice, bob):
    """Verifica que otra clave pública no valide la firma."""
    sig = ecdsa_sign(MESSAGE, alice.private_key)
    assert ecdsa_verify(sig, MESSAGE, bob.public_key) is False


def test_verify_fails_if_any_message_bit_flipped(alice):
    """Comprueba que alterar cualquier bit del mensaje invalide la firma."""
    data = b"abc123"
    sig = ecdsa_sign(data, alice.private_key)
    for bit in range(len(data) * 8):
        assert not ecdsa_verify(sig, _flip(data, bit), alice.public_key)


def test_verify_fails_if_any_signature_bit_flipped(alice):
    """Comprueba que alterar cualquier bit de la firma la invalide sin excepciones."""
    sig = ecdsa_sign(MESSAGE, alice.private_key)
    for bit in range(len(sig) * 8):
        assert not ecdsa_verify(_flip(sig, bit), MESSAGE, alice.public_key)


@pytest.mark.parametrize(
    "public_key",
    [b"", b"\x00", b"\x04" + bytes(64), b"\x04" + b"\x01" * 64],
)
def test_verify_returns_false_for_invalid_public_key(alice, public_key):
    sig = ecdsa_sign(MESSAGE, alice.private_key)
    assert ecdsa_verify(sig, MESSAGE, public_key) is False


def test_verify_returns_false_for_garbage_signature(alice):
    assert ecdsa_verify(b"", MESSAGE, alice.public_key) is False
    assert ecdsa_verify(b"\x30\x00", MESSAGE, alice.public_key) is False
    assert ecdsa_verify(b"not a signature", MESSAGE, alice.public_key) is False


def test_parse_signature_returns_components(alice):
    sig = ecdsa_sign(MESSAGE, alice.private_key)
    r, s = parse_signature(sig)
    assert 0 < r < CURVE_ORDER and 0 < s < CURVE_ORDER
    assert encode_dss_signature(r, s) == sig


@pytest.mark.parametrize(
    "r, s",
    [(0, 1), (1, 0), (CURVE_ORDER, 1), (1, CURVE_ORDER + 5)],
)
def test_parse_signature_rejects_out_of_range(r, s):
    """Valida que r/s fuera de [1, n-1] produzcan MalformedSignature.

    Args:
        r (int): Componente r candidato.
        s (int): Componente s candidato.
    """
    with pytest.raises(MalformedSignature):
        parse_signature(encode_dss_signature(r, s))


def test_parse_signature_rejects_trailing_bytes(alice):
    sig = ecdsa_sign(MESSAGE, alice.private_key)
    with pytest.raises(MalformedSignature):
        parse_signature(sig + b"\x00")
    assert not ecdsa_verify(sig + b"\x00", MESSAGE, alice.public_key)


def test_sign_rejects_invalid_private_key():
    with pytest.raises(InvalidPrivateKey):
        ecdsa_sign(MESSAGE, bytes(32))


def test_sign_maps_library_rng_error(monkeypatch):
    """Un OSError de la librería al firmar se traduce en RngFailure."""

    class _BrokenKey:
        def sign(self, data, algorithm):
            raise OSError("sin entropía")

    monkeypatch.setattr("iot_crypto.crypto_sign.load_private_key", lambda key: _BrokenKey())
    with pytest.raises(RngFailure):
        ecdsa_sign(MESSAGE, (1).to_bytes(32, "big"))
