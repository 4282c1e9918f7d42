# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la carga y validación de la configuración de cifrado.
# --------------------------------------------------------------

import base64
import os

import pytest
from pydantic import ValidationError

from core.config import load_cipher_config
from core.errors import CipherConfigError
from core.models import CipherConfig


def test_load_from_text_variables():
    """La clave y el nonce en texto se codifican en UTF-8.

    Returns:
        None: Las aserciones comparan los bytes resultantes.
    """
    config = load_cipher_config()
    assert config.key == b"ThisIsA16ByteKey"
    assert config.nonce == b"Fixed12Nonce"
    assert config.algorithm == "AES-128-GCM"
    assert config.nonce_mode == "fixed"


def test_base64_variables_take_precedence(monkeypatch):
    """Las variantes *_B64 permiten claves binarias y prevalecen sobre el texto."""
    key = os.urandom(16)
    nonce = os.urandom(12)
    monkeypatch.setenv("CIPHER_KEY_B64", base64.b64encode(key).decode("ascii"))
    monkeypatch.setenv("CIPHER_NONCE_B64", base64.b64encode(nonce).decode("ascii"))
    config = load_cipher_config()
    assert config.key == key
    assert config.nonce == nonce


def test_invalid_base64_variable(monkeypatch):
    """Un valor *_B64 mal formado se rechaza con CipherConfigError."""
    monkeypatch.setenv("CIPHER_KEY_B64", "no es base64!")
    with pytest.raises(CipherConfigError):
        load_cipher_config()


@pytest.mark.parametrize("name", ["CIPHER_KEY", "CIPHER_NONCE"])
def test_missing_secret(monkeypatch, name):
    """Sin clave o sin nonce no se puede construir la configuración."""
    monkeypatch.delenv(name)
    with pytest.raises(CipherConfigError) as excinfo:
        load_cipher_config()
    assert name in str(excinfo.value)


def test_nonce_mode_from_environment(monkeypatch):
    """CIPHER_NONCE_MODE selecciona el modo de nonce sin distinguir mayúsculas."""
    monkeypatch.setenv("CIPHER_NONCE_MODE", " Random ")
    assert load_cipher_config().nonce_mode == "random"


def test_unknown_nonce_mode(monkeypatch):
    """Un modo desconocido se rechaza."""
    monkeypatch.setenv("CIPHER_NONCE_MODE", "counter")
    with pytest.raises(CipherConfigError):
        load_cipher_config()


@pytest.mark.parametrize(
    "key, nonce",
    [
        ("ShortKey", "Fixed12Nonce"),
        ("ThisIsA16ByteKey", "Fixed12ByteIV!"),
        ("ThisIsA16ByteKeyPlus", "Fixed12Nonce"),
    ],
)
def test_wrong_lengths_raise_config_error(monkeypatch, key, nonce):
    """Clave y nonce deben medir exactamente 16 y 12 bytes."""
    monkeypatch.setenv("CIPHER_KEY", key)
    monkeypatch.setenv("CIPHER_NONCE", nonce)
    with pytest.raises(CipherConfigError) as excinfo:
        load_cipher_config()
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_cipher_config_is_immutable():
    """La configuración es inmutable una vez creada."""
    config = CipherConfig(key=b"ThisIsA16ByteKey", nonce=b"Fixed12Nonce")
    with pytest.raises(ValidationError):
        config.key = b"AnotherKey16Byte"


def test_cipher_config_repr_hides_secrets():
    """La representación no incluye la clave ni el nonce."""
    config = CipherConfig(key=b"ThisIsA16ByteKey", nonce=b"Fixed12Nonce")
    text = repr(config)
    assert "ThisIsA16ByteKey" not in text
    assert "Fixed12Nonce" not in text
    assert "AES-128-GCM" in text


def test_cipher_config_rejects_other_algorithms():
    """Solo se admite AES-128-GCM como algoritmo."""
    with pytest.raises(ValidationError):
        CipherConfig(key=b"ThisIsA16ByteKey", nonce=b"Fixed12Nonce", algorithm="AES-256-GCM")
