# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas que fijan la configuración de cifrado por prueba.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from core.codec import CipherCodec, get_default_codec
from core.models import CipherConfig

TEST_KEY = b"ThisIsA16ByteKey"
TEST_NONCE = b"Fixed12Nonce"


@pytest.fixture(autouse=True)
def _cipher_env(monkeypatch) -> Iterator[None]:
    """Define la clave y el nonce de pruebas y limpia el códec en caché.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ("CIPHER_KEY_B64", "CIPHER_NONCE_B64", "CIPHER_NONCE_MODE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CIPHER_KEY", TEST_KEY.decode("ascii"))
    monkeypatch.setenv("CIPHER_NONCE", TEST_NONCE.decode("ascii"))
    get_default_codec.cache_clear()

    yield

    get_default_codec.cache_clear()


@pytest.fixture
def config() -> CipherConfig:
    """Configuración en modo de nonce fijo usada por las pruebas del códec."""
    return CipherConfig(key=TEST_KEY, nonce=TEST_NONCE)


@pytest.fixture
def codec(config) -> CipherCodec:
    """Códec construido a partir de la configuración de pruebas."""
    return CipherCodec(config)
