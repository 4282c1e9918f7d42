# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico sobre ``cryptography`` para el códec de texto."""

import os
from typing import Optional

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_SIZE = 16  # AES-128
NONCE_SIZE = 12  # 96 bits, tamaño estándar de GCM
TAG_SIZE = 16  # 128 bits


def generate_nonce() -> bytes:
    """Genera un nonce aleatorio de 96 bits para un único mensaje."""

    return os.urandom(NONCE_SIZE)


def aes_gcm_seal(
    key: bytes, nonce: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Cifra y autentica datos con AES-GCM.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        nonce (bytes): Nonce asociado al mensaje.
        plaintext (bytes): Datos en claro.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Ciphertext seguido de la etiqueta de 16 bytes.

    Raises:
        ValueError: Si la primitiva rechaza la longitud de clave o nonce.

    """

    return AESGCM(key).encrypt(nonce, plaintext, aad)


def aes_gcm_open(
    key: bytes, nonce: bytes, sealed: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Verifica la etiqueta y descifra un bloque ``ciphertext || tag``.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Nonce utilizado durante el cifrado.
        sealed (bytes): Ciphertext con la etiqueta de autenticación al final.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la autenticación falla.

    """

    return AESGCM(key).decrypt(nonce, sealed, aad)
