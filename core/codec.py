# --------------------------------------------------------------
# File: codec.py
# Description: Códec de texto con AES-128-GCM y representación Base64.
# --------------------------------------------------------------
"""Cifrado y descifrado autenticado de texto Unicode bajo una configuración fija.

El resultado de :meth:`CipherCodec.encrypt` es Base64 estándar (RFC 4648, sin
saltos de línea) de ``ciphertext || tag``. En modo ``random`` el nonce de
12 bytes se antepone: ``nonce || ciphertext || tag``.
"""

import base64
from functools import lru_cache

from cryptography.exceptions import InvalidTag

from core.config import load_cipher_config
from core.crypto_sym import NONCE_SIZE, TAG_SIZE, aes_gcm_open, aes_gcm_seal, generate_nonce
from core.errors import CipherConfigError, DecryptionError, EncryptionError
from core.logger import get_logger
from core.models import CipherConfig

logger = get_logger("codec")

# Mensaje único para cualquier fallo de descifrado; no revela la etapa.
DECRYPTION_FAILED = "Decryption failed: el texto no es válido o no se pudo autenticar"


class CipherCodec:
    """Transformación sin estado entre texto en claro y texto cifrado codificado."""

    def __init__(self, config: CipherConfig):
        self._config = config
        if config.nonce_mode == "fixed":
            # SECURITY: reutilizar el nonce con la misma clave anula la confidencialidad de GCM.
            logger.warning(
                "Nonce fijo reutilizado en cada mensaje (%s); usa CIPHER_NONCE_MODE=random",
                config.algorithm,
            )

    @property
    def config(self) -> CipherConfig:
        return self._config

    def encrypt(self, plaintext: str) -> str:
        """Cifra un texto y devuelve su representación Base64.

        Args:
            plaintext (str): Texto Unicode arbitrario, puede estar vacío.

        Returns:
            str: Base64 de ``ciphertext || tag`` (con el nonce delante en modo ``random``).

        Raises:
            EncryptionError: Si el texto no es codificable en UTF-8 o la
                primitiva rechaza la clave o el nonce.

        """

        if not isinstance(plaintext, str):
            raise EncryptionError(
                f"Encryption failed: se esperaba str, recibido {type(plaintext).__name__}"
            )
        try:
            data = plaintext.encode("utf-8")
            if self._config.nonce_mode == "random":
                nonce = generate_nonce()
                payload = nonce + aes_gcm_seal(self._config.key, nonce, data)
            else:
                payload = aes_gcm_seal(self._config.key, self._config.nonce, data)
        except ValueError as exc:
            # UnicodeEncodeError también es ValueError
            raise EncryptionError(f"Encryption failed: {exc}") from exc

        logger.debug("Cifrados %d bytes (%d bytes de salida)", len(data), len(payload))
        return base64.b64encode(payload).decode("ascii")

    def decrypt(self, encoded: str) -> str:
        """Descifra un texto Base64 producido por :meth:`encrypt`.

        Args:
            encoded (str): Texto cifrado en Base64; se ignoran espacios en los extremos.

        Returns:
            str: Texto original.

        Raises:
            DecryptionError: Si el Base64 es inválido, la etiqueta no verifica
                (datos alterados, clave o nonce distintos) o el resultado no es UTF-8.

        """

        if not isinstance(encoded, str):
            raise DecryptionError(DECRYPTION_FAILED)
        try:
            raw = base64.b64decode(encoded.strip(), validate=True)
            if self._config.nonce_mode == "random":
                if len(raw) < NONCE_SIZE + TAG_SIZE:
                    raise ValueError("datos demasiado cortos")
                nonce, sealed = raw[:NONCE_SIZE], raw[NONCE_SIZE:]
            else:
                if len(raw) < TAG_SIZE:
                    raise ValueError("datos demasiado cortos")
                nonce, sealed = self._config.nonce, raw
            plaintext = aes_gcm_open(self._config.key, nonce, sealed)
            text = plaintext.decode("utf-8")
        except (InvalidTag, ValueError) as exc:
            # binascii.Error y UnicodeDecodeError son subclases de ValueError
            logger.info("Descifrado rechazado (%s)", type(exc).__name__)
            raise DecryptionError(DECRYPTION_FAILED) from exc

        logger.debug("Descifrados %d bytes", len(plaintext))
        return text


@lru_cache(maxsize=1)
def get_default_codec() -> CipherCodec:
    """Devuelve el códec construido una sola vez desde la configuración del entorno."""

    return CipherCodec(load_cipher_config())


def encrypt_text(text: str) -> str:
    """Cifra ``text`` con el códec por defecto.

    Raises:
        EncryptionError: Si la configuración es inválida o el cifrado falla.
    """

    try:
        codec = get_default_codec()
    except CipherConfigError as exc:
        raise EncryptionError(f"Encryption failed: {exc}") from exc
    return codec.encrypt(text)


def decrypt_text(text: str) -> str:
    """Descifra ``text`` con el códec por defecto.

    Raises:
        DecryptionError: Si la configuración es inválida o el descifrado falla.
    """

    try:
        codec = get_default_codec()
    except CipherConfigError as exc:
        raise DecryptionError(DECRYPTION_FAILED) from exc
    return codec.decrypt(text)
