import base64
import binascii
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from core.errors import CipherConfigError
from core.models import CipherConfig

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

NONCE_MODES = ("fixed", "random")


def _read_secret(name: str) -> Optional[bytes]:
    # La variante *_B64 tiene prioridad sobre el texto UTF-8
    encoded = os.getenv(f"{name}_B64")
    if encoded:
        try:
            return base64.b64decode(encoded.strip(), validate=True)
        except binascii.Error as exc:
            raise CipherConfigError(f"{name}_B64 no es Base64 válido") from exc
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    return raw.encode("utf-8")


def load_cipher_config() -> CipherConfig:
    """Construye la CipherConfig a partir del entorno (y del fichero .env).

    Returns:
        CipherConfig: Configuración validada e inmutable.

    Raises:
        CipherConfigError: Si falta la clave o el nonce, o no cumplen el tamaño.
    """

    key = _read_secret("CIPHER_KEY")
    if key is None:
        raise CipherConfigError("Falta CIPHER_KEY o CIPHER_KEY_B64 en la configuración")
    nonce = _read_secret("CIPHER_NONCE")
    if nonce is None:
        raise CipherConfigError("Falta CIPHER_NONCE o CIPHER_NONCE_B64 en la configuración")

    mode = os.getenv("CIPHER_NONCE_MODE", "fixed").strip().lower()
    if mode not in NONCE_MODES:
        raise CipherConfigError(f"CIPHER_NONCE_MODE desconocido: {mode!r}")

    try:
        return CipherConfig(key=key, nonce=nonce, nonce_mode=mode)
    except ValidationError as exc:
        raise CipherConfigError(f"Configuración de cifrado inválida: {exc}") from exc
