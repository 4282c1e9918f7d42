# --------------------------------------------------------------
# File: services.py
# Description: Servicios que conectan la interfaz con el códec de cifrado de texto.
# --------------------------------------------------------------
"""Manejadores independientes de la interfaz para cifrar y descifrar texto."""

from typing import Tuple

from core.codec import decrypt_text, encrypt_text
from core.errors import CipherError
from core.logger import get_logger

logger = get_logger("services")

EMPTY_ENCRYPT_INPUT = "Introduce el texto que quieres cifrar."
EMPTY_DECRYPT_INPUT = "Introduce el texto que quieres descifrar."


def _error_message(exc: CipherError) -> str:
    """Compone el mensaje de error mostrado al usuario."""

    return f"Se ha producido un error: {exc}"


def handle_encrypt(text: str) -> Tuple[bool, str]:
    """Cifra el texto introducido por el usuario sin propagar errores.

    Args:
        text (str): Contenido del campo de entrada.

    Returns:
        Tuple[bool, str]: Indicador de éxito y el texto cifrado o el mensaje
        que debe mostrarse en el campo de salida.
    """

    if not text or not text.strip():
        return False, EMPTY_ENCRYPT_INPUT

    try:
        return True, encrypt_text(text)
    except CipherError as exc:
        logger.error("Fallo al cifrar: %s", exc)
        return False, _error_message(exc)


def handle_decrypt(text: str) -> Tuple[bool, str]:
    """Descifra el texto introducido por el usuario sin propagar errores.

    Args:
        text (str): Texto cifrado en Base64 pegado por el usuario.

    Returns:
        Tuple[bool, str]: Indicador de éxito y el texto en claro o el mensaje
        de error para la interfaz.
    """

    if not text or not text.strip():
        return False, EMPTY_DECRYPT_INPUT

    try:
        return True, decrypt_text(text)
    except CipherError as exc:
        logger.warning("Fallo al descifrar: %s", exc)
        return False, _error_message(exc)
