# --------------------------------------------------------------
# File: errors.py
# Description: Excepciones tipadas del códec de cifrado de texto.
# --------------------------------------------------------------
"""Jerarquía de errores que la capa core expone a sus llamadores."""


class CipherError(Exception):
    """Error base de las operaciones de cifrado y descifrado."""


class EncryptionError(CipherError):
    """No se ha podido producir el texto cifrado."""


class DecryptionError(CipherError):
    """No se ha podido recuperar el texto en claro."""


class CipherConfigError(CipherError, ValueError):
    """La configuración de clave, nonce o modo es inválida o está incompleta."""
