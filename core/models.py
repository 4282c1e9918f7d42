# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan la configuración del cifrado de texto."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.crypto_sym import KEY_SIZE, NONCE_SIZE


class CipherConfig(BaseModel):
    """Configuración inmutable compartida por todas las llamadas de cifrado.

    Attributes:
        key (bytes): Clave simétrica AES-128 de 16 bytes.
        nonce (bytes): Nonce GCM de 12 bytes reutilizado en modo ``fixed``.
        algorithm (str): Identificador del algoritmo, siempre ``AES-128-GCM``.
        nonce_mode (str): ``fixed`` reutiliza ``nonce``; ``random`` genera uno
            nuevo por mensaje y lo antepone a la salida.

    """

    model_config = ConfigDict(frozen=True)

    key: bytes = Field(repr=False)
    nonce: bytes = Field(repr=False)
    algorithm: Literal["AES-128-GCM"] = "AES-128-GCM"
    nonce_mode: Literal["fixed", "random"] = "fixed"

    @field_validator("key")
    @classmethod
    def _check_key(cls, value: bytes) -> bytes:
        if len(value) != KEY_SIZE:
            raise ValueError(f"la clave debe tener {KEY_SIZE} bytes (recibidos {len(value)})")
        return value

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"el nonce debe tener {NONCE_SIZE} bytes (recibidos {len(value)})")
        return value
