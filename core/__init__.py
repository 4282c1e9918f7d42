# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de cifrado de texto del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "codec",
    "config",
    "crypto_sym",
    "errors",
    "logger",
    "models",
]
